"""
Domain Entities - Users, products and orders.

Entities are immutable after construction and compare by identity:
two users with the same name and age are still two different users.
This makes every entity usable as a mapping key without merging
look-alike records.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional

from ..exceptions import InvalidArgumentError


class ProductKind(Enum):
    """The closed set of product variants."""

    REAL = "real"
    VIRTUAL = "virtual"


def _require_non_negative(field_name: str, value) -> None:
    if value < 0:
        raise InvalidArgumentError(f"{field_name} must be non-negative, got {value}")


@dataclass(frozen=True, eq=False)
class User:
    """A customer placing orders."""

    name: str
    age: int

    def __post_init__(self):
        _require_non_negative("age", self.age)

    def __str__(self) -> str:
        return f"User{{name='{self.name}', age={self.age}}}"


@dataclass(frozen=True, eq=False)
class Product(ABC):
    """
    Common capability of every product: a name and a price.

    Only RealProduct and VirtualProduct implement it.
    """

    name: str
    price: float

    def __post_init__(self):
        _require_non_negative("price", self.price)

    @property
    @abstractmethod
    def kind(self) -> ProductKind:
        """Variant of this product."""
        ...


@dataclass(frozen=True, eq=False)
class RealProduct(Product):
    """A physical product with size and shipping weight."""

    size: int = 0
    weight: int = 0

    def __post_init__(self):
        super().__post_init__()
        _require_non_negative("weight", self.weight)

    @property
    def kind(self) -> ProductKind:
        return ProductKind.REAL

    def __str__(self) -> str:
        return (
            f"RealProduct{{size={self.size}, weight={self.weight}, "
            f"name='{self.name}', price={self.price}}}"
        )


@dataclass(frozen=True, eq=False)
class VirtualProduct(Product):
    """A digital product redeemed with a code before its expiration date."""

    code: str = ""
    expiration_date: Optional[date] = None

    def __post_init__(self):
        super().__post_init__()
        if not self.code:
            raise InvalidArgumentError(f"Virtual product '{self.name}' needs a code")
        if self.expiration_date is None:
            raise InvalidArgumentError(f"Virtual product '{self.name}' needs an expiration date")

    @property
    def kind(self) -> ProductKind:
        return ProductKind.VIRTUAL

    def __str__(self) -> str:
        return (
            f"VirtualProduct{{code='{self.code}', expirationDate={self.expiration_date}, "
            f"name='{self.name}', price={self.price}}}"
        )


@dataclass(frozen=True, eq=False)
class Order:
    """
    A purchase linking one user to a list of product references.

    Products are shared across orders and may repeat within one order.
    """

    user: User
    products: tuple[Product, ...] = ()

    def contains(self, product: Product) -> bool:
        """Check whether this exact product instance is part of the order."""
        return any(item is product for item in self.products)

    def __str__(self) -> str:
        return f"Order{{user={self.user}, products={len(self.products)}}}"


@dataclass
class ShopData:
    """The in-memory collections the reports run over."""

    users: list[User] = field(default_factory=list)
    products: list[Product] = field(default_factory=list)
    orders: list[Order] = field(default_factory=list)

    def find_product(self, name: str) -> Optional[Product]:
        """Find the first catalog product with the given name."""
        for product in self.products:
            if product.name == name:
                return product
        return None
