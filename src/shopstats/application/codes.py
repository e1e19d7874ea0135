"""
Code Registry - Tracks which virtual product codes have been used.

The registry is an ordinary object owned by the caller; there is no
global instance. It is not safe for concurrent use: callers sharing
one registry between threads must serialize access themselves.
"""

import logging
from typing import Optional

from ..core.domain.entities import Product, VirtualProduct
from ..core.domain.events import CodeMarkedUsed, EventBus
from ..core.exceptions import InvalidArgumentError


class CodeRegistry:
    """
    Set of redemption codes marked as used.

    Codes are arbitrary strings; the registry does not check that a code
    belongs to any product. There is no way to un-use a code.
    """

    def __init__(self, event_bus: Optional[EventBus] = None):
        """
        Initialize an empty registry.

        Args:
            event_bus: Optional event bus notified when a code is first used
        """
        self._used: set[str] = set()
        self.event_bus = event_bus
        self.logger = logging.getLogger("CodeRegistry")

    def mark_used(self, code: str) -> None:
        """Mark a code as used. Marking the same code again has no effect."""
        if code in self._used:
            self.logger.debug(f"Code already used: {code}")
            return

        self._used.add(code)
        self.logger.debug(f"Marked code as used: {code}")

        if self.event_bus is not None:
            self.event_bus.publish(CodeMarkedUsed(code=code))

    def is_used(self, code: str) -> bool:
        """Check whether a code was previously marked as used."""
        return code in self._used

    def redeem(self, product: Product) -> None:
        """Mark the code of a virtual product as used."""
        if not isinstance(product, VirtualProduct):
            raise InvalidArgumentError(
                f"Only virtual products carry a code, got {product.kind.value} product '{product.name}'"
            )
        self.mark_used(product.code)

    @property
    def used_codes(self) -> frozenset[str]:
        """Snapshot of all used codes."""
        return frozenset(self._used)

    def __contains__(self, code: str) -> bool:
        return self.is_used(code)

    def __len__(self) -> int:
        return len(self._used)
