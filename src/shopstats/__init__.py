"""
shopstats - Analytical reports over a small in-memory shop.

Users place orders for physical and virtual products; the reports find
the most expensive and most popular products, buyer ages, per-product
buyers, sorted listings and per-order shipping weight.
"""

__version__ = "1.0.0"
