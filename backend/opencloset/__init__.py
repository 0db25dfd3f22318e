"""View helpers and coupon pipeline for the rental service."""

__version__ = "0.1.0"
