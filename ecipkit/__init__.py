"""Curve25519 field elements as limbs and twisted Edwards to short Weierstrass conversion."""

__version__ = "0.1.0"
__all__ = ["element", "fields", "shortweierstrass", "twistededwards"]