"""Parameters of emulated prime fields."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["FieldParams", "CURVE25519_FP", "CURVE25519_FR"]


@dataclass(frozen=True)
class FieldParams:
    """Describes a field whose elements are stored as fixed-width limbs."""

    name: str
    modulus: int
    nb_limbs: int = 4
    bits_per_limb: int = 64
    is_prime: bool = True

    def __post_init__(self) -> None:
        if self.nb_limbs <= 0 or self.bits_per_limb <= 0:
            raise ValueError("limb count and limb width must be positive")
        if self.modulus < 2:
            raise ValueError("modulus must be at least 2")
        if self.modulus.bit_length() > self.capacity:
            raise ValueError(
                f"modulus of {self.name} does not fit in "
                f"{self.nb_limbs} limbs of {self.bits_per_limb} bits"
            )

    @property
    def capacity(self) -> int:
        """Total number of bits available in the limb representation."""
        return self.nb_limbs * self.bits_per_limb

    def reduce(self, value: int) -> int:
        """Return ``value`` reduced into the range ``[0, modulus)``."""
        return value % self.modulus


CURVE25519_FP = FieldParams(
    name="Curve25519Fp",
    modulus=57896044618658097711785492504343953926634992332820282019728792003956564819949,
)
"""Base field of Curve25519: 2^255 - 19."""

CURVE25519_FR = FieldParams(
    name="Curve25519Fr",
    modulus=7237005577332262213973186563042994240857116359379907606001950938285454250989,
)
"""Scalar field of Curve25519."""