"""Field elements stored as little-endian limbs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from .fields import FieldParams

__all__ = ["Element", "value_of", "to_big_int"]


@dataclass(frozen=True)
class Element:
    """An emulated field element: limbs are least significant first."""

    params: FieldParams
    limbs: tuple

    def __init__(self, params: FieldParams, limbs: Iterable[int]) -> None:
        object.__setattr__(self, "params", params)
        object.__setattr__(self, "limbs", tuple(int(limb) for limb in limbs))

    def __int__(self) -> int:
        return to_big_int(self)


def _parse(value: Union[int, str]) -> int:
    if isinstance(value, bool):
        raise TypeError("booleans are not field values")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip().replace("_", "")
        body = text.lstrip("+-").lower()
        base = 0 if body.startswith(("0x", "0b", "0o")) else 10
        return int(text, base)
    raise TypeError(f"cannot build a field element from {type(value).__name__}")


def value_of(params: FieldParams, value: Union[int, str]) -> Element:
    """Build an element from an integer or a numeric string.

    Values above the modulus or below zero are reduced; the modulus itself
    is kept as it is.
    """
    number = _parse(value)
    if number < 0 or number > params.modulus:
        number = params.reduce(number)
    if number.bit_length() > params.capacity:
        raise ValueError(f"value does not fit in the limbs of {params.name}")
    bits = params.bits_per_limb
    mask = (1 << bits) - 1
    return Element(params, ((number >> (i * bits)) & mask for i in range(params.nb_limbs)))


def to_big_int(element: Element) -> int:
    """Recombine the limbs of ``element`` into one integer."""
    bits = element.params.bits_per_limb
    return sum(limb << (index * bits) for index, limb in enumerate(element.limbs))