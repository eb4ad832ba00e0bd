"""Parameters of curves in short Weierstrass form."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["WeierstrassParams", "wei25519_params"]


@dataclass(frozen=True)
class WeierstrassParams:
    """Curve y^2 = x^3 + a*x + b with base point (gx, gy)."""

    a: int
    b: int
    gx: int
    gy: int


def wei25519_params() -> WeierstrassParams:
    """Parameters of Wei25519, the Weierstrass form of Curve25519.

    Use with the Curve25519 base and scalar fields.
    """
    return WeierstrassParams(
        a=19298681539552699237261830834781317975544997444273427339909597334573241639236,
        b=5575174666981890890764528907825714081824110372790101231529440083956729358436,
        gx=19298681539552699237261830834781317975544997444273427339909597334652188435546,
        gy=14781619447589544791020593568409986887264606134616475288964881837755586237401,
    )