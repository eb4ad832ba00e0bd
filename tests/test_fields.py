import pytest

from ecipkit.fields import CURVE25519_FP, CURVE25519_FR, FieldParams

FP_DECIMAL = "57896044618658097711785492504343953926634992332820282019728792003956564819949"
FP_HEX = "0x7fffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffed"
FR_DECIMAL = "7237005577332262213973186563042994240857116359379907606001950938285454250989"
FR_HEX = "0x1000000000000000000000000000000014def9dea2f79cd65812631a5cf5d3ed"


def test_curve25519_fp_modulus_matches_documented_values():
    modulus = int(FP_DECIMAL)
    assert modulus == int(FP_HEX, 16)
    assert CURVE25519_FP.reduce(modulus) == 0
    assert CURVE25519_FP.reduce(modulus - 1) == modulus - 1
    assert CURVE25519_FP.reduce(modulus + 1) == 1
    assert CURVE25519_FP.modulus == modulus


def test_curve25519_fr_modulus_matches_documented_values():
    modulus = int(FR_DECIMAL)
    assert modulus == int(FR_HEX, 16)
    assert CURVE25519_FR.reduce(modulus) == 0
    assert CURVE25519_FR.reduce(modulus - 1) == modulus - 1
    assert CURVE25519_FR.reduce(modulus + 1) == 1
    assert CURVE25519_FR.modulus == modulus


@pytest.mark.parametrize("field", [CURVE25519_FP, CURVE25519_FR])
def test_limb_layout(field):
    assert field.nb_limbs == 4
    assert field.bits_per_limb == 64
    assert field.is_prime is True
    assert field.capacity == field.nb_limbs * field.bits_per_limb


@pytest.mark.parametrize("field", [CURVE25519_FP, CURVE25519_FR])
def test_reduce_wraps_modulus(field):
    assert field.reduce(field.modulus) == field.reduce(0)
    assert field.reduce(field.modulus + 5) == 5
    assert field.reduce(-1) == field.modulus - 1


@pytest.mark.parametrize("field", [CURVE25519_FP, CURVE25519_FR])
def test_reduce_keeps_values_in_range(field):
    for value in (field.modulus - 1, 3 * field.modulus + 7, -field.modulus * 2 - 3):
        reduced = field.reduce(value)
        assert 0 <= reduced < field.modulus
        assert (reduced - value) % field.modulus == 0


def test_modulus_too_wide_is_rejected():
    with pytest.raises(ValueError):
        FieldParams(name="wide", modulus=1 << 256, nb_limbs=4, bits_per_limb=64)


def test_degenerate_modulus_is_rejected():
    with pytest.raises(ValueError):
        FieldParams(name="tiny", modulus=1)


def test_non_positive_limbs_rejected():
    with pytest.raises(ValueError):
        FieldParams(name="nolimbs", modulus=7, nb_limbs=0)