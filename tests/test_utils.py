import numpy as np
import pytest

from knowhere.utils import SEED, hash_binary_vec, hash_vec, round_down


def test_hash_of_empty_vector_is_seed():
    assert hash_vec([]) == SEED
    assert hash_binary_vec(b"", 0) == SEED
    assert SEED == 0xC70F6907


def test_hash_vec_is_deterministic_and_accepts_arrays():
    data = [0.5, -1.25, 3.0]
    assert hash_vec(data) == hash_vec(np.array(data, dtype=np.float32))
    assert hash_vec(data) == hash_vec(np.array(data, dtype=np.float64))


def test_hash_vec_distinguishes_vectors():
    assert hash_vec([1.0, 2.0]) != hash_vec([2.0, 1.0])
    assert hash_vec([0.0]) != hash_vec([-0.0])


def test_hash_vec_fits_64_bits():
    h = hash_vec(np.linspace(-1e30, 1e30, 50, dtype=np.float32))
    assert 0 <= h < 2**64


def test_hash_binary_vec_ignores_bytes_past_dim():
    assert hash_binary_vec(b"\x01\x02\xff", 16) == hash_binary_vec(b"\x01\x02", 16)
    assert hash_binary_vec(b"\x01\x02", 9) == hash_binary_vec(b"\x01\x02\x03", 16)
    assert hash_binary_vec(b"\x01\x02", 16) != hash_binary_vec(b"\x01\x03", 16)


def test_hash_binary_vec_too_short():
    with pytest.raises(ValueError):
        hash_binary_vec(b"\x01", 9)


def test_round_down():
    assert round_down(17, 5) == 15
    assert round_down(20, 5) == 20
    assert round_down(4, 8) == 0


def test_round_down_truncates_towards_zero():
    assert round_down(-7, 2) == -6
    r = round_down(-123, 10)
    assert r % 10 == 0 and abs(r) <= 123


def test_round_down_zero_align():
    with pytest.raises(ZeroDivisionError):
        round_down(5, 0)