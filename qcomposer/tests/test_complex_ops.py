import numpy as np
from qcomposer.complex_ops import c, add, mul, norm2

def test_default_is_zero():
    assert c() == 0j

def test_add_componentwise():
    assert add(c(1, 2), c(-3, 0.5)) == c(-2, 2.5)

def test_mul_matches_builtin():
    a, b = c(1.5, -2.0), c(0.25, 3.0)
    assert mul(a, b) == a * b

def test_mul_accepts_numpy_scalars():
    a = np.complex128(2 + 1j)
    assert mul(a, c(0, 1)) == c(-1, 2)

def test_norm2_scalar_and_array():
    assert norm2(c(3, 4)) == 25.0
    v = np.array([1j, (1 + 1j) / np.sqrt(2)])
    assert np.allclose(norm2(v), [1.0, 1.0])
