# qcomposer/complex_ops.py
"""
Minimal complex arithmetic on (real, imag) pairs.

Values are plain Python / NumPy complex scalars. norm2 also works
element-wise on NumPy arrays.
"""

def c(re: float = 0.0, im: float = 0.0) -> complex:
    return complex(re, im)

def add(a, b) -> complex:
    return c(a.real + b.real, a.imag + b.imag)

def mul(a, b) -> complex:
    return c(a.real * b.real - a.imag * b.imag,
             a.real * b.imag + a.imag * b.real)

def norm2(a):
    """|a|^2 = re^2 + im^2"""
    return a.real * a.real + a.imag * a.imag
