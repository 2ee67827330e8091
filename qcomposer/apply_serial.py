# qcomposer/apply_serial.py
import numpy as np
from .state import State
from .complex_ops import add, mul
from .errors import InvalidGateError
from . import gates as G

def apply_single_qubit(state: State, U2: np.ndarray, k: int):
    """Apply 2x2 gate U2 to qubit k (little-endian: bit k)."""
    state.check_qubit(k)
    psi = state.psi
    assert U2.shape == (2,2)
    m00, m01, m10, m11 = U2[0,0], U2[0,1], U2[1,0], U2[1,1]
    N = psi.shape[0]
    step = 1 << k
    block = step << 1
    # iterate blocks of size 2^(k+1), update pairs (i0, i1=i0+step)
    for base in range(0, N, block):
        for off in range(step):
            i0 = base + off
            i1 = i0 + step
            a0 = psi[i0]
            a1 = psi[i1]
            psi[i0] = add(mul(m00, a0), mul(m01, a1))
            psi[i1] = add(mul(m10, a0), mul(m11, a1))

def apply_X(state: State, k: int):
    # bit flip is a pure permutation: swap each pair instead of multiplying by X
    state.check_qubit(k)
    psi = state.psi
    N = psi.shape[0]
    step = 1 << k
    for base in range(0, N, step << 1):
        for off in range(step):
            i0 = base + off
            i1 = i0 + step
            psi[i0], psi[i1] = psi[i1], psi[i0]

def apply_H(state: State, k: int):
    apply_single_qubit(state, G.H(dtype=state.dtype), k)

def apply_CNOT(state: State, control: int, target: int):
    state.check_qubit(control)
    state.check_qubit(target)
    if control == target:
        raise InvalidGateError("control and target must differ")
    psi = state.psi
    N = psi.shape[0]
    mc = 1 << control
    mt = 1 << target
    for i10 in range(N):
        # control=1, target=0 → swap with control=1, target=1
        if (i10 & mc) != 0 and (i10 & mt) == 0:
            i11 = i10 | mt
            psi[i10], psi[i11] = psi[i11], psi[i10]
