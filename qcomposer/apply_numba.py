# qcomposer/apply_numba.py
import numpy as np
from numba import config, njit, prange, set_num_threads, get_num_threads
from .state import State
from .errors import InvalidGateError
from . import gates as G

# ---------- low-level kernels (Numba JIT) ----------

@njit(parallel=True, fastmath=True)
def _single_qubit_kernel(psi, U2, k):
    N = psi.shape[0]
    step = 1 << k
    block = step << 1
    nblocks = N // block
    for b in prange(nblocks):
        base = b * block
        for off in range(step):
            i0 = base + off
            i1 = i0 + step
            a0 = psi[i0]
            a1 = psi[i1]
            psi[i0] = U2[0,0]*a0 + U2[0,1]*a1
            psi[i1] = U2[1,0]*a0 + U2[1,1]*a1

@njit(parallel=True)
def _swap_pairs_kernel(psi, k):
    N = psi.shape[0]
    step = 1 << k
    block = step << 1
    nblocks = N // block
    for b in prange(nblocks):
        base = b * block
        for off in range(step):
            i0 = base + off
            i1 = i0 + step
            a0 = psi[i0]
            psi[i0] = psi[i1]
            psi[i1] = a0

@njit(parallel=True)
def _cnot_kernel(psi, control, target):
    N = psi.shape[0]
    mc = 1 << control
    mt = 1 << target
    for base in prange(N):
        if (base & mc) == 0 and (base & mt) == 0:
            i10 = base | mc          # control=1, target=0
            i11 = i10 | mt           # control=1, target=1
            a10 = psi[i10]
            psi[i10] = psi[i11]
            psi[i11] = a10

# ---------- user-facing apply helpers ----------

def set_threads(n: int):
    # numba refuses counts above the pool it was started with
    set_num_threads(max(1, min(int(n), config.NUMBA_NUM_THREADS)))

def get_threads() -> int:
    return get_num_threads()

def apply_single_qubit(state: State, U2: np.ndarray, k: int):
    state.check_qubit(k)
    _single_qubit_kernel(state.psi, U2.astype(state.dtype), k)

def apply_H(state: State, k: int):
    apply_single_qubit(state, G.H(dtype=state.dtype), k)

def apply_X(state: State, k: int):
    state.check_qubit(k)
    _swap_pairs_kernel(state.psi, k)

def apply_CNOT(state: State, control: int, target: int):
    state.check_qubit(control)
    state.check_qubit(target)
    if control == target:
        raise InvalidGateError("control and target must differ")
    _cnot_kernel(state.psi, control, target)
