import numpy as np
import pytest
from qcomposer.circuit import Circuit
from qcomposer.simulator import simulate, _replay
from qcomposer.state import State
from qcomposer import gates as G

pytest.importorskip("numba")
from qcomposer import apply_numba, apply_serial

def random_circuit(rng, n, depth):
    c = Circuit.empty(n)
    for _ in range(depth):
        g = rng.integers(0, 3)  # 0:H,1:X,2:CNOT
        if g == 0:
            c.h(int(rng.integers(0, n)))
        elif g == 1:
            c.x(int(rng.integers(0, n)))
        else:
            c1 = int(rng.integers(0, n))
            c2 = c1
            while c2 == c1:
                c2 = int(rng.integers(0, n))
            c.cnot(c1, c2)
    return c

def test_serial_vs_numba_small():
    # 3-qubit mixed circuit
    c = Circuit.empty(3).h(0).x(1).cnot(1,2).h(2).cnot(0,1).x(2)
    s = _replay(c, backend="serial")
    t = _replay(c, backend="numba", num_threads=2)
    assert np.allclose(s.as_numpy(), t.as_numpy(), atol=1e-9, rtol=0)

def test_random_circuits_match():
    rng = np.random.default_rng(123)
    n = 4
    for depth in (5, 10, 20):
        c = random_circuit(rng, n, depth)
        s = simulate(c, backend="serial")
        t = simulate(c, backend="numba")
        assert np.allclose(s, t, atol=1e-9, rtol=0)

@pytest.mark.parametrize("control,target", [(0, 2), (2, 0), (1, 3), (3, 1)])
def test_cnot_matches_4x4_reference(control, target):
    # reference: dense 4x4 CNOT on the (control, target) subspace of a random state
    rng = np.random.default_rng(control * 10 + target)
    psi = rng.normal(size=16) + 1j * rng.normal(size=16)
    psi /= np.linalg.norm(psi)
    U4 = G.CNOT()
    expect = psi.copy()
    for i in range(16):
        if (i >> control) & 1 == 0 and (i >> target) & 1 == 0:
            quad = [i, i | 1 << target, i | 1 << control, i | 1 << control | 1 << target]
            expect[quad] = U4 @ psi[quad]
    for kernels in (apply_serial, apply_numba):
        st = State(4, psi.copy())
        kernels.apply_CNOT(st, control, target)
        assert np.allclose(st.psi, expect, atol=1e-12)
