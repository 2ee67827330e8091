import time
import numpy as np
import pytest
from qcomposer.bench import random_circuit, time_run
from qcomposer.simulator import simulate

pytest.importorskip("numba")

def test_bench_runs_and_times():
    c = random_circuit(10, 20, seed=1)
    simulate(c, backend="numba")  # JIT warmup

    t0 = time.perf_counter()
    s1 = simulate(c, backend="serial")
    t1 = time.perf_counter() - t0

    t0 = time.perf_counter()
    s2 = simulate(c, backend="numba")
    t2 = time.perf_counter() - t0

    assert np.allclose(s1, s2, atol=1e-9, rtol=0)
    assert t1 > 0 and t2 > 0
    # machines vary; only guard against the compiled path being far slower
    assert t2 < 5.0 * t1

def test_random_circuit_shape():
    c = random_circuit(5, 6, seed=3)
    assert c.depth == 6
    # even layers: one gate per qubit; odd layers: one CX per neighbour pair
    assert c.num_gates == 3 * 5 + 3 * 2
    assert time_run(c, "serial") > 0
