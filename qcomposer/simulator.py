# qcomposer/simulator.py
import logging
import numpy as np

from .circuit import Circuit
from .config import validate_backend
from .gates import GateKind
from .state import State

logger = logging.getLogger(__name__)


def _kernels(backend: str, num_threads=None):
    validate_backend(backend)
    if backend == "serial":
        from . import apply_serial as kernels
    else:
        try:
            from . import apply_numba as kernels
        except ImportError as e:
            raise RuntimeError("Numba backend not available. Did you `pip install numba`?") from e
        if num_threads is not None:
            kernels.set_threads(int(num_threads))
    return kernels


def _replay(circuit: Circuit, backend: str = "serial", dtype=np.complex128, num_threads=None) -> State:
    circuit.validate()
    kernels = _kernels(backend, num_threads)
    st = State.zero(circuit.n, dtype=dtype)

    for gate in circuit.iter_gates():
        kind, q = gate.kind, gate.targets
        if kind is GateKind.H:
            kernels.apply_H(st, q[0])
        elif kind is GateKind.X:
            kernels.apply_X(st, q[0])
        elif kind is GateKind.CX:
            kernels.apply_CNOT(st, q[0], q[1])
        elif kind is GateKind.MEASURE:
            pass  # no collapse: outputs describe the final pre-measurement state
        else:
            raise NotImplementedError(f"No kernel for gate {kind!r}")
    return st


def simulate(circuit: Circuit, backend: str = "serial", dtype=np.complex128, check_norm=True,
             num_threads=None, check_norm_tol=1e-6) -> np.ndarray:
    """
    Run circuit from |0...0> and return the basis-state probabilities.

    Index i of the result is the basis state whose bit k is qubit k. The
    circuit is only read; every call works on its own fresh statevector.
    """
    st = _replay(circuit, backend=backend, dtype=dtype, num_threads=num_threads)
    if check_norm:
        st.check_normalized(tol=check_norm_tol)
    probs = st.probabilities()
    logger.debug("simulated %d gates on %d qubits (%s)", circuit.num_gates, circuit.n, backend)
    return probs


def basis_labels(n: int):
    """Bitstring label of every basis index, qubit n-1 first."""
    return [format(i, f"0{n}b") for i in range(1 << n)]
