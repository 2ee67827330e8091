"""
qcomposer - statevector core for a small H / X / CX circuit composer.

    >>> from qcomposer import Circuit, simulate, sample_counts
    >>> probs = simulate(Circuit.empty(2).h(0).cx(0, 1))
    >>> sample_counts(probs, 1000, seed=1)   # keys "00" and "11" only
"""
from .circuit import Circuit, Gate, Moment
from .config import MAX_QUBITS, MAX_SHOTS, RunConfig
from .errors import QComposerError, ConfigurationError, InvalidGateError, NormalizationError
from .gates import GateKind
from .sampler import sample_counts, sorted_counts, bitstring
from .simulator import simulate, basis_labels
from .state import State

__version__ = "0.1.0"
__all__ = [
    "Circuit", "Gate", "Moment", "GateKind", "State",
    "simulate", "basis_labels",
    "sample_counts", "sorted_counts", "bitstring",
    "RunConfig", "MAX_QUBITS", "MAX_SHOTS",
    "QComposerError", "ConfigurationError", "InvalidGateError", "NormalizationError",
]
