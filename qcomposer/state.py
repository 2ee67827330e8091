# qcomposer/state.py
import numpy as np
from dataclasses import dataclass

from .complex_ops import norm2
from .config import is_int, validate_qubits
from .errors import InvalidGateError, NormalizationError

@dataclass
class State:
    n: int
    psi: np.ndarray  # shape (2**n,), bit k of the index is qubit k

    @staticmethod
    def zero(n: int, dtype=np.complex128) -> "State":
        n = validate_qubits(n)
        N = 1 << n
        psi = np.zeros(N, dtype=dtype)
        psi[0] = 1.0 + 0.0j
        return State(n=n, psi=psi)

    @property
    def dtype(self):
        return self.psi.dtype

    def check_qubit(self, k: int) -> int:
        if not is_int(k):
            raise InvalidGateError(f"qubit index must be an integer, got {k!r}")
        if not (0 <= k < self.n):
            raise InvalidGateError(f"qubit {k} out of range for {self.n}-qubit state")
        return k

    def norm2(self) -> float:
        return float(np.vdot(self.psi, self.psi).real)

    def check_normalized(self, tol=1e-6):
        n2 = self.norm2()
        if not (abs(1.0 - n2) <= tol):
            raise NormalizationError(f"Normalization failed: ||psi||^2={n2}")

    def probabilities(self) -> np.ndarray:
        """Squared magnitude of every amplitude, as float64."""
        return np.asarray(norm2(self.psi), dtype=np.float64)

    def as_numpy(self) -> np.ndarray:
        return self.psi
