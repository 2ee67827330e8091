# qcomposer/config.py
from dataclasses import dataclass
from typing import Optional
import numbers

from .errors import ConfigurationError

MIN_QUBITS = 1
MAX_QUBITS = 12         # 4096 amplitudes
DEFAULT_QUBITS = 2

MAX_SHOTS = 100_000
DEFAULT_SHOTS = 512

BACKENDS = ("serial", "numba")


def is_int(v) -> bool:
    return isinstance(v, numbers.Integral) and not isinstance(v, bool)

def validate_qubits(n) -> int:
    if not is_int(n):
        raise ConfigurationError(f"qubit count must be an integer, got {n!r}")
    if not (MIN_QUBITS <= n <= MAX_QUBITS):
        raise ConfigurationError(f"qubit count must be in [{MIN_QUBITS}, {MAX_QUBITS}], got {n}")
    return int(n)

def clamp_qubits(n: int) -> int:
    """Clamp a requested register size the way the editor does (never raises on range)."""
    return max(MIN_QUBITS, min(MAX_QUBITS, int(n)))

def validate_shots(shots) -> int:
    if not is_int(shots):
        raise ConfigurationError(f"shot count must be an integer, got {shots!r}")
    if not (1 <= shots <= MAX_SHOTS):
        raise ConfigurationError(f"shot count must be in [1, {MAX_SHOTS}], got {shots}")
    return int(shots)

def validate_backend(backend: str) -> str:
    if backend not in BACKENDS:
        raise ConfigurationError(f"unknown backend {backend!r}; choose from {', '.join(BACKENDS)}")
    return backend


@dataclass
class RunConfig:
    qubits: int = DEFAULT_QUBITS
    shots: int = DEFAULT_SHOTS
    backend: str = "serial"
    seed: Optional[int] = None
    num_threads: Optional[int] = None

    def validate(self) -> "RunConfig":
        validate_qubits(self.qubits)
        validate_shots(self.shots)
        validate_backend(self.backend)
        if self.num_threads is not None and (not is_int(self.num_threads) or self.num_threads < 1):
            raise ConfigurationError(f"num_threads must be a positive integer, got {self.num_threads!r}")
        return self
