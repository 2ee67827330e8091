import numpy as np
import pytest
from qcomposer.config import (RunConfig, validate_qubits, validate_shots, validate_backend,
                              clamp_qubits, MAX_QUBITS, MAX_SHOTS)
from qcomposer.errors import ConfigurationError, QComposerError
from qcomposer.circuit import Circuit
from qcomposer.simulator import simulate

def test_limits():
    assert validate_qubits(1) == 1
    assert validate_qubits(np.int64(MAX_QUBITS)) == MAX_QUBITS
    assert validate_shots(MAX_SHOTS) == MAX_SHOTS
    assert clamp_qubits(-3) == 1 and clamp_qubits(40) == MAX_QUBITS

def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        validate_shots(0)
    assert issubclass(ConfigurationError, QComposerError)

def test_unknown_backend():
    with pytest.raises(ConfigurationError):
        validate_backend("cupy")
    with pytest.raises(ConfigurationError):
        simulate(Circuit.empty(1), backend="gpu")

@pytest.mark.parametrize("kwargs", [
    dict(qubits=0), dict(shots=0), dict(backend="x"), dict(num_threads=0),
])
def test_run_config_validate(kwargs):
    with pytest.raises(ConfigurationError):
        RunConfig(**kwargs).validate()

def test_run_config_defaults_are_valid():
    cfg = RunConfig().validate()
    assert (cfg.qubits, cfg.shots, cfg.backend) == (2, 512, "serial")
