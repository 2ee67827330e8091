import pytest
from qcomposer.cli import main, parse_moment, build_circuit
from qcomposer.gates import GateKind
from qcomposer.errors import InvalidGateError

def test_parse_moment():
    assert parse_moment("H:0|CX:1,2") == [(GateKind.H, [0]), (GateKind.CX, [1, 2])]
    with pytest.raises(ValueError):
        parse_moment("H")

def test_build_circuit_one_moment_per_argument():
    c = build_circuit(3, ["H:0|H:1", "CX:0,2", "M:2"])
    assert [len(m.gates) for m in c.moments] == [2, 1, 1]

def test_build_circuit_arity_checked():
    with pytest.raises(InvalidGateError):
        build_circuit(2, ["CX:0"])

def test_run_bell(capsys):
    assert main(["run", "--qubits", "2", "--shots", "200", "--seed", "1", "H:0", "CX:0,1"]) == 0
    out = capsys.readouterr().out
    assert "   00  0.500000" in out
    assert "   11  0.500000" in out
    assert "       01" not in out

def test_run_reports_bad_input(capsys):
    assert main(["run", "--qubits", "2", "X:5"]) == 2
    assert "[error]" in capsys.readouterr().err
    assert main(["run", "--shots", "0"]) == 2

def test_run_lists_gates_by_label(capsys):
    assert main(["run", "--qubits", "2", "--seed", "0", "H:0|M:1", "CX:0,1"]) == 0
    out = capsys.readouterr().out
    assert "t0: H q0 | M q1" in out
    assert "t1: ●⊕ q0→q1" in out

def test_run_unknown_gate_is_reported(capsys):
    assert main(["run", "T:0"]) == 2
    assert "Unknown gate" in capsys.readouterr().err

def test_run_reports_missing_backend(monkeypatch, capsys):
    import qcomposer.cli as cli
    def unavailable(*args, **kwargs):
        raise RuntimeError("Numba backend not available.")
    monkeypatch.setattr(cli, "simulate", unavailable)
    assert main(["run", "--backend", "numba", "H:0"]) == 2
    assert "Numba backend not available" in capsys.readouterr().err
