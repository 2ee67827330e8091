# qcomposer/circuit.py
"""
Circuit model: an ordered list of moments (time steps), each holding
gate placements on a fixed-size qubit register.

This is the structure an editor builds and mutates; the simulator only
reads it. Gates inside one moment are applied in insertion order, and two
gates touching the same qubit in one moment are allowed.
"""
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple
import uuid

from .config import is_int, validate_qubits, clamp_qubits
from .errors import InvalidGateError
from .gates import GateKind


def _uid() -> str:
    return uuid.uuid4().hex[:7]

def _clamp(v: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, v))


@dataclass
class Gate:
    kind: GateKind
    targets: Tuple[int, ...]   # (q,) or (control, target) for CX
    id: str = field(default_factory=_uid)

    def check(self, n: int):
        """Raise InvalidGateError if this gate cannot act on an n-qubit register."""
        if len(self.targets) != self.kind.arity:
            raise InvalidGateError(
                f"{self.kind.name} takes {self.kind.arity} qubit(s), got {list(self.targets)}")
        for q in self.targets:
            if not is_int(q):
                raise InvalidGateError(f"{self.kind.name} qubit index must be an integer, got {q!r}")
            if not (0 <= q < n):
                raise InvalidGateError(f"{self.kind.name} qubit {q} out of range for {n} qubits")
        if self.kind is GateKind.CX and self.targets[0] == self.targets[1]:
            raise InvalidGateError(f"CX control and target are both qubit {self.targets[0]}")


@dataclass
class Moment:
    t: int
    gates: List[Gate] = field(default_factory=list)


@dataclass
class Circuit:
    n: int
    moments: List[Moment] = field(default_factory=list)

    def __post_init__(self):
        self.n = validate_qubits(self.n)

    @staticmethod
    def empty(n: int) -> "Circuit":
        return Circuit(n, [])

    def resized(self, n: int) -> "Circuit":
        """Changing the register size starts over with an empty circuit."""
        return Circuit.empty(clamp_qubits(n))

    # ---------------- editing ----------------

    def add_moment(self) -> Moment:
        m = Moment(t=len(self.moments))
        self.moments.append(m)
        return m

    def ensure_moment(self, t: int) -> Moment:
        if t < 0:
            raise IndexError(f"moment index must be non-negative, got {t}")
        while len(self.moments) <= t:
            self.add_moment()
        return self.moments[t]

    def add_gate(self, kind: GateKind, q0: int, t: Optional[int] = None,
                 q1: Optional[int] = None) -> Gate:
        """Place a gate in moment t (a new trailing moment when t is None)."""
        if kind is GateKind.CX:
            if q1 is None and is_int(q0):
                q1 = q0 ^ 1
            targets = (q0, q1)
        else:
            targets = (q0,)
        gate = Gate(kind, targets)
        gate.check(self.n)
        if t is None:
            t = len(self.moments)
        self.ensure_moment(t).gates.append(gate)
        return gate

    def remove_last(self):
        if not self.moments:
            return
        last = self.moments[-1]
        if last.gates:
            last.gates.pop()
        else:
            self.moments.pop()

    def find_gate(self, t: int, gate_id: str) -> Gate:
        for g in self.moments[t].gates:
            if g.id == gate_id:
                return g
        raise KeyError(f"no gate {gate_id!r} in moment {t}")

    def delete_gate(self, t: int, gate_id: str) -> Gate:
        gate = self.find_gate(t, gate_id)
        self.moments[t].gates.remove(gate)
        return gate

    def move_gate(self, gate_id: str, t_from: int, t_new: int, q_new: int) -> Gate:
        """
        Move a gate to moment t_new with its first qubit on q_new.

        t_new is clamped to [0, len(moments)]; the upper bound appends a new
        moment. A CX keeps its control→target offset; if the target would
        leave the register, the control is shifted back to fit.
        """
        gate = self.delete_gate(t_from, gate_id)
        t_new = _clamp(t_new, 0, len(self.moments))
        q_new = _clamp(q_new, 0, self.n - 1)

        if gate.kind is GateKind.CX:
            diff = gate.targets[1] - gate.targets[0]
            q_tgt = _clamp(q_new + diff, 0, self.n - 1)
            if q_tgt != q_new + diff:
                q_new = _clamp(q_tgt - diff, 0, self.n - 1)
            gate.targets = (q_new, q_new + diff)
        else:
            gate.targets = (q_new,)

        self.ensure_moment(t_new).gates.append(gate)
        return gate

    # builder shortcuts, one new moment per gate
    def h(self, k: int, t: Optional[int] = None): self.add_gate(GateKind.H, k, t); return self
    def x(self, k: int, t: Optional[int] = None): self.add_gate(GateKind.X, k, t); return self
    def cnot(self, c: int, tq: int, t: Optional[int] = None): self.add_gate(GateKind.CX, c, t, tq); return self
    cx = cnot
    def measure(self, k: int, t: Optional[int] = None): self.add_gate(GateKind.MEASURE, k, t); return self

    # ---------------- queries ----------------

    def iter_gates(self) -> Iterator[Gate]:
        """Gates in document order: moments in order, gates in insertion order."""
        for m in self.moments:
            yield from m.gates

    def validate(self) -> "Circuit":
        validate_qubits(self.n)
        for g in self.iter_gates():
            g.check(self.n)
        return self

    @property
    def num_gates(self) -> int:
        return sum(len(m.gates) for m in self.moments)

    @property
    def depth(self) -> int:
        return len(self.moments)
