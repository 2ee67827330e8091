# qcomposer/cli.py
import argparse, logging, sys

from .circuit import Circuit
from .config import RunConfig, DEFAULT_QUBITS, DEFAULT_SHOTS, BACKENDS
from .errors import InvalidGateError
from .gates import GateKind
from .sampler import sample_counts, sorted_counts
from .simulator import simulate, basis_labels

def parse_moment(text: str):
    """'H:0|CX:1,2' → [(GateKind.H, [0]), (GateKind.CX, [1, 2])]"""
    gates = []
    for part in text.split("|"):
        name, sep, qubits = part.partition(":")
        if not sep or not qubits:
            raise ValueError(f"bad gate {part!r}; expected KIND:q or CX:control,target")
        gates.append((GateKind.parse(name), [int(q) for q in qubits.split(",")]))
    return gates

def build_circuit(n: int, moments) -> Circuit:
    circ = Circuit.empty(n)
    for t, spec in enumerate(moments):
        circ.ensure_moment(t)
        for kind, qs in parse_moment(spec):
            if len(qs) != kind.arity:
                raise InvalidGateError(f"{kind.name} takes {kind.arity} qubit(s), got {qs}")
            circ.add_gate(kind, qs[0], t=t, q1=qs[1] if len(qs) > 1 else None)
    return circ

def format_circuit(circ):
    """One line per moment: t0: H q0 | ●⊕ q0→q1"""
    lines = []
    for m in circ.moments:
        cells = [f"{g.kind.label} " + "→".join(f"q{q}" for q in g.targets) for g in m.gates]
        lines.append(f"t{m.t}: " + (" | ".join(cells) if cells else "-"))
    return "\n".join(lines)

def format_probs(probs, n):
    lines = ["state  prob"]
    for label, p in zip(basis_labels(n), probs):
        lines.append(f"{label:>{max(5, n)}}  {p:.6f}")
    return "\n".join(lines)

def format_counts(counts):
    lines = ["bitstring  counts"]
    for key, v in sorted_counts(counts):
        lines.append(f"{key:>9}  {v:>6}")
    return "\n".join(lines)

def main(argv=None):
    ap = argparse.ArgumentParser(prog="qcomposer")
    ap.add_argument("-v", "--verbose", action="store_true")
    sub = ap.add_subparsers(dest="cmd", required=True)

    ap_run = sub.add_parser("run", help="Simulate a circuit and sample measurement shots")
    ap_run.add_argument("moments", nargs="*", help="one moment per argument, e.g. H:0 CX:0,1 'X:0|X:1'")
    ap_run.add_argument("--qubits", type=int, default=DEFAULT_QUBITS)
    ap_run.add_argument("--shots", type=int, default=DEFAULT_SHOTS)
    ap_run.add_argument("--seed", type=int, default=None)
    ap_run.add_argument("--backend", default="serial", choices=BACKENDS)
    ap_run.add_argument("--threads", type=int, default=None)

    args = ap.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.cmd == "run":
        cfg = RunConfig(qubits=args.qubits, shots=args.shots, backend=args.backend,
                        seed=args.seed, num_threads=args.threads)
        try:
            cfg.validate()
            circ = build_circuit(cfg.qubits, args.moments)
            probs = simulate(circ, backend=cfg.backend, num_threads=cfg.num_threads)
            counts = sample_counts(probs, cfg.shots, seed=cfg.seed)
        except (ValueError, RuntimeError) as e:
            print(f"[error] {e}", file=sys.stderr)
            return 2
        print(format_circuit(circ))
        print()
        print(format_probs(probs, circ.n))
        print()
        print(format_counts(counts))
    return 0

if __name__ == "__main__":
    sys.exit(main())
