# qcomposer/bench.py
import argparse, csv, os, socket, subprocess, time, platform
from datetime import datetime
import numpy as np

from .circuit import Circuit
from .config import BACKENDS, MAX_QUBITS
from .gates import GateKind
from .simulator import simulate

HEADER = ["qubits","depth","backend","threads","gates","wall_ms","hostname","commit","timestamp"]

def backend_dir(data_dir, backend):
    path = os.path.join(data_dir, backend)
    os.makedirs(path, exist_ok=True)
    return path

def meta_row():
    commit = ""
    try:
        commit = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"],
                                         stderr=subprocess.DEVNULL).decode().strip()
    except (OSError, subprocess.CalledProcessError):
        pass
    return {
        "hostname": socket.gethostname(),
        "commit": commit,
        "timestamp": datetime.now().isoformat(timespec="seconds"),
        "python": platform.python_version(),
    }

def new_csv(path):
    """Create/overwrite CSV with header."""
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w", newline="") as f:
        csv.DictWriter(f, fieldnames=HEADER).writeheader()

def write_row(path, row):
    with open(path, "a", newline="") as f:
        csv.DictWriter(f, fieldnames=HEADER, extrasaction="ignore").writerow(row)

# ---------------------------------------------------------------------

def random_circuit(n, depth, seed=0):
    """Alternating layers: one moment of H/X on every qubit, one moment of CX on neighbour pairs."""
    rng = np.random.default_rng(seed)
    c = Circuit.empty(n)
    for layer in range(depth):
        if layer % 2 == 0:
            for k in range(n):
                kind = GateKind.H if rng.integers(0, 2) == 0 else GateKind.X
                c.add_gate(kind, k, t=layer)
        else:
            c.ensure_moment(layer)
            for k in range(0, n-1, 2):
                if rng.integers(0, 2) == 0:
                    c.add_gate(GateKind.CX, k, t=layer, q1=k+1)
                else:
                    c.add_gate(GateKind.CX, k+1, t=layer, q1=k)
    return c

def time_run(circ, backend, threads=None):
    t0 = time.perf_counter()
    simulate(circ, backend=backend, num_threads=threads, check_norm=False)
    return (time.perf_counter() - t0) * 1e3  # ms

def warmup(circ, backend):
    # one run to JIT-compile the numba kernels before timing
    simulate(circ, backend=backend, check_norm=False)

def pool_threads(backend):
    if backend == "serial":
        return 0
    from .apply_numba import get_threads
    return get_threads()

def _record(out_path, circ, backend, threads, wall):
    m = meta_row()
    write_row(out_path, {
        "qubits": circ.n, "depth": circ.depth, "backend": backend, "threads": threads,
        "gates": circ.num_gates, "wall_ms": f"{wall:.3f}", **m,
    })

# ---------------------------------------------------------------------
# individual experiments

def bench_qubits(ns, depth, backend, out_path):
    print(f"[run] Qubits scaling → {out_path}")
    new_csv(out_path)
    warmup(random_circuit(min(ns), depth, seed=42), backend)
    for n in ns:
        circ = random_circuit(n, depth, seed=42)
        wall = time_run(circ, backend)
        _record(out_path, circ, backend, pool_threads(backend), wall)
        print(f"  n={n}  wall={wall:.2f} ms")
    print("✓ done.\n")

def bench_depth(n, depths, backend, out_path):
    print(f"[run] Depth scaling → {out_path}")
    new_csv(out_path)
    warmup(random_circuit(n, min(depths), seed=7), backend)
    for d in depths:
        circ = random_circuit(n, d, seed=7)
        wall = time_run(circ, backend)
        _record(out_path, circ, backend, pool_threads(backend), wall)
        print(f"  depth={d}  wall={wall:.2f} ms")
    print("✓ done.\n")

def bench_threads(n, depth, threads_list, out_path):
    print(f"[run] Thread scaling → {out_path}")
    new_csv(out_path)
    from .apply_numba import set_threads, get_threads
    circ = random_circuit(n, depth, seed=123)
    warmup(circ, "numba")
    t1 = time_run(circ, "numba", threads=1)
    print(f"  T1={t1:.1f} ms")
    for t in threads_list:
        set_threads(t)
        tt = get_threads()
        if tt != t:
            print(f"  requested t={t}; pool gives t={tt}")
        wall = time_run(circ, "numba", threads=tt)
        speedup = t1 / wall if wall > 0 else float("nan")
        _record(out_path, circ, "numba", tt, wall)
        print(f"  t={tt}  wall={wall:.2f} ms  speedup={speedup:.2f}×")
    print("✓ done.\n")

# ---------------------------------------------------------------------
def _ints(text):
    return [int(x) for x in text.split(",")]

def build_parser():
    p = argparse.ArgumentParser(prog="qcomposer-bench",
                                description="simulate() benchmarks → <data-dir>/<backend>/*.csv")
    p.add_argument("--data-dir", default="data")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_qubits = sub.add_parser("qubits")
    p_qubits.add_argument("--ns", type=_ints, default=list(range(2, MAX_QUBITS + 1, 2)))
    p_qubits.add_argument("--depth", type=int, default=100)
    p_qubits.add_argument("--backend", default="numba", choices=BACKENDS)

    p_depth = sub.add_parser("depth")
    p_depth.add_argument("--n", type=int, default=10)
    p_depth.add_argument("--depths", type=_ints, default=[10,50,100,300])
    p_depth.add_argument("--backend", default="numba", choices=BACKENDS)

    p_threads = sub.add_parser("threads")
    p_threads.add_argument("--n", type=int, default=MAX_QUBITS)
    p_threads.add_argument("--depth", type=int, default=200)
    p_threads.add_argument("--threads", type=_ints, default=[1,2,4,8])
    return p

def main(argv=None):
    args = build_parser().parse_args(argv)
    backend = getattr(args, "backend", "numba")
    out_path = os.path.join(backend_dir(args.data_dir, backend), f"{args.cmd}.csv")

    if args.cmd == "qubits":
        bench_qubits(args.ns, args.depth, backend, out_path)
    elif args.cmd == "depth":
        bench_depth(args.n, args.depths, backend, out_path)
    elif args.cmd == "threads":
        bench_threads(args.n, args.depth, args.threads, out_path)

if __name__ == "__main__":
    main()
