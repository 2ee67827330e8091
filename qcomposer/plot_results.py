# qcomposer/plot_results.py
import argparse, csv, os
from collections import defaultdict
from statistics import median

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

def load_rows(path):
    rows = []
    with open(path, "r", newline="") as f:
        for row in csv.DictReader(f):
            row["qubits"]  = int(row["qubits"])
            row["depth"]   = int(row["depth"])
            row["threads"] = int(row["threads"])
            row["wall_ms"] = float(row["wall_ms"])
            rows.append(row)
    return rows

def median_by(rows, x_field):
    """(x, median wall_ms) points sorted by x; repeated runs collapse to their median."""
    buckets = defaultdict(list)
    for r in rows:
        buckets[r[x_field]].append(r["wall_ms"])
    return [(x, float(median(v))) for x, v in sorted(buckets.items())]

def _save(xs, ys, xlabel, ylabel, title, out_path, logy=False):
    fig, ax = plt.subplots()
    ax.plot(xs, ys, marker="o")
    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel)
    ax.set_title(title)
    if logy:
        ax.set_yscale("log")
    ax.grid(True, which="both", ls="--", lw=0.5)
    fig.tight_layout()
    fig.savefig(out_path, dpi=200)
    plt.close(fig)
    return out_path

def plot_csv(path):
    """Write the plots that fit one bench CSV next to it; returns the PNG paths."""
    rows = load_rows(path)
    if not rows:
        return []
    out_dir = os.path.dirname(path)
    tag = os.path.splitext(os.path.basename(path))[0]
    backend = rows[0]["backend"]
    written = []

    if tag == "qubits":
        xs, ys = zip(*median_by(rows, "qubits"))
        written.append(_save(xs, ys, "Qubits (n)", "Runtime (ms, log scale)", f"Runtime vs Qubits [{backend}]",
                             os.path.join(out_dir, f"runtime_vs_qubits_{backend}.png"), logy=True))
    elif tag == "depth":
        xs, ys = zip(*median_by(rows, "depth"))
        written.append(_save(xs, ys, "Depth", "Runtime (ms)", f"Runtime vs Depth [{backend}]",
                             os.path.join(out_dir, f"runtime_vs_depth_{backend}.png")))
    elif tag == "threads":
        pts = median_by(rows, "threads")
        xs, ys = zip(*pts)
        written.append(_save(xs, ys, "Threads", "Runtime (ms)", f"Runtime vs Threads [{backend}]",
                             os.path.join(out_dir, f"runtime_vs_threads_{backend}.png")))
        t1 = dict(pts).get(1)
        if t1:
            written.append(_save(xs, [t1 / y for y in ys], "Threads", "Speedup (T1/Tt)",
                                 f"Speedup vs Threads [{backend}]",
                                 os.path.join(out_dir, f"speedup_vs_threads_{backend}.png")))
    return written

def main(argv=None):
    p = argparse.ArgumentParser(prog="qcomposer-plot", description="Plot qcomposer-bench CSVs")
    p.add_argument("--data-dir", default="data")
    args = p.parse_args(argv)

    csvs = []
    for root, _, files in os.walk(args.data_dir):
        csvs.extend(os.path.join(root, f) for f in files if f.endswith(".csv"))
    if not csvs:
        print(f"No CSV files found under {args.data_dir}/")
        return

    for path in sorted(csvs):
        print(f"Plotting {path} ...")
        for out in plot_csv(path):
            print(f"  → {out}")
    print(f"\nSaved all plots under {args.data_dir}/<backend>/*.png")

if __name__ == "__main__":
    main()
