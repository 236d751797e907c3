"""
Binary Heap Demo -- Ordering walkthrough, insert/extract timing against an
n log n reference, and a picture of the backing array as a tree.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
import time
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from binary_heap import BinaryHeap, EmptyHeapError

SEED = 42
np.random.seed(SEED)

SIZES = [1_000, 2_000, 5_000, 10_000, 20_000, 50_000]
TREE_SIZE = 15

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "green": "#27ae60",
    "dark": "#2c3e50",
}


def descending(left, right):
    return right - left


# ---------------------------------------------------------------------------
# Example 1: Ordering Walkthrough
# ---------------------------------------------------------------------------
def example_1_ordering():
    """Natural vs descending ordering, strict vs non-strict empty access."""
    print("=" * 60)
    print("Example 1: Ordering Walkthrough")
    print("=" * 60)

    values = [int(v) for v in np.random.randint(0, 100, size=10)]
    print(f"\n  Input: {values}")

    for label, comparator in [("natural", None), ("descending", descending)]:
        heap = BinaryHeap(comparator)
        for v in values:
            heap.insert(v)
        print(f"\n  {label} backing array: {heap!r}")
        drained = [heap.extract_min() for _ in range(heap.size())]
        print(f"  {label} extraction:    {drained}")

    empty = BinaryHeap()
    print(f"\n  extract_min() on empty heap -> {empty.extract_min()}")
    print(f"  peek_min() on empty heap    -> {empty.peek_min()}")
    try:
        empty.remove_min()
    except EmptyHeapError as exc:
        print(f"  remove_min() on empty heap  -> EmptyHeapError: {exc}")


# ---------------------------------------------------------------------------
# Example 2: Timing Benchmark
# ---------------------------------------------------------------------------
def example_2_timing():
    """Time n inserts followed by n extractions for growing n."""
    print("\n" + "=" * 60)
    print("Example 2: Timing Benchmark")
    print("=" * 60)

    insert_times = []
    extract_times = []
    print(f"\n  {'n':>8} {'insert (s)':>12} {'extract (s)':>12}")
    print(f"  {'-'*34}")
    for n in SIZES:
        values = np.random.randint(-10**6, 10**6, size=n).tolist()
        heap = BinaryHeap()

        start = time.perf_counter()
        for v in values:
            heap.insert(v)
        insert_times.append(time.perf_counter() - start)

        start = time.perf_counter()
        drained = [heap.extract_min() for _ in range(n)]
        extract_times.append(time.perf_counter() - start)

        assert drained == sorted(values)
        print(f"  {n:>8} {insert_times[-1]:>12.4f} {extract_times[-1]:>12.4f}")

    sizes = np.array(SIZES, dtype=float)
    reference = sizes * np.log2(sizes)
    reference *= np.array(extract_times)[-1] / reference[-1]

    fig, ax = plt.subplots(figsize=(9, 5.5))
    ax.plot(sizes, insert_times, "o-", color=COLORS["blue"], label="n inserts")
    ax.plot(sizes, extract_times, "s-", color=COLORS["red"], label="n extract_min")
    ax.plot(sizes, reference, "--", color="gray", label="n log n (scaled)")
    ax.set_xlabel("n")
    ax.set_ylabel("seconds")
    ax.set_title("Binary heap: total time for n operations", fontweight="bold")
    ax.legend()
    ax.grid(alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_timing.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/01_timing.png")


# ---------------------------------------------------------------------------
# Example 3: Heap Shape
# ---------------------------------------------------------------------------
def _node_positions(count):
    positions = []
    for i in range(count):
        depth = int(np.floor(np.log2(i + 1)))
        offset = i - (2 ** depth - 1)
        x = (offset + 0.5) / (2 ** depth)
        positions.append((x, -depth))
    return positions


def example_3_heap_shape():
    """Draw the backing array of a small heap as its implicit tree."""
    print("\n" + "=" * 60)
    print("Example 3: Heap Shape")
    print("=" * 60)

    values = np.random.randint(0, 100, size=TREE_SIZE).tolist()
    heap = BinaryHeap.from_array(values)
    data = heap._data
    print(f"\n  Input:         {values}")
    print(f"  Backing array: {data}")

    positions = _node_positions(len(data))
    fig, ax = plt.subplots(figsize=(10, 5))
    for i, (x, y) in enumerate(positions):
        for child in (2 * i + 1, 2 * i + 2):
            if child < len(data):
                cx, cy = positions[child]
                ax.plot([x, cx], [y, cy], color=COLORS["dark"], linewidth=1, zorder=1)
    for i, (x, y) in enumerate(positions):
        color = COLORS["green"] if i == 0 else COLORS["blue"]
        ax.scatter([x], [y], s=700, color=color, zorder=2)
        ax.text(x, y, str(data[i]), ha="center", va="center", color="white",
                fontweight="bold", zorder=3)
        ax.text(x, y - 0.3, f"[{i}]", ha="center", va="center", fontsize=8, color="gray")
    ax.set_title("Min-heap built by from_array (index shown below each node)",
                 fontweight="bold")
    ax.axis("off")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_heap_shape.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/02_heap_shape.png")


# ---------------------------------------------------------------------------
# PDF Report
# ---------------------------------------------------------------------------
def generate_pdf_report():
    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    with PdfPages(str(report_path)) as pdf:
        fig, ax = plt.subplots(figsize=(11, 8.5))
        ax.axis("off")
        ax.text(0.5, 0.78, "Binary Heap", fontsize=28, fontweight="bold",
                ha="center", va="center", transform=ax.transAxes)
        info_text = (
            "An array-backed min-heap: parent of i is (i - 1) // 2,\n"
            "children are 2i + 1 and 2i + 2. Insert sifts up, extract_min\n"
            "sifts down, both in O(log n).\n\n"
            f"Random seed: {SEED}\n"
            f"Benchmark sizes: {SIZES}\n"
            f"Number of visualizations: {len(viz_files)}"
        )
        ax.text(0.5, 0.40, info_text, fontsize=11, ha="center", va="center",
                transform=ax.transAxes, linespacing=1.6)
        ax.text(0.5, 0.06, "Generated by demo.py", fontsize=10, ha="center",
                va="center", transform=ax.transAxes, style="italic", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        for viz in viz_files:
            fig, ax = plt.subplots(figsize=(11, 8.5))
            ax.imshow(plt.imread(str(viz)))
            ax.axis("off")
            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved: report.pdf ({len(viz_files) + 1} pages)")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    print("Binary Heap Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    example_1_ordering()
    example_2_timing()
    example_3_heap_shape()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
