#!/usr/bin/env python3
"""
Demo: Cycle Layout

A jittered cycle settles into a regular polygon:
1. Place an n-cycle on a noisy circle
2. Run with all forces until the largest step drops below a tolerance
3. Compare edge lengths and angular gaps before and after
"""

from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt

from forcelayout.core import Simulation
from forcelayout.experiments import cycle_graph
from forcelayout.analysis import edge_lengths, neighbor_angles
from forcelayout.viz import plot_layout


def main():
    print("=" * 60)
    print("  FORCE-DIRECTED LAYOUT: CYCLE")
    print("=" * 60)

    rng = np.random.default_rng(7)
    n = 6
    graph = cycle_graph(n, radius=40.0, jitter=12.0, rng=rng)

    lengths = edge_lengths(graph)
    print(f"\n1. Setup: {n}-cycle, jittered")
    print(f"   Edge lengths: min={lengths.min():.2f}, max={lengths.max():.2f}")

    fig, axes = plt.subplots(1, 2, figsize=(12, 6))
    plot_layout(graph, title="Initial", ax=axes[0])

    print("\n2. Running until converged...")
    sim = Simulation(graph=graph)
    stats = sim.run(5000, tolerance=1e-4)
    print(f"   Ticks: {stats['n_ticks']}, converged: {stats['converged']}")

    lengths = edge_lengths(graph)
    print(f"\n3. Result:")
    print(f"   Edge lengths: min={lengths.min():.2f}, max={lengths.max():.2f}")
    for node_id in range(n):
        gaps = np.degrees(neighbor_angles(graph, node_id))
        print(f"   Node {node_id} edge angles: {np.round(gaps, 1)}")

    plot_layout(graph, title=f"After {sim.current_tick} ticks", ax=axes[1])
    fig.tight_layout()

    output_dir = Path("output/demo_cycle")
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / "cycle.png"
    fig.savefig(output_path, dpi=150, bbox_inches="tight")
    plt.close()
    print(f"   Saved: {output_path}")


if __name__ == "__main__":
    main()
