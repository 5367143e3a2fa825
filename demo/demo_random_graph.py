#!/usr/bin/env python3
"""
Demo: Random Graph Layout

Lays out a random graph with all five forces enabled:
1. Scatter N nodes over an 800x600 canvas, join them with E random edges
2. Tick the simulation, recording the largest displacement per tick
3. Draw the layout before and after, fitted to the canvas
4. Plot convergence

Pass force names to switch them off, e.g.:
    python demo_random_graph.py --no gravity --no edge_angle_repulsion
"""

import argparse
import logging
from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt

from forcelayout.core import FORCE_ORDER, Simulation, configure
from forcelayout.experiments import random_graph
from forcelayout.analysis import layout_summary
from forcelayout.viz import plot_layout, plot_convergence


def main():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--nodes", type=int, default=40)
    parser.add_argument("--edges", type=int, default=50)
    parser.add_argument("--ticks", type=int, default=500)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--no", action="append", default=[], choices=FORCE_ORDER,
                        help="Disable a force (repeatable)")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)

    print("=" * 60)
    print("  FORCE-DIRECTED LAYOUT: RANDOM GRAPH")
    print("=" * 60)

    width, height = 800.0, 600.0
    rng = np.random.default_rng(args.seed)

    config = configure(**{name: False for name in args.no})
    graph = random_graph(args.nodes, args.edges, width=width, height=height, rng=rng)

    print(f"\n1. Setup:")
    print(f"   Nodes: {graph.node_count}, edges: {graph.edge_count}")
    print(f"   Forces: {', '.join(config.enabled_forces()) or 'none'}")

    sim = Simulation(graph=graph, config=config, center=(width / 2, height / 2))

    fig, axes = plt.subplots(1, 3, figsize=(20, 6))
    plot_layout(graph, width=width, height=height, title="Initial layout", ax=axes[0])

    print(f"\n2. Running {args.ticks} ticks...")
    displacements = [sim.step() for _ in range(args.ticks)]
    summary = layout_summary(graph)
    print(f"   Final max displacement: {displacements[-1]:.4f}")
    print(f"   Mean edge length:       {summary.mean_edge_length:.2f}")
    print(f"   Edge length spread:     {summary.edge_length_spread:.2f}")
    print(f"   Min node distance:      {summary.min_pairwise_distance:.2f}")

    print("\n3. Creating visualization...")
    plot_layout(graph, width=width, height=height,
                title=f"After {sim.current_tick} ticks", ax=axes[1])
    plot_convergence(displacements, ax=axes[2])
    fig.tight_layout()

    output_dir = Path("output/demo_random_graph")
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / "random_graph.png"
    fig.savefig(output_path, dpi=150, bbox_inches="tight")
    plt.close()
    print(f"   Saved: {output_path}")


if __name__ == "__main__":
    main()
