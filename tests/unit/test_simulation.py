"""Unit tests for tick() and Simulation, including convergence behavior."""

import math

import numpy as np
import pytest

from forcelayout.core import (
    FORCE_ORDER,
    ForceConstants,
    Simulation,
    apply_charge_repulsion,
    apply_gravity,
    area_optimal_length,
    build_graph,
    configure,
    integrate,
    log_optimal_length,
    tick,
)
from forcelayout.analysis import edge_lengths


def only(*names):
    """Config with just the named forces enabled."""
    return configure(**{name: name in names for name in FORCE_ORDER})


def _angle(graph, center_id, a_id, b_id):
    c = graph.node(center_id).pos
    va = graph.node(a_id).pos - c
    vb = graph.node(b_id).pos - c
    cross = va[0] * vb[1] - va[1] * vb[0]
    return math.atan2(abs(cross), np.dot(va, vb))


class TestTick:
    """Tests for the stateless tick()."""

    def test_empty_graph_is_noop(self):
        g = build_graph(0)
        tick(g, configure(), (0.0, 0.0))
        assert g.node_count == 0

    def test_graph_without_edges(self, rng):
        g = build_graph(5, rng=rng)
        tick(g, configure(), (400.0, 300.0))
        assert np.all(np.isfinite(g.positions()))

    def test_all_disabled_does_not_move(self, rng):
        g = build_graph(5, [(0, 1), (2, 3)], rng=rng)
        before = g.positions()
        tick(g, only(), (0.0, 0.0))
        assert np.array_equal(g.positions(), before)

    def test_stale_forces_are_cleared(self, rng):
        g = build_graph(3, rng=rng)
        for node in g:
            node.force += (1e6, 1e6)

        before = g.positions()
        tick(g, only(), (0.0, 0.0))
        assert np.array_equal(g.positions(), before)

    def test_charge_toggle_is_honored(self):
        g = build_graph(2, positions=[(0.0, 0.0), (2.0, 0.0)])
        tick(g, only("gravity"), (1.0, 0.0))

        # Gravity alone pulls both nodes toward the midpoint
        assert g.node(0).x > 0.0
        assert g.node(1).x < 2.0

    def test_forces_are_additive(self):
        positions = [(0.0, 0.0), (10.0, 5.0)]
        center = (20.0, 0.0)
        constants = ForceConstants()

        g = build_graph(2, positions=positions)
        tick(g, only("gravity", "charge_repulsion"), center, constants)

        expected = build_graph(2, positions=positions)
        apply_gravity(expected, center, constants)
        apply_charge_repulsion(expected, constants)
        integrate(expected, constants)

        assert np.allclose(g.positions(), expected.positions())

    def test_invalid_center_raises(self, rng):
        g = build_graph(2, rng=rng)
        with pytest.raises(ValueError):
            tick(g, configure(), (1.0, 2.0, 3.0))
        with pytest.raises(ValueError):
            tick(g, configure(), (np.nan, 0.0))

    def test_custom_optimal_length(self, two_node_graph):
        tick(two_node_graph, only("spring_forces"), (0.0, 0.0),
             optimal_length=lambda n: 10.0)
        assert np.allclose(two_node_graph.positions(), [[0.0, 0.0], [10.0, 0.0]])


class TestSimulation:
    """Tests for the Simulation context object."""

    def test_step_matches_tick(self, rng):
        positions = rng.uniform(0, 100, size=(6, 2))
        edges = [(0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 0), (0, 3)]

        g1 = build_graph(6, edges, positions=positions)
        g2 = build_graph(6, edges, positions=positions)

        sim = Simulation(graph=g1, center=(50.0, 50.0))
        for _ in range(10):
            sim.step()
            tick(g2, configure(), (50.0, 50.0))

        assert np.allclose(g1.positions(), g2.positions())
        assert sim.current_tick == 10

    def test_run_statistics(self, rng):
        g = build_graph(4, [(0, 1), (2, 3)], rng=rng)
        sim = Simulation(graph=g, center=(400.0, 300.0))
        stats = sim.run(25)

        assert stats["n_ticks"] == 25
        assert stats["current_tick"] == 25
        assert stats["max_displacement"] == sim.last_displacement
        assert not stats["converged"]

    def test_run_stops_when_at_rest(self):
        g = build_graph(1, positions=[(5.0, 5.0)])
        sim = Simulation(graph=g, config=only("gravity"), center=(5.0, 5.0))
        stats = sim.run(100, tolerance=1e-9)

        assert stats["converged"]
        assert stats["n_ticks"] == 1

    def test_run_zero_ticks(self, rng):
        sim = Simulation(graph=build_graph(3, rng=rng))
        stats = sim.run(0)
        assert stats["n_ticks"] == 0
        assert sim.current_tick == 0

    def test_negative_ticks_raises(self, rng):
        sim = Simulation(graph=build_graph(3, rng=rng))
        with pytest.raises(ValueError):
            sim.run(-1)

    def test_invalid_center_raises(self, rng):
        with pytest.raises(ValueError):
            Simulation(graph=build_graph(3, rng=rng), center=(1.0,))

    def test_positions_readback(self, two_node_graph):
        sim = Simulation(graph=two_node_graph)
        assert np.array_equal(sim.positions(), two_node_graph.positions())

    def test_area_policy_sets_edge_length(self, two_node_graph):
        policy = area_optimal_length(40.0, 40.0)  # sqrt(1600 / 2) ≈ 28.28
        sim = Simulation(
            graph=two_node_graph, config=only("spring_forces"), optimal_length=policy
        )
        sim.run(200)
        assert edge_lengths(two_node_graph)[0] == pytest.approx(policy(2), rel=1e-6)


class TestConvergence:
    """Behavioral tests over many ticks."""

    def test_gravity_pulls_to_center(self, rng):
        center = np.array([400.0, 300.0])
        g = build_graph(6, rng=rng)
        sim = Simulation(graph=g, config=only("gravity"), center=center)

        dist = np.linalg.norm(g.positions() - center, axis=1)
        for _ in range(50):
            sim.step()
            new_dist = np.linalg.norm(g.positions() - center, axis=1)
            assert np.all(new_dist < dist)
            dist = new_dist

        assert np.all(dist < 1e-2)

    def test_spring_converges_from_long(self):
        g = build_graph(2, [(0, 1)], positions=[(0.0, 0.0), (20.0, 0.0)])
        sim = Simulation(graph=g, config=only("spring_forces"))
        target = log_optimal_length(2)

        lengths = [edge_lengths(g)[0]]
        for _ in range(100):
            sim.step()
            lengths.append(edge_lengths(g)[0])

        lengths = np.array(lengths)
        assert np.all(np.diff(lengths) <= 1e-12)
        assert np.all(lengths >= target - 1e-9)
        assert lengths[-1] == pytest.approx(target, abs=1e-6)

    def test_spring_converges_from_short(self):
        g = build_graph(2, [(0, 1)], positions=[(0.0, 0.0), (0.2, 0.1)])
        sim = Simulation(graph=g, config=only("spring_forces"))
        target = log_optimal_length(2)

        lengths = [edge_lengths(g)[0]]
        for _ in range(150):
            sim.step()
            lengths.append(edge_lengths(g)[0])

        lengths = np.array(lengths)
        assert np.all(np.diff(lengths) >= -1e-12)
        assert np.all(lengths <= target + 1e-9)
        assert lengths[-1] == pytest.approx(target, abs=1e-6)

    def test_edge_angle_opens_toward_straight(self):
        g = build_graph(
            3, [(0, 1), (0, 2)], positions=[(0.0, 0.0), (10.0, 0.0), (10.0, 2.0)]
        )
        sim = Simulation(graph=g, config=only("edge_angle_repulsion"))

        angles = [_angle(g, 0, 1, 2)]
        for _ in range(400):
            sim.step()
            angles.append(_angle(g, 0, 1, 2))

        angles = np.array(angles)
        assert angles[0] < 0.3
        assert np.all(np.diff(angles) >= -1e-12)
        assert np.all(angles <= math.pi + 1e-12)
        assert angles[-1] == pytest.approx(math.pi, abs=0.05)

    def test_self_loops_and_duplicates_stay_finite(self):
        g = build_graph(
            3,
            [(0, 0), (0, 1), (1, 2), (1, 2), (2, 1)],
            positions=[(10.0, 10.0), (10.0, 10.0), (30.0, 5.0)],
        )
        sim = Simulation(graph=g, center=(0.0, 0.0))
        sim.run(1000)
        assert np.all(np.isfinite(g.positions()))

    def test_random_graph_stays_finite(self, rng):
        from forcelayout.experiments import random_graph

        g = random_graph(15, 25, rng=rng)
        sim = Simulation(graph=g, center=(400.0, 300.0))
        sim.run(300)
        assert np.all(np.isfinite(g.positions()))

    def test_square_cycle_becomes_regular(self, square_cycle):
        sim = Simulation(graph=square_cycle, center=(0.0, 0.0))
        sim.run(1000)

        sides = edge_lengths(square_cycle)
        assert np.all(np.isfinite(sides))
        assert sides.max() / sides.min() < 1.1

        pos = square_cycle.positions()
        diagonals = [np.linalg.norm(pos[0] - pos[2]), np.linalg.norm(pos[1] - pos[3])]
        assert max(diagonals) / min(diagonals) < 1.1
