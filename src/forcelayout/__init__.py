"""
forcelayout: force-directed graph layout in 2D

Lays out an arbitrary graph by repeatedly simulating physical forces
until the picture settles.

Core concepts:
- Gravity pulls every node toward a center point
- Charge repulsion pushes every pair of nodes apart
- Degree repulsion pushes high-degree hubs away from each other
- Springs pull each edge toward an optimal length
- Edge-angle repulsion spreads the edges around each node evenly
- Each tick: clear forces, apply the enabled ones, move nodes by force / mass
"""

__version__ = "0.1.0"
