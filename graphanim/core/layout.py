"""Force-directed layout with pinning and collision avoidance.

The layout works on the undirected view of the graph. Pinned nodes keep their
position and only act as anchors; every unpinned node is re-seeded on a circle
around the pinned nodes and relaxed by pairwise springs.

Tie-break policy:

- springs between adjacent nodes get longer and softer as the larger degree of
  the pair grows, so hubs pull less aggressively;
- nodes that could not move are retried every ``n`` iterations with a jump
  (next to their single neighbour, or near the centroid of their neighbours),
  highest degree first;
- a move is tried at 4/4, 3/4, 2/4 and 1/4 of its length and abandoned when
  all four collide.
"""
from __future__ import annotations

import math

import numpy as np
from scipy.spatial.distance import cdist

from .geometry import Point

# spring length (in length units) and stiffness, indexed by max pair degree 0..5
_SPRING_LENGTH = np.array([5, 5, 6, 7, 8, 9], dtype=float)
_SPRING_K = np.array([0.30, 0.30, 0.25, 0.20, 0.15, 0.10])
_LOOSE_K = 0.05
_LOOSE_MIN_UNITS = 24

_JUMP_GAP = 1.1       # in diameters, beyond a single neighbour
_JUMP_OFFSET = 10.0   # shift from the centroid of several neighbours
_MOVE_STEPS = (4, 3, 2, 1)


class ForceLayout:
    """
    Spring layout engine for one node radius.

    Parameters
    ----------
    radius_node : int
        Node radius; two nodes never end closer than one diameter.
    iterations_per_node : int, optional
        Iteration bound is ``iterations_per_node * n``.
    """

    def __init__(self, radius_node: int, iterations_per_node: int = 10):
        self.radius = int(radius_node)
        self.diameter = 2 * self.radius
        self.iterations_per_node = iterations_per_node

    def run(self, adjacency, positions, pinned) -> dict:
        """
        Compute new positions for every unpinned node.

        Parameters
        ----------
        adjacency : Mapping[str, Iterable[str]]
            Undirected neighbourhoods; every neighbour must itself be a key.
        positions : Mapping[str, Point]
            Current position of every node.
        pinned : Mapping[str, bool]
            Pinned flag of every node.

        Returns
        -------
        dict[str, Point]
            New positions for the unpinned nodes only (empty if all are pinned).
        """
        names = sorted(adjacency)
        n = len(names)
        if n == 0:
            return {}
        index = {name: i for i, name in enumerate(names)}

        P = np.array([tuple(positions[name]) for name in names], dtype=float)
        free = np.array([not pinned[name] for name in names])
        if not free.any():
            return {}
        fixed = ~free

        neighbors = [sorted(index[o] for o in adjacency[name]) for name in names]
        degree = np.array([len(nb) for nb in neighbors])
        A = np.zeros((n, n), dtype=bool)
        for i, nb in enumerate(neighbors):
            A[i, nb] = True

        center, seed_radius = self._seed(P, free, fixed)

        links_count = int(degree.sum()) // 2
        length_unit = self.radius * max(1, links_count // n)
        pair_degree = np.clip(np.maximum(degree[:, None], degree[None, :]), 0, 5)
        spring_length = np.where(A, _SPRING_LENGTH[pair_degree] * length_unit,
                                 max(_LOOSE_MIN_UNITS, n // 2) * length_unit)
        spring_k = np.where(A, _SPRING_K[pair_degree], _LOOSE_K)

        max_force = 6 * seed_radius / n
        min_force = length_unit / 10
        free_idx = [i for i in range(n) if free[i]]

        # decreasing degree, then name: hubs settle first
        not_moved = sorted(range(n), key=lambda i: (-degree[i], names[i]))

        for it in range(self.iterations_per_node * n):
            if it % n == 0 and not_moved:
                for i in not_moved:
                    if fixed[i] or not neighbors[i]:
                        continue
                    target = self._jump_target(P, neighbors[i], center)
                    if not self._collides(P, i, target):
                        P[i] = target
                not_moved = []

            F = self._forces(P, spring_length, spring_k)
            F[fixed] = 0.0
            norms = np.hypot(F[:, 0], F[:, 1])
            peak = norms[free].max()
            if peak > max_force:
                F *= max_force / peak
                norms *= max_force / peak

            moved = False
            for i in free_idx:
                if norms[i] <= min_force:
                    continue
                if self._try_move(P, i, F[i]):
                    moved = True
                elif i not in not_moved:
                    not_moved.append(i)

            if not moved and not not_moved:
                break

        return {names[i]: Point(int(P[i, 0]), int(P[i, 1])) for i in free_idx}

    def _seed(self, P, free, fixed):
        # even spacing on a circle that clears every pinned node
        if fixed.any():
            center = P[fixed].mean(axis=0)
            radius_min = float(np.hypot(*(P[fixed] - center).T).max())
        else:
            center = np.zeros(2)
            radius_min = 0.0

        count = int(free.sum())
        perimeter = self.diameter * count * 2
        seed_radius = max(int(perimeter / (2 * math.pi)), int(radius_min) + 2 * self.diameter)
        angle = 2 * math.pi / count
        for k, i in enumerate(np.flatnonzero(free)):
            P[i] = np.rint(center + seed_radius * np.array([math.cos(k * angle), math.sin(k * angle)]))
        return center, seed_radius

    def _jump_target(self, P, neighbors, center):
        if len(neighbors) == 1:
            other = P[neighbors[0]]
            direction = other - center
            dist = float(np.hypot(*direction))
            if dist == 0.0:
                direction, dist = np.array([1.0, 0.0]), 1.0
            return np.rint(other + _JUMP_GAP * self.diameter * direction / dist)
        return np.rint(P[neighbors].mean(axis=0) + _JUMP_OFFSET)

    @staticmethod
    def _forces(P, spring_length, spring_k):
        diff = P[None, :, :] - P[:, None, :]   # diff[i, j] = P[j] - P[i]
        dist = cdist(P, P)
        with np.errstate(divide="ignore", invalid="ignore"):
            magnitude = np.where(dist > 0, (dist - spring_length) * spring_k / dist, 0.0)
        np.fill_diagonal(magnitude, 0.0)
        return (magnitude[:, :, None] * diff).sum(axis=1)

    def _collides(self, P, i, candidate) -> bool:
        d = cdist(candidate[None, :], P)[0]
        d[i] = np.inf
        return bool((d <= self.diameter).any())

    def _try_move(self, P, i, force) -> bool:
        for m in _MOVE_STEPS:
            candidate = np.rint(P[i] + force * m / 4)
            if (candidate == P[i]).all():
                continue
            if not self._collides(P, i, candidate):
                P[i] = candidate
                return True
        return False
