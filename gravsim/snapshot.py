"""
This module defines the Snapshot record handed to observers after every completed
iteration.

A Snapshot carries the iteration number and simulated time together with copies of the
masses, positions and velocities of all bodies, in body order. Copies are taken so that
observers may keep snapshots around (for example to build a history) without seeing
later mutation of the simulation arrays. The rows method yields the per-body
(mass, x, y, vx, vy) tuples that the console reporter prints.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Tuple
import numpy as np


@dataclass(frozen=True)
class Snapshot:
	iteration: int
	time: float
	masses: np.ndarray
	positions: np.ndarray
	velocities: np.ndarray

	@property
	def n_bodies(self) -> int:
		return int(self.masses.shape[0])

	@property
	def x(self) -> np.ndarray:
		return self.positions[:, 0]

	@property
	def y(self) -> np.ndarray:
		return self.positions[:, 1]

	def rows(self) -> Iterator[Tuple[float, float, float, float, float]]:
		for m, (x, y), (vx, vy) in zip(self.masses, self.positions, self.velocities):
			yield float(m), float(x), float(y), float(vx), float(vy)

	def __len__(self) -> int:
		return self.n_bodies
