"""
This module provides validation utilities for N-body simulation states.

The SimulationValidator class offers static methods to check state validity (positive
masses, finite values, correct dimensions) and report detailed diagnostics for invalid
states. The validation covers all state components and helps identify configuration
errors before a simulation starts.
"""

from __future__ import annotations
import math
from typing import Sequence, Tuple
import numpy as np





Vec2 = Tuple[float, float]


class SimulationValidator:
	@staticmethod
	def state_is_valid(
		masses: Sequence[float],
		positions: Sequence[Vec2],
		velocities: Sequence[Vec2] | None = None,
	) -> bool:

		if masses is None or positions is None:
			return False

		m = np.asarray(masses, dtype=float).ravel()
		r = np.asarray(positions, dtype=float)
		if r.size == 0 and m.size == 0:
			r = r.reshape(0, 2)

		if r.ndim != 2 or r.shape[0] != m.size or r.shape[1] != 2:
			return False

		if velocities is not None:
			v = np.asarray(velocities, dtype=float)
			if v.size == 0 and m.size == 0:
				v = v.reshape(0, 2)
			if v.shape != r.shape:
				return False
			if not np.all(np.isfinite(v)):
				return False

		for m_i in m:
			if not (m_i > 0.0 and math.isfinite(m_i)):
				return False

		if not np.all(np.isfinite(r)):
			return False

		return True

	@staticmethod
	def report_invalid_state(
		label: str,
		masses=None,
		positions=None,
		velocities=None,
	) -> None:

		print(f"[invalid] {label}")
		if masses is not None:
			print("masses", masses)
			for i, m_i in enumerate(np.asarray(masses, dtype=float).ravel()):
				if not (m_i > 0.0 and math.isfinite(m_i)):
					print(f"  mass[{i}] = {m_i} (expected positive finite)")
		if positions is not None:
			print("positions", positions)
			shape = np.shape(positions)
			if len(shape) != 2 or shape[-1] != 2:
				print(f"  positions have shape {shape} (expected (N, 2))")
		if velocities is not None:
			print("velocities", velocities)
			shape = np.shape(velocities)
			if len(shape) != 2 or shape[-1] != 2:
				print(f"  velocities have shape {shape} (expected (N, 2))")
