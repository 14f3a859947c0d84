import numpy as np
from typing import Tuple

"""
This module provides remove_center_of_mass_velocity, which computes and subtracts the center-of-mass velocity from a velocity array so that total momentum is zero, and center_of_mass, which returns the mass-weighted mean of any (N, 2) array. Both handle edge cases like empty systems, single bodies or zero total mass gracefully. They assume mass and vector arrays have compatible dimensions.


"""

def center_of_mass(masses: np.ndarray, vectors: np.ndarray) -> np.ndarray:
	total_mass = float(np.sum(masses))
	if total_mass == 0 or vectors.size == 0:
		return np.zeros(2)
	return np.sum(masses[:, None] * vectors, axis=0) / total_mass


def remove_center_of_mass_velocity(
	masses: np.ndarray, velocities: np.ndarray
) -> np.ndarray:
	if len(masses) == 1:
		return velocities.copy()
	total_mass = float(np.sum(masses))
	if total_mass == 0 or velocities.size == 0:
		return velocities.copy()
	return velocities - center_of_mass(masses, velocities)
