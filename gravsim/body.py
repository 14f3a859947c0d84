"""
This module defines the Body class, a simple data container for individual point
masses in the simulation.

The class stores the fundamental properties (mass, position x/y, velocity vx/vy) and
the transient force accumulator (fx/fy) as floating-point attributes and provides a
clean string representation for debugging. It serves as the basic building block for
initial condition specification before conversion to the contiguous numpy array format
used during simulation. The class makes no assumptions about units or coordinate
systems, leaving those decisions to the simulation layer.
"""
from __future__ import annotations
from typing import Tuple


class Body:
	def __init__(
		self,
		mass: float,
		x: float,
		y: float,
		vx: float = 0.0,
		vy: float = 0.0,
		fx: float = 0.0,
		fy: float = 0.0,
	):
		self.mass = float(mass)
		self.x = float(x)
		self.y = float(y)
		self.vx = float(vx)
		self.vy = float(vy)
		self.fx = float(fx)
		self.fy = float(fy)

	@property
	def position(self) -> Tuple[float, float]:
		return (self.x, self.y)

	@property
	def velocity(self) -> Tuple[float, float]:
		return (self.vx, self.vy)

	@property
	def force(self) -> Tuple[float, float]:
		return (self.fx, self.fy)

	def __repr__(self) -> str:
		return f"Body(mass={self.mass}, x={self.x}, y={self.y}, vx={self.vx}, vy={self.vy})"
