"""
This module defines the Body class, a simple data container for individual point
masses in the simulation.

The class stores fundamental properties (mass, position x/y, velocity vx/vy, and the
accumulated force fx/fy) as floating-point attributes and provides a clean string
representation for debugging. It serves as the basic building block for initial
condition specification before conversion to the contiguous numpy array format owned by
the simulation. Masses must be positive and finite; anything else is rejected at
construction so that the integrator never divides by zero.
"""
import math


class Body:
	def __init__(self, mass: float, x: float, y: float, vx: float = 0.0, vy: float = 0.0):
		mass = float(mass)
		if not (mass > 0.0 and math.isfinite(mass)):
			raise ValueError(f"body mass must be a positive finite number, got {mass}")
		self.mass = mass
		self.x = float(x)
		self.y = float(y)
		self.vx = float(vx)
		self.vy = float(vy)
		self.fx = 0.0
		self.fy = 0.0

	def __repr__(self) -> str:
		return f"Body(mass={self.mass}, x={self.x}, y={self.y}, vx={self.vx}, vy={self.vy})"
