"""
This module implements the live scatter plot of body positions.

ScatterDisplay is a simulation observer that draws every body as a point on a fixed
square viewport, [-75, 75] on both axes by default with ticks every 30 units, labelled
x and y and titled "N-body problem". Points accumulate from frame to frame so the plot
shows the trails of the bodies. After each frame the display pauses for the configured
delay, which throttles the live view without slowing the physics of headless runs. With
interactive=False no window is shown and no delay is applied, which is how tests and
batch rendering use it.
"""

from __future__ import annotations
from typing import List

import matplotlib.pyplot as plt
import numpy as np

from .constants import PLOT_BOUNDS, FRAME_DELAY
from .snapshot import Snapshot




class ScatterDisplay:
	def __init__(
		self,
		bounds: float = PLOT_BOUNDS,
		delay: float = FRAME_DELAY,
		*,
		interactive: bool = True,
		title: str = "N-body problem",
	) -> None:
		self.bounds = float(bounds)
		self.delay = float(delay)
		self.interactive = interactive
		self.frames = 0

		if interactive:
			plt.ion()
		self.fig, self.ax = plt.subplots()
		self.ax.set_xlim(-self.bounds, self.bounds)
		self.ax.set_ylim(-self.bounds, self.bounds)
		ticks = np.linspace(-self.bounds, self.bounds, 6)
		self.ax.set_xticks(ticks)
		self.ax.set_yticks(ticks)
		self.ax.set_xlabel("x")
		self.ax.set_ylabel("y")
		self.ax.set_title(title)
		self.ax.set_aspect("equal")
		self._collections: List = []

	def __call__(self, snap: Snapshot) -> None:
		coll = self.ax.scatter(snap.x, snap.y, s=4, c="tab:blue")
		self._collections.append(coll)
		self.frames += 1
		if self.interactive:
			self.fig.canvas.draw_idle()
			plt.pause(max(self.delay, 1e-3))
		else:
			self.fig.canvas.draw()

	def plotted_points(self) -> np.ndarray:
		if not self._collections:
			return np.empty((0, 2))
		return np.vstack([c.get_offsets() for c in self._collections])

	def close(self) -> None:
		if self.interactive:
			plt.ioff()
		plt.close(self.fig)
