from __future__ import annotations

import sys
from typing import List, TextIO

import pandas as pd

from .snapshot import Snapshot

"""
This module provides the per-step observers that report on a running simulation. ConsoleReporter prints one human-readable line per body after every iteration with mass, position (x, y) and velocity (v, w) to three significant digits in fixed-width columns. HistoryRecorder keeps every snapshot it receives and flattens them into a pandas DataFrame with one row per body per iteration, which save_history writes to CSV. Neither output is meant to be machine-parsed beyond the CSV export.

"""


def format_body_line(mass: float, x: float, y: float, vx: float, vy: float) -> str:
	return (f"  m = {mass:4.3g}"
			f"  x = {x:6.3g}"
			f"  y = {y:6.3g}"
			f"  v = {vx:6.3g}"
			f"  w = {vy:6.3g}")


class ConsoleReporter:
	def __init__(self, stream: TextIO | None = None, show_iteration: bool = False) -> None:
		self.stream = stream
		self.show_iteration = show_iteration
		self.lines_written = 0

	def __call__(self, snap: Snapshot) -> None:
		out = self.stream or sys.stdout
		if self.show_iteration:
			print(f"iteration {snap.iteration}  t = {snap.time:.6g}", file=out)
		for row in snap.rows():
			print(format_body_line(*row), file=out)
			self.lines_written += 1


class HistoryRecorder:
	COLUMNS = ["iteration", "time", "body", "mass", "x", "y", "vx", "vy"]

	def __init__(self) -> None:
		self.snapshots: List[Snapshot] = []

	def __call__(self, snap: Snapshot) -> None:
		self.snapshots.append(snap)

	def __len__(self) -> int:
		return len(self.snapshots)

	def to_frame(self) -> pd.DataFrame:
		rows = []
		for snap in self.snapshots:
			for i, (m, x, y, vx, vy) in enumerate(snap.rows()):
				rows.append((snap.iteration, snap.time, i, m, x, y, vx, vy))
		return pd.DataFrame(rows, columns=self.COLUMNS)

	def save_history(self, filename: str) -> None:
		if not self.snapshots:
			print("[error] No snapshots recorded. Run the simulation first.")
			return
		df = self.to_frame()
		df.to_csv(filename, index=False)
		print(f"Saved {len(df)} rows from {len(self.snapshots)} snapshots to {filename}")
