from __future__ import annotations

import argparse
import math
import re
import sys
from collections import Counter
from typing import List, Optional, Tuple

from .constants import (
	N_BODIES_DEFAULT,
	ITERATIONS_DEFAULT,
	DT_DEFAULT,
	COUNT_MAX,
	FRAME_DELAY,
)
from .initial_condition_generator import InitialConditionGenerator
from .reporters import ConsoleReporter, HistoryRecorder
from .sim_config import SimConfig

"""
This module implements the gravsim command line. It takes up to three optional positional arguments (number of bodies, number of iterations, integration time step) plus flags for the seed, plotting, pacing, console output and a CSV history file. The positional values are parsed leniently by parse_count and parse_step: a value that is not a number, carries trailing characters, is out of range or is a negative count is replaced by its default and a warning is printed to stderr, so bad input never stops a run. Positionals are recovered in command line order even when they start with a dash (a negative time step such as -1e-3), and anything past the third is ignored with a warning. The seed and delay flags go through the same lenient parsers. main prints the usage banner when no positional arguments are given, prints the run header, builds a seeded simulation and runs it with the console reporter, the live display and the history recorder attached as observers.

"""


USAGE_BANNER = """
 ----------------------------------------------------------------
  Optionally specify arguments,
    gravsim <number-of-bodies>
  or
    gravsim <number-of-bodies> <number-of-iterations>
  or
    gravsim <number-of-bodies> <number-of-iterations> <time-step>
 ----------------------------------------------------------------
"""

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _warn(msg: str) -> None:
	print(f"[warning] {msg}", file=sys.stderr)


def _split_number(text: str, pattern: re.Pattern) -> Tuple[Optional[str], str]:
	match = pattern.match(text)
	if match is None:
		return None, text
	return match.group(0), text[match.end():]


def parse_count(text: str | None, default: Optional[int], label: str = "value") -> Optional[int]:
	if text is None:
		return default
	number, rest = _split_number(text, _INT_PREFIX)
	if number is None:
		_warn(f"Invalid number: {text}; using default {label} {default}")
		return default
	if rest:
		_warn(f"Trailing characters after number: {text}; using default {label} {default}")
		return default
	value = int(number)
	if value < 0:
		_warn(f"Negative {label}: {text}; using default {default}")
		return default
	if value > COUNT_MAX:
		_warn(f"Number out of range: {text}; using default {label} {default}")
		return default
	return value


def parse_step(text: str | None, default: float = DT_DEFAULT, label: str = "time step") -> float:
	if text is None:
		return default
	number, rest = _split_number(text, _FLOAT_PREFIX)
	if number is None:
		_warn(f"Invalid number: {text}; using default {label} {default}")
		return default
	if rest:
		_warn(f"Trailing characters after number: {text}; using default {label} {default}")
		return default
	value = float(number)
	if not math.isfinite(value):
		_warn(f"Number out of range: {text}; using default {label} {default}")
		return default
	return value


_VALUE_OPTIONS = ("--seed", "--delay", "--history")


def build_parser() -> argparse.ArgumentParser:
	p = argparse.ArgumentParser(
		prog="gravsim",
		description="Brute-force 2D gravitational N-body simulation with explicit Euler integration.",
		allow_abbrev=False,
	)
	p.add_argument(
		"values",
		nargs="*",
		metavar="value",
		help=(f"number of bodies (default {N_BODIES_DEFAULT}), number of iterations "
			  f"(default {ITERATIONS_DEFAULT}), integration time step (default {DT_DEFAULT})"),
	)
	p.add_argument("--seed", default=None, help="seed for the random initial conditions")
	p.add_argument("--no-plot", dest="plot", action="store_false", help="disable the live plot")
	p.add_argument("--delay", default=None, help=f"seconds to pause per plotted frame (default {FRAME_DELAY})")
	p.add_argument("--quiet", action="store_true", help="do not print per-body reports")
	p.add_argument("--history", type=str, default=None, help="write every snapshot to this CSV file")
	return p


def positional_tokens(argv: List[str], leftovers: List[str]) -> List[str]:
	# argparse sets aside dash-led tokens such as -1e-3, so recover argv order
	pending = Counter(leftovers)
	out = []
	skip = False
	for tok in argv:
		if skip:
			skip = False
			continue
		if tok in _VALUE_OPTIONS:
			skip = True
			continue
		if pending[tok] > 0:
			pending[tok] -= 1
			out.append(tok)
	return out


def parse_command_line(argv: List[str] | None = None) -> Tuple[argparse.Namespace, List[str]]:
	if argv is None:
		argv = sys.argv[1:]
	argv = list(argv)
	args, extras = build_parser().parse_known_args(argv)
	positionals = positional_tokens(argv, list(args.values) + list(extras))
	for tok in positionals[3:]:
		_warn(f"Ignoring extra argument: {tok}")
	return args, positionals[:3]


def config_from_args(args: argparse.Namespace, positionals: List[str] | None = None) -> SimConfig:
	if positionals is None:
		positionals = list(args.values)
	bodies, iterations, time_step = (list(positionals) + [None, None, None])[:3]

	delay = parse_step(args.delay, FRAME_DELAY, "delay")
	if delay < 0.0:
		_warn(f"Negative delay: {args.delay}; using default {FRAME_DELAY}")
		delay = FRAME_DELAY
	return SimConfig(
		n_bodies=parse_count(bodies, N_BODIES_DEFAULT, "number of bodies"),
		iterations=parse_count(iterations, ITERATIONS_DEFAULT, "number of iterations"),
		dt=parse_step(time_step, DT_DEFAULT),
		seed=parse_count(args.seed, None, "seed"),
		frame_delay=delay,
	)


def print_header(cfg: SimConfig) -> None:
	print()
	print(f"            Bodies: {cfg.n_bodies}")
	print(f"        Iterations: {cfg.iterations}")
	print(f"  Integration step: {cfg.dt}")
	print()


def main(argv: List[str] | None = None) -> int:
	args, positionals = parse_command_line(argv)

	if not positionals:
		print(USAGE_BANNER)

	cfg = config_from_args(args, positionals)
	print_header(cfg)

	sim = InitialConditionGenerator.from_config(cfg).create_simulation(cfg=cfg)

	observers = []
	if not args.quiet:
		observers.append(ConsoleReporter())
	display = None
	if args.plot:
		from .display import ScatterDisplay
		display = ScatterDisplay(cfg.plot_bounds, cfg.frame_delay)
		observers.append(display)
	history = None
	if args.history:
		history = HistoryRecorder()
		observers.append(history)

	try:
		sim.run(cfg.iterations, observers)
	finally:
		if display is not None:
			display.close()

	if history is not None:
		history.save_history(args.history)
	return 0
