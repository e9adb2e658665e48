"""L-system rewriting and turtle interpretation for the fractal variant.

Usage:
    program = expand("F", {"F": "F[+F]F[-F]F"}, 4)
    path = interpret(program, angle=25.7)
    d = path.to_path_data()
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from sigma_avatars.svg.path_builder import PathBuilder
from sigma_avatars.utils.geometry import bbox, polyline_length

DEFAULT_DRAW = "FG"


@dataclass(frozen=True)
class LSystem:
    name: str
    axiom: str
    rules: dict[str, str]
    angle: float
    iterations: int
    angle_variance: int = 10
    iter_variance: int = 1
    # Symbols that move the turtle forward while drawing
    draw: str = DEFAULT_DRAW

    def expand(self, iterations: int | None = None) -> str:
        return expand(self.axiom, self.rules, self.iterations if iterations is None else iterations)


@dataclass
class TurtlePath:
    subpaths: list[list[tuple[float, float]]] = field(default_factory=list)
    min_x: float = 0.0
    min_y: float = 0.0
    max_x: float = 0.0
    max_y: float = 0.0
    length: float = 0.0

    @property
    def segment_count(self) -> int:
        return sum(len(sp) - 1 for sp in self.subpaths)

    def to_path_data(self, precision: int = 3) -> str:
        builder = PathBuilder(precision=precision)
        for points in self.subpaths:
            builder.polyline(points)
        return builder.build()


def expand(axiom: str, rules: dict[str, str], iterations: int) -> str:
    """Rewrite every symbol in parallel ``iterations`` times; unknown symbols pass through."""
    current = axiom
    for _ in range(max(0, iterations)):
        current = "".join(rules.get(ch, ch) for ch in current)
    return current


def interpret(program: str, angle: float, draw: str = DEFAULT_DRAW) -> TurtlePath:
    """Walk a turtle over ``program``.

    Starts at the origin heading along +x. ``[``/``]`` save and restore
    position and heading; each ``]`` closes the current branch as its own
    sub-path so sibling branches are never joined by a stray segment.
    """
    x = y = heading = 0.0
    stack: list[tuple[float, float, float]] = []
    result = TurtlePath()
    current: list[tuple[float, float]] = [(x, y)]

    def commit() -> None:
        if len(current) > 1:
            result.subpaths.append(list(current))

    for ch in program:
        if ch in draw:
            rad = math.radians(heading)
            x, y = x + math.cos(rad), y + math.sin(rad)
            current.append((x, y))
        elif ch == "+":
            heading += angle
        elif ch == "-":
            heading -= angle
        elif ch == "[":
            stack.append((x, y, heading))
        elif ch == "]":
            if not stack:
                continue
            commit()
            x, y, heading = stack.pop()
            current = [(x, y)]

    commit()
    if result.subpaths:
        # The origin always counts towards the bounds
        arrays = [np.asarray(sp, dtype=np.float64) for sp in result.subpaths]
        points = np.vstack([np.zeros((1, 2))] + arrays)
        result.min_x, result.min_y, result.max_x, result.max_y = bbox(points)
        result.length = sum(polyline_length(a) for a in arrays)
    return result
