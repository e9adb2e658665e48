"""Typed builder for SVG path ``d`` strings."""

from __future__ import annotations

from sigma_avatars.svg.serializer import DEFAULT_PRECISION, format_number


class PathBuilder:
    """Accumulates absolute path commands and emits a compact ``d`` attribute.

        d = PathBuilder().move_to(0, 0).quad_to(5, 10, 10, 0).close().build()
    """

    def __init__(self, precision: int = DEFAULT_PRECISION) -> None:
        self._precision = precision
        self._parts: list[str] = []

    def _cmd(self, op: str, *values: float) -> PathBuilder:
        nums = " ".join(format_number(v, self._precision) for v in values)
        self._parts.append(f"{op} {nums}" if nums else op)
        return self

    def move_to(self, x: float, y: float) -> PathBuilder:
        return self._cmd("M", x, y)

    def line_to(self, x: float, y: float) -> PathBuilder:
        return self._cmd("L", x, y)

    def quad_to(self, cx: float, cy: float, x: float, y: float) -> PathBuilder:
        return self._cmd("Q", cx, cy, x, y)

    def smooth_quad_to(self, x: float, y: float) -> PathBuilder:
        return self._cmd("T", x, y)

    def cubic_to(self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float) -> PathBuilder:
        return self._cmd("C", c1x, c1y, c2x, c2y, x, y)

    def smooth_cubic_to(self, c2x: float, c2y: float, x: float, y: float) -> PathBuilder:
        return self._cmd("S", c2x, c2y, x, y)

    def arc_to(
        self,
        rx: float,
        ry: float,
        rotation: float,
        large_arc: bool,
        sweep: bool,
        x: float,
        y: float,
    ) -> PathBuilder:
        return self._cmd("A", rx, ry, rotation, int(large_arc), int(sweep), x, y)

    def close(self) -> PathBuilder:
        return self._cmd("Z")

    def polyline(self, points: list[tuple[float, float]]) -> PathBuilder:
        """``M`` to the first point, ``L`` through the rest."""
        if not points:
            return self
        self.move_to(*points[0])
        for x, y in points[1:]:
            self.line_to(x, y)
        return self

    def __len__(self) -> int:
        return len(self._parts)

    def build(self) -> str:
        return " ".join(self._parts)


def quad_path(x1: float, y1: float, cx: float, cy: float, x2: float, y2: float) -> str:
    """Single quadratic curve from (x1, y1) to (x2, y2)."""
    return PathBuilder().move_to(x1, y1).quad_to(cx, cy, x2, y2).build()
