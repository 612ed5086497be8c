"""Internal Bezier curve flattening algorithms.

This is an internal module used by the DXF exporter when curves are
flattened instead of being approximated by their control polygon.
Not intended for public use.
"""

import math

from genfront.domain import Point

# Guards against runaway recursion on degenerate tolerances
MAX_DEPTH = 16


def _mid(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2, (a.y + b.y) / 2)


def flatten_quadratic(points: list[Point], tolerance: float, depth: int = 0) -> list[Point]:
    """Flatten a quadratic Bezier curve using recursive subdivision.

    Args:
        points: List of 3 control points [p0, p1, p2]
        tolerance: Maximum distance from true curve
        depth: Current recursion depth

    Returns:
        List of points approximating the curve, both endpoints included
    """
    p0, p1, p2 = points

    # Calculate actual curve midpoint (at t=0.5)
    curve_mid = Point(
        0.25 * p0.x + 0.5 * p1.x + 0.25 * p2.x,
        0.25 * p0.y + 0.5 * p1.y + 0.25 * p2.y,
    )
    chord_mid = _mid(p0, p2)

    distance = math.hypot(curve_mid.x - chord_mid.x, curve_mid.y - chord_mid.y)
    if distance <= tolerance or depth >= MAX_DEPTH:
        return [p0, p2]

    left = flatten_quadratic([p0, _mid(p0, p1), curve_mid], tolerance, depth + 1)
    right = flatten_quadratic([curve_mid, _mid(p1, p2), p2], tolerance, depth + 1)

    # Combine, avoiding duplicate midpoint
    return left[:-1] + right


def flatten_cubic(points: list[Point], tolerance: float, depth: int = 0) -> list[Point]:
    """Flatten a cubic Bezier curve using recursive subdivision.

    Uses De Casteljau's algorithm for subdivision.

    Args:
        points: List of 4 control points [p0, p1, p2, p3]
        tolerance: Maximum distance from true curve
        depth: Current recursion depth

    Returns:
        List of points approximating the curve, both endpoints included
    """
    p0, p1, p2, p3 = points

    q1 = _mid(p0, p1)
    q2 = _mid(p1, p2)
    q3 = _mid(p2, p3)
    r1 = _mid(q1, q2)
    r2 = _mid(q2, q3)
    curve_mid = _mid(r1, r2)
    chord_mid = _mid(p0, p3)

    distance = math.hypot(curve_mid.x - chord_mid.x, curve_mid.y - chord_mid.y)
    if distance <= tolerance or depth >= MAX_DEPTH:
        return [p0, p3]

    left = flatten_cubic([p0, q1, r1, curve_mid], tolerance, depth + 1)
    right = flatten_cubic([curve_mid, r2, q3, p3], tolerance, depth + 1)

    # Combine, avoiding duplicate midpoint
    return left[:-1] + right
