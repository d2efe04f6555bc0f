"""2D vector helpers over :class:`~roomscan.models.Point`."""

import math

from ...models import Point


def subtract(a: Point, b: Point) -> Point:
    return Point(a.x - b.x, a.y - b.y)


def dot_product(a: Point, b: Point) -> float:
    return a.x * b.x + a.y * b.y


def cross_product(a: Point, b: Point) -> float:
    """Z component of the 3D cross product of two planar vectors."""
    return a.x * b.y - a.y * b.x


def magnitude_squared(v: Point) -> float:
    return v.x * v.x + v.y * v.y


def magnitude(v: Point) -> float:
    return math.sqrt(magnitude_squared(v))


def distance(a: Point, b: Point) -> float:
    return magnitude(subtract(a, b))


def is_finite_point(p: Point) -> bool:
    return math.isfinite(p.x) and math.isfinite(p.y)
