"""Direction from which a listener hears a broadcast."""

import math

from zappy.resources import Direction

_SECTORS = (
    (0, 20, 1),
    (20, 70, 2),
    (70, 110, 3),
    (110, 160, 4),
    (160, 200, 5),
    (200, 250, 6),
    (250, 290, 7),
    (290, 340, 8),
    (340, 360, 1),
)

_FACING_STEP = {
    Direction.NORD: (0, -1),
    Direction.EST: (1, 0),
    Direction.OUEST: (-1, 0),
    Direction.SUD: (0, 1),
}


def _trunc_div(numerator, denominator):
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def _angle(source, target, size, facing):
    sx, sy = source
    dx, dy = target
    width, height = size
    nx = width + dx if sx - dx > width // 2 else dx
    ny = height + dy if sy - dy > height // 2 else dy
    fx, fy = _FACING_STEP[facing]
    vx, vy = dx + fx, dy + fy
    dot = (sx - nx) * (vx - nx) + (sy - ny) * (vy - ny)
    norm_ab = math.isqrt((sx - nx) ** 2 + (sy - ny) ** 2)
    norm_ac = math.isqrt((vx - nx) ** 2 + (vy - ny) ** 2)
    cosine = _trunc_div(dot, norm_ab * norm_ac)
    if not -1 <= cosine <= 1:
        return None
    return int(math.acos(cosine))


def sound_direction(source, target, size, facing):
    """Sector number a listener at ``target`` facing ``facing`` hears ``source`` on.

    ``source`` and ``target`` are (x, y) positions, ``size`` is (width, height).
    Returns 0 when both stand on the same tile.
    """
    if tuple(source) == tuple(target):
        return 0
    facing = Direction(facing)
    angle = _angle(tuple(source), tuple(target), tuple(size), facing)
    if angle is None:
        return 0
    weight = 0
    for low, high, base in _SECTORS:
        if low <= angle <= high:
            weight = base + 2 * facing
    return weight