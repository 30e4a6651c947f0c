"""
Utility functions for game mechanics
"""

from __future__ import annotations
import colorsys
import math
from typing import Tuple


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def normalize(x: float, y: float, eps: float = 1e-8) -> Tuple[float, float]:
    """Normalize a vector to unit length; degenerate vectors map to (0, 0)"""
    l = math.hypot(x, y)
    if l < eps:
        return 0.0, 0.0
    return x / l, y / l


def rects_overlap(a, b) -> bool:
    """Axis-aligned overlap of two objects exposing x, y, width, height"""
    return (a.x < b.x + b.width and a.x + a.width > b.x and
            a.y < b.y + b.height and a.y + a.height > b.y)


def circle_collide(x1, y1, r1, x2, y2, r2) -> bool:
    """Strict circle overlap (touching circles do not collide)"""
    dx = x1 - x2
    dy = y1 - y2
    rr = r1 + r2
    return (dx * dx + dy * dy) < (rr * rr)


def point_in_rect(px: float, py: float, x: float, y: float, w: float, h: float) -> bool:
    return x <= px <= x + w and y <= py <= y + h


def cubic_bezier(p0, p1, p2, p3, t: float) -> Tuple[float, float]:
    """Point on a cubic Bezier curve at parameter t"""
    u = 1.0 - t
    a, b, c, d = u * u * u, 3 * u * u * t, 3 * u * t * t, t * t * t
    return (a * p0[0] + b * p1[0] + c * p2[0] + d * p3[0],
            a * p0[1] + b * p1[1] + c * p2[1] + d * p3[1])


def hsl(hue: float, saturation: float, lightness: float) -> Tuple[int, int, int]:
    """CSS-style hsl (degrees, percent, percent) to an RGB byte tuple"""
    r, g, b = colorsys.hls_to_rgb((hue % 360) / 360.0, lightness / 100.0, saturation / 100.0)
    return int(round(r * 255)), int(round(g * 255)), int(round(b * 255))
