"""
Axis-aligned collision helpers for Classic Pong
"""

Rect = tuple[int, int, int, int]


def rects_overlap(a: Rect, b: Rect) -> bool:
    """Checks if two (x, y, width, height) rectangles overlap, touching edges included"""
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return ax <= bx + bw and ax + aw >= bx and ay <= by + bh and ay + ah >= by
