"""Where an infinite line crosses the artboard edges."""

from __future__ import annotations

from gridlines.utils.geometry import Direction, Point, Rectangle


def intersect(
    point: Point,
    direction: Direction,
    rect: Rectangle,
    boundary_eps: float = 0.0,
) -> list[Point]:
    """Boundary crossings of the line ``point + t * direction``.

    The vertical sides are solved when dx != 0 and the horizontal sides when
    dy != 0; both branches always run, so a line through a corner reports
    that corner twice. Intervals are closed, widened by ``boundary_eps``.
    """
    x0, y0 = point
    dx, dy = direction
    if dx == 0 and dy == 0:
        raise ValueError("Cannot clip a line with zero direction")

    x1, y1, x2, y2 = rect.left, rect.top, rect.right, rect.bottom
    crossings: list[Point] = []

    if dx != 0:
        y_at_x1 = y0 + (x1 - x0) / dx * dy
        y_at_x2 = y0 + (x2 - x0) / dx * dy
        if y2 - boundary_eps <= y_at_x1 <= y1 + boundary_eps:
            crossings.append(Point(x1, y_at_x1))
        if y2 - boundary_eps <= y_at_x2 <= y1 + boundary_eps:
            crossings.append(Point(x2, y_at_x2))

    if dy != 0:
        x_at_y1 = x0 + (y1 - y0) / dy * dx
        x_at_y2 = x0 + (y2 - y0) / dy * dx
        if x1 - boundary_eps <= x_at_y1 <= x2 + boundary_eps:
            crossings.append(Point(x_at_y1, y1))
        if x1 - boundary_eps <= x_at_y2 <= x2 + boundary_eps:
            crossings.append(Point(x_at_y2, y2))

    return crossings
