"""Electric fence wires, voltage at crossings, and paint-brush coverage."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

Wire = tuple[int, int, int, int]
Point = tuple[int, int]


def find_intersection(wire1: Sequence[int], wire2: Sequence[int]) -> Point | None:
    """Return where a vertical and a horizontal wire cross, or None."""
    x1, y1, x2, y2 = wire1
    x3, y3, x4, y4 = wire2
    if x1 == x2 and y3 == y4:
        if min(x3, x4) <= x1 <= max(x3, x4) and min(y1, y2) <= y3 <= max(y1, y2):
            return (x1, y3)
    elif x3 == x4 and y1 == y2:
        if min(x1, x2) <= x3 <= max(x1, x2) and min(y3, y4) <= y1 <= max(y3, y4):
            return (x3, y1)
    return None


def fence_intersections(wires: Iterable[Sequence[int]]) -> dict[Point, set[Wire]]:
    """Map each crossing point to the set of wires that meet there, by point order."""
    segments: list[Wire] = [tuple(wire) for wire in wires]  # type: ignore[misc]
    found: dict[Point, set[Wire]] = {}
    for i, first in enumerate(segments):
        for second in segments[i + 1 :]:
            point = find_intersection(first, second)
            if point is not None:
                found.setdefault(point, set()).update((first, second))
    return dict(sorted(found.items()))


def _wire_length(wire: Sequence[int]) -> int:
    return abs(wire[2] - wire[0]) + abs(wire[3] - wire[1])


def calculate_voltage(intersections: Mapping[Point, Iterable[Sequence[int]]]) -> int:
    """Sum, over crossings, the wire count times the shortest wire length there."""
    total = 0
    for wires in intersections.values():
        wires = list(wires)
        total += len(wires) * min(_wire_length(wire) for wire in wires)
    return total


def parse_animals(text: str) -> dict[str, int]:
    """Parse space-separated ``name:resistance`` tokens into a dict."""
    animals: dict[str, int] = {}
    for token in text.split(" "):
        name, sep, resistance = token.partition(":")
        if sep:
            animals[name] = int(resistance)
    return animals


def fence_report(
    wires: Iterable[Sequence[int]], animals: Mapping[str, int], touching: str
) -> tuple[bool, float]:
    """Return whether the touching animal dies and the share of animals that would.

    An animal missing from the table counts with resistance 0 and joins it.
    """
    voltage = calculate_voltage(fence_intersections(wires))
    table = dict(animals)
    table.setdefault(touching, 0)
    dies = voltage > table[touching]
    dying = sum(1 for resistance in table.values() if voltage > resistance)
    return dies, dying / len(table)


def brush_presses(vertices: Iterable[Sequence[int]], brush: int) -> int:
    """Return square brush presses needed to cover the polygon's bounding box."""
    points = [tuple(vertex) for vertex in vertices]
    if not points:
        raise ValueError("at least one vertex is required")
    if brush <= 0:
        raise ValueError("brush size must be positive")
    xs = [x for x, _ in points]
    ys = [y for _, y in points]
    width = max(xs) - min(xs)
    height = max(ys) - min(ys)
    return -(-width // brush) * -(-height // brush)