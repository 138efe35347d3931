import pytest

from algoset.fence import (
    brush_presses,
    calculate_voltage,
    fence_intersections,
    fence_report,
    find_intersection,
    parse_animals,
)

VERTICAL = (0, 0, 0, 10)
HORIZONTAL = (-5, 5, 5, 5)


def test_find_intersection_both_orders():
    assert find_intersection(VERTICAL, HORIZONTAL) == (0, 5)
    assert find_intersection(HORIZONTAL, VERTICAL) == (0, 5)


def test_find_intersection_none_for_parallel_or_apart():
    assert find_intersection(VERTICAL, (3, 0, 3, 10)) is None
    assert find_intersection(VERTICAL, (1, 5, 5, 5)) is None


def test_fence_intersections_groups_wires():
    result = fence_intersections([VERTICAL, HORIZONTAL, (10, 0, 10, 1)])
    assert result == {(0, 5): {VERTICAL, HORIZONTAL}}


def test_fence_intersections_sorted_points():
    wires = [(0, 0, 0, 10), (4, 0, 4, 10), (-1, 2, 6, 2), (-1, 8, 6, 8)]
    result = fence_intersections(wires)
    assert list(result) == sorted(result)
    assert len(result) == 4


def test_calculate_voltage_uses_shortest_wire():
    short = (0, 0, 0, 3)
    long = (-1, 1, 9, 1)
    intersections = {(0, 1): {short, long}}
    assert calculate_voltage(intersections) == 2 * 3


def test_calculate_voltage_empty():
    assert calculate_voltage({}) == 0


def test_parse_animals():
    assert parse_animals("cat:5 dog:30") == {"cat": 5, "dog": 30}
    assert parse_animals("cat:5  junk dog:30") == {"cat": 5, "dog": 30}


def test_parse_animals_bad_number():
    with pytest.raises(ValueError):
        parse_animals("cat:abc")


def test_fence_report_one_of_two_dies():
    voltage = calculate_voltage(fence_intersections([VERTICAL, HORIZONTAL]))
    animals = {"ant": voltage - 1, "ox": voltage + 1}
    assert fence_report([VERTICAL, HORIZONTAL], animals, "ant") == (True, 0.5)
    assert fence_report([VERTICAL, HORIZONTAL], animals, "ox") == (False, 0.5)


def test_fence_report_unknown_animal_joins_table():
    animals = {"ox": 10_000}
    dies, probability = fence_report([VERTICAL, HORIZONTAL], animals, "mouse")
    assert dies is True
    assert probability == 0.5
    assert animals == {"ox": 10_000}


def test_fence_report_no_crossings_nobody_dies():
    assert fence_report([VERTICAL], {"cat": 0}, "cat") == (False, 0.0)


def test_brush_presses_square():
    assert brush_presses([(0, 0), (10, 0), (10, 10), (0, 10)], 5) == 4


@pytest.mark.parametrize("vertices", [[(0, 0), (7, 3)], [(2, -4), (5, 9), (-1, 1)]])
def test_brush_presses_unit_brush_is_area(vertices):
    xs = [x for x, _ in vertices]
    ys = [y for _, y in vertices]
    area = (max(xs) - min(xs)) * (max(ys) - min(ys))
    assert brush_presses(vertices, 1) == area


def test_brush_presses_errors():
    with pytest.raises(ValueError):
        brush_presses([], 3)
    with pytest.raises(ValueError):
        brush_presses([(0, 0), (1, 1)], 0)