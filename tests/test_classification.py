import itertools
from types import MappingProxyType

import pytest

from diploma_registry.core.classification import (
    calculate_degree_classification,
    get_classification_color,
    validate_all_marks_assigned,
    validate_total_credits,
)
from diploma_registry.schemas.classification import WeightedMark


def _single(mark: float):
    return calculate_degree_classification([{"mark": mark, "credits": 1}])


def test_empty_marks_short_circuit():
    result = calculate_degree_classification([])
    assert result.model_dump() == {
        "average_mark": 0,
        "classification": "N/A",
        "classification_full": "No marks available",
    }


@pytest.mark.parametrize(
    "mark, code, full",
    [
        (100, "1st", "First Class Honours"),
        (70, "1st", "First Class Honours"),
        (69.99, "2:1", "Upper Second Class Honours"),
        (60, "2:1", "Upper Second Class Honours"),
        (59.99, "2:2", "Lower Second Class Honours"),
        (50, "2:2", "Lower Second Class Honours"),
        (49.99, "3rd", "Third Class Honours"),
        (40, "3rd", "Third Class Honours"),
        (39.99, "Fail", "Fail"),
        (0, "Fail", "Fail"),
    ],
)
def test_band_boundaries(mark, code, full):
    result = _single(mark)
    assert result.classification == code
    assert result.classification_full == full


def test_average_rounded_to_two_places():
    assert _single(66.666).average_mark == 66.67
    assert _single(66.664).average_mark == 66.66


def test_weighted_average_uses_credits():
    result = calculate_degree_classification(
        [
            {"mark": 80, "credits": 20},
            {"mark": 50, "credits": 10},
        ]
    )
    # (80*20 + 50*10) / 30
    assert result.average_mark == 70.0
    assert result.classification == "1st"


def test_average_bounded_by_inputs():
    cases = [
        [(72, 15), (41, 30), (58, 15)],
        [(10, 1), (90, 119)],
        [(55.5, 20), (55.5, 40)],
        [(0, 60), (100, 60), (33.3, 20)],
    ]
    for case in cases:
        marks = [{"mark": m, "credits": c} for m, c in case]
        avg = calculate_degree_classification(marks).average_mark
        lo = min(m for m, _ in case)
        hi = max(m for m, _ in case)
        assert lo <= avg <= hi


def test_order_does_not_matter():
    marks = [
        WeightedMark(module_id=1, mark=64, credits=30),
        WeightedMark(module_id=2, mark=71, credits=15),
        WeightedMark(module_id=3, mark=52.5, credits=15),
        WeightedMark(module_id=4, mark=60, credits=60),
    ]
    expected = calculate_degree_classification(marks)
    for perm in itertools.permutations(marks):
        assert calculate_degree_classification(list(perm)) == expected


def test_accepts_attribute_records():
    marks = [WeightedMark(module_id="m1", mark=45, credits=10)]
    result = calculate_degree_classification(marks)
    assert result.average_mark == 45
    assert result.classification == "3rd"


def test_accepts_read_only_mappings():
    marks = [
        MappingProxyType({"module_id": "m1", "mark": 80, "credits": 20}),
        MappingProxyType({"module_id": "m2", "mark": 50, "credits": 10}),
    ]
    assert calculate_degree_classification(marks).average_mark == 70
    assert validate_total_credits(marks, 30).is_valid is True
    result = validate_all_marks_assigned([MappingProxyType({"id": "m2"})], marks)
    assert result.is_valid is True


def test_zero_total_credits_averages_to_zero():
    result = calculate_degree_classification([{"mark": 85, "credits": 0}])
    assert result.average_mark == 0
    assert result.classification == "Fail"


def test_out_of_range_input_is_not_rejected():
    # negative weights skew the average but never raise
    result = calculate_degree_classification(
        [{"mark": 80, "credits": 10}, {"mark": 50, "credits": -5}]
    )
    assert result.average_mark == 110
    assert result.classification == "1st"


def test_inputs_not_mutated():
    marks = [{"mark": 61, "credits": 10}, {"mark": 49, "credits": 20}]
    snapshot = [dict(m) for m in marks]
    calculate_degree_classification(marks)
    validate_total_credits(marks, 30)
    assert marks == snapshot


@pytest.mark.parametrize(
    "code, color",
    [
        ("1st", "gold"),
        ("2:1", "blue"),
        ("2:2", "silver"),
        ("3rd", "bronze"),
        ("Fail", "red"),
        ("N/A", "gray"),
        ("anything-else", "gray"),
        ("", "gray"),
    ],
)
def test_classification_color(code, color):
    assert get_classification_color(code) == color


def test_all_marks_assigned():
    modules = [{"id": "m1"}, {"id": "m2"}, {"id": "m3"}]
    marks = [
        {"module_id": "m3", "mark": 40},
        {"module_id": "m1", "mark": 70},
        {"module_id": "m2", "mark": 55},
    ]
    result = validate_all_marks_assigned(modules, marks)
    assert result.is_valid is True
    assert result.missing_modules == []


def test_removing_a_mark_reports_that_module():
    modules = [{"id": "m1"}, {"id": "m2"}, {"id": "m3"}]
    marks = [{"module_id": m["id"], "mark": 60} for m in modules]

    for i, module in enumerate(modules):
        partial = marks[:i] + marks[i + 1 :]
        result = validate_all_marks_assigned(modules, partial)
        assert result.is_valid is False
        assert result.missing_modules == [module["id"]]


def test_missing_modules_follow_curriculum_order():
    modules = [{"id": 5}, {"id": 2}, {"id": 9}, {"id": 1}]
    result = validate_all_marks_assigned(modules, [{"module_id": 2, "mark": 50}])
    assert result.missing_modules == [5, 9, 1]


def test_marks_for_extra_modules_are_ignored():
    result = validate_all_marks_assigned(
        [{"id": 1}],
        [{"module_id": 1, "mark": 50}, {"module_id": 99, "mark": 50}],
    )
    assert result.is_valid is True


@pytest.mark.parametrize(
    "credits, required, total, difference",
    [
        ([20, 10], 30, 30, 0),
        ([20], 30, 20, 10),
        ([20, 10, 15], 30, 45, -15),
        ([], 120, 0, 120),
    ],
)
def test_total_credits(credits, required, total, difference):
    result = validate_total_credits([{"credits": c} for c in credits], required)
    assert result.total_credits == total
    assert result.difference == difference
    assert result.difference == required - result.total_credits
    assert result.is_valid is (difference == 0)


def test_end_to_end_scenario():
    modules = [{"id": "m1", "credits": 20}, {"id": "m2", "credits": 10}]
    marks = [
        {"module_id": "m1", "mark": 80, "credits": 20},
        {"module_id": "m2", "mark": 50, "credits": 10},
    ]

    result = calculate_degree_classification(marks)
    assert result.average_mark == 70.00
    assert result.classification == "1st"

    assert validate_all_marks_assigned(modules, marks).is_valid is True

    credits = validate_total_credits(marks, 30)
    assert credits.is_valid is True
    assert credits.difference == 0
