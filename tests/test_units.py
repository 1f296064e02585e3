import pytest

from pcm.pattern import CurveKind, PatternPoint, generate_gore_panel
from pcm.units import convert_pattern, format_length, format_speed, format_weight, length_unit, to_metric


def test_to_metric():
    assert to_metric(100.0, "weight") == 45.4
    assert to_metric(20.0, "length") == 6.1
    assert to_metric(12.3839, "speed") == 3.77


def test_to_metric_unknown_unit():
    with pytest.raises(ValueError):
        to_metric(1.0, "temperature")


def test_formatting():
    assert format_speed(12.3839) == "12.4 ft/s"
    assert format_speed(12.3839, metric=True) == "3.77 m/s"
    assert format_length(7.853981) == "7.85 ft"
    assert format_length(20.0, metric=True) == "6.10 m"
    assert format_weight(100.0) == "100 lbs"
    assert format_weight(100.0, metric=True) == "45.4 kg"
    assert length_unit() == "ft"
    assert length_unit(True) == "m"


def test_imperial_pattern_unchanged():
    points = generate_gore_panel(20.0, 1.0, 8, 0.5)
    assert convert_pattern(points) == points


def test_metric_pattern_converts_rounded_values():
    points = [
        PatternPoint(7.85, 0.0, CurveKind.MAIN_OUTLINE),
        PatternPoint(0.0, 0.0, CurveKind.REFERENCE_LABEL, label="Top Width: 0.39", value=0.39),
    ]
    converted = convert_pattern(points, metric=True)
    assert converted[0] == PatternPoint(2.39, 0.0, CurveKind.MAIN_OUTLINE)
    assert converted[1].label == "Top Width: 0.12"
    assert converted[1].value == 0.12
    # Input left untouched
    assert points[0].x == 7.85


def test_metric_pattern_keeps_shape():
    points = generate_gore_panel(20.0, 1.0, 8, 0.5)
    converted = convert_pattern(points, metric=True)
    assert len(converted) == len(points)
    assert [p.kind for p in converted] == [p.kind for p in points]
    peak = max(p.y for p in converted if p.kind is CurveKind.MAIN_OUTLINE)
    assert peak == pytest.approx(9.5 * 0.3048, abs=0.01)
