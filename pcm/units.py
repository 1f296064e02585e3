"""
Display unit conversion. Applied only to finished (rounded) base values;
nothing here is ever fed back into the physics or pattern code.
"""
from typing import List

from . import config as cfg
from .pattern import CurveKind, PatternPoint

# unit -> (factor from imperial base, decimals shown)
_METRIC = {
    "weight": (cfg.LB_TO_KG, 1),
    "length": (cfg.FT_TO_M, 2),
    "speed": (cfg.FT_TO_M, 2),
}


def to_metric(value: float, unit: str) -> float:
    """Convert an imperial base value to metric, rounded the way it is displayed."""
    try:
        factor, ndigits = _METRIC[unit]
    except KeyError:
        raise ValueError(f"Unknown unit kind {unit!r}, expected one of {sorted(_METRIC)}") from None
    return round(value * factor, ndigits)


def format_speed(speed_fps: float, metric: bool = False) -> str:
    if metric:
        return f"{to_metric(speed_fps, 'speed'):.2f} m/s"
    return f"{speed_fps:.1f} ft/s"


def format_length(length_ft: float, metric: bool = False) -> str:
    if metric:
        return f"{to_metric(length_ft, 'length'):.2f} m"
    return f"{length_ft:.2f} ft"


def format_weight(weight_lb: float, metric: bool = False) -> str:
    if metric:
        return f"{to_metric(weight_lb, 'weight'):.1f} kg"
    return f"{weight_lb:g} lbs"


def length_unit(metric: bool = False) -> str:
    return "m" if metric else "ft"


def convert_pattern(points: List[PatternPoint], metric: bool = False) -> List[PatternPoint]:
    """Return the pattern expressed in the display unit system.

    Imperial returns the points unchanged. Metric converts each rounded base
    coordinate and rewrites the reference label from its numeric value.
    """
    if not metric:
        return list(points)

    converted = []
    for p in points:
        if p.kind is CurveKind.REFERENCE_LABEL and p.value is not None:
            width_m = to_metric(p.value, "length")
            converted.append(PatternPoint(
                to_metric(p.x, "length"), to_metric(p.y, "length"), p.kind,
                label=f"Top Width: {width_m:.2f}",
                value=width_m,
            ))
        else:
            converted.append(PatternPoint(
                to_metric(p.x, "length"), to_metric(p.y, "length"), p.kind,
                label=p.label, value=p.value,
            ))
    return converted
