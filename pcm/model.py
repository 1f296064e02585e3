"""Core modeling helpers tying the physics and pattern code to a parameter set.

The runner, plots and sizing script all go through these so that a parameter
change is always recomputed the same way.

Functions
---------
CanopyParameters.from_config() -> CanopyParameters
    Parameter set from the values in `pcm/config.py`.

check_parameters(params) -> list[str]
    Advisory warnings (vent not smaller than the canopy, few cells, values
    outside the typical input ranges). Hard errors stay in the core functions.

compute_descent(params) -> dict
    Air density, canopy areas and terminal velocity for one parameter set.

compute_profile(params, altitudes_ft) -> pandas.DataFrame
    Descent rate across altitudes with weight and geometry held fixed.

summarize_profile(df) -> dict
    Slowest and fastest descent in a profile.

pattern_frame(points) -> pandas.DataFrame
    Gore pattern as a table (x, y, kind, label).

Notes
-----
Everything is recomputed in full on each call; nothing is memoized because
every input can change between calls.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from numbers import Integral, Real
from typing import Dict, Iterable, List
import numpy as np
import pandas as pd

from . import config as cfg
from .physics import air_density, canopy_areas, terminal_velocity
from .pattern import PatternPoint, generate_gore_panel


@dataclass(frozen=True)
class CanopyParameters:
    weight_lb: float
    main_diameter_ft: float
    vent_diameter_ft: float
    cell_count: int
    seam_allowance_ft: float
    altitude_ft: float

    @classmethod
    def from_config(cls) -> CanopyParameters:
        return cls(
            weight_lb=cfg.WEIGHT_LB,
            main_diameter_ft=cfg.MAIN_DIAMETER_FT,
            vent_diameter_ft=cfg.VENT_DIAMETER_FT,
            cell_count=cfg.CELL_COUNT,
            seam_allowance_ft=cfg.SEAM_ALLOWANCE_FT,
            altitude_ft=cfg.ALTITUDE_FT,
        )

    def with_altitude(self, altitude_ft: float) -> CanopyParameters:
        return replace(self, altitude_ft=altitude_ft)


def check_parameters(params: CanopyParameters) -> List[str]:
    """Return human readable warnings for a parameter set (empty when clean)."""
    warnings: List[str] = []
    if params.vent_diameter_ft >= params.main_diameter_ft:
        warnings.append(
            f"Vent diameter {params.vent_diameter_ft} ft is not smaller than main diameter "
            f"{params.main_diameter_ft} ft: gore panel bulge is inverted and descent speed is undefined"
        )
    cell_count_is_int = isinstance(params.cell_count, Integral) and not isinstance(params.cell_count, bool)
    if not cell_count_is_int:
        warnings.append(f"Cell count {params.cell_count!r} is not an integer")
    elif params.cell_count < 3:
        warnings.append(f"Cell count {params.cell_count} is below 3; a round canopy needs at least 3 gores")
    if params.altitude_ft < 0:
        warnings.append(f"Altitude {params.altitude_ft} ft is below sea level; density is extrapolated")

    ranges = getattr(cfg, "INPUT_RANGES", {})
    for name, (lo, hi) in ranges.items():
        value = getattr(params, name, None)
        if isinstance(value, bool) or not isinstance(value, Real):
            continue
        if not lo <= value <= hi:
            warnings.append(f"{name}={value} is outside the typical range [{lo}, {hi}]")
    return warnings


def compute_descent(params: CanopyParameters) -> Dict[str, float]:
    """Compute single-altitude descent figures.

    Raises DomainError when the vent is not smaller than the canopy and
    InvalidParameter for negative weight or diameters.
    """
    v_fps = terminal_velocity(
        params.weight_lb, params.main_diameter_ft, params.vent_diameter_ft, params.altitude_ft
    )
    areas = canopy_areas(params.main_diameter_ft, params.vent_diameter_ft)
    return {
        "altitude_ft": params.altitude_ft,
        "rho_slug_ft3": air_density(params.altitude_ft),
        "main_area_ft2": areas["main_area_ft2"],
        "vent_area_ft2": areas["vent_area_ft2"],
        "effective_area_ft2": areas["effective_area_ft2"],
        "descent_fps": v_fps,
        "descent_mps": v_fps * cfg.FT_TO_M,
    }


def compute_profile(params: CanopyParameters, altitudes_ft: Iterable[float]) -> pd.DataFrame:
    rows = [compute_descent(params.with_altitude(float(h))) for h in altitudes_ft]
    return pd.DataFrame(rows)


def profile_altitudes() -> np.ndarray:
    """Altitudes of the configured sweep, end point included."""
    start, stop, step = cfg.PROFILE_ALTITUDES_FT
    return np.arange(start, stop + step / 2, step)


def summarize_profile(df: pd.DataFrame) -> Dict[str, float]:
    idx_slow = df["descent_fps"].idxmin()
    idx_fast = df["descent_fps"].idxmax()
    return {
        "min_descent_fps": float(df.loc[idx_slow, "descent_fps"]),
        "min_descent_altitude_ft": float(df.loc[idx_slow, "altitude_ft"]),
        "max_descent_fps": float(df.loc[idx_fast, "descent_fps"]),
        "max_descent_altitude_ft": float(df.loc[idx_fast, "altitude_ft"]),
    }


def compute_pattern(params: CanopyParameters) -> List[PatternPoint]:
    return generate_gore_panel(
        params.main_diameter_ft, params.vent_diameter_ft, params.cell_count, params.seam_allowance_ft
    )


def pattern_frame(points: Iterable[PatternPoint]) -> pd.DataFrame:
    rows = [
        {"x": p.x, "y": p.y, "kind": p.kind.value, "label": p.label}
        for p in points
    ]
    return pd.DataFrame(rows, columns=["x", "y", "kind", "label"])
