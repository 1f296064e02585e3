"""Gore panel cutting pattern and top-view gore layout.

A round canopy is split into ``cell_count`` equal gores. Flattened, each gore
is drawn here as a sinusoidal bulge running along the panel's long axis, with
a parallel seam-allowance curve offset along the local normal. The result is a
list of ``PatternPoint`` in imperial base units, rounded for display.

Functions
---------
generate_gore_panel(main_diameter_ft, vent_diameter_ft, cell_count, seam_allowance_ft)
    Outline + seam offset samples followed by one labelled reference point.

gore_dimensions(main_diameter_ft, vent_diameter_ft, cell_count) -> dict
    Top/bottom widths and height of a single gore.

top_view_layout(main_diameter_ft, vent_diameter_ft, cell_count, radius) -> dict
    Vent circle radius and seam line end points for the top-down schematic.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from numbers import Integral
from typing import Dict, List, Optional
import math

import numpy as np
import pandas as pd

from . import config as cfg
from .errors import InvalidParameter


class CurveKind(Enum):
    """Which curve of the pattern a point belongs to."""

    MAIN_OUTLINE = "main"
    SEAM_OFFSET = "seam"
    REFERENCE_LABEL = "reference"


@dataclass(frozen=True)
class PatternPoint:
    x: float
    y: float
    kind: CurveKind
    label: Optional[str] = None
    # Numeric measurement behind the label (base units), reference points only
    value: Optional[float] = None


def _check_geometry(main_diameter_ft: float, vent_diameter_ft: float, cell_count: int) -> None:
    if isinstance(cell_count, bool) or not isinstance(cell_count, Integral):
        raise InvalidParameter(f"Cell count must be an integer, got {cell_count!r}")
    if cell_count < 1:
        raise InvalidParameter(f"Cell count must be at least 1, got {cell_count}")
    if main_diameter_ft < 0 or vent_diameter_ft < 0:
        raise InvalidParameter(
            f"Diameters must be non-negative (main={main_diameter_ft}, vent={vent_diameter_ft})"
        )


def gore_dimensions(main_diameter_ft: float, vent_diameter_ft: float, cell_count: int) -> Dict[str, float]:
    """Return the flat dimensions (ft) of one gore.

    Widths are the skirt and vent circumferences shared equally between cells;
    the height is the radial distance from vent edge to skirt. A vent at least
    as large as the canopy gives a zero or negative height.
    """
    _check_geometry(main_diameter_ft, vent_diameter_ft, cell_count)
    main_circumference = math.pi * main_diameter_ft
    vent_circumference = math.pi * vent_diameter_ft
    return {
        "width_bottom_ft": main_circumference / cell_count,
        "width_top_ft": vent_circumference / cell_count,
        "height_ft": (main_diameter_ft - vent_diameter_ft) / 2,
    }


def generate_gore_panel(
    main_diameter_ft: float,
    vent_diameter_ft: float,
    cell_count: int,
    seam_allowance_ft: float,
) -> List[PatternPoint]:
    """Build the flattened gore outline, its seam offset and a reference label.

    The outline is sampled at t = i / PATTERN_SAMPLES for i = 0..PATTERN_SAMPLES:
        x(t) = t * width_bottom
        y(t) = height * sin(pi t)
    The seam curve sits seam_allowance_ft away along the normal, whose angle is
    atan2(dy/dt, dx/dt) + pi/2 with dx/dt = width_bottom and
    dy/dt = height * pi * cos(pi t).

    Points come back as main/seam pairs per sample, then a single
    REFERENCE_LABEL point at the origin carrying the top width. Every
    coordinate is rounded to DISPLAY_DECIMALS.
    """
    if seam_allowance_ft < 0:
        raise InvalidParameter(f"Seam allowance must be non-negative, got {seam_allowance_ft}")

    dims = gore_dimensions(main_diameter_ft, vent_diameter_ft, cell_count)
    width_bottom = dims["width_bottom_ft"]
    height = dims["height_ft"]
    ndigits = cfg.DISPLAY_DECIMALS

    t = np.linspace(0.0, 1.0, cfg.PATTERN_SAMPLES + 1)
    x = t * width_bottom
    y = height * np.sin(np.pi * t)

    dx = np.full_like(t, width_bottom)
    dy = height * np.pi * np.cos(np.pi * t)
    normal_angle = np.arctan2(dy, dx) + np.pi / 2

    x_seam = x + seam_allowance_ft * np.cos(normal_angle)
    y_seam = y + seam_allowance_ft * np.sin(normal_angle)

    points: List[PatternPoint] = []
    for xm, ym, xs, ys in zip(x, y, x_seam, y_seam):
        points.append(PatternPoint(round(float(xm), ndigits), round(float(ym), ndigits), CurveKind.MAIN_OUTLINE))
        points.append(PatternPoint(round(float(xs), ndigits), round(float(ys), ndigits), CurveKind.SEAM_OFFSET))

    width_top = round(dims["width_top_ft"], ndigits)
    points.append(PatternPoint(
        0.0, 0.0, CurveKind.REFERENCE_LABEL,
        label=f"Top Width: {width_top:.{ndigits}f}",
        value=width_top,
    ))
    return points


def pattern_curve(points: List[PatternPoint], kind: CurveKind) -> pd.DataFrame:
    """Return the x/y columns of one curve, in emission order."""
    rows = [{"x": p.x, "y": p.y} for p in points if p.kind is kind]
    return pd.DataFrame(rows, columns=["x", "y"])


def top_view_layout(
    main_diameter_ft: float,
    vent_diameter_ft: float,
    cell_count: int,
    radius: Optional[float] = None,
) -> Dict[str, object]:
    """Layout for the top-down canopy schematic, scaled so the skirt has ``radius``.

    Returns:
        radius        : skirt circle radius (drawing units)
        vent_radius   : vent circle radius, vent/main * radius
        seams         : DataFrame, one row per gore seam with columns
                        gore, angle_deg, x_outer, y_outer, x_inner, y_inner,
                        x_label, y_label
    """
    _check_geometry(main_diameter_ft, vent_diameter_ft, cell_count)
    if main_diameter_ft == 0:
        raise InvalidParameter("Main diameter must be positive to scale the top view")
    radius = radius if radius is not None else cfg.TOP_VIEW_RADIUS

    vent_radius = (vent_diameter_ft / main_diameter_ft) * radius
    label_radius = cfg.TOP_VIEW_LABEL_FRACTION * radius

    angles_deg = np.arange(cell_count) * 360.0 / cell_count
    angles = np.radians(angles_deg)
    cos_a = np.cos(angles)
    sin_a = np.sin(angles)

    seams = pd.DataFrame({
        "gore": np.arange(1, cell_count + 1),
        "angle_deg": angles_deg,
        "x_outer": cos_a * radius,
        "y_outer": sin_a * radius,
        "x_inner": cos_a * vent_radius,
        "y_inner": sin_a * vent_radius,
        "x_label": cos_a * label_radius,
        "y_label": sin_a * label_radius,
    })
    return {
        "radius": radius,
        "vent_radius": vent_radius,
        "seams": seams,
    }
