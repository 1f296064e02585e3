"""
Plotting utilities for the canopy views. These functions depend on the model but
keep matplotlib-specific code out of the core computations.

Every figure is drawn from freshly computed data in base units; IS_METRIC only
changes the tick values and axis labels.
"""
import os
import pandas as pd

from . import config as cfg
from .model import (
    CanopyParameters,
    compute_pattern,
    compute_profile,
    pattern_frame,
    profile_altitudes,
    summarize_profile,
)
from .pattern import CurveKind, pattern_curve, top_view_layout
from .units import convert_pattern, format_length, format_speed, length_unit


def _import_pyplot(what: str):
    try:
        import matplotlib.pyplot as plt
    except Exception as exc:
        print(f"\n[plot] matplotlib is not available. Install it to see the {what}:")
        print("  python -m pip install matplotlib")
        print(f"  (reason: {exc})")
        return None
    return plt


def _figsize(width: float, height: float):
    scale = 1.5 if getattr(cfg, "ENLARGED_PLOTS", False) else 1.0
    return (width * scale, height * scale)


def _save_and_show(plt, fig, name: str):
    # Optional: save figure
    if getattr(cfg, "SAVE_PLOTS", False):
        try:
            os.makedirs(cfg.PLOTS_DIR, exist_ok=True)
            out_path = os.path.join(cfg.PLOTS_DIR, f"{name}.{cfg.SAVE_FORMAT}")
            fig.savefig(out_path, dpi=cfg.SAVE_DPI, format=cfg.SAVE_FORMAT, bbox_inches="tight")
            print(f"[saved] {out_path}")
        except Exception as exc:
            print(f"[warn] failed to save figure: {exc}")
    if not getattr(cfg, "SHOW_PLOTS", True):
        return
    try:
        plt.show(block=cfg.SHOW_BLOCKING)
        if not cfg.SHOW_BLOCKING:
            plt.pause(0.001)
    except Exception:
        # Be robust to backend quirks on non-blocking shows
        try:
            plt.show()
        except Exception:
            pass


def _export_csv(df: pd.DataFrame, filename: str):
    if not cfg.EXPORT_CSV:
        return
    try:
        df.to_csv(filename, index=False)
        print(f"[saved] {filename}")
    except Exception as exc:
        print(f"[warn] failed to save {filename}: {exc}")


def plot_top_view(params: CanopyParameters):
    """Top-down schematic: skirt and vent circles, one seam line per gore, gore numbers."""
    plt = _import_pyplot("top view")
    if plt is None:
        return None

    layout = top_view_layout(params.main_diameter_ft, params.vent_diameter_ft, params.cell_count)
    radius = layout["radius"]
    seams = layout["seams"]

    fig, ax = plt.subplots(figsize=_figsize(6, 6))
    ax.axhline(0.0, color="#dddddd", linewidth=0.5, zorder=0)
    ax.axvline(0.0, color="#dddddd", linewidth=0.5, zorder=0)

    for _, s in seams.iterrows():
        ax.plot([s["x_outer"], s["x_inner"]], [s["y_outer"], s["y_inner"]], color="black", linewidth=1)
        ax.text(s["x_label"], s["y_label"], str(int(s["gore"])), fontsize=8, ha="center", va="center")

    ax.add_patch(plt.Circle((0.0, 0.0), layout["vent_radius"], facecolor="white", edgecolor="black",
                            linewidth=2, zorder=3))
    ax.add_patch(plt.Circle((0.0, 0.0), radius, fill=False, edgecolor="black", linewidth=2))

    margin = 1.1 * radius
    ax.set_xlim(-margin, margin)
    ax.set_ylim(-margin, margin)
    ax.set_aspect("equal")
    ax.set_axis_off()
    main_label = format_length(params.main_diameter_ft, cfg.IS_METRIC)
    vent_label = format_length(params.vent_diameter_ft, cfg.IS_METRIC)
    ax.set_title(f"Top view: {params.cell_count} cells, D={main_label}, vent={vent_label}")
    fig.tight_layout()

    _save_and_show(plt, fig, "top_view")
    _export_csv(seams, "top_view_seams.csv")
    return fig


def plot_cell_pattern(params: CanopyParameters):
    """Flattened gore panel: outline, seam allowance curve and the top width reference."""
    plt = _import_pyplot("cell pattern")
    if plt is None:
        return None

    points = convert_pattern(compute_pattern(params), cfg.IS_METRIC)
    main = pattern_curve(points, CurveKind.MAIN_OUTLINE)
    seam = pattern_curve(points, CurveKind.SEAM_OFFSET)
    reference = [p for p in points if p.kind is CurveKind.REFERENCE_LABEL]
    units = length_unit(cfg.IS_METRIC)

    fig, ax = plt.subplots(figsize=_figsize(8, 5))
    ax.plot(main["x"], main["y"], color="#2563eb", marker="o", markersize=2.5, linewidth=1.2,
            label="Main pattern")
    ax.plot(seam["x"], seam["y"], color="#dc2626", marker="o", markersize=2.5, linewidth=1.2,
            label="Seam allowance")
    for ref in reference:
        ax.scatter([ref.x], [ref.y], color="#059669", marker="*", s=120, zorder=5, label="Reference points")
        ax.annotate(ref.label, xy=(ref.x, ref.y), xytext=(8, -14), textcoords="offset points",
                    fontsize=8, color="#059669")

    ax.set_title("Cell pattern (one gore, flattened)")
    ax.set_xlabel(f"Width ({units})")
    ax.set_ylabel(f"Height ({units})")
    ax.grid(True, alpha=0.3)
    ax.legend(loc="best", fontsize=8)
    fig.tight_layout()

    _save_and_show(plt, fig, "cell_pattern")
    _export_csv(pattern_frame(points), "cell_pattern.csv")
    return fig


def plot_descent_profile(params: CanopyParameters):
    """Descent rate against altitude for the current weight and geometry."""
    plt = _import_pyplot("descent profile")
    if plt is None:
        return None

    df = compute_profile(params, profile_altitudes())
    summary = summarize_profile(df)
    metric = cfg.IS_METRIC
    alt = df["altitude_ft"] * cfg.FT_TO_M if metric else df["altitude_ft"]
    speed = df["descent_mps"] if metric else df["descent_fps"]
    units = length_unit(metric)

    fig, ax = plt.subplots(figsize=_figsize(8, 5))
    ax.plot(alt, speed, linewidth=2, label="descent rate")

    current = df.loc[(df["altitude_ft"] - params.altitude_ft).abs().idxmin()]
    cur_alt = current["altitude_ft"] * cfg.FT_TO_M if metric else current["altitude_ft"]
    cur_speed = current["descent_mps"] if metric else current["descent_fps"]
    ax.scatter([cur_alt], [cur_speed], color="red", zorder=5, label="nearest to current altitude")
    ax.annotate(format_speed(float(current["descent_fps"]), metric),
                xy=(cur_alt, cur_speed), xytext=(10, -15), textcoords="offset points",
                arrowprops=dict(arrowstyle="->", color="red"), fontsize=8, color="red")

    ax.set_title(f"Descent rate vs altitude ({params.weight_lb:g} lb payload)")
    ax.set_xlabel(f"Altitude ({units})")
    ax.set_ylabel(f"Descent rate ({'m/s' if metric else 'ft/s'})")
    ax.grid(True, alpha=0.3)
    ax.legend(loc="best")
    ax.text(0.98, 0.02,
            f"{format_speed(summary['min_descent_fps'], metric)} .. {format_speed(summary['max_descent_fps'], metric)}",
            transform=ax.transAxes, ha="right", va="bottom", fontsize=9,
            bbox=dict(boxstyle="round", fc="white", ec="gray", alpha=0.7))
    fig.tight_layout()

    _save_and_show(plt, fig, "descent_profile")
    _export_csv(df, "descent_profile.csv")
    return fig
