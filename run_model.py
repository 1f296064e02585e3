"""
Structured runner for the Parachute Canopy Model.
- Configuration: pcm/config.py
- Atmosphere and descent rate: pcm/physics.py
- Gore panel pattern and top view layout: pcm/pattern.py
- Display units: pcm/units.py
- Plotting: pcm/plots.py

Edit pcm/config.py and re-run; every value below is recomputed from scratch.
"""
from pcm import config as cfg
from pcm.errors import CanopyError
from pcm.model import (
    CanopyParameters,
    check_parameters,
    compute_descent,
    compute_pattern,
    compute_profile,
    pattern_frame,
    profile_altitudes,
    summarize_profile,
)
from pcm.pattern import gore_dimensions
from pcm.plots import plot_cell_pattern, plot_descent_profile, plot_top_view
from pcm.units import convert_pattern, format_length, format_speed, format_weight, to_metric


def main():
    params = CanopyParameters.from_config()
    metric = cfg.IS_METRIC

    print("\n" + "="*80)
    print("PARACHUTE CANOPY MODEL")
    print("="*80)

    print("\n" + "="*80)
    print("USER INPUT VARIABLES")
    print("="*80)

    print("\nCanopy:")
    print(f"  Payload weight: {format_weight(params.weight_lb, metric)}")
    print(f"  Main diameter: {format_length(params.main_diameter_ft, metric)}")
    print(f"  Vent diameter: {format_length(params.vent_diameter_ft, metric)}")
    print(f"  Cells: {params.cell_count}")
    print(f"  Seam allowance: {format_length(params.seam_allowance_ft, metric)}")
    print(f"  Altitude: {format_length(params.altitude_ft, metric)}")

    print("\nModel constants:")
    print(f"  Sea-level air density: {cfg.RHO0_SLUG_FT3} slug/ft^3")
    print(f"  Density scale height: {cfg.DENSITY_SCALE_HEIGHT_FT:.0f} ft")
    print(f"  Drag coefficient (round canopy): {cfg.CD_ROUND_CANOPY}")
    print(f"  Pattern samples: {cfg.PATTERN_SAMPLES + 1} per curve")
    print(f"  Display units: {'metric' if metric else 'imperial'}")

    warnings = check_parameters(params)
    for msg in warnings:
        print(f"[warn] {msg}")

    print("\n" + "="*80)
    print("CALCULATED RESULTS")
    print("="*80)

    try:
        descent = compute_descent(params)
    except CanopyError as exc:
        print(f"\nFall speed: N/A ({exc})")
        descent = None
    else:
        print(f"\nFall speed: {format_speed(descent['descent_fps'], metric)}")
        print(f"  Air density: {descent['rho_slug_ft3']:.6f} slug/ft^3")
        print(f"  Canopy area: {descent['main_area_ft2']:.2f} ft^2, vent {descent['vent_area_ft2']:.2f} ft^2, "
              f"effective {descent['effective_area_ft2']:.2f} ft^2")

    try:
        dims = gore_dimensions(params.main_diameter_ft, params.vent_diameter_ft, params.cell_count)
        points = convert_pattern(compute_pattern(params), metric)
    except CanopyError as exc:
        print(f"\nCell pattern: N/A ({exc})")
        points = None
    else:
        print("\nGore panel:")
        print(f"  Width at skirt: {format_length(dims['width_bottom_ft'], metric)}")
        print(f"  Width at vent: {format_length(dims['width_top_ft'], metric)}")
        print(f"  Height: {format_length(dims['height_ft'], metric)}")
        df_pattern = pattern_frame(points)
        reference = df_pattern[df_pattern["kind"] == "reference"]
        print(f"  {len(df_pattern)} pattern points, reference: {reference['label'].iloc[0]}")
        print("\nPattern (every 10th sample):")
        main = df_pattern[df_pattern["kind"] == "main"].reset_index(drop=True)
        seam = df_pattern[df_pattern["kind"] == "seam"].reset_index(drop=True)
        table = main[["x", "y"]].join(seam[["x", "y"]], rsuffix="_seam")
        print(table.iloc[::10].to_string(index=False))

    if descent is not None:
        df_profile = compute_profile(params, profile_altitudes())
        summary = summarize_profile(df_profile)
        df_show = df_profile[["altitude_ft", "rho_slug_ft3", "descent_fps", "descent_mps"]].copy()
        if metric:
            df_show["altitude_m"] = [to_metric(h, "length") for h in df_show["altitude_ft"]]
        print("\nDescent rate vs altitude:")
        print(df_show.iloc[::2].round(6).to_string(index=False))
        print(f"\n  Slowest: {format_speed(summary['min_descent_fps'], metric)} at "
              f"{format_length(summary['min_descent_altitude_ft'], metric)}")
        print(f"  Fastest: {format_speed(summary['max_descent_fps'], metric)} at "
              f"{format_length(summary['max_descent_altitude_ft'], metric)}")

    # Plots
    view = cfg.VIEW_MODE
    if view in ("topView", "both"):
        try:
            plot_top_view(params)
        except CanopyError as exc:
            print(f"[warn] top view skipped: {exc}")
    if view in ("cellPattern", "both") and points is not None:
        plot_cell_pattern(params)
    if descent is not None:
        plot_descent_profile(params)

    # Keep all figures open at the end of the run only if configured
    try:
        import matplotlib.pyplot as plt
        if cfg.SHOW_PLOTS and (getattr(cfg, "BLOCK_AT_END", False) or getattr(cfg, "SHOW_BLOCKING", False)):
            plt.show()
    except Exception:
        pass


if __name__ == "__main__":
    main()
