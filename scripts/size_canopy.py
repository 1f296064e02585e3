"""size_canopy.py
=================================

Purpose
-------
Size the main canopy diameter for a target descent rate across a range of
payload weights, holding vent diameter, cell count and altitude at their
configured values. Useful before cutting: pick the diameter, then run
`run_model.py` with it to get the gore pattern.

Derivation
----------
At terminal velocity drag balances weight:
    W = 0.5 * rho * v^2 * Cd * A_eff
so the effective area needed for a target descent rate v is
    A_eff = 2 W / (rho * Cd * v^2)
and with A_eff = pi/4 * (D^2 - Dv^2)
    D = sqrt(4 A_eff / pi + Dv^2)

Usage
-----
Run directly:
    python scripts/size_canopy.py
Then copy the chosen diameter into `pcm/config.py`:
    MAIN_DIAMETER_FT = <value>

Outputs
-------
Prints a table of weight vs required diameter and the resulting gore widths,
and (optionally) a plot of the sizing curve in cfg.PLOTS_DIR.
"""

import sys, pathlib

# Ensure project root on path for "pcm" imports when run directly
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import numpy as np
import pandas as pd

from pcm import config as cfg
from pcm.pattern import gore_dimensions
from pcm.physics import diameter_for_descent_rate, terminal_velocity

TARGET_DESCENT_FPS = 15.0   # roughly 4.6 m/s, a common round-canopy landing rate
WEIGHTS_LB = np.arange(50.0, 201.0, 25.0)

records = []
for w in WEIGHTS_LB:
    d = diameter_for_descent_rate(w, TARGET_DESCENT_FPS, cfg.VENT_DIAMETER_FT, cfg.ALTITUDE_FT)
    dims = gore_dimensions(d, cfg.VENT_DIAMETER_FT, cfg.CELL_COUNT)
    records.append({
        "weight_lb": w,
        "main_diameter_ft": d,
        "check_descent_fps": terminal_velocity(w, d, cfg.VENT_DIAMETER_FT, cfg.ALTITUDE_FT),
        "gore_width_bottom_ft": dims["width_bottom_ft"],
        "gore_height_ft": dims["height_ft"],
    })

df = pd.DataFrame(records)

print(f"Canopy sizing for {TARGET_DESCENT_FPS:.1f} ft/s at {cfg.ALTITUDE_FT:.0f} ft "
      f"(vent {cfg.VENT_DIAMETER_FT} ft, {cfg.CELL_COUNT} cells)\n")
print(df.round(2).to_string(index=False))

in_range = df[df["main_diameter_ft"].between(*cfg.INPUT_RANGES["main_diameter_ft"])]
if len(in_range) < len(df):
    print(f"\n[note] {len(df) - len(in_range)} sizes fall outside the typical diameter range "
          f"{cfg.INPUT_RANGES['main_diameter_ft']}")

if cfg.EXPORT_CSV:
    try:
        df.to_csv("canopy_sizing.csv", index=False)
        print("[saved] canopy_sizing.csv")
    except Exception as exc:
        print(f"[warn] failed to save canopy_sizing.csv: {exc}")

# Optional visualization of the sizing curve
try:
    import os
    import matplotlib.pyplot as plt

    plt.figure(figsize=(8, 4.8))
    plt.plot(df["weight_lb"], df["main_diameter_ft"], "o-", label=f"{TARGET_DESCENT_FPS:.0f} ft/s target")
    for w, d in zip(df["weight_lb"], df["main_diameter_ft"]):
        plt.annotate(f"{d:.1f}", (w, d), textcoords="offset points", xytext=(0, 6), ha="center", fontsize=8)
    plt.title("Main diameter required vs payload weight")
    plt.xlabel("Payload weight (lb)")
    plt.ylabel("Main diameter (ft)")
    plt.grid(True, alpha=0.3)
    plt.legend(fontsize=8)
    plt.tight_layout()
    # Save alongside other plots
    try:
        os.makedirs(cfg.PLOTS_DIR, exist_ok=True)
        out = os.path.join(cfg.PLOTS_DIR, f"canopy_sizing.{cfg.SAVE_FORMAT}")
        plt.savefig(out, dpi=cfg.SAVE_DPI, format=cfg.SAVE_FORMAT, bbox_inches="tight")
        print(f"[saved] {out}")
    except Exception as exc:
        print(f"[warn] failed to save figure: {exc}")

    if getattr(cfg, "SHOW_PLOTS", True):
        try:
            plt.show(block=getattr(cfg, "SHOW_BLOCKING", False))
            if not getattr(cfg, "SHOW_BLOCKING", False):
                plt.pause(0.001)
        except Exception:
            try:
                plt.show()
            except Exception:
                pass
except Exception as exc:
    print(f"[note] Skipping visualization (reason: {exc})")
