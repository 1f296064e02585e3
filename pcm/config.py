"""
Centralized configuration for the Parachute Canopy Model.
Edit values here to change inputs without touching the computation code.

All computation happens in imperial base units (ft, lb, ft/s, slug/ft^3).
IS_METRIC only changes how results are displayed.
"""
from typing import Dict, Tuple
import os

# Atmosphere (exponential decay model)
RHO0_SLUG_FT3: float = 0.002378            # Sea-level air density in slug/ft^3
DENSITY_SCALE_HEIGHT_FT: float = 30000.0   # e-folding altitude of the density model

# Drag
CD_ROUND_CANOPY: float = 1.75              # Empirical drag coefficient for a round canopy

###############################################
# Canopy inputs (imperial base units)
#
# Defaults are the values the original calculator starts from:
#   100 lb payload under a 20 ft canopy with a 1 ft vent, 8 cells,
#   1000 ft altitude, 0.5 ft seam allowance.
###############################################
WEIGHT_LB: float = 100.0
MAIN_DIAMETER_FT: float = 20.0
VENT_DIAMETER_FT: float = 1.0
CELL_COUNT: int = 8
ALTITUDE_FT: float = 1000.0
SEAM_ALLOWANCE_FT: float = 0.5

# Typical input ranges (min, max). Values outside only produce a warning.
INPUT_RANGES: Dict[str, Tuple[float, float]] = {
    "weight_lb": (50.0, 200.0),
    "main_diameter_ft": (10.0, 30.0),
    "vent_diameter_ft": (0.5, 3.0),
    "cell_count": (6, 12),
    "altitude_ft": (0.0, 10000.0),
    "seam_allowance_ft": (0.25, 1.0),
}

# Gore panel pattern
PATTERN_SAMPLES: int = 50                  # Curve intervals; PATTERN_SAMPLES + 1 points per curve
DISPLAY_DECIMALS: int = 2                  # Rounding applied to every pattern coordinate

# Top view schematic (drawing units, skirt circle radius)
TOP_VIEW_RADIUS: float = 100.0
TOP_VIEW_LABEL_FRACTION: float = 0.8       # Gore numbers sit at 80% of the skirt radius

# Descent sweep over altitude (start, stop, step) in ft
PROFILE_ALTITUDES_FT: Tuple[float, float, float] = (0.0, 10000.0, 500.0)

# Display units
IS_METRIC: bool = False                    # Display-only toggle, never fed back into computation
LB_TO_KG: float = 0.453592
FT_TO_M: float = 0.3048

# View selection: "topView", "cellPattern" or "both"
VIEW_MODE: str = "both"
# Larger figures (the original "maximize" toggle)
ENLARGED_PLOTS: bool = False

# Plot/export options
EXPORT_CSV: bool = False                   # Save pattern and profile data to CSV files

# Figure saving
# When True, figures will be written to disk (PNG by default) in PLOTS_DIR.
# Files will be overwritten on subsequent runs using the same names.
SAVE_PLOTS: bool = True
PLOTS_DIR: str = os.path.join("plots")    # Relative to current working directory
SAVE_FORMAT: str = "png"                 # e.g., "png", "pdf", "svg"
SAVE_DPI: int = 300                        # Image DPI for raster formats

# Set to False to only save figures (headless runs, tests)
SHOW_PLOTS: bool = True
# When False, plots won't block during generation; a final block can be enabled separately.
SHOW_BLOCKING: bool = False
# If True, block once at the very end so all plot windows stay open. Set to False for non-blocking CI/VS Code runs.
BLOCK_AT_END: bool = False
