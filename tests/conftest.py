import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from pcm import config as cfg
from pcm.model import CanopyParameters


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def default_params():
    """The calculator's starting point: 100 lb under a 20 ft canopy, 1 ft vent, 8 cells."""
    return CanopyParameters(
        weight_lb=100.0,
        main_diameter_ft=20.0,
        vent_diameter_ft=1.0,
        cell_count=8,
        seam_allowance_ft=0.5,
        altitude_ft=1000.0,
    )


@pytest.fixture
def headless_plots(monkeypatch, tmp_path):
    """Save figures into a temp dir without opening windows."""
    monkeypatch.setattr(cfg, "SAVE_PLOTS", True)
    monkeypatch.setattr(cfg, "SHOW_PLOTS", False)
    monkeypatch.setattr(cfg, "EXPORT_CSV", False)
    monkeypatch.setattr(cfg, "SAVE_DPI", 50)
    monkeypatch.setattr(cfg, "PLOTS_DIR", str(tmp_path / "plots"))
    monkeypatch.chdir(tmp_path)
    yield tmp_path / "plots"
    plt.close("all")
