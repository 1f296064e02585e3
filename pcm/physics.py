"""
Physics: exponential atmosphere, canopy areas, steady-state descent rate.
"""
import math
from typing import Dict

from . import config as cfg
from .errors import DomainError, InvalidParameter


def air_density(altitude_ft: float) -> float:
    """Return air density (slug/ft^3) at the given altitude (ft).

    rho = RHO0 * exp(-h / H) with H = DENSITY_SCALE_HEIGHT_FT. Negative altitudes
    simply extrapolate the same curve.
    """
    try:
        return cfg.RHO0_SLUG_FT3 * math.exp(-altitude_ft / cfg.DENSITY_SCALE_HEIGHT_FT)
    except OverflowError:
        # Far below sea level the curve runs past the largest float
        return float("inf")


def canopy_areas(main_diameter_ft: float, vent_diameter_ft: float) -> Dict[str, float]:
    """Return main, vent and effective (main minus vent) areas in ft^2."""
    if main_diameter_ft < 0 or vent_diameter_ft < 0:
        raise InvalidParameter(
            f"Diameters must be non-negative (main={main_diameter_ft}, vent={vent_diameter_ft})"
        )
    main_area = math.pi * (main_diameter_ft / 2) ** 2
    vent_area = math.pi * (vent_diameter_ft / 2) ** 2
    return {
        "main_area_ft2": main_area,
        "vent_area_ft2": vent_area,
        "effective_area_ft2": main_area - vent_area,
    }


def terminal_velocity(
    weight_lb: float,
    main_diameter_ft: float,
    vent_diameter_ft: float,
    altitude_ft: float,
    cd: float = cfg.CD_ROUND_CANOPY,
) -> float:
    """Compute the steady-state descent rate (ft/s) under a vented round canopy.

        At terminal velocity drag balances weight:
            W = 0.5 * rho * v^2 * Cd * A_eff
        so
            v = sqrt(2 W / (rho * Cd * A_eff))

        High-level steps:
            1. Reject negative weight or diameters (InvalidParameter).
            2. Reject vent >= main (DomainError): the effective area would be zero
               or negative and the root undefined.
            3. Air density from altitude via air_density().
            4. A_eff = pi (D/2)^2 - pi (Dv/2)^2.
            5. Apply the closed form above.

        Parameters:
            weight_lb        : payload weight (lb, used directly as force)
            main_diameter_ft : canopy diameter (ft)
            vent_diameter_ft : apex vent diameter (ft)
            altitude_ft      : altitude (ft)
            cd               : drag coefficient, defaults to cfg.CD_ROUND_CANOPY

        Returns:
            descent rate in ft/s (0.0 for a weightless payload)
        """
    if weight_lb < 0:
        raise InvalidParameter(f"Weight must be non-negative, got {weight_lb}")
    areas = canopy_areas(main_diameter_ft, vent_diameter_ft)
    if main_diameter_ft <= vent_diameter_ft:
        raise DomainError(
            f"Main diameter ({main_diameter_ft}) must be larger than vent diameter "
            f"({vent_diameter_ft}) to leave a positive effective area"
        )
    rho = air_density(altitude_ft)
    drag_term = rho * cd * areas["effective_area_ft2"]
    # Density or area can underflow to zero even when the inputs are valid
    if not drag_term > 0:
        raise DomainError(
            f"No drag at altitude {altitude_ft} ft with main={main_diameter_ft} ft, "
            f"vent={vent_diameter_ft} ft (density or effective area underflows to zero)"
        )
    return math.sqrt((2 * weight_lb) / drag_term)


def diameter_for_descent_rate(
    weight_lb: float,
    target_velocity_fps: float,
    vent_diameter_ft: float,
    altitude_ft: float,
    cd: float = cfg.CD_ROUND_CANOPY,
) -> float:
    """Back-solve the main diameter (ft) that gives target_velocity_fps.

    Inverting the terminal velocity formula:
        A_eff = 2 W / (rho * Cd * v^2)
        D = sqrt(4 A_eff / pi + Dv^2)
    """
    if weight_lb < 0:
        raise InvalidParameter(f"Weight must be non-negative, got {weight_lb}")
    if vent_diameter_ft < 0:
        raise InvalidParameter(f"Vent diameter must be non-negative, got {vent_diameter_ft}")
    if target_velocity_fps <= 0:
        raise InvalidParameter(f"Target descent rate must be positive, got {target_velocity_fps}")

    rho = air_density(altitude_ft)
    drag_term = rho * cd * target_velocity_fps**2
    if not drag_term > 0:
        raise DomainError(f"No drag at altitude {altitude_ft} ft (density underflows to zero)")
    effective_area = (2 * weight_lb) / drag_term
    return math.sqrt(4 * effective_area / math.pi + vent_diameter_ft**2)
