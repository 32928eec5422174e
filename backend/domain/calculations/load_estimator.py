"""
Manual-J-lite Load Estimator

Quick, conservative design load from square footage and a few envelope
details. NOT a replacement for full ACCA Manual J: a per-square-foot
sensible baseline scaled by independent multiplicative factors.
"""

import math
import logging
from typing import Optional

from domain.core.models import LoadCalcInput, LoadCalcResult, HouseExteriorAttributes
from models.enums import (
    InsulationGrade, WindowDensity, Orientation, SidingMaterial, StoryCount,
)
from services.error_types import InvalidLoadInputError

logger = logging.getLogger(__name__)

# Sensible BTU/hr per sq ft at a 30F design difference
BASE_BTUH_PER_SQFT_AT_30F = 10.0
BASE_DELTA_T_F = 30.0

BTUH_PER_TON = 12000

INSULATION_FACTORS = {
    InsulationGrade.poor: (1.20, "Poor insulation: increased envelope load."),
    InsulationGrade.average: (1.00, None),
    InsulationGrade.good: (0.85, "Good insulation: slightly reduced load."),
}

WINDOW_FACTORS = {
    WindowDensity.few: (0.90, "Few windows: reduced gain/loss."),
    WindowDensity.average: (1.00, None),
    WindowDensity.many: (1.15, "Many windows: increased gain/loss."),
    WindowDensity.unknown: (1.00, "Window amount unknown: assuming average."),
}

ORIENTATION_FACTORS = {
    Orientation.south: (1.10, "South/West orientation: higher solar gain."),
    Orientation.west: (1.10, "South/West orientation: higher solar gain."),
    Orientation.north: (0.95, "North orientation: slightly lower solar gain."),
    Orientation.east: (1.05, None),
    Orientation.mixed: (1.00, None),
    Orientation.unknown: (1.00, None),
}

MULTI_STORY_FACTOR = 1.08
MULTI_STORY_NOTE = "Multi-story: extra load for stack effect and envelope area."

# Small tweak for thermal mass of the cladding
SIDING_FACTORS = {
    SidingMaterial.brick: 0.97,
    SidingMaterial.stucco: 0.99,
}

DUCT_PENALTY_FACTOR = 1.10
DUCT_PENALTY_NOTE = "Ducts in unconditioned space: 10% penalty added."

# Latent ratio is a step function of indoor RH, not interpolated
DRY_RH_LIMIT = 35
HUMID_RH_LIMIT = 55
DRY_LATENT_RATIO = 0.15
MODERATE_LATENT_RATIO = 0.20
HUMID_LATENT_RATIO = 0.25


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _latent_ratio(indoor_rh: float) -> float:
    if indoor_rh <= DRY_RH_LIMIT:
        return DRY_LATENT_RATIO
    if indoor_rh >= HUMID_RH_LIMIT:
        return HUMID_LATENT_RATIO
    return MODERATE_LATENT_RATIO


def estimate_load(load_input: LoadCalcInput) -> LoadCalcResult:
    """
    Estimate sensible, latent and total design load.

    Args:
        load_input: House, envelope and design conditions

    Returns:
        LoadCalcResult with loads rounded to whole BTU/hr and tonnage
        rounded to the nearest quarter ton

    Raises:
        InvalidLoadInputError: conditioned area is zero, negative or not finite,
            or the inputs are too large to produce a finite load
    """
    area = load_input.conditioned_area_sqft
    if not math.isfinite(area) or area <= 0:
        raise InvalidLoadInputError(
            "conditioned_area_sqft",
            "Conditioned area must be greater than 0 sq ft",
            {"conditioned_area_sqft": area},
        )
    for name in ("design_delta_t", "indoor_rh"):
        value = getattr(load_input, name)
        if not math.isfinite(value):
            raise InvalidLoadInputError(name, f"{name} must be a finite number", {name: value})

    notes = []

    base_per_sqft = BASE_BTUH_PER_SQFT_AT_30F * (load_input.design_delta_t / BASE_DELTA_T_F)

    insulation_factor, note = INSULATION_FACTORS[load_input.insulation]
    if note:
        notes.append(note)

    window_factor, note = WINDOW_FACTORS[load_input.windows]
    if note:
        notes.append(note)

    orientation_factor, note = ORIENTATION_FACTORS[load_input.orientation]
    if note:
        notes.append(note)

    stories_factor = 1.0
    if load_input.stories >= 2:
        stories_factor = MULTI_STORY_FACTOR
        notes.append(MULTI_STORY_NOTE)

    siding_factor = SIDING_FACTORS.get(load_input.siding, 1.0)

    duct_factor = 1.0
    if load_input.ducts_in_unconditioned_space:
        duct_factor = DUCT_PENALTY_FACTOR
        notes.append(DUCT_PENALTY_NOTE)

    sensible_per_sqft = (
        base_per_sqft
        * insulation_factor
        * window_factor
        * orientation_factor
        * stories_factor
        * siding_factor
        * duct_factor
    )

    if not math.isfinite(sensible_per_sqft * area):
        raise InvalidLoadInputError(
            "conditioned_area_sqft",
            "Load inputs are too large to estimate",
            {"conditioned_area_sqft": area, "design_delta_t": load_input.design_delta_t},
        )

    # Components are rounded before summing so total == sensible + latent
    sensible = _round_half_up(sensible_per_sqft * area)
    latent = _round_half_up(sensible * _latent_ratio(load_input.indoor_rh))
    total = sensible + latent

    tonnage = math.floor(total / BTUH_PER_TON * 4 + 0.5) / 4

    notes.append(
        f"Based on the inputs, total design load is ~{total} BTU/h, "
        f"which is roughly {tonnage:.2f} tons."
    )

    logger.debug(f"Load estimate: {area:.0f} sq ft -> {total} BTU/hr ({tonnage} tons)")

    return LoadCalcResult(
        sensible_load=sensible,
        latent_load=latent,
        total_load=total,
        recommended_capacity=tonnage,
        notes=notes,
    )


def build_load_input(conditioned_area_sqft: float,
                     exterior: Optional[HouseExteriorAttributes] = None,
                     **overrides) -> LoadCalcInput:
    """
    Build estimator input from confirmed exterior attributes.

    Unknown exterior values fall back to the calculator defaults
    (1 story, average windows, unknown siding); keyword overrides win.
    """
    values = {}
    if exterior is not None:
        if exterior.story_count is not StoryCount.unknown:
            values["stories"] = exterior.story_count.stories
        if exterior.window_density is not WindowDensity.unknown:
            values["windows"] = exterior.window_density
        values["siding"] = exterior.siding_material

    values.update(overrides)
    return LoadCalcInput(conditioned_area_sqft=conditioned_area_sqft, **values)
