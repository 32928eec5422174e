"""
Exterior clarification - apply the user's answers to an exterior record

The clarified record is new and independent of the original; it goes back
through validation like any other exterior read.
"""

import logging
from typing import Any, Optional

from domain.core.models import HouseExteriorAttributes
from models.enums import StoryCount, WindowDensity, SidingMaterial, GutterPresence, ExteriorCondition

logger = logging.getLogger(__name__)

# Confidence given to a user-confirmed record when the photo read had none
CONFIRMED_CONFIDENCE = 0.8


def apply_clarification(
    original: Optional[HouseExteriorAttributes],
    stories: Any = None,
    windows: Any = None,
    siding: Any = None,
) -> HouseExteriorAttributes:
    """
    Build a clarified exterior record from the user's selections.

    Args:
        original: Record read from the photo, or None if it was unreadable
        stories: Selected story count (1, 1.5, 2, 3); blank means unknown
        windows: Selected window amount; blank means unknown
        siding: Selected siding; blank means unknown

    Returns:
        New HouseExteriorAttributes
    """
    gutters = original.gutter_presence if original else GutterPresence.unclear
    condition = original.exterior_condition if original else ExteriorCondition.average
    confidence = original.confidence if original and original.confidence is not None else CONFIRMED_CONFIDENCE

    clarified = HouseExteriorAttributes(
        story_count=StoryCount.parse(stories),
        window_density=WindowDensity.parse(windows, WindowDensity.unknown),
        siding_material=SidingMaterial.parse(siding, SidingMaterial.unknown),
        gutter_presence=gutters,
        exterior_condition=condition,
        confidence=confidence,
    )
    logger.info(f"Exterior clarified: {clarified.to_json()}")
    return clarified
