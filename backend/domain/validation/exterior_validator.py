"""
Exterior Photo Validation

Decides whether the attributes read from an exterior photo can feed the
load estimate as-is, or whether the user needs to confirm a few details.
Every check runs; issues come back in check order.
"""

import logging
from typing import Optional

from domain.core.models import HouseExteriorAttributes, ValidationOutcome
from models.enums import StoryCount, WindowDensity, SidingMaterial
from utils.logging_utils import log_data_quality

logger = logging.getLogger(__name__)

MIN_CONFIDENCE = 0.75

UNREADABLE_PHOTO_ISSUE = (
    "I couldn’t confidently read this photo. "
    "Please upload a clearer exterior shot (front of the house)."
)
LOW_CONFIDENCE_ISSUE = (
    "Overall confidence is low. Please confirm a few key details "
    "(stories, siding type, and approximate window amount)."
)
STORIES_ISSUE = (
    "I couldn’t determine the number of stories. "
    "Please select: 1, 1.5, 2, or 3 stories."
)
WINDOWS_ISSUE = (
    "I couldn’t clearly estimate window amount. "
    "Please choose: few, average, or many windows."
)
SIDING_ISSUE = (
    "Siding type is unclear. Please choose the closest match: "
    "vinyl, wood, fiber cement, stucco, brick, or mixed."
)


def validate_exterior(attrs: Optional[HouseExteriorAttributes]) -> ValidationOutcome:
    """
    Validate exterior attributes against confidence and completeness rules.

    Args:
        attrs: Normalized exterior record, or None when the photo could not be read

    Returns:
        ValidationOutcome; needs_clarification is True iff any issue was found
    """
    if attrs is None:
        return ValidationOutcome(issues=[UNREADABLE_PHOTO_ISSUE])

    issues = []

    confidence = attrs.confidence if attrs.confidence is not None else 0.0
    if confidence < MIN_CONFIDENCE:
        issues.append(LOW_CONFIDENCE_ISSUE)

    if attrs.story_count is StoryCount.unknown:
        issues.append(STORIES_ISSUE)

    if attrs.window_density is WindowDensity.unknown:
        issues.append(WINDOWS_ISSUE)

    if attrs.siding_material is SidingMaterial.unknown:
        issues.append(SIDING_ISSUE)

    log_data_quality("exterior", confidence, issues, logger)

    return ValidationOutcome(issues=issues)
