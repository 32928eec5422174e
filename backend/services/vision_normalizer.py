"""
Vision Normalizer - single entry point from raw model output to domain records

"Upstream gave us nothing" (no parseable JSON object) becomes None.
"Upstream gave us something" becomes a full record, with a default in
every field the model left out or got the wrong type for.
"""

import logging
from typing import Any, Dict, Optional, Union

from domain.core.models import HouseExteriorAttributes, EquipmentAttributes
from services.error_types import VisionResponseError
from services.strict_json_parser import strict_parser
from services.vision_schema import ExteriorVisionPayload, EquipmentVisionPayload

logger = logging.getLogger(__name__)

RawOutput = Union[str, Dict[str, Any], None]


def _as_object(raw: RawOutput, kind: str) -> Dict[str, Any]:
    if isinstance(raw, dict):
        return raw
    data = strict_parser.extract_json(raw) if isinstance(raw, str) else None
    if data is None:
        raise VisionResponseError(f"No JSON object in {kind} response", {"kind": kind})
    return data


def normalize_exterior(raw: RawOutput) -> Optional[HouseExteriorAttributes]:
    """
    Turn exterior model output into HouseExteriorAttributes.

    Args:
        raw: Model response text, an already-decoded JSON object, or None

    Returns:
        Normalized attributes, or None when nothing usable came back
    """
    try:
        data = _as_object(raw, "exterior")
    except VisionResponseError as e:
        logger.warning(f"Exterior output treated as absent: {e}")
        return None

    payload = ExteriorVisionPayload.model_validate(data)
    return HouseExteriorAttributes(
        story_count=payload.stories,
        siding_material=payload.siding,
        window_density=payload.windows,
        gutter_presence=payload.gutters,
        exterior_condition=payload.condition,
        confidence=payload.confidence,
    )


def normalize_equipment(raw: RawOutput) -> Optional[EquipmentAttributes]:
    """
    Turn equipment model output into EquipmentAttributes.

    Args:
        raw: Model response text, an already-decoded JSON object, or None

    Returns:
        Normalized attributes, or None when nothing usable came back
    """
    try:
        data = _as_object(raw, "equipment")
    except VisionResponseError as e:
        logger.warning(f"Equipment output treated as absent: {e}")
        return None

    payload = EquipmentVisionPayload.model_validate(data)
    return EquipmentAttributes(**payload.model_dump())
