"""
Vision Schema - Pydantic models for lenient vision response validation

The vision model may omit fields or send the wrong type. Field validators
turn anything unusable into that field's default instead of rejecting the
whole response, so one bad field never discards a good photo read.
"""

import math
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from models.enums import (
    StoryCount, SidingMaterial, WindowDensity, GutterPresence, ExteriorCondition,
    EquipmentType, Stages, VentMaterial, AfueProvenance,
)


def number_or_none(value: Any) -> Optional[float]:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, str):
        try:
            value = float(value.strip().rstrip('%'))
        except ValueError:
            return None
    if not isinstance(value, (int, float)):
        return None
    try:
        value = float(value)
    except OverflowError:
        return None
    return value if math.isfinite(value) else None


def text_or_default(value: Any, default: Optional[str]) -> Optional[str]:
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, (int, float)):
        try:
            value = str(value)
        except ValueError:
            return default
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


class ExteriorVisionPayload(BaseModel):
    """Exterior photo read: stories, siding, windows, gutters, condition"""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    stories: StoryCount = Field(StoryCount.unknown, validation_alias=AliasChoices("stories", "storyCount"))
    siding: SidingMaterial = Field(SidingMaterial.unknown, validation_alias=AliasChoices("siding", "sidingMaterial"))
    windows: WindowDensity = Field(WindowDensity.unknown, validation_alias=AliasChoices("windows", "windowDensity"))
    gutters: GutterPresence = Field(GutterPresence.unclear, validation_alias=AliasChoices("gutters", "gutterPresence"))
    condition: ExteriorCondition = Field(ExteriorCondition.average, validation_alias=AliasChoices("condition", "exteriorCondition"))
    confidence: Optional[float] = None

    @field_validator("stories", mode="before")
    @classmethod
    def _stories(cls, v):
        return StoryCount.parse(v)

    @field_validator("siding", mode="before")
    @classmethod
    def _siding(cls, v):
        return SidingMaterial.parse(v, SidingMaterial.unknown)

    @field_validator("windows", mode="before")
    @classmethod
    def _windows(cls, v):
        # "unclear" and "" collapse to unknown
        return WindowDensity.parse(v, WindowDensity.unknown)

    @field_validator("gutters", mode="before")
    @classmethod
    def _gutters(cls, v):
        return GutterPresence.parse(v, GutterPresence.unclear)

    @field_validator("condition", mode="before")
    @classmethod
    def _condition(cls, v):
        return ExteriorCondition.parse(v, ExteriorCondition.average)

    @field_validator("confidence", mode="before")
    @classmethod
    def _confidence(cls, v):
        v = number_or_none(v)
        if v is None or not 0.0 <= v <= 1.0:
            return None
        return v


class EquipmentVisionPayload(BaseModel):
    """Equipment label read, one record for all equipment photos"""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    equipment_type: EquipmentType = Field(EquipmentType.furnace, validation_alias=AliasChoices("equipmentType", "equipment_type"))
    manufacturer: str = "unknown"
    model_number: str = Field("unknown", validation_alias=AliasChoices("modelNumber", "model_number"))
    serial_number: str = Field("unknown", validation_alias=AliasChoices("serialNumber", "serial_number"))
    nominal_tonnage: Optional[float] = Field(None, validation_alias=AliasChoices("nominalTonnage", "nominal_tonnage"))
    input_btuh: Optional[float] = Field(None, validation_alias=AliasChoices("inputBTUH", "input_btuh"))
    output_btuh: Optional[float] = Field(None, validation_alias=AliasChoices("outputBTUH", "output_btuh"))
    seer: Optional[float] = None
    seer2: Optional[float] = None
    hspf: Optional[float] = None
    hspf2: Optional[float] = None
    afue: Optional[float] = None
    refrigerant: Optional[str] = None
    heat_strip_kw: Optional[float] = Field(None, validation_alias=AliasChoices("heatStripKW", "heat_strip_kw"))
    manufacture_year: Optional[int] = Field(None, validation_alias=AliasChoices("manufactureYear", "manufacture_year"))
    stages: Stages = Stages.unknown
    vent_material: VentMaterial = Field(VentMaterial.unknown, validation_alias=AliasChoices("ventType", "ventMaterial", "vent_type"))
    afue_provenance: AfueProvenance = Field(AfueProvenance.unknown, validation_alias=AliasChoices("afueSource", "afueProvenance", "afue_source"))

    @field_validator("equipment_type", mode="before")
    @classmethod
    def _equipment_type(cls, v):
        # Unreadable type keeps the furnace default; unrecognized text is "other"
        if not isinstance(v, str) or not v.strip():
            return EquipmentType.furnace
        return EquipmentType.parse(v, EquipmentType.other)

    @field_validator("manufacturer", "model_number", "serial_number", mode="before")
    @classmethod
    def _label_text(cls, v):
        return text_or_default(v, "unknown")

    @field_validator("refrigerant", mode="before")
    @classmethod
    def _refrigerant(cls, v):
        return text_or_default(v, None)

    @field_validator(
        "nominal_tonnage", "input_btuh", "output_btuh", "seer", "seer2",
        "hspf", "hspf2", "afue", "heat_strip_kw", mode="before",
    )
    @classmethod
    def _rating(cls, v):
        return number_or_none(v)

    @field_validator("manufacture_year", mode="before")
    @classmethod
    def _manufacture_year(cls, v):
        v = number_or_none(v)
        if v is None or not v.is_integer():
            return None
        return int(v)

    @field_validator("stages", mode="before")
    @classmethod
    def _stages(cls, v):
        return Stages.parse(v, Stages.unknown)

    @field_validator("vent_material", mode="before")
    @classmethod
    def _vent(cls, v):
        return VentMaterial.parse(v, VentMaterial.unknown)

    @field_validator("afue_provenance", mode="before")
    @classmethod
    def _afue_provenance(cls, v):
        return AfueProvenance.parse(v, AfueProvenance.unknown)
