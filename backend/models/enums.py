"""
Enums for HVAC intake models to ensure type safety and consistency

Values are the wire vocabulary shared with the vision prompts and the
report consumers. Every enumeration read from a photo carries an explicit
unknown/unclear member instead of relying on None.
"""

import re
from enum import Enum
from typing import Any, Optional


def _match_key(value: str) -> str:
    return re.sub(r"[\s_\-]+", "", value.strip().lower())


class WireEnum(str, Enum):
    """str Enum that tolerates spelling variants ("fiber-cement", "Metal_Flue")"""

    @classmethod
    def parse(cls, value: Any, default: Optional["WireEnum"] = None):
        if isinstance(value, cls):
            return value
        if not isinstance(value, str) or not value.strip():
            return default
        key = _match_key(value)
        for member in cls:
            if _match_key(member.value) == key:
                return member
        return default


class StoryCount(Enum):
    """Stories visible from the front of the house"""
    one = 1.0
    one_and_half = 1.5
    two = 2.0
    three = 3.0
    unknown = "unknown"

    @classmethod
    def parse(cls, value: Any) -> "StoryCount":
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.unknown
        if not isinstance(value, (str, int, float)):
            return cls.unknown
        try:
            value = float(value.strip() if isinstance(value, str) else value)
        except (ValueError, OverflowError):
            return cls.unknown
        for member in cls:
            if member.value == value:
                return member
        return cls.unknown

    @property
    def stories(self) -> Optional[float]:
        return None if self is StoryCount.unknown else self.value

    def to_wire(self):
        if self is StoryCount.unknown:
            return "unknown"
        # 1.0 -> 1, 1.5 -> 1.5
        return int(self.value) if self.value.is_integer() else self.value


class SidingMaterial(WireEnum):
    vinyl = 'vinyl'
    wood = 'wood'
    fiber_cement = 'fiber cement'
    stucco = 'stucco'
    brick = 'brick'
    mixed = 'mixed'
    unknown = 'unknown'


class WindowDensity(WireEnum):
    few = 'few'
    average = 'average'
    many = 'many'
    unknown = 'unknown'


class GutterPresence(WireEnum):
    yes = 'yes'
    no = 'no'
    unclear = 'unclear'


class ExteriorCondition(WireEnum):
    good = 'good'
    average = 'average'
    poor = 'poor'


class EquipmentType(WireEnum):
    furnace = 'furnace'
    air_handler = 'air_handler'
    heat_pump = 'heat_pump'
    ac_condenser = 'ac_condenser'
    package_unit = 'package_unit'
    other = 'other'


class Stages(WireEnum):
    single = 'single'
    two_stage = 'two-stage'
    variable = 'variable'
    unknown = 'unknown'


class VentMaterial(WireEnum):
    """Combustion venting seen in wide shots of the furnace"""
    metal_flue = 'metal_flue'
    pvc = 'pvc'
    mixed = 'mixed'
    unknown = 'unknown'


class AfueProvenance(WireEnum):
    """Where an AFUE value came from, strongest first"""
    label = 'label'
    inferred = 'inferred'
    model_lookup = 'model_lookup'
    unknown = 'unknown'

    @property
    def rank(self) -> int:
        return _PROVENANCE_RANK[self]


_PROVENANCE_RANK = {
    AfueProvenance.label: 3,
    AfueProvenance.inferred: 2,
    AfueProvenance.model_lookup: 1,
    AfueProvenance.unknown: 0,
}


class WarrantyState(WireEnum):
    likely_in_parts_warranty = 'likely_in_parts_warranty'
    likely_out_of_warranty = 'likely_out_of_warranty'
    unknown = 'unknown'


class Orientation(WireEnum):
    north = 'north'
    south = 'south'
    east = 'east'
    west = 'west'
    mixed = 'mixed'
    unknown = 'unknown'


class InsulationGrade(WireEnum):
    poor = 'poor'
    average = 'average'
    good = 'good'
