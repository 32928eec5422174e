"""
Clean data models for HVAC photo intake
Records read from photos, their derivations, and the load estimate
"""

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any

from models.enums import (
    StoryCount, SidingMaterial, WindowDensity, GutterPresence, ExteriorCondition,
    EquipmentType, Stages, VentMaterial, AfueProvenance, WarrantyState,
    Orientation, InsulationGrade,
)


@dataclass(frozen=True)
class HouseExteriorAttributes:
    """What the vision model read from one exterior photo"""
    story_count: StoryCount = StoryCount.unknown
    siding_material: SidingMaterial = SidingMaterial.unknown
    window_density: WindowDensity = WindowDensity.unknown
    gutter_presence: GutterPresence = GutterPresence.unclear
    exterior_condition: ExteriorCondition = ExteriorCondition.average
    confidence: Optional[float] = None

    def to_json(self) -> Dict[str, Any]:
        return {
            "stories": self.story_count.to_wire(),
            "siding": self.siding_material.value,
            "windows": self.window_density.value,
            "gutters": self.gutter_presence.value,
            "condition": self.exterior_condition.value,
            "confidence": self.confidence,
        }


@dataclass
class ValidationOutcome:
    """Issues found in an exterior record, in check order"""
    issues: List[str] = field(default_factory=list)

    @property
    def needs_clarification(self) -> bool:
        return len(self.issues) > 0

    def to_json(self) -> Dict[str, Any]:
        return {
            "issues": list(self.issues),
            "needsClarification": self.needs_clarification,
        }


@dataclass(frozen=True)
class EquipmentAttributes:
    """What the vision model read from the equipment label photos"""
    equipment_type: EquipmentType = EquipmentType.furnace
    manufacturer: str = "unknown"
    model_number: str = "unknown"
    serial_number: str = "unknown"
    nominal_tonnage: Optional[float] = None
    input_btuh: Optional[float] = None
    output_btuh: Optional[float] = None
    seer: Optional[float] = None
    seer2: Optional[float] = None
    hspf: Optional[float] = None
    hspf2: Optional[float] = None
    afue: Optional[float] = None
    refrigerant: Optional[str] = None
    heat_strip_kw: Optional[float] = None
    manufacture_year: Optional[int] = None
    stages: Stages = Stages.unknown
    vent_material: VentMaterial = VentMaterial.unknown
    afue_provenance: AfueProvenance = AfueProvenance.unknown

    def to_json(self) -> Dict[str, Any]:
        return {
            "equipmentType": self.equipment_type.value,
            "manufacturer": self.manufacturer,
            "modelNumber": self.model_number,
            "serialNumber": self.serial_number,
            "nominalTonnage": self.nominal_tonnage,
            "inputBTUH": self.input_btuh,
            "outputBTUH": self.output_btuh,
            "seer": self.seer,
            "seer2": self.seer2,
            "hspf": self.hspf,
            "hspf2": self.hspf2,
            "afue": self.afue,
            "refrigerant": self.refrigerant,
            "heatStripKW": self.heat_strip_kw,
            "manufactureYear": self.manufacture_year,
            "stages": self.stages.value,
            "ventType": self.vent_material.value,
            "afueSource": self.afue_provenance.value,
        }


@dataclass(frozen=True)
class WarrantyStatus:
    manufacture_year: Optional[int] = None
    approximate_age_years: Optional[int] = None
    status: WarrantyState = WarrantyState.unknown

    def to_json(self) -> Dict[str, Any]:
        return {
            "manufactureYear": self.manufacture_year,
            "approxAgeYears": self.approximate_age_years,
            "likelyWarrantyStatus": self.status.value,
        }


@dataclass(frozen=True)
class EquipmentFlags:
    """Cross-field consistency warnings for one equipment record"""
    afue_vent_mismatch: bool = False
    notes: List[str] = field(default_factory=list)

    def to_json(self) -> Dict[str, Any]:
        return {
            "afueVentMismatch": self.afue_vent_mismatch,
            "notes": list(self.notes),
        }


@dataclass(frozen=True)
class LoadCalcInput:
    """Inputs to the Manual-J-lite estimate"""
    conditioned_area_sqft: float
    stories: float = 1
    windows: WindowDensity = WindowDensity.average
    orientation: Orientation = Orientation.mixed
    insulation: InsulationGrade = InsulationGrade.average
    siding: SidingMaterial = SidingMaterial.unknown
    design_delta_t: float = 40.0
    indoor_rh: float = 45.0
    ducts_in_unconditioned_space: bool = False


@dataclass
class LoadCalcResult:
    """Estimated design loads (BTU/hr) and recommended tonnage"""
    sensible_load: int
    latent_load: int
    total_load: int
    recommended_capacity: float
    notes: List[str] = field(default_factory=list)

    def to_json(self) -> Dict[str, Any]:
        return {
            "sensibleBTUH": self.sensible_load,
            "latentBTUH": self.latent_load,
            "totalBTUH": self.total_load,
            "recommendedTonnage": self.recommended_capacity,
            "notes": list(self.notes),
        }


@dataclass(frozen=True)
class JobSummary:
    """Canonical record handed to rendering and the summary endpoint"""
    address: str
    exterior: Optional[HouseExteriorAttributes]
    equipment: Optional[EquipmentAttributes]
    warranty: WarrantyStatus
    equipment_flags: Optional[EquipmentFlags]
    load_calc: Optional[LoadCalcResult]

    def to_json(self) -> Dict[str, Any]:
        # Absent sections are explicit nulls, never missing keys
        return {
            "address": self.address,
            "exterior": self.exterior.to_json() if self.exterior else None,
            "equipment": self.equipment.to_json() if self.equipment else None,
            "warranty": self.warranty.to_json(),
            "equipmentFlags": self.equipment_flags.to_json() if self.equipment_flags else None,
            "loadCalc": self.load_calc.to_json() if self.load_calc else None,
        }
