"""
Equipment Enrichment

Derivations applied to one equipment record, in order:
1. AFUE backfill from the model lookup table
2. Warranty estimate from manufacture year
3. AFUE vs venting consistency flags
"""

import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Mapping, Optional

from domain.core.models import EquipmentAttributes, WarrantyStatus, EquipmentFlags
from domain.mechanical.afue_lookup import DEFAULT_AFUE_TABLE, lookup_afue
from models.enums import AfueProvenance, VentMaterial, WarrantyState

logger = logging.getLogger(__name__)

# Typical residential parts warranty
PARTS_WARRANTY_YEARS = 10

CONDENSING_AFUE_THRESHOLD = 90

AFUE_VENT_MISMATCH_NOTE = (
    "AI/model lookup says 90%+ AFUE, but venting appears to be metal/B-vent only. "
    "This often indicates an 80% furnace. Please confirm AFUE manually."
)
PVC_VENT_NOTE = (
    "Venting appears to be PVC, which often indicates a 90%+ condensing furnace. "
    "Confirm AFUE from the rating plate."
)


@dataclass(frozen=True)
class EquipmentEnrichment:
    """Backfilled equipment plus its derived records"""
    equipment: Optional[EquipmentAttributes]
    warranty: WarrantyStatus
    flags: Optional[EquipmentFlags]


class EquipmentEnricher:
    """
    Applies lookup, warranty and flag derivations to equipment records.

    Args:
        afue_table: Read-only model number -> AFUE mapping
        current_year: Fixed year for warranty ages; None reads the clock per call
    """

    def __init__(self, afue_table: Mapping[str, float] = DEFAULT_AFUE_TABLE,
                 current_year: Optional[int] = None):
        self.afue_table = afue_table
        self.current_year = current_year

    def enrich(self, equipment: Optional[EquipmentAttributes]) -> EquipmentEnrichment:
        equipment = self.backfill_afue(equipment)
        return EquipmentEnrichment(
            equipment=equipment,
            warranty=self.derive_warranty(equipment),
            flags=self.derive_flags(equipment),
        )

    def backfill_afue(self, equipment: Optional[EquipmentAttributes]) -> Optional[EquipmentAttributes]:
        """Fill a missing AFUE from the lookup table; never overwrites a read value"""
        if equipment is None or equipment.afue is not None:
            return equipment

        afue = lookup_afue(self.afue_table, equipment.model_number)
        if afue is None:
            return equipment

        provenance = equipment.afue_provenance
        if provenance.rank < AfueProvenance.model_lookup.rank:
            provenance = AfueProvenance.model_lookup

        logger.info(f"[PROVENANCE] afue = {afue} from model lookup ({equipment.model_number.strip().upper()})")
        return replace(equipment, afue=afue, afue_provenance=provenance)

    def derive_warranty(self, equipment: Optional[EquipmentAttributes]) -> WarrantyStatus:
        if equipment is None or equipment.manufacture_year is None:
            return WarrantyStatus()

        current_year = self.current_year if self.current_year is not None else date.today().year
        age = current_year - equipment.manufacture_year

        if age <= PARTS_WARRANTY_YEARS:
            status = WarrantyState.likely_in_parts_warranty
        else:
            status = WarrantyState.likely_out_of_warranty

        return WarrantyStatus(
            manufacture_year=equipment.manufacture_year,
            approximate_age_years=age,
            status=status,
        )

    def derive_flags(self, equipment: Optional[EquipmentAttributes]) -> Optional[EquipmentFlags]:
        # No equipment data is different from equipment data with no flags
        if equipment is None:
            return None

        afue = equipment.afue
        vent = equipment.vent_material

        if afue is not None and afue >= CONDENSING_AFUE_THRESHOLD and vent is VentMaterial.metal_flue:
            logger.warning(f"AFUE {afue} inconsistent with metal flue venting")
            return EquipmentFlags(afue_vent_mismatch=True, notes=[AFUE_VENT_MISMATCH_NOTE])

        if afue is None and vent is VentMaterial.pvc:
            return EquipmentFlags(afue_vent_mismatch=False, notes=[PVC_VENT_NOTE])

        return EquipmentFlags(afue_vent_mismatch=False, notes=[])
