"""
Tests for equipment enrichment: AFUE backfill, warranty and venting flags
"""

import pytest
from dataclasses import replace
from datetime import date

from domain.core.models import EquipmentAttributes, WarrantyStatus, EquipmentFlags
from domain.mechanical.equipment_enricher import (
    EquipmentEnricher,
    AFUE_VENT_MISMATCH_NOTE,
    PVC_VENT_NOTE,
)
from models.enums import AfueProvenance, VentMaterial, WarrantyState


class TestAfueBackfill:

    def test_fills_missing_afue_from_table(self, enricher, trane_furnace):
        result = enricher.backfill_afue(trane_furnace)

        assert result.afue == 80.0
        assert result.afue_provenance is AfueProvenance.model_lookup
        # Source record is untouched
        assert trane_furnace.afue is None

    def test_never_overwrites_read_value(self, enricher, trane_furnace):
        equipment = replace(trane_furnace, afue=92.0, afue_provenance=AfueProvenance.label)

        assert enricher.backfill_afue(equipment) is equipment

    def test_table_miss_leaves_record_alone(self, enricher, trane_furnace):
        equipment = replace(trane_furnace, model_number="NOT-IN-TABLE")

        assert enricher.backfill_afue(equipment) is equipment

    @pytest.mark.parametrize("provenance", [AfueProvenance.label, AfueProvenance.inferred])
    def test_stronger_provenance_not_downgraded(self, enricher, trane_furnace, provenance):
        equipment = replace(trane_furnace, afue_provenance=provenance)

        result = enricher.backfill_afue(equipment)

        assert result.afue == 80.0
        assert result.afue_provenance is provenance

    def test_none_passes_through(self, enricher):
        assert enricher.backfill_afue(None) is None

    def test_idempotent(self, enricher, trane_furnace):
        once = enricher.backfill_afue(trane_furnace)
        assert enricher.backfill_afue(once) == once


class TestWarranty:

    def test_ten_years_old_is_in_warranty(self, enricher, current_year):
        warranty = enricher.derive_warranty(EquipmentAttributes(manufacture_year=current_year - 10))

        assert warranty.status is WarrantyState.likely_in_parts_warranty
        assert warranty.approximate_age_years == 10
        assert warranty.manufacture_year == current_year - 10

    def test_eleven_years_old_is_out(self, enricher, current_year):
        warranty = enricher.derive_warranty(EquipmentAttributes(manufacture_year=current_year - 11))

        assert warranty.status is WarrantyState.likely_out_of_warranty
        assert warranty.approximate_age_years == 11

    def test_future_year_counts_as_new(self, enricher, current_year):
        warranty = enricher.derive_warranty(EquipmentAttributes(manufacture_year=current_year + 1))

        assert warranty.approximate_age_years == -1
        assert warranty.status is WarrantyState.likely_in_parts_warranty

    def test_unknown_year(self, enricher):
        assert enricher.derive_warranty(EquipmentAttributes()) == WarrantyStatus()
        assert enricher.derive_warranty(None) == WarrantyStatus()
        assert WarrantyStatus().to_json() == {
            "manufactureYear": None,
            "approxAgeYears": None,
            "likelyWarrantyStatus": "unknown",
        }

    def test_clock_used_without_fixed_year(self):
        warranty = EquipmentEnricher().derive_warranty(EquipmentAttributes(manufacture_year=2000))

        assert warranty.approximate_age_years == date.today().year - 2000


class TestFlags:

    def test_condensing_afue_with_metal_flue(self, enricher):
        flags = enricher.derive_flags(EquipmentAttributes(afue=95.0, vent_material=VentMaterial.metal_flue))

        assert flags.afue_vent_mismatch is True
        assert flags.notes == [AFUE_VENT_MISMATCH_NOTE]

    def test_threshold_is_inclusive(self, enricher):
        flags = enricher.derive_flags(EquipmentAttributes(afue=90.0, vent_material=VentMaterial.metal_flue))
        assert flags.afue_vent_mismatch is True

    def test_pvc_without_afue(self, enricher):
        flags = enricher.derive_flags(EquipmentAttributes(vent_material=VentMaterial.pvc))

        assert flags.afue_vent_mismatch is False
        assert flags.notes == [PVC_VENT_NOTE]

    @pytest.mark.parametrize("afue,vent", [
        (80.0, VentMaterial.metal_flue),
        (95.0, VentMaterial.pvc),
        (None, VentMaterial.metal_flue),
        (None, VentMaterial.unknown),
        (96.0, VentMaterial.mixed),
    ])
    def test_consistent_records_have_empty_flags(self, enricher, afue, vent):
        flags = enricher.derive_flags(EquipmentAttributes(afue=afue, vent_material=vent))
        assert flags == EquipmentFlags(afue_vent_mismatch=False, notes=[])

    def test_no_equipment_means_no_flags(self, enricher):
        assert enricher.derive_flags(None) is None


class TestEnrich:

    def test_full_enrichment(self, enricher, trane_furnace, current_year):
        enrichment = enricher.enrich(trane_furnace)

        assert enrichment.equipment.afue == 80.0
        assert enrichment.warranty.status is WarrantyState.likely_out_of_warranty
        assert enrichment.warranty.approximate_age_years == current_year - 2012
        assert enrichment.flags == EquipmentFlags(afue_vent_mismatch=False, notes=[])

    def test_backfilled_afue_feeds_flags(self, enricher):
        # 96% model read with metal flue: the lookup value triggers the mismatch
        equipment = EquipmentAttributes(model_number="test96", vent_material=VentMaterial.metal_flue)

        enrichment = enricher.enrich(equipment)

        assert enrichment.equipment.afue == 96.0
        assert enrichment.flags.afue_vent_mismatch is True

    def test_flags_are_mutually_exclusive(self, enricher):
        for afue in (None, 80.0, 95.0):
            for vent in VentMaterial:
                flags = enricher.derive_flags(EquipmentAttributes(afue=afue, vent_material=vent))
                assert len(flags.notes) <= 1
                assert not (flags.afue_vent_mismatch and PVC_VENT_NOTE in flags.notes)

    def test_no_equipment(self, enricher):
        enrichment = enricher.enrich(None)

        assert enrichment.equipment is None
        assert enrichment.warranty == WarrantyStatus()
        assert enrichment.flags is None

    def test_enrichment_is_idempotent(self, enricher, trane_furnace):
        first = enricher.enrich(trane_furnace)
        second = enricher.enrich(first.equipment)

        assert second == first
