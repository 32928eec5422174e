"""
Job summary assembly - merges exterior, equipment and load results
into the one record that rendering and the API publish
"""

import logging
from typing import Optional

from domain.core.models import HouseExteriorAttributes, JobSummary, LoadCalcResult, WarrantyStatus
from domain.mechanical.equipment_enricher import EquipmentEnrichment

logger = logging.getLogger(__name__)


def assemble_job_summary(
    address: str,
    exterior: Optional[HouseExteriorAttributes],
    enrichment: Optional[EquipmentEnrichment] = None,
    load_calc: Optional[LoadCalcResult] = None,
) -> JobSummary:
    """
    Args:
        address: Job address as entered
        exterior: Exterior record, clarified if the user confirmed details
        enrichment: Equipment derivations; None when no equipment photos were sent
        load_calc: Load estimate, if one was run
    """
    if enrichment is None:
        equipment, warranty, flags = None, WarrantyStatus(), None
    else:
        equipment, warranty, flags = enrichment.equipment, enrichment.warranty, enrichment.flags

    summary = JobSummary(
        address=address,
        exterior=exterior,
        equipment=equipment,
        warranty=warranty,
        equipment_flags=flags,
        load_calc=load_calc,
    )
    logger.info(
        f"Job summary assembled for {address!r}: equipment={'yes' if equipment else 'no'}, "
        f"load_calc={'yes' if load_calc else 'no'}"
    )
    return summary
