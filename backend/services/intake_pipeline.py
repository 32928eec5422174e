"""
Intake Pipeline

Model output -> normalized records -> exterior validation and equipment
enrichment. The two branches work on disjoint records; the photo reads
behind them run concurrently.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import List, Optional

from domain.core.models import HouseExteriorAttributes, ValidationOutcome, WarrantyStatus
from domain.mechanical.equipment_enricher import EquipmentEnricher, EquipmentEnrichment
from domain.validation.exterior_validator import validate_exterior
from services.vision_normalizer import normalize_exterior, normalize_equipment, RawOutput
from services.vision_parse import VisionParser
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)


@dataclass
class IntakeResult:
    """Everything the intake step knows before the load estimate"""
    address: str
    exterior: Optional[HouseExteriorAttributes]
    exterior_validation: ValidationOutcome
    enrichment: Optional[EquipmentEnrichment]

    @property
    def needs_clarification(self) -> bool:
        return self.exterior_validation.needs_clarification

    def to_json(self) -> dict:
        enrichment = self.enrichment
        return {
            "address": self.address,
            "exteriorAnalysis": self.exterior.to_json() if self.exterior else None,
            "exteriorValidation": self.exterior_validation.to_json(),
            "equipmentAnalysis": enrichment.equipment.to_json() if enrichment and enrichment.equipment else None,
            "warranty": (enrichment.warranty if enrichment else WarrantyStatus()).to_json(),
            "equipmentFlags": enrichment.flags.to_json() if enrichment and enrichment.flags else None,
        }


class IntakePipeline:
    """
    Runs validation and enrichment over vision model output.

    Args:
        enricher: Equipment enricher holding the AFUE lookup table
        vision: Photo reader; only needed for analyze_photos
    """

    def __init__(self, enricher: Optional[EquipmentEnricher] = None,
                 vision: Optional[VisionParser] = None):
        self.enricher = enricher or EquipmentEnricher()
        self.vision = vision

    def process(self, address: str, exterior_output: RawOutput,
                equipment_output: RawOutput = None,
                has_equipment: Optional[bool] = None) -> IntakeResult:
        """
        Validate and enrich already-fetched model output.

        Args:
            address: Job address
            exterior_output: Exterior model response (text or decoded JSON)
            equipment_output: Equipment model response; None when no equipment photos
            has_equipment: Whether equipment photos were sent. Defaults to
                "equipment_output is not None".

        Returns:
            IntakeResult; enrichment is None when there were no equipment photos
        """
        if has_equipment is None:
            has_equipment = equipment_output is not None

        exterior = normalize_exterior(exterior_output)
        validation = validate_exterior(exterior)

        enrichment = None
        if has_equipment:
            enrichment = self.enricher.enrich(normalize_equipment(equipment_output))

        if validation.needs_clarification:
            logger.info(f"Exterior for {address!r} needs clarification: {len(validation.issues)} issue(s)")

        return IntakeResult(
            address=address,
            exterior=exterior,
            exterior_validation=validation,
            enrichment=enrichment,
        )

    async def analyze_photos(self, address: str, exterior_image_urls: List[str],
                             equipment_image_urls: Optional[List[str]] = None) -> IntakeResult:
        """
        Read the photos with the vision model, then process the output.

        The exterior read uses the first exterior photo. Both reads run
        concurrently; the equipment read is skipped without equipment photos.
        """
        if self.vision is None:
            self.vision = VisionParser()

        equipment_image_urls = equipment_image_urls or []
        context = {
            "address": address,
            "exterior_photos": len(exterior_image_urls),
            "equipment_photos": len(equipment_image_urls),
        }

        with log_operation("photo_intake", context, logger):
            exterior_call = asyncio.to_thread(self.vision.analyze_exterior, exterior_image_urls[0], address)
            if equipment_image_urls:
                equipment_call = asyncio.to_thread(self.vision.analyze_equipment, equipment_image_urls)
                exterior_output, equipment_output = await asyncio.gather(exterior_call, equipment_call)
            else:
                exterior_output, equipment_output = await exterior_call, None

            return self.process(address, exterior_output, equipment_output,
                                has_equipment=bool(equipment_image_urls))
