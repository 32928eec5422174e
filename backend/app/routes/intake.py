from functools import lru_cache
import logging

from fastapi import APIRouter, Depends

from app.config import AFUE_TABLE_PATH
from domain.mechanical.afue_lookup import load_afue_table
from domain.mechanical.equipment_enricher import EquipmentEnricher
from domain.validation.exterior_validator import validate_exterior
from models.schemas import (
    IntakeRequest, ParsedIntakeRequest, IntakeResponse, ClarificationRequest,
)
from services.clarification import apply_clarification
from services.intake_pipeline import IntakePipeline, IntakeResult
from services.vision_normalizer import normalize_exterior

logger = logging.getLogger(__name__)

router = APIRouter()

MISSING_INPUT_MESSAGE = "Intake received, but at least one exterior photo and the address are required."
NEEDS_CLARIFICATION_MESSAGE = "AI analysis complete, but some exterior details need clarification."
COMPLETE_MESSAGE = "AI analysis complete."


@lru_cache
def get_intake_pipeline() -> IntakePipeline:
    """Process-wide pipeline; the vision client is created on first photo intake"""
    return IntakePipeline(enricher=EquipmentEnricher(afue_table=load_afue_table(AFUE_TABLE_PATH)))


def _intake_response(result: IntakeResult, exterior_count: int, equipment_count: int) -> IntakeResponse:
    data = result.to_json()
    data["photoCountExterior"] = exterior_count
    data["photoCountEquipment"] = equipment_count
    return IntakeResponse(
        ok=True,
        message=NEEDS_CLARIFICATION_MESSAGE if result.needs_clarification else COMPLETE_MESSAGE,
        data=data,
    )


@router.post("", response_model=IntakeResponse)
async def intake_photos(
    request: IntakeRequest,
    pipeline: IntakePipeline = Depends(get_intake_pipeline),
):
    exterior_count = len(request.exterior_image_urls)
    equipment_count = len(request.equipment_image_urls)

    if not request.address.strip() or exterior_count == 0:
        logger.info(f"Incomplete intake: address={bool(request.address.strip())}, exterior photos={exterior_count}")
        return IntakeResponse(
            ok=True,
            message=MISSING_INPUT_MESSAGE,
            data={
                "address": request.address,
                "photoCountExterior": exterior_count,
                "photoCountEquipment": equipment_count,
            },
        )

    result = await pipeline.analyze_photos(
        request.address, request.exterior_image_urls, request.equipment_image_urls
    )
    return _intake_response(result, exterior_count, equipment_count)


@router.post("/parsed", response_model=IntakeResponse)
async def intake_parsed(
    request: ParsedIntakeRequest,
    pipeline: IntakePipeline = Depends(get_intake_pipeline),
):
    result = pipeline.process(request.address, request.exterior_output, request.equipment_output)
    return _intake_response(
        result,
        exterior_count=1 if request.exterior_output is not None else 0,
        equipment_count=1 if request.equipment_output is not None else 0,
    )


@router.post("/clarify")
async def clarify_exterior(request: ClarificationRequest):
    original = normalize_exterior(request.exterior) if request.exterior is not None else None
    clarified = apply_clarification(original, request.stories, request.windows, request.siding)
    validation = validate_exterior(clarified)
    return {
        "exterior": clarified.to_json(),
        "exteriorValidation": validation.to_json(),
    }
