from fastapi import APIRouter, Depends
import logging

from app.routes.intake import get_intake_pipeline
from domain.calculations.load_estimator import estimate_load
from models.schemas import JobSummaryRequest
from services.intake_pipeline import IntakePipeline
from services.report_assembler import assemble_job_summary
from services.vision_normalizer import normalize_exterior, normalize_equipment

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/summary")
async def create_job_summary(
    request: JobSummaryRequest,
    pipeline: IntakePipeline = Depends(get_intake_pipeline),
):
    logger.info(f"Assembling job summary for {request.address!r}")

    exterior = normalize_exterior(request.exterior) if request.exterior is not None else None

    enrichment = None
    if request.equipment is not None:
        enrichment = pipeline.enricher.enrich(normalize_equipment(request.equipment))

    load_calc = None
    if request.load_calc_input is not None:
        load_calc = estimate_load(request.load_calc_input.to_domain())

    summary = assemble_job_summary(request.address, exterior, enrichment, load_calc)
    return summary.to_json()
