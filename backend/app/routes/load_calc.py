from fastapi import APIRouter
import logging

from domain.calculations.load_estimator import estimate_load
from models.schemas import LoadCalcRequest

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("")
async def run_load_calc(request: LoadCalcRequest):
    # InvalidLoadInputError is mapped to a 400 by the error handlers
    result = estimate_load(request.to_domain())
    logger.info(f"Load calc: {request.conditioned_area_sqft:.0f} sq ft -> {result.recommended_capacity} tons")
    return result.to_json()
