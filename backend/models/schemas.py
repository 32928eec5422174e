from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from typing import Optional, Any, Dict, List, Union

from models.enums import WindowDensity, Orientation, InsulationGrade, SidingMaterial
from domain.core.models import LoadCalcInput


class IntakeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    address: str = ""
    exterior_image_urls: List[str] = Field(default_factory=list, alias="exteriorImageUrls")
    equipment_image_urls: List[str] = Field(default_factory=list, alias="equipmentImageUrls")


class ParsedIntakeRequest(BaseModel):
    """Model output fetched by the caller; text or already-decoded JSON"""
    model_config = ConfigDict(populate_by_name=True)

    address: str = ""
    exterior_output: Union[str, Dict[str, Any], None] = Field(None, alias="exteriorOutput")
    equipment_output: Union[str, Dict[str, Any], None] = Field(None, alias="equipmentOutput")


class IntakeResponse(BaseModel):
    ok: bool
    message: str
    data: Dict[str, Any]


class ClarificationRequest(BaseModel):
    """User's answers plus the exterior record they are correcting"""
    exterior: Optional[Dict[str, Any]] = None
    stories: Optional[Union[float, str]] = None
    windows: Optional[str] = None
    siding: Optional[str] = None


class LoadCalcRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    conditioned_area_sqft: float = Field(..., alias="sqft", allow_inf_nan=False)
    stories: float = Field(1, ge=1, allow_inf_nan=False)
    windows: WindowDensity = WindowDensity.average
    orientation: Orientation = Orientation.mixed
    insulation: InsulationGrade = InsulationGrade.average
    siding: SidingMaterial = SidingMaterial.unknown
    design_delta_t: float = Field(40.0, alias="designDeltaT", allow_inf_nan=False)
    indoor_rh: float = Field(45.0, alias="indoorRH", allow_inf_nan=False)
    ducts_in_unconditioned_space: bool = Field(False, alias="ductsInAtticOrCrawl")

    @field_validator("windows", "orientation", "insulation", "siding", mode="before")
    @classmethod
    def _spelling(cls, v, info):
        enum_cls = cls.model_fields[info.field_name].annotation
        return enum_cls.parse(v, v)

    def to_domain(self) -> LoadCalcInput:
        return LoadCalcInput(
            conditioned_area_sqft=self.conditioned_area_sqft,
            stories=self.stories,
            windows=self.windows,
            orientation=self.orientation,
            insulation=self.insulation,
            siding=self.siding,
            design_delta_t=self.design_delta_t,
            indoor_rh=self.indoor_rh,
            ducts_in_unconditioned_space=self.ducts_in_unconditioned_space,
        )


class JobSummaryRequest(BaseModel):
    """
    Parts of a job summary as returned by the intake, clarify and load-calc
    endpoints. Equipment is re-enriched and the load estimate re-run from its
    inputs, so derived fields always come from the current rules.
    """
    model_config = ConfigDict(populate_by_name=True)

    address: str
    exterior: Optional[Dict[str, Any]] = None
    equipment: Union[str, Dict[str, Any], None] = Field(
        None, validation_alias=AliasChoices("equipment", "equipmentAnalysis", "equipmentOutput"))
    load_calc_input: Optional[LoadCalcRequest] = Field(None, alias="loadCalcInput")
