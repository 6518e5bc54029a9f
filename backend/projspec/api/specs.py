from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse
from typing import Dict, List

from projspec.config import Settings
from projspec.services.errors import GenerationError
from projspec.services.generator import SpecGenerationService

router = APIRouter(prefix="/api/specs", tags=["specs"])


def get_service() -> SpecGenerationService:
    return SpecGenerationService(Settings.from_env())


@router.get("/projections")
def projections(service: SpecGenerationService = Depends(get_service)) -> List[Dict]:
    return [projection.model_dump() for projection in service.projections]


@router.get("/points")
def points(service: SpecGenerationService = Depends(get_service)) -> List[Dict]:
    return [point.model_dump() for point in service.points]


@router.get("/text", response_class=PlainTextResponse)
def spec_text(service: SpecGenerationService = Depends(get_service)):
    try:
        return PlainTextResponse(service.render_text())
    except GenerationError as exc:
        raise HTTPException(status_code=500, detail=str(exc))


@router.get("/cases")
def spec_cases(service: SpecGenerationService = Depends(get_service)):
    """Generated suites with every case's input, forward and inverse values."""
    try:
        suites = service.build_suites()
    except GenerationError as exc:
        raise HTTPException(status_code=500, detail=str(exc))
    return [suite.model_dump(exclude={"cases": {"__all__": {"projection"}}}) for suite in suites]
