"""
CEFR API Endpoints
Descriptors of the six CEFR levels.
"""
from fastapi import APIRouter, HTTPException

from dutch_tutor.data.cefr_descriptors import CEFR_DESCRIPTORS, get_descriptor
from dutch_tutor.models.cefr import CEFRDescriptor


router = APIRouter()


@router.get("/", response_model=list[CEFRDescriptor])
async def list_cefr_levels():
    """All levels from A1 to C2."""
    return list(CEFR_DESCRIPTORS.values())


@router.get("/{level}", response_model=CEFRDescriptor)
async def get_cefr_level(level: str):
    """Descriptor of one level (case-insensitive, e.g. "b1")."""
    descriptor = get_descriptor(level)
    if descriptor is None:
        raise HTTPException(
            status_code=404,
            detail="Invalid level. Use: A1, A2, B1, B2, C1, C2"
        )
    return descriptor
