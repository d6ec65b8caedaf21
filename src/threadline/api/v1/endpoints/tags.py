# src/threadline/api/v1/endpoints/tags.py
"""Tag catalog endpoint."""

from fastapi import APIRouter

from threadline.api.v1.dependencies import TagServiceDep
from threadline.schemas.tag import TagResponse

router = APIRouter(prefix="/tags", tags=["tags"])


@router.get("/", response_model=list[TagResponse])
async def list_tags(tags: TagServiceDep) -> list[TagResponse]:
    """Return every tag in the catalog."""
    return [TagResponse.model_validate(tag) for tag in tags.list_all()]
