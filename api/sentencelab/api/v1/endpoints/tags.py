"""
Tags endpoints.
"""
from fastapi import APIRouter, Depends
from sqlmodel import Session
from typing import Optional
from sentencelab.core.database import get_session
from sentencelab.schemas.tag import TagResponse, TagsResponse, TagMappingsResponse, TagMappingOverview
from sentencelab.services import tag_service

router = APIRouter(tags=["tags"])


@router.get("/tags", response_model=TagsResponse)
def get_tags(
    search: Optional[str] = None,
    type: Optional[str] = None,
    top_level: bool = False,
    session: Session = Depends(get_session)
):
    """Get tags sorted by name, optionally filtered by type and name substring."""
    if top_level:
        tags = tag_service.get_top_level_tags(session)
    else:
        tags = tag_service.search_tags(session, search=search, tag_type=type)
    return TagsResponse(data=[TagResponse.model_validate(tag) for tag in tags])


@router.get("/tags/{tag_id}/children", response_model=TagsResponse)
def get_tag_children(
    tag_id: int,
    session: Session = Depends(get_session)
):
    """Get the direct sub tags of a tag."""
    tag = tag_service.get_tag(session, tag_id)
    children = tag_service.get_child_tags(session, tag.id)
    return TagsResponse(data=[TagResponse.model_validate(child) for child in children])


@router.get("/tag-mappings", response_model=TagMappingsResponse)
def get_tag_mappings(
    session: Session = Depends(get_session)
):
    """Get the overview of tag to vocabulary topic/subtopic mappings."""
    rows = tag_service.get_tag_mapping_overview(session)
    return TagMappingsResponse(data=[TagMappingOverview(**row) for row in rows])
