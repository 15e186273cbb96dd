"""
Tag schemas.
"""
from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime


class TagResponse(BaseModel):
    """Tag response schema."""
    id: int
    name: str
    type: Optional[str] = None
    parent_tag_id: Optional[int] = None
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class TagsResponse(BaseModel):
    """Response schema for tag lists."""
    data: List[TagResponse]


class TagMappingOverview(BaseModel):
    """One row of the tag to vocabulary-topic mapping overview."""
    tag_id: int
    tag_name: str
    tag_type: Optional[str] = None
    parent_tag_name: Optional[str] = None
    vocab_topic: str
    vocab_subtopic: Optional[str] = None
    description: Optional[str] = None


class TagMappingsResponse(BaseModel):
    """Response schema for the tag mapping overview."""
    data: List[TagMappingOverview]


class TagVocabMappingImport(BaseModel):
    """A tag to vocabulary topic mapping as read from an import file."""
    topic: str
    subtopic: Optional[str] = None


class TagImport(BaseModel):
    """A tag as read from an import file. parent names a tag defined earlier in the file."""
    name: str
    type: Optional[str] = None
    parent: Optional[str] = None
    description: Optional[str] = None
    vocab_mappings: List[TagVocabMappingImport] = []
