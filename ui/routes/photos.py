"""Photo title preview routes."""

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from core.errors import TitleKeptError
from entity.photo import Photo
from entity.src import SRC_AUTO, src_string
from ui.auth import verify_basic_auth

router = APIRouter(prefix="/api/v1/photos", tags=["photos"])

# These will be set by app.py
_file_logger = None


def init(file_logger):
    """Initialize with audit logger reference."""
    global _file_logger
    _file_logger = file_logger


class CellIn(BaseModel):
    """Resolved location of a photo."""

    id: str = Field(default="", description="Cell id, empty for a location without one")
    name: str = Field(default="", description="Place name")
    street: str = ""
    district: str = ""
    city: str = ""
    state: str = ""
    country: str = ""


class LabelIn(BaseModel):
    """Classification label, best first."""

    name: str = Field(..., description="Label name")
    source: str = "image"
    uncertainty: int = Field(default=0, ge=0, le=100, description="Uncertainty in percent")
    priority: int = 0
    categories: List[str] = Field(default_factory=list)


class PhotoIn(BaseModel):
    """Photo metadata a title is derived from."""

    name: str = Field(..., description="File name in the library")
    uid: str = ""
    original_name: str = ""
    title: str = ""
    title_src: str = SRC_AUTO
    description: str = ""
    description_src: str = SRC_AUTO
    taken_at: Optional[datetime] = None
    taken_at_local: Optional[datetime] = None
    taken_src: str = SRC_AUTO
    cell: Optional[CellIn] = None
    subjects: List[str] = Field(default_factory=list, description="Names of recognized people")
    labels: List[LabelIn] = Field(default_factory=list)
    keywords: str = ""


@router.post("/title")
async def title(body: PhotoIn, username=Depends(verify_basic_auth)):
    """Compute title and description from posted photo metadata (requires basic auth)."""
    photo = Photo.from_dict(body.model_dump(exclude_none=True))

    kept = False
    try:
        photo.update_title(photo.labels.sort_by_relevance())
    except TitleKeptError:
        kept = True

    _file_logger.try_log("title", {"uid": photo.uid, "title": photo.title, "user": username})
    return {
        "uid": photo.uid,
        "title": photo.title,
        "title_src": src_string(photo.title_src),
        "description": photo.description,
        "kept": kept,
    }
