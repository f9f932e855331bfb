# server/api/content.py

import logging
from datetime import datetime
from typing import Literal
from pydantic import BaseModel, ConfigDict
from fastapi import APIRouter, HTTPException, Depends, status
from sqlalchemy.orm import Session

from api.auth import AuthContext, get_current_user
from database import get_db
from models.content import Content


logger = logging.getLogger(__name__)


# -------------------------------
# Router & Schemas
# -------------------------------

router = APIRouter(prefix="/api/v1", tags=["content"])

ContentType = Literal["youtube", "twitter", "image", "document", "text"]


class ContentCreate(BaseModel):
    """
    Request schema for saving a new item.
    `filename` and `mime` come from a previous call to /api/v1/upload.
    """
    title: str | None = None
    link: str | None = None
    type: ContentType = "youtube"
    body: str | None = None
    filename: str | None = None
    mime: str | None = None
    tags: list[str] = []


class Owner(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str


class ContentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    link: str | None = None
    type: str
    body: str | None = None
    filename: str | None = None
    mime: str | None = None
    tags: list[str] = []
    created_at: datetime | None = None
    owner: Owner | None = None


def missing_field_error(req: ContentCreate) -> str | None:
    """
    Returns the validation message for `req`, or None if it can be saved.
    Each content type needs a different subset of link/body/file.
    """
    if not req.title:
        return "Title is required"

    if req.type == "text":
        if not req.body and not req.link:
            return "Body text or a link is required for text content"
    elif req.type == "image":
        if not req.link and not req.filename:
            return "Link (URL) or uploaded file is required for image content"
    elif req.type == "document":
        if not req.link and not req.body and not req.filename:
            return "Provide a link, file upload, or body text for document"
    elif not req.link:
        return "A link is required for YouTube and Twitter content"

    return None


def serialize(contents) -> list[ContentOut]:
    return [ContentOut.model_validate(c) for c in contents]


def list_user_contents(db: Session, user_id: int):
    return (
        db.query(Content)
        .filter(Content.user_id == user_id)
        .order_by(Content.id)
        .all()
    )


# -------------------------------
# Content Endpoints
# -------------------------------

@router.post("/content", status_code=status.HTTP_201_CREATED)
def create_content(
    req: ContentCreate,
    current_user: AuthContext = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    error = missing_field_error(req)
    if error:
        raise HTTPException(status_code=400, detail=error)

    content = Content(
        title=req.title,
        link=req.link,
        type=req.type,
        body=req.body,
        filename=req.filename,
        mime=req.mime,
        tags=req.tags,
        user_id=current_user.user_id,
    )
    db.add(content)
    db.commit()
    db.refresh(content)
    logger.info("User %s saved %s content %s", current_user.user_id, content.type, content.id)

    return {
        "message": "Content created successfully",
        "content": ContentOut.model_validate(content),
    }


@router.get("/content")
def list_contents(
    current_user: AuthContext = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    contents = list_user_contents(db, current_user.user_id)
    return {"message": "Contents fetched successfully", "contents": serialize(contents)}


@router.delete("/content/{content_id}")
def delete_content(
    content_id: int,
    current_user: AuthContext = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Deletes one of the caller's items.
    Someone else's item is reported exactly like a missing one.
    """
    deleted = (
        db.query(Content)
        .filter(Content.id == content_id, Content.user_id == current_user.user_id)
        .delete()
    )
    if not deleted:
        raise HTTPException(status_code=404, detail="Content not found or not owned by user")

    db.commit()
    logger.info("User %s deleted content %s", current_user.user_id, content_id)
    return {"message": "Content deleted successfully"}
