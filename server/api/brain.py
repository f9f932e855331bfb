# server/api/brain.py

import logging
from pydantic import BaseModel
from fastapi import APIRouter, HTTPException, Request, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from api.auth import AuthContext, get_current_user
from api.content import list_user_contents, serialize
from core.utils import random_hash
from database import get_db
from models.share_link import ShareLink


logger = logging.getLogger(__name__)


# -------------------------------
# Router & Schemas
# -------------------------------

router = APIRouter(prefix="/api/v1/brain", tags=["brain"])


class ShareRequest(BaseModel):
    share: bool


def share_url(config, hash: str) -> str:
    return f"{config.FRONTEND_URL}/?share={hash}"


def find_link(db: Session, user_id: int):
    return db.query(ShareLink).filter(ShareLink.user_id == user_id).first()


def enable_share(db: Session, user_id: int, hash_length: int) -> tuple[ShareLink, bool]:
    """
    Returns the user's share link and whether it was created by this call.
    Never creates a second link for the same user.
    """
    existing = find_link(db, user_id)
    if existing:
        return existing, False

    link = ShareLink(user_id=user_id, hash=random_hash(hash_length))
    db.add(link)
    try:
        db.commit()
    except IntegrityError:
        # a concurrent request won the unique user_id insert
        db.rollback()
        existing = find_link(db, user_id)
        if existing is None:
            raise
        return existing, False

    db.refresh(link)
    return link, True


def disable_share(db: Session, user_id: int) -> bool:
    removed = db.query(ShareLink).filter(ShareLink.user_id == user_id).delete()
    db.commit()
    return bool(removed)


# -------------------------------
# Share Management Endpoints
# -------------------------------

@router.get("/share")
def get_share_status(
    request: Request,
    current_user: AuthContext = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    link = find_link(db, current_user.user_id)
    if not link:
        return {"share": False}

    return {
        "share": True,
        "hash": link.hash,
        "shareLink": share_url(request.app.state.config, link.hash),
    }


@router.post("/share")
def set_share(
    req: ShareRequest,
    request: Request,
    current_user: AuthContext = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    config = request.app.state.config

    if not req.share:
        if disable_share(db, current_user.user_id):
            logger.info("User %s disabled sharing", current_user.user_id)
        return {"message": "Share link removed successfully"}

    link, created = enable_share(db, current_user.user_id, config.SHARE_HASH_LENGTH)
    if created:
        logger.info("User %s enabled sharing", current_user.user_id)

    return {
        "message": "Share link created successfully" if created else "Share link already exists",
        "hash": link.hash,
        "shareLink": share_url(config, link.hash),
    }


# -------------------------------
# Public Shared View
# -------------------------------

@router.get("/{hash}")
def get_shared_brain(hash: str, db: Session = Depends(get_db)):
    """
    Public, unauthenticated read of the owner's whole collection.
    Must stay registered after /share so that path is not taken as a hash.
    """
    link = db.query(ShareLink).filter(ShareLink.hash == hash).first()
    if not link:
        raise HTTPException(status_code=404, detail="Share link not found or expired")

    contents = list_user_contents(db, link.user_id)
    return {
        "message": "Contents fetched successfully",
        "contents": serialize(contents),
        "owner": link.owner.username,
    }
