# server/api/upload.py

import logging
from fastapi import APIRouter, UploadFile, File, Request, Depends, status

from api.auth import AuthContext, get_current_user
from core.utils import save_upload


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["upload"])


@router.post("/upload", status_code=status.HTTP_201_CREATED)
def upload_file(
    request: Request,
    file: UploadFile = File(...),
    current_user: AuthContext = Depends(get_current_user),
):
    """
    Stores one file under the upload directory and returns its public URL.
    The caller references the URL when it creates the content item.
    """
    saved_path = save_upload(file, request.app.state.config.UPLOAD_DIR)
    public_url = str(request.url_for("uploads", path=saved_path.name))
    logger.info("User %s uploaded %s as %s", current_user.user_id, file.filename, saved_path.name)

    return {
        "message": "File uploaded",
        "url": public_url,
        "filename": file.filename,
        "mime": file.content_type,
    }
