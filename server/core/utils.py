# server/core/utils.py

import re
import time
import shutil
import string
import secrets
from pathlib import Path
from fastapi import UploadFile


HASH_ALPHABET = string.ascii_letters + string.digits

_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-zA-Z0-9.-]")


def random_hash(length: int = 10) -> str:
    """
    Returns an opaque token of `length` alphanumeric characters,
    drawn from the OS CSPRNG.
    """
    return "".join(secrets.choice(HASH_ALPHABET) for _ in range(length))


def sanitize_filename(filename: str) -> str:
    name = Path(filename).name
    return _UNSAFE_FILENAME_CHARS.sub("_", name)


def stored_filename(original: str) -> str:
    """
    Name under which an upload is written: epoch millis plus the
    sanitized original name, so repeated uploads never collide.
    """
    return f"{int(time.time() * 1000)}-{sanitize_filename(original)}"


def save_upload(uploaded_file: UploadFile, upload_dir) -> Path:
    upload_dir = Path(upload_dir)
    upload_dir.mkdir(parents=True, exist_ok=True)

    path = upload_dir / stored_filename(uploaded_file.filename)
    with path.open("wb") as buffer:
        shutil.copyfileobj(uploaded_file.file, buffer)
    return path
