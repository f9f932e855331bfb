# app/services/api.py

import os
import requests
from dotenv import load_dotenv

load_dotenv()

# Base URL of the FastAPI backend
BACKEND_URL = os.getenv("BACKEND_URL", "http://localhost:8000").rstrip("/")
API_URL = f"{BACKEND_URL}/api/v1"

REQUEST_TIMEOUT = 15


def _auth_headers(access_token):
    return {"Authorization": f"Bearer {access_token}"}


def _error(res, fallback):
    try:
        message = res.json().get("message")
    except ValueError:
        message = None
    return {"error": message or f"{fallback} ({res.status_code})", "status": res.status_code}


def _request(method, path, fallback, **kwargs):
    """
    Sends one request to the backend.
    Returns the decoded JSON body, or {"error": ...} on any failure.
    """
    kwargs.setdefault("timeout", REQUEST_TIMEOUT)
    try:
        res = requests.request(method, f"{API_URL}{path}", **kwargs)
    except requests.RequestException as e:
        return {"error": f"서버에 연결할 수 없습니다: {e}"}

    if not res.ok:
        return _error(res, fallback)
    return res.json()


# -------------------------------
# Authentication-related functions
# -------------------------------

def signup_user(username, password):
    return _request(
        "POST", "/signup", "회원가입 실패",
        json={"username": username, "password": password},
    )


def login_user(username, password):
    """
    Signs in and returns {"token": ..., "token_type": "bearer"}.
    """
    return _request(
        "POST", "/signin", "로그인 실패",
        json={"username": username, "password": password},
    )


def get_user_info(access_token):
    return _request("GET", "/me", "사용자 정보 조회 실패", headers=_auth_headers(access_token))


def start_session(username, password):
    """
    Signs in and returns {"token", "username"}, taking the username from the
    backend rather than from what was typed.
    """
    result = login_user(username.strip(), password)
    if result.get("error"):
        return result

    user = get_user_info(result["token"])
    if user.get("error"):
        return user
    return {"token": result["token"], "username": user["username"]}


# -------------------------
# Content Management
# -------------------------

def list_contents(access_token):
    data = _request("GET", "/content", "콘텐츠 조회 실패", headers=_auth_headers(access_token))
    if data.get("error"):
        return data
    return data.get("contents", [])


def add_content(access_token, content):
    return _request(
        "POST", "/content", "콘텐츠 저장 실패",
        json=content,
        headers=_auth_headers(access_token),
    )


def delete_content(access_token, content_id):
    return _request(
        "DELETE", f"/content/{content_id}", "삭제 실패",
        headers=_auth_headers(access_token),
    )


def upload_file(access_token, file_obj):
    """
    Uploads a Streamlit UploadedFile and returns {"url", "filename", "mime"}.
    """
    files = {"file": (file_obj.name, file_obj.getvalue(), file_obj.type or "application/octet-stream")}
    return _request(
        "POST", "/upload", "업로드 실패",
        files=files,
        headers=_auth_headers(access_token),
    )


# -------------------------
# Sharing
# -------------------------

def get_share_status(access_token):
    return _request("GET", "/brain/share", "공유 상태 조회 실패", headers=_auth_headers(access_token))


def set_share(access_token, share):
    return _request(
        "POST", "/brain/share", "공유 설정 실패",
        json={"share": bool(share)},
        headers=_auth_headers(access_token),
    )


def get_shared_brain(share_hash):
    """
    Public call, no token. A dead link comes back as {"error": ..., "status": 404}.
    """
    return _request("GET", f"/brain/{share_hash}", "공유 브레인 조회 실패")
