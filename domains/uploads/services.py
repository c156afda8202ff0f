# domains/uploads/services.py
from __future__ import annotations

import logging
import time
from typing import Optional
from urllib.parse import unquote, urlparse

from django.conf import settings
from django.core.files.storage import default_storage
from rest_framework.exceptions import ValidationError

logger = logging.getLogger(__name__)

IMAGE_ONLY_MESSAGE = "Only image files allowed!"


# -----------------------------
# 검증
# -----------------------------
def validate_image(upload) -> None:
    """
    업로드 파일 검증
    - 파일 없음 → 400
    - MIME 이 image/* 가 아니면 → 400
    - UPLOAD_MAX_BYTES(5MiB) 초과 → 400 (정확히 5MiB 는 허용)
    """
    if upload is None:
        raise ValidationError("No file uploaded (field 'image')")

    content_type = (getattr(upload, "content_type", "") or "").lower()
    if not content_type.startswith("image/"):
        raise ValidationError(IMAGE_ONLY_MESSAGE)

    limit = int(getattr(settings, "UPLOAD_MAX_BYTES", 5 * 1024 * 1024))
    if upload.size > limit:
        raise ValidationError(f"File too large (max {limit // (1024 * 1024)} MB)")


# -----------------------------
# 저장 키 / URL
# -----------------------------
def build_upload_key(filename: str, now_ms: Optional[int] = None) -> str:
    """<epoch-ms>-<원본 파일명>"""
    ms = int(time.time() * 1000) if now_ms is None else int(now_ms)
    name = (filename or "image").replace("/", "_").replace("\\", "_")
    return f"{ms}-{name}"


def store_image(upload) -> str:
    """검증 후 default 스토리지에 저장하고 실제 저장된 이름(키)을 반환."""
    validate_image(upload)
    key = build_upload_key(upload.name)
    saved = default_storage.save(key, upload)
    logger.info("Stored upload %s (%d bytes, %s)", saved, upload.size, upload.content_type)
    return saved


def public_url(name: str, request=None) -> str:
    """스토리지 URL. request가 있고 상대 URL이면 절대 URL로 만든다."""
    url = default_storage.url(name)
    if request is not None and not urlparse(url).scheme:
        return request.build_absolute_uri(url)
    return url


def is_stored_upload_url(url: Optional[str]) -> bool:
    """외부(스토리지) 호스팅 이미지인지: http(s) 절대 URL만 해당."""
    if not url:
        return False
    return urlparse(url).scheme in ("http", "https")


def _storage_base_path() -> str:
    try:
        return urlparse(default_storage.url("")).path.lstrip("/")
    except NotImplementedError:
        # URL 을 지원하지 않는 백엔드
        return ""


def storage_key_from_url(url: Optional[str]) -> str:
    """
    공개 URL → 스토리지 키
    예) http://host/media/1700000000000-a.png → 1700000000000-a.png
        https://bucket.s3.amazonaws.com/1700000000000-a.png → 1700000000000-a.png
    """
    if not is_stored_upload_url(url):
        return ""
    key = unquote(urlparse(url).path).lstrip("/")
    base = _storage_base_path()
    if base and key.startswith(base):
        key = key[len(base):]
    return key
