# domains/catalog/tasks.py
from __future__ import annotations

import logging

from celery import shared_task
from django.core.files.storage import default_storage

logger = logging.getLogger(__name__)


@shared_task(name="domains.catalog.tasks.delete_product_image", ignore_result=True)
def delete_product_image(image_url: str) -> bool:
    """
    상품 삭제 후 스토리지 이미지 정리 (best-effort)
    실패는 로그만 남기고 삼킨다. 상품 삭제 결과에는 영향 없음.
    """
    from domains.uploads.services import storage_key_from_url

    key = storage_key_from_url(image_url)
    if not key:
        return False
    try:
        default_storage.delete(key)
    except Exception as e:
        logger.error("Failed to delete image from storage: %s (%s)", key, e)
        return False
    logger.info("Deleted image from storage: %s", key)
    return True
