# shared/exceptions.py
"""
DRF 전역 예외 핸들러

모든 API 에러를 ``{"message": ...}`` 형태로 통일한다.
- 401/403 (인증/권한), 404, 400(검증 실패)은 DRF 기본 처리 후 본문만 변환
- 그 외 예상치 못한 예외(DB/스토리지 장애)는 로그를 남기고 500으로 응답
"""
from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = logging.getLogger(__name__)


def _first_message(data) -> str:
    """ValidationError 의 중첩 구조(dict/list)에서 첫 메시지를 뽑아낸다."""
    if isinstance(data, dict):
        if "detail" in data:
            return str(data["detail"])
        if "message" in data:
            return str(data["message"])
        for key, value in data.items():
            msg = _first_message(value)
            if key == "non_field_errors":
                return msg
            return f"{key}: {msg}"
        return ""
    if isinstance(data, (list, tuple)):
        return _first_message(data[0]) if data else ""
    return str(data)


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)

    if response is None:
        # DRF가 처리하지 못한 예외 → 500
        view = context.get("view")
        logger.exception(
            "Unhandled error in %s: %s", view.__class__.__name__ if view else "-", exc
        )
        set_rollback()
        return Response(
            {"message": str(exc) or exc.__class__.__name__},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    data = response.data
    body = {"message": _first_message(data)}
    # 필드별 검증 에러는 원본도 함께 내려준다
    if isinstance(data, dict) and "detail" not in data and "message" not in data:
        body["errors"] = data
    response.data = body
    return response
