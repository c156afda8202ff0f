# shared/permissions.py
from __future__ import annotations

from typing import Iterable

from rest_framework.permissions import SAFE_METHODS, BasePermission

# ---- helpers ---------------------------------------------------------------


def _is_schema_generation(view) -> bool:
    """drf-spectacular 스키마 생성 시 True (권한을 널널하게 통과시켜 문서 생성 편의)."""
    return bool(getattr(view, "swagger_fake_view", False))


def _user_has_flag(user, flags: Iterable[str]) -> bool:
    """로그인 상태이고 User.<flag> 중 하나라도 True 인지."""
    if not getattr(user, "is_authenticated", False):
        return False
    return any(bool(getattr(user, f, False)) for f in flags)


# ---- flag-based permissions ------------------------------------------------
# 비로그인 요청이 여기서 거절되면 DRF가 401(NotAuthenticated)로 바꿔 응답한다.


class IsSellerOrAdmin(BasePermission):
    """is_seller 또는 is_admin"""

    message = "Invalid Admin/Seller Token"

    def has_permission(self, request, view):
        if _is_schema_generation(view):
            return True
        return _user_has_flag(request.user, ("is_seller", "is_admin"))


class ReadOnlyOrSellerOrAdmin(BasePermission):
    """읽기 자유, 쓰기/변경은 seller/admin만"""

    message = IsSellerOrAdmin.message

    def has_permission(self, request, view):
        if _is_schema_generation(view):
            return True
        if request.method in SAFE_METHODS:
            return True
        return _user_has_flag(request.user, ("is_seller", "is_admin"))


__all__ = [
    "IsSellerOrAdmin",
    "ReadOnlyOrSellerOrAdmin",
]
