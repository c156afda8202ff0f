# domains/catalog/filters.py
from __future__ import annotations

from decimal import Decimal, InvalidOperation

import django_filters as df
from django.core.exceptions import ValidationError

from .models import Product

# order 쿼리값 → 정렬 키 (그 외/미지정은 최신순)
ORDERINGS = {
    "lowest": ("price", "-created_at"),
    "highest": ("-price", "-created_at"),
    "toprated": ("-rating", "-created_at"),
    "newest": ("-created_at",),
}
DEFAULT_ORDERING = ORDERINGS["newest"]


def _to_number(value) -> Decimal:
    """숫자가 아니거나 비어 있으면 0 (필터 미적용 취급)"""
    try:
        num = Decimal(str(value).strip())
    except (InvalidOperation, TypeError, ValueError):
        return Decimal(0)
    return num if num.is_finite() else Decimal(0)


class ProductFilter(df.FilterSet):
    """
    상품 목록/검색 필터
    - name: 부분 일치(대소문자 무시)
    - category / seller: 정확히 일치
    - min & max: 둘 다 0이 아닐 때만 가격 범위 적용 (min만 주면 가격 필터 없음)
    - rating: rating >= 값
    - order: lowest | highest | toprated | (기본) 최신순
    """

    name = df.CharFilter(field_name="name", lookup_expr="icontains")
    category = df.CharFilter(field_name="category", lookup_expr="exact")
    seller = df.CharFilter(method="filter_seller")
    min = df.CharFilter(method="filter_price_bound")
    max = df.CharFilter(method="filter_price_bound")
    rating = df.CharFilter(method="filter_rating")
    order = df.CharFilter(method="filter_order")

    class Meta:
        model = Product
        fields = ["name", "category", "seller", "min", "max", "rating", "order"]

    def filter_seller(self, qs, name, value):
        try:
            return qs.filter(seller_id=value)
        except ValidationError:
            # UUID 형식이 아니면 일치하는 판매자 없음
            return qs.none()

    def filter_price_bound(self, qs, name, value):
        # min/max 는 filter_queryset 에서 한꺼번에 처리
        return qs

    def filter_rating(self, qs, name, value):
        rating = _to_number(value)
        return qs.filter(rating__gte=rating) if rating else qs

    def filter_order(self, qs, name, value):
        return qs.order_by(*ORDERINGS.get(value, DEFAULT_ORDERING))

    def filter_queryset(self, queryset):
        qs = super().filter_queryset(queryset.order_by(*DEFAULT_ORDERING))
        low = _to_number(self.form.cleaned_data.get("min"))
        high = _to_number(self.form.cleaned_data.get("max"))
        if low and high:
            qs = qs.filter(price__gte=low, price__lte=high)
        return qs
