# domains/catalog/serializers.py
from __future__ import annotations

from typing import Any, Optional

from drf_spectacular.utils import extend_schema_field
from rest_framework import serializers

from domains.accounts.models import SellerProfile
from domains.reviews.serializers import ReviewReadSerializer

from .models import Product


# ─────────────────────────────────────────────────────────────────────────────
# 공용 유틸
# ─────────────────────────────────────────────────────────────────────────────
def _seller_profile(user) -> Optional[SellerProfile]:
    """User → SellerProfile (없으면 None)"""
    if user is None:
        return None
    try:
        return user.seller
    except SellerProfile.DoesNotExist:
        return None


# =========================
# Seller (상품에 붙는 판매자 요약)
# =========================
class SellerBriefSerializer(serializers.Serializer):
    """목록용: 판매자 id + 상호 + 로고"""

    seller_id = serializers.UUIDField(allow_null=True)
    name = serializers.CharField(allow_blank=True, allow_null=True)
    logo = serializers.CharField(allow_blank=True, allow_null=True)

    @staticmethod
    def from_user(user) -> Optional[dict]:
        if user is None:
            return None
        profile = _seller_profile(user)
        return {
            "seller_id": str(user.pk),
            "name": profile.name if profile else None,
            "logo": profile.logo if profile else None,
        }


class SellerDetailBriefSerializer(SellerBriefSerializer):
    """상세/결제용: 평점, 리뷰 수, 결제수단까지"""

    rating = serializers.FloatField()
    num_reviews = serializers.IntegerField()
    pay_method = serializers.JSONField()

    @staticmethod
    def from_user(user) -> Optional[dict]:
        data = SellerBriefSerializer.from_user(user)
        if data is None:
            return None
        profile = _seller_profile(user)
        data.update(
            rating=profile.rating if profile else 0,
            num_reviews=profile.num_reviews if profile else 0,
            pay_method=dict(profile.pay_method or {}) if profile else {},
        )
        return data


# =========================
# Products
# =========================
class ProductReadSerializer(serializers.ModelSerializer):
    product_id = serializers.UUIDField(source="id", read_only=True)
    price = serializers.DecimalField(max_digits=12, decimal_places=2)
    seller = serializers.SerializerMethodField()

    class Meta:
        model = Product
        fields = (
            "product_id",
            "name",
            "image",
            "brand",
            "category",
            "description",
            "price",
            "count_in_stock",
            "rating",
            "num_reviews",
            "seller",
            "created_at",
            "updated_at",
        )

    @extend_schema_field(SellerBriefSerializer(allow_null=True))
    def get_seller(self, obj: Product) -> Any:
        return SellerBriefSerializer.from_user(obj.seller)


class ProductDetailSerializer(ProductReadSerializer):
    """단건 조회: 리뷰 목록 + 판매자 상세(평점/결제수단)"""

    reviews = ReviewReadSerializer(many=True, read_only=True)

    class Meta(ProductReadSerializer.Meta):
        fields = ProductReadSerializer.Meta.fields + ("reviews",)

    @extend_schema_field(SellerDetailBriefSerializer(allow_null=True))
    def get_seller(self, obj: Product) -> Any:
        return SellerDetailBriefSerializer.from_user(obj.seller)


class ProductWriteSerializer(serializers.ModelSerializer):
    """PUT: 카탈로그 필드 덮어쓰기 (seller/rating/num_reviews 는 변경 불가)"""

    price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
    count_in_stock = serializers.IntegerField(min_value=0)

    class Meta:
        model = Product
        fields = ("name", "price", "image", "category", "brand", "count_in_stock", "description")
        extra_kwargs = {
            "image": {"allow_blank": True},
            "category": {"allow_blank": True},
            "brand": {"allow_blank": True},
            "description": {"allow_blank": True},
        }

    def update(self, instance, validated_data):
        for f in self.Meta.fields:
            if f in validated_data:
                setattr(instance, f, validated_data[f])
        instance.save()
        return instance
