# domains/reviews/serializers.py
from __future__ import annotations

from rest_framework import serializers
from domains.reviews.models import Review


class ReviewReadSerializer(serializers.ModelSerializer):
    # 프로젝트 전역 UUID PK 정책에 맞춰 UUIDField 사용
    review_id = serializers.UUIDField(read_only=True)
    user_id = serializers.UUIDField(read_only=True)
    product_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = Review
        fields = ["review_id", "user_id", "product_id", "name", "rating", "comment", "created_at"]


class ReviewWriteSerializer(serializers.Serializer):
    """
    생성(POST) 입력 전용.
    - rating, comment 만 받는다.
    - 작성자/상품은 뷰에서 request.user, URL kwarg 로 주입한다.
    """
    rating = serializers.IntegerField(min_value=1, max_value=5)
    comment = serializers.CharField(required=False, allow_blank=True, default="")
