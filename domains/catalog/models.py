from __future__ import annotations

import uuid
from django.conf import settings
from django.db import models


# ------------------------
# Products
# ------------------------
class Product(models.Model):
    """
    판매 상품
    - seller: 판매자(User) 참조. 상품을 지워도 판매자는 남는다.
    - rating/num_reviews: 상품 리뷰의 평균/개수 (캐시 값)
      catalog.services.refresh_product_rating 에서만 갱신한다.
    """
    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        db_column="product_id",
    )

    name = models.CharField(max_length=255)
    # 업로드 스토리지의 공개 URL 또는 정적 경로(/images/p1.jpg)
    image = models.CharField(max_length=500, blank=True, default="")
    brand = models.CharField(max_length=255, blank=True, default="")
    category = models.CharField(max_length=255, blank=True, default="", db_index=True)
    description = models.TextField(blank=True, default="")
    price = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    count_in_stock = models.IntegerField(default=0)

    rating = models.FloatField(default=0)
    num_reviews = models.PositiveIntegerField(default=0)

    seller = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        db_column="seller_id",
        related_name="products",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "products"
        indexes = [
            models.Index(fields=["name"], name="products_name_idx"),
            models.Index(fields=["seller", "created_at"], name="products_seller_created_idx"),
            models.Index(fields=["price"], name="products_price_idx"),
            models.Index(fields=["rating"], name="products_rating_idx"),
        ]

    def __str__(self) -> str:
        return self.name or f"Product {self.pk}"
