import uuid
from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from domains.catalog.models import Product


class Review(models.Model):
    review_id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    product = models.ForeignKey(Product, on_delete=models.CASCADE, db_column="product_id", related_name="reviews")
    # 작성자: 탈퇴해도 리뷰는 상품에 남는다 (name 스냅샷 유지)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        db_column="user_id",
        related_name="reviews",
    )
    name = models.CharField(max_length=150)
    rating = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(5)])  # 1~5
    comment = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "reviews"
        ordering = ["created_at"]
        constraints = [
            models.UniqueConstraint(fields=["user", "product"], name="uniq_review_user_product"),  # 한 상품 1인 1리뷰
        ]
        indexes = [
            models.Index(fields=["product", "created_at"], name="reviews_product_created_idx"),
            models.Index(fields=["user"], name="reviews_user_idx"),
        ]

    def __str__(self):
        return f"Review({self.review_id}) {self.name}->{self.product_id}"
