# domains/accounts/models.py
from __future__ import annotations

import uuid
from django.conf import settings
from django.db import models
from django.contrib.auth.models import AbstractUser


# ----- Models ------------------------------------------------
class User(AbstractUser):
    """
    커스텀 유저 모델
    - PK: UUID (db_column='user_id')
    - email: unique
    - is_admin / is_seller 플래그
    - is_admin 이면 장고 어드민 접근(is_staff=True) 자동 허용
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        db_column="user_id",
    )

    # AbstractUser 기본 필드:
    # username(Unique), first_name, last_name, email, is_staff, is_active, is_superuser 등
    email = models.EmailField(max_length=254, unique=True)

    # 리뷰 작성자명 등 화면에 노출되는 이름
    name = models.CharField(max_length=150, blank=True)

    is_admin = models.BooleanField(default=False)
    is_seller = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "users"
        indexes = [
            models.Index(fields=["email"], name="users_email_idx"),
            models.Index(fields=["is_seller"], name="users_is_seller_idx"),
        ]

    @property
    def display_name(self) -> str:
        return self.name or self.username or self.email

    def __str__(self) -> str:
        # email 우선, 없으면 username
        return self.email or self.username

    # ---- is_admin ↔ 장고 관리자 플래그 동기화 ----
    def save(self, *args, **kwargs):
        should_staff = self.is_superuser or self.is_admin
        if self.is_staff != should_staff:
            self.is_staff = should_staff
            update_fields = kwargs.get("update_fields")
            if update_fields is not None:
                kwargs["update_fields"] = {*update_fields, "is_staff"}
        super().save(*args, **kwargs)


def default_pay_method() -> dict:
    return {
        "visa_card": "",
        "elsom": "",
        "o_money": "",
        "balance_kg": "",
        "m_bank": "",
    }


class SellerProfile(models.Model):
    """
    판매자 스토어 정보 (User 1:1)
    - rating/num_reviews: 판매자 상품 전체 리뷰의 평균/개수 (캐시 값)
      catalog.services.refresh_seller_rating 에서만 갱신한다.
    """
    PAY_METHOD_KEYS = tuple(default_pay_method())

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        primary_key=True,
        related_name="seller",
        db_column="user_id",
    )
    name = models.CharField(max_length=150, blank=True, default="")
    logo = models.CharField(max_length=500, blank=True, default="")
    logo_data = models.BinaryField(blank=True, null=True)  # 원본 로고 바이트(선택)
    description = models.TextField(blank=True, default="")
    instagram = models.CharField(max_length=100, blank=True, default="")
    pay_method = models.JSONField(default=default_pay_method, blank=True)

    rating = models.FloatField(default=0)
    num_reviews = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "seller_profiles"

    def __str__(self) -> str:
        return f"{self.name or self.user_id} ({self.rating:.2f} / {self.num_reviews})"
