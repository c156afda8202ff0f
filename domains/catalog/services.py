from __future__ import annotations

import logging
import math
import time
from typing import Iterable, Optional, Tuple

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction

from domains.accounts.models import SellerProfile
from domains.reviews.models import Review

from .models import Product
from .seed_data import SAMPLE_PRODUCTS

logger = logging.getLogger(__name__)
User = get_user_model()


class ProductNotFound(Exception):
    """해당 id의 상품이 없을 때"""

    pass


class DuplicateReview(Exception):
    """같은 사용자가 같은 상품에 이미 리뷰를 남겼을 때"""

    pass


class SellerMissing(Exception):
    """시드 데이터를 붙일 판매자 계정이 없을 때"""

    pass


# -----------------------------
# 평점 집계 (순수 함수)
# -----------------------------
def average_rating(values: Iterable[float]) -> float:
    """
    평점 평균. 값이 없거나 결과가 유한수가 아니면 0.
    상품/판매자 평점 모두 이 함수 하나로만 계산한다.
    """
    values = [float(v) for v in values]
    if not values:
        return 0.0
    avg = sum(values) / len(values)
    return avg if math.isfinite(avg) else 0.0


def summarize_ratings(values: Iterable[float]) -> Tuple[float, int]:
    values = list(values)
    return average_rating(values), len(values)


# -----------------------------
# 집계 재계산 (캐시 필드 동기화)
# -----------------------------
def refresh_product_rating(product: Product) -> Product:
    """상품 리뷰 전체로 rating/num_reviews 재계산 후 저장."""
    ratings = Review.objects.filter(product_id=product.pk).values_list("rating", flat=True)
    product.rating, product.num_reviews = summarize_ratings(ratings)
    product.save(update_fields=["rating", "num_reviews", "updated_at"])
    return product


def refresh_seller_rating(seller, exclude_product_id=None) -> Optional[SellerProfile]:
    """
    판매자 평점 재계산 (멱등).
    판매자의 모든 상품 리뷰 평균 = 상품별 평균을 리뷰 수로 가중 평균한 값.
    exclude_product_id: 삭제 예정 상품의 기여분을 빼고 계산할 때.
    호출 측 트랜잭션 안에서 프로필 행을 잠근다.
    """
    if seller is None:
        return None

    profile, _ = SellerProfile.objects.select_for_update().get_or_create(user_id=seller.pk)

    reviews = Review.objects.filter(product__seller_id=seller.pk)
    if exclude_product_id is not None:
        reviews = reviews.exclude(product_id=exclude_product_id)

    profile.rating, profile.num_reviews = summarize_ratings(
        reviews.values_list("rating", flat=True)
    )
    profile.save(update_fields=["rating", "num_reviews", "updated_at"])
    return profile


# -----------------------------
# 조회
# -----------------------------
def get_product(product_id) -> Product:
    try:
        return (
            Product.objects.select_related("seller", "seller__seller")
            .prefetch_related("reviews")
            .get(pk=product_id)
        )
    except (Product.DoesNotExist, DjangoValidationError):
        raise ProductNotFound("Product Not Found")


def lock_product(product_id) -> Product:
    """
    상품 행 잠금 (호출 측 트랜잭션 안에서)
    잠금 순서: 상품 행 → 판매자 프로필 행. 리뷰 추가/상품 삭제 모두 이 순서를 따른다.
    """
    try:
        return Product.objects.select_for_update().get(pk=product_id)
    except (Product.DoesNotExist, DjangoValidationError):
        raise ProductNotFound("Product Not Found")


def list_categories() -> list[str]:
    """전체 상품의 카테고리 (중복 제거, 매 호출마다 계산)"""
    return list(
        Product.objects.exclude(category="")
        .order_by("category")
        .values_list("category", flat=True)
        .distinct()
    )


# -----------------------------
# 생성 / 삭제
# -----------------------------
def create_placeholder_product(seller) -> Product:
    """빈 상품 생성. 이후 PUT 으로 실제 값을 채운다."""
    product = Product.objects.create(
        name=f"sample name {int(time.time() * 1000)}",
        image=getattr(settings, "PRODUCT_PLACEHOLDER_IMAGE", "/images/p1.jpg"),
        price=0,
        category="sample category",
        brand="sample brand",
        count_in_stock=0,
        rating=0,
        num_reviews=0,
        description="sample description",
        seller=seller,
    )
    logger.info("Placeholder product created: %s by %s", product.pk, seller.pk)
    return product


def schedule_image_cleanup(image_url: str) -> bool:
    """
    커밋 후 스토리지 이미지 삭제 태스크를 비동기로 던진다 (fire-and-forget).
    브로커 장애도 로그만 남기고 삼킨다.
    """
    from domains.uploads.services import is_stored_upload_url
    from .tasks import delete_product_image

    if not is_stored_upload_url(image_url):
        return False

    def _enqueue():
        try:
            delete_product_image.delay(image_url)
        except Exception as e:
            logger.error("Failed to enqueue image cleanup for %s: %s", image_url, e)

    transaction.on_commit(_enqueue)
    return True


@transaction.atomic
def delete_product(product: Product) -> Optional[SellerProfile]:
    """
    상품 삭제 (연쇄 처리)
    0) 상품 행 잠금 (add_review 와 같은 순서)
    1) 판매자 평점에서 이 상품의 리뷰 기여분 제거
    2) 외부 스토리지 이미지 정리 예약 (실패해도 삭제는 진행)
    3) 상품 삭제 (리뷰는 CASCADE)
    """
    product = lock_product(product.pk)
    profile = refresh_seller_rating(product.seller, exclude_product_id=product.pk)
    schedule_image_cleanup(product.image)
    Product.objects.filter(pk=product.pk).delete()
    logger.info("Product deleted: %s", product.pk)
    return profile


# -----------------------------
# 리뷰
# -----------------------------
@transaction.atomic
def add_review(product_id, user, rating: int, comment: str = "") -> Tuple[Review, Optional[SellerProfile]]:
    """
    리뷰 추가 → 상품 평점 재계산 → 판매자 평점 재계산.
    한 사용자당 한 상품에 리뷰 1개 (DuplicateReview).
    """
    product = lock_product(product_id)

    if Review.objects.filter(product_id=product.pk, user_id=user.pk).exists():
        raise DuplicateReview("You already submitted a review")

    review = Review.objects.create(
        product=product,
        user=user,
        name=user.display_name,
        rating=int(rating),
        comment=comment or "",
    )
    refresh_product_rating(product)

    seller = User.objects.filter(pk=product.seller_id).first() if product.seller_id else None
    profile = refresh_seller_rating(seller)
    return review, profile


# -----------------------------
# 시드
# -----------------------------
@transaction.atomic
def seed_products() -> list[Product]:
    """샘플 상품을 첫 번째 판매자 소유로 일괄 생성."""
    seller = User.objects.filter(is_seller=True).order_by("created_at").first()
    if seller is None:
        raise SellerMissing("No seller found. first run /api/v1/users/seed/")
    created = Product.objects.bulk_create(
        [Product(seller=seller, **row) for row in SAMPLE_PRODUCTS]
    )
    logger.info("Seeded %d products for seller %s", len(created), seller.pk)
    return created
