# tests/conftest.py
from decimal import Decimal
from uuid import uuid4

from django.conf import settings
from django.contrib.auth import get_user_model

import pytest
from rest_framework.test import APIClient

from config.celery import app as celery_app
from domains.accounts.models import SellerProfile
from domains.catalog.models import Product

User = get_user_model()


# ─────────────────────────────────────────────────────────────
# 전역 테스트 환경 최적화(해싱/스토리지/Celery)
# ─────────────────────────────────────────────────────────────
@pytest.fixture(autouse=True, scope="session")
def _fast_password_hasher(django_db_setup, django_db_blocker):
    """
    해시 느린 기본 해셔 대신 MD5 해셔 사용
    """
    with django_db_blocker.unblock():
        settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]


@pytest.fixture(autouse=True)
def _in_memory_storage(settings):
    """
    업로드/삭제는 메모리 스토리지로, 정적 파일은 매니페스트 없이
    """
    settings.STORAGES = {
        "default": {"BACKEND": "django.core.files.storage.InMemoryStorage"},
        "staticfiles": {"BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage"},
    }
    settings.MEDIA_URL = "/media/"


@pytest.fixture(autouse=True)
def _eager_celery():
    """
    브로커 없이 태스크를 즉시 실행
    eager 모드에서도 producer 를 열기 때문에 메모리 트랜스포트로 바꿔 둔다.
    """
    # namespace="CELERY" 로 로드했으므로 CELERY_ 접두 키가 우선한다
    prev = celery_app.conf.CELERY_TASK_ALWAYS_EAGER, celery_app.conf.CELERY_BROKER_URL
    celery_app.conf.CELERY_TASK_ALWAYS_EAGER = True
    celery_app.conf.CELERY_BROKER_URL = "memory://"
    yield
    celery_app.conf.CELERY_TASK_ALWAYS_EAGER, celery_app.conf.CELERY_BROKER_URL = prev


# ─────────────────────────────────────────────────────────────
# 클라이언트 & 인증
# ─────────────────────────────────────────────────────────────
@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def user_factory(db):
    def _make(**kw):
        email = kw.pop("email", f"user{uuid4().hex[:6]}@example.com")
        password = kw.pop("password", "Test1234!A")
        # username 자동 세팅
        kw.setdefault("username", f"{email.split('@')[0]}_{uuid4().hex[:6]}")
        kw.setdefault("name", email.split("@")[0])

        u = User.objects.create_user(email=email, password=password, **kw)
        # ✅ 로그인 테스트용 원문 비밀번호 보관
        u.raw_password = password
        return u

    return _make


@pytest.fixture
def user(user_factory):
    """기본 로그인 사용자 (일반 구매자)"""
    return user_factory(email="user@example.com", name="Buyer")


@pytest.fixture
def seller_factory(user_factory):
    """
    사용법: seller_factory(store="Puma", logo="https://cdn.example.com/puma.png")
    판매자 플래그 + SellerProfile 을 같이 만든다.
    """

    def _make(store="Puma", logo="/images/logo1.png", **kw):
        kw.setdefault("is_seller", True)
        u = user_factory(**kw)
        SellerProfile.objects.create(user=u, name=store, logo=logo, description="best seller")
        return u

    return _make


@pytest.fixture
def seller(seller_factory):
    return seller_factory(email="seller@example.com", name="Seller")


@pytest.fixture
def admin(user_factory):
    """관리자 사용자 (is_admin → is_staff 자동 동기화)"""
    return user_factory(email="admin@example.com", name="Admin", is_admin=True)


@pytest.fixture
def auth_client_for():
    """
    사용법: c = auth_client_for(user)
    JWT 발급 없이 force_authenticate 된 APIClient
    """

    def _client(u):
        c = APIClient()
        c.force_authenticate(user=u)
        return c

    return _client


@pytest.fixture
def auth_client(user):
    """
    SimpleJWT 토큰을 받아 Authorization 헤더 세팅된 APIClient 반환
    """
    c = APIClient()
    resp = c.post(
        "/api/v1/auth/token/",
        {"email": user.email, "password": user.raw_password},
        format="json",
    )
    assert resp.status_code == 200, getattr(resp, "data", resp.content)
    c.credentials(HTTP_AUTHORIZATION=f"Bearer {resp.data['access']}")
    return c


# ─────────────────────────────────────────────────────────────
# 카탈로그 기본 리소스
# ─────────────────────────────────────────────────────────────
@pytest.fixture
def product_factory(db):
    def _make(**kw):
        kw.setdefault("name", f"베이직 티셔츠 {uuid4().hex[:4]}")
        kw.setdefault("price", Decimal("19.90"))
        kw.setdefault("category", "Shirts")
        kw.setdefault("brand", "Nike")
        kw.setdefault("count_in_stock", 10)
        kw.setdefault("image", "/images/p1.jpg")
        return Product.objects.create(**kw)

    return _make


@pytest.fixture
def product(product_factory, seller):
    """판매자 소유의 기본 상품"""
    return product_factory(seller=seller, name="베이직 티셔츠")


@pytest.fixture
def post_review():
    """
    사용법: r = post_review(client, product, rating=5, comment="좋아요")
    """

    def _post(client: APIClient, product, rating=5, comment="좋아요"):
        return client.post(
            f"/api/v1/products/{product.pk}/reviews/",
            {"rating": rating, "comment": comment},
            format="json",
        )

    return _post
