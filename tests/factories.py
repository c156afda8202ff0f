import itertools
from decimal import Decimal
from uuid import uuid4

from django.contrib.auth import get_user_model

from domains.accounts.models import SellerProfile
from domains.catalog.models import Product
from domains.reviews.models import Review

_email_seq = itertools.count(1)
User = get_user_model()


def unique_email(prefix="user", domain="example.com"):
    return f"{prefix}{next(_email_seq)}@{domain}"


def create_user(email=None, password="Test1234!A", **extra):
    """
    - username 은 이메일 앞부분 + suffix 로 자동 세팅
    - name 미지정 시 이메일 앞부분
    """
    if email is None:
        email = unique_email()
    base = email.split("@")[0]
    extra.setdefault("username", f"{base}_{uuid4().hex[:6]}")
    extra.setdefault("name", base)
    return User.objects.create_user(email=email, password=password, **extra)


def create_seller(store="Puma", logo="/images/logo1.png", **extra):
    u = create_user(is_seller=True, **extra)
    SellerProfile.objects.create(user=u, name=store, logo=logo)
    return u


def create_product(seller=None, name=None, price="19.90", **extra):
    return Product.objects.create(
        seller=seller,
        name=name or f"product {uuid4().hex[:6]}",
        price=Decimal(price),
        **extra,
    )


def create_review(product, user=None, rating=5, comment=""):
    """집계 갱신 없이 리뷰 행만 만든다 (재계산 테스트용)"""
    user = user or create_user()
    return Review.objects.create(
        product=product, user=user, name=user.display_name, rating=rating, comment=comment
    )
