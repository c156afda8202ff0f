"""
/api/v1/users/ 엔드포인트 테스트 (회원가입 / 로그인 / 프로필 / 판매자 카드 / 시드)
"""
from unittest.mock import patch

import pytest
from django.contrib.auth.hashers import check_password
from rest_framework_simplejwt.tokens import AccessToken

from domains.accounts.models import SellerProfile, User

BASE = "/api/v1/users/"


@pytest.mark.django_db
class TestRegisterAndSignin:
    def test_register(self, api_client):
        r = api_client.post(
            BASE + "register/",
            {"name": "Jane", "email": "Jane@Example.com", "password": "secret1"},
            format="json",
        )
        assert r.status_code == 201, r.content
        body = r.json()
        assert body["email"] == "jane@example.com"
        assert body["is_seller"] is False
        assert body["seller"] is None
        assert body["access"] and body["refresh"]

    def test_register_duplicate_email(self, api_client, user):
        r = api_client.post(
            BASE + "register/",
            {"name": "Dup", "email": user.email.upper(), "password": "secret1"},
            format="json",
        )
        assert r.status_code == 400
        assert r.json()["message"] == "email: Email already registered"

    def test_register_short_password(self, api_client, db):
        r = api_client.post(BASE + "register/", {"name": "x", "email": "x@example.com", "password": "123"}, format="json")
        assert r.status_code == 400
        assert "password" in r.json()["errors"]

    def test_signin(self, api_client, seller):
        r = api_client.post(BASE + "signin/", {"email": seller.email, "password": seller.raw_password}, format="json")
        assert r.status_code == 200, r.content
        body = r.json()
        assert body["user_id"] == str(seller.pk)
        assert body["is_seller"] is True
        assert body["seller"]["name"] == "Puma"
        assert body["access"]

    def test_signin_bad_password(self, api_client, user):
        r = api_client.post(BASE + "signin/", {"email": user.email, "password": "nope"}, format="json")
        assert r.status_code == 401
        assert r.json() == {"message": "Invalid email or password"}

    @pytest.mark.parametrize("path", ["users/signin/", "auth/token/"])
    def test_tokens_carry_role_claims(self, api_client, seller, path):
        """두 로그인 경로 모두 같은 역할 클레임을 싣는다"""
        r = api_client.post(
            "/api/v1/" + path, {"email": seller.email, "password": seller.raw_password}, format="json"
        )
        assert r.status_code == 200, r.content
        access = AccessToken(r.json()["access"])
        assert access["is_seller"] is True
        assert access["is_admin"] is False
        assert access["user_id"] == str(seller.pk)

    def test_signin_paths_share_authentication(self, api_client, user):
        """API 로그인, JWT 발급, 스토어프런트 로그인 모두 같은 비밀번호 확인을 거친다"""
        with patch("domains.accounts.serializers.check_password", wraps=check_password) as checked:
            api_client.post(BASE + "signin/", {"email": user.email, "password": user.raw_password}, format="json")
            api_client.post("/api/v1/auth/token/", {"email": user.email, "password": user.raw_password}, format="json")
            api_client.post("/signin/", {"email": user.email, "password": user.raw_password})
        assert checked.call_count == 3


@pytest.mark.django_db
class TestProfile:
    def test_requires_login(self, api_client):
        assert api_client.get(BASE + "profile/").status_code == 401

    def test_get(self, auth_client, user):
        body = auth_client.get(BASE + "profile/").json()
        assert body["email"] == user.email
        assert body["name"] == "Buyer"

    def test_update_seller_profile_merges_pay_method(self, auth_client_for, seller):
        profile = SellerProfile.objects.get(user=seller)
        profile.pay_method = {**profile.pay_method, "elsom": "0555"}
        profile.save()

        r = auth_client_for(seller).put(
            BASE + "profile/",
            {"name": "New", "seller": {"name": "Puma Store", "pay_method": {"m_bank": "1234"}}},
            format="json",
        )
        assert r.status_code == 200, r.content
        profile.refresh_from_db()
        assert profile.name == "Puma Store"
        assert profile.pay_method["elsom"] == "0555"
        assert profile.pay_method["m_bank"] == "1234"
        assert User.objects.get(pk=seller.pk).name == "New"

    def test_non_seller_cannot_create_store(self, auth_client_for, user):
        r = auth_client_for(user).put(BASE + "profile/", {"seller": {"name": "Shop"}}, format="json")
        assert r.status_code == 200
        assert not SellerProfile.objects.filter(user=user).exists()

    def test_password_change(self, auth_client_for, api_client, user):
        auth_client_for(user).put(BASE + "profile/", {"password": "changed1"}, format="json")
        r = api_client.post(BASE + "signin/", {"email": user.email, "password": "changed1"}, format="json")
        assert r.status_code == 200


@pytest.mark.django_db
class TestSellerCardAndSeed:
    def test_seller_card(self, api_client, seller):
        body = api_client.get(f"{BASE}{seller.pk}/").json()
        assert body["user_id"] == str(seller.pk)
        assert body["seller"]["name"] == "Puma"
        assert "email" not in body

    def test_seller_card_missing(self, api_client):
        r = api_client.get(f"{BASE}00000000-0000-0000-0000-000000000000/")
        assert r.status_code == 404

    def test_seed_is_idempotent(self, api_client):
        r = api_client.get(BASE + "seed/")
        assert r.status_code == 200
        assert [u["email"] for u in r.json()["created_users"]] == ["admin@example.com", "user@example.com"]

        admin = User.objects.get(email="admin@example.com")
        assert admin.is_admin and admin.is_seller and admin.is_staff
        assert admin.seller.name == "Puma"

        again = api_client.get(BASE + "seed/").json()
        assert again["created_users"] == []
        assert User.objects.count() == 2

    def test_seed_then_products_seed(self, api_client):
        api_client.get(BASE + "seed/")
        r = api_client.get("/api/v1/products/seed/")
        assert r.status_code == 200
        assert all(p["seller"]["name"] == "Puma" for p in r.json()["created_products"])
