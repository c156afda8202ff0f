import pytest
from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.tokens import AccessToken

from domains.accounts.jwt import EmailTokenObtainPairSerializer


@pytest.mark.django_db
class TestEmailTokenObtainPairSerializer:
    """EmailTokenObtainPairSerializer 테스트"""

    def test_username_field(self):
        assert EmailTokenObtainPairSerializer.username_field == "email"

    @pytest.mark.parametrize("email", ["test@example.com", "TEST@EXAMPLE.COM", "  test@example.com  "])
    def test_validate_success(self, user_factory, email):
        """대소문자/앞뒤 공백 무시"""
        user_factory(email="test@example.com", password="testpass123")

        result = EmailTokenObtainPairSerializer().validate({"email": email, "password": "testpass123"})

        assert result["refresh"]
        assert result["access"]

    @pytest.mark.parametrize(
        "attrs",
        [
            {"email": "test@example.com", "password": "wrongpass"},
            {"email": "nobody@example.com", "password": "testpass123"},
            {"email": "", "password": "testpass123"},
            {"email": None, "password": None},
            {"password": "testpass123"},
        ],
    )
    def test_validate_failure(self, user_factory, attrs):
        user_factory(email="test@example.com", password="testpass123")

        with pytest.raises(AuthenticationFailed) as exc_info:
            EmailTokenObtainPairSerializer().validate(attrs)

        assert exc_info.value.detail == "Invalid email or password"

    def test_inactive_user(self, user_factory):
        user_factory(email="test@example.com", password="testpass123", is_active=False)
        with pytest.raises(AuthenticationFailed):
            EmailTokenObtainPairSerializer().validate({"email": "test@example.com", "password": "testpass123"})

    def test_role_claims(self, seller_factory):
        seller_factory(email="s@example.com", password="testpass123")
        result = EmailTokenObtainPairSerializer().validate({"email": "s@example.com", "password": "testpass123"})

        token = AccessToken(result["access"])
        assert token["is_seller"] is True
        assert token["is_admin"] is False


@pytest.mark.django_db
def test_token_endpoint(api_client, user):
    r = api_client.post("/api/v1/auth/token/", {"email": user.email, "password": user.raw_password}, format="json")
    assert r.status_code == 200
    refresh = r.json()["refresh"]

    r = api_client.post("/api/v1/auth/token/refresh/", {"refresh": refresh}, format="json")
    assert r.status_code == 200
    assert "access" in r.json()


@pytest.mark.django_db
def test_token_endpoint_rejects_bad_credentials(api_client, user):
    r = api_client.post("/api/v1/auth/token/", {"email": user.email, "password": "nope"}, format="json")
    assert r.status_code == 401
    assert r.json() == {"message": "Invalid email or password"}
