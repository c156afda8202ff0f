import pytest

from domains.accounts.models import SellerProfile, default_pay_method


@pytest.mark.django_db
class TestUserModel:
    """User 모델 테스트"""

    def test_admin_flag_syncs_staff(self, user_factory):
        u = user_factory(is_admin=True)
        assert u.is_staff is True

        u.is_admin = False
        u.save(update_fields=["is_admin"])
        u.refresh_from_db()
        assert u.is_staff is False

    def test_display_name_fallback(self, user_factory):
        assert user_factory(name="Jane").display_name == "Jane"
        u = user_factory(email="noname@example.com", name="")
        assert u.display_name == u.username

    def test_str(self, user_factory):
        assert str(user_factory(email="s@example.com")) == "s@example.com"


@pytest.mark.django_db
class TestSellerProfile:
    def test_defaults(self, user_factory):
        profile = SellerProfile.objects.create(user=user_factory(is_seller=True))
        assert (profile.rating, profile.num_reviews) == (0, 0)
        assert profile.pay_method == default_pay_method()
        assert set(profile.pay_method) == set(SellerProfile.PAY_METHOD_KEYS)

    def test_reverse_accessor(self, seller):
        assert seller.seller.name == "Puma"
