# domains/accounts/urls_users.py
from django.urls import path
from .views import ProfileView, RegisterView, SellerDetailAPI, SigninView, UserSeedView

app_name = "accounts_users"

urlpatterns = [
    # 개발용 시드
    path("seed/", UserSeedView.as_view(), name="seed"),
    # 회원가입 / 로그인
    path("register/", RegisterView.as_view(), name="register"),
    path("signin/", SigninView.as_view(), name="signin"),
    # 내 정보
    path("profile/", ProfileView.as_view(), name="profile"),
    # 공개 판매자 카드
    path("<uuid:user_id>/", SellerDetailAPI.as_view(), name="detail"),
]
