# api/v1/urls.py
from django.urls import include, path

from rest_framework_simplejwt.views import TokenRefreshView

from domains.accounts.jwt import EmailTokenObtainPairView  # ← 커스텀 토큰 뷰

urlpatterns = [
    # --- Auth ---
    path("auth/token/", EmailTokenObtainPairView.as_view(), name="token_obtain_pair"),
    path("auth/token/refresh/", TokenRefreshView.as_view(), name="token_refresh"),
    # --- Users ---
    path("users/", include(("domains.accounts.urls_users", "accounts_users"))),
    # --- Catalog ---
    # (상품별 리뷰 /products/<id>/reviews/ 도 여기서 같이 등록)
    path("products/", include(("domains.catalog.urls_products", "catalog_products"))),
    # --- Uploads ---
    path("upload/", include(("domains.uploads.urls", "uploads"))),
]
