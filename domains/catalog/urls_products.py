# domains/catalog/urls_products.py
from django.urls import path
from .views_products import (
    ProductCategoriesAPI, ProductDetailAPI, ProductListCreateAPI, ProductSeedAPI
)
from ..reviews.views import ProductReviewListCreateAPI

app_name = "catalog_products"

urlpatterns = [
    # /api/v1/products/
    path("", ProductListCreateAPI.as_view(), name="list-create"),

    # /api/v1/products/seed/  (개발용 샘플 데이터)
    path("seed/", ProductSeedAPI.as_view(), name="seed"),

    # /api/v1/products/categories/
    path("categories/", ProductCategoriesAPI.as_view(), name="categories"),

    # /api/v1/products/<product_id>/
    path("<uuid:product_id>/", ProductDetailAPI.as_view(), name="detail"),

    # /api/v1/products/<product_id>/reviews/
    path("<uuid:product_id>/reviews/", ProductReviewListCreateAPI.as_view(), name="product-reviews"),
]
