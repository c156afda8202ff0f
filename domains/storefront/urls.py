# domains/storefront/urls.py
from django.urls import path

from . import views

app_name = "storefront"

urlpatterns = [
    path("", views.product_list, name="home"),
    path("signin/", views.signin, name="signin"),
    path("signout/", views.signout, name="signout"),
    # 검색창 제출
    path("search/", views.search, name="search"),
    path("search/name/<path:name>/", views.product_list, name="search_name"),
]
