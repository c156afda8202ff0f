# domains/uploads/urls.py
from django.urls import path

from .views import ImageUploadAPI, LogoUploadAPI

app_name = "uploads"

urlpatterns = [
    path("", ImageUploadAPI.as_view(), name="image"),
    path("logo/", LogoUploadAPI.as_view(), name="logo"),
]
