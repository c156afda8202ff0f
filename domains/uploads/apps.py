from django.apps import AppConfig


class UploadsConfig(AppConfig):
    name = "domains.uploads"
    label = "uploads"
