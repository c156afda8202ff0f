from django.apps import AppConfig


class StorefrontConfig(AppConfig):
    name = "domains.storefront"
    label = "storefront"
