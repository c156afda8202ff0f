# domains/accounts/admin.py
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from .models import SellerProfile, User


class SellerProfileInline(admin.StackedInline):
    model = SellerProfile
    can_delete = False
    fields = ("name", "logo", "description", "instagram", "pay_method", "rating", "num_reviews")
    readonly_fields = ("rating", "num_reviews")


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    list_display = ("email", "name", "is_admin", "is_seller", "is_staff", "created_at")
    list_filter = ("is_admin", "is_seller", "is_staff", "is_superuser")
    search_fields = ("email", "username", "name")
    ordering = ("-created_at",)
    inlines = [SellerProfileInline]

    readonly_fields = ("created_at", "updated_at", "is_staff")

    fieldsets = (
        ("기본 정보", {"fields": ("email", "username", "name", "password")}),
        ("권한", {
            "fields": ("is_admin", "is_seller", "is_active", "is_superuser"),
            "description": "is_admin 을 바꾸면 저장 시 is_staff가 자동 동기화됩니다.",
        }),
        ("중요 일시", {"fields": ("last_login", "created_at", "updated_at")}),
    )

    add_fieldsets = (
        (None, {
            "classes": ("wide",),
            "fields": ("email", "username", "name", "password1", "password2", "is_admin", "is_seller"),
        }),
    )
