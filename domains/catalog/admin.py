from __future__ import annotations

from django.contrib import admin
from django.utils.html import format_html

from domains.reviews.models import Review

from .models import Product


def _thumb_html(image_url: str | None, size: int = 48) -> str:
    if not image_url:
        return "-"
    return format_html(
        '<img src="{}" style="height:{}px;width:auto;border-radius:8px;" />',
        image_url,
        size,
    )


# -------- Inline: Review (읽기 전용) -------------------------------
class ReviewInline(admin.TabularInline):
    model = Review
    extra = 0
    can_delete = False
    fields = ("name", "rating", "comment", "created_at")
    readonly_fields = fields
    ordering = ("created_at",)


# -------- Product --------------------------------------------------
@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    inlines = [ReviewInline]
    list_display = (
        "name",
        "thumb",
        "category",
        "brand",
        "price",
        "count_in_stock",
        "rating",
        "num_reviews",
        "seller",
        "updated_at",
    )
    list_filter = ("category", "brand")
    search_fields = ("name", "brand", "category")
    ordering = ("-created_at",)
    raw_id_fields = ("seller",)
    # 평점은 리뷰에서만 재계산된다
    readonly_fields = ("rating", "num_reviews", "created_at", "updated_at")

    def thumb(self, obj: Product):
        return _thumb_html(obj.image)

    thumb.short_description = "이미지"
