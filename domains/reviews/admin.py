from django.contrib import admin

from .models import Review


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ("product", "name", "rating", "created_at")
    list_filter = ("rating",)
    search_fields = ("name", "comment", "product__name")
    raw_id_fields = ("product", "user")
    ordering = ("-created_at",)
    # 리뷰를 어드민에서 고치면 집계가 어긋나므로 열람만
    readonly_fields = ("product", "user", "name", "rating", "created_at")
