# shared/pagination.py
from __future__ import annotations

import math

from django.conf import settings
from rest_framework.pagination import BasePagination
from rest_framework.response import Response


class PageNumberSkipPagination(BasePagination):
    """
    offset(skip/limit) 기반 페이지네이션.
    - 쿼리: ?pageNumber=N (1부터, 잘못된 값이면 1)
    - 응답: {"products": [...], "page": N, "pages": ceil(count / page_size)}
    - 범위를 벗어난 페이지는 404 대신 빈 목록
    """

    page_query_param = "pageNumber"
    results_key = "products"

    def get_page_size(self) -> int:
        return int(getattr(settings, "PRODUCTS_PAGE_SIZE", 4))

    def get_page_number(self, request) -> int:
        raw = request.query_params.get(self.page_query_param)
        try:
            page = int(raw)
        except (TypeError, ValueError):
            return 1
        return page if page > 0 else 1

    def paginate_queryset(self, queryset, request, view=None):
        size = self.get_page_size()
        self.page = self.get_page_number(request)
        self.count = queryset.count()
        offset = size * (self.page - 1)
        return list(queryset[offset:offset + size])

    def get_pages(self) -> int:
        return math.ceil(self.count / self.get_page_size())

    def get_paginated_response(self, data):
        return Response(
            {self.results_key: data, "page": self.page, "pages": self.get_pages()}
        )

    def get_paginated_response_schema(self, schema):
        return {
            "type": "object",
            "properties": {
                self.results_key: schema,
                "page": {"type": "integer", "example": 1},
                "pages": {"type": "integer", "example": 3},
            },
        }
