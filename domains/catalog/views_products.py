# domains/catalog/views_products.py
import logging

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import generics, permissions, status
from rest_framework.exceptions import NotFound
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import (
    extend_schema, inline_serializer, OpenApiParameter, OpenApiTypes
)
from rest_framework import serializers

from .filters import ProductFilter
from .models import Product
from .serializers import (
    ProductDetailSerializer, ProductReadSerializer, ProductWriteSerializer
)
from . import services
from shared.api_markers import EmptySerializer, MessageSerializer
from shared.pagination import PageNumberSkipPagination
from shared.permissions import IsSellerOrAdmin, ReadOnlyOrSellerOrAdmin

logger = logging.getLogger(__name__)


def _message_with_product(name: str):
    return inline_serializer(
        name=name,
        fields={"message": serializers.CharField(), "product": ProductDetailSerializer()},
    )


# ─────────────────────────────────────────────────────────────────────────────
# List & Create
# ─────────────────────────────────────────────────────────────────────────────
class ProductListCreateAPI(generics.ListCreateAPIView):
    filter_backends = [DjangoFilterBackend]
    filterset_class = ProductFilter
    pagination_class = PageNumberSkipPagination
    serializer_class = ProductReadSerializer
    permission_classes = [ReadOnlyOrSellerOrAdmin]

    def get_queryset(self):
        # 판매자 상호/로고를 같이 내려주므로 seller → profile 까지 join
        return Product.objects.select_related("seller", "seller__seller")

    @extend_schema(
        operation_id="ListProducts",
        parameters=[
            OpenApiParameter("pageNumber", OpenApiTypes.INT, OpenApiParameter.QUERY, required=False, description="페이지 번호 (1부터, 페이지당 4개)"),
            OpenApiParameter("name", OpenApiTypes.STR, OpenApiParameter.QUERY, required=False, description="이름 부분 검색 (대소문자 무시)"),
            OpenApiParameter("category", OpenApiTypes.STR, OpenApiParameter.QUERY, required=False),
            OpenApiParameter("seller", OpenApiTypes.UUID, OpenApiParameter.QUERY, required=False),
            OpenApiParameter("min", OpenApiTypes.NUMBER, OpenApiParameter.QUERY, required=False, description="max 와 함께 줄 때만 적용"),
            OpenApiParameter("max", OpenApiTypes.NUMBER, OpenApiParameter.QUERY, required=False, description="min 과 함께 줄 때만 적용"),
            OpenApiParameter("rating", OpenApiTypes.NUMBER, OpenApiParameter.QUERY, required=False, description="최소 평점"),
            OpenApiParameter(
                "order",
                OpenApiTypes.STR,
                OpenApiParameter.QUERY,
                required=False,
                enum=["lowest", "highest", "toprated", "newest"],
                description="정렬 (기본: 최신순)",
            ),
        ],
        responses={200: ProductReadSerializer(many=True)},
    )
    def get(self, *args, **kwargs):
        return super().get(*args, **kwargs)

    @extend_schema(
        operation_id="CreateProduct",
        request=EmptySerializer,
        responses={201: _message_with_product("ProductCreatedResponse")},
    )
    def post(self, request, *args, **kwargs):
        product = services.create_placeholder_product(request.user)
        return Response(
            {"message": "Product Created", "product": ProductDetailSerializer(product).data},
            status=status.HTTP_201_CREATED,
        )


# ─────────────────────────────────────────────────────────────────────────────
# Seed / Categories
# ─────────────────────────────────────────────────────────────────────────────
class ProductSeedAPI(APIView):
    permission_classes = [permissions.AllowAny]

    @extend_schema(operation_id="SeedProducts", responses={200: ProductReadSerializer(many=True), 500: MessageSerializer})
    def get(self, request):
        try:
            created = services.seed_products()
        except services.SellerMissing as e:
            return Response({"message": str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response({"created_products": ProductReadSerializer(created, many=True).data})


class ProductCategoriesAPI(APIView):
    permission_classes = [permissions.AllowAny]

    @extend_schema(operation_id="ListProductCategories", responses={200: OpenApiTypes.STR})
    def get(self, request):
        return Response(services.list_categories())


# ─────────────────────────────────────────────────────────────────────────────
# Retrieve / Update / Delete
# ─────────────────────────────────────────────────────────────────────────────
class ProductDetailAPI(generics.GenericAPIView):
    lookup_url_kwarg = "product_id"
    serializer_class = ProductDetailSerializer

    def get_permissions(self):
        # 열람은 모두 허용, 수정/삭제는 판매자/관리자만
        if self.request.method in ("PUT", "DELETE"):
            return [IsSellerOrAdmin()]
        return [permissions.AllowAny()]

    def get_object(self):
        try:
            return services.get_product(self.kwargs[self.lookup_url_kwarg])
        except services.ProductNotFound as e:
            raise NotFound(str(e))

    @extend_schema(operation_id="RetrieveProduct", responses={200: ProductDetailSerializer, 404: MessageSerializer})
    def get(self, request, *args, **kwargs):
        return Response(ProductDetailSerializer(self.get_object()).data)

    @extend_schema(
        operation_id="UpdateProduct",
        request=ProductWriteSerializer,
        responses={200: _message_with_product("ProductUpdatedResponse"), 404: MessageSerializer},
    )
    def put(self, request, *args, **kwargs):
        product = self.get_object()
        ser = ProductWriteSerializer(product, data=request.data)
        ser.is_valid(raise_exception=True)
        ser.save()
        # reviews prefetch 캐시를 버리고 다시 읽는다
        product = services.get_product(product.pk)
        return Response({"message": "Product Updated", "product": ProductDetailSerializer(product).data})

    @extend_schema(
        operation_id="DeleteProduct",
        responses={200: _message_with_product("ProductDeletedResponse"), 404: MessageSerializer},
    )
    def delete(self, request, *args, **kwargs):
        product = self.get_object()
        # 삭제 전 상태를 응답으로 돌려준다
        snapshot = ProductDetailSerializer(product).data
        try:
            services.delete_product(product)
        except services.ProductNotFound as e:
            # 조회 후 다른 요청이 먼저 지운 경우
            raise NotFound(str(e))
        return Response({"message": "Product Deleted", "product": snapshot})
