# domains/reviews/views.py
import logging

from django.shortcuts import get_object_or_404

from drf_spectacular.utils import OpenApiParameter, OpenApiTypes, extend_schema, inline_serializer
from rest_framework import generics, permissions, serializers, status
from rest_framework.exceptions import NotFound
from rest_framework.response import Response

from domains.accounts.serializers import SellerCardSerializer
from domains.catalog import services
from domains.catalog.models import Product
from domains.reviews.models import Review
from domains.reviews.serializers import ReviewReadSerializer, ReviewWriteSerializer
from shared.api_markers import MessageSerializer

logger = logging.getLogger(__name__)


@extend_schema(
    parameters=[
        OpenApiParameter(
            name="product_id",
            type=OpenApiTypes.UUID,
            location=OpenApiParameter.PATH,
            description="상품 ID (UUID)",
            required=True,
        )
    ]
)
class ProductReviewListCreateAPI(generics.ListCreateAPIView):
    """
    GET  /api/v1/products/{product_id}/reviews/
    POST /api/v1/products/{product_id}/reviews/  (로그인 사용자, 1인 1리뷰)
    """

    queryset = Review.objects.none()
    serializer_class = ReviewReadSerializer

    def get_queryset(self):
        # 스키마 생성 시에는 빈 쿼리셋
        if getattr(self, "swagger_fake_view", False):
            return Review.objects.none()
        return Review.objects.filter(product_id=self.kwargs.get("product_id")).order_by("created_at")

    def get_permissions(self):
        return (
            [permissions.IsAuthenticated()]
            if self.request.method == "POST"
            else [permissions.AllowAny()]
        )

    @extend_schema(operation_id="ListProductReviews", responses={200: ReviewReadSerializer(many=True)}, tags=["products"])
    def get(self, request, *args, **kwargs):
        # 존재 검증
        get_object_or_404(Product, pk=kwargs["product_id"])
        return super().get(request, *args, **kwargs)

    @extend_schema(
        operation_id="CreateProductReview",
        request=ReviewWriteSerializer,
        responses={
            201: inline_serializer(
                name="ReviewCreatedResponse",
                fields={
                    "message": serializers.CharField(),
                    "review": ReviewReadSerializer(),
                    "user": SellerCardSerializer(allow_null=True),
                },
            ),
            400: MessageSerializer,
            404: MessageSerializer,
        },
        tags=["products"],
    )
    def post(self, request, *args, **kwargs):
        ser = ReviewWriteSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        try:
            review, profile = services.add_review(
                kwargs["product_id"],
                request.user,
                ser.validated_data["rating"],
                ser.validated_data.get("comment", ""),
            )
        except services.ProductNotFound as e:
            raise NotFound(str(e))
        except services.DuplicateReview as e:
            return Response({"message": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        seller = profile.user if profile else None
        return Response(
            {
                "message": "Review Created",
                "review": ReviewReadSerializer(review).data,
                "user": SellerCardSerializer(seller).data if seller else None,
            },
            status=status.HTTP_201_CREATED,
        )
