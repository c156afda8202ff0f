# domains/uploads/views.py
import logging

from django.http import HttpResponse
from drf_spectacular.utils import OpenApiTypes, extend_schema, inline_serializer
from rest_framework import permissions, serializers
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.views import APIView

from domains.accounts.models import SellerProfile
from shared.api_markers import MessageSerializer

from .services import public_url, store_image

logger = logging.getLogger(__name__)

_IMAGE_FORM = inline_serializer(
    name="ImageUploadForm",
    fields={"image": serializers.FileField()},
)


def _plain_text(body: str) -> HttpResponse:
    return HttpResponse(body, content_type="text/plain")


# ─────────────────────────────────────────────────────────────────────────────
# 상품 이미지 업로드
# ─────────────────────────────────────────────────────────────────────────────
class ImageUploadAPI(APIView):
    """
    POST /api/v1/upload/  (multipart, field: image)
    성공 시 text/plain 으로 공개 URL 한 줄만 돌려준다.
    """

    parser_classes = [MultiPartParser, FormParser]
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(
        operation_id="UploadImage",
        request={"multipart/form-data": _IMAGE_FORM},
        responses={200: OpenApiTypes.STR, 400: MessageSerializer},
        tags=["upload"],
    )
    def post(self, request):
        name = store_image(request.FILES.get("image"))
        return _plain_text(public_url(name, request))


# ─────────────────────────────────────────────────────────────────────────────
# 판매자 로고 업로드
# ─────────────────────────────────────────────────────────────────────────────
class LogoUploadAPI(APIView):
    """
    POST /api/v1/upload/logo/
    업로드 후 URL을 내 판매자 프로필 logo 에 저장 (프로필이 없으면 만든다)
    """

    parser_classes = [MultiPartParser, FormParser]
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(
        operation_id="UploadSellerLogo",
        request={"multipart/form-data": _IMAGE_FORM},
        responses={200: OpenApiTypes.STR, 400: MessageSerializer},
        tags=["upload"],
    )
    def post(self, request):
        name = store_image(request.FILES.get("image"))
        url = public_url(name, request)

        profile, _ = SellerProfile.objects.get_or_create(user=request.user)
        profile.logo = url
        profile.save(update_fields=["logo", "updated_at"])
        logger.info("Seller logo updated: %s -> %s", request.user.pk, name)
        return _plain_text(url)
