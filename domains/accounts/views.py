# domains/accounts/views.py
from __future__ import annotations

import logging

from django.contrib.auth import get_user_model
from django.db import transaction
from django.shortcuts import get_object_or_404

from drf_spectacular.utils import extend_schema, OpenApiResponse
from rest_framework import generics, permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from .models import SellerProfile
from .seed_data import SEED_USERS
from .serializers import (
    ProfileUpdateSerializer,
    RegisterSerializer,
    SellerCardSerializer,
    SigninResponseSerializer,
    SigninSerializer,
    UserSerializer,
    username_from_email,
)

logger = logging.getLogger(__name__)
User = get_user_model()


# ---------- 회원가입 / 로그인 ----------
@extend_schema(
    request=RegisterSerializer,
    responses={201: SigninResponseSerializer},
)
class RegisterView(APIView):
    permission_classes = [permissions.AllowAny]

    def post(self, request):
        ser = RegisterSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        user = ser.save()
        logger.info("User registered: %s", user.email)
        return Response(SigninResponseSerializer(user).data, status=status.HTTP_201_CREATED)


@extend_schema(
    request=SigninSerializer,
    responses={200: SigninResponseSerializer, 401: OpenApiResponse(description="Invalid email or password")},
)
class SigninView(APIView):
    permission_classes = [permissions.AllowAny]

    def post(self, request):
        ser = SigninSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        return Response(SigninResponseSerializer(ser.validated_data["user"]).data)


# ---------- 내 프로필 ----------
class ProfileView(APIView):
    """GET/PUT /api/v1/users/profile/ (본인)"""
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(responses={200: UserSerializer})
    def get(self, request):
        return Response(UserSerializer(request.user).data)

    @extend_schema(request=ProfileUpdateSerializer, responses={200: SigninResponseSerializer})
    def put(self, request):
        ser = ProfileUpdateSerializer(request.user, data=request.data, partial=True)
        ser.is_valid(raise_exception=True)
        user = ser.save()
        # 이메일/비밀번호가 바뀔 수 있으므로 토큰 재발급
        return Response(SigninResponseSerializer(user).data)


# ---------- 공개 판매자 카드 ----------
class SellerDetailAPI(generics.RetrieveAPIView):
    permission_classes = [permissions.AllowAny]
    serializer_class = SellerCardSerializer
    lookup_url_kwarg = "user_id"

    def get_object(self):
        return get_object_or_404(
            User.objects.select_related("seller"), pk=self.kwargs[self.lookup_url_kwarg]
        )


# ---------- 개발용 시드 ----------
class UserSeedView(APIView):
    permission_classes = [permissions.AllowAny]

    @extend_schema(responses={200: UserSerializer(many=True)})
    @transaction.atomic
    def get(self, request):
        created = []
        for row in SEED_USERS:
            data = dict(row)
            seller = data.pop("seller", None)
            password = data.pop("password")
            if User.objects.filter(email__iexact=data["email"]).exists():
                continue
            user = User(username=username_from_email(data["email"]), **data)
            user.set_password(password)
            user.save()
            if seller:
                SellerProfile.objects.create(user=user, **seller)
            created.append(user)
        logger.info("Seeded %d users", len(created))
        return Response({"created_users": UserSerializer(created, many=True).data})
