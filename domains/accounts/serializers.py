# domains/accounts/serializers.py
from __future__ import annotations

import uuid
from django.contrib.auth import get_user_model
from django.contrib.auth.base_user import BaseUserManager
from django.contrib.auth.hashers import check_password
from django.utils.text import slugify
from rest_framework import serializers
from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.tokens import RefreshToken

from .models import SellerProfile

User = get_user_model()


def normalize_email(value: str) -> str:
    v = (value or "").strip()
    v = BaseUserManager.normalize_email(v)
    return v.lower()


def username_from_email(email: str) -> str:
    base = (email or "").split("@")[0]
    base = slugify(base) or "user"
    return f"{base}_{uuid.uuid4().hex[:6]}"


def add_role_claims(token, user):
    # 프론트 분기용 플래그
    token["is_admin"] = bool(user.is_admin)
    token["is_seller"] = bool(user.is_seller)
    return token


def issue_tokens(user) -> dict:
    refresh = add_role_claims(RefreshToken.for_user(user), user)
    return {"access": str(refresh.access_token), "refresh": str(refresh)}


def authenticate_email(email, password):
    """
    이메일(대소문자/공백 무시) + 비밀번호 확인.
    API 로그인, JWT 발급, 스토어프런트 로그인 모두 여기를 거친다.
    """
    user = User.objects.filter(email__iexact=normalize_email(email)).first()
    if not user or not user.is_active or not check_password(password or "", user.password):
        # 동일 메시지로 노출 (보안)
        raise AuthenticationFailed("Invalid email or password")
    return user


# ─────────────────────────────────────────────────────────────
# 판매자 프로필
# ─────────────────────────────────────────────────────────────
class PayMethodSerializer(serializers.Serializer):
    visa_card = serializers.CharField(required=False, allow_blank=True)
    elsom = serializers.CharField(required=False, allow_blank=True)
    o_money = serializers.CharField(required=False, allow_blank=True)
    balance_kg = serializers.CharField(required=False, allow_blank=True)
    m_bank = serializers.CharField(required=False, allow_blank=True)


class SellerProfileSerializer(serializers.ModelSerializer):
    pay_method = PayMethodSerializer(required=False)

    class Meta:
        model = SellerProfile
        fields = (
            "name",
            "logo",
            "description",
            "instagram",
            "pay_method",
            "rating",
            "num_reviews",
        )
        read_only_fields = ("rating", "num_reviews")


class UserSerializer(serializers.ModelSerializer):
    """응답용 사용자 정보 (판매자면 seller 포함)"""
    user_id = serializers.UUIDField(source="id", read_only=True)
    seller = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ("user_id", "name", "email", "is_admin", "is_seller", "seller")

    def get_seller(self, obj):
        return SellerProfileSerializer(obj.seller).data if _has_profile(obj) else None


def _has_profile(user) -> bool:
    try:
        user.seller
    except SellerProfile.DoesNotExist:
        return False
    return True


class SellerCardSerializer(serializers.ModelSerializer):
    """공개 판매자 카드 (/users/<id>/)"""
    user_id = serializers.UUIDField(source="id", read_only=True)
    seller = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ("user_id", "name", "is_seller", "seller")

    def get_seller(self, obj):
        return SellerProfileSerializer(obj.seller).data if _has_profile(obj) else None


# ─────────────────────────────────────────────────────────────
# 회원가입 / 로그인
# ─────────────────────────────────────────────────────────────
class RegisterSerializer(serializers.ModelSerializer):
    """회원가입: username은 이메일 기반으로 자동 생성"""
    password = serializers.CharField(write_only=True, min_length=6, trim_whitespace=False)

    class Meta:
        model = User
        fields = ("name", "email", "password")

    def validate_email(self, value):
        email = normalize_email(value)
        if User.objects.filter(email__iexact=email).exists():
            raise serializers.ValidationError("Email already registered")
        return email

    def create(self, validated):
        user = User(
            email=validated["email"],
            username=username_from_email(validated["email"]),
            name=validated.get("name", ""),
        )
        user.set_password(validated["password"])
        user.save()
        return user


class SigninSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)

    def validate(self, attrs):
        attrs["user"] = authenticate_email(attrs.get("email"), attrs.get("password"))
        return attrs


class SigninResponseSerializer(UserSerializer):
    """로그인/회원가입 응답: 사용자 정보 + 토큰"""
    access = serializers.CharField(read_only=True)
    refresh = serializers.CharField(read_only=True)

    class Meta(UserSerializer.Meta):
        fields = UserSerializer.Meta.fields + ("access", "refresh")

    def to_representation(self, instance):
        data = super().to_representation(instance)
        data.update(issue_tokens(instance))
        return data


# ─────────────────────────────────────────────────────────────
# 내 프로필 수정
# ─────────────────────────────────────────────────────────────
class ProfileUpdateSerializer(serializers.ModelSerializer):
    password = serializers.CharField(
        write_only=True, required=False, allow_blank=True, min_length=6, trim_whitespace=False
    )
    seller = SellerProfileSerializer(required=False)

    class Meta:
        model = User
        fields = ("name", "email", "password", "seller")

    def validate_email(self, value):
        email = normalize_email(value)
        if User.objects.filter(email__iexact=email).exclude(pk=self.instance.pk).exists():
            raise serializers.ValidationError("Email already registered")
        return email

    def update(self, instance, validated_data):
        # 부분 업데이트
        for f in ("name", "email"):
            if f in validated_data:
                setattr(instance, f, validated_data[f])
        password = validated_data.get("password")
        if password:
            instance.set_password(password)
        instance.save()

        seller_data = validated_data.get("seller")
        if seller_data is not None and instance.is_seller:
            profile, _ = SellerProfile.objects.get_or_create(user=instance)
            for f in ("name", "logo", "description", "instagram"):
                if f in seller_data:
                    setattr(profile, f, seller_data[f])
            if "pay_method" in seller_data:
                merged = dict(profile.pay_method or {})
                merged.update(seller_data["pay_method"] or {})
                profile.pay_method = merged
            profile.save()
        return instance
