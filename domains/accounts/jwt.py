# domains/accounts/jwt.py
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer
from rest_framework_simplejwt.views import TokenObtainPairView

from .serializers import add_role_claims, authenticate_email, issue_tokens


class EmailTokenObtainPairSerializer(TokenObtainPairSerializer):
    """/auth/token/ 발급. 확인/발급은 /users/signin/ 과 같은 함수를 쓴다."""

    # 입력 필드로 email을 쓰겠다고 선언 (폼/스키마용)
    username_field = "email"

    @classmethod
    def get_token(cls, user):
        return add_role_claims(super().get_token(user), user)

    def validate(self, attrs):
        user = authenticate_email(attrs.get("email"), attrs.get("password"))
        return issue_tokens(user)


class EmailTokenObtainPairView(TokenObtainPairView):
    serializer_class = EmailTokenObtainPairSerializer
