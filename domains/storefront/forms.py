# domains/storefront/forms.py
from django import forms
from rest_framework.exceptions import AuthenticationFailed

from domains.accounts.serializers import authenticate_email


class SigninForm(forms.Form):
    """이메일/비밀번호 로그인 폼. 성공하면 cleaned_data["user"] 에 사용자를 담는다."""

    error_messages = {"invalid_login": "Invalid email or password"}

    email = forms.EmailField(
        label="Email",
        widget=forms.EmailInput(attrs={"placeholder": "Enter email", "autocomplete": "email"}),
    )
    password = forms.CharField(
        label="Password",
        strip=False,
        widget=forms.PasswordInput(attrs={"placeholder": "Enter password"}),
    )

    def clean(self):
        cleaned = super().clean()
        email = cleaned.get("email")
        password = cleaned.get("password")
        if email is None or password is None:
            return cleaned

        try:
            cleaned["user"] = authenticate_email(email, password)
        except AuthenticationFailed:
            # API 로그인과 같은 메시지
            raise forms.ValidationError(self.error_messages["invalid_login"], code="invalid_login")
        return cleaned
