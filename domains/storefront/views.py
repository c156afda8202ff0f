# domains/storefront/views.py
import logging

from django.conf import settings
from django.contrib import messages
from django.contrib.auth import login, logout
from django.core.paginator import Paginator
from django.shortcuts import redirect, render
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_GET, require_POST

from domains.catalog.filters import ProductFilter
from domains.catalog.models import Product

from .forms import SearchForm, SigninForm

logger = logging.getLogger(__name__)


def _redirect_target(request) -> str:
    """
    ?redirect=shipping → /shipping
    외부 호스트로 나가는 값은 무시하고 / 로 보낸다.
    """
    target = (request.POST.get("redirect") or request.GET.get("redirect") or "/").strip()
    if not target.startswith("/"):
        target = "/" + target
    if not url_has_allowed_host_and_scheme(target, allowed_hosts={request.get_host()}):
        return "/"
    return target


# ---------- 로그인 / 로그아웃 ----------
def signin(request):
    target = _redirect_target(request)
    if request.user.is_authenticated and request.method == "GET":
        return redirect(target)

    form = SigninForm(request.POST or None)
    if request.method == "POST":
        if form.is_valid():
            user = form.cleaned_data["user"]
            login(request, user)
            logger.info("Storefront signin: %s", user.email)
            return redirect(target)
        for error in form.non_field_errors():
            messages.error(request, error)

    return render(request, "storefront/signin.html", {"form": form, "redirect": target})


@require_POST
def signout(request):
    logout(request)
    return redirect("storefront:home")


# ---------- 검색 ----------
@require_GET
def search(request):
    """검색창 제출 → /search/name/<name>/"""
    form = SearchForm(request.GET)
    name = form.cleaned_data["q"] if form.is_valid() else ""
    if not name:
        return redirect("storefront:home")
    return redirect("storefront:search_name", name=name)


@require_GET
def product_list(request, name: str = ""):
    """API 목록과 같은 ProductFilter 로 거른 상품을 페이지 단위로 보여준다."""
    params = request.GET.copy()
    if name:
        params["name"] = name
    qs = ProductFilter(
        data=params,
        queryset=Product.objects.select_related("seller", "seller__seller"),
    ).qs

    paginator = Paginator(qs, getattr(settings, "PRODUCTS_PAGE_SIZE", 4))
    page = paginator.get_page(request.GET.get("pageNumber"))
    return render(
        request,
        "storefront/search.html",
        {
            "name": name,
            "page": page,
            "products": page.object_list,
            "search_form": SearchForm(initial={"q": name}),
        },
    )
