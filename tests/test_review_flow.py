"""
리뷰 작성 흐름: 작성 → 중복 거절 → 없는 상품
"""
import pytest

from domains.accounts.models import SellerProfile
from tests.factories import create_product, create_user

MISSING = "00000000-0000-0000-0000-000000000000"


@pytest.mark.django_db
def test_review_then_duplicate_then_missing(auth_client_for, user, product, post_review):
    c = auth_client_for(user)

    # 리뷰 작성
    r = post_review(c, product, rating=4, comment="좋아요!")
    assert r.status_code == 201, getattr(r, "data", r.content)
    body = r.json()
    assert body["message"] == "Review Created"
    assert body["review"]["name"] == "Buyer"
    assert body["review"]["rating"] == 4
    assert body["review"]["user_id"] == str(user.pk)
    # 갱신된 판매자 카드
    assert body["user"]["user_id"] == str(product.seller.pk)
    assert body["user"]["seller"]["rating"] == 4
    assert body["user"]["seller"]["num_reviews"] == 1

    # 같은 사용자 두 번째 리뷰 → 400, 목록/집계 그대로
    r = post_review(c, product, rating=1, comment="다시")
    assert r.status_code == 400
    assert r.json() == {"message": "You already submitted a review"}

    reviews = c.get(f"/api/v1/products/{product.pk}/reviews/").json()
    assert [rv["rating"] for rv in reviews] == [4]
    product.refresh_from_db()
    assert (product.rating, product.num_reviews) == (4.0, 1)

    # 없는 상품 → 404
    r = c.post(f"/api/v1/products/{MISSING}/reviews/", {"rating": 5}, format="json")
    assert r.status_code == 404
    assert r.json() == {"message": "Product Not Found"}


@pytest.mark.django_db
def test_reviews_appear_in_product_detail(auth_client_for, api_client, product, post_review):
    post_review(auth_client_for(create_user(name="Alice")), product, rating=5)
    post_review(auth_client_for(create_user(name="Bob")), product, rating=2)

    got = api_client.get(f"/api/v1/products/{product.pk}/").json()
    assert [rv["name"] for rv in got["reviews"]] == ["Alice", "Bob"]
    assert got["rating"] == 3.5
    assert got["num_reviews"] == 2
    assert got["seller"]["rating"] == 3.5
    assert got["seller"]["num_reviews"] == 2


@pytest.mark.django_db
def test_review_requires_login(api_client, product, post_review):
    r = post_review(api_client, product)
    assert r.status_code == 401
    assert product.reviews.count() == 0


@pytest.mark.django_db
@pytest.mark.parametrize("rating", [0, 6, "abc"])
def test_review_rating_bounds(auth_client_for, user, product, post_review, rating):
    r = post_review(auth_client_for(user), product, rating=rating)
    assert r.status_code == 400
    assert "rating" in r.json()["errors"]


@pytest.mark.django_db
def test_review_list_for_missing_product(api_client):
    r = api_client.get(f"/api/v1/products/{MISSING}/reviews/")
    assert r.status_code == 404


@pytest.mark.django_db
def test_seller_rating_across_products(auth_client_for, seller, post_review):
    p1 = create_product(seller=seller)
    p2 = create_product(seller=seller)
    buyer = auth_client_for(create_user())

    post_review(buyer, p1, rating=5)
    post_review(buyer, p2, rating=3)

    profile = SellerProfile.objects.get(user=seller)
    assert (profile.rating, profile.num_reviews) == (4.0, 2)
