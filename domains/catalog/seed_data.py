# domains/catalog/seed_data.py
# /api/v1/products/seed/ 샘플 카탈로그 (리뷰 없음 → rating 0)
from decimal import Decimal

SAMPLE_PRODUCTS = [
    {
        "name": "Nike Slim Shirt",
        "category": "Shirts",
        "image": "/images/p1.jpg",
        "price": Decimal("120"),
        "count_in_stock": 10,
        "brand": "Nike",
        "description": "high quality product",
    },
    {
        "name": "Adidas Fit Shirt",
        "category": "Shirts",
        "image": "/images/p2.jpg",
        "price": Decimal("100"),
        "count_in_stock": 20,
        "brand": "Adidas",
        "description": "high quality product",
    },
    {
        "name": "Lacoste Free Shirt",
        "category": "Shirts",
        "image": "/images/p3.jpg",
        "price": Decimal("220"),
        "count_in_stock": 0,
        "brand": "Lacoste",
        "description": "high quality product",
    },
    {
        "name": "Nike Slim Pant",
        "category": "Pants",
        "image": "/images/p4.jpg",
        "price": Decimal("78"),
        "count_in_stock": 15,
        "brand": "Nike",
        "description": "high quality product",
    },
    {
        "name": "Puma Slim Pant",
        "category": "Pants",
        "image": "/images/p5.jpg",
        "price": Decimal("65"),
        "count_in_stock": 5,
        "brand": "Puma",
        "description": "high quality product",
    },
    {
        "name": "Adidas Fit Pant",
        "category": "Pants",
        "image": "/images/p6.jpg",
        "price": Decimal("139"),
        "count_in_stock": 12,
        "brand": "Adidas",
        "description": "high quality product",
    },
]
