# domains/accounts/seed_data.py
# /api/v1/users/seed/ 에서 사용하는 초기 계정 (로컬 개발용)

SEED_USERS = [
    {
        "name": "Basir",
        "email": "admin@example.com",
        "password": "1234",
        "is_admin": True,
        "is_seller": True,
        "seller": {
            "name": "Puma",
            "logo": "/images/logo1.png",
            "description": "best seller",
            "rating": 0,
            "num_reviews": 0,
        },
    },
    {
        "name": "John",
        "email": "user@example.com",
        "password": "1234",
        "is_admin": False,
        "is_seller": False,
    },
]
