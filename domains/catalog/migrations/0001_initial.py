import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        db_column="product_id", default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("name", models.CharField(max_length=255)),
                ("image", models.CharField(blank=True, default="", max_length=500)),
                ("brand", models.CharField(blank=True, default="", max_length=255)),
                ("category", models.CharField(blank=True, db_index=True, default="", max_length=255)),
                ("description", models.TextField(blank=True, default="")),
                ("price", models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ("count_in_stock", models.IntegerField(default=0)),
                ("rating", models.FloatField(default=0)),
                ("num_reviews", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "seller",
                    models.ForeignKey(
                        blank=True,
                        db_column="seller_id",
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="products",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "products",
                "indexes": [
                    models.Index(fields=["name"], name="products_name_idx"),
                    models.Index(fields=["seller", "created_at"], name="products_seller_created_idx"),
                    models.Index(fields=["price"], name="products_price_idx"),
                    models.Index(fields=["rating"], name="products_rating_idx"),
                ],
            },
        ),
    ]
