import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("offices", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                (
                    "name",
                    models.CharField(
                        help_text="Normalized product name", max_length=255, unique=True
                    ),
                ),
                ("stock", models.PositiveIntegerField(help_text="Units in stock")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "office",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="products",
                        to="offices.office",
                    ),
                ),
            ],
            options={
                "db_table": "product",
                "ordering": ["id"],
                "indexes": [
                    models.Index(fields=["office", "stock"], name="product_office_stock_idx")
                ],
            },
        ),
    ]
