import django.core.validators
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
            name="Order",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("order_number", models.CharField(editable=False, max_length=12, unique=True)),
                ("client_email", models.EmailField(blank=True, max_length=254, null=True)),
                ("freelancer_name", models.CharField(max_length=150)),
                ("plan_type", models.CharField(choices=[("Basic", "Basic"), ("Standard", "Standard"), ("Premium", "Premium")], max_length=10)),
                ("price", models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(0)])),
                ("delivery_days", models.PositiveIntegerField(default=1, validators=[django.core.validators.MinValueValidator(1)])),
                ("payment_status", models.CharField(choices=[("unpaid", "Unpaid"), ("paid", "Paid")], db_index=True, default="unpaid", max_length=10)),
                ("paid_at", models.DateTimeField(blank=True, null=True)),
                ("project_status", models.CharField(choices=[("pending", "Pending"), ("approved", "Approved"), ("cancelled", "Cancelled"), ("completed", "Completed")], db_index=True, default="pending", max_length=10)),
                ("accepted_at", models.DateTimeField(blank=True, null=True)),
                ("rejection_reason", models.TextField(blank=True, null=True)),
                ("requirements_snapshot", models.JSONField(blank=True, default=list)),
                ("requirement_answers", models.JSONField(blank=True, default=list)),
                ("delivered_at", models.DateTimeField(blank=True, null=True)),
                ("delivery_message", models.TextField(blank=True, null=True)),
                ("delivery_files", models.JSONField(blank=True, default=list)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("client", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="client_orders", to=settings.AUTH_USER_MODEL)),
                ("freelancer", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="freelancer_orders", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "orders",
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(fields=["client", "-created_at"], name="orders_client__5e2a7c_idx"),
                    models.Index(fields=["freelancer", "-created_at"], name="orders_freelan_9c41d2_idx"),
                ],
            },
        ),
    ]
