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
            name="FreelancerProfile",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("location", models.CharField(blank=True, max_length=120, null=True)),
                ("profile_picture", models.URLField(blank=True, max_length=500, null=True)),
                ("bio", models.TextField(blank=True, null=True)),
                ("category", models.CharField(blank=True, choices=[("programming_tech", "Programming & Tech"), ("graphics_design", "Graphics & Design"), ("digital_marketing", "Digital Marketing"), ("video_animation", "Video & Animation"), ("ai_services", "AI Services"), ("business", "Business"), ("writing_translation", "Writing & Translation"), ("consulting", "Consulting")], db_index=True, max_length=40, null=True)),
                ("services", models.JSONField(blank=True, default=list)),
                ("skills", models.JSONField(blank=True, default=list)),
                ("what_i_offer", models.JSONField(blank=True, default=list)),
                ("language_proficiency", models.JSONField(blank=True, default=list)),
                ("social_links", models.JSONField(blank=True, default=list)),
                ("about_this_gig", models.TextField(blank=True, null=True)),
                ("requirements", models.JSONField(blank=True, default=list)),
                ("approval_status", models.CharField(choices=[("pending", "Pending"), ("approved", "Approved"), ("rejected", "Rejected")], db_index=True, default="pending", max_length=10)),
                ("rejection_reason", models.TextField(blank=True, null=True)),
                ("reviewed_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("reviewed_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="reviewed_freelancer_profiles", to=settings.AUTH_USER_MODEL)),
                ("user", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="freelancer_profile", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "freelancer_profiles",
                "ordering": ["-updated_at"],
            },
        ),
        migrations.CreateModel(
            name="PortfolioItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField()),
                ("image_url", models.URLField(blank=True, max_length=500, null=True)),
                ("project_url", models.URLField(blank=True, max_length=500, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("freelancer", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="portfolio", to="freelancer.freelancerprofile")),
            ],
            options={
                "db_table": "portfolio_items",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="RatePlan",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("plan_type", models.CharField(choices=[("Basic", "Basic"), ("Standard", "Standard"), ("Premium", "Premium")], max_length=10)),
                ("price", models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(0)])),
                ("description", models.TextField()),
                ("whats_included", models.JSONField(default=list)),
                ("delivery_days", models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
                ("revisions", models.PositiveIntegerField(default=0)),
                ("freelancer", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="rate_plans", to="freelancer.freelancerprofile")),
            ],
            options={
                "db_table": "rate_plans",
                "ordering": ["price", "id"],
                "constraints": [
                    models.UniqueConstraint(fields=("freelancer", "plan_type"), name="unique_plan_type_per_freelancer"),
                ],
            },
        ),
    ]
