from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from .constants import (
    CATEGORY_CHOICES,
    CATEGORY_LABELS,
    PLAN_TYPE_CHOICES,
    APPROVAL_STATUS_CHOICES,
    APPROVAL_PENDING,
    APPROVAL_APPROVED,
    APPROVAL_REJECTED,
)

User = settings.AUTH_USER_MODEL


class FreelancerProfile(models.Model):
    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name="freelancer_profile")
    location = models.CharField(max_length=120, null=True, blank=True)
    profile_picture = models.URLField(max_length=500, null=True, blank=True)
    bio = models.TextField(null=True, blank=True)
    category = models.CharField(max_length=40, choices=CATEGORY_CHOICES, null=True, blank=True, db_index=True)

    # de-duplicated string lists
    services = models.JSONField(default=list, blank=True)
    skills = models.JSONField(default=list, blank=True)
    what_i_offer = models.JSONField(default=list, blank=True)
    language_proficiency = models.JSONField(default=list, blank=True)

    social_links = models.JSONField(default=list, blank=True)
    about_this_gig = models.TextField(null=True, blank=True)

    # requirement questionnaire, see requirements.py for the item shapes
    requirements = models.JSONField(default=list, blank=True)

    # moderation
    approval_status = models.CharField(
        max_length=10, choices=APPROVAL_STATUS_CHOICES, default=APPROVAL_PENDING, db_index=True
    )
    rejection_reason = models.TextField(null=True, blank=True)
    reviewed_by = models.ForeignKey(
        User, on_delete=models.SET_NULL, null=True, blank=True, related_name="reviewed_freelancer_profiles"
    )
    reviewed_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "freelancer_profiles"
        ordering = ["-updated_at"]

    def __str__(self):
        return f"{self.user.username} ({self.approval_status})"

    @property
    def display_name(self):
        return self.user.username or self.user.email

    @property
    def category_label(self):
        if not self.category:
            return None
        return CATEGORY_LABELS.get(self.category, self.category)

    @property
    def is_approved(self):
        return self.approval_status == APPROVAL_APPROVED

    def get_rate_plan(self, plan_type):
        return self.rate_plans.filter(plan_type=plan_type).first()

    def approve(self, reviewer):
        self.approval_status = APPROVAL_APPROVED
        self.rejection_reason = None
        self.reviewed_by = reviewer
        self.reviewed_at = timezone.now()
        self.save(update_fields=["approval_status", "rejection_reason", "reviewed_by", "reviewed_at", "updated_at"])

    def reject(self, reviewer, reason=None):
        self.approval_status = APPROVAL_REJECTED
        self.rejection_reason = (reason or "").strip() or None
        self.reviewed_by = reviewer
        self.reviewed_at = timezone.now()
        self.save(update_fields=["approval_status", "rejection_reason", "reviewed_by", "reviewed_at", "updated_at"])


class RatePlan(models.Model):
    freelancer = models.ForeignKey(FreelancerProfile, on_delete=models.CASCADE, related_name="rate_plans")
    plan_type = models.CharField(max_length=10, choices=PLAN_TYPE_CHOICES)
    price = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(0)])
    description = models.TextField()
    whats_included = models.JSONField(default=list)
    delivery_days = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    revisions = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = "rate_plans"
        ordering = ["price", "id"]
        constraints = [
            models.UniqueConstraint(fields=["freelancer", "plan_type"], name="unique_plan_type_per_freelancer"),
        ]

    def __str__(self):
        return f"{self.plan_type} - {self.price}"


class PortfolioItem(models.Model):
    freelancer = models.ForeignKey(FreelancerProfile, on_delete=models.CASCADE, related_name="portfolio")
    title = models.CharField(max_length=200)
    description = models.TextField()
    image_url = models.URLField(max_length=500, null=True, blank=True)
    project_url = models.URLField(max_length=500, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "portfolio_items"
        ordering = ["id"]

    def __str__(self):
        return self.title
