import copy
import string

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone
from django.utils.crypto import get_random_string

from apps.freelancer.constants import PLAN_TYPE_CHOICES
from .constants import (
    PAYMENT_STATUS_CHOICES,
    PAYMENT_UNPAID,
    PAYMENT_PAID,
    PROJECT_STATUS_CHOICES,
    PROJECT_PENDING,
    ACTION_ACCEPT,
    ACTION_REJECT,
    ACTION_DELIVER,
    TRANSITIONS,
    TRANSITION_ERRORS,
)
from .exceptions import InvalidOrderState

User = settings.AUTH_USER_MODEL

ORDER_NUMBER_CHARS = string.ascii_uppercase + string.digits


def generate_order_number():
    return f"ORD-{get_random_string(6, allowed_chars=ORDER_NUMBER_CHARS)}"


class Order(models.Model):
    order_number = models.CharField(max_length=12, unique=True, editable=False)

    client = models.ForeignKey(
        User, on_delete=models.SET_NULL, null=True, blank=True, related_name="client_orders"
    )
    client_email = models.EmailField(null=True, blank=True)
    freelancer = models.ForeignKey(User, on_delete=models.PROTECT, related_name="freelancer_orders")
    freelancer_name = models.CharField(max_length=150)

    # copied from the rate plan at purchase time
    plan_type = models.CharField(max_length=10, choices=PLAN_TYPE_CHOICES)
    price = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(0)])
    delivery_days = models.PositiveIntegerField(default=1, validators=[MinValueValidator(1)])

    payment_status = models.CharField(
        max_length=10, choices=PAYMENT_STATUS_CHOICES, default=PAYMENT_UNPAID, db_index=True
    )
    paid_at = models.DateTimeField(null=True, blank=True)

    project_status = models.CharField(
        max_length=10, choices=PROJECT_STATUS_CHOICES, default=PROJECT_PENDING, db_index=True
    )
    accepted_at = models.DateTimeField(null=True, blank=True)
    rejection_reason = models.TextField(null=True, blank=True)

    requirements_snapshot = models.JSONField(default=list, blank=True)
    requirement_answers = models.JSONField(default=list, blank=True)

    delivered_at = models.DateTimeField(null=True, blank=True)
    delivery_message = models.TextField(null=True, blank=True)
    delivery_files = models.JSONField(default=list, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "orders"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["client", "-created_at"], name="orders_client__5e2a7c_idx"),
            models.Index(fields=["freelancer", "-created_at"], name="orders_freelan_9c41d2_idx"),
        ]

    def __str__(self):
        return f"{self.order_number} ({self.plan_type}, {self.project_status})"

    def save(self, *args, **kwargs):
        if not self.order_number:
            number = generate_order_number()
            while Order.objects.filter(order_number=number).exists():
                number = generate_order_number()
            self.order_number = number
        super().save(*args, **kwargs)

    @classmethod
    def from_rate_plan(cls, *, profile, plan, client=None, client_email=None):
        """
        Build (unsaved) order for `plan`; the questionnaire is deep-copied
        so later profile edits never reach the order.
        """
        return cls(
            client=client,
            client_email=client_email,
            freelancer=profile.user,
            freelancer_name=profile.display_name,
            plan_type=plan.plan_type,
            price=plan.price,
            delivery_days=plan.delivery_days,
            requirements_snapshot=copy.deepcopy(profile.requirements or []),
            requirement_answers=[],
        )

    @property
    def is_paid(self):
        return self.payment_status == PAYMENT_PAID

    @property
    def snapshot_ids(self):
        return {item.get("id") for item in self.requirements_snapshot or []}

    @property
    def notify_email(self):
        if self.client_email:
            return self.client_email
        return self.client.email if self.client_id else None

    # ------------------------------------
    # Payment
    # ------------------------------------
    def mark_paid(self):
        """Returns False when the order was already paid."""
        if self.is_paid:
            return False
        self.payment_status = PAYMENT_PAID
        self.paid_at = timezone.now()
        self.save(update_fields=["payment_status", "paid_at", "updated_at"])
        return True

    def set_answers(self, answers):
        if not self.is_paid:
            raise InvalidOrderState("Payment required first")
        if self.project_status != PROJECT_PENDING:
            raise InvalidOrderState("Requirements can only be submitted while the order is pending")
        self.requirement_answers = answers
        self.project_status = PROJECT_PENDING
        self.save(update_fields=["requirement_answers", "project_status", "updated_at"])

    # ------------------------------------
    # Freelancer transitions
    # ------------------------------------
    def _move(self, action):
        current, target = TRANSITIONS[action]
        if self.project_status != current:
            raise InvalidOrderState(TRANSITION_ERRORS[action])
        self.project_status = target

    def accept(self):
        self._move(ACTION_ACCEPT)
        self.accepted_at = timezone.now()
        self.save(update_fields=["project_status", "accepted_at", "updated_at"])

    def reject(self, reason=None):
        self._move(ACTION_REJECT)
        self.rejection_reason = (reason or "").strip() or None
        self.save(update_fields=["project_status", "rejection_reason", "updated_at"])

    def deliver(self, message="", files=None):
        self._move(ACTION_DELIVER)
        self.delivered_at = timezone.now()
        self.delivery_message = message or ""
        self.delivery_files = list(files or [])
        self.save(update_fields=["project_status", "delivered_at", "delivery_message", "delivery_files", "updated_at"])
