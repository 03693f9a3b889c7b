from rest_framework import serializers

from apps.freelancer.constants import PLAN_TYPE_CHOICES
from .constants import ACTION_CHOICES
from .models import Order


class FileRefSerializer(serializers.Serializer):
    """A file already uploaded elsewhere: we only keep its name, url and size."""
    name = serializers.CharField(max_length=255)
    url = serializers.URLField(max_length=1000)
    size = serializers.IntegerField(min_value=0, required=False, allow_null=True)


class RequirementAnswerSerializer(serializers.Serializer):
    id = serializers.CharField(max_length=64)
    text = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    options = serializers.ListField(child=serializers.CharField(max_length=200), required=False)
    files = FileRefSerializer(many=True, required=False)


class SubmitAnswersSerializer(serializers.Serializer):
    answers = RequirementAnswerSerializer(many=True)


class OrderCreateSerializer(serializers.Serializer):
    freelancer_id = serializers.IntegerField(min_value=1)
    plan_type = serializers.ChoiceField(choices=PLAN_TYPE_CHOICES)
    client_email = serializers.EmailField(required=False, allow_null=True, allow_blank=True)


class OrderSummarySerializer(serializers.ModelSerializer):
    price = serializers.DecimalField(max_digits=10, decimal_places=2, coerce_to_string=False, read_only=True)

    class Meta:
        model = Order
        fields = [
            "id", "order_number", "client_email", "freelancer", "freelancer_name",
            "plan_type", "price", "delivery_days",
            "payment_status", "project_status", "created_at",
        ]
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    price = serializers.DecimalField(max_digits=10, decimal_places=2, coerce_to_string=False, read_only=True)

    class Meta:
        model = Order
        fields = [
            "id", "order_number",
            "client", "client_email", "freelancer", "freelancer_name",
            "plan_type", "price", "delivery_days",
            "payment_status", "paid_at",
            "project_status", "accepted_at", "rejection_reason",
            "requirements_snapshot", "requirement_answers",
            "delivered_at", "delivery_message", "delivery_files",
            "created_at", "updated_at",
        ]
        read_only_fields = fields


class OrderActionSerializer(serializers.Serializer):
    action = serializers.ChoiceField(choices=ACTION_CHOICES)
    reason = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=1000)


class DeliverySerializer(serializers.Serializer):
    message = serializers.CharField(required=False, allow_blank=True, default="", max_length=5000)
    files = FileRefSerializer(many=True, required=False)
