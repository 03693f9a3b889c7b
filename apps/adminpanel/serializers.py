from rest_framework import serializers

from apps.freelancer.models import FreelancerProfile
from apps.freelancer.serializers import RatePlanSerializer, PortfolioItemSerializer


class AdminFreelancerListSerializer(serializers.ModelSerializer):
    user = serializers.IntegerField(source="user_id", read_only=True)
    username = serializers.CharField(source="user.username", read_only=True)
    email = serializers.EmailField(source="user.email", read_only=True)
    category_label = serializers.CharField(read_only=True)
    portfolio_count = serializers.SerializerMethodField()
    rate_plans = serializers.SerializerMethodField()

    class Meta:
        model = FreelancerProfile
        fields = [
            "id", "user", "username", "email", "location", "profile_picture",
            "category", "category_label", "services", "skills",
            "portfolio_count", "rate_plans",
            "approval_status", "rejection_reason", "reviewed_at",
            "created_at", "updated_at",
        ]

    def get_portfolio_count(self, obj):
        return len(obj.portfolio.all())

    def get_rate_plans(self, obj):
        return [{"type": plan.plan_type, "price": plan.price} for plan in obj.rate_plans.all()]


class AdminFreelancerDetailSerializer(AdminFreelancerListSerializer):
    rate_plans = RatePlanSerializer(many=True, read_only=True)
    portfolio = PortfolioItemSerializer(many=True, read_only=True)
    reviewed_by = serializers.EmailField(source="reviewed_by.email", read_only=True, default=None)

    class Meta(AdminFreelancerListSerializer.Meta):
        fields = AdminFreelancerListSerializer.Meta.fields + [
            "bio", "about_this_gig", "what_i_offer", "language_proficiency",
            "social_links", "requirements", "portfolio", "reviewed_by",
        ]


class ModerationActionSerializer(serializers.Serializer):
    action = serializers.ChoiceField(choices=[("approve", "Approve"), ("reject", "Reject")])
    reason = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=1000)
