from rest_framework import serializers
from django.db import transaction
import logging
import json

from .constants import CATEGORY_CHOICES
from .models import FreelancerProfile, RatePlan, PortfolioItem
from .requirements import RequirementListField

logger = logging.getLogger(__name__)


# ----------------------------
# Custom Field for Flexible List Input
# ----------------------------
class FlexibleStringListField(serializers.Field):
    """
    A field that accepts JSON strings, Python lists, or comma-separated strings.
    Values are trimmed and de-duplicated, keeping the first occurrence.
    """
    def to_internal_value(self, data):
        if data is None or data == '':
            return []

        if isinstance(data, str):
            try:
                data = json.loads(data)
            except (json.JSONDecodeError, ValueError):
                data = data.split(',')

        if not isinstance(data, (list, tuple)):
            raise serializers.ValidationError("Expected a list of strings.")

        result = []
        for item in data:
            if not isinstance(item, (str, int, float)):
                raise serializers.ValidationError("Expected a list of strings.")
            value = str(item).strip()
            if value and value not in result:
                result.append(value)
        return result

    def to_representation(self, value):
        return value or []


# ----------------------------
# Nested Serializers
# ----------------------------
class SocialLinkSerializer(serializers.Serializer):
    platform = serializers.CharField(max_length=50)
    url = serializers.URLField(max_length=500)


class RatePlanSerializer(serializers.ModelSerializer):
    type = serializers.ChoiceField(source='plan_type', choices=RatePlan._meta.get_field('plan_type').choices)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0, coerce_to_string=False)
    whats_included = serializers.ListField(
        child=serializers.CharField(max_length=300, allow_blank=True), allow_empty=False
    )
    delivery_days = serializers.IntegerField(min_value=1)
    revisions = serializers.IntegerField(min_value=0)

    class Meta:
        model = RatePlan
        fields = ['id', 'type', 'price', 'description', 'whats_included', 'delivery_days', 'revisions']
        read_only_fields = ['id']

    def validate_description(self, value):
        if not value.strip():
            raise serializers.ValidationError("Description is required")
        return value.strip()

    def validate_whats_included(self, value):
        items = [item.strip() for item in value if item.strip()]
        if not items:
            raise serializers.ValidationError("At least 1 item")
        return items


class PortfolioItemSerializer(serializers.ModelSerializer):
    class Meta:
        model = PortfolioItem
        fields = ['id', 'title', 'description', 'image_url', 'project_url']
        read_only_fields = ['id']


# ----------------------------
# Freelancer Profile Serializer
# ----------------------------
class FreelancerProfileSerializer(serializers.ModelSerializer):
    email = serializers.EmailField(source='user.email', read_only=True)
    username = serializers.CharField(source='user.username', read_only=True)
    category = serializers.ChoiceField(choices=CATEGORY_CHOICES, required=False, allow_null=True, allow_blank=True)
    category_label = serializers.CharField(read_only=True)
    bio = serializers.CharField(max_length=1000, required=False, allow_null=True, allow_blank=True)
    about_this_gig = serializers.CharField(max_length=1500, required=False, allow_null=True, allow_blank=True)

    services = FlexibleStringListField(required=False)
    skills = FlexibleStringListField(required=False)
    what_i_offer = FlexibleStringListField(required=False)
    language_proficiency = FlexibleStringListField(required=False)
    social_links = SocialLinkSerializer(many=True, required=False)

    rate_plans = RatePlanSerializer(many=True, required=False)
    portfolio = PortfolioItemSerializer(many=True, required=False)
    requirements = RequirementListField(required=False)

    class Meta:
        model = FreelancerProfile
        fields = [
            'id', 'username', 'email',
            'location', 'profile_picture', 'bio', 'category', 'category_label',
            'services', 'skills', 'what_i_offer', 'language_proficiency', 'social_links',
            'about_this_gig', 'rate_plans', 'portfolio', 'requirements',
            'approval_status', 'rejection_reason', 'reviewed_at',
            'created_at', 'updated_at',
        ]
        read_only_fields = [
            'id', 'approval_status', 'rejection_reason', 'reviewed_at', 'created_at', 'updated_at',
        ]

    def validate_rate_plans(self, plans):
        types = [plan['plan_type'] for plan in plans]
        if len(types) != len(set(types)):
            raise serializers.ValidationError("Only one rate plan per type is allowed.")
        return plans

    def validate(self, data):
        # blank strings clear the field
        for key in ('location', 'profile_picture', 'bio', 'category', 'about_this_gig'):
            if key in data and isinstance(data[key], str):
                data[key] = data[key].strip() or None
        if 'social_links' in data:
            data['social_links'] = [dict(link) for link in data['social_links']]
        return data

    @transaction.atomic
    def update(self, instance, validated_data):
        rate_plans = validated_data.pop('rate_plans', None)
        portfolio = validated_data.pop('portfolio', None)

        for key, value in validated_data.items():
            setattr(instance, key, value)
        instance.save()

        # nested lists are replaced wholesale when provided
        if rate_plans is not None:
            self._save_rate_plans(instance, rate_plans)
        if portfolio is not None:
            self._save_portfolio(instance, portfolio)

        logger.info("Freelancer profile %s saved (%s rate plans)", instance.pk, instance.rate_plans.count())
        return instance

    def _save_rate_plans(self, profile, plans):
        profile.rate_plans.all().delete()
        RatePlan.objects.bulk_create([RatePlan(freelancer=profile, **plan) for plan in plans])

    def _save_portfolio(self, profile, items):
        profile.portfolio.all().delete()
        PortfolioItem.objects.bulk_create([
            PortfolioItem(freelancer=profile, **item)
            for item in items
            if item.get('title', '').strip() and item.get('description', '').strip()
        ])


# ----------------------------
# Public (client-facing) Serializers
# ----------------------------
class FreelancerCardSerializer(serializers.ModelSerializer):
    id = serializers.IntegerField(source='user_id', read_only=True)
    username = serializers.CharField(source='user.username', read_only=True)
    email = serializers.EmailField(source='user.email', read_only=True)
    category_label = serializers.CharField(read_only=True)
    portfolio_count = serializers.IntegerField(read_only=True)
    min_price = serializers.DecimalField(max_digits=10, decimal_places=2, coerce_to_string=False, read_only=True)

    class Meta:
        model = FreelancerProfile
        fields = [
            'id', 'username', 'email', 'profile_picture', 'location',
            'category', 'category_label', 'services', 'skills',
            'portfolio_count', 'min_price', 'bio',
        ]


class PublicFreelancerSerializer(serializers.ModelSerializer):
    id = serializers.IntegerField(source='user_id', read_only=True)
    profile_id = serializers.IntegerField(source='pk', read_only=True)
    username = serializers.CharField(source='user.username', read_only=True)
    email = serializers.EmailField(source='user.email', read_only=True)
    category_label = serializers.CharField(read_only=True)
    rate_plans = RatePlanSerializer(many=True, read_only=True)
    portfolio = PortfolioItemSerializer(many=True, read_only=True)

    class Meta:
        model = FreelancerProfile
        fields = [
            'id', 'profile_id', 'username', 'email', 'profile_picture', 'location',
            'category', 'category_label', 'services', 'skills', 'bio',
            'portfolio', 'rate_plans', 'about_this_gig', 'what_i_offer',
            'social_links', 'language_proficiency', 'requirements', 'created_at', 'updated_at',
        ]
