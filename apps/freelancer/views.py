from rest_framework import generics, permissions
from rest_framework.exceptions import NotFound
from rest_framework.parsers import MultiPartParser, FormParser, JSONParser
import logging

from apps.cores.pagination import StandardPagination
from apps.users.permissions import IsFreelancer
from .models import FreelancerProfile
from .selectors import FreelancerSelector
from .serializers import (
    FreelancerProfileSerializer,
    FreelancerCardSerializer,
    PublicFreelancerSerializer,
)

logger = logging.getLogger(__name__)


# ---------------------------
# Own profile (freelancer)
# ---------------------------
class FreelancerProfileView(generics.RetrieveUpdateAPIView):
    """
    GET / PATCH the caller's profile, including rate plans, portfolio
    and the requirement questionnaire. The profile is created on first access.
    """
    serializer_class = FreelancerProfileSerializer
    permission_classes = [IsFreelancer]
    parser_classes = [JSONParser, MultiPartParser, FormParser]
    http_method_names = ['get', 'patch', 'put']

    def get_object(self):
        profile, created = FreelancerProfile.objects.get_or_create(user=self.request.user)
        if created:
            logger.info("Created freelancer profile for %s", self.request.user.email)
        return profile

    def update(self, request, *args, **kwargs):
        response = super().update(request, *args, **kwargs)
        response.data = {"success": True, "message": "Freelancer profile saved", "profile": response.data}
        return response


# ---------------------------
# Browse (client-facing)
# ---------------------------
class FreelancerBrowseView(generics.ListAPIView):
    """
    GET /api/client/freelancers/?q=...&category=...&services=a,b&page=1&limit=12
    """
    serializer_class = FreelancerCardSerializer
    permission_classes = [permissions.AllowAny]
    pagination_class = StandardPagination

    def get_queryset(self):
        params = self.request.query_params
        services = [s.strip() for s in params.get("services", "").split(",") if s.strip()]
        return FreelancerSelector.browse(
            q=params.get("q", ""),
            category=params.get("category", "").strip(),
            services=services,
        )


class FreelancerPublicDetailView(generics.RetrieveAPIView):
    serializer_class = PublicFreelancerSerializer
    permission_classes = [permissions.AllowAny]

    def get_object(self):
        profile = FreelancerSelector.public_detail(self.kwargs["user_id"])
        if profile is None:
            raise NotFound("Profile not found")
        return profile
