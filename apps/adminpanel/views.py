import logging

from rest_framework import generics, status
from rest_framework.response import Response

from apps.freelancer.selectors import AdminFreelancerSelector
from apps.users.permissions import IsAdminRole
from .serializers import (
    AdminFreelancerListSerializer,
    AdminFreelancerDetailSerializer,
    ModerationActionSerializer,
)

logger = logging.getLogger(__name__)


class AdminFreelancerList(generics.ListAPIView):
    """
    GET ?status=pending|approved|rejected&q=
    """
    serializer_class = AdminFreelancerListSerializer
    permission_classes = [IsAdminRole]

    def get_queryset(self):
        params = self.request.query_params
        return AdminFreelancerSelector.list(
            status=params.get("status", "").strip(),
            q=params.get("q", ""),
        ).prefetch_related("rate_plans", "portfolio")


class AdminFreelancerDetail(generics.RetrieveDestroyAPIView):
    """
    GET / DELETE a profile, PATCH {"action": "approve" | "reject", "reason"?}
    """
    serializer_class = AdminFreelancerDetailSerializer
    permission_classes = [IsAdminRole]

    def get_queryset(self):
        return AdminFreelancerSelector.list().prefetch_related("rate_plans", "portfolio")

    def patch(self, request, *args, **kwargs):
        profile = self.get_object()
        serializer = ModerationActionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        action = serializer.validated_data["action"]
        if action == "approve":
            profile.approve(request.user)
        else:
            profile.reject(request.user, serializer.validated_data.get("reason"))

        logger.info("Freelancer profile %s %sd by %s", profile.pk, action, request.user.email)
        return Response(
            {
                "success": True,
                "message": "Updated",
                "profile": self.get_serializer(profile).data,
            },
            status=status.HTTP_200_OK,
        )

    def destroy(self, request, *args, **kwargs):
        profile = self.get_object()
        logger.info("Freelancer profile %s deleted by %s", profile.pk, request.user.email)
        profile.delete()
        return Response({"success": True, "message": "Deleted"}, status=status.HTTP_200_OK)
