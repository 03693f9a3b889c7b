from django.db.models import Q

from .conf import order_setting
from .constants import PROJECT_APPROVED, TERMINAL_STATUSES
from .models import Order


class OrderAccessSelector:
    """
    Row-level read access for orders.
    """
    @staticmethod
    def for_client(user):
        return Order.objects.filter(client=user).select_related("freelancer")

    @staticmethod
    def visible_to_client(user):
        """Own orders plus guest orders (no client)."""
        guest = Q(client__isnull=True)
        if user.is_authenticated:
            guest |= Q(client=user)
        return Order.objects.filter(guest).select_related("freelancer")

    @staticmethod
    def for_freelancer(user):
        return Order.objects.filter(freelancer=user).select_related("client")


class ActiveOrderSelector:
    """
    Most recent order between a client and a freelancer that still blocks
    a new purchase.
    """
    @staticmethod
    def inactive_statuses():
        statuses = [PROJECT_APPROVED, *TERMINAL_STATUSES]
        if order_setting("APPROVED_ORDERS_ARE_ACTIVE"):
            statuses.remove(PROJECT_APPROVED)
        return statuses

    @staticmethod
    def between(client, freelancer_id):
        return (
            Order.objects
            .filter(client=client, freelancer_id=freelancer_id)
            .exclude(project_status__in=ActiveOrderSelector.inactive_statuses())
            .order_by("-created_at", "-id")
            .first()
        )
