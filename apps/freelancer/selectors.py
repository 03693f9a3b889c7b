from django.db.models import Count, Min, Q

from .constants import APPROVAL_APPROVED
from .models import FreelancerProfile


class FreelancerSelector:
    """
    Read access for freelancer listings.
    """
    @staticmethod
    def approved():
        return (
            FreelancerProfile.objects
            .filter(user__role="freelancer", approval_status=APPROVAL_APPROVED)
            .select_related("user")
        )

    @staticmethod
    def public_detail(user_id):
        return (
            FreelancerSelector.approved()
            .prefetch_related("rate_plans", "portfolio")
            .filter(user_id=user_id)
            .first()
        )

    @staticmethod
    def search_queryset(q="", category="", services=None):
        """
        Database side of browse: a superset of the matches, narrowed by
        category, q and services. Exact list matching happens in browse().
        """
        qs = FreelancerSelector.approved()
        if category:
            qs = qs.filter(category=category)

        q = (q or "").strip()
        if q:
            match = (
                Q(user__username__icontains=q)
                | Q(user__email__icontains=q)
                | Q(location__icontains=q)
                | Q(category__icontains=q)
                | Q(bio__icontains=q)
                | Q(about_this_gig__icontains=q)
            )
            # JSON text escapes non-ASCII on some backends
            if q.isascii():
                match |= Q(services__icontains=q) | Q(skills__icontains=q)
                qs = qs.filter(match)

        wanted = [s for s in services or [] if s.isascii()]
        if wanted and len(wanted) == len(services):
            match = Q()
            for service in wanted:
                match |= Q(services__icontains=service)
            qs = qs.filter(match)

        return qs

    @staticmethod
    def browse(q="", category="", services=None):
        """
        Approved freelancers, most recently updated first.
        `services` matches any; `q` is a case-insensitive substring match
        over name, email, location, category, services, skills, bio and gig text.
        """
        qs = (
            FreelancerSelector.search_queryset(q=q, category=category, services=services)
            .annotate(
                min_price=Min("rate_plans__price"),
                portfolio_count=Count("portfolio", distinct=True),
            )
            .order_by("-updated_at")
        )
        profiles = list(qs)

        # exact list membership is checked in Python so every backend behaves the same
        if services:
            wanted = set(services)
            profiles = [p for p in profiles if wanted.intersection(p.services or [])]

        q = (q or "").strip().lower()
        if q:
            profiles = [p for p in profiles if q in _haystack(p)]

        return profiles


def _haystack(profile):
    parts = [
        profile.user.username,
        profile.user.email,
        profile.location,
        profile.category,
        *(profile.services or []),
        *(profile.skills or []),
        profile.bio,
        profile.about_this_gig,
    ]
    return " ".join(part for part in parts if part).lower()


class AdminFreelancerSelector:
    """
    Moderation queue (ADMIN ONLY)
    """
    @staticmethod
    def list(status="", q=""):
        qs = FreelancerProfile.objects.select_related("user", "reviewed_by").order_by("-created_at")
        if status:
            qs = qs.filter(approval_status=status)
        q = (q or "").strip()
        if q:
            qs = qs.filter(
                Q(user__username__icontains=q)
                | Q(user__email__icontains=q)
                | Q(location__icontains=q)
                | Q(category__icontains=q)
            )
        return qs
