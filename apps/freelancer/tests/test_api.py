"""
Freelancer profile editing, browse and public detail.
"""
from decimal import Decimal

import pytest

from apps.freelancer.models import FreelancerProfile
from apps.freelancer.selectors import FreelancerSelector
from conftest import (
    FreelancerProfileFactory,
    FreelancerUserFactory,
    PortfolioItemFactory,
    RatePlanFactory,
)


PLANS = [
    {
        "type": "Basic",
        "price": "40.00",
        "description": "One concept",
        "whats_included": ["1 concept", " "],
        "delivery_days": 2,
        "revisions": 1,
    },
    {
        "type": "Premium",
        "price": "300.00",
        "description": "Full identity",
        "whats_included": ["Logo", "Guidelines"],
        "delivery_days": 10,
        "revisions": 5,
    },
]


@pytest.mark.django_db
class TestOwnProfile:

    def test_get_creates_pending_profile(self, freelancer_api, freelancer_user):
        response = freelancer_api.get("/api/freelancer/profile/")

        assert response.status_code == 200
        assert response.json()["approval_status"] == "pending"
        assert response.json()["requirements"] == []
        assert FreelancerProfile.objects.filter(user=freelancer_user).exists()

    def test_clients_are_forbidden(self, client_api):
        assert client_api.get("/api/freelancer/profile/").status_code == 403

    def test_patch_profile(self, freelancer_api):
        response = freelancer_api.patch(
            "/api/freelancer/profile/",
            {
                "category": "graphics_design",
                "bio": "  ",
                "services": "Logo Design, Branding,Logo Design",
                "skills": ["Figma", " Figma ", "Illustrator"],
                "rate_plans": PLANS,
                "portfolio": [{"title": "Rebrand", "description": "Coffee shop", "project_url": "https://example.com/p"}],
                "requirements": [
                    {"id": "brand", "type": "text", "question": "Brand name?", "extra": "dropped"},
                    {"id": "note", "type": "instructions", "content": "Send your logo files"},
                ],
            },
            format="json",
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Freelancer profile saved"
        profile = body["profile"]
        assert profile["category_label"] == "Graphics & Design"
        assert profile["bio"] is None
        assert profile["services"] == ["Logo Design", "Branding"]
        assert profile["skills"] == ["Figma", "Illustrator"]
        assert [p["type"] for p in profile["rate_plans"]] == ["Basic", "Premium"]
        assert profile["rate_plans"][0]["whats_included"] == ["1 concept"]
        assert len(profile["portfolio"]) == 1
        assert profile["requirements"][0] == {
            "id": "brand", "type": "text", "helperText": None, "question": "Brand name?", "required": True,
        }
        assert profile["requirements"][1]["required"] is False

    def test_rate_plans_are_replaced(self, freelancer_profile, make_api):
        api = make_api(freelancer_profile.user)
        response = api.patch("/api/freelancer/profile/", {"rate_plans": PLANS[:1]}, format="json")

        assert response.status_code == 200
        assert list(freelancer_profile.rate_plans.values_list("plan_type", flat=True)) == ["Basic"]
        assert freelancer_profile.rate_plans.get().price == Decimal("40.00")

    def test_omitted_lists_are_untouched(self, freelancer_profile, make_api):
        make_api(freelancer_profile.user).patch("/api/freelancer/profile/", {"location": "Madrid"}, format="json")

        freelancer_profile.refresh_from_db()
        assert freelancer_profile.location == "Madrid"
        assert freelancer_profile.rate_plans.count() == 3
        assert len(freelancer_profile.requirements) == 3

    def test_duplicate_plan_types(self, freelancer_api):
        response = freelancer_api.patch(
            "/api/freelancer/profile/", {"rate_plans": [PLANS[0], PLANS[0]]}, format="json"
        )
        assert response.status_code == 400

    def test_plan_needs_included_items(self, freelancer_api):
        plan = dict(PLANS[0], whats_included=[" "])
        response = freelancer_api.patch("/api/freelancer/profile/", {"rate_plans": [plan]}, format="json")

        assert response.status_code == 400
        assert response.json()["message"] == "At least 1 item"

    def test_invalid_requirement_rejected(self, freelancer_api):
        response = freelancer_api.patch(
            "/api/freelancer/profile/",
            {"requirements": [{"id": "x", "type": "multiple_choice", "question": "Pick", "options": []}]},
            format="json",
        )
        assert response.status_code == 400

    def test_requirements_as_json_string(self, freelancer_api):
        response = freelancer_api.patch(
            "/api/freelancer/profile/",
            {"requirements": '[{"id": "a", "type": "textarea", "question": "Tell us more"}]'},
            format="multipart",
        )

        assert response.status_code == 200
        assert response.json()["profile"]["requirements"][0]["type"] == "textarea"


@pytest.mark.django_db
class TestBrowse:

    def test_only_approved_profiles(self, make_api):
        visible = FreelancerProfileFactory()
        FreelancerProfileFactory(approval_status="pending")
        FreelancerProfileFactory(approval_status="rejected")

        body = make_api().get("/api/client/freelancers/").json()
        assert body["total"] == 1
        assert body["items"][0]["id"] == visible.user_id

    def test_card_fields(self, make_api, freelancer_profile):
        PortfolioItemFactory(freelancer=freelancer_profile)
        PortfolioItemFactory(freelancer=freelancer_profile)

        card = make_api().get("/api/client/freelancers/").json()["items"][0]
        assert card["min_price"] == 50.0
        assert card["portfolio_count"] == 2
        assert card["category_label"] == "Graphics & Design"

    def test_filters(self, make_api):
        logo = FreelancerProfileFactory(services=["Logo Design"], skills=["Figma"])
        video = FreelancerProfileFactory(category="video_animation", services=["Video Editing"], skills=["Premiere"])

        api = make_api()
        ids = lambda params: [f["id"] for f in api.get("/api/client/freelancers/", params).json()["items"]]

        assert ids({"category": "video_animation"}) == [video.user_id]
        assert ids({"services": "Video Editing,Motion"}) == [video.user_id]
        assert ids({"q": "figma"}) == [logo.user_id]
        assert ids({"q": "nothing-matches"}) == []

    def test_search_is_narrowed_in_the_database(self):
        logo = FreelancerProfileFactory(services=["Logo Design"], skills=["Figma"], bio="Logos")
        FreelancerProfileFactory(services=["Video Editing"], skills=["Premiere"], bio="Films")

        assert list(FreelancerSelector.search_queryset(q="figma")) == [logo]
        assert list(FreelancerSelector.search_queryset(services=["Logo Design"])) == [logo]
        assert FreelancerSelector.search_queryset(q="zzz-nothing").count() == 0
        assert FreelancerSelector.search_queryset().count() == 2

    def test_pagination(self, make_api):
        for _ in range(3):
            RatePlanFactory(freelancer=FreelancerProfileFactory())

        body = make_api().get("/api/client/freelancers/", {"limit": 2, "page": 2}).json()
        assert body["page"] == 2
        assert body["limit"] == 2
        assert body["total"] == 3
        assert len(body["items"]) == 1

    def test_limit_is_capped(self, make_api):
        FreelancerProfileFactory()
        assert make_api().get("/api/client/freelancers/", {"limit": 500}).json()["limit"] == 50


@pytest.mark.django_db
class TestPublicDetail:

    def test_detail(self, make_api, freelancer_profile):
        response = make_api().get(f"/api/client/freelancers/{freelancer_profile.user_id}/")

        assert response.status_code == 200
        body = response.json()
        assert body["profile_id"] == freelancer_profile.pk
        assert [p["type"] for p in body["rate_plans"]] == ["Basic", "Standard", "Premium"]
        assert [r["id"] for r in body["requirements"]] == ["brand", "style", "refs"]

    def test_unapproved_is_hidden(self, make_api):
        profile = FreelancerProfileFactory(approval_status="pending")
        response = make_api().get(f"/api/client/freelancers/{profile.user_id}/")

        assert response.status_code == 404
        assert response.json()["message"] == "Profile not found"

    def test_non_freelancer_is_hidden(self, make_api):
        assert make_api().get(f"/api/client/freelancers/{FreelancerUserFactory().pk}/").status_code == 404
