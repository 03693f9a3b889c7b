"""
HTTP surface of the order endpoints.
"""
import pytest
from django.test import override_settings

from apps.orders.models import Order
from conftest import ClientFactory, FreelancerProfileFactory, FreelancerUserFactory


def create_order(api, profile, plan_type="Standard", **extra):
    return api.post(
        "/api/client/orders/",
        {"freelancer_id": profile.user_id, "plan_type": plan_type, **extra},
        format="json",
    )


# =============================================================================
# CLIENT ENDPOINTS
# =============================================================================

@pytest.mark.django_db
class TestClientOrders:

    def test_create_as_client(self, client_api, freelancer_profile, client_user):
        response = create_order(client_api, freelancer_profile)

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["order"]["price"] == 120.0
        assert body["order"]["plan_type"] == "Standard"
        assert body["order"]["payment_status"] == "unpaid"
        assert body["order"]["project_status"] == "pending"
        assert Order.objects.get(pk=body["order"]["id"]).client == client_user

    def test_create_as_guest_needs_email(self, make_api, freelancer_profile):
        response = create_order(make_api(), freelancer_profile)
        assert response.status_code == 400
        assert response.json()["success"] is False

        response = create_order(make_api(), freelancer_profile, client_email="guest@example.com")
        assert response.status_code == 201

    def test_unknown_freelancer_is_404(self, client_api):
        response = client_api.post(
            "/api/client/orders/", {"freelancer_id": 987654, "plan_type": "Basic"}, format="json"
        )
        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Freelancer not found", "errors": {"detail": "Freelancer not found"}}

    def test_missing_plan_is_400(self, client_api):
        profile = FreelancerProfileFactory()
        response = create_order(client_api, profile, plan_type="Premium")
        assert response.status_code == 400
        assert response.json()["message"] == "Plan not available"

    def test_invalid_plan_type_is_400(self, client_api, freelancer_profile):
        response = create_order(client_api, freelancer_profile, plan_type="Gold")
        assert response.status_code == 400

    def test_list_only_own_orders(self, client_api, client_user, order_factory):
        mine = order_factory(client=client_user)
        order_factory()

        response = client_api.get("/api/client/orders/")
        assert response.status_code == 200
        assert [o["id"] for o in response.json()] == [mine.id]

    def test_list_filters_by_status(self, client_api, client_user, order_factory):
        order_factory(client=client_user, project_status="pending")
        done = order_factory(client=client_user, project_status="completed")

        response = client_api.get("/api/client/orders/", {"status": "completed"})
        assert [o["id"] for o in response.json()] == [done.id]

    def test_list_requires_login(self, make_api):
        assert make_api().get("/api/client/orders/").status_code == 401

    def test_detail_includes_snapshot(self, client_api, client_user, order_factory):
        order = order_factory(client=client_user)
        response = client_api.get(f"/api/client/orders/{order.pk}/")

        assert response.status_code == 200
        assert response.json()["requirements_snapshot"] == order.requirements_snapshot

    def test_detail_of_someone_elses_order_is_404(self, client_api, order_factory):
        order = order_factory()
        assert client_api.get(f"/api/client/orders/{order.pk}/").status_code == 404

    def test_guest_order_readable_by_id(self, make_api, order_factory):
        order = order_factory(client=None)
        response = make_api().get(f"/api/client/orders/{order.pk}/")

        assert response.status_code == 200
        assert response.json()["client"] is None

    def test_client_order_hidden_from_guests(self, make_api, order_factory):
        order = order_factory()
        assert make_api().get(f"/api/client/orders/{order.pk}/").status_code == 404

    def test_pay_twice(self, client_api, client_user, order_factory):
        order = order_factory(client=client_user)

        first = client_api.post(f"/api/client/orders/{order.pk}/pay/")
        second = client_api.post(f"/api/client/orders/{order.pk}/pay/")

        assert first.status_code == 200
        assert first.json()["message"] == "Payment captured"
        assert second.status_code == 200
        assert second.json()["message"] == "Already paid"
        order.refresh_from_db()
        assert order.payment_status == "paid"

    def test_pay_missing_order(self, client_api):
        assert client_api.post("/api/client/orders/999/pay/").status_code == 404

    def test_pay_someone_elses_order(self, client_api, order_factory):
        order = order_factory()
        assert client_api.post(f"/api/client/orders/{order.pk}/pay/").status_code == 403

    def test_answers_before_payment_conflict(self, client_api, client_user, order_factory):
        order = order_factory(client=client_user)
        response = client_api.post(
            f"/api/client/orders/{order.pk}/requirements/",
            {"answers": [{"id": "brand", "text": "Acme"}]},
            format="json",
        )

        assert response.status_code == 409
        assert response.json()["message"] == "Payment required first"
        order.refresh_from_db()
        assert order.requirement_answers == []

    def test_answers_shape_is_validated(self, client_api, client_user, paid_order_factory):
        order = paid_order_factory(client=client_user)
        response = client_api.post(
            f"/api/client/orders/{order.pk}/requirements/",
            {"answers": [{"id": "refs", "files": [{"name": "a.png", "url": "not a url"}]}]},
            format="json",
        )
        assert response.status_code == 400

    def test_answers_drop_unknown_ids(self, client_api, client_user, paid_order_factory):
        order = paid_order_factory(client=client_user)
        response = client_api.post(
            f"/api/client/orders/{order.pk}/requirements/",
            {"answers": [{"id": "brand", "text": "Acme"}, {"id": "ghost", "text": "boo"}]},
            format="json",
        )

        assert response.status_code == 200
        assert [a["id"] for a in response.json()["requirement_answers"]] == ["brand"]


@pytest.mark.django_db
class TestActiveOrder:

    def test_requires_freelancer_id(self, client_api):
        assert client_api.get("/api/client/orders/active/").status_code == 400

    def test_no_active_order(self, client_api, freelancer_user):
        response = client_api.get("/api/client/orders/active/", {"freelancerId": freelancer_user.pk})
        assert response.json() == {"success": True, "active": False, "order": None}

    def test_returns_most_recent_pending(self, client_api, client_user, freelancer_user, order_factory):
        order_factory(client=client_user, freelancer=freelancer_user)
        latest = order_factory(client=client_user, freelancer=freelancer_user)
        order_factory(client=client_user, freelancer=FreelancerUserFactory())

        response = client_api.get("/api/client/orders/active/", {"freelancerId": freelancer_user.pk})
        body = response.json()
        assert body["active"] is True
        assert body["order"]["id"] == latest.id

    def test_approved_is_not_active_by_default(self, client_api, client_user, freelancer_user, order_factory):
        order_factory(client=client_user, freelancer=freelancer_user, project_status="approved")
        order_factory(client=client_user, freelancer=freelancer_user, project_status="completed")

        response = client_api.get("/api/client/orders/active/", {"freelancerId": freelancer_user.pk})
        assert response.json()["active"] is False

    @override_settings(ORDERS={"APPROVED_ORDERS_ARE_ACTIVE": True})
    def test_approved_can_count_as_active(self, client_api, client_user, freelancer_user, order_factory):
        order = order_factory(client=client_user, freelancer=freelancer_user, project_status="approved")

        response = client_api.get("/api/client/orders/active/", {"freelancerId": freelancer_user.pk})
        assert response.json()["order"]["id"] == order.id


# =============================================================================
# FREELANCER ENDPOINTS
# =============================================================================

@pytest.mark.django_db
class TestFreelancerOrders:

    def test_list_search_and_filter(self, freelancer_api, freelancer_user, order_factory):
        a = order_factory(freelancer=freelancer_user, client_email="alice@shop.com", plan_type="Basic")
        b = order_factory(freelancer=freelancer_user, client_email="bob@shop.com", project_status="approved")
        order_factory(client_email="alice@elsewhere.com")

        ids = [o["id"] for o in freelancer_api.get("/api/freelancer/orders/").json()]
        assert ids == [b.id, a.id]

        ids = [o["id"] for o in freelancer_api.get("/api/freelancer/orders/", {"q": "ALICE"}).json()]
        assert ids == [a.id]

        ids = [o["id"] for o in freelancer_api.get("/api/freelancer/orders/", {"q": a.order_number[-4:]}).json()]
        assert a.id in ids

        ids = [o["id"] for o in freelancer_api.get("/api/freelancer/orders/", {"status": "approved"}).json()]
        assert ids == [b.id]

    def test_clients_cannot_list(self, client_api):
        assert client_api.get("/api/freelancer/orders/").status_code == 403

    def test_detail_scoped_to_owner(self, freelancer_api, order_factory):
        order = order_factory()
        assert freelancer_api.get(f"/api/freelancer/orders/{order.pk}/").status_code == 404

    def test_patch_on_someone_elses_order_is_forbidden(self, freelancer_api, order_factory):
        order = order_factory()
        response = freelancer_api.patch(f"/api/freelancer/orders/{order.pk}/", {"action": "accept"}, format="json")
        assert response.status_code == 403

    def test_patch_reject_with_reason(self, freelancer_api, freelancer_user, paid_order_factory):
        order = paid_order_factory(freelancer=freelancer_user)
        response = freelancer_api.patch(
            f"/api/freelancer/orders/{order.pk}/", {"action": "reject", "reason": "Busy"}, format="json"
        )

        assert response.status_code == 200
        assert response.json()["order"]["project_status"] == "cancelled"
        assert response.json()["order"]["rejection_reason"] == "Busy"

    def test_patch_invalid_state_is_409(self, freelancer_api, freelancer_user, paid_order_factory):
        order = paid_order_factory(freelancer=freelancer_user, project_status="cancelled")
        response = freelancer_api.patch(f"/api/freelancer/orders/{order.pk}/", {"action": "accept"}, format="json")

        assert response.status_code == 409
        assert response.json()["message"] == "Order cannot be accepted"

    def test_patch_unknown_action_is_400(self, freelancer_api, freelancer_user, paid_order_factory):
        order = paid_order_factory(freelancer=freelancer_user)
        response = freelancer_api.patch(f"/api/freelancer/orders/{order.pk}/", {"action": "pause"}, format="json")
        assert response.status_code == 400

    def test_deliver_via_patch(self, freelancer_api, freelancer_user, paid_order_factory):
        order = paid_order_factory(freelancer=freelancer_user, project_status="approved")
        response = freelancer_api.patch(f"/api/freelancer/orders/{order.pk}/", {"action": "deliver"}, format="json")

        assert response.status_code == 200
        order.refresh_from_db()
        assert order.project_status == "completed"
        assert order.delivery_files == []


# =============================================================================
# END TO END
# =============================================================================

@pytest.mark.django_db
def test_premium_order_lifecycle(make_api, freelancer_profile):
    client = ClientFactory()
    client_api = make_api(client)
    freelancer_api = make_api(freelancer_profile.user)

    created = create_order(client_api, freelancer_profile, plan_type="Premium")
    assert created.status_code == 201
    order_id = created.json()["order"]["id"]
    assert created.json()["order"]["price"] == 250.0

    paid = client_api.post(f"/api/client/orders/{order_id}/pay/")
    assert paid.json()["payment_status"] == "paid"

    answered = client_api.post(
        f"/api/client/orders/{order_id}/requirements/",
        {"answers": [{"id": "brand", "text": "Acme"}, {"id": "style", "options": ["Bold"]}]},
        format="json",
    )
    assert answered.status_code == 200
    assert len(answered.json()["requirement_answers"]) == 2

    accepted = freelancer_api.patch(f"/api/freelancer/orders/{order_id}/", {"action": "accept"}, format="json")
    assert accepted.json()["order"]["project_status"] == "approved"

    delivered = freelancer_api.post(
        f"/api/freelancer/orders/{order_id}/delivery/",
        {
            "message": "Here is your logo",
            "files": [{"name": "logo.zip", "url": "https://cdn.example.com/logo.zip", "size": 5120}],
        },
        format="json",
    )
    assert delivered.status_code == 200
    order = delivered.json()["order"]
    assert order["project_status"] == "completed"
    assert order["delivered_at"] is not None
    assert len(order["delivery_files"]) == 1

    again = freelancer_api.patch(f"/api/freelancer/orders/{order_id}/", {"action": "accept"}, format="json")
    assert again.status_code == 409
    assert Order.objects.get(pk=order_id).project_status == "completed"


@pytest.mark.django_db
def test_guest_checkout(make_api, freelancer_profile):
    guest = make_api()

    created = create_order(guest, freelancer_profile, plan_type="Basic", client_email="Guest@Example.com")
    assert created.status_code == 201
    order_id = created.json()["order"]["id"]

    assert guest.post(f"/api/client/orders/{order_id}/pay/").status_code == 200

    detail = guest.get(f"/api/client/orders/{order_id}/")
    assert detail.status_code == 200
    body = detail.json()
    assert body["client_email"] == "guest@example.com"
    assert body["payment_status"] == "paid"
    ids = [item["id"] for item in body["requirements_snapshot"]]
    assert ids == ["brand", "style", "refs"]

    answered = guest.post(
        f"/api/client/orders/{order_id}/requirements/",
        {"answers": [{"id": ids[0], "text": "Acme"}]},
        format="json",
    )
    assert answered.status_code == 200

    after = guest.get(f"/api/client/orders/{order_id}/").json()
    assert after["requirement_answers"] == [{"id": "brand", "text": "Acme", "options": [], "files": []}]
