"""
SkillConnect test configuration: factory_boy factories and shared fixtures.

RUNNING TESTS:
pip install -e ".[test]"
pytest
pytest apps/orders -v
"""
import copy
from decimal import Decimal

import factory
import pytest
from factory.django import DjangoModelFactory


PASSWORD = "testpass123"

REQUIREMENTS = [
    {
        "id": "brand",
        "type": "text",
        "helperText": None,
        "question": "What is your brand name?",
        "required": True,
    },
    {
        "id": "style",
        "type": "multiple_choice",
        "helperText": "Pick the closest match",
        "question": "Which style do you prefer?",
        "required": True,
        "options": ["Minimal", "Bold", "Playful"],
        "allowMultiple": False,
    },
    {
        "id": "refs",
        "type": "file",
        "helperText": None,
        "question": "Upload reference images",
        "required": False,
        "accepts": [".png", ".jpg"],
        "maxFiles": 2,
    },
]


# ============================================================================
# USER FACTORIES
# ============================================================================

class UserFactory(DjangoModelFactory):
    class Meta:
        model = "users.User"
        django_get_or_create = ("email",)

    username = factory.Sequence(lambda n: f"user_{n}")
    email = factory.LazyAttribute(lambda o: f"{o.username}@example.com")
    password = factory.django.Password(PASSWORD)
    role = "client"
    is_verified = True
    is_active = True


class ClientFactory(UserFactory):
    username = factory.Sequence(lambda n: f"client_{n}")
    role = "client"


class FreelancerUserFactory(UserFactory):
    username = factory.Sequence(lambda n: f"freelancer_{n}")
    role = "freelancer"


class AdminUserFactory(UserFactory):
    username = factory.Sequence(lambda n: f"admin_{n}")
    role = "admin"
    is_staff = True


class ClientProfileFactory(DjangoModelFactory):
    class Meta:
        model = "users.ClientProfile"

    user = factory.SubFactory(ClientFactory)
    location = "Berlin"
    company_name = "Acme"


# ============================================================================
# FREELANCER FACTORIES
# ============================================================================

class FreelancerProfileFactory(DjangoModelFactory):
    class Meta:
        model = "freelancer.FreelancerProfile"

    user = factory.SubFactory(FreelancerUserFactory)
    location = "Lisbon"
    bio = "Designer and front-end developer."
    category = "graphics_design"
    services = factory.LazyFunction(lambda: ["Logo Design", "Brand Identity"])
    skills = factory.LazyFunction(lambda: ["Figma", "Illustrator"])
    approval_status = "approved"
    requirements = factory.LazyFunction(lambda: copy.deepcopy(REQUIREMENTS))


class RatePlanFactory(DjangoModelFactory):
    class Meta:
        model = "freelancer.RatePlan"

    freelancer = factory.SubFactory(FreelancerProfileFactory)
    plan_type = "Standard"
    price = Decimal("120.00")
    description = "Two logo concepts"
    whats_included = factory.LazyFunction(lambda: ["2 concepts", "Source file"])
    delivery_days = 5
    revisions = 2


class PortfolioItemFactory(DjangoModelFactory):
    class Meta:
        model = "freelancer.PortfolioItem"

    freelancer = factory.SubFactory(FreelancerProfileFactory)
    title = factory.Sequence(lambda n: f"Project {n}")
    description = "A brand refresh."
    project_url = "https://example.com/project"


# ============================================================================
# ORDER FACTORIES
# ============================================================================

class OrderFactory(DjangoModelFactory):
    class Meta:
        model = "orders.Order"

    client = factory.SubFactory(ClientFactory)
    client_email = factory.LazyAttribute(lambda o: o.client.email if o.client else "guest@example.com")
    freelancer = factory.SubFactory(FreelancerUserFactory)
    freelancer_name = factory.LazyAttribute(lambda o: o.freelancer.username)
    plan_type = "Standard"
    price = Decimal("120.00")
    delivery_days = 5
    requirements_snapshot = factory.LazyFunction(lambda: copy.deepcopy(REQUIREMENTS))


class PaidOrderFactory(OrderFactory):
    payment_status = "paid"


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def api_client(db):
    """Provide a DRF API test client."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def client_user(db):
    return ClientFactory()


@pytest.fixture
def freelancer_user(db):
    return FreelancerUserFactory()


@pytest.fixture
def platform_admin(db):
    return AdminUserFactory()


@pytest.fixture
def freelancer_profile(db, freelancer_user):
    """Approved profile with Basic / Standard / Premium plans and a 3-question questionnaire."""
    profile = FreelancerProfileFactory(user=freelancer_user)
    RatePlanFactory(freelancer=profile, plan_type="Basic", price=Decimal("50.00"), delivery_days=3)
    RatePlanFactory(freelancer=profile, plan_type="Standard", price=Decimal("120.00"), delivery_days=5)
    RatePlanFactory(freelancer=profile, plan_type="Premium", price=Decimal("250.00"), delivery_days=7)
    return profile


@pytest.fixture
def make_api(db):
    """Build a separate APIClient per actor, optionally authenticated."""
    from rest_framework.test import APIClient

    def _make(user=None):
        api = APIClient()
        if user is not None:
            api.force_authenticate(user=user)
        return api
    return _make


@pytest.fixture
def client_api(make_api, client_user):
    return make_api(client_user)


@pytest.fixture
def freelancer_api(make_api, freelancer_user):
    return make_api(freelancer_user)


@pytest.fixture
def admin_api(make_api, platform_admin):
    return make_api(platform_admin)


@pytest.fixture
def order_factory(db):
    return OrderFactory


@pytest.fixture
def paid_order_factory(db):
    return PaidOrderFactory
