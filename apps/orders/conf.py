from django.conf import settings

DEFAULTS = {
    "STRICT_REQUIREMENT_ANSWERS": False,
    "APPROVED_ORDERS_ARE_ACTIVE": False,
}


def order_setting(name):
    """Read from settings.ORDERS at call time, falling back to DEFAULTS."""
    return getattr(settings, "ORDERS", {}).get(name, DEFAULTS[name])
