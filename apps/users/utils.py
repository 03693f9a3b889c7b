# apps/users/utils.py
import logging
import random

from django.conf import settings
from django.core.cache import cache

logger = logging.getLogger(__name__)


# import task lazily to avoid circular imports
def _get_send_task():
    from .tasks import send_verification_email
    return send_verification_email


def generate_code(length: int = 6) -> str:
    """
    Generate a numeric verification code of `length` digits as a string.
    The first digit is never zero, e.g. '734591'.
    """
    if length <= 0:
        raise ValueError("length must be > 0")
    return str(random.randint(10 ** (length - 1), 10 ** length - 1))


def _cache_key(email: str) -> str:
    return f"verify:{email.lower().strip()}"


def create_and_send_code(email: str, username: str, send_async: bool = True) -> str:
    """
    Generate a verification code, store it in the cache and e-mail it.
    Returns the code (useful for tests; it is never exposed over the API).
    - send_async: if False, call the send task synchronously
    """
    if not email:
        raise ValueError("email is required")

    code = generate_code()
    ttl = settings.VERIFICATION_CODE_TTL_MINUTES * 60
    cache.set(_cache_key(email), code, timeout=ttl)
    logger.info("Issued verification code for %s", email)

    send_task = _get_send_task()
    if send_async:
        send_task.delay(email, username, code)
    else:
        send_task(email, username, code)

    return code


def has_active_code(email: str) -> bool:
    return cache.get(_cache_key(email)) is not None


def verify_code(email: str, code: str, erase: bool = True) -> bool:
    """
    Check a verification code for the given email.
    If erase=True and verification succeeds, the cached code is deleted.
    """
    if not email or not code:
        return False

    cached = cache.get(_cache_key(email))
    if cached is None:
        return False

    if str(cached) == str(code):
        if erase:
            cache.delete(_cache_key(email))
        return True

    return False
