import logging

from django.db import transaction
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError

from apps.freelancer.models import FreelancerProfile
from .conf import order_setting
from .constants import (
    ACTION_ACCEPT,
    ACTION_REJECT,
    ACTION_DELIVER,
    ACTION_EVENTS,
    EVENT_CREATED,
    EVENT_PAID,
)
from .exceptions import InvalidOrderState
from .models import Order
from .validators import check_answers

logger = logging.getLogger(__name__)


def _notify(order, event):
    from .tasks import send_order_status_email

    transaction.on_commit(lambda: send_order_status_email.delay(order.pk, event))


def _locked_order(order_id):
    order = Order.objects.select_for_update().filter(pk=order_id).first()
    if order is None:
        raise NotFound("Order not found")
    return order


def _check_client_access(order, actor):
    # guest orders (no client) are reachable by anyone holding the id
    if order.client_id is None:
        return
    if not actor.is_authenticated or actor.pk != order.client_id:
        raise PermissionDenied("You do not have access to this order.")


def _check_freelancer_access(order, actor):
    if order.freelancer_id != actor.pk:
        raise PermissionDenied("You can only manage your own orders.")


# ------------------------------------
# Client side
# ------------------------------------
@transaction.atomic
def create_order(*, actor, freelancer_id, plan_type, client_email=None) -> Order:
    """
    Create an unpaid, pending order for the freelancer's `plan_type` plan.
    `actor` may be anonymous, in which case `client_email` is required.
    """
    if actor.is_authenticated:
        if actor.role != "client":
            raise PermissionDenied("Only clients can place orders.")
        client = actor
        client_email = client_email or actor.email
    else:
        client = None
        if not client_email:
            raise ValidationError({"client_email": "This field is required for guest orders."})

    profile = (
        FreelancerProfile.objects
        .select_related("user")
        .filter(user_id=freelancer_id, user__role="freelancer")
        .first()
    )
    if profile is None:
        raise NotFound("Freelancer not found")

    plan = profile.get_rate_plan(plan_type)
    if plan is None:
        raise ValidationError({"plan_type": "Plan not available"})

    order = Order.from_rate_plan(
        profile=profile,
        plan=plan,
        client=client,
        client_email=client_email.lower() if client_email else None,
    )
    order.save()

    logger.info(
        "Order %s created: freelancer=%s plan=%s price=%s client=%s",
        order.order_number, profile.user_id, plan.plan_type, order.price, client.pk if client else "guest",
    )
    _notify(order, EVENT_CREATED)
    return order


@transaction.atomic
def capture_payment(*, actor, order_id):
    """
    Stand-in for a gateway capture. Idempotent.
    Returns (order, already_paid).
    """
    order = _locked_order(order_id)
    _check_client_access(order, actor)

    if not order.mark_paid():
        return order, True

    logger.info("Order %s paid", order.order_number)
    _notify(order, EVENT_PAID)
    return order, False


def _clean_files(files):
    cleaned = []
    for f in files or []:
        item = {"name": f["name"], "url": f["url"]}
        if f.get("size") is not None:
            item["size"] = f["size"]
        cleaned.append(item)
    return cleaned


def _clean_answer(answer):
    return {
        "id": answer["id"],
        "text": answer.get("text"),
        "options": list(answer.get("options") or []),
        "files": _clean_files(answer.get("files")),
    }


@transaction.atomic
def submit_requirement_answers(*, actor, order_id, answers) -> Order:
    """
    Replace the order's answers. Answers for ids outside the snapshot
    are dropped silently.
    """
    order = _locked_order(order_id)
    _check_client_access(order, actor)

    if not order.is_paid:
        raise InvalidOrderState("Payment required first")

    ids = order.snapshot_ids
    # one answer per requirement; a repeated id keeps the last one sent
    by_id = {}
    for answer in answers:
        if answer["id"] in ids:
            by_id.pop(answer["id"], None)
            by_id[answer["id"]] = _clean_answer(answer)
    kept = list(by_id.values())
    dropped = len(answers) - len(kept)

    if order_setting("STRICT_REQUIREMENT_ANSWERS"):
        check_answers(order.requirements_snapshot, kept)

    order.set_answers(kept)
    logger.info(
        "Order %s answers submitted (%s kept, %s dropped)", order.order_number, len(kept), dropped
    )
    return order


# ------------------------------------
# Freelancer side
# ------------------------------------
@transaction.atomic
def transition_order(*, actor, order_id, action, reason=None, message="", files=None) -> Order:
    """
    accept: pending -> approved
    reject: pending -> cancelled
    deliver: approved -> completed
    """
    if not actor.is_authenticated or actor.role != "freelancer":
        raise PermissionDenied("Only freelancers can manage orders.")

    order = _locked_order(order_id)
    _check_freelancer_access(order, actor)

    previous = order.project_status
    try:
        if action == ACTION_ACCEPT:
            order.accept()
        elif action == ACTION_REJECT:
            order.reject(reason)
        elif action == ACTION_DELIVER:
            order.deliver(message, _clean_files(files))
        else:
            raise ValidationError({"action": f'"{action}" is not a valid action.'})
    except InvalidOrderState:
        logger.warning(
            "Order %s: %s rejected from status %s by freelancer %s",
            order.order_number, action, previous, actor.pk,
        )
        raise

    logger.info("Order %s: %s -> %s", order.order_number, previous, order.project_status)
    _notify(order, ACTION_EVENTS[action])
    return order


def accept_order(*, actor, order_id) -> Order:
    return transition_order(actor=actor, order_id=order_id, action=ACTION_ACCEPT)


def reject_order(*, actor, order_id, reason=None) -> Order:
    return transition_order(actor=actor, order_id=order_id, action=ACTION_REJECT, reason=reason)


def deliver_order(*, actor, order_id, message="", files=None) -> Order:
    return transition_order(actor=actor, order_id=order_id, action=ACTION_DELIVER, message=message, files=files)
