# apps/orders/tasks.py
import logging

from celery import shared_task
from django.conf import settings
from django.core.mail import send_mail

from .constants import (
    EVENT_CREATED,
    EVENT_PAID,
    EVENT_ACCEPTED,
    EVENT_REJECTED,
    EVENT_DELIVERED,
)
from .models import Order

logger = logging.getLogger(__name__)

# event -> (subject suffix, message line)
EVENT_TEXT = {
    EVENT_CREATED: ("new order", "A new {plan} order was placed."),
    EVENT_PAID: ("payment received", "Payment was received. The client will send the requirements next."),
    EVENT_ACCEPTED: ("accepted", "{freelancer} accepted your order. Expected delivery in {days} day(s)."),
    EVENT_REJECTED: ("declined", "{freelancer} declined your order."),
    EVENT_DELIVERED: ("delivered", "{freelancer} delivered your order."),
}

FREELANCER_EVENTS = (EVENT_CREATED, EVENT_PAID)


@shared_task(
    bind=True,
    autoretry_for=(Exception,),
    retry_backoff=10,
    retry_kwargs={"max_retries": 3},
)
def send_order_status_email(self, order_id, event):
    """
    Notify the other party of an order event.
    created/paid go to the freelancer, the rest to the client.
    """
    order = Order.objects.select_related("freelancer", "client").filter(pk=order_id).first()
    if order is None or event not in EVENT_TEXT:
        logger.warning("Skipping order e-mail: order=%s event=%s", order_id, event)
        return False

    if event in FREELANCER_EVENTS:
        recipient = order.freelancer.email
    else:
        recipient = order.notify_email
    if not recipient:
        return False

    suffix, line = EVENT_TEXT[event]
    body = line.format(plan=order.plan_type, freelancer=order.freelancer_name, days=order.delivery_days)
    if event == EVENT_REJECTED and order.rejection_reason:
        body += f"\nReason: {order.rejection_reason}"
    if event == EVENT_DELIVERED and order.delivery_message:
        body += f"\n\n{order.delivery_message}"

    subject = f"[SkillConnect] Order {order.order_number} {suffix}"
    message = f"{body}\n\nView the order: {settings.SITE_URL}/orders"
    send_mail(subject, message, settings.DEFAULT_FROM_EMAIL, [recipient])
    return True
