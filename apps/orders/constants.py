PAYMENT_UNPAID = "unpaid"
PAYMENT_PAID = "paid"

PAYMENT_STATUS_CHOICES = [
    (PAYMENT_UNPAID, "Unpaid"),
    (PAYMENT_PAID, "Paid"),
]

PROJECT_PENDING = "pending"
PROJECT_APPROVED = "approved"        # in progress
PROJECT_CANCELLED = "cancelled"
PROJECT_COMPLETED = "completed"

PROJECT_STATUS_CHOICES = [
    (PROJECT_PENDING, "Pending"),
    (PROJECT_APPROVED, "Approved"),
    (PROJECT_CANCELLED, "Cancelled"),
    (PROJECT_COMPLETED, "Completed"),
]

TERMINAL_STATUSES = (PROJECT_CANCELLED, PROJECT_COMPLETED)

ACTION_ACCEPT = "accept"
ACTION_REJECT = "reject"
ACTION_DELIVER = "deliver"

ACTION_CHOICES = [
    (ACTION_ACCEPT, "Accept"),
    (ACTION_REJECT, "Reject"),
    (ACTION_DELIVER, "Deliver"),
]

# action -> (required current status, next status)
TRANSITIONS = {
    ACTION_ACCEPT: (PROJECT_PENDING, PROJECT_APPROVED),
    ACTION_REJECT: (PROJECT_PENDING, PROJECT_CANCELLED),
    ACTION_DELIVER: (PROJECT_APPROVED, PROJECT_COMPLETED),
}

TRANSITION_ERRORS = {
    ACTION_ACCEPT: "Order cannot be accepted",
    ACTION_REJECT: "Order cannot be rejected",
    ACTION_DELIVER: "Only in-progress orders can be delivered",
}

# notification events
EVENT_CREATED = "created"
EVENT_PAID = "paid"
EVENT_ACCEPTED = "accepted"
EVENT_REJECTED = "rejected"
EVENT_DELIVERED = "delivered"

ACTION_EVENTS = {
    ACTION_ACCEPT: EVENT_ACCEPTED,
    ACTION_REJECT: EVENT_REJECTED,
    ACTION_DELIVER: EVENT_DELIVERED,
}
