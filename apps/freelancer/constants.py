CATEGORY_CHOICES = [
    ("programming_tech", "Programming & Tech"),
    ("graphics_design", "Graphics & Design"),
    ("digital_marketing", "Digital Marketing"),
    ("video_animation", "Video & Animation"),
    ("ai_services", "AI Services"),
    ("business", "Business"),
    ("writing_translation", "Writing & Translation"),
    ("consulting", "Consulting"),
]

CATEGORY_LABELS = dict(CATEGORY_CHOICES)

PLAN_BASIC = "Basic"
PLAN_STANDARD = "Standard"
PLAN_PREMIUM = "Premium"

PLAN_TYPE_CHOICES = [
    (PLAN_BASIC, "Basic"),
    (PLAN_STANDARD, "Standard"),
    (PLAN_PREMIUM, "Premium"),
]

APPROVAL_PENDING = "pending"
APPROVAL_APPROVED = "approved"
APPROVAL_REJECTED = "rejected"

APPROVAL_STATUS_CHOICES = [
    (APPROVAL_PENDING, "Pending"),
    (APPROVAL_APPROVED, "Approved"),
    (APPROVAL_REJECTED, "Rejected"),
]
