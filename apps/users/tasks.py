# apps/users/tasks.py
from celery import shared_task
from django.conf import settings
from django.core.mail import send_mail


@shared_task(
    bind=True,
    autoretry_for=(Exception,),
    retry_backoff=10,
    retry_kwargs={"max_retries": 3},
)
def send_verification_email(self, email: str, username: str, code: str):
    ttl = settings.VERIFICATION_CODE_TTL_MINUTES
    subject = "[SkillConnect] Verify your account"
    message = (
        f"Hello {username},\n\n"
        f"Your verification code is {code}. It will expire in {ttl} minutes."
    )
    send_mail(subject, message, settings.DEFAULT_FROM_EMAIL, [email])
