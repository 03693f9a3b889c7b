from django.apps import AppConfig


class FreelancerConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.freelancer'
