from django.urls import path
from .views import (
    SignUpView,
    VerifyCodeView,
    ResendCodeView,
    UsernameAvailabilityView,
    LoginView,
    MeView,
    ClientProfileView,
)


urlpatterns = [
    # Authentication & registration
    path('sign-up/', SignUpView.as_view(), name='sign-up'),
    path('verify/', VerifyCodeView.as_view(), name='verify'),
    path('resend-code/', ResendCodeView.as_view(), name='resend-code'),
    path('username/', UsernameAvailabilityView.as_view(), name='username'),
    path('login/', LoginView.as_view(), name='login'),

    # Profile
    path('client/me/', MeView.as_view(), name='client-me'),
    path('onboarding/client/', ClientProfileView.as_view(), name='client-onboarding'),
]
