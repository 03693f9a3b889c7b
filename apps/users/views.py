import logging

from django.contrib.auth import get_user_model
from rest_framework import status, generics
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from .models import ClientProfile
from .permissions import IsClient
from .serializers import (
    SignUpSerializer,
    VerifyCodeSerializer,
    ResendCodeSerializer,
    UsernameQuerySerializer,
    LoginSerializer,
    ClientProfileSerializer,
    MeSerializer,
    username_taken,
)

logger = logging.getLogger(__name__)
User = get_user_model()


# -------- Sign up --------
class SignUpView(generics.GenericAPIView):
    """
    Create (or refresh) an unverified account and e-mail a verification code.
    """
    serializer_class = SignUpSerializer
    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info("Registered %s as %s", user.email, user.role)
        return Response(
            {
                "success": True,
                "message": "User registered successfully. Please verify your account.",
            },
            status=status.HTTP_201_CREATED,
        )


# -------- Verify code --------
class VerifyCodeView(generics.GenericAPIView):
    serializer_class = VerifyCodeSerializer
    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info("Verified %s", user.email)
        return Response(
            {"success": True, "message": "Email verified successfully."},
            status=status.HTTP_200_OK,
        )


class ResendCodeView(generics.GenericAPIView):
    serializer_class = ResendCodeSerializer
    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(
            {"success": True, "message": "Verification code sent."},
            status=status.HTTP_200_OK,
        )


class UsernameAvailabilityView(APIView):
    """
    Case-insensitive check against verified accounts only.
    A taken name is still a 200; `success` carries the answer.
    """
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        serializer = UsernameQuerySerializer(data={"userName": request.query_params.get("userName", "")})
        serializer.is_valid(raise_exception=True)

        if username_taken(serializer.validated_data["userName"]):
            return Response({"success": False, "message": "Username is already taken"})
        return Response({"success": True, "message": "Username is unique"})


# ---------- Login ----------
class LoginView(generics.GenericAPIView):
    """
    Login using email and password.
    Returns access and refresh JWT tokens.
    """
    serializer_class = LoginSerializer
    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return Response(
            {
                "success": True,
                "message": "Login successful.",
                "data": serializer.validated_data,
            },
            status=status.HTTP_200_OK,
        )


class MeView(generics.RetrieveAPIView):
    serializer_class = MeSerializer
    permission_classes = [IsAuthenticated]

    def get_object(self):
        return self.request.user


# ---------- Client onboarding ----------
class ClientProfileView(generics.RetrieveUpdateAPIView):
    serializer_class = ClientProfileSerializer
    permission_classes = [IsClient]
    http_method_names = ["get", "patch", "put"]

    def get_object(self):
        profile, _ = ClientProfile.objects.get_or_create(user=self.request.user)
        return profile

    def update(self, request, *args, **kwargs):
        response = super().update(request, *args, **kwargs)
        response.data = {"success": True, "message": "Client profile saved", "profile": response.data}
        return response
