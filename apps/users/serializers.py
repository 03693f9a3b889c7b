from rest_framework import serializers
from django.contrib.auth import get_user_model, authenticate
from django.db import transaction
from rest_framework_simplejwt.tokens import RefreshToken
from .models import ClientProfile
from .utils import create_and_send_code, verify_code, has_active_code


User = get_user_model()

USERNAME_REGEX = r"^[a-zA-Z0-9_]+$"


def username_taken(username, exclude_email=None):
    qs = User.objects.filter(username__iexact=username, is_verified=True)
    if exclude_email:
        qs = qs.exclude(email=exclude_email)
    return qs.exists()


# -------- Sign up --------
class SignUpSerializer(serializers.Serializer):
    """
    Registers an unverified account and e-mails a verification code.
    Re-submitting for an email that is not verified yet overwrites the
    pending username/password and issues a fresh code.
    """
    username = serializers.RegexField(
        USERNAME_REGEX,
        min_length=2,
        max_length=50,
        error_messages={"invalid": "Username may only contain letters, numbers and underscores."},
    )
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, min_length=6, style={"input_type": "password"})
    role = serializers.ChoiceField(choices=[("client", "Client"), ("freelancer", "Freelancer")], default="client")

    def validate_email(self, value):
        value = value.lower().strip()
        if User.objects.filter(email=value, is_verified=True).exists():
            raise serializers.ValidationError("User already exists with this email.")
        return value

    def validate(self, data):
        if username_taken(data["username"], exclude_email=data["email"]):
            raise serializers.ValidationError({"username": "Username is already taken."})
        return data

    @transaction.atomic
    def create(self, validated_data):
        email = validated_data["email"]
        user = User.objects.filter(email=email).first()

        if user is None:
            user = User.objects.create_user(
                email=email,
                username=validated_data["username"],
                password=validated_data["password"],
                role=validated_data["role"],
            )
        else:
            user.username = validated_data["username"]
            user.role = validated_data["role"]
            user.set_password(validated_data["password"])
            user.save(update_fields=["username", "role", "password"])

        create_and_send_code(user.email, user.username)
        return user


# -------- Verify / resend --------
class VerifyCodeSerializer(serializers.Serializer):
    email = serializers.EmailField()
    code = serializers.RegexField(r"^\d{6}$", error_messages={"invalid": "Code must be 6 digits."})

    def validate(self, data):
        email = data["email"].lower().strip()
        user = User.objects.filter(email=email).first()
        if not user:
            raise serializers.ValidationError({"email": "User not found."})
        if user.is_verified:
            raise serializers.ValidationError({"email": "Account already verified."})
        if not has_active_code(email):
            raise serializers.ValidationError({"code": "No active verification code. Please resend."})
        if not verify_code(email, data["code"]):
            raise serializers.ValidationError({"code": "Invalid verification code."})

        data["user"] = user
        return data

    def save(self, **kwargs):
        user = self.validated_data["user"]
        user.is_verified = True
        user.save(update_fields=["is_verified"])
        return user


class ResendCodeSerializer(serializers.Serializer):
    email = serializers.EmailField()

    def validate_email(self, value):
        value = value.lower().strip()
        user = User.objects.filter(email=value).first()
        if not user:
            raise serializers.ValidationError("User not found.")
        if user.is_verified:
            raise serializers.ValidationError("Account already verified.")
        return value

    def create(self, validated_data):
        user = User.objects.get(email=validated_data["email"])
        create_and_send_code(user.email, user.username)
        return {"email": user.email, "code_sent": True}


class UsernameQuerySerializer(serializers.Serializer):
    userName = serializers.RegexField(
        USERNAME_REGEX,
        min_length=2,
        max_length=50,
        error_messages={"invalid": "Username may only contain letters, numbers and underscores."},
    )


# ---------- Login ----------
class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, style={'input_type': 'password'})

    def validate(self, data):
        email = data.get('email').lower().strip()
        password = data.get('password')

        user = authenticate(email=email, password=password)
        if not user:
            raise serializers.ValidationError("Invalid email or password.")

        if not user.is_verified:
            raise serializers.ValidationError("Please verify your account before signing in.")

        refresh = RefreshToken.for_user(user)
        return {
            "refresh": str(refresh),
            "access": str(refresh.access_token),
            "user": UserMiniSerializer(user).data,
        }


class UserMiniSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["id", "username", "email", "role", "is_verified"]


# ---------- Client Profile ----------
class ClientProfileSerializer(serializers.ModelSerializer):
    email = serializers.EmailField(source='user.email', read_only=True)
    username = serializers.CharField(source='user.username', read_only=True)
    about = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=500)

    class Meta:
        model = ClientProfile
        fields = [
            "id", "email", "username",
            "location", "profile_picture", "company_name", "website", "about",
            "created_at", "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]

    def validate(self, data):
        # blank strings clear the field
        return {key: (value.strip() or None) if isinstance(value, str) else value for key, value in data.items()}


class MeSerializer(serializers.ModelSerializer):
    profile_picture = serializers.SerializerMethodField()
    company_name = serializers.CharField(source="client_profile.company_name", read_only=True)
    website = serializers.CharField(source="client_profile.website", read_only=True)
    about = serializers.CharField(source="client_profile.about", read_only=True)
    location = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            "id", "username", "email", "role", "is_verified",
            "profile_picture", "company_name", "website", "about", "location",
        ]

    def _profile(self, obj):
        if obj.role == "freelancer":
            return getattr(obj, "freelancer_profile", None)
        return getattr(obj, "client_profile", None)

    def get_profile_picture(self, obj):
        profile = self._profile(obj)
        return profile.profile_picture if profile else None

    def get_location(self, obj):
        profile = self._profile(obj)
        return profile.location if profile else None
