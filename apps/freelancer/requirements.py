"""
Requirement questionnaire items.

A freelancer's questionnaire is an ordered list of items tagged by ``type``.
Each type has its own serializer; an item is validated by the serializer
registered for its type and stored with only the fields that type allows.
"""
import json

from rest_framework import serializers

TEXT = "text"
TEXTAREA = "textarea"
MULTIPLE_CHOICE = "multiple_choice"
FILE = "file"
INSTRUCTIONS = "instructions"

REQUIREMENT_TYPES = (TEXT, TEXTAREA, MULTIPLE_CHOICE, FILE, INSTRUCTIONS)


class BaseRequirementSerializer(serializers.Serializer):
    id = serializers.CharField(max_length=64)
    type = serializers.ChoiceField(choices=REQUIREMENT_TYPES)
    helperText = serializers.CharField(max_length=500, required=False, allow_null=True, allow_blank=True, default=None)


class QuestionRequirementSerializer(BaseRequirementSerializer):
    """text / textarea"""
    question = serializers.CharField(max_length=500)
    required = serializers.BooleanField(default=True)


class MultipleChoiceRequirementSerializer(QuestionRequirementSerializer):
    options = serializers.ListField(child=serializers.CharField(max_length=200), allow_empty=False)
    allowMultiple = serializers.BooleanField(default=False)


class FileRequirementSerializer(QuestionRequirementSerializer):
    accepts = serializers.ListField(child=serializers.CharField(max_length=100), default=list)
    maxFiles = serializers.IntegerField(min_value=1, default=1)


class InstructionsRequirementSerializer(BaseRequirementSerializer):
    content = serializers.CharField(allow_blank=True, default="")

    def validate(self, data):
        # nothing to answer
        data["required"] = False
        return data


REQUIREMENT_SERIALIZERS = {
    TEXT: QuestionRequirementSerializer,
    TEXTAREA: QuestionRequirementSerializer,
    MULTIPLE_CHOICE: MultipleChoiceRequirementSerializer,
    FILE: FileRequirementSerializer,
    INSTRUCTIONS: InstructionsRequirementSerializer,
}


def normalize_requirement(item):
    """
    Validate one item and return it with only the fields of its type.
    Raises ValidationError.
    """
    if not isinstance(item, dict):
        raise serializers.ValidationError("Each requirement must be an object.")

    kind = item.get("type")
    serializer_class = REQUIREMENT_SERIALIZERS.get(kind)
    if serializer_class is None:
        raise serializers.ValidationError({"type": [f'"{kind}" is not a valid requirement type.']})

    serializer = serializer_class(data=item)
    serializer.is_valid(raise_exception=True)
    return dict(serializer.validated_data)


def normalize_requirements(items):
    errors = []
    cleaned = []
    seen = set()
    has_errors = False

    for item in items:
        try:
            requirement = normalize_requirement(item)
        except serializers.ValidationError as exc:
            errors.append(exc.detail)
            has_errors = True
            continue

        if requirement["id"] in seen:
            errors.append({"id": [f'Duplicate requirement id "{requirement["id"]}".']})
            has_errors = True
            continue

        seen.add(requirement["id"])
        cleaned.append(requirement)
        errors.append({})

    if has_errors:
        raise serializers.ValidationError(errors)
    return cleaned


class RequirementListField(serializers.Field):
    """
    Accepts the questionnaire as a list or a JSON string (FormData clients).
    """
    default_error_messages = {
        "not_a_list": "Requirements must be a list.",
        "invalid_json": "Requirements must be valid JSON.",
    }

    def to_internal_value(self, data):
        if data is None or data == "":
            return []
        if isinstance(data, str):
            try:
                data = json.loads(data)
            except (json.JSONDecodeError, ValueError):
                self.fail("invalid_json")
        if not isinstance(data, list):
            self.fail("not_a_list")
        return normalize_requirements(data)

    def to_representation(self, value):
        return value or []
