from pydantic import EmailStr, TypeAdapter, ValidationError as PydanticValidationError
from rest_framework import serializers

from teamhub.constants.messages import ValidationErrors
from teamhub.constants.role import UserRole

# Same check UserModel.email applies, so anything accepted here can be stored
email_adapter = TypeAdapter(EmailStr)


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField(error_messages={"invalid": ValidationErrors.INVALID_EMAIL})
    password = serializers.CharField(
        min_length=6,
        trim_whitespace=False,
        error_messages={"min_length": ValidationErrors.PASSWORD_TOO_SHORT},
    )

    def validate_email(self, value):
        try:
            email_adapter.validate_python(value)
        except PydanticValidationError:
            raise serializers.ValidationError(ValidationErrors.INVALID_EMAIL)
        return value


class RegisterSerializer(LoginSerializer):
    name = serializers.CharField(
        error_messages={
            "required": ValidationErrors.NAME_REQUIRED,
            "blank": ValidationErrors.NAME_REQUIRED,
        },
    )
    role = serializers.ChoiceField(
        choices=[role.value for role in UserRole],
        error_messages={"required": ValidationErrors.ROLE_REQUIRED},
    )
