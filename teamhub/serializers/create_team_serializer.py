from rest_framework import serializers

from teamhub.constants.messages import ValidationErrors
from teamhub.serializers.member_serializer import MemberSerializer


class CreateTeamSerializer(serializers.Serializer):
    teamName = serializers.CharField(
        error_messages={
            "required": ValidationErrors.TEAM_NAME_REQUIRED,
            "blank": ValidationErrors.TEAM_NAME_REQUIRED,
        },
    )
    teamDescription = serializers.CharField(
        error_messages={
            "required": ValidationErrors.TEAM_DESCRIPTION_REQUIRED,
            "blank": ValidationErrors.TEAM_DESCRIPTION_REQUIRED,
        },
    )
    members = MemberSerializer(many=True, error_messages={"required": ValidationErrors.MEMBERS_REQUIRED})

    def validate_members(self, value):
        if not value:
            raise serializers.ValidationError(ValidationErrors.MEMBERS_REQUIRED)
        return value
