from rest_framework import serializers

from teamhub.constants.messages import ValidationErrors


class BulkDeleteTeamsSerializer(serializers.Serializer):
    teamIds = serializers.ListField(
        child=serializers.CharField(),
        allow_empty=False,
        error_messages={
            "required": ValidationErrors.TEAM_IDS_REQUIRED,
            "empty": ValidationErrors.TEAM_IDS_REQUIRED,
        },
    )
