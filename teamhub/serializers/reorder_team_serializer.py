from bson import ObjectId
from rest_framework import serializers

from teamhub.constants.messages import ValidationErrors
from teamhub.serializers.strict_integer_field import StrictIntegerField


class ReorderTeamSerializer(serializers.Serializer):
    teamId = serializers.CharField()
    newOrder = StrictIntegerField(
        min_value=0,
        error_messages={
            "invalid": ValidationErrors.ORDER_NOT_INTEGER,
            "min_value": ValidationErrors.ORDER_NON_NEGATIVE,
        },
    )

    def validate_teamId(self, value):
        if not ObjectId.is_valid(value):
            raise serializers.ValidationError(ValidationErrors.INVALID_TEAM_ID.format(value))
        return value
