from rest_framework import serializers

from teamhub.constants.messages import ValidationErrors
from teamhub.constants.team import ApprovalState
from teamhub.serializers.member_serializer import MemberSerializer
from teamhub.serializers.strict_integer_field import StrictIntegerField

APPROVAL_STATE_CHOICES = [state.value for state in ApprovalState]


class UpdateTeamSerializer(serializers.Serializer):
    """
    Serializer for partial team updates.

    Every field is optional. ``members`` replaces the whole member list; an empty
    list passes here and is rejected by the service as a last-member removal.
    """

    teamName = serializers.CharField(
        required=False,
        error_messages={"blank": ValidationErrors.TEAM_NAME_REQUIRED},
    )
    teamDescription = serializers.CharField(
        required=False,
        error_messages={"blank": ValidationErrors.TEAM_DESCRIPTION_REQUIRED},
    )
    members = MemberSerializer(many=True, required=False)
    approvedByManager = serializers.ChoiceField(
        choices=APPROVAL_STATE_CHOICES,
        required=False,
        error_messages={"invalid_choice": ValidationErrors.INVALID_APPROVAL_STATUS.format(", ".join(APPROVAL_STATE_CHOICES))},
    )
    approvedByDirector = serializers.ChoiceField(
        choices=APPROVAL_STATE_CHOICES,
        required=False,
        error_messages={"invalid_choice": ValidationErrors.INVALID_APPROVAL_STATUS.format(", ".join(APPROVAL_STATE_CHOICES))},
    )
    displayOrder = StrictIntegerField(
        required=False,
        min_value=0,
        error_messages={
            "invalid": ValidationErrors.ORDER_NOT_INTEGER,
            "min_value": ValidationErrors.ORDER_NON_NEGATIVE,
        },
    )
