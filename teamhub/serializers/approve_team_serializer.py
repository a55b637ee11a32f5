from rest_framework import serializers

from teamhub.constants.messages import ValidationErrors
from teamhub.constants.team import ApprovalState, ApprovalType

APPROVAL_STATE_CHOICES = [state.value for state in ApprovalState]


class ApproveTeamSerializer(serializers.Serializer):
    approvalType = serializers.ChoiceField(
        choices=[approval_type.value for approval_type in ApprovalType],
        error_messages={
            "required": ValidationErrors.INVALID_APPROVAL_TYPE,
            "invalid_choice": ValidationErrors.INVALID_APPROVAL_TYPE,
        },
    )
    status = serializers.ChoiceField(
        choices=APPROVAL_STATE_CHOICES,
        error_messages={
            "invalid_choice": ValidationErrors.INVALID_APPROVAL_STATUS.format(", ".join(APPROVAL_STATE_CHOICES)),
        },
    )

    def validate_approvalType(self, value):
        return ApprovalType(value)

    def validate_status(self, value):
        return ApprovalState(value)
