import re
from datetime import date, datetime, time, timezone

from django.utils.dateparse import parse_date, parse_datetime
from rest_framework import serializers

from teamhub.constants.messages import ValidationErrors
from teamhub.constants.team import CONTACT_NO_PATTERN, Gender


class CalendarDateField(serializers.Field):
    """
    Accepts a calendar date as ``YYYY-MM-DD`` or a full ISO-8601 datetime and
    normalises it to an aware UTC datetime, which is what MongoDB stores.
    """

    default_error_messages = {
        "invalid": ValidationErrors.INVALID_DATE,
    }

    def to_internal_value(self, data):
        if isinstance(data, datetime):
            parsed = data
        elif isinstance(data, date):
            parsed = datetime.combine(data, time.min)
        elif isinstance(data, str):
            try:
                parsed = parse_datetime(data.strip())
                if parsed is None:
                    parsed_date = parse_date(data.strip())
                    parsed = datetime.combine(parsed_date, time.min) if parsed_date else None
            except ValueError:
                parsed = None
        else:
            parsed = None

        if parsed is None:
            self.fail("invalid")
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)

    def to_representation(self, value):
        return value.isoformat()


class MemberSerializer(serializers.Serializer):
    name = serializers.CharField(
        error_messages={
            "required": ValidationErrors.MEMBER_NAME_REQUIRED,
            "blank": ValidationErrors.MEMBER_NAME_REQUIRED,
        },
    )
    gender = serializers.ChoiceField(
        choices=[gender.value for gender in Gender],
        error_messages={
            "required": ValidationErrors.GENDER_REQUIRED,
            "invalid_choice": ValidationErrors.INVALID_GENDER.format(", ".join(gender.value for gender in Gender)),
        },
    )
    dateOfBirth = CalendarDateField(
        error_messages={"required": ValidationErrors.DATE_OF_BIRTH_REQUIRED},
    )
    contactNo = serializers.RegexField(
        regex=re.compile(CONTACT_NO_PATTERN, re.ASCII),
        error_messages={
            "required": ValidationErrors.CONTACT_NO_REQUIRED,
            "blank": ValidationErrors.CONTACT_NO_REQUIRED,
            "invalid": ValidationErrors.CONTACT_NO_DIGITS,
        },
    )
