from rest_framework import serializers


class StrictIntegerField(serializers.IntegerField):
    """IntegerField that only accepts JSON integers, not numeric strings, floats or booleans."""

    def to_internal_value(self, data):
        if isinstance(data, bool) or not isinstance(data, int):
            self.fail("invalid")
        return super().to_internal_value(data)
