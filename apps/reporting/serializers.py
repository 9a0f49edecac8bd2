"""
Query parameter serializers for report endpoints.
"""

from rest_framework import serializers


class DayQuerySerializer(serializers.Serializer):
    """Optional calendar day, today when omitted."""

    date = serializers.DateField(required=False)


class DateRangeQuerySerializer(serializers.Serializer):
    """Inclusive time range."""

    start = serializers.DateTimeField()
    end = serializers.DateTimeField()

    def validate(self, data):
        if data["start"] > data["end"]:
            raise serializers.ValidationError({"end": "End must not be before start."})
        return data


class PaymentMethodQuerySerializer(serializers.Serializer):
    method = serializers.CharField(max_length=50)


class PaymentMethodTotalSerializer(serializers.Serializer):
    payment_method = serializers.CharField()
    total = serializers.DecimalField(max_digits=12, decimal_places=2)


class SalesSummarySerializer(serializers.Serializer):
    count = serializers.IntegerField()
    total = serializers.DecimalField(max_digits=12, decimal_places=2)
    profit = serializers.DecimalField(max_digits=12, decimal_places=2)
