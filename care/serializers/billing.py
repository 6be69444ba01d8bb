from rest_framework import serializers


class AddBillSerializer(serializers.Serializer):
    appointment_id = serializers.IntegerField()
    bill_id = serializers.IntegerField(required=False, allow_null=True)
    service_id = serializers.IntegerField()
    service_date = serializers.DateTimeField()
    quantity = serializers.IntegerField(min_value=1)
    unit_cost = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
    total_cost = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)


class GenerateBillSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    bill_date = serializers.DateTimeField()
    discount = serializers.DecimalField(max_digits=5, decimal_places=2, min_value=0, max_value=100)
    total_amount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
