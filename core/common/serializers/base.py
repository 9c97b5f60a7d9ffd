from rest_framework import serializers


class BaseModelSerializer(serializers.ModelSerializer):
    """Model serializer exposing the history tracking fields as read only."""

    created_at = serializers.DateTimeField(read_only=True)
    created_by = serializers.CharField(read_only=True)
    last_modified_at = serializers.DateTimeField(read_only=True)

    def build_field(self, field_name, info, model_class, nested_depth):
        field_class, field_kwargs = super().build_field(field_name, info, model_class, nested_depth)
        # ModelSerializer rejects editable on read only model fields
        field_kwargs.pop("editable", None)
        return field_class, field_kwargs
