from rest_framework import serializers

from .models import AssetSource, AssetSourceType


class AssetSourceSerializer(serializers.ModelSerializer):

    class Meta:
        model = AssetSource
        fields = ['id', 'group', 'name', 'type', 'description', 'created_at']
        read_only_fields = fields


class AssetSourceCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=30)
    type = serializers.ChoiceField(choices=AssetSourceType.choices)
    description = serializers.CharField(max_length=100, required=False, allow_null=True, allow_blank=True)


class AssetSourceUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=30)
    description = serializers.CharField(max_length=100, required=False, allow_null=True, allow_blank=True)
