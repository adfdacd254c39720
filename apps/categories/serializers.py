from rest_framework import serializers

from apps.core.choices import TransactionType
from .models import Category


class CategorySerializer(serializers.ModelSerializer):

    class Meta:
        model = Category
        fields = ['id', 'group', 'name', 'icon', 'type', 'is_default', 'sort_order', 'created_at']
        read_only_fields = fields


class CategoryCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=30)
    icon = serializers.CharField(max_length=10, required=False, allow_null=True, allow_blank=True)
    type = serializers.ChoiceField(choices=TransactionType.choices)


class CategoryUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=30)
    icon = serializers.CharField(max_length=10, required=False, allow_null=True, allow_blank=True)


class CategoryQuerySerializer(serializers.Serializer):
    type = serializers.ChoiceField(choices=TransactionType.choices, required=False)
