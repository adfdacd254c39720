from rest_framework import serializers

from apps.accounts.serializers import UserMinimalSerializer
from .models import Group, GroupMembership, Invite


class GroupSerializer(serializers.ModelSerializer):
    """Main serializer for groups."""

    host = UserMinimalSerializer(read_only=True)
    member_count = serializers.SerializerMethodField()

    class Meta:
        model = Group
        fields = [
            'id',
            'name',
            'type',
            'host',
            'joint_asset_color',
            'budget_start_day',
            'member_count',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

    def get_member_count(self, obj):
        """Number of accepted members."""
        return obj.accepted_member_count()


class GroupCreateSerializer(serializers.Serializer):
    """Input serializer for creating a shared group."""

    name = serializers.CharField(max_length=30)
    joint_asset_color = serializers.RegexField(
        regex=r'^#[0-9A-Fa-f]{6}$',
        required=False,
        help_text='Hex color, e.g. #2196F3'
    )
    budget_start_day = serializers.IntegerField(min_value=1, max_value=28, required=False)


class GroupUpdateSerializer(serializers.Serializer):
    """Input serializer for group updates (all fields optional)."""

    name = serializers.CharField(max_length=30, required=False)
    joint_asset_color = serializers.RegexField(regex=r'^#[0-9A-Fa-f]{6}$', required=False)
    budget_start_day = serializers.IntegerField(min_value=1, max_value=28, required=False)


class GroupMemberSerializer(serializers.ModelSerializer):
    """Detailed member information."""

    user = UserMinimalSerializer(read_only=True)

    class Meta:
        model = GroupMembership
        fields = ['id', 'user', 'role', 'status', 'joined_at']
        read_only_fields = fields


class InviteSerializer(serializers.ModelSerializer):
    """Invite with group and inviter summary."""

    group_name = serializers.CharField(source='group.name', read_only=True)
    inviter = UserMinimalSerializer(read_only=True)

    class Meta:
        model = Invite
        fields = ['id', 'group', 'group_name', 'inviter', 'status', 'created_at']
        read_only_fields = fields


class InviteMemberSerializer(serializers.Serializer):
    """Input serializer for inviting a user by email."""

    email = serializers.EmailField()
