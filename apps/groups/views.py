from uuid import UUID

from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.core.routers import UUID_PATTERN

from .models import Group
from .permissions import IsGroupMember
from .serializers import (
    GroupSerializer,
    GroupCreateSerializer,
    GroupUpdateSerializer,
    GroupMemberSerializer,
    InviteSerializer,
    InviteMemberSerializer,
)

from apps.groups.services import (
    create_shared_group,
    get_user_groups,
    update_group,
    delete_group,
    get_group_members,
    remove_member,
    leave_group,
    invite_member,
    get_pending_invites,
    accept_invite,
    reject_invite,
)


class GroupViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Group CRUD operations.

    All business logic is handled by services.
    Views are thin HTTP handlers only; service exceptions are mapped to
    responses by the project exception handler.

    list: Get all groups the user has joined
    create: Create a new shared group
    retrieve: Get a specific group (members only)
    update: Update a group (host only)
    partial_update: Partially update a group (host only)
    destroy: Delete a shared group (host only)
    """

    queryset = Group.objects.select_related('host')
    serializer_class = GroupSerializer
    permission_classes = [IsAuthenticated, IsGroupMember]
    lookup_value_regex = UUID_PATTERN

    @extend_schema(responses={200: GroupSerializer(many=True)}, tags=['groups'])
    def list(self, request, *args, **kwargs):
        groups = get_user_groups(user=request.user)
        return Response(GroupSerializer(groups, many=True).data)

    @extend_schema(request=GroupCreateSerializer, responses={201: GroupSerializer}, tags=['groups'])
    def create(self, request, *args, **kwargs):
        """Create a new shared group hosted by the current user."""
        serializer = GroupCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        group = create_shared_group(user=request.user, **serializer.validated_data)

        return Response(GroupSerializer(group).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=GroupUpdateSerializer, responses={200: GroupSerializer}, tags=['groups'])
    def update(self, request, *args, **kwargs):
        serializer = GroupUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        group = update_group(group_id=self.kwargs['pk'], user=request.user, **serializer.validated_data)

        return Response(GroupSerializer(group).data)

    def partial_update(self, request, *args, **kwargs):
        return self.update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        """Delete a shared group."""
        delete_group(group_id=self.kwargs['pk'], user=request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(responses={200: GroupMemberSerializer(many=True)}, tags=['groups'])
    @action(detail=True, methods=['get'], permission_classes=[IsAuthenticated])
    def members(self, request, pk=None):
        """Get all members of the group."""
        memberships = get_group_members(group_id=pk, user=request.user)
        serializer = GroupMemberSerializer(memberships, many=True)
        return Response(serializer.data)

    @extend_schema(request=None, responses={204: None}, tags=['groups'])
    @action(
        detail=True,
        methods=['delete'],
        url_path=rf'members/(?P<user_id>{UUID_PATTERN})',
        url_name='remove-member',
        permission_classes=[IsAuthenticated],
    )
    def remove_member(self, request, pk=None, user_id=None):
        """Remove a member from the group (host only)."""
        remove_member(group_id=pk, host=request.user, user_id=UUID(user_id))
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=None, responses={204: None}, tags=['groups'])
    @action(detail=True, methods=['post'], permission_classes=[IsAuthenticated])
    def leave(self, request, pk=None):
        """Leave a group."""
        leave_group(group_id=pk, user=request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=InviteMemberSerializer, responses={201: InviteSerializer}, tags=['groups'])
    @action(detail=True, methods=['post'], permission_classes=[IsAuthenticated])
    def invites(self, request, pk=None):
        """Invite a registered user by email (host only)."""
        serializer = InviteMemberSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        invite = invite_member(
            group_id=pk,
            inviter=request.user,
            invitee_email=serializer.validated_data['email'],
        )

        return Response(InviteSerializer(invite).data, status=status.HTTP_201_CREATED)


class InviteViewSet(viewsets.ViewSet):
    """
    Invites addressed to the current user.

    list: Pending invites
    accept: Join the group as guest
    reject: Decline the invite
    """

    permission_classes = [IsAuthenticated]
    lookup_value_regex = UUID_PATTERN

    @extend_schema(responses={200: InviteSerializer(many=True)}, tags=['invites'])
    def list(self, request):
        invites = get_pending_invites(user=request.user)
        return Response(InviteSerializer(invites, many=True).data)

    @extend_schema(request=None, responses={200: GroupMemberSerializer}, tags=['invites'])
    @action(detail=True, methods=['post'])
    def accept(self, request, pk=None):
        membership = accept_invite(invite_id=pk, user=request.user)
        return Response(GroupMemberSerializer(membership).data)

    @extend_schema(request=None, responses={204: None}, tags=['invites'])
    @action(detail=True, methods=['post'])
    def reject(self, request, pk=None):
        reject_invite(invite_id=pk, user=request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)
