from rest_framework import permissions

from apps.groups.services.access import is_accepted_member


class IsGroupMember(permissions.BasePermission):
    """
    Permission: User must be an accepted member of the group.
    """

    message = 'You are not a member of this group.'

    def has_object_permission(self, request, view, obj):
        # obj is a Group instance
        return is_accepted_member(group_id=obj.id, user_id=request.user.id)
