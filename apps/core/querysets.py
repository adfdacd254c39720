def in_group(queryset, group_id):
    """
    Restrict a lookup to one group when the caller addresses it through one.

    Rows of other groups then look missing, so nested URLs such as
    /groups/{group_id}/schedules/{id}/ only reach the group they name.
    """
    if group_id is None:
        return queryset
    return queryset.filter(group_id=group_id)
