"""
Asset source management service.
"""

import logging
from typing import List, Optional
from uuid import UUID

from django.db import transaction

from apps.accounts.models import User
from apps.core.querysets import in_group
from apps.assets.models import AssetSource, validate_asset_source_fields
from apps.groups.services.access import find_group, verify_group_access

from .exceptions import (
    AssetSourceInUseError,
    AssetSourceNotFoundError,
    InvalidAssetSourceError,
)

logger = logging.getLogger(__name__)


def _check_fields(name: str, description: Optional[str]) -> None:
    error = validate_asset_source_fields(name=name, description=description)
    if error:
        _, message = error
        raise InvalidAssetSourceError(message)


@transaction.atomic
def create_asset_source(
    *,
    group_id: UUID,
    user: User,
    name: str,
    type: str,
    description: Optional[str] = None
) -> AssetSource:
    """
    Register a new asset source for the group.

    Raises:
        GroupNotFoundError: If group doesn't exist
        GroupAccessDeniedError: If user is not an accepted member
        InvalidAssetSourceError: If name or description are invalid
    """
    group = find_group(group_id=group_id)
    verify_group_access(group_id=group.id, user_id=user.id)
    _check_fields(name, description)

    asset_source = AssetSource.objects.create(
        group=group,
        name=name,
        type=type,
        description=description,
    )

    logger.info("Created asset source %s in group %s", asset_source.id, group.id)
    return asset_source


def get_asset_sources(*, group_id: UUID, user: User) -> List[AssetSource]:
    verify_group_access(group_id=group_id, user_id=user.id)
    return list(AssetSource.objects.filter(group_id=group_id).order_by('created_at'))


def find_asset_source(asset_source_id: UUID, group_id: Optional[UUID] = None) -> AssetSource:
    """
    Fetch an asset source without an access check.

    With group_id, sources of other groups are reported as missing.

    Raises:
        AssetSourceNotFoundError: If asset source doesn't exist
    """
    try:
        return in_group(AssetSource.objects.all(), group_id).get(id=asset_source_id)
    except AssetSource.DoesNotExist:
        raise AssetSourceNotFoundError(asset_source_id)


def get_asset_source_by_id(
    *,
    asset_source_id: UUID,
    user: User,
    group_id: Optional[UUID] = None
) -> AssetSource:
    asset_source = find_asset_source(asset_source_id, group_id)
    verify_group_access(group_id=asset_source.group_id, user_id=user.id)
    return asset_source


@transaction.atomic
def update_asset_source(
    *,
    asset_source_id: UUID,
    user: User,
    name: str,
    description: Optional[str] = None,
    group_id: Optional[UUID] = None
) -> AssetSource:
    """
    Rename an asset source and replace its description.

    The type is fixed at creation.
    """
    asset_source = find_asset_source(asset_source_id, group_id)
    verify_group_access(group_id=asset_source.group_id, user_id=user.id)
    _check_fields(name, description)

    asset_source.name = name
    asset_source.description = description
    asset_source.save(update_fields=['name', 'description', 'updated_at'])

    return asset_source


@transaction.atomic
def delete_asset_source(*, asset_source_id: UUID, user: User, group_id: Optional[UUID] = None) -> None:
    """
    Delete an asset source no transaction refers to.

    Raises:
        AssetSourceNotFoundError: If asset source doesn't exist
        GroupAccessDeniedError: If user is not a member of its group
        AssetSourceInUseError: If transactions still reference it
    """
    asset_source = find_asset_source(asset_source_id, group_id)
    verify_group_access(group_id=asset_source.group_id, user_id=user.id)

    if asset_source.transactions.exists():
        raise AssetSourceInUseError(asset_source_id)

    asset_source.delete()
    logger.info("Deleted asset source %s", asset_source_id)
