"""
Asset sources app services layer.
"""

from .exceptions import (
    AssetSourceNotFoundError,
    InvalidAssetSourceError,
    AssetSourceInUseError,
)

from .asset_source_management import (
    create_asset_source,
    get_asset_sources,
    find_asset_source,
    get_asset_source_by_id,
    update_asset_source,
    delete_asset_source,
)


__all__ = [
    # Exceptions
    'AssetSourceNotFoundError',
    'InvalidAssetSourceError',
    'AssetSourceInUseError',

    # Asset Source Management
    'create_asset_source',
    'get_asset_sources',
    'find_asset_source',
    'get_asset_source_by_id',
    'update_asset_source',
    'delete_asset_source',
]
