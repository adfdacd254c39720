"""Domain-specific exceptions for asset source services."""

from apps.core.exceptions import ConflictError, InvalidInputError, NotFoundError


class AssetSourceNotFoundError(NotFoundError):
    code = 'ASSET_SOURCE_NOT_FOUND'

    def __init__(self, asset_source_id):
        self.asset_source_id = asset_source_id
        super().__init__(f"Asset source not found: {asset_source_id}")


class InvalidAssetSourceError(InvalidInputError):
    code = 'INVALID_ASSET_SOURCE'


class AssetSourceInUseError(ConflictError):
    """Raised when deleting an asset source that transactions still reference."""

    code = 'ASSET_SOURCE_IN_USE'

    def __init__(self, asset_source_id):
        self.asset_source_id = asset_source_id
        super().__init__(f"Asset source is used by transactions: {asset_source_id}")
