import pytest
from datetime import date
from decimal import Decimal
from uuid import uuid4

from apps.assets.models import AssetSource, AssetSourceType
from apps.assets.services import (
    create_asset_source,
    get_asset_sources,
    get_asset_source_by_id,
    update_asset_source,
    delete_asset_source,
)
from apps.assets.services.exceptions import (
    AssetSourceInUseError,
    AssetSourceNotFoundError,
    InvalidAssetSourceError,
)
from apps.core.choices import TransactionType
from apps.groups.services.exceptions import GroupAccessDeniedError
from apps.transactions.services import create_transaction


@pytest.mark.django_db
class TestAssetSources:

    def test_create_and_list(self, group_with_guest, host, guest):
        wallet = create_asset_source(group_id=group_with_guest.id, user=host, name='Wallet', type=AssetSourceType.CASH)
        card = create_asset_source(
            group_id=group_with_guest.id, user=guest, name='Card', type=AssetSourceType.CARD, description='Visa',
        )

        assert get_asset_sources(group_id=group_with_guest.id, user=guest) == [wallet, card]

    @pytest.mark.parametrize('name, description', [
        ('', None),
        ('x' * 31, None),
        ('Wallet', 'x' * 101),
    ])
    def test_create_invalid(self, shared_group, host, name, description):
        with pytest.raises(InvalidAssetSourceError):
            create_asset_source(
                group_id=shared_group.id, user=host, name=name, type=AssetSourceType.CASH, description=description,
            )

        assert not AssetSource.objects.exists()

    def test_create_outsider_denied(self, shared_group, outsider):
        with pytest.raises(GroupAccessDeniedError):
            create_asset_source(group_id=shared_group.id, user=outsider, name='Wallet', type=AssetSourceType.CASH)

    def test_get_outsider_denied(self, shared_group, host, outsider):
        wallet = create_asset_source(group_id=shared_group.id, user=host, name='Wallet', type=AssetSourceType.CASH)

        with pytest.raises(GroupAccessDeniedError):
            get_asset_source_by_id(asset_source_id=wallet.id, user=outsider)

    def test_update_keeps_type(self, shared_group, host):
        wallet = create_asset_source(group_id=shared_group.id, user=host, name='Wallet', type=AssetSourceType.CASH)

        updated = update_asset_source(asset_source_id=wallet.id, user=host, name='Piggy bank', description='Home')

        assert updated.name == 'Piggy bank'
        assert updated.description == 'Home'
        assert updated.type == AssetSourceType.CASH

    def test_delete_unused(self, shared_group, host):
        wallet = create_asset_source(group_id=shared_group.id, user=host, name='Wallet', type=AssetSourceType.CASH)

        delete_asset_source(asset_source_id=wallet.id, user=host)

        assert not AssetSource.objects.filter(id=wallet.id).exists()

    def test_delete_in_use_rejected(self, shared_group, host):
        wallet = create_asset_source(group_id=shared_group.id, user=host, name='Wallet', type=AssetSourceType.CASH)
        create_transaction(
            group_id=shared_group.id,
            user=host,
            amount=Decimal('12.50'),
            transaction_type=TransactionType.EXPENSE,
            asset_type='PERSONAL',
            category_name='Food',
            date=date(2026, 2, 3),
            asset_source_id=wallet.id,
        )

        with pytest.raises(AssetSourceInUseError):
            delete_asset_source(asset_source_id=wallet.id, user=host)

        assert AssetSource.objects.filter(id=wallet.id).exists()

    def test_delete_unknown(self, host):
        with pytest.raises(AssetSourceNotFoundError):
            delete_asset_source(asset_source_id=uuid4(), user=host)
