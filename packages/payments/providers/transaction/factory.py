"""
Factory for getting transaction provider instance.
"""

from typing import Optional

from common.core.config import settings
from common.core.constants import TransactionProviderType
from packages.payments.providers.transaction.interface import (
    TransactionProviderInterface,
)
from packages.payments.providers.transaction.mercadopago_provider import (
    MercadoPagoTransactionProvider,
)


def get_transaction_provider(
    provider_type: Optional[TransactionProviderType] = None,
) -> TransactionProviderInterface:
    """
    Get transaction provider instance.

    Args:
        provider_type: Provider to use. Defaults to settings.transaction_provider.

    Returns:
        TransactionProviderInterface: Configured transaction provider
    """
    provider_type = provider_type or settings.transaction_provider

    match provider_type:
        case TransactionProviderType.MERCADOPAGO:
            return MercadoPagoTransactionProvider()
        case _:
            raise ValueError(f"Unknown transaction provider type: {provider_type}")
