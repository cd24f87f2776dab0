from enum import Enum


class Environment(str, Enum):
    """Environment profiles."""

    LOCAL = "local"
    DEV = "dev"
    STAGING = "staging"
    PRODUCTION = "production"


class DocumentStoreProvider(str, Enum):
    """Document store backends."""

    FIRESTORE = "firestore"
    MEMORY = "memory"


class TransactionProviderType(str, Enum):
    """Payment providers whose transactions can be looked up."""

    MERCADOPAGO = "mercadopago"
