from typing import List, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from common.core.constants import (
    DocumentStoreProvider,
    Environment,
    TransactionProviderType,
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Environment Profile
    environment: Environment = Environment.LOCAL

    # API Settings
    app_name: str = "payment-relay"
    api_version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    cors_allowed_origins: List[str] = ["*"]

    # Payment provider (Mercado Pago)
    transaction_provider: TransactionProviderType = TransactionProviderType.MERCADOPAGO
    provider_access_token: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("provider_access_token", "mp_access_token"),
    )
    provider_api_base_url: str = "https://api.mercadopago.com"

    # Shared secret checked on inbound webhooks. Unset = accept any origin.
    webhook_shared_secret: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("webhook_shared_secret", "mp_webhook_secret"),
    )

    # Document store
    document_store_provider: DocumentStoreProvider = DocumentStoreProvider.FIRESTORE
    firebase_credentials_path: Optional[str] = None  # None = application default
    firebase_project_id: Optional[str] = None
    users_collection: str = "users"

    # OpenTelemetry
    otel_service_name: str = "payment-relay"
    otel_service_version: str = "1.0.0"
    otel_exporter_endpoint: Optional[str] = None  # e.g. https://api.axiom.co/v1/traces
    otel_exporter_token: Optional[str] = None

    @property
    def docs_enabled(self) -> bool:
        """Only expose OpenAPI docs in local development."""
        return self.environment == Environment.LOCAL


settings = Settings()
