"""
Domain models for provider transaction records.

Only the fields the relay reads are modelled; everything else in the
provider payload is ignored.
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TransactionStatus(str, Enum):
    """Mercado Pago payment status values."""

    PENDING = "pending"
    APPROVED = "approved"
    AUTHORIZED = "authorized"
    IN_PROCESS = "in_process"
    IN_MEDIATION = "in_mediation"
    REJECTED = "rejected"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"
    CHARGED_BACK = "charged_back"


class TransactionPayer(BaseModel):
    """Payer block of a transaction."""

    model_config = ConfigDict(extra="ignore")

    email: Optional[str] = None


class TransactionRecord(BaseModel):
    """Authoritative transaction state fetched from the provider."""

    model_config = ConfigDict(extra="ignore")

    id: str
    status: Optional[str] = None
    payer: TransactionPayer = Field(default_factory=TransactionPayer)
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        # Provider ids are numeric in JSON
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("payer", "metadata", mode="before")
    @classmethod
    def _null_to_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    @property
    def payer_email(self) -> Optional[str]:
        return self.payer.email

    @property
    def is_approved(self) -> bool:
        return self.status == TransactionStatus.APPROVED
