"""
Data Transfer Objects (DTOs) do Domínio de Clientes.

- Input DTOs: dados de entrada já extraídos do request
- Output DTOs: formato de resposta (inclui contagem de tickets)
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .entities import CustomerEntity


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CreateCustomerInputDTO:
    """
    DTO de entrada para criar cliente.

    Attributes:
        full_name: Nome completo
        email: Email (único, case-insensitive)
        phone: Telefone opcional
        address: Endereço opcional
    """

    full_name: str
    email: str
    phone: Optional[str] = None
    address: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "full_name": self.full_name,
            "email": self.email,
            "phone": self.phone,
            "address": self.address,
        }


@dataclass(frozen=True)
class UpdateCustomerInputDTO:
    """
    DTO de entrada para atualização parcial de cliente.

    Campos None não são alterados.
    """

    customer_id: int
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    is_active: Optional[bool] = None

    def to_dict(self) -> dict:
        return {
            "customer_id": self.customer_id,
            "full_name": self.full_name,
            "email": self.email,
            "phone": self.phone,
            "address": self.address,
            "is_active": self.is_active,
        }


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class CustomerOutputDTO:
    """DTO de saída de cliente com total de tickets abertos por ele."""

    id: int
    full_name: str
    email: str
    phone: Optional[str]
    address: Optional[str]
    is_active: bool
    created_at: datetime
    ticket_count: int = 0

    @classmethod
    def from_entity(
        cls,
        entity: CustomerEntity,
        ticket_count: int = 0,
    ) -> "CustomerOutputDTO":
        return cls(
            id=entity.id,
            full_name=entity.full_name,
            email=entity.email,
            phone=entity.phone,
            address=entity.address,
            is_active=entity.is_active,
            created_at=entity.created_at,
            ticket_count=ticket_count,
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {
            "id": self.id,
            "full_name": self.full_name,
            "email": self.email,
            "phone": self.phone,
            "address": self.address,
            "is_active": self.is_active,
            "created_at": self.created_at.isoformat(),
            "ticket_count": self.ticket_count,
        }
