"""
Entidades do Domínio de Clientes.

Cliente é quem abre tickets. Não é removido fisicamente:
"excluir" significa desativar (is_active = False).

Regras de Negócio Encapsuladas:
- Nome e email obrigatórios
- Email normalizado (trim + minúsculas) para unicidade case-insensitive
- Telefone/endereço em branco viram None
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from src.core.shared.clock import utc_now
from src.core.shared.validators import (
    blank_to_none,
    validate_email,
    validate_full_name,
)


@dataclass
class CustomerEntity:
    """
    Entidade de Domínio: Cliente.

    Attributes:
        id: Identificador atribuído pelo repositório (None antes de add)
        full_name: Nome completo
        email: Email único (normalizado)
        phone: Telefone opcional
        address: Endereço opcional
        is_active: Falso após desativação
        created_at: Data/hora de criação (UTC)

    Example:
        customer = CustomerEntity.create(
            full_name="John Doe",
            email="John.Doe@Example.com ",
        )
        customer.email  # "john.doe@example.com"
    """

    id: Optional[int] = None
    full_name: str = ""
    email: str = ""
    phone: Optional[str] = None
    address: Optional[str] = None
    is_active: bool = True
    created_at: datetime = field(default_factory=utc_now)

    @classmethod
    def create(
        cls,
        full_name: str,
        email: str,
        phone: Optional[str] = None,
        address: Optional[str] = None,
    ) -> "CustomerEntity":
        """
        Factory method com validações.

        Raises:
            ValidationError: Se nome ou email inválidos
        """
        return cls(
            full_name=validate_full_name(full_name),
            email=validate_email(email),
            phone=blank_to_none(phone, "phone"),
            address=blank_to_none(address, "address"),
            is_active=True,
        )

    def apply_changes(
        self,
        full_name: Optional[str] = None,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        address: Optional[str] = None,
        is_active: Optional[bool] = None,
    ) -> None:
        """
        Atualização parcial: apenas campos informados (não None) mudam.

        Telefone/endereço informados em branco são limpos (None).
        """
        if full_name is not None:
            self.full_name = validate_full_name(full_name)
        if email is not None:
            self.email = validate_email(email)
        if phone is not None:
            self.phone = blank_to_none(phone, "phone")
        if address is not None:
            self.address = blank_to_none(address, "address")
        if is_active is not None:
            self.is_active = bool(is_active)

    def deactivate(self) -> None:
        """Soft delete."""
        self.is_active = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CustomerEntity):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.id is not None else id(self)
