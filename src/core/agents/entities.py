"""
Entidades do Domínio de Agentes.

Agente é o atendente que recebe tickets. Assim como clientes,
não é removido fisicamente; "excluir" significa desativar.

Regras:
- Nome e email obrigatórios; email normalizado
- Papel (role) padrão "Agent"; papel em branco volta ao padrão
- Departamento opcional (trim, em branco vira None)
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from src.core.shared.clock import utc_now
from src.core.shared.exceptions import ValidationError
from src.core.shared.validators import (
    blank_to_none,
    clean_text,
    validate_email,
    validate_full_name,
)


DEFAULT_ROLE = "Agent"
ROLE_MAX_LENGTH = 50


def normalize_role(role: Optional[str]) -> str:
    """Papel em branco/ausente vira o padrão."""
    cleaned = clean_text(role, "role")
    if len(cleaned) > ROLE_MAX_LENGTH:
        raise ValidationError(
            f"Papel deve ter no máximo {ROLE_MAX_LENGTH} caracteres",
            field="role",
        )
    return cleaned or DEFAULT_ROLE


@dataclass
class AgentEntity:
    """
    Entidade de Domínio: Agente.

    Attributes:
        id: Identificador atribuído pelo repositório
        full_name: Nome completo
        email: Email único (normalizado)
        department: Departamento (opcional)
        role: Papel (default "Agent")
        is_active: Falso após desativação
        created_at: Data/hora de criação (UTC)
    """

    id: Optional[int] = None
    full_name: str = ""
    email: str = ""
    department: Optional[str] = None
    role: str = DEFAULT_ROLE
    is_active: bool = True
    created_at: datetime = field(default_factory=utc_now)

    @classmethod
    def create(
        cls,
        full_name: str,
        email: str,
        department: Optional[str] = None,
        role: Optional[str] = None,
    ) -> "AgentEntity":
        """
        Factory method com validações.

        Raises:
            ValidationError: Se dados inválidos
        """
        return cls(
            full_name=validate_full_name(full_name),
            email=validate_email(email),
            department=blank_to_none(department, "department"),
            role=normalize_role(role),
            is_active=True,
        )

    def apply_changes(
        self,
        full_name: Optional[str] = None,
        email: Optional[str] = None,
        department: Optional[str] = None,
        role: Optional[str] = None,
        is_active: Optional[bool] = None,
    ) -> None:
        """Atualização parcial: apenas campos informados mudam."""
        if full_name is not None:
            self.full_name = validate_full_name(full_name)
        if email is not None:
            self.email = validate_email(email)
        if department is not None:
            self.department = blank_to_none(department, "department")
        if role is not None:
            self.role = normalize_role(role)
        if is_active is not None:
            self.is_active = bool(is_active)

    def deactivate(self) -> None:
        """Soft delete. Tickets atribuídos mantêm a referência."""
        self.is_active = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AgentEntity):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.id is not None else id(self)
