"""
Repositório Django para persistência de Agentes.

Implementa o AgentRepository definido em src/core/agents/ports.py.
"""

from src.core.agents.entities import AgentEntity

from ..shared.repository import BaseRepository, EmailIdentityMixin
from .models import AgentModel
from .mappers import AgentMapper


class DjangoAgentRepository(EmailIdentityMixin, BaseRepository[AgentEntity, AgentModel]):
    """Implementação Django do AgentRepository."""

    model_class = AgentModel
    mapper = AgentMapper
    default_order_fields = ["full_name", "id"]
