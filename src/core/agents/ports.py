"""
Ports (Interfaces) do Domínio de Agentes.
"""

from typing import Dict, Iterable, List, Optional, Protocol, runtime_checkable

from src.core.shared.clock import utc_now
from src.core.shared.validators import normalize_email

from .entities import AgentEntity


@runtime_checkable
class AgentRepository(Protocol):
    """
    Interface para persistência de Agentes.

    Mesmo formato do CustomerRepository: checagem de existência,
    busca em lote para as views de ticket e unicidade de email.
    """

    def get_by_id(self, agent_id: int) -> Optional[AgentEntity]:
        ...

    def exists(self, agent_id: int) -> bool:
        ...

    def get_many(self, agent_ids: Iterable[int]) -> Dict[int, AgentEntity]:
        """Busca vários agentes em uma única consulta."""
        ...

    def list_all(self) -> List[AgentEntity]:
        """Lista agentes ordenados por nome."""
        ...

    def list_active(self) -> List[AgentEntity]:
        """Lista agentes ativos ordenados por nome."""
        ...

    def get_by_email(self, email: str) -> Optional[AgentEntity]:
        ...

    def email_exists(self, email: str, exclude_id: Optional[int] = None) -> bool:
        ...

    def add(self, agent: AgentEntity) -> AgentEntity:
        ...

    def update(self, agent: AgentEntity) -> None:
        ...


class InMemoryAgentRepository:
    """Implementação em memória do AgentRepository (testes)."""

    def __init__(self):
        self._agents: Dict[int, AgentEntity] = {}
        self._next_id = 1

    def get_by_id(self, agent_id: int) -> Optional[AgentEntity]:
        return self._agents.get(agent_id)

    def exists(self, agent_id: int) -> bool:
        return agent_id in self._agents

    def get_many(self, agent_ids: Iterable[int]) -> Dict[int, AgentEntity]:
        return {
            aid: self._agents[aid]
            for aid in set(agent_ids)
            if aid in self._agents
        }

    def list_all(self) -> List[AgentEntity]:
        return sorted(self._agents.values(), key=lambda a: a.full_name)

    def list_active(self) -> List[AgentEntity]:
        return [a for a in self.list_all() if a.is_active]

    def get_by_email(self, email: str) -> Optional[AgentEntity]:
        normalized = normalize_email(email)
        for agent in self._agents.values():
            if agent.email.lower() == normalized:
                return agent
        return None

    def email_exists(self, email: str, exclude_id: Optional[int] = None) -> bool:
        found = self.get_by_email(email)
        return found is not None and found.id != exclude_id

    def add(self, agent: AgentEntity) -> AgentEntity:
        agent.id = self._next_id
        self._next_id += 1
        if agent.created_at is None:
            agent.created_at = utc_now()
        self._agents[agent.id] = agent
        return agent

    def update(self, agent: AgentEntity) -> None:
        self._agents[agent.id] = agent

    def clear(self) -> None:
        self._agents.clear()
        self._next_id = 1
