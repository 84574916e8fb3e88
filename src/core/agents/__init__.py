"""
Domínio de Agentes de suporte.

Agentes recebem tickets por atribuição. Desativar um agente não
remove as atribuições existentes.
"""

from .entities import AgentEntity
from .dtos import CreateAgentInputDTO, UpdateAgentInputDTO, AgentOutputDTO
from .ports import AgentRepository

__all__ = [
    "AgentEntity",
    "CreateAgentInputDTO",
    "UpdateAgentInputDTO",
    "AgentOutputDTO",
    "AgentRepository",
]
