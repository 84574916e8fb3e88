"""
Mapper para conversão entre AgentEntity (Core) e AgentModel (Django).
"""

from src.core.agents.entities import AgentEntity

from .models import AgentModel


class AgentMapper:

    @staticmethod
    def to_model(entity: AgentEntity) -> AgentModel:
        return AgentModel(
            id=entity.id,
            full_name=entity.full_name,
            email=entity.email,
            department=entity.department,
            role=entity.role,
            is_active=entity.is_active,
            created_at=entity.created_at,
        )

    @staticmethod
    def to_entity(model: AgentModel) -> AgentEntity:
        return AgentEntity(
            id=model.id,
            full_name=model.full_name,
            email=model.email,
            department=model.department,
            role=model.role,
            is_active=model.is_active,
            created_at=model.created_at,
        )

    @staticmethod
    def update_model(model: AgentModel, entity: AgentEntity) -> AgentModel:
        model.full_name = entity.full_name
        model.email = entity.email
        model.department = entity.department
        model.role = entity.role
        model.is_active = entity.is_active
        return model
