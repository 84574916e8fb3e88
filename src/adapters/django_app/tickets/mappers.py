"""
Mappers para conversão entre Entities (Core) e Models (Django).

Responsabilidades:
- Converter TicketEntity ⇄ TicketModel
- Converter TicketCategoryModel → CategoryEntity

Princípios:
- Mappers são stateless
- Não contêm lógica de negócio
- Tratam apenas conversão de dados
"""

from src.core.tickets.entities import (
    CategoryEntity,
    TicketEntity,
    TicketPriority,
    TicketStatus,
)

from .models import TicketCategoryModel, TicketModel


class TicketMapper:
    """
    Mapper para conversão entre TicketEntity e TicketModel.

    - to_model(): Entity → Model
    - to_entity(): Model → Entity
    - update_model(): copia Entity sobre Model existente
    """

    @staticmethod
    def to_model(entity: TicketEntity) -> TicketModel:
        """
        Converte TicketEntity para TicketModel.

        Note:
            Não chama .save() - deixa isso para o Repository
        """
        return TicketModel(
            id=entity.id,
            customer_id=entity.customer_id,
            agent_id=entity.agent_id,
            category_id=entity.category_id,
            subject=entity.subject,
            description=entity.description,
            status=int(entity.status),
            priority=int(entity.priority),
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            resolved_at=entity.resolved_at,
        )

    @staticmethod
    def to_entity(model: TicketModel) -> TicketEntity:
        """
        Converte TicketModel para TicketEntity.

        Note:
            Bypassa validações do factory method .create()
            pois dados já foram validados na criação original
        """
        return TicketEntity(
            id=model.id,
            customer_id=model.customer_id,
            category_id=model.category_id,
            subject=model.subject,
            description=model.description,
            status=TicketStatus(model.status),
            priority=TicketPriority(model.priority),
            agent_id=model.agent_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
            resolved_at=model.resolved_at,
        )

    @staticmethod
    def update_model(model: TicketModel, entity: TicketEntity) -> TicketModel:
        model.agent_id = entity.agent_id
        model.category_id = entity.category_id
        model.subject = entity.subject
        model.description = entity.description
        model.status = int(entity.status)
        model.priority = int(entity.priority)
        model.updated_at = entity.updated_at
        model.resolved_at = entity.resolved_at
        return model


class CategoryMapper:

    @staticmethod
    def to_entity(model: TicketCategoryModel) -> CategoryEntity:
        return CategoryEntity(
            id=model.id,
            name=model.name,
            description=model.description,
            is_active=model.is_active,
        )
