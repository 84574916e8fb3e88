"""
Mapper para conversão entre CustomerEntity (Core) e CustomerModel (Django).
"""

from src.core.customers.entities import CustomerEntity

from .models import CustomerModel


class CustomerMapper:
    """
    Responsável por:
    - to_model(): Entity → Model
    - to_entity(): Model → Entity
    - update_model(): copia Entity sobre Model existente
    """

    @staticmethod
    def to_model(entity: CustomerEntity) -> CustomerModel:
        return CustomerModel(
            id=entity.id,
            full_name=entity.full_name,
            email=entity.email,
            phone=entity.phone,
            address=entity.address,
            is_active=entity.is_active,
            created_at=entity.created_at,
        )

    @staticmethod
    def to_entity(model: CustomerModel) -> CustomerEntity:
        # Bypassa CustomerEntity.create(): dados já validados na criação
        return CustomerEntity(
            id=model.id,
            full_name=model.full_name,
            email=model.email,
            phone=model.phone,
            address=model.address,
            is_active=model.is_active,
            created_at=model.created_at,
        )

    @staticmethod
    def update_model(model: CustomerModel, entity: CustomerEntity) -> CustomerModel:
        model.full_name = entity.full_name
        model.email = entity.email
        model.phone = entity.phone
        model.address = entity.address
        model.is_active = entity.is_active
        return model
