"""
Repository Base - Implementação base de repositórios com Django ORM.

Fornece funcionalidades comuns para todos os repositórios:
- Busca por ID, existência, contagem e busca em lote
- Inclusão (ID atribuído pelo banco) e atualização
- Otimização de queries (select_related)
- Tradução de falhas do banco para RepositoryError

Princípios:
- Repositórios são stateless
- Não contêm lógica de negócio
- Apenas persistência e queries
"""

from abc import ABC
from contextlib import contextmanager
from typing import Dict, Generic, Iterable, List, Optional, Type, TypeVar
import logging

from django.db import DatabaseError, models
from django.db.models import QuerySet

from src.core.shared.exceptions import RepositoryError
from src.core.shared.validators import normalize_email

logger = logging.getLogger(__name__)

# Type variables
T = TypeVar("T")  # Entity type
M = TypeVar("M", bound=models.Model)  # Model type


class BaseRepository(ABC, Generic[T, M]):
    """
    Classe base abstrata para repositórios Django.

    Type Parameters:
        T: Tipo da entidade de domínio
        M: Tipo do Model Django

    Example:
        class DjangoCustomerRepository(BaseRepository[CustomerEntity, CustomerModel]):
            model_class = CustomerModel
            mapper = CustomerMapper
    """

    # Classe do model Django (definir na subclasse)
    model_class: Type[M]

    # Mapper com to_entity / to_model / update_model
    mapper = None

    # Campos para select_related (otimização N+1)
    select_related_fields: List[str] = []

    # Ordenação padrão de list_all
    default_order_fields: List[str] = ["id"]

    def to_entity(self, model: M) -> T:
        return self.mapper.to_entity(model)

    def to_model(self, entity: T) -> M:
        return self.mapper.to_model(entity)

    @contextmanager
    def _db_errors(self, operation: str):
        """Converte DatabaseError em RepositoryError (com log)."""
        try:
            yield
        except DatabaseError as e:
            logger.error(f"{self.model_class.__name__}.{operation} failed: {e}")
            raise RepositoryError(
                f"Falha de persistência em {self.model_class.__name__}.{operation}"
            ) from e

    def _get_base_queryset(self) -> QuerySet:
        qs = self.model_class.objects.all()
        if self.select_related_fields:
            qs = qs.select_related(*self.select_related_fields)
        return qs

    def _to_entities(self, qs: QuerySet) -> List[T]:
        with self._db_errors("query"):
            return [self.to_entity(m) for m in qs]

    def get_by_id(self, entity_id: int) -> Optional[T]:
        """
        Busca entidade por ID.

        Returns:
            Entidade encontrada ou None
        """
        with self._db_errors("get_by_id"):
            try:
                model = self._get_base_queryset().get(id=entity_id)
            except self.model_class.DoesNotExist:
                return None
        return self.to_entity(model)

    def exists(self, entity_id: int) -> bool:
        with self._db_errors("exists"):
            return self.model_class.objects.filter(id=entity_id).exists()

    def count(self) -> int:
        with self._db_errors("count"):
            return self.model_class.objects.count()

    def get_many(self, entity_ids: Iterable[int]) -> Dict[int, T]:
        """Busca várias entidades em uma única consulta (ids ausentes omitidos)."""
        ids = {entity_id for entity_id in entity_ids if entity_id is not None}
        if not ids:
            return {}
        entities = self._to_entities(self._get_base_queryset().filter(id__in=ids))
        return {entity.id: entity for entity in entities}

    def list_all(self) -> List[T]:
        return self._to_entities(
            self._get_base_queryset().order_by(*self.default_order_fields)
        )

    def add(self, entity: T) -> T:
        """
        Persiste nova entidade; o ID gerado pelo banco é gravado na entidade.
        """
        model = self.to_model(entity)
        with self._db_errors("add"):
            model.save(force_insert=True)
        entity.id = model.id
        logger.debug(f"{self.model_class.__name__} created: {entity.id}")
        return entity

    def update(self, entity: T) -> None:
        """
        Persiste estado completo de entidade existente.

        Raises:
            RepositoryError: Se a linha não existir mais
        """
        with self._db_errors("update"):
            try:
                model = self.model_class.objects.get(id=entity.id)
            except self.model_class.DoesNotExist:
                raise RepositoryError(
                    f"{self.model_class.__name__} {entity.id} não existe para atualização"
                )
            self.mapper.update_model(model, entity)
            model.save()
        logger.debug(f"{self.model_class.__name__} updated: {entity.id}")


class EmailIdentityMixin:
    """
    Consultas comuns a cadastros identificados por email e com
    soft delete (clientes e agentes).

    Emails são gravados normalizados; as buscas usam iexact.
    """

    def list_active(self) -> List[T]:
        return self._to_entities(
            self._get_base_queryset()
            .filter(is_active=True)
            .order_by(*self.default_order_fields)
        )

    def get_by_email(self, email: str) -> Optional[T]:
        email = normalize_email(email)
        if not email:
            return None
        found = self._to_entities(self._get_base_queryset().filter(email__iexact=email)[:1])
        return found[0] if found else None

    def email_exists(self, email: str, exclude_id: Optional[int] = None) -> bool:
        qs = self.model_class.objects.filter(email__iexact=normalize_email(email))
        if exclude_id is not None:
            qs = qs.exclude(id=exclude_id)
        with self._db_errors("email_exists"):
            return qs.exists()
