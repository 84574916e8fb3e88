"""
Ports (Interfaces) do Domínio de Clientes.

Define o contrato de persistência de clientes consumido pelos
use cases de clientes e de tickets (checagem de existência,
lookup de nome/email para as views de ticket).
"""

from typing import Dict, Iterable, List, Optional, Protocol, runtime_checkable

from src.core.shared.clock import utc_now
from src.core.shared.validators import normalize_email

from .entities import CustomerEntity


@runtime_checkable
class CustomerRepository(Protocol):
    """
    Interface para persistência de Clientes.

    Implementações:
    - DjangoCustomerRepository (ORM)
    - InMemoryCustomerRepository (para testes)
    """

    def get_by_id(self, customer_id: int) -> Optional[CustomerEntity]:
        """Busca cliente por ID (None se não existir)."""
        ...

    def exists(self, customer_id: int) -> bool:
        ...

    def get_many(self, customer_ids: Iterable[int]) -> Dict[int, CustomerEntity]:
        """
        Busca vários clientes em uma única consulta.

        Returns:
            Mapa id -> entidade (ids inexistentes são omitidos)
        """
        ...

    def list_all(self) -> List[CustomerEntity]:
        """Lista todos os clientes ordenados por nome."""
        ...

    def list_active(self) -> List[CustomerEntity]:
        """Lista clientes ativos ordenados por nome."""
        ...

    def get_by_email(self, email: str) -> Optional[CustomerEntity]:
        """Busca por email (case-insensitive)."""
        ...

    def email_exists(self, email: str, exclude_id: Optional[int] = None) -> bool:
        """
        Verifica se email já está em uso.

        Args:
            email: Email a verificar (case-insensitive)
            exclude_id: ID do cliente a ignorar (o próprio, em updates)
        """
        ...

    def add(self, customer: CustomerEntity) -> CustomerEntity:
        """Persiste novo cliente e retorna-o com ID atribuído."""
        ...

    def update(self, customer: CustomerEntity) -> None:
        """Persiste estado completo do cliente."""
        ...


class InMemoryCustomerRepository:
    """
    Implementação em memória do CustomerRepository.

    Útil para testes unitários dos use cases. Não usar em produção!
    """

    def __init__(self):
        self._customers: Dict[int, CustomerEntity] = {}
        self._next_id = 1

    def get_by_id(self, customer_id: int) -> Optional[CustomerEntity]:
        return self._customers.get(customer_id)

    def exists(self, customer_id: int) -> bool:
        return customer_id in self._customers

    def get_many(self, customer_ids: Iterable[int]) -> Dict[int, CustomerEntity]:
        return {
            cid: self._customers[cid]
            for cid in set(customer_ids)
            if cid in self._customers
        }

    def list_all(self) -> List[CustomerEntity]:
        return sorted(self._customers.values(), key=lambda c: c.full_name)

    def list_active(self) -> List[CustomerEntity]:
        return [c for c in self.list_all() if c.is_active]

    def get_by_email(self, email: str) -> Optional[CustomerEntity]:
        normalized = normalize_email(email)
        for customer in self._customers.values():
            if customer.email.lower() == normalized:
                return customer
        return None

    def email_exists(self, email: str, exclude_id: Optional[int] = None) -> bool:
        found = self.get_by_email(email)
        return found is not None and found.id != exclude_id

    def add(self, customer: CustomerEntity) -> CustomerEntity:
        customer.id = self._next_id
        self._next_id += 1
        if customer.created_at is None:
            customer.created_at = utc_now()
        self._customers[customer.id] = customer
        return customer

    def update(self, customer: CustomerEntity) -> None:
        self._customers[customer.id] = customer

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._customers.clear()
        self._next_id = 1
