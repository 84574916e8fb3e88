"""
Use Cases do Domínio de Clientes.

- CreateCustomerService: Cadastra cliente (email único)
- UpdateCustomerService: Atualização parcial
- DeactivateCustomerService: Soft delete
- GetCustomerService / GetCustomerByEmailService
- ListCustomersService: Todos ou apenas ativos, por nome
- ListCustomersByTicketCountService: Ordenados por total de tickets
- CheckCustomerEmailService: Email já em uso?

As contagens de tickets vêm do TicketRepository em uma única
consulta agregada.
"""

from typing import List, Optional

from src.core.shared.interfaces import UnitOfWork
from src.core.shared.exceptions import ConflictError, EntityNotFoundError
from src.core.shared.validators import normalize_email
from src.core.tickets.ports import TicketRepository

from .ports import CustomerRepository
from .entities import CustomerEntity
from .dtos import (
    CreateCustomerInputDTO,
    CustomerOutputDTO,
    UpdateCustomerInputDTO,
)


def _customer_not_found(customer_id) -> EntityNotFoundError:
    return EntityNotFoundError(
        f"Cliente {customer_id} não encontrado",
        entity_type="Customer",
        entity_id=customer_id,
    )


def _email_conflict(email: str) -> ConflictError:
    return ConflictError(
        f"Cliente com email {email} já existe",
        rule="unique_email",
    )


class CreateCustomerService:
    """
    Use Case: Cadastrar cliente.

    Raises:
        ConflictError: Email já cadastrado (case-insensitive)
        ValidationError: Nome/email inválidos
    """

    def __init__(self, customer_repo: CustomerRepository, uow: UnitOfWork):
        self.customer_repo = customer_repo
        self.uow = uow

    def execute(self, input_dto: CreateCustomerInputDTO) -> CustomerOutputDTO:
        with self.uow:
            customer = CustomerEntity.create(
                full_name=input_dto.full_name,
                email=input_dto.email,
                phone=input_dto.phone,
                address=input_dto.address,
            )
            if self.customer_repo.email_exists(customer.email):
                raise _email_conflict(customer.email)

            customer = self.customer_repo.add(customer)

        return CustomerOutputDTO.from_entity(customer, ticket_count=0)


class UpdateCustomerService:
    """
    Use Case: Atualização parcial de cliente.

    O email só é verificado se mudou, ignorando o próprio cliente.
    """

    def __init__(
        self,
        customer_repo: CustomerRepository,
        ticket_repo: TicketRepository,
        uow: UnitOfWork,
    ):
        self.customer_repo = customer_repo
        self.ticket_repo = ticket_repo
        self.uow = uow

    def execute(self, input_dto: UpdateCustomerInputDTO) -> CustomerOutputDTO:
        """
        Raises:
            EntityNotFoundError: Cliente inexistente
            ConflictError: Novo email já pertence a outro cliente
        """
        with self.uow:
            customer = self.customer_repo.get_by_id(input_dto.customer_id)
            if not customer:
                raise _customer_not_found(input_dto.customer_id)

            if input_dto.email is not None:
                new_email = normalize_email(input_dto.email)
                if new_email != customer.email and self.customer_repo.email_exists(
                    new_email, exclude_id=customer.id
                ):
                    raise _email_conflict(new_email)

            customer.apply_changes(
                full_name=input_dto.full_name,
                email=input_dto.email,
                phone=input_dto.phone,
                address=input_dto.address,
                is_active=input_dto.is_active,
            )
            self.customer_repo.update(customer)

        ticket_count = self.ticket_repo.count_by_customer().get(customer.id, 0)
        return CustomerOutputDTO.from_entity(customer, ticket_count=ticket_count)


class DeactivateCustomerService:
    """Use Case: Desativar cliente (não há exclusão física)."""

    def __init__(self, customer_repo: CustomerRepository, uow: UnitOfWork):
        self.customer_repo = customer_repo
        self.uow = uow

    def execute(self, customer_id: int) -> None:
        """
        Raises:
            EntityNotFoundError: Cliente inexistente
        """
        with self.uow:
            customer = self.customer_repo.get_by_id(customer_id)
            if not customer:
                raise _customer_not_found(customer_id)

            customer.deactivate()
            self.customer_repo.update(customer)


class _CustomerQueryService:
    def __init__(self, customer_repo: CustomerRepository, ticket_repo: TicketRepository):
        self.customer_repo = customer_repo
        self.ticket_repo = ticket_repo

    def _present(self, customers: List[CustomerEntity]) -> List[CustomerOutputDTO]:
        counts = self.ticket_repo.count_by_customer() if customers else {}
        return [
            CustomerOutputDTO.from_entity(c, ticket_count=counts.get(c.id, 0))
            for c in customers
        ]


class GetCustomerService(_CustomerQueryService):
    """Use Case: Obter cliente com total de tickets."""

    def execute(self, customer_id: int) -> CustomerOutputDTO:
        customer = self.customer_repo.get_by_id(customer_id)
        if not customer:
            raise _customer_not_found(customer_id)
        return self._present([customer])[0]


class GetCustomerByEmailService(_CustomerQueryService):
    """Use Case: Buscar cliente pelo email (case-insensitive)."""

    def execute(self, email: str) -> CustomerOutputDTO:
        customer = self.customer_repo.get_by_email(email)
        if not customer:
            raise EntityNotFoundError(
                f"Cliente com email {email} não encontrado",
                entity_type="Customer",
                entity_id=email,
            )
        return self._present([customer])[0]


class ListCustomersService(_CustomerQueryService):
    """Use Case: Listar clientes por nome (todos ou só ativos)."""

    def execute(self, active_only: bool = False) -> List[CustomerOutputDTO]:
        if active_only:
            customers = self.customer_repo.list_active()
        else:
            customers = self.customer_repo.list_all()
        return self._present(customers)


class ListCustomersByTicketCountService(_CustomerQueryService):
    """Use Case: Clientes ordenados pelo total de tickets (maior primeiro)."""

    def execute(self) -> List[CustomerOutputDTO]:
        customers = self._present(self.customer_repo.list_all())
        return sorted(customers, key=lambda c: c.ticket_count, reverse=True)


class CheckCustomerEmailService:
    """Use Case: Verificar se email já está em uso."""

    def __init__(self, customer_repo: CustomerRepository):
        self.customer_repo = customer_repo

    def execute(self, email: str, exclude_id: Optional[int] = None) -> bool:
        return self.customer_repo.email_exists(email, exclude_id=exclude_id)
