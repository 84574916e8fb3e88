"""
Repositório Django para persistência de Clientes.

Implementa o CustomerRepository definido em src/core/customers/ports.py.
"""

from src.core.customers.entities import CustomerEntity

from ..shared.repository import BaseRepository, EmailIdentityMixin
from .models import CustomerModel
from .mappers import CustomerMapper


class DjangoCustomerRepository(
    EmailIdentityMixin, BaseRepository[CustomerEntity, CustomerModel]
):
    """
    Implementação Django do CustomerRepository.

    Example:
        repo = DjangoCustomerRepository()
        customer = repo.add(CustomerEntity.create("John Doe", "john@example.com"))
        repo.get_by_email("JOHN@example.com")
    """

    model_class = CustomerModel
    mapper = CustomerMapper
    default_order_fields = ["full_name", "id"]
