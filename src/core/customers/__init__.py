"""
Domínio de Clientes.

Clientes abrem tickets. Email é único (case-insensitive) e não há
exclusão física: clientes são apenas desativados.
"""

from .entities import CustomerEntity
from .dtos import CreateCustomerInputDTO, UpdateCustomerInputDTO, CustomerOutputDTO
from .ports import CustomerRepository

__all__ = [
    "CustomerEntity",
    "CreateCustomerInputDTO",
    "UpdateCustomerInputDTO",
    "CustomerOutputDTO",
    "CustomerRepository",
]
