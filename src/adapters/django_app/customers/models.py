"""
Django Models para o domínio de Clientes.

Model é ADAPTER: persiste CustomerEntity (src/core/customers/entities.py)
e não contém lógica de negócio.
"""

from django.db import models
from django.utils import timezone


class CustomerModel(models.Model):
    """
    Model Django para persistência de Clientes.

    Fields:
        id: Inteiro auto-incrementado
        full_name: Nome completo
        email: Email único (armazenado em minúsculas)
        phone: Telefone opcional
        address: Endereço opcional
        is_active: Falso após desativação
        created_at: Timestamp de criação
    """

    id = models.BigAutoField(primary_key=True)

    full_name = models.CharField(
        max_length=100,
        db_index=True,
        help_text="Nome completo do cliente"
    )

    email = models.CharField(
        max_length=150,
        unique=True,
        help_text="Email único do cliente"
    )

    phone = models.CharField(max_length=20, null=True, blank=True)

    address = models.CharField(max_length=255, null=True, blank=True)

    is_active = models.BooleanField(default=True, db_index=True)

    created_at = models.DateTimeField(
        default=timezone.now,
        help_text="Data/hora de cadastro"
    )

    class Meta:
        db_table = 'customers'
        verbose_name = 'Cliente'
        verbose_name_plural = 'Clientes'
        ordering = ['full_name', 'id']

    def __str__(self):
        return f"{self.full_name} <{self.email}>"
