"""
Django Models para o domínio de Agentes.
"""

from django.db import models
from django.utils import timezone


class AgentModel(models.Model):
    """
    Model Django para persistência de Agentes.

    Fields:
        id: Inteiro auto-incrementado
        full_name: Nome completo
        email: Email único
        department: Departamento opcional
        role: Papel (default "Agent")
        is_active: Falso após desativação
        created_at: Timestamp de criação
    """

    id = models.BigAutoField(primary_key=True)

    full_name = models.CharField(max_length=100, db_index=True)

    email = models.CharField(max_length=150, unique=True)

    department = models.CharField(max_length=100, null=True, blank=True)

    role = models.CharField(max_length=50, default='Agent')

    is_active = models.BooleanField(default=True, db_index=True)

    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'agents'
        verbose_name = 'Agente'
        verbose_name_plural = 'Agentes'
        ordering = ['full_name', 'id']

    def __str__(self):
        return f"{self.full_name} ({self.role})"
