"""
Configuração do Django App para Agentes.
"""

from django.apps import AppConfig


class AgentsConfig(AppConfig):
    """Configuração do app Agents."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'src.adapters.django_app.agents'
    label = 'agents'
    verbose_name = 'Agentes de Suporte'
