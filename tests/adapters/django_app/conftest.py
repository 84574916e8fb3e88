"""
Fixtures para testes dos adapters Django.

O banco é criado sem migrations (--no-migrations), então as
categorias de referência são semeadas aqui.
"""

from datetime import timedelta

import pytest
from django.utils import timezone


@pytest.fixture(autouse=True)
def fresh_container():
    """Container DI limpo a cada teste (relê os settings)."""
    from src.config.container import reset_container

    reset_container()
    yield
    reset_container()


@pytest.fixture
def categories(db):
    from src.adapters.django_app.tickets.models import TicketCategoryModel
    from src.core.tickets.entities import DEFAULT_CATEGORIES

    return [
        TicketCategoryModel.objects.create(id=category_id, name=name, description=description)
        for category_id, name, description in DEFAULT_CATEGORIES
    ]


@pytest.fixture
def customer_model(db):
    from src.adapters.django_app.customers.models import CustomerModel

    return CustomerModel.objects.create(full_name="John Doe", email="john.doe@example.com")


@pytest.fixture
def agent_model(db):
    from src.adapters.django_app.agents.models import AgentModel

    return AgentModel.objects.create(
        full_name="Alice Johnson",
        email="alice@support.com",
        department="Support",
    )


@pytest.fixture
def ticket_model_factory(categories, customer_model):
    """
    Factory para criar TicketModel para testes.

    Example:
        ticket = ticket_model_factory(subject="VPN", hours_old=50)
    """
    from src.adapters.django_app.tickets.models import TicketModel

    def create_ticket(hours_old=0, **kwargs):
        defaults = {
            'customer': customer_model,
            'category': categories[0],
            'subject': 'Internet lenta',
            'description': 'Conexão caindo desde ontem',
            'status': 0,
            'priority': 1,
            'created_at': timezone.now() - timedelta(hours=hours_old),
        }
        defaults.update(kwargs)
        return TicketModel.objects.create(**defaults)

    return create_ticket
