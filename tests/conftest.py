"""
Configurações globais do Pytest para o Support Desk.

Este arquivo é carregado automaticamente pelo pytest e:
- Configura Django (SQLite em memória) antes da coleta
- Registra markers e a opção --run-integration
- Fornece fixtures compartilhadas (repositórios em memória, UoW)
"""

from datetime import datetime, timedelta, timezone

import pytest


def pytest_addoption(parser):
    """Adiciona opções de linha de comando."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="run integration tests",
    )


def pytest_configure(config):
    """Configura Django antes dos testes."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )

    import django
    from django.conf import settings

    if not settings.configured:
        settings.configure(
            DEBUG=True,
            SECRET_KEY='test-secret-key',
            DATABASES={
                'default': {
                    'ENGINE': 'django.db.backends.sqlite3',
                    'NAME': ':memory:',
                }
            },
            INSTALLED_APPS=[
                'django.contrib.contenttypes',
                'src.adapters.django_app.customers',
                'src.adapters.django_app.agents',
                'src.adapters.django_app.tickets',
            ],
            MIDDLEWARE=[
                'django.middleware.common.CommonMiddleware',
            ],
            ROOT_URLCONF='src.config.urls',
            ALLOWED_HOSTS=['testserver', 'localhost'],
            DEFAULT_AUTO_FIELD='django.db.models.BigAutoField',
            USE_TZ=True,
            TIME_ZONE='UTC',
            SLA_BREACH_HOURS=48.0,
            SLA_AT_RISK_HOURS=None,
            RESOLUTION_TARGET_HOURS=24.0,
            DUPLICATE_TICKET_WINDOW_HOURS=24.0,
        )
        django.setup()


def pytest_collection_modifyitems(config, items):
    """Pula testes de integração sem --run-integration."""
    if config.getoption("--run-integration", default=False):
        return

    skip_integration = pytest.mark.skip(reason="Integration tests require --run-integration")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


@pytest.fixture
def now():
    """Instante fixo (UTC) para testes dependentes de tempo."""
    return datetime(2024, 3, 10, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def hours_ago(now):
    """Factory: instante `n` horas antes de `now`."""
    def _hours_ago(hours: float) -> datetime:
        return now - timedelta(hours=hours)
    return _hours_ago


@pytest.fixture
def customer_repo():
    from src.core.customers.ports import InMemoryCustomerRepository
    return InMemoryCustomerRepository()


@pytest.fixture
def agent_repo():
    from src.core.agents.ports import InMemoryAgentRepository
    return InMemoryAgentRepository()


@pytest.fixture
def category_repo():
    """Categorias em memória já semeadas com as cinco categorias padrão."""
    from src.core.tickets.ports import InMemoryCategoryRepository
    return InMemoryCategoryRepository()


@pytest.fixture
def ticket_repo(customer_repo):
    """Repositório de tickets em memória com lookup de nome de cliente."""
    from src.core.tickets.ports import InMemoryTicketRepository

    def lookup(customer_id):
        customer = customer_repo.get_by_id(customer_id)
        return customer.full_name if customer else None

    return InMemoryTicketRepository(customer_name_lookup=lookup)


@pytest.fixture
def uow():
    """Unit of Work em memória para testes unitários."""
    from src.adapters.django_app.shared.unit_of_work import InMemoryUnitOfWork
    return InMemoryUnitOfWork()


@pytest.fixture
def customer(customer_repo):
    from src.core.customers.entities import CustomerEntity
    return customer_repo.add(CustomerEntity.create("John Doe", "john.doe@example.com"))


@pytest.fixture
def agent(agent_repo):
    from src.core.agents.entities import AgentEntity
    return agent_repo.add(AgentEntity.create("Alice Johnson", "alice@support.com", department="Support"))


@pytest.fixture
def make_ticket(ticket_repo, customer, now):
    """
    Factory para persistir tickets no repositório em memória.

    Example:
        ticket = make_ticket(subject="VPN", created_at=hours_ago(50))
    """
    from src.core.tickets.entities import TicketEntity, TicketPriority, TicketStatus

    def _make_ticket(
        subject="Internet lenta",
        description="Conexão caindo desde ontem",
        status=TicketStatus.OPEN,
        priority=TicketPriority.MEDIUM,
        customer_id=None,
        category_id=1,
        agent_id=None,
        created_at=None,
        resolved_at=None,
    ):
        ticket = TicketEntity(
            customer_id=customer_id or customer.id,
            category_id=category_id,
            subject=subject,
            description=description,
            status=status,
            priority=priority,
            agent_id=agent_id,
            created_at=created_at or now,
            resolved_at=resolved_at,
        )
        return ticket_repo.add(ticket)

    return _make_ticket
