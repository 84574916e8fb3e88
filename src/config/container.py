"""
Dependency Injection Container.

Configura e gerencia todas as dependências da aplicação.
Usa dependency-injector para lazy-loading e injeção automática.

Padrões:
- Singleton: Uma instância para toda app (repositories, publisher, policy)
- Factory: Nova instância por chamada (services, UoW)
- Configuration: Limiares de negócio vindos de django.conf.settings
"""

from typing import Optional

from dependency_injector import containers, providers

from src.adapters.django_app.agents.repositories import DjangoAgentRepository
from src.adapters.django_app.customers.repositories import DjangoCustomerRepository
from src.adapters.django_app.events.publishers import LoggingEventPublisher
from src.adapters.django_app.shared.unit_of_work import DjangoUnitOfWork
from src.adapters.django_app.tickets.repositories import (
    DjangoCategoryRepository,
    DjangoTicketRepository,
)
from src.core.agents import use_cases as agent_use_cases
from src.core.customers import use_cases as customer_use_cases
from src.core.reporting import use_cases as reporting_use_cases
from src.core.reporting.policies import SLAPolicy
from src.core.tickets import use_cases as ticket_use_cases


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organização:
    - Configuration: settings (SLA, meta de resolução, janela de duplicidade)
    - Infrastructure: publisher de eventos
    - Repositories: Persistência
    - Unit of Work: Transações
    - Services: Use Cases

    Example:
        container = get_container()
        service = container.create_ticket_service()
        output = service.execute(input_dto)
    """

    # =========================================================================
    # Configuration
    # =========================================================================

    config = providers.Configuration()

    # =========================================================================
    # Infrastructure
    # =========================================================================

    event_publisher = providers.Singleton(LoggingEventPublisher)

    sla_policy = providers.Singleton(
        SLAPolicy,
        breach_hours=config.sla.breach_hours,
        at_risk_hours=config.sla.at_risk_hours,
    )

    # =========================================================================
    # Repositories (Singleton - uma instância por app)
    # =========================================================================

    customer_repository = providers.Singleton(DjangoCustomerRepository)
    agent_repository = providers.Singleton(DjangoAgentRepository)
    ticket_repository = providers.Singleton(DjangoTicketRepository)
    category_repository = providers.Singleton(DjangoCategoryRepository)

    # =========================================================================
    # Unit of Work (Factory - nova instância por operação)
    # =========================================================================

    unit_of_work = providers.Factory(
        DjangoUnitOfWork,
        event_publisher=event_publisher,
    )

    # =========================================================================
    # Services: Tickets
    # =========================================================================

    create_ticket_service = providers.Factory(
        ticket_use_cases.CreateTicketService,
        ticket_repo=ticket_repository,
        customer_repo=customer_repository,
        agent_repo=agent_repository,
        category_repo=category_repository,
        uow=unit_of_work,
        duplicate_window_hours=config.tickets.duplicate_window_hours,
    )

    update_ticket_status_service = providers.Factory(
        ticket_use_cases.UpdateTicketStatusService,
        ticket_repo=ticket_repository,
        customer_repo=customer_repository,
        agent_repo=agent_repository,
        category_repo=category_repository,
        uow=unit_of_work,
    )

    assign_ticket_service = providers.Factory(
        ticket_use_cases.AssignTicketService,
        ticket_repo=ticket_repository,
        customer_repo=customer_repository,
        agent_repo=agent_repository,
        category_repo=category_repository,
        uow=unit_of_work,
    )

    # Leitura (sem UoW)
    get_ticket_service = providers.Factory(
        ticket_use_cases.GetTicketService,
        ticket_repo=ticket_repository,
        customer_repo=customer_repository,
        agent_repo=agent_repository,
        category_repo=category_repository,
    )

    list_tickets_service = providers.Factory(
        ticket_use_cases.ListTicketsService,
        ticket_repo=ticket_repository,
        customer_repo=customer_repository,
        agent_repo=agent_repository,
        category_repo=category_repository,
    )

    list_tickets_by_customer_service = providers.Factory(
        ticket_use_cases.ListTicketsByCustomerService,
        ticket_repo=ticket_repository,
        customer_repo=customer_repository,
        agent_repo=agent_repository,
        category_repo=category_repository,
    )

    list_tickets_by_agent_service = providers.Factory(
        ticket_use_cases.ListTicketsByAgentService,
        ticket_repo=ticket_repository,
        customer_repo=customer_repository,
        agent_repo=agent_repository,
        category_repo=category_repository,
    )

    list_tickets_by_status_service = providers.Factory(
        ticket_use_cases.ListTicketsByStatusService,
        ticket_repo=ticket_repository,
        customer_repo=customer_repository,
        agent_repo=agent_repository,
        category_repo=category_repository,
    )

    list_tickets_by_priority_service = providers.Factory(
        ticket_use_cases.ListTicketsByPriorityService,
        ticket_repo=ticket_repository,
        customer_repo=customer_repository,
        agent_repo=agent_repository,
        category_repo=category_repository,
    )

    list_tickets_by_date_range_service = providers.Factory(
        ticket_use_cases.ListTicketsByDateRangeService,
        ticket_repo=ticket_repository,
        customer_repo=customer_repository,
        agent_repo=agent_repository,
        category_repo=category_repository,
    )

    search_tickets_service = providers.Factory(
        ticket_use_cases.SearchTicketsService,
        ticket_repo=ticket_repository,
        customer_repo=customer_repository,
        agent_repo=agent_repository,
        category_repo=category_repository,
    )

    list_open_tickets_service = providers.Factory(
        ticket_use_cases.ListOpenTicketsService,
        ticket_repo=ticket_repository,
        customer_repo=customer_repository,
        agent_repo=agent_repository,
        category_repo=category_repository,
    )

    list_resolved_tickets_service = providers.Factory(
        ticket_use_cases.ListResolvedTicketsService,
        ticket_repo=ticket_repository,
        customer_repo=customer_repository,
        agent_repo=agent_repository,
        category_repo=category_repository,
    )

    list_categories_service = providers.Factory(
        ticket_use_cases.ListCategoriesService,
        category_repo=category_repository,
    )

    # =========================================================================
    # Services: Relatórios
    # =========================================================================

    ticket_summary_service = providers.Factory(
        reporting_use_cases.GetTicketSummaryService,
        ticket_repo=ticket_repository,
    )

    sla_report_service = providers.Factory(
        reporting_use_cases.GetSLAReportService,
        ticket_repo=ticket_repository,
        customer_repo=customer_repository,
        agent_repo=agent_repository,
        policy=sla_policy,
    )

    priority_distribution_service = providers.Factory(
        reporting_use_cases.GetPriorityDistributionService,
        ticket_repo=ticket_repository,
    )

    category_distribution_service = providers.Factory(
        reporting_use_cases.GetCategoryDistributionService,
        ticket_repo=ticket_repository,
        category_repo=category_repository,
    )

    resolution_statistics_service = providers.Factory(
        reporting_use_cases.GetResolutionStatisticsService,
        ticket_repo=ticket_repository,
        target_hours=config.reporting.resolution_target_hours,
    )

    agent_performance_service = providers.Factory(
        reporting_use_cases.GetAgentPerformanceService,
        ticket_repo=ticket_repository,
        agent_repo=agent_repository,
    )

    dashboard_stats_service = providers.Factory(
        reporting_use_cases.GetDashboardStatsService,
        ticket_repo=ticket_repository,
        policy=sla_policy,
        target_hours=config.reporting.resolution_target_hours,
    )

    # =========================================================================
    # Services: Clientes
    # =========================================================================

    create_customer_service = providers.Factory(
        customer_use_cases.CreateCustomerService,
        customer_repo=customer_repository,
        uow=unit_of_work,
    )

    update_customer_service = providers.Factory(
        customer_use_cases.UpdateCustomerService,
        customer_repo=customer_repository,
        ticket_repo=ticket_repository,
        uow=unit_of_work,
    )

    deactivate_customer_service = providers.Factory(
        customer_use_cases.DeactivateCustomerService,
        customer_repo=customer_repository,
        uow=unit_of_work,
    )

    get_customer_service = providers.Factory(
        customer_use_cases.GetCustomerService,
        customer_repo=customer_repository,
        ticket_repo=ticket_repository,
    )

    get_customer_by_email_service = providers.Factory(
        customer_use_cases.GetCustomerByEmailService,
        customer_repo=customer_repository,
        ticket_repo=ticket_repository,
    )

    list_customers_service = providers.Factory(
        customer_use_cases.ListCustomersService,
        customer_repo=customer_repository,
        ticket_repo=ticket_repository,
    )

    list_customers_by_ticket_count_service = providers.Factory(
        customer_use_cases.ListCustomersByTicketCountService,
        customer_repo=customer_repository,
        ticket_repo=ticket_repository,
    )

    check_customer_email_service = providers.Factory(
        customer_use_cases.CheckCustomerEmailService,
        customer_repo=customer_repository,
    )

    # =========================================================================
    # Services: Agentes
    # =========================================================================

    create_agent_service = providers.Factory(
        agent_use_cases.CreateAgentService,
        agent_repo=agent_repository,
        uow=unit_of_work,
    )

    update_agent_service = providers.Factory(
        agent_use_cases.UpdateAgentService,
        agent_repo=agent_repository,
        ticket_repo=ticket_repository,
        uow=unit_of_work,
    )

    deactivate_agent_service = providers.Factory(
        agent_use_cases.DeactivateAgentService,
        agent_repo=agent_repository,
        uow=unit_of_work,
    )

    get_agent_service = providers.Factory(
        agent_use_cases.GetAgentService,
        agent_repo=agent_repository,
        ticket_repo=ticket_repository,
    )

    list_agents_service = providers.Factory(
        agent_use_cases.ListAgentsService,
        agent_repo=agent_repository,
        ticket_repo=ticket_repository,
    )

    list_agents_with_stats_service = providers.Factory(
        agent_use_cases.ListAgentsWithStatsService,
        agent_repo=agent_repository,
        ticket_repo=ticket_repository,
    )


def settings_config() -> dict:
    """Lê os limiares de negócio de django.conf.settings."""
    from django.conf import settings

    return {
        'sla': {
            'breach_hours': getattr(settings, 'SLA_BREACH_HOURS', 48.0),
            'at_risk_hours': getattr(settings, 'SLA_AT_RISK_HOURS', None),
        },
        'reporting': {
            'resolution_target_hours': getattr(settings, 'RESOLUTION_TARGET_HOURS', 24.0),
        },
        'tickets': {
            'duplicate_window_hours': getattr(settings, 'DUPLICATE_TICKET_WINDOW_HOURS', 24.0),
        },
    }


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Retorna instância global do container.

    Cria se não existir (lazy initialization), já configurado
    a partir dos settings.
    """
    global _container

    if _container is None:
        _container = Container()
        _container.config.from_dict(settings_config())

    return _container


def reset_container() -> None:
    """
    Reset do container (para testes).

    Permite criar novo container limpo, relendo os settings.
    """
    global _container
    _container = None
