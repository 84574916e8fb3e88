"""
API Views JSON para o domínio de Tickets e relatórios.

Endpoints (prefixo /api/tickets/):
- GET  /                      - Listar tickets
- POST /                      - Abrir ticket
- GET  /<id>/                 - Obter ticket
- PUT  /<id>/status/          - Mudar status
- PUT  /<id>/assign/          - Atribuir agente
- GET  /customer/<id>/        - Tickets de um cliente
- GET  /agent/<id>/           - Tickets de um agente
- GET  /status/<status>/      - Tickets por status
- GET  /priority/<priority>/  - Tickets por prioridade
- GET  /daterange/?from=&to=  - Tickets criados no intervalo
- GET  /search/?term=         - Busca textual
- GET  /open/, /resolved/     - Em aberto / resolvidos
- GET  /summary/              - Contagem por status
- GET  /sla-report/           - Relatório de SLA
- GET  /stats/resolution/, /stats/categories/,
       /stats/priorities/, /stats/agents/
- GET  /dashboard/            - Painel consolidado

Formato:
- Entrada: JSON
- Saída: JSON com estrutura {success, data/error, meta}
"""

import logging

from django.http import HttpRequest, JsonResponse

from src.core.tickets.dtos import (
    AssignTicketInputDTO,
    CreateTicketInputDTO,
    UpdateTicketStatusInputDTO,
)
from src.core.shared.exceptions import ValidationError

from ..shared.api import (
    BaseAPIView,
    json_response,
    list_response,
    optional_int,
    parse_bool,
    parse_query_datetime,
    require_int,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Ticket API Views
# =============================================================================

class TicketAPIListView(BaseAPIView):
    """
    API para listar e criar tickets.

    GET /api/tickets/ - Lista tickets (mais recentes primeiro)
    POST /api/tickets/ - Abre ticket
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        return list_response(self.get_service('list_tickets_service').execute())

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Abre novo ticket.

        Body JSON:
        {
            "customer_id": int (obrigatório),
            "category_id": int (obrigatório),
            "subject": "string (obrigatório)",
            "description": "string (obrigatório)",
            "priority": "Low|Medium|High|Critical" (opcional),
            "agent_id": int (opcional)
        }
        """
        data = self.parse_body(request)

        input_dto = CreateTicketInputDTO(
            customer_id=require_int(data, 'customer_id'),
            category_id=require_int(data, 'category_id'),
            subject=data.get('subject', ''),
            description=data.get('description', ''),
            priority=data.get('priority') or 'Medium',
            agent_id=optional_int(data, 'agent_id'),
        )

        output = self.get_service('create_ticket_service').execute(input_dto)
        logger.info(f"API: Ticket criado: {output.id}")

        return json_response(success=True, data=output.to_dict(), status=201)


class TicketAPIDetailView(BaseAPIView):
    """GET /api/tickets/<id>/ - Obter ticket."""

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        ticket = self.get_service('get_ticket_service').execute(pk)
        return json_response(success=True, data=ticket.to_dict())


class TicketAPIStatusView(BaseAPIView):
    """
    API para mudança de status.

    PUT /api/tickets/<id>/status/
    """

    def put(self, request: HttpRequest, pk: int) -> JsonResponse:
        """
        Body JSON:
        {
            "status": "Open|InProgress|OnHold|Resolved|Closed" (obrigatório),
            "notes": "string" (opcional)
        }
        """
        data = self.parse_body(request)
        if data.get('status') in (None, ''):
            raise ValidationError("status é obrigatório", field="status")

        input_dto = UpdateTicketStatusInputDTO(
            ticket_id=pk,
            status=data['status'],
            notes=data.get('notes'),
        )
        output = self.get_service('update_ticket_status_service').execute(input_dto)
        logger.info(f"API: Ticket {pk} movido para {output.status}")

        return json_response(success=True, data=output.to_dict())


class TicketAPIAssignView(BaseAPIView):
    """
    API para atribuir ticket.

    PUT /api/tickets/<id>/assign/
    """

    def put(self, request: HttpRequest, pk: int) -> JsonResponse:
        """
        Body JSON:
        {
            "agent_id": int (obrigatório)
        }
        """
        data = self.parse_body(request)
        input_dto = AssignTicketInputDTO(ticket_id=pk, agent_id=require_int(data, 'agent_id'))

        output = self.get_service('assign_ticket_service').execute(input_dto)
        logger.info(f"API: Ticket {pk} atribuído a {input_dto.agent_id}")

        return json_response(success=True, data=output.to_dict())


class TicketAPIQueryView(BaseAPIView):
    """
    Consultas que devolvem listas de tickets.

    service_name aponta para o service no container; os argumentos
    capturados pela URL são repassados para execute().
    """

    service_name: str = ''

    def get(self, request: HttpRequest, **kwargs) -> JsonResponse:
        return list_response(self.get_service(self.service_name).execute(**kwargs))


class TicketAPIDateRangeView(BaseAPIView):
    """GET /api/tickets/daterange/?from=<iso>&to=<iso>"""

    def get(self, request: HttpRequest) -> JsonResponse:
        start = parse_query_datetime(request.GET.get('from'), 'from')
        end = parse_query_datetime(request.GET.get('to'), 'to', end_of_day=True)
        tickets = self.get_service('list_tickets_by_date_range_service').execute(start, end)
        return list_response(tickets)


class TicketAPISearchView(BaseAPIView):
    """GET /api/tickets/search/?term=<texto>"""

    def get(self, request: HttpRequest) -> JsonResponse:
        tickets = self.get_service('search_tickets_service').execute(request.GET.get('term', ''))
        return list_response(tickets)


# =============================================================================
# Relatórios
# =============================================================================

class TicketAPISummaryView(BaseAPIView):
    """GET /api/tickets/summary/ - Contagem por status (cinco chaves)."""

    def get(self, request: HttpRequest) -> JsonResponse:
        summary = self.get_service('ticket_summary_service').execute()
        return json_response(success=True, data=summary)


class TicketAPISLAReportView(BaseAPIView):
    """GET /api/tickets/sla-report/ - Tickets não resolvidos frente ao SLA."""

    def get(self, request: HttpRequest) -> JsonResponse:
        return list_response(self.get_service('sla_report_service').execute())


class TicketAPIDistributionView(BaseAPIView):
    """Distribuições (prioridade, categoria): mapa nome -> total."""

    service_name: str = ''

    def get(self, request: HttpRequest) -> JsonResponse:
        distribution = self.get_service(self.service_name).execute()
        return json_response(success=True, data=distribution)


class TicketAPIResolutionStatsView(BaseAPIView):
    """GET /api/tickets/stats/resolution/"""

    def get(self, request: HttpRequest) -> JsonResponse:
        stats = self.get_service('resolution_statistics_service').execute()
        return json_response(success=True, data=stats.to_dict())


class TicketAPIAgentPerformanceView(BaseAPIView):
    """GET /api/tickets/stats/agents/"""

    def get(self, request: HttpRequest) -> JsonResponse:
        return list_response(self.get_service('agent_performance_service').execute())


class TicketAPIDashboardView(BaseAPIView):
    """GET /api/tickets/dashboard/"""

    def get(self, request: HttpRequest) -> JsonResponse:
        stats = self.get_service('dashboard_stats_service').execute()
        return json_response(success=True, data=stats.to_dict())


class CategoryAPIListView(BaseAPIView):
    """GET /api/categories/?active=true"""

    def get(self, request: HttpRequest) -> JsonResponse:
        categories = self.get_service('list_categories_service').execute(
            active_only=parse_bool(request.GET.get('active'))
        )
        return list_response(categories)
