"""
API Views JSON para o domínio de Agentes.

Endpoints (prefixo /api/agents/):
- GET    /               - Listar (?active=true para só ativos)
- POST   /               - Cadastrar
- GET    /stats/         - Agentes por carga (tickets em aberto)
- GET    /<id>/          - Obter
- PUT    /<id>/          - Atualização parcial
- DELETE /<id>/          - Desativar (mantém atribuições)
- GET    /<id>/tickets/  - Tickets atribuídos
"""

import logging

from django.http import HttpRequest, JsonResponse

from src.core.agents.dtos import CreateAgentInputDTO, UpdateAgentInputDTO

from ..shared.api import BaseAPIView, json_response, list_response, optional_bool, parse_bool

logger = logging.getLogger(__name__)


class AgentAPIListView(BaseAPIView):
    """
    GET /api/agents/ - Lista agentes por nome
    POST /api/agents/ - Cadastra agente
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        agents = self.get_service('list_agents_service').execute(
            active_only=parse_bool(request.GET.get('active'))
        )
        return list_response(agents)

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Body JSON:
        {
            "full_name": "string (obrigatório)",
            "email": "string (obrigatório)",
            "department": "string" (opcional),
            "role": "string" (opcional, default "Agent")
        }
        """
        data = self.parse_body(request)
        input_dto = CreateAgentInputDTO(
            full_name=data.get('full_name', ''),
            email=data.get('email', ''),
            department=data.get('department'),
            role=data.get('role'),
        )
        output = self.get_service('create_agent_service').execute(input_dto)
        logger.info(f"API: Agente cadastrado: {output.id}")

        return json_response(success=True, data=output.to_dict(), status=201)


class AgentAPIDetailView(BaseAPIView):
    """GET/PUT/DELETE /api/agents/<id>/"""

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        agent = self.get_service('get_agent_service').execute(pk)
        return json_response(success=True, data=agent.to_dict())

    def put(self, request: HttpRequest, pk: int) -> JsonResponse:
        data = self.parse_body(request)
        input_dto = UpdateAgentInputDTO(
            agent_id=pk,
            full_name=data.get('full_name'),
            email=data.get('email'),
            department=data.get('department'),
            role=data.get('role'),
            is_active=optional_bool(data, 'is_active'),
        )
        output = self.get_service('update_agent_service').execute(input_dto)
        return json_response(success=True, data=output.to_dict())

    def delete(self, request: HttpRequest, pk: int) -> JsonResponse:
        self.get_service('deactivate_agent_service').execute(pk)
        logger.info(f"API: Agente {pk} desativado")
        return json_response(success=True, data={'id': pk, 'is_active': False})


class AgentAPITicketsView(BaseAPIView):
    """GET /api/agents/<id>/tickets/"""

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        tickets = self.get_service('list_tickets_by_agent_service').execute(pk)
        return list_response(tickets)


class AgentAPIStatsView(BaseAPIView):
    """GET /api/agents/stats/ - Ordenados por tickets em aberto."""

    def get(self, request: HttpRequest) -> JsonResponse:
        return list_response(self.get_service('list_agents_with_stats_service').execute())
