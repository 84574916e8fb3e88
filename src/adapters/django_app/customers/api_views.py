"""
API Views JSON para o domínio de Clientes.

Endpoints (prefixo /api/customers/):
- GET    /                     - Listar (?active=true para só ativos)
- POST   /                     - Cadastrar
- GET    /stats/               - Clientes por total de tickets
- GET    /by-email/?email=     - Buscar por email
- GET    /<id>/                - Obter
- PUT    /<id>/                - Atualização parcial
- DELETE /<id>/                - Desativar (soft delete)
- GET    /<id>/tickets/        - Tickets do cliente
"""

import logging

from django.http import HttpRequest, JsonResponse

from src.core.customers.dtos import CreateCustomerInputDTO, UpdateCustomerInputDTO

from ..shared.api import BaseAPIView, json_response, list_response, optional_bool, parse_bool

logger = logging.getLogger(__name__)


class CustomerAPIListView(BaseAPIView):
    """
    GET /api/customers/ - Lista clientes por nome
    POST /api/customers/ - Cadastra cliente
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        customers = self.get_service('list_customers_service').execute(
            active_only=parse_bool(request.GET.get('active'))
        )
        return list_response(customers)

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Body JSON:
        {
            "full_name": "string (obrigatório)",
            "email": "string (obrigatório)",
            "phone": "string" (opcional),
            "address": "string" (opcional)
        }
        """
        data = self.parse_body(request)
        input_dto = CreateCustomerInputDTO(
            full_name=data.get('full_name', ''),
            email=data.get('email', ''),
            phone=data.get('phone'),
            address=data.get('address'),
        )
        output = self.get_service('create_customer_service').execute(input_dto)
        logger.info(f"API: Cliente cadastrado: {output.id}")

        return json_response(success=True, data=output.to_dict(), status=201)


class CustomerAPIDetailView(BaseAPIView):
    """GET/PUT/DELETE /api/customers/<id>/"""

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        customer = self.get_service('get_customer_service').execute(pk)
        return json_response(success=True, data=customer.to_dict())

    def put(self, request: HttpRequest, pk: int) -> JsonResponse:
        """Atualização parcial: campos ausentes não são alterados."""
        data = self.parse_body(request)
        input_dto = UpdateCustomerInputDTO(
            customer_id=pk,
            full_name=data.get('full_name'),
            email=data.get('email'),
            phone=data.get('phone'),
            address=data.get('address'),
            is_active=optional_bool(data, 'is_active'),
        )
        output = self.get_service('update_customer_service').execute(input_dto)
        return json_response(success=True, data=output.to_dict())

    def delete(self, request: HttpRequest, pk: int) -> JsonResponse:
        self.get_service('deactivate_customer_service').execute(pk)
        logger.info(f"API: Cliente {pk} desativado")
        return json_response(success=True, data={'id': pk, 'is_active': False})


class CustomerAPITicketsView(BaseAPIView):
    """GET /api/customers/<id>/tickets/"""

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        tickets = self.get_service('list_tickets_by_customer_service').execute(pk)
        return list_response(tickets)


class CustomerAPIStatsView(BaseAPIView):
    """GET /api/customers/stats/ - Ordenados por total de tickets."""

    def get(self, request: HttpRequest) -> JsonResponse:
        return list_response(self.get_service('list_customers_by_ticket_count_service').execute())


class CustomerAPIByEmailView(BaseAPIView):
    """GET /api/customers/by-email/?email=<email>"""

    def get(self, request: HttpRequest) -> JsonResponse:
        customer = self.get_service('get_customer_by_email_service').execute(
            request.GET.get('email', '')
        )
        return json_response(success=True, data=customer.to_dict())
