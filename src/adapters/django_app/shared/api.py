"""
Helpers compartilhados das APIs JSON.

Formato:
- Entrada: JSON
- Saída: JSON com estrutura {success, data/error, meta}

Mapeamento de erros de domínio para HTTP:
- ValidationError → 400
- EntityNotFoundError → 404
- ConflictError → 409
- BusinessRuleViolationError (inclui transição inválida) → 422
- RepositoryError / erro inesperado → 500
"""

from datetime import datetime
from typing import Any, Dict, Optional
import json
import logging

from django.http import HttpRequest, JsonResponse
from django.utils.dateparse import parse_date, parse_datetime
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from src.core.shared.exceptions import (
    BusinessRuleViolationError,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    RepositoryError,
    ValidationError,
)
from src.config.container import get_container

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}


# =============================================================================
# Helpers
# =============================================================================

def json_response(success: bool, data: Any = None, error: str = None,
                  status: int = 200, meta: Dict = None) -> JsonResponse:
    """
    Cria resposta JSON padronizada.

    Args:
        success: Se operação foi bem sucedida
        data: Dados da resposta
        error: Mensagem de erro (se aplicável)
        status: HTTP status code
        meta: Metadados adicionais

    Returns:
        JsonResponse formatada
    """
    response = {'success': success}

    if data is not None:
        response['data'] = data

    if error is not None:
        response['error'] = error

    if meta is not None:
        response['meta'] = meta

    return JsonResponse(response, status=status)


def list_response(items, meta: Dict = None) -> JsonResponse:
    """Resposta de lista: data com os itens serializados e meta.total."""
    return json_response(
        success=True,
        data=[item.to_dict() for item in items],
        meta={"total": len(items), **(meta or {})},
    )


def parse_json_body(request: HttpRequest) -> Dict:
    """
    Parseia body JSON do request.

    Raises:
        ValidationError: Se JSON inválido ou não for um objeto
    """
    if not request.body:
        return {}

    try:
        data = json.loads(request.body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValidationError(f"JSON inválido: {e}", field="body")

    if not isinstance(data, dict):
        raise ValidationError("Corpo JSON deve ser um objeto", field="body")
    return data


def parse_bool(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in _TRUE_VALUES


def parse_query_datetime(value: Optional[str], field_name: str, end_of_day: bool = False) -> datetime:
    """
    Converte parâmetro de query em datetime.

    Aceita ISO 8601 completo ou apenas a data (YYYY-MM-DD); uma data
    pura vira início do dia, ou fim do dia quando end_of_day=True.

    Raises:
        ValidationError: Se ausente ou malformado
    """
    if not value:
        raise ValidationError(f"Parâmetro {field_name} é obrigatório", field=field_name)

    try:
        day = parse_date(value)
        if day is not None:
            parsed = datetime.combine(day, datetime.max.time() if end_of_day else datetime.min.time())
        else:
            parsed = parse_datetime(value)
    except ValueError:
        parsed = None

    if parsed is None:
        raise ValidationError(f"Data inválida em {field_name}: {value}", field=field_name)
    return parsed


def require_int(data: Dict, key: str) -> int:
    """
    Lê inteiro obrigatório do corpo JSON.

    Raises:
        ValidationError: Se ausente ou não numérico
    """
    value = data.get(key)
    if value is None or value == "":
        raise ValidationError(f"{key} é obrigatório", field=key)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{key} deve ser um inteiro", field=key)


def optional_int(data: Dict, key: str) -> Optional[int]:
    if data.get(key) in (None, ""):
        return None
    return require_int(data, key)


def optional_bool(data: Dict, key: str) -> Optional[bool]:
    value = data.get(key)
    if value is None or isinstance(value, bool):
        return value
    raise ValidationError(f"{key} deve ser booleano", field=key)


# =============================================================================
# Base API View
# =============================================================================

@method_decorator(csrf_exempt, name='dispatch')
class BaseAPIView(View):
    """
    View base para APIs JSON.

    Fornece:
    - Parsing de JSON
    - Acesso ao container DI
    - Tratamento de erros padronizado
    """

    def dispatch(self, request, *args, **kwargs):
        try:
            return super().dispatch(request, *args, **kwargs)
        except Exception as e:
            return self.handle_exception(e)

    def get_service(self, service_name: str):
        """Obtém service do container."""
        return getattr(get_container(), service_name)()

    def parse_body(self, request: HttpRequest) -> Dict:
        return parse_json_body(request)

    def handle_exception(self, e: Exception) -> JsonResponse:
        """
        Trata exceções e retorna resposta apropriada.

        Args:
            e: Exceção capturada

        Returns:
            JsonResponse com erro
        """
        if isinstance(e, ValidationError):
            status = 400
        elif isinstance(e, EntityNotFoundError):
            status = 404
        elif isinstance(e, ConflictError):
            status = 409
        elif isinstance(e, BusinessRuleViolationError):
            status = 422
        elif isinstance(e, RepositoryError):
            logger.error(f"Falha de persistência na API: {e}")
            return json_response(
                success=False,
                error="Erro interno do servidor",
                status=500,
                meta={'error': e.code},
            )
        elif isinstance(e, DomainException):
            status = 400
        else:
            # Erro inesperado
            logger.exception(f"Erro inesperado na API: {e}")
            return json_response(
                success=False,
                error="Erro interno do servidor",
                status=500
            )

        logger.info(f"API: {e.code} ({status}): {e.message}")
        return json_response(
            success=False,
            error=e.message,
            status=status,
            meta=e.to_dict(),
        )


class HealthView(BaseAPIView):
    """GET /health/ - Verificação simples de disponibilidade."""

    def get(self, request: HttpRequest) -> JsonResponse:
        return json_response(success=True, data={'status': 'ok'})
