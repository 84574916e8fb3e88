"""
Exceções de Domínio do Support Desk.

Este módulo define exceções específicas do domínio que permitem
comunicar erros de forma clara e tipada entre as camadas.

Hierarquia:
    DomainException (base)
    ├── ValidationError (entrada inválida)
    ├── EntityNotFoundError (cliente/agente/ticket inexistente)
    ├── ConflictError (email duplicado, ticket duplicado)
    ├── BusinessRuleViolationError (regra de negócio violada)
    │   └── InvalidStatusTransitionError (transição de status proibida)
    └── RepositoryError (falha inesperada de persistência)

Cada exceção carrega um `code` estável que os adapters usam para
escolher a categoria de resposta (400, 404, 409, 422, 500).
"""


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Todas as exceções específicas do domínio devem herdar desta classe.
    Isso permite capturar qualquer erro de domínio de forma genérica.

    Example:
        try:
            service.execute(input_dto)
        except DomainException as e:
            logger.error(f"Erro de domínio: {e}")
    """

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        """Serializa exceção para dicionário (útil para APIs)."""
        return {
            "error": self.code,
            "message": self.message,
        }


class ValidationError(DomainException):
    """
    Erro de validação de dados de entrada.

    Lançada quando dados fornecidos não atendem aos requisitos
    mínimos para processamento (campo obrigatório ausente,
    enum malformado, intervalo de datas invertido).

    Example:
        if not subject.strip():
            raise ValidationError("Assunto é obrigatório", field="subject")
    """

    def __init__(self, message: str, field: str = None):
        self.field = field
        code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code)

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        return result


class EntityNotFoundError(DomainException):
    """
    Entidade não encontrada no repositório.

    Lançada quando uma busca por ID não retorna resultado.

    Example:
        customer = repo.get_by_id(customer_id)
        if not customer:
            raise EntityNotFoundError(
                f"Cliente {customer_id} não encontrado",
                entity_type="Customer",
                entity_id=customer_id,
            )
    """

    def __init__(self, message: str, entity_type: str = None, entity_id=None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message, "ENTITY_NOT_FOUND")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.entity_type:
            result["entity_type"] = self.entity_type
        if self.entity_id is not None:
            result["entity_id"] = self.entity_id
        return result


class ConflictError(DomainException):
    """
    Conflito com estado existente.

    Lançada quando a operação colide com um registro que já existe:
    email repetido de cliente/agente ou ticket duplicado dentro da
    janela de supressão.

    Example:
        if repo.email_exists(email):
            raise ConflictError(
                f"Cliente com email {email} já existe",
                rule="unique_email",
            )
    """

    def __init__(self, message: str, rule: str = None):
        self.rule = rule
        super().__init__(message, "CONFLICT")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.rule:
            result["rule"] = self.rule
        return result


class BusinessRuleViolationError(DomainException):
    """
    Violação de regra de negócio.

    Lançada quando uma operação viola uma regra de negócio
    estabelecida no domínio.
    """

    def __init__(self, message: str, rule: str = None, code: str = None):
        self.rule = rule
        super().__init__(message, code or "BUSINESS_RULE_VIOLATION")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.rule:
            result["rule"] = self.rule
        return result


class InvalidStatusTransitionError(BusinessRuleViolationError):
    """
    Transição de status não permitida pela máquina de estados do ticket.

    Attributes:
        current_status: Nome do status de origem
        target_status: Nome do status pretendido

    Example:
        raise InvalidStatusTransitionError("Closed", "OnHold")
    """

    def __init__(self, current_status: str, target_status: str):
        self.current_status = current_status
        self.target_status = target_status
        super().__init__(
            f"Transição de status inválida de {current_status} para {target_status}",
            rule="status_transition",
            code="INVALID_STATUS_TRANSITION",
        )

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["from"] = self.current_status
        result["to"] = self.target_status
        return result


class RepositoryError(DomainException):
    """
    Falha inesperada na camada de persistência.

    Adapters convertem erros do banco nesta exceção para que o
    caller registre o contexto e responda com erro interno.
    Nenhuma operação é repetida automaticamente.
    """

    def __init__(self, message: str):
        super().__init__(message, "INTERNAL_ERROR")
