"""
Validadores compartilhados entre Clientes e Agentes.

Pessoas cadastradas (clientes e agentes) têm as mesmas regras
de nome e email; o email é normalizado (trim + minúsculas) para
que a unicidade seja case-insensitive.
"""

from typing import Optional
import re

from .exceptions import ValidationError


EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
EMAIL_MAX_LENGTH = 150
FULL_NAME_MAX_LENGTH = 100


def clean_text(value: Optional[str], field_name: str) -> str:
    """
    Remove espaços de um campo texto vindo da entrada.

    None vira string vazia; qualquer outro tipo não-string é rejeitado.

    Raises:
        ValidationError: Se o valor não for texto
    """
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} deve ser texto", field=field_name)
    return value.strip()


def normalize_email(email: Optional[str], field_name: str = "email") -> str:
    """Normaliza email para comparação case-insensitive."""
    return clean_text(email, field_name).lower()


def blank_to_none(value: Optional[str], field_name: str = "value") -> Optional[str]:
    """Converte string vazia/em branco em None, removendo espaços."""
    return clean_text(value, field_name) or None


def validate_email(email: Optional[str], field_name: str = "email") -> str:
    """
    Valida e normaliza email.

    Returns:
        Email normalizado

    Raises:
        ValidationError: Se vazio ou malformado
    """
    normalized = normalize_email(email, field_name)
    if not normalized:
        raise ValidationError("Email é obrigatório", field=field_name)
    if len(normalized) > EMAIL_MAX_LENGTH or not EMAIL_PATTERN.match(normalized):
        raise ValidationError(f"Email inválido: {email}", field=field_name)
    return normalized


def validate_full_name(full_name: Optional[str]) -> str:
    """Valida nome completo (obrigatório, até 100 caracteres)."""
    cleaned = clean_text(full_name, "full_name")
    if not cleaned:
        raise ValidationError("Nome completo é obrigatório", field="full_name")
    if len(cleaned) > FULL_NAME_MAX_LENGTH:
        raise ValidationError(
            f"Nome completo deve ter no máximo {FULL_NAME_MAX_LENGTH} caracteres",
            field="full_name",
        )
    return cleaned
