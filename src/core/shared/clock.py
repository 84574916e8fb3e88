"""
Helpers de tempo do domínio.

Todos os timestamps do domínio são UTC e timezone-aware.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Retorna o instante atual em UTC."""
    return datetime.now(timezone.utc)


def elapsed_hours(start: datetime, end: datetime) -> float:
    """Diferença exata em horas entre dois instantes (sem arredondamento)."""
    return (end - start).total_seconds() / 3600


def hours_between(start: datetime, end: datetime) -> float:
    """
    Diferença em horas entre dois instantes, arredondada a 2 casas.

    Args:
        start: Instante inicial
        end: Instante final

    Returns:
        Horas decorridas (negativo se end < start)
    """
    return round(elapsed_hours(start, end), 2)
