"""
Utilidades de data.

Convenção: o banco guarda datas "naive" em UTC; a API troca strings
ISO-8601 terminadas em 'Z'.
"""

from datetime import datetime, timedelta, timezone

from dateutil.parser import isoparse


def interpretar_data(valor) -> datetime:
    """
    Converte string ISO-8601 (ou datetime) para datetime naive em UTC.

    Raises:
        ValueError: se o texto não for uma data válida.
    """
    if isinstance(valor, datetime):
        instante = valor
    elif isinstance(valor, str):
        instante = isoparse(valor.strip())
    else:
        raise ValueError(f"Data inválida: {valor!r}")

    if instante.tzinfo is not None:
        instante = instante.astimezone(timezone.utc).replace(tzinfo=None)
    return instante


def formatar_data_iso(instante: datetime) -> str:
    """2024-03-15 00:00 -> '2024-03-15T00:00:00.000Z'"""
    return instante.isoformat(timespec='milliseconds') + 'Z'


def agora_utc() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def offset_local() -> timedelta:
    """Offset do fuso do servidor em relação ao UTC (ex.: -3h em Brasília)."""
    return datetime.now().astimezone().utcoffset() or timedelta(0)
