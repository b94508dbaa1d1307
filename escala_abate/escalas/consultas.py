"""
Consultas sobre a lista de escalas já carregada (sem acesso ao banco).

Todas as funções recebem escalas no formato da API (dict com `produtor`
e `planta` embutidos) e devolvem novas estruturas, sem efeitos colaterais.
Filtros e ordenação chegam como parâmetros explícitos.
"""

import calendar
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Optional

from escala_abate.core.constants import (
    COLUNAS_ORDENACAO,
    DIAS_SEMANA,
    DIRECOES_ORDENACAO,
    LIMITE_RECENTES,
    STATUS_CONCLUIDO,
    STATUS_PADRAO,
)
from escala_abate.core.datas import interpretar_data, offset_local
from escala_abate.core.logger import get_logger

logger = get_logger(__name__)


def _instante(escala: dict) -> datetime:
    return interpretar_data(escala['dataAbate'])


def _contem(texto: str, trecho: Optional[str]) -> bool:
    if not trecho:
        return True
    return trecho.lower() in (texto or '').lower()


# === FILTRO E ORDENAÇÃO ===

def filtrar_escalas(
    escalas: Iterable[dict],
    produtor: Optional[str] = None,
    planta: Optional[str] = None,
    status: Optional[str] = None,
) -> List[dict]:
    """
    Produtor e planta: trecho do nome, sem diferenciar maiúsculas.
    Status: igualdade exata. Filtro vazio não restringe nada.
    """
    return [
        escala for escala in escalas
        if _contem(escala['produtor']['nome'], produtor)
        and _contem(escala['planta']['nome'], planta)
        and (not status or escala['status'] == status)
    ]


_CHAVES_ORDENACAO = {
    'dataAbate': _instante,
    'produtor': lambda e: e['produtor']['nome'].lower(),
    'planta': lambda e: e['planta']['nome'].lower(),
    'volume': lambda e: e['volume'],
    'status': lambda e: e['status'].lower(),
}


def ordenar_escalas(escalas: Iterable[dict], coluna: str = 'dataAbate', direcao: str = 'desc') -> List[dict]:
    """
    Ordena por uma das COLUNAS_ORDENACAO; textos comparados em minúsculas.

    Raises:
        ValueError: coluna ou direção desconhecida.
    """
    if coluna not in COLUNAS_ORDENACAO:
        raise ValueError(f"Coluna de ordenação inválida: {coluna}")
    if direcao not in DIRECOES_ORDENACAO:
        raise ValueError(f"Direção de ordenação inválida: {direcao}")

    return sorted(escalas, key=_CHAVES_ORDENACAO[coluna], reverse=(direcao == 'desc'))


# === PAINEL (DASHBOARD) ===

def calcular_kpis(escalas: Iterable[dict]) -> Dict[str, int]:
    escalas = list(escalas)
    return {
        'totalEscalas': len(escalas),
        'escalasAgendadas': sum(1 for e in escalas if e['status'] == STATUS_PADRAO),
        'escalasConcluidas': sum(1 for e in escalas if e['status'] == STATUS_CONCLUIDO),
        'volumeTotal': sum(e['volume'] for e in escalas),
    }


def contar_por_status(escalas: Iterable[dict]) -> Dict[str, int]:
    """Histograma status -> quantidade, na ordem em que cada status aparece."""
    contagem: Dict[str, int] = {}
    for escala in escalas:
        contagem[escala['status']] = contagem.get(escala['status'], 0) + 1
    return contagem


def escalas_recentes(escalas: Iterable[dict], limite: int = LIMITE_RECENTES) -> List[dict]:
    return ordenar_escalas(escalas, 'dataAbate', 'desc')[:limite]


# === CALENDÁRIO ===

def agrupar_por_dia(escalas: Iterable[dict], utc_offset: Optional[timedelta] = None) -> Dict[str, List[dict]]:
    """
    Agrupa as escalas por dia ('YYYY-MM-DD').

    O dia é o de `instante - utc_offset`, isto é, soma-se o deslocamento do
    fuso (-3h em Brasília vira +3h) antes de truncar. Com isso uma data
    gravada à meia-noite UTC continua no mesmo dia do calendário.

    Escalas com data ilegível são ignoradas (com aviso no log).
    """
    if utc_offset is None:
        utc_offset = offset_local()

    por_dia: Dict[str, List[dict]] = {}
    for escala in escalas:
        try:
            dia = (_instante(escala) - utc_offset).date()
        except (KeyError, TypeError, ValueError, OverflowError):
            logger.warning(f"Formato de data inválido para escala ID {escala.get('id')}: {escala.get('dataAbate')}")
            continue
        por_dia.setdefault(dia.isoformat(), []).append(escala)
    return por_dia


def dias_do_mes(ano: int, mes: int) -> List[date]:
    _, total = calendar.monthrange(ano, mes)
    return [date(ano, mes, dia) for dia in range(1, total + 1)]


def montar_calendario(
    escalas: Iterable[dict],
    ano: int,
    mes: int,
    utc_offset: Optional[timedelta] = None,
) -> dict:
    """
    Grade mensal: `inicioSemana` é o número de casas vazias antes do dia 1
    (semana começando no domingo).
    """
    por_dia = agrupar_por_dia(escalas, utc_offset)
    dias = dias_do_mes(ano, mes)
    return {
        'ano': ano,
        'mes': mes,
        # weekday(): segunda=0; no calendário domingo=0
        'inicioSemana': (dias[0].weekday() + 1) % 7,
        'diasSemana': DIAS_SEMANA,
        'dias': [
            {'data': dia.isoformat(), 'escalas': por_dia.get(dia.isoformat(), [])}
            for dia in dias
        ],
    }
