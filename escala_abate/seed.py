"""
Carga inicial (seed) do banco.

Produtores e plantas são gravados por upsert no nome (rodar de novo não
duplica). As quatro escalas de exemplo são criadas a cada execução.
"""

from datetime import datetime, timedelta
from typing import Optional

from escala_abate.cadastros import services as cadastros_services
from escala_abate.core.database import db, operacao_banco
from escala_abate.core.datas import agora_utc
from escala_abate.core.logger import get_logger
from escala_abate.models import Escala

logger = get_logger(__name__)


def popular_banco(agora: Optional[datetime] = None) -> dict:
    """
    Deve rodar dentro de um app_context.

    Args:
        agora: instante de referência (UTC naive). Padrão: agora.

    Returns:
        dict com as contagens gravadas.
    """
    agora = agora or agora_utc()
    logger.info("Iniciando seed...")

    produtor1 = cadastros_services.upsert_produtor(
        'Fazenda Boa Esperança', email='contato@boaesperanca.com', telefone='11987654321'
    )
    produtor2 = cadastros_services.upsert_produtor(
        'Agropecuária Santa Fé', email='agro@santafe.com.br', telefone='62912345678'
    )
    logger.info(f"Produtores: {produtor1.nome}, {produtor2.nome}")

    planta1 = cadastros_services.upsert_planta('Frigorífico Central', cidade='Goiânia', estado='GO')
    planta2 = cadastros_services.upsert_planta('Abatedouro Regional Sul', cidade='Rio Verde', estado='GO')
    logger.info(f"Plantas: {planta1.nome}, {planta2.nome}")

    escalas = [
        Escala(data_abate=agora - timedelta(days=1), volume=50, status='Concluído',
               produtor_id=produtor1.id, planta_id=planta1.id, observacoes='Lote A1 concluído.'),
        Escala(data_abate=agora, volume=75, status='Agendado',
               produtor_id=produtor2.id, planta_id=planta1.id),
        Escala(data_abate=agora + timedelta(days=1), volume=100, status='Agendado',
               produtor_id=produtor1.id, planta_id=planta2.id, observacoes='Confirmar transporte.'),
        Escala(data_abate=agora + timedelta(days=7), volume=80, status='Agendado',
               produtor_id=produtor2.id, planta_id=planta2.id),
    ]
    with operacao_banco("Erro ao gravar escalas do seed"):
        db.session.add_all(escalas)
        db.session.commit()
    logger.info(f"Criadas {len(escalas)} escalas. Seed finalizado.")

    return {'produtores': 2, 'plantas': 2, 'escalas': len(escalas)}
