"""
Camada de Serviço (Service Layer) das Escalas

Único ponto que altera escalas. Valida o payload, garante que produtor e
planta existem e aplica os valores padrão antes de gravar.
"""

from typing import Any, List

from sqlalchemy.orm import joinedload

from escala_abate.core.constants import ID_MAXIMO, STATUS_PADRAO
from escala_abate.core.database import db, operacao_banco
from escala_abate.core.erros import ArgumentoInvalido, ErroValidacao, NaoEncontrado
from escala_abate.core.logger import get_logger
from escala_abate.models import Escala, Planta, Produtor
from .forms import validar_atualizacao, validar_criacao

# Inicializa o logger para este módulo
logger = get_logger(__name__)


def converter_id(valor: Any) -> int:
    """
    Aceita int ou string só com dígitos ASCII; precisa ser positivo.
    """
    if isinstance(valor, bool):
        raise ArgumentoInvalido('ID inválido')
    # isdigit() sozinho aceita '²', que int() rejeita
    if isinstance(valor, str) and valor.strip().isascii() and valor.strip().isdigit():
        valor = int(valor.strip())
    if not isinstance(valor, int) or valor <= 0:
        raise ArgumentoInvalido('ID inválido')
    return valor


def _buscar(modelo, registro_id: int):
    """db.session.get que trata ids fora da faixa da coluna como inexistentes."""
    if registro_id > ID_MAXIMO:
        return None
    return db.session.get(modelo, registro_id)


def listar_escalas() -> List[dict]:
    """
    Retorna todas as escalas com produtor e planta, por data do abate (asc).
    """
    with operacao_banco('Erro interno ao buscar escalas'):
        escalas = db.session.execute(
            db.select(Escala)
            .options(joinedload(Escala.produtor), joinedload(Escala.planta))
            .order_by(Escala.data_abate.asc(), Escala.id.asc())
        ).scalars().all()
        return [escala.to_dict() for escala in escalas]


def obter_escala(escala_id: Any) -> dict:
    escala_id = converter_id(escala_id)
    with operacao_banco('Erro interno ao buscar escala'):
        escala = _buscar(Escala, escala_id)
        if escala is None:
            raise NaoEncontrado('Escala não encontrada')
        return escala.to_dict()


def criar_escala(payload: Any) -> dict:
    """
    Cria uma escala.

    As duas verificações de existência rodam sempre; a resposta traz o
    erro combinado e, em `details`, qual referência faltou.
    """
    resultado = validar_criacao(payload)
    if not resultado.valido:
        raise ErroValidacao(resultado.erros)
    dados = resultado.dados

    with operacao_banco('Erro interno ao criar escala'):
        produtor = _buscar(Produtor, dados['produtorId'])
        planta = _buscar(Planta, dados['plantaId'])

        if produtor is None or planta is None:
            faltando = {}
            if produtor is None:
                faltando['produtorId'] = ['Produtor não encontrado']
            if planta is None:
                faltando['plantaId'] = ['Planta não encontrada']
            logger.warning(f"Criação recusada, referências ausentes: {faltando}")
            raise NaoEncontrado('Produtor ou Planta não encontrado', faltando)

        nova = Escala(
            data_abate=dados['dataAbate'],
            volume=dados['volume'],
            status=dados.get('status') or STATUS_PADRAO,
            observacoes=dados.get('observacoes'),
            produtor_id=produtor.id,
            planta_id=planta.id,
        )
        db.session.add(nova)
        db.session.commit()

        logger.info(f"Escala criada: {nova.id} ({produtor.nome} -> {planta.nome}, {nova.volume} cab.)")
        return nova.to_dict()


def atualizar_escala(escala_id: Any, payload: Any) -> dict:
    """
    Atualização parcial: só os campos enviados mudam.

    Produtor e planta são verificados individualmente, antes da escala.
    """
    escala_id = converter_id(escala_id)
    resultado = validar_atualizacao(payload)
    if not resultado.valido:
        raise ErroValidacao(resultado.erros)
    dados = resultado.dados

    with operacao_banco('Erro interno ao atualizar escala'):
        if 'produtorId' in dados and _buscar(Produtor, dados['produtorId']) is None:
            logger.warning(f"Atualização da escala {escala_id}: produtor {dados['produtorId']} inexistente")
            raise NaoEncontrado('Produtor não encontrado')
        if 'plantaId' in dados and _buscar(Planta, dados['plantaId']) is None:
            logger.warning(f"Atualização da escala {escala_id}: planta {dados['plantaId']} inexistente")
            raise NaoEncontrado('Planta não encontrada')

        escala = _buscar(Escala, escala_id)
        if escala is None:
            raise NaoEncontrado('Escala não encontrada para atualização')

        for campo_api, valor in dados.items():
            setattr(escala, Escala.CAMPOS_API[campo_api], valor)
        db.session.commit()

        logger.info(f"Escala atualizada: {escala_id} (campos: {', '.join(dados) or 'nenhum'})")
        return escala.to_dict()


def excluir_escala(escala_id: Any) -> dict:
    escala_id = converter_id(escala_id)
    with operacao_banco('Erro interno ao deletar escala'):
        escala = _buscar(Escala, escala_id)
        if escala is None:
            raise NaoEncontrado('Escala não encontrada para deleção')

        db.session.delete(escala)
        db.session.commit()

        logger.info(f"Escala deletada: {escala_id}")
        return {'message': 'Escala deletada com sucesso'}
