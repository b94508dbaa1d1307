"""
Camada de Serviço dos Cadastros (Produtor e Planta)

Leitura ordenada por nome e upsert pelo nome único (usado na carga inicial).
"""

from typing import List, Optional

from escala_abate.core.database import db, operacao_banco
from escala_abate.core.logger import get_logger
from escala_abate.models import Planta, Produtor

logger = get_logger(__name__)


def listar_produtores() -> List[dict]:
    with operacao_banco('Erro interno ao buscar produtores'):
        produtores = db.session.execute(
            db.select(Produtor).order_by(Produtor.nome.asc())
        ).scalars().all()
        return [p.to_dict() for p in produtores]


def listar_plantas() -> List[dict]:
    with operacao_banco('Erro interno ao buscar plantas'):
        plantas = db.session.execute(
            db.select(Planta).order_by(Planta.nome.asc())
        ).scalars().all()
        return [p.to_dict() for p in plantas]


def upsert_produtor(nome: str, email: Optional[str] = None, telefone: Optional[str] = None) -> Produtor:
    """
    Retorna o produtor com este nome; cria se não existir.
    Um registro existente NÃO é alterado.
    """
    with operacao_banco(f"Erro ao gravar produtor '{nome}'"):
        produtor = db.session.execute(
            db.select(Produtor).filter_by(nome=nome)
        ).scalar_one_or_none()
        if produtor is None:
            produtor = Produtor(nome=nome, email=email, telefone=telefone)
            db.session.add(produtor)
            db.session.commit()
            logger.info(f"Produtor criado: {nome}")
        return produtor


def upsert_planta(nome: str, cidade: str, estado: str) -> Planta:
    """Mesma regra do upsert_produtor, pela chave `nome`."""
    with operacao_banco(f"Erro ao gravar planta '{nome}'"):
        planta = db.session.execute(
            db.select(Planta).filter_by(nome=nome)
        ).scalar_one_or_none()
        if planta is None:
            planta = Planta(nome=nome, cidade=cidade, estado=estado)
            db.session.add(planta)
            db.session.commit()
            logger.info(f"Planta criada: {nome}")
        return planta
