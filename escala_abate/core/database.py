"""
Módulo de Conexão com o Banco de Dados (Core)

Instancia o SQLAlchemy, que será inicializado pela Application Factory
e usado pelos "Service Layers" da aplicação.
"""

from contextlib import contextmanager
from typing import Iterator

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.exc import SQLAlchemyError

from .erros import ErroArmazenamento
from .logger import get_logger

logger = get_logger(__name__)

# Instância global do banco de dados (configurada em create_app)
db = SQLAlchemy()


@contextmanager
def operacao_banco(mensagem_erro: str) -> Iterator[None]:
    """
    Executa um bloco de acesso ao banco convertendo falhas do SQLAlchemy
    em ErroArmazenamento (rollback + log com stack trace).

    Erros de domínio (NaoEncontrado, ErroValidacao) passam intactos.
    """
    try:
        yield
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"{mensagem_erro}: {e}", exc_info=True)
        raise ErroArmazenamento(mensagem_erro) from e
