"""
Taxonomia de Erros da Aplicação

Os serviços levantam estas exceções; a camada HTTP converte cada uma
no corpo padrão { "error": ..., "details": ... } com o status adequado.
"""

from typing import Any, Optional

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from .logger import get_logger

logger = get_logger(__name__)


class ErroEscala(Exception):
    """Base de todos os erros de domínio."""

    status_code = 500

    def __init__(self, mensagem: str, detalhes: Optional[Any] = None):
        super().__init__(mensagem)
        self.mensagem = mensagem
        self.detalhes = detalhes

    def to_dict(self) -> dict:
        corpo = {'error': self.mensagem}
        if self.detalhes:
            corpo['details'] = self.detalhes
        return corpo


class ErroValidacao(ErroEscala):
    """Payload fora do formato esperado. `detalhes` = {campo: [mensagens]}."""
    status_code = 400

    def __init__(self, detalhes: dict, mensagem: str = 'Dados inválidos'):
        super().__init__(mensagem, detalhes)


class ArgumentoInvalido(ErroEscala):
    """Identificador ou parâmetro de consulta malformado."""
    status_code = 400


class NaoEncontrado(ErroEscala):
    status_code = 404


class ErroArmazenamento(ErroEscala):
    """Falha do banco. A mensagem é genérica; o detalhe fica só no log."""
    status_code = 500


def registrar_tratadores(app: Flask) -> None:
    """
    Registra os handlers que garantem resposta JSON para qualquer falha.
    """

    @app.errorhandler(ErroEscala)
    def tratar_erro_dominio(erro: ErroEscala):
        return jsonify(erro.to_dict()), erro.status_code

    @app.errorhandler(HTTPException)
    def tratar_erro_http(erro: HTTPException):
        mensagens = {
            404: 'Recurso não encontrado',
            405: 'Método não permitido',
            429: 'Muitas requisições. Tente novamente mais tarde.',
        }
        return jsonify({'error': mensagens.get(erro.code, erro.name)}), erro.code

    @app.errorhandler(Exception)
    def tratar_erro_inesperado(erro: Exception):
        logger.critical(f"Erro não tratado: {erro}", exc_info=True)
        return jsonify({'error': 'Erro interno do servidor'}), 500
