"""
Rotas do Módulo de Cadastros
"""

from flask import jsonify

from . import cadastros_bp
from . import services as cadastros_services
from escala_abate.core.constants import STATUS_ESCALA


@cadastros_bp.route('/plantas', methods=['GET'])
def listar_plantas():
    return jsonify(cadastros_services.listar_plantas())


@cadastros_bp.route('/produtores', methods=['GET'])
def listar_produtores():
    return jsonify(cadastros_services.listar_produtores())


@cadastros_bp.route('/status', methods=['GET'])
def listar_status():
    """Opções de status sugeridas à interface (o serviço aceita qualquer texto)."""
    return jsonify(STATUS_ESCALA)
