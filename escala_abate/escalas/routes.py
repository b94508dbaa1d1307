"""
Rotas do Módulo de Escalas

CRUD em /escalas. Os erros de domínio sobem como exceções e viram JSON
nos handlers registrados em core.erros.
"""

from flask import jsonify, request

from . import escalas_bp
from . import services as escalas_services
from .consultas import filtrar_escalas, ordenar_escalas
from escala_abate.core.erros import ArgumentoInvalido


@escalas_bp.route('/escalas', methods=['GET'])
def listar():
    """
    Lista todas as escalas (data do abate crescente).

    Parâmetros opcionais: produtor, planta, status, ordenar, direcao
    (padrão 'desc', como no painel).
    """
    escalas = escalas_services.listar_escalas()

    filtros = {chave: request.args.get(chave) for chave in ('produtor', 'planta', 'status')}
    if any(filtros.values()):
        escalas = filtrar_escalas(escalas, **filtros)

    coluna = request.args.get('ordenar')
    if coluna:
        try:
            escalas = ordenar_escalas(escalas, coluna, request.args.get('direcao', 'desc'))
        except ValueError as e:
            raise ArgumentoInvalido(str(e))

    return jsonify(escalas)


@escalas_bp.route('/escalas', methods=['POST'])
def criar():
    # silent=True: corpo malformado vira erro de validação, não 500
    payload = request.get_json(silent=True)
    return jsonify(escalas_services.criar_escala(payload)), 201


@escalas_bp.route('/escalas/<escala_id>', methods=['GET'])
def obter(escala_id):
    return jsonify(escalas_services.obter_escala(escala_id))


@escalas_bp.route('/escalas/<escala_id>', methods=['PUT'])
def atualizar(escala_id):
    payload = request.get_json(silent=True)
    return jsonify(escalas_services.atualizar_escala(escala_id, payload))


@escalas_bp.route('/escalas/<escala_id>', methods=['DELETE'])
def excluir(escala_id):
    return jsonify(escalas_services.excluir_escala(escala_id))
