"""
Rotas do Painel

GET /painel      -> KPIs, contagem por status (gráfico) e atividade recente.
GET /calendario  -> grade do mês com as escalas de cada dia.
"""

from datetime import timedelta

from flask import current_app, jsonify, request

from . import painel_bp
from escala_abate.core.datas import agora_utc
from escala_abate.core.erros import ArgumentoInvalido
from escala_abate.escalas import consultas
from escala_abate.escalas import services as escalas_services


def _parametro_inteiro(nome: str, padrao, minimo=None, maximo=None):
    valor = request.args.get(nome)
    if valor is None or valor == '':
        return padrao
    try:
        numero = int(valor)
    except ValueError:
        raise ArgumentoInvalido(f"Parâmetro '{nome}' inválido")
    if (minimo is not None and numero < minimo) or (maximo is not None and numero > maximo):
        raise ArgumentoInvalido(f"Parâmetro '{nome}' fora do intervalo")
    return numero


@painel_bp.route('/painel', methods=['GET'])
def painel():
    escalas = escalas_services.listar_escalas()
    contagem = consultas.contar_por_status(escalas)
    return jsonify({
        'kpis': consultas.calcular_kpis(escalas),
        'statusChart': [{'name': nome, 'count': total} for nome, total in contagem.items()],
        'recentes': consultas.escalas_recentes(escalas),
    })


@painel_bp.route('/calendario', methods=['GET'])
def calendario():
    hoje = agora_utc()
    ano = _parametro_inteiro('ano', hoje.year, minimo=1, maximo=9999)
    mes = _parametro_inteiro('mes', hoje.month, minimo=1, maximo=12)

    # Offset em minutos relativo ao UTC; None = fuso do servidor
    minutos = _parametro_inteiro(
        'offset', current_app.config.get('FUSO_UTC_OFFSET_MINUTOS'), minimo=-14 * 60, maximo=14 * 60
    )
    utc_offset = timedelta(minutes=minutos) if minutos is not None else None

    escalas = escalas_services.listar_escalas()
    return jsonify(consultas.montar_calendario(escalas, ano, mes, utc_offset))
