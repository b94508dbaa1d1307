"""
Módulo do Painel (Blueprint)

Indicadores do dashboard e visão de calendário, calculados sobre a
listagem completa de escalas.
"""

from flask import Blueprint

painel_bp = Blueprint('painel_bp', __name__)

from . import routes
