"""
Módulo de Cadastros (Blueprint)

Dados de referência: produtores e plantas (somente leitura na API).
"""

from flask import Blueprint

cadastros_bp = Blueprint('cadastros_bp', __name__)

from . import routes
