"""
Módulo de Escalas (Blueprint)

Define o Blueprint do Flask para o CRUD de escalas de abate.
"""

from flask import Blueprint

# Cria uma instância do Blueprint para 'escalas'
escalas_bp = Blueprint('escalas_bp', __name__)

# Importa as rotas no final para evitar dependência circular
from . import routes
