"""
Módulo Principal da Aplicação (Application Factory)
"""

from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix # Necessário atrás de proxy reverso
from config import Config

from .core.database import db
from .core.erros import registrar_tratadores
from .core.extensions import cors, limiter
from .core.logger import get_logger

logger = get_logger(__name__)

def create_app(config_class=Config):
    """
    Cria e configura uma instância da aplicação Flask.
    """
    
    app = Flask(__name__, instance_relative_config=True)

    # Ajusta o Flask para entender que está atrás de um Proxy
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_prefix=1)

    # 1. Carrega a configuração
    app.config.from_object(config_class)
    app.json.sort_keys = False

    # 2. Inicializa as extensões
    db.init_app(app)
    limiter.init_app(app)
    cors.init_app(app, resources={r"/*": {"origins": app.config.get('CORS_ORIGINS', '*')}})

    # 3. Respostas JSON para qualquer erro
    registrar_tratadores(app)

    # 4. Configura os Blueprints (Módulos)
    from .escalas import escalas_bp
    app.register_blueprint(escalas_bp)

    from .cadastros import cadastros_bp
    app.register_blueprint(cadastros_bp)

    from .painel import painel_bp
    app.register_blueprint(painel_bp)

    # 5. Tabelas (ambientes sem migração externa)
    if app.config.get('CRIAR_TABELAS', True):
        from . import models  # registra os modelos no metadata
        with app.app_context():
            db.create_all()
        logger.info("Tabelas verificadas/criadas.")

    # 6. Rota de Health Check
    @app.route("/health")
    @limiter.exempt
    def health_check():
        return "Servidor de Escalas no ar!", 200

    return app
