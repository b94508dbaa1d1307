import os

# O Config falha sem DATABASE_URL; precisa existir antes do import
os.environ.setdefault('DATABASE_URL', 'sqlite://')
os.environ.setdefault('FUSO_UTC_OFFSET_MINUTOS', '-180')

import pytest

from config import Config
from escala_abate import create_app
from escala_abate.cadastros import services as cadastros_services
from escala_abate.core.database import db


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    RATELIMIT_ENABLED = False
    FUSO_UTC_OFFSET_MINUTOS = -180


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def dados_base(app):
    """Dois produtores e duas plantas; devolve os ids."""
    produtor_a = cadastros_services.upsert_produtor('Fazenda A', email='a@fazenda.com')
    produtor_b = cadastros_services.upsert_produtor('Fazenda B')
    planta_x = cadastros_services.upsert_planta('Frigorífico X', cidade='Goiânia', estado='GO')
    planta_y = cadastros_services.upsert_planta('Abatedouro Y', cidade='Rio Verde', estado='GO')
    return {
        'produtor_a': produtor_a.id,
        'produtor_b': produtor_b.id,
        'planta_x': planta_x.id,
        'planta_y': planta_y.id,
    }


@pytest.fixture
def payload_valido(dados_base):
    return {
        'dataAbate': '2024-03-15T10:00:00.000Z',
        'volume': 50,
        'produtorId': dados_base['produtor_a'],
        'plantaId': dados_base['planta_x'],
    }
