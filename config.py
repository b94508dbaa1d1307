"""
Módulo de Configuração (Blindado)

Define a classe de configuração principal. Implementa o padrão 'Fail Fast':
se uma variável crítica estiver faltando, a aplicação nem inicia.
"""

import os
from dotenv import load_dotenv

# Carrega variáveis do arquivo .env
load_dotenv()


def _ler_bool(nome: str, padrao: str = 'False') -> bool:
    return os.environ.get(nome, padrao).lower() in ('true', '1')


class Config:
    """
    Classe de configuração base da aplicação.
    """

    # === BANCO DE DADOS (Fail Fast) ===
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL')
    if not SQLALCHEMY_DATABASE_URI:
        raise ValueError("ERRO CRÍTICO: 'DATABASE_URL' não encontrada no .env. A aplicação não pode iniciar sem banco.")

    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Cria as tabelas na inicialização (ambientes sem migração externa)
    CRIAR_TABELAS = _ler_bool('CRIAR_TABELAS', 'True')

    # === FLASK ===
    DEBUG = _ler_bool('FLASK_DEBUG')
    PORT = int(os.environ.get('PORT', '5000'))

    # === CORS (Frontend React em outra origem) ===
    CORS_ORIGINS = [o.strip() for o in os.environ.get('CORS_ORIGINS', '*').split(',') if o.strip()]

    # === RATE LIMITING ===
    RATELIMIT_ENABLED = _ler_bool('RATELIMIT_ENABLED', 'True')
    RATELIMIT_DEFAULT = os.environ.get('RATELIMIT_DEFAULT', '1000 per hour')

    # === CALENDÁRIO ===
    # Offset em minutos relativo ao UTC (ex.: -180 para Brasília).
    # Vazio = usa o fuso do servidor.
    FUSO_UTC_OFFSET_MINUTOS = os.environ.get('FUSO_UTC_OFFSET_MINUTOS')
    if FUSO_UTC_OFFSET_MINUTOS is None:
        print("AVISO: 'FUSO_UTC_OFFSET_MINUTOS' não configurado. O calendário usará o fuso do servidor.")
    else:
        FUSO_UTC_OFFSET_MINUTOS = int(FUSO_UTC_OFFSET_MINUTOS)
