"""
Servidor de desenvolvimento da API de escalas.

    $ python run.py              # porta 5000
    $ PORT=8080 python run.py

Precisa de DATABASE_URL (veja .env.example). O esquema é criado na
subida, a menos que CRIAR_TABELAS=0; `python popular_banco.py` carrega os dados
de exemplo.
"""

from escala_abate import create_app

app = create_app()

if __name__ == "__main__":
    # FLASK_DEBUG=1 no .env liga o auto-reload
    app.run(host='0.0.0.0', port=app.config['PORT'], debug=app.config['DEBUG'])
