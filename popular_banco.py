"""
Script Utilitário: popular_banco.py
Use este script para carregar os dados de exemplo (produtores, plantas e escalas).
"""

from escala_abate import create_app
from escala_abate.seed import popular_banco

# Inicializa a aplicação para carregar configurações e banco de dados
app = create_app()

if __name__ == "__main__":
    print("--- Populando o banco de dados ---")

    # Precisamos do contexto da aplicação para acessar o banco
    with app.app_context():
        contagem = popular_banco()

    print(f"✅ SUCESSO! {contagem['produtores']} produtores, {contagem['plantas']} plantas "
          f"e {contagem['escalas']} escalas gravados.")
