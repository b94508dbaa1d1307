"""
Constantes Globais do Sistema.
Fonte Única da Verdade (Single Source of Truth) para os rótulos de escala.
"""

# Convenção da interface: o serviço NÃO rejeita status fora desta lista.
STATUS_ESCALA = [
    'Agendado',
    'Confirmado',
    'Em Trânsito',
    'Concluído',
    'Cancelado',
]

STATUS_PADRAO = 'Agendado'
STATUS_CONCLUIDO = 'Concluído'

# Quantidade de escalas exibidas em "Atividade Recente" no painel
LIMITE_RECENTES = 5

# Colunas aceitas na ordenação da listagem
COLUNAS_ORDENACAO = ('dataAbate', 'produtor', 'planta', 'volume', 'status')
DIRECOES_ORDENACAO = ('asc', 'desc')

DIAS_SEMANA = ['Dom', 'Seg', 'Ter', 'Qua', 'Qui', 'Sex', 'Sáb']

# Maior id que cabe na coluna INTEGER (64 bits com sinal)
ID_MAXIMO = 2**63 - 1
