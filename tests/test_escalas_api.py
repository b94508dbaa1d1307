"""
Testes de ponta a ponta da API de escalas (Flask test client).
"""

from unittest.mock import patch

from sqlalchemy.exc import OperationalError

from escala_abate.core.database import db


def _criar(client, payload):
    response = client.post('/escalas', json=payload)
    assert response.status_code == 201, response.get_json()
    return response.get_json()


def test_listar_vazio(client, app):
    response = client.get('/escalas')
    assert response.status_code == 200
    assert response.get_json() == []


def test_criar_e_obter(client, payload_valido):
    criada = _criar(client, payload_valido)

    response = client.get(f"/escalas/{criada['id']}")

    assert response.status_code == 200
    corpo = response.get_json()
    assert corpo['status'] == 'Agendado'
    assert corpo['produtor']['nome'] == 'Fazenda A'
    assert corpo['dataAbate'] == '2024-03-15T10:00:00.000Z'


def test_criar_payload_invalido(client, dados_base):
    response = client.post('/escalas', json={'volume': 0, 'dataAbate': 'xx'})

    assert response.status_code == 400
    corpo = response.get_json()
    assert corpo['error'] == 'Dados inválidos'
    assert corpo['details']['dataAbate'] == ['Data inválida']
    assert 'volume' in corpo['details']
    assert 'produtorId' in corpo['details']


def test_criar_corpo_malformado(client, app):
    response = client.post('/escalas', data='{nao e json', content_type='application/json')

    assert response.status_code == 400
    assert '_schema' in response.get_json()['details']


def test_criar_referencia_inexistente(client, payload_valido):
    response = client.post('/escalas', json=dict(payload_valido, plantaId=999))

    assert response.status_code == 404
    assert response.get_json()['error'] == 'Produtor ou Planta não encontrado'
    assert client.get('/escalas').get_json() == []


def test_obter_id_invalido(client, app):
    response = client.get('/escalas/abc')

    assert response.status_code == 400
    assert response.get_json() == {'error': 'ID inválido'}


def test_obter_inexistente(client, app):
    response = client.get('/escalas/999')

    assert response.status_code == 404
    assert response.get_json() == {'error': 'Escala não encontrada'}


ID_ENORME = 10**20


def test_id_acima_da_faixa_da_coluna(client, payload_valido):
    criada = _criar(client, payload_valido)
    url = f'/escalas/{ID_ENORME}'

    response = client.get(url)
    assert response.status_code == 404
    assert response.get_json() == {'error': 'Escala não encontrada'}
    assert client.put(url, json={'volume': 5}).status_code == 404
    assert client.delete(url).status_code == 404

    response = client.post('/escalas', json=dict(payload_valido, produtorId=ID_ENORME))
    assert response.status_code == 404
    assert response.get_json()['error'] == 'Produtor ou Planta não encontrado'

    response = client.put(f"/escalas/{criada['id']}", json={'plantaId': ID_ENORME})
    assert response.status_code == 404
    assert response.get_json() == {'error': 'Planta não encontrada'}

    assert [e['id'] for e in client.get('/escalas').get_json()] == [criada['id']]


def test_id_com_digito_nao_ascii(client, app):
    response = client.get('/escalas/²')

    assert response.status_code == 400
    assert response.get_json() == {'error': 'ID inválido'}


def test_atualizar(client, payload_valido, dados_base):
    criada = _criar(client, dict(payload_valido, observacoes='Lote A1'))

    response = client.put(f"/escalas/{criada['id']}", json={
        'status': 'Em Trânsito',
        'produtorId': dados_base['produtor_b'],
        'observacoes': None,
    })

    assert response.status_code == 200
    corpo = response.get_json()
    assert corpo['status'] == 'Em Trânsito'
    assert corpo['produtor']['nome'] == 'Fazenda B'
    assert corpo['observacoes'] is None
    assert corpo['volume'] == payload_valido['volume']


def test_atualizar_erros(client, payload_valido):
    criada = _criar(client, payload_valido)
    url = f"/escalas/{criada['id']}"

    assert client.put('/escalas/x', json={}).status_code == 400
    assert client.put(url, json={'volume': -1}).status_code == 400
    assert client.put('/escalas/999', json={'volume': 5}).get_json() == {
        'error': 'Escala não encontrada para atualização'
    }

    response = client.put(url, json={'produtorId': 999})
    assert response.status_code == 404
    assert response.get_json() == {'error': 'Produtor não encontrado'}

    response = client.put(url, json={'plantaId': 999})
    assert response.status_code == 404
    assert response.get_json() == {'error': 'Planta não encontrada'}


def test_excluir(client, payload_valido):
    criada = _criar(client, payload_valido)
    url = f"/escalas/{criada['id']}"

    response = client.delete(url)
    assert response.status_code == 200
    assert response.get_json() == {'message': 'Escala deletada com sucesso'}

    assert client.delete(url).status_code == 404
    assert client.get(url).status_code == 404
    assert client.delete('/escalas/0').status_code == 400


def test_listar_com_filtro_e_ordenacao(client, dados_base):
    _criar(client, {
        'dataAbate': '2024-01-02', 'volume': 50,
        'produtorId': dados_base['produtor_a'], 'plantaId': dados_base['planta_x'],
    })
    _criar(client, {
        'dataAbate': '2024-01-01', 'volume': 10, 'status': 'Concluído',
        'produtorId': dados_base['produtor_b'], 'plantaId': dados_base['planta_y'],
    })

    por_produtor = client.get('/escalas', query_string={'produtor': 'fazenda a'}).get_json()
    assert [e['volume'] for e in por_produtor] == [50]

    por_status = client.get('/escalas', query_string={'status': 'Concluído'}).get_json()
    assert [e['volume'] for e in por_status] == [10]

    por_volume = client.get('/escalas?ordenar=volume&direcao=desc').get_json()
    assert [e['volume'] for e in por_volume] == [50, 10]

    sem_direcao = client.get('/escalas?ordenar=volume').get_json()
    assert [e['volume'] for e in sem_direcao] == [50, 10]

    crescente = client.get('/escalas?ordenar=volume&direcao=asc').get_json()
    assert [e['volume'] for e in crescente] == [10, 50]

    assert client.get('/escalas?ordenar=peso').status_code == 400
    assert client.get('/escalas?ordenar=volume&direcao=cima').status_code == 400


def test_plantas_e_produtores_ordenados(client, dados_base):
    plantas = client.get('/plantas').get_json()
    produtores = client.get('/produtores').get_json()

    assert [p['nome'] for p in plantas] == ['Abatedouro Y', 'Frigorífico X']
    assert [p['nome'] for p in produtores] == ['Fazenda A', 'Fazenda B']
    assert produtores[0]['email'] == 'a@fazenda.com'


def test_falha_do_banco_responde_500_generico(client, dados_base):
    falha = OperationalError('SELECT', {}, Exception('database is locked'))

    with patch.object(db.session, 'execute', side_effect=falha):
        response = client.get('/escalas')
        plantas = client.get('/plantas')

    assert response.status_code == 500
    assert response.get_json() == {'error': 'Erro interno ao buscar escalas'}
    assert plantas.status_code == 500
    assert 'locked' not in plantas.get_data(as_text=True)


def test_erro_inesperado_responde_500_generico(client, app):
    with patch('escala_abate.escalas.services.listar_escalas', side_effect=RuntimeError('bug')):
        response = client.get('/escalas')

    assert response.status_code == 500
    assert response.get_json() == {'error': 'Erro interno do servidor'}
