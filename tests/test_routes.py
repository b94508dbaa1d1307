def test_health_check(client):
    """Teste da rota de health check."""
    response = client.get('/health')
    assert response.status_code == 200
    assert b"Servidor de Escalas no ar!" in response.data

def test_404_page(client):
    """Rotas inexistentes respondem JSON com a mensagem de erro."""
    response = client.get('/rota-que-nao-existe')
    assert response.status_code == 404
    assert response.get_json() == {'error': 'Recurso não encontrado'}

def test_metodo_nao_permitido(client):
    response = client.patch('/escalas')
    assert response.status_code == 405
    assert response.get_json()['error'] == 'Método não permitido'

def test_cors_header(client):
    """O frontend roda em outra origem."""
    response = client.get('/health', headers={'Origin': 'http://localhost:3000'})
    assert response.headers.get('Access-Control-Allow-Origin') in ('*', 'http://localhost:3000')

def test_lista_de_status(client):
    response = client.get('/status')
    assert response.status_code == 200
    assert response.get_json() == ['Agendado', 'Confirmado', 'Em Trânsito', 'Concluído', 'Cancelado']
