"""
Testes para a API JSON (Django test Client + Container DI real).

Testa:
- CRUD de clientes e agentes
- Ciclo de vida do ticket (abrir, atribuir, mudar status)
- Consultas e relatórios
- Mapeamento de erros de domínio para HTTP (400/404/409/422/500)
"""

import json
from unittest.mock import patch

import pytest
from django.test import Client

from src.core.shared.exceptions import RepositoryError

pytestmark = pytest.mark.django_db


@pytest.fixture
def client():
    return Client()


def _post(client, url, payload):
    return client.post(url, data=json.dumps(payload), content_type='application/json')


def _put(client, url, payload):
    return client.put(url, data=json.dumps(payload), content_type='application/json')


@pytest.fixture
def open_ticket(client, categories, customer_model):
    response = _post(client, '/api/tickets/', {
        'customer_id': customer_model.id,
        'category_id': 1,
        'subject': 'Internet lenta',
        'description': 'Conexão caindo desde ontem',
        'priority': 'High',
    })
    assert response.status_code == 201
    return response.json()['data']


class TestHealth:

    def test_health(self, client):
        response = client.get('/health/')

        assert response.status_code == 200
        assert response.json() == {'success': True, 'data': {'status': 'ok'}}


class TestCustomerAPI:

    def test_cadastrar_e_obter(self, client):
        response = _post(client, '/api/customers/', {
            'full_name': 'Jane Roe',
            'email': 'Jane@Example.com',
            'phone': '555-0101',
        })

        assert response.status_code == 201
        data = response.json()['data']
        assert data['email'] == 'jane@example.com'
        assert data['ticket_count'] == 0

        detail = client.get(f"/api/customers/{data['id']}/")
        assert detail.json()['data']['full_name'] == 'Jane Roe'

    def test_email_duplicado_409(self, client, customer_model):
        response = _post(client, '/api/customers/', {
            'full_name': 'Outro',
            'email': 'JOHN.DOE@example.com',
        })

        assert response.status_code == 409
        body = response.json()
        assert body['success'] is False
        assert body['meta']['error'] == 'CONFLICT'

    def test_validacao_400(self, client):
        response = _post(client, '/api/customers/', {'full_name': '', 'email': 'x@example.com'})

        assert response.status_code == 400
        assert response.json()['meta']['field'] == 'full_name'

    def test_json_invalido_400(self, client):
        response = client.post('/api/customers/', data='{nope', content_type='application/json')

        assert response.status_code == 400
        assert response.json()['meta']['field'] == 'body'

    def test_atualizar_e_desativar(self, client, customer_model):
        url = f'/api/customers/{customer_model.id}/'

        updated = _put(client, url, {'address': 'Rua A, 10'})
        assert updated.status_code == 200
        assert updated.json()['data']['address'] == 'Rua A, 10'

        deleted = client.delete(url)
        assert deleted.status_code == 200
        assert deleted.json()['data'] == {'id': customer_model.id, 'is_active': False}

        active = client.get('/api/customers/?active=true')
        assert active.json()['data'] == []
        assert active.json()['meta']['total'] == 0

    def test_buscar_por_email(self, client, customer_model):
        response = client.get('/api/customers/by-email/?email=John.Doe@example.com')

        assert response.status_code == 200
        assert response.json()['data']['id'] == customer_model.id

    def test_inexistente_404(self, client):
        response = client.get('/api/customers/999/')

        assert response.status_code == 404
        assert response.json()['meta']['entity_type'] == 'Customer'

    def test_ranking_e_tickets_do_cliente(self, client, open_ticket, customer_model):
        stats = client.get('/api/customers/stats/').json()['data']
        tickets = client.get(f'/api/customers/{customer_model.id}/tickets/').json()

        assert stats[0]['ticket_count'] == 1
        assert tickets['meta']['total'] == 1
        assert tickets['data'][0]['id'] == open_ticket['id']


class TestAgentAPI:

    def test_cadastrar_agente(self, client):
        response = _post(client, '/api/agents/', {
            'full_name': 'Carol White',
            'email': 'carol@support.com',
            'department': 'Support',
            'role': 'Supervisor',
        })

        assert response.status_code == 201
        assert response.json()['data']['role'] == 'Supervisor'

    def test_desativar_mantem_atribuicao(self, client, open_ticket, agent_model):
        _put(client, f"/api/tickets/{open_ticket['id']}/assign/", {'agent_id': agent_model.id})

        response = client.delete(f'/api/agents/{agent_model.id}/')
        ticket = client.get(f"/api/tickets/{open_ticket['id']}/").json()['data']

        assert response.status_code == 200
        assert ticket['agent_id'] == agent_model.id
        assert client.get('/api/agents/?active=1').json()['data'] == []

    def test_stats_e_tickets_do_agente(self, client, open_ticket, agent_model):
        _put(client, f"/api/tickets/{open_ticket['id']}/assign/", {'agent_id': agent_model.id})

        stats = client.get('/api/agents/stats/').json()['data']
        tickets = client.get(f'/api/agents/{agent_model.id}/tickets/').json()['data']

        assert stats[0]['assigned_tickets'] == 1
        assert [t['id'] for t in tickets] == [open_ticket['id']]


class TestTicketLifecycleAPI:

    def test_abrir_ticket(self, open_ticket):
        assert open_ticket['status'] == 'Open'
        assert open_ticket['status_value'] == 0
        assert open_ticket['priority'] == 'High'
        assert open_ticket['customer_name'] == 'John Doe'
        assert open_ticket['category_name'] == 'Technical Support'
        assert open_ticket['updated_at'] is None
        assert open_ticket['resolved_at'] is None

    def test_abrir_duplicado_409(self, client, open_ticket, customer_model):
        response = _post(client, '/api/tickets/', {
            'customer_id': customer_model.id,
            'category_id': 2,
            'subject': 'internet LENTA',
            'description': 'De novo',
        })

        assert response.status_code == 409
        assert response.json()['meta']['rule'] == 'duplicate_ticket'

    def test_abrir_sem_customer_id_400(self, client, categories):
        response = _post(client, '/api/tickets/', {'category_id': 1, 'subject': 's', 'description': 'd'})

        assert response.status_code == 400
        assert response.json()['meta']['field'] == 'customer_id'

    def test_abrir_assunto_nao_texto_400(self, client, categories, customer_model):
        response = _post(client, '/api/tickets/', {
            'customer_id': customer_model.id,
            'category_id': 1,
            'subject': 123,
            'description': 'd',
        })

        assert response.status_code == 400
        assert response.json()['meta']['field'] == 'subject'

    def test_abrir_categoria_inexistente_404(self, client, categories, customer_model):
        response = _post(client, '/api/tickets/', {
            'customer_id': customer_model.id,
            'category_id': 99,
            'subject': 's',
            'description': 'd',
        })

        assert response.status_code == 404

    def test_atribuir_avanca_status(self, client, open_ticket, agent_model):
        response = _put(client, f"/api/tickets/{open_ticket['id']}/assign/", {'agent_id': agent_model.id})

        data = response.json()['data']
        assert response.status_code == 200
        assert data['status'] == 'InProgress'
        assert data['agent_name'] == 'Alice Johnson'
        assert data['updated_at'] is not None

    def test_resolver_e_reabrir(self, client, open_ticket):
        url = f"/api/tickets/{open_ticket['id']}/status/"

        resolved = _put(client, url, {'status': 'Resolved', 'notes': 'Modem trocado'}).json()['data']
        reopened = _put(client, url, {'status': 'InProgress'}).json()['data']

        assert resolved['resolved_at'] is not None
        assert resolved['resolution_hours'] is not None
        assert reopened['status'] == 'InProgress'
        assert reopened['resolved_at'] == resolved['resolved_at']

    def test_transicao_invalida_422(self, client, open_ticket):
        url = f"/api/tickets/{open_ticket['id']}/status/"
        _put(client, url, {'status': 'Closed'})

        response = _put(client, url, {'status': 'OnHold'})

        assert response.status_code == 422
        meta = response.json()['meta']
        assert meta['error'] == 'INVALID_STATUS_TRANSITION'
        assert (meta['from'], meta['to']) == ('Closed', 'OnHold')

    def test_status_ausente_400(self, client, open_ticket):
        response = _put(client, f"/api/tickets/{open_ticket['id']}/status/", {})

        assert response.status_code == 400
        assert response.json()['meta']['field'] == 'status'

    def test_ticket_inexistente_404(self, client):
        assert client.get('/api/tickets/999/').status_code == 404


class TestTicketQueriesAPI:

    def test_consultas(self, client, open_ticket):
        tid = open_ticket['id']

        assert [t['id'] for t in client.get('/api/tickets/').json()['data']] == [tid]
        assert client.get('/api/tickets/open/').json()['meta']['total'] == 1
        assert client.get('/api/tickets/resolved/').json()['data'] == []
        assert client.get('/api/tickets/status/Open/').json()['meta']['total'] == 1
        assert client.get('/api/tickets/status/0/').json()['meta']['total'] == 1
        assert client.get('/api/tickets/priority/High/').json()['meta']['total'] == 1
        assert client.get('/api/tickets/search/?term=lenta').json()['meta']['total'] == 1
        assert client.get('/api/tickets/search/?term=').json()['data'] == []

    def test_status_invalido_400(self, client):
        assert client.get('/api/tickets/status/Waiting/').status_code == 400

    def test_intervalo_de_datas(self, client, open_ticket):
        day = open_ticket['created_at'][:10]

        found = client.get(f'/api/tickets/daterange/?from={day}&to={day}')
        inverted = client.get('/api/tickets/daterange/?from=2024-03-10&to=2024-03-01')
        missing = client.get('/api/tickets/daterange/?from=2024-03-10')

        assert found.json()['meta']['total'] == 1
        assert inverted.status_code == 400
        assert missing.status_code == 400

    def test_categorias(self, client, categories):
        response = client.get('/api/categories/?active=true')

        assert response.json()['meta']['total'] == 5
        assert response.json()['data'][1]['name'] == 'Billing'


class TestReportsAPI:

    def test_resumo_sempre_com_cinco_chaves(self, client, db):
        response = client.get('/api/tickets/summary/')

        assert response.json()['data'] == {
            'Open': 0, 'InProgress': 0, 'OnHold': 0, 'Resolved': 0, 'Closed': 0,
        }

    def test_sla_report(self, client, ticket_model_factory):
        old = ticket_model_factory(hours_old=50)
        ticket_model_factory(hours_old=10)

        data = client.get('/api/tickets/sla-report/').json()['data']

        assert [item['sla_status'] for item in data] == ['BREACHED', 'OK']
        assert data[0]['ticket_id'] == old.id

    def test_distribuicoes_e_estatisticas(self, client, ticket_model_factory, categories, agent_model):
        ticket_model_factory(priority=3, category=categories[1], agent=agent_model)
        ticket_model_factory(priority=3, category=categories[1])

        priorities = client.get('/api/tickets/stats/priorities/').json()['data']
        by_category = client.get('/api/tickets/stats/categories/').json()['data']
        resolution = client.get('/api/tickets/stats/resolution/').json()['data']
        agents = client.get('/api/tickets/stats/agents/').json()['data']
        dashboard = client.get('/api/tickets/dashboard/').json()['data']

        assert priorities == {'Critical': 2}
        assert by_category == {'Billing': 2}
        assert resolution['resolved_count'] == 0
        assert resolution['within_target_percent'] == 100.0
        assert agents[0]['assigned'] == 1
        assert dashboard['total_tickets'] == 2
        assert dashboard['open_tickets'] == 2


class TestErrorMapping:

    def test_repository_error_500(self, client, db):
        with patch(
            'src.adapters.django_app.tickets.repositories.DjangoTicketRepository.status_summary',
            side_effect=RepositoryError("falha"),
        ):
            response = client.get('/api/tickets/summary/')

        assert response.status_code == 500
        assert response.json()['error'] == 'Erro interno do servidor'

    def test_erro_inesperado_500(self, client, db):
        with patch(
            'src.adapters.django_app.tickets.repositories.DjangoTicketRepository.list_all',
            side_effect=RuntimeError("bug"),
        ):
            response = client.get('/api/tickets/')

        assert response.status_code == 500
        assert response.json()['success'] is False
