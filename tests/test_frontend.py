import pytest
import requests

from frontend import app as frontend_app


class FakeResponse:
    def __init__(self, payload, status=200):
        self.payload = payload
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"status {self.status_code}")

    def json(self):
        return self.payload


@pytest.fixture
def client():
    frontend_app.app.config['TESTING'] = True
    with frontend_app.app.test_client() as c:
        yield c


def test_index_renders_examples(client):
    rv = client.get('/')
    assert rv.status_code == 200
    assert b'http://192.168.1.1/login' in rv.data
    assert b'riskChart' in rv.data


def test_submit_forwards_trimmed_url(client, monkeypatch):
    calls = []

    def fake_post(url, json=None, headers=None, timeout=None):
        calls.append((url, json))
        return FakeResponse({'phish_score': 0, 'verdict': 'Legitimate'})

    monkeypatch.setattr(frontend_app.requests, 'post', fake_post)
    rv = client.post('/submit', json={'url': ' http://example.com '})
    assert rv.status_code == 200
    assert rv.get_json()['verdict'] == 'Legitimate'
    assert calls == [(frontend_app.BACKEND_URL + '/analyze', {'url': 'http://example.com'})]


def test_submit_missing_url(client):
    assert client.post('/submit', json={}).status_code == 400


def test_submit_backend_failure(client, monkeypatch):
    def fake_post(*args, **kwargs):
        raise requests.ConnectionError('refused')

    monkeypatch.setattr(frontend_app.requests, 'post', fake_post)
    rv = client.post('/submit', json={'url': 'http://example.com'})
    assert rv.status_code == 502
    assert 'backend analyze failed' in rv.get_json()['error']


@pytest.mark.parametrize('body', [{'url': 5}, ['http://example.com'], {'url': None}])
def test_submit_rejects_non_string_url(client, body):
    rv = client.post('/submit', json=body)
    assert rv.status_code == 400
    assert rv.get_json()['error'] == 'missing url'
