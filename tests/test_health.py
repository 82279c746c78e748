"""
Tests for health check endpoints
"""


def test_health_check(client):
    """Test basic health check endpoint."""
    response = client.get('/api/health')
    assert response.status_code == 200
    data = response.get_json()
    assert data['status'] == 'healthy'
    assert 'timestamp' in data
    assert 'service' in data


def test_liveness_alias(client):
    response = client.get('/api/health/liveness')
    assert response.status_code == 200


def test_readiness_check(client):
    """In-memory SQLite is always reachable."""
    response = client.get('/api/health/readiness')
    assert response.status_code == 200
    data = response.get_json()
    assert data['status'] == 'ready'
    assert data['checks']['database'] == 'connected'


def test_request_id_header(client):
    response = client.get('/api/health', headers={'X-Request-ID': 'trace-123'})
    assert response.headers['X-Request-ID'] == 'trace-123'


def test_unknown_route_uses_error_envelope(client):
    response = client.get('/api/does-not-exist')
    assert response.status_code == 404
    data = response.get_json()
    assert data['success'] is False
    assert data['error']['code'] == 'not_found'


def test_api_docs_spec_lists_task_routes(client):
    response = client.get('/api/swagger.json')
    assert response.status_code == 200
    paths = response.get_json()['paths']
    assert any(path.endswith('/tasks') for path in paths)
    assert '/api/health' in paths
