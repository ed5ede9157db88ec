def test_health_endpoint(client):
    resp = client.get('/health')
    assert resp.status_code == 200
    assert resp.get_json().get('status') == 'ok'
    # Check some security headers exist
    assert 'X-Content-Type-Options' in resp.headers
    assert 'X-Frame-Options' in resp.headers


def test_cors_enabled_for_api(client):
    resp = client.get('/api/products', headers={'Origin': 'http://example.com'})
    assert resp.status_code == 200
    # Older flask-cors answers '*', newer releases echo the request origin
    assert resp.headers.get('Access-Control-Allow-Origin') in ('*', 'http://example.com')
