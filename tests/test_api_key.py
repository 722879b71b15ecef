"""
Tests for API key authentication middleware.
"""

from django.test import TestCase, override_settings
from rest_framework.test import APIClient

CUSTOMER = {
    'first_name': 'Test',
    'last_name': 'User',
    'cpf': '75480224093',
    'email': 'test@email.com',
    'income': '3000.00',
    'password': 'secret',
    'zip_code': '01001000',
    'street': 'Praca da Se, 1',
}


@override_settings(API_KEYS=['test-api-key-123', 'another-key-456'])
class APIKeyAuthTests(TestCase):
    """Test X-API-KEY header authentication."""

    def setUp(self):
        self.client = APIClient()

    def test_missing_api_key_returns_401(self):
        """Request without X-API-KEY → 401."""
        response = self.client.post('/api/customers', CUSTOMER, format='json')
        self.assertEqual(response.status_code, 401)
        data = response.json()
        self.assertEqual(data['status'], 401)
        self.assertEqual(data['title'], 'Unauthorized! Consult the documentation')
        self.assertEqual(data['exception'], 'NotAuthenticated')
        self.assertIn('Authentication required', data['details'][0])

    def test_invalid_api_key_returns_403(self):
        """Request with wrong X-API-KEY → 403."""
        response = self.client.post(
            '/api/customers', CUSTOMER, format='json', HTTP_X_API_KEY='wrong-key',
        )
        self.assertEqual(response.status_code, 403)
        data = response.json()
        self.assertEqual(data['details'], ['Invalid API key.'])

    def test_valid_api_key_passes(self):
        """Request with valid X-API-KEY → proceeds normally."""
        response = self.client.post(
            '/api/customers', CUSTOMER, format='json', HTTP_X_API_KEY='test-api-key-123',
        )
        self.assertEqual(response.status_code, 201)

    def test_second_valid_key_works(self):
        """Multiple API keys are supported."""
        response = self.client.post(
            '/api/customers', CUSTOMER, format='json', HTTP_X_API_KEY='another-key-456',
        )
        self.assertEqual(response.status_code, 201)

    def test_health_endpoint_exempt(self):
        """GET /health/ should work without API key."""
        response = self.client.get('/health/')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['status'], 'healthy')

    def test_all_api_endpoints_require_key(self):
        """All /api/ endpoints should require API key."""
        endpoints = [
            ('post', '/api/customers'),
            ('patch', '/api/customers?customerId=1'),
            ('get', '/api/customers/1'),
            ('delete', '/api/customers/1'),
            ('post', '/api/credits'),
            ('get', '/api/credits?customerId=1'),
            ('get', '/api/credits/8c2a6f4e-2f58-4c1e-9d3e-0b7c1f0a9e11?customerId=1'),
        ]
        for method, url in endpoints:
            response = getattr(self.client, method)(url, format='json')
            self.assertEqual(
                response.status_code, 401,
                f"{method.upper()} {url} should require API key",
            )


@override_settings(API_KEYS=[])
class APIKeyDisabledTests(TestCase):
    """When API_KEYS is empty, middleware should be disabled."""

    def setUp(self):
        self.client = APIClient()

    def test_empty_api_keys_allows_requests(self):
        """With no API_KEYS configured, all requests pass through."""
        response = self.client.post('/api/customers', CUSTOMER, format='json')
        self.assertEqual(response.status_code, 201)
