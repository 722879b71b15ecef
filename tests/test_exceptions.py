"""
Tests for the error surface and the DRF exception handler.
"""

from django.db import IntegrityError
from django.test import SimpleTestCase
from rest_framework.exceptions import ValidationError

from apps.core.exceptions import (
    BusinessError,
    ConflictError,
    ErrorKind,
    custom_exception_handler,
    flatten_details,
)


class ErrorKindTests(SimpleTestCase):
    """Every error kind maps to exactly one status."""

    def test_not_found_is_bad_request(self):
        exc = BusinessError('Id 1 not found', kind=ErrorKind.NOT_FOUND)
        self.assertEqual(exc.status_code, 400)

    def test_business_error_defaults_to_invalid(self):
        exc = BusinessError('Invalid Date')
        self.assertEqual(exc.kind, ErrorKind.INVALID)
        self.assertEqual(exc.status_code, 400)
        self.assertEqual(str(exc), 'Invalid Date')

    def test_conflict_is_409(self):
        exc = ConflictError('Cpf 1 already registered')
        self.assertEqual(exc.kind, ErrorKind.CONFLICT)
        self.assertEqual(exc.status_code, 409)


class FlattenDetailsTests(SimpleTestCase):

    def test_plain_detail(self):
        self.assertEqual(flatten_details({'detail': 'Contact admin'}), ['Contact admin'])

    def test_field_errors(self):
        details = flatten_details({
            'first_name': ['This field may not be blank.'],
            'errors': ['Bad payload.'],
        })
        self.assertEqual(details, ['first_name: This field may not be blank.', 'Bad payload.'])

    def test_nested_errors(self):
        details = flatten_details({'address': {'street': ['Required.']}})
        self.assertEqual(details, ['address.street: Required.'])


class ExceptionHandlerTests(SimpleTestCase):
    """Test the rendered error bodies."""

    def test_business_error_body(self):
        response = custom_exception_handler(BusinessError('Invalid Date'), {})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data['title'], 'Bad Request! Consult the documentation')
        self.assertEqual(response.data['status'], 400)
        self.assertEqual(response.data['exception'], 'BusinessError')
        self.assertEqual(response.data['details'], ['Invalid Date'])
        self.assertIn('timestamp', response.data)

    def test_validation_error_body(self):
        exc = ValidationError({'cpf': ['Invalid CPF.']})
        response = custom_exception_handler(exc, {})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data['exception'], 'ValidationError')
        self.assertEqual(response.data['details'], ['cpf: Invalid CPF.'])

    def test_integrity_error_is_conflict(self):
        response = custom_exception_handler(IntegrityError('UNIQUE constraint failed'), {})
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.data['title'], 'Conflict! Consult the documentation')
        self.assertEqual(response.data['exception'], 'IntegrityError')

    def test_unhandled_error_is_500(self):
        with self.assertLogs('apps.core.exceptions', level='ERROR'):
            response = custom_exception_handler(RuntimeError('boom'), {})
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.data['status'], 500)
        self.assertEqual(response.data['exception'], 'RuntimeError')
