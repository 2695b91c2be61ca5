from unittest.mock import MagicMock

from django.test import SimpleTestCase
from rest_framework import status
from rest_framework.exceptions import NotAuthenticated

from api.exceptions import exception_handler
from core.exceptions import (
    AlreadyPaidError, CapacityExceededError, DuplicateError, NotFoundError, PermissionDeniedError,
    SignatureMismatchError, TargetFullError, ValidationError,
)


class ExceptionHandlerTest(SimpleTestCase):
    def handle(self, exc):
        return exception_handler(exc, {"view": MagicMock()})

    def test_status_mapping(self):
        cases = [
            (NotFoundError(resource_type="Room", resource_id="999"), status.HTTP_404_NOT_FOUND),
            (ValidationError(details={"name": "required"}), status.HTTP_400_BAD_REQUEST),
            (CapacityExceededError(), status.HTTP_409_CONFLICT),
            (TargetFullError(), status.HTTP_409_CONFLICT),
            (AlreadyPaidError(), status.HTTP_200_OK),
            (DuplicateError(), status.HTTP_200_OK),
            (SignatureMismatchError(), status.HTTP_400_BAD_REQUEST),
            (PermissionDeniedError(), status.HTTP_403_FORBIDDEN),
        ]
        for exc, expected in cases:
            with self.subTest(exc=exc.__class__.__name__):
                self.assertEqual(self.handle(exc).status_code, expected)

    def test_body_carries_message_code_and_details(self):
        response = self.handle(ValidationError(message="Missing required fields: name", code="MISSING_FIELDS",
                                               details={"name": "This field is required."}))

        self.assertEqual(response.data["detail"], "Missing required fields: name")
        self.assertEqual(response.data["code"], "MISSING_FIELDS")
        self.assertEqual(response.data["details"], {"name": "This field is required."})

    def test_not_found_message(self):
        response = self.handle(NotFoundError(resource_type="Room", resource_id="999"))

        self.assertEqual(response.data["detail"], "Room 999 not found")

    def test_no_op_conditions_flagged_unchanged(self):
        response = self.handle(AlreadyPaidError())

        self.assertFalse(response.data["changed"])

    def test_drf_exceptions_keep_default_handling(self):
        response = self.handle(NotAuthenticated())

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_unexpected_error_hides_internals(self):
        with self.assertLogs("api.exceptions", level="ERROR"):
            response = self.handle(RuntimeError("secret connection string"))

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertNotIn("secret", str(response.data))
