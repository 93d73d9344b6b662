"""
Exceptions raised by the mock resource service.

Each exception maps onto one HTTP failure shape. The handlers registered in
``forge_mock.main`` render them: malformed requests and disallowed methods as
plain text, missing entities as a JSON body with a ``message`` field.
"""

from typing import Optional


class MockServiceError(Exception):
    """Base exception for mock service failures."""

    status_code: int = 500

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or "mock_service_error"


class MalformedRequestError(MockServiceError):
    """
    Raised when a request body cannot be decoded.

    Covers invalid JSON, bodies of the wrong shape, a missing create
    envelope and field values that fail model validation.
    """

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message, "malformed_request")


class ResourceNotFoundError(MockServiceError):
    """Raised when an identifier does not resolve to a stored entity."""

    status_code = 404

    def __init__(self, kind: str, resource_id: str, display_name: Optional[str] = None):
        super().__init__(f"{display_name or kind.capitalize()} not found", "not_found")
        self.kind = kind
        self.resource_id = resource_id


class MethodNotAllowedError(MockServiceError):
    """Raised when a path exists but does not support the request method."""

    status_code = 405

    def __init__(self, method: str, path: str):
        super().__init__("Method not allowed", "method_not_allowed")
        self.method = method
        self.path = path
