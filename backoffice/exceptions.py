"""
Exceptions raised while talking to the remote business API
"""

from typing import Any, Dict, Optional


class ApiError(Exception):
    """Non-2xx response from the remote API"""

    def __init__(
        self,
        message: str,
        status_code: int,
        code: Optional[str] = None,
        details: Optional[Any] = None
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.details = details

    def __repr__(self):
        return f'<ApiError {self.status_code} {self.code or ""}: {self.message}>'

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        result = {
            'error': self.code or 'API_ERROR',
            'message': self.message,
            'status_code': self.status_code
        }
        if self.details is not None:
            result['details'] = self.details
        return result


class PayloadMappingError(Exception):
    """Response payload lacks the identifiers required to build an entity"""

    def __init__(self, entity: str, messages: Any):
        super().__init__(f"Malformed {entity} payload: {messages}")
        self.entity = entity
        self.messages = messages

class InvalidRequestError(ValueError):
    """Caller asked for something no server call could satisfy"""
