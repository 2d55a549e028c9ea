from app.core.exceptions import EncodingError, MenuServiceError, PersistenceError, ValidationError
from app.core.logging import get_logger, request_id_ctx

__all__ = [
    "EncodingError",
    "MenuServiceError",
    "PersistenceError",
    "ValidationError",
    "get_logger",
    "request_id_ctx",
]
