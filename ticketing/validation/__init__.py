from ticketing.validation.middleware import (
    ValidatedRequest,
    create_validator,
    validate_body,
    validate_path_params,
    validate_query_params,
    validate_request,
    with_validation,
)
from ticketing.validation.validators import ValidationService

__all__ = [
    "ValidatedRequest",
    "ValidationService",
    "create_validator",
    "validate_body",
    "validate_path_params",
    "validate_query_params",
    "validate_request",
    "with_validation",
]
