"""Wrap request handlers so they only ever see validated input."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from pydantic import BaseModel

from ticketing.models.http import HttpRequest
from ticketing.validation.validators import ValidationService

T = TypeVar("T")
R = TypeVar("R")
ModelT = TypeVar("ModelT", bound=BaseModel)

Validator = Callable[[HttpRequest], T]
Handler = Callable[[HttpRequest], Awaitable[R]]


@dataclass(slots=True)
class ValidatedRequest:
    body: Any = None
    path_params: Any = None
    query_params: Any = None


def validate_body(schema: type[ModelT], context: str) -> Validator[ModelT]:
    def validator(request: HttpRequest) -> ModelT:
        return ValidationService.validate_request_body(request.body, schema, context)

    return validator


def validate_path_params(schema: type[ModelT], context: str) -> Validator[ModelT]:
    def validator(request: HttpRequest) -> ModelT:
        return ValidationService.validate_path_params(request.path_params, schema, context)

    return validator


def validate_query_params(schema: type[ModelT], context: str) -> Validator[ModelT]:
    def validator(request: HttpRequest) -> ModelT:
        return ValidationService.validate_query_params(request.query_params, schema, context)

    return validator


def validate_request(
    context: str,
    *,
    body: type[BaseModel] | None = None,
    path_params: type[BaseModel] | None = None,
    query_params: type[BaseModel] | None = None,
) -> Validator[ValidatedRequest]:
    """Validate several parts of a request; path parameters are checked first."""

    def validator(request: HttpRequest) -> ValidatedRequest:
        result = ValidatedRequest()
        if path_params is not None:
            result.path_params = ValidationService.validate_path_params(
                request.path_params, path_params, f"{context}PathParams"
            )
        if body is not None:
            result.body = ValidationService.validate_request_body(
                request.body, body, f"{context}Body"
            )
        if query_params is not None:
            result.query_params = ValidationService.validate_query_params(
                request.query_params, query_params, f"{context}QueryParams"
            )
        return result

    return validator


def with_validation(
    validator: Validator[T],
    handler: Callable[[T, HttpRequest], Awaitable[R]],
) -> Handler[R]:
    async def wrapped(request: HttpRequest) -> R:
        validated = validator(request)
        return await handler(validated, request)

    return wrapped


def create_validator(schema: type[ModelT], context: str) -> Callable[[Any], ModelT]:
    def validator(data: Any) -> ModelT:
        return ValidationService.validate(schema, data, context)

    return validator
