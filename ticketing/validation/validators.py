import json
import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import ErrorDetails

from ticketing.core.errors import ValidationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

ERROR_CODE_MAP: dict[str, str] = {
    "missing": "REQUIRED",
    "null_not_allowed": "INVALID_TYPE",
    "string_too_short": "TOO_SMALL",
    "string_too_long": "TOO_BIG",
    "too_short": "TOO_SMALL",
    "too_long": "TOO_BIG",
    "string_pattern_mismatch": "INVALID_STRING",
    "enum": "INVALID_ENUM",
    "literal_error": "INVALID_ENUM",
    "uuid_parsing": "INVALID_UUID",
    "uuid_type": "INVALID_UUID",
    "uuid_version": "INVALID_UUID",
    "extra_forbidden": "UNRECOGNIZED_KEYS",
    "empty_payload": "EMPTY_PAYLOAD",
}


class ValidationService:
    """Runs pydantic schemas and turns their failures into ``ValidationError``."""

    @classmethod
    def validate(cls, schema: type[ModelT], data: Any, context: str) -> ModelT:
        """Validate ``data`` against ``schema``.

        Every violation found is reported at once; validation never stops at
        the first failing field.
        """
        logger.debug(
            "Starting validation for %s (keys=%s)",
            context,
            sorted(data) if isinstance(data, Mapping) else type(data).__name__,
        )
        try:
            result = schema.model_validate(data)
        except PydanticValidationError as exc:
            details = cls.format_errors(exc, schema)
            logger.warning("Validation failed for %s: %s", context, details)
            raise ValidationError(f"Validation failed for {context}", details) from exc

        logger.debug("Validation successful for %s", context)
        return result

    @staticmethod
    def safe_validate(schema: type[ModelT], data: Any) -> ModelT | None:
        try:
            return schema.model_validate(data)
        except PydanticValidationError:
            return None

    @classmethod
    def format_errors(
        cls,
        error: PydanticValidationError,
        schema: type[BaseModel] | None = None,
    ) -> list[dict[str, str]]:
        overrides: dict[tuple[str, str], str] = getattr(schema, "error_messages", {})
        details = []
        for item in error.errors(include_url=False, include_input=False):
            field = ".".join(str(part) for part in item["loc"])
            code = cls.get_error_code(item["type"])
            message = overrides.get((field, code)) or cls._default_message(item, field, code)
            details.append({"field": field, "message": message, "code": code})
        return details

    @staticmethod
    def get_error_code(error_type: str) -> str:
        if error_type in ERROR_CODE_MAP:
            return ERROR_CODE_MAP[error_type]
        if error_type.startswith(("datetime_", "date_")):
            return "INVALID_DATE"
        if error_type.endswith("_type"):
            return "INVALID_TYPE"
        return "VALIDATION_ERROR"

    @staticmethod
    def _default_message(item: ErrorDetails, field: str, code: str) -> str:
        if code == "INVALID_ENUM":
            expected = str(item.get("ctx", {}).get("expected", ""))
            allowed = expected.replace("'", "").replace(" or ", ", ")
            label = field.rsplit(".", 1)[-1]
            return f"{label[:1].upper()}{label[1:]} must be one of: {allowed}"
        if code == "UNRECOGNIZED_KEYS":
            return f"Unrecognized key: '{field}'"
        return item["msg"]

    @classmethod
    def validate_request_body(
        cls,
        body: str | bytes | None,
        schema: type[ModelT],
        context: str,
    ) -> ModelT:
        if not body:
            raise ValidationError(f"{context} request body is required")

        try:
            text = body.decode("utf-8") if isinstance(body, bytes) else body
            parsed = json.loads(text)
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise ValidationError(f"{context} request body must be valid JSON") from exc

        return cls.validate(schema, parsed, context)

    @classmethod
    def validate_path_params(
        cls,
        params: Mapping[str, str] | None,
        schema: type[ModelT],
        context: str,
    ) -> ModelT:
        if not params:
            raise ValidationError(f"{context} path parameters are required")
        return cls.validate(schema, dict(params), context)

    @classmethod
    def validate_query_params(
        cls,
        params: Mapping[str, str] | None,
        schema: type[ModelT],
        context: str,
    ) -> ModelT:
        return cls.validate(schema, dict(params or {}), context)
