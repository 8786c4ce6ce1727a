"""Operation Dispatch - explicit routing from operation name to core function.

Invariants:
    - Every name->function mapping is visible in OPERATIONS, no getattr magic
    - execute() never raises: unknown names, bad arguments and typed core errors
      all come back as error envelopes
    - Arguments are validated against the function signature before the call
    - Settings only fill arguments the request omitted
    - Every call is logged (info on success, warning on error)

Design Decisions:
    - pydantic validate_call per handler: type coercion and missing/extra
      argument detection come from the function annotations
"""

import logging
from collections.abc import Callable
from typing import Any

from pydantic import ValidationError, validate_call

from strkit.config import Settings, get_settings
from strkit.core import (
    case_transforms,
    cleanup,
    encoding,
    hashing,
    length_padding,
    predicates,
    search_extract,
    similarity,
)
from strkit.core.errors import (
    ErrorContext,
    RequestValidationError,
    StrkitError,
    UnknownOperationError,
)
from strkit.schemas.operation import OperationRequest, OperationResult

logger = logging.getLogger(__name__)

# Adding an operation requires editing this dict
OPERATIONS: dict[str, Callable[..., Any]] = {
    # Case & format transforms (8)
    "slugify": case_transforms.slugify,
    "to_camel_case": case_transforms.to_camel_case,
    "to_pascal_case": case_transforms.to_pascal_case,
    "to_snake_case": case_transforms.to_snake_case,
    "to_kebab_case": case_transforms.to_kebab_case,
    "to_title_case": case_transforms.to_title_case,
    "capitalize_words": case_transforms.capitalize_words,
    "ucwords_custom": case_transforms.ucwords_custom,

    # Length & padding (4)
    "truncate": length_padding.truncate,
    "pad_string": length_padding.pad_string,
    "split_by_length": length_padding.split_by_length,
    "repeat": length_padding.repeat,

    # Predicates (7)
    "starts_with": predicates.starts_with,
    "ends_with": predicates.ends_with,
    "contains": predicates.contains,
    "is_empty": predicates.is_empty,
    "is_palindrome": predicates.is_palindrome,
    "is_anagram": predicates.is_anagram,
    "is_mirror": predicates.is_mirror,

    # Search & extraction (6)
    "between": search_extract.between,
    "replace_first": search_extract.replace_first,
    "extract_initials": search_extract.extract_initials,
    "mask_string": search_extract.mask_string,
    "tokenize": search_extract.tokenize,
    "count_words": search_extract.count_words,

    # Cleanup (4)
    "remove_extra_spaces": cleanup.remove_extra_spaces,
    "remove_special_chars": cleanup.remove_special_chars,
    "normalize_accents": cleanup.normalize_accents,
    "reverse": cleanup.reverse,

    # Encoding & hashing (7)
    "sanitize_for_html": encoding.sanitize_for_html,
    "html_entity_encode": encoding.html_entity_encode,
    "html_entity_decode": encoding.html_entity_decode,
    "url_encode": encoding.url_encode,
    "url_decode": encoding.url_decode,
    "hash_text": hashing.hash_text,
    "random_string": hashing.random_string,

    # Analysis (2)
    "similarity": similarity.similarity,
    "char_frequency": similarity.char_frequency,
}


def _format_validation_errors(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)


class OperationDispatch:
    """Routes operation name -> core function. Explicit registration."""

    def __init__(self, settings: Settings | None = None):
        settings = settings or get_settings()
        self._handlers = {
            name: validate_call(func) for name, func in OPERATIONS.items()
        }
        self._defaults: dict[str, dict[str, Any]] = {
            "hash_text": {"algo": settings.default_hash_algorithm},
            "random_string": {"length": settings.random_string_length},
            "truncate": {"length": settings.truncate_length},
        }

    def operations(self) -> list[str]:
        return sorted(self._handlers)

    def execute(self, operation: str, arguments: dict | None = None) -> dict:
        """Run one operation. Returns an ok envelope or an error envelope."""
        try:
            request = OperationRequest(
                operation=operation, arguments=arguments or {},
            )
        except ValidationError as exc:
            return self._error(RequestValidationError(
                f"Invalid request: {_format_validation_errors(exc)}",
                ErrorContext(operation=str(operation)),
            ))

        name = request.operation
        handler = self._handlers.get(name)
        if handler is None:
            return self._error(UnknownOperationError(name))

        kwargs = {**self._defaults.get(name, {}), **request.arguments}
        try:
            value = handler(**kwargs)
        except ValidationError as exc:
            return self._error(RequestValidationError(
                f"Invalid arguments for '{name}': {_format_validation_errors(exc)}",
                ErrorContext(operation=name),
            ))
        except StrkitError as exc:
            exc.context.operation = name
            return self._error(exc)

        logger.info(f"Operation {name} ok", extra={"operation": name})
        return OperationResult(operation=name, result=value).model_dump()

    @staticmethod
    def _error(error: StrkitError) -> dict:
        logger.warning(
            f"Operation {error.context.operation} failed: {error.message}",
            extra={
                "operation": error.context.operation,
                "error_code": error.code,
                "argument": error.context.argument,
            },
        )
        return error.to_response()
