"""Validation of raw tool-call arguments.

Required fields raise ``ArgumentValidationError``. Optional fields whose value
has the wrong primitive type are treated as absent and never raise.
"""

import math
from collections.abc import Mapping
from typing import Any

from .exceptions import ArgumentValidationError
from .models import MAX_DEPTH, MIN_DEPTH, SearchOverrides, SearchRequest, SingleTermArgs


def _optional_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _optional_bool(value: Any) -> bool | None:
    return value if isinstance(value, bool) else None


def _optional_float(value: Any) -> float | None:
    # bool is an int subclass but never a coordinate
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        coordinate = float(value)
    except OverflowError:
        return None
    return coordinate if math.isfinite(coordinate) else None


def _optional_depth(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int) or not MIN_DEPTH <= value <= MAX_DEPTH:
        return None
    return value


def _require_mapping(args: Any) -> Mapping[str, Any]:
    if not isinstance(args, Mapping):
        raise ArgumentValidationError("Invalid arguments provided")
    return args


def _parse_overrides(args: Mapping[str, Any]) -> SearchOverrides:
    return SearchOverrides(
        language=_optional_str(args.get("language")),
        region=_optional_str(args.get("region")),
        latitude=_optional_float(args.get("latitude")),
        longitude=_optional_float(args.get("longitude")),
        depth=_optional_depth(args.get("depth")),
        fresh=_optional_bool(args.get("fresh")),
        async_=_optional_bool(args.get("async")),
        notify_webhooks=_optional_bool(args.get("notifyWebhooks")),
    )


def validate_search_args(args: Any) -> SearchRequest:
    """Validate arguments of ``search_people_also_ask`` and fill in defaults."""
    args = _require_mapping(args)

    terms = args.get("terms")
    if not isinstance(terms, (list, tuple)):
        raise ArgumentValidationError("terms parameter is required and must be an array")
    if not terms:
        raise ArgumentValidationError("terms parameter must contain at least one search term")
    for index, term in enumerate(terms):
        if not isinstance(term, str) or not term.strip():
            raise ArgumentValidationError(f"terms[{index}] must be a non-empty string")

    return SearchRequest.from_overrides(terms, _parse_overrides(args))


def validate_single_term_args(args: Any) -> SingleTermArgs:
    """Validate arguments of ``search_single_term``; overrides stay undefaulted."""
    args = _require_mapping(args)

    term = args.get("term")
    if not isinstance(term, str) or not term.strip():
        raise ArgumentValidationError("term parameter is required and must be a string")

    return SingleTermArgs(term=term, **_parse_overrides(args).model_dump())
