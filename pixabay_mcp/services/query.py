"""
Services - Query Handling

Tool argument validation, query repair, and locale negotiation.
"""

import json
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from pixabay_mcp.schemas.search import (
    DEFAULT_MAX_PER_PAGE,
    SearchImagesInput,
    SearchRequest,
)
from pixabay_mcp.services.errors import InvalidSearchRequest

LOCALE_META_KEYS = ("openai/locale", "webplus/i18n")

SUPPORTED_LANGUAGES = frozenset({
    "cs", "da", "de", "en", "es", "fr", "id", "it", "hu", "nl", "no", "pl", "pt",
    "ro", "sk", "fi", "sv", "tr", "vi", "th", "bg", "ru", "el", "ja", "ko", "zh",
})

# Messages for pydantic error types that carry no message of our own.
_ERROR_MESSAGES = {
    "missing": "{field} is required.",
    "string_type": "{field} must be a string.",
    "bool_type": "{field} must be a boolean.",
    "int_type": "{field} must be an integer.",
    "literal_error": "{field} must be one of: all, horizontal, vertical.",
    "extra_forbidden": "Unrecognized field: {field}.",
}


def _describe_error(error: Dict[str, Any]) -> str:
    field = ".".join(str(part) for part in error["loc"]) or "arguments"
    if error["type"] == "missing" and field == "query":
        return "Please provide a search query (1-100 characters)."
    template = _ERROR_MESSAGES.get(error["type"])
    if template is None:
        return error["msg"]
    return template.format(field=field)


def parse_search_request(
    payload: Any,
    max_per_page: int = DEFAULT_MAX_PER_PAGE,
) -> SearchImagesInput:
    """
    Validate raw tool arguments.

    Args:
        payload: Untyped tool arguments
        max_per_page: Upper bound for ``per_page``

    Returns:
        Validated SearchImagesInput

    Raises:
        InvalidSearchRequest: With every violation joined by "; "
    """
    if not isinstance(payload, Mapping):
        raise InvalidSearchRequest("Tool arguments must be a JSON object.")

    try:
        return SearchImagesInput.model_validate(
            dict(payload), context={"max_per_page": max_per_page}
        )
    except ValidationError as e:
        message = "; ".join(_describe_error(error) for error in e.errors())
        raise InvalidSearchRequest(message) from e


def normalize_query(query: str) -> str:
    """
    Unwrap a query that arrived JSON-encoded.

    Recovers a JSON string (``'"cats"'``) or an object with a ``query``
    string (``'{"query": "cats"}'``). Anything else, including parse
    failures, returns the trimmed input.
    """
    trimmed = query.strip()
    if not trimmed:
        return query

    looks_like_json = (
        (trimmed.startswith("{") and trimmed.endswith("}"))
        or (trimmed.startswith("[") and trimmed.endswith("]"))
    )
    if not looks_like_json:
        return trimmed

    try:
        parsed = json.loads(trimmed)
    except ValueError:
        return trimmed

    if isinstance(parsed, str):
        return parsed.strip() or trimmed
    if isinstance(parsed, dict):
        nested = parsed.get("query")
        if isinstance(nested, str) and nested.strip():
            return nested.strip()
    return trimmed


def resolve_locale(meta: Optional[Mapping[str, Any]], default: str) -> str:
    """Pick the caller's locale hint out of call metadata."""
    if not meta:
        return default

    locale = None
    for key in LOCALE_META_KEYS:
        locale = meta.get(key)
        if locale is not None:
            break

    if isinstance(locale, str) and locale:
        return locale
    return default


def resolve_language(locale: Optional[str], default: str) -> str:
    """
    Map a locale such as ``pt-BR`` to a Pixabay ``lang`` code.

    Unsupported or empty locales fall back to ``default``.
    """
    if not locale:
        return default

    candidate = locale.replace("_", "-").split("-")[0].lower()
    if candidate in SUPPORTED_LANGUAGES:
        return candidate
    return default


def build_search_request(search_input: SearchImagesInput, locale: str) -> SearchRequest:
    """Attach the locale and repair the query of a validated payload."""
    fields = search_input.model_dump()
    fields["query"] = normalize_query(search_input.query)
    return SearchRequest.model_construct(**fields, locale=locale)
