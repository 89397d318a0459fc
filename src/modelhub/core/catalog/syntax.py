"""``provider/model`` grammar and model-id helpers.

The accepted grammar is::

    identifier := [^/]+
    input      := identifier ("/" identifier)?

Examples::

    "gemini/2.5-flash" -> ("gemini", "2.5-flash")
    "flash"            -> ("", "flash")
    "/flash"           -> InvalidSyntaxError
    "a/b/c"            -> InvalidSyntaxError
"""

from __future__ import annotations

from modelhub.core.catalog.errors import InvalidSyntaxError

SEPARATOR = "/"


def parse_provider_model_syntax(text: str) -> tuple[str, str]:
    """Split *text* into ``(provider, identifier)``.

    The provider is ``""`` when the input carries no slash; the caller is
    expected to substitute its default provider.
    """
    stripped = text.strip()
    if not stripped:
        raise InvalidSyntaxError(text, "model syntax cannot be empty")

    parts = stripped.split(SEPARATOR)
    if len(parts) == 1:
        return "", parts[0]
    if len(parts) == 2 and parts[0] and parts[1]:
        return parts[0], parts[1]
    raise InvalidSyntaxError(text)


def alias_key(provider: str, identifier: str) -> str:
    """Build the alias-table key for a provider-scoped identifier."""
    return f"{provider}{SEPARATOR}{identifier}"


def extract_shorthand(model_id: str) -> str:
    """Derive a short name by dropping the family prefix.

    ``gemini-2.5-flash`` -> ``2.5-flash``; ids without a dash are returned
    unchanged.
    """
    parts = model_id.split("-")
    if len(parts) > 1:
        return "-".join(parts[1:])
    return model_id
