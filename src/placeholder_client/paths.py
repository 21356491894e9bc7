"""Path template resolution."""

import re
from typing import Any, List
from urllib.parse import quote

from placeholder_client.exceptions import PathTemplateError

_PLACEHOLDER = re.compile(r"\{([^{}/]+)\}")


def placeholders(template: str) -> List[str]:
    """Return the placeholder names of a template, in order."""
    return _PLACEHOLDER.findall(template)


def _encode_segment(value: Any) -> str:
    """Percent-encode a value as one path segment, dot segments included."""
    segment = quote(str(value), safe="")
    if segment in (".", ".."):
        return "%2E" * len(segment)
    return segment


def resolve_path(template: str, *params: Any) -> str:
    """
    Substitute positional parameters into a path template.

    Parameters fill ``{name}`` placeholders left-to-right and are
    percent-encoded as a single path segment.

        resolve_path("/users/{userID}", 7) == "/users/7"

    Raises:
        PathTemplateError: If the template is empty, the parameter count
            differs from the placeholder count, or a parameter is None or
            an empty string
    """
    if not template or not template.strip():
        raise PathTemplateError(template, params, message="Path template must not be empty")

    names = placeholders(template)
    if len(params) != len(names):
        raise PathTemplateError(
            template,
            params,
            message=(
                f"Path template {template!r} has {len(names)} placeholder(s) "
                f"{names} but {len(params)} parameter(s) were given"
            ),
        )

    for name, value in zip(names, params):
        if value is None or str(value) == "":
            raise PathTemplateError(
                template,
                params,
                message=f"Path template {template!r} has no value for placeholder {{{name}}}",
            )

    values = iter(params)
    return _PLACEHOLDER.sub(lambda _: _encode_segment(next(values)), template)
