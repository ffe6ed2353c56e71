"""
Application tag validation.

Applications can identify themselves with ``application.id`` and
``application.version``. Both values are sent to telemetry as tags, so they
are restricted to a short, URL-safe token. Invalid values are dropped with a
warning instead of failing the SDK setup.
"""

import re
from typing import Any, Dict, List, Mapping, Optional

from ocelot import messages

MAX_TAG_LENGTH = 64

_ALLOWED_TAG_VALUE = re.compile(r"[A-Za-z0-9._-]+")

# config field -> tag key
APPLICATION_TAGS = {
    "id": "application-id",
    "version": "application-version",
}


def validate_tag_value(path: str, value: Any, logger: Any) -> Optional[str]:
    """Return ``value`` if it is a legal tag value, otherwise warn and return None."""
    if not isinstance(value, str) or not _ALLOWED_TAG_VALUE.fullmatch(value):
        logger.warn(messages.invalid_tag_value(path))
        return None
    if len(value) > MAX_TAG_LENGTH:
        logger.warn(messages.tag_value_too_long(path))
        return None
    return value


def validate_application(name: str, value: Mapping[str, Any], logger: Any) -> Dict[str, Optional[str]]:
    """Validate the ``application`` option, keeping only the fields it carries."""
    validated: Dict[str, Optional[str]] = {}
    for field in APPLICATION_TAGS:
        if value.get(field):
            validated[field] = validate_tag_value(f"{name}.{field}", value[field], logger)
    return validated


def get_tags(config: Optional[Mapping[str, Any]]) -> Dict[str, List[str]]:
    """Tags derived from a validated configuration.

    Example::

        >>> get_tags({"application": {"id": "my-app", "version": "1.0"}})
        {'application-id': ['my-app'], 'application-version': ['1.0']}
    """
    tags: Dict[str, List[str]] = {}
    application = (config or {}).get("application")
    if not isinstance(application, Mapping):
        return tags
    for field, tag in APPLICATION_TAGS.items():
        value = application.get(field)
        if value is not None:
            tags[tag] = [value]
    return tags
