"""
SDK option definitions.

Each option the SDK understands is described by an :class:`OptionDef`:
its default, the kind of value it accepts, an optional numeric minimum and
an optional custom validator. Platform SDKs built on this core pass their
own extra definitions, which are merged behind the baseline table.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional

from ocelot.config.tags import validate_application

# Value kinds recognised by the validator.
BOOLEAN = "boolean"
NUMBER = "number"
STRING = "string"
FUNCTION = "function"
OBJECT = "object"
ARRAY = "array"
ANY = "any"

VALUE_KINDS = frozenset({BOOLEAN, NUMBER, STRING, FUNCTION, OBJECT, ARRAY})


@dataclass(frozen=True)
class OptionDef:
    """Declarative rule for one configuration key."""

    default: Any = None
    type: Optional[str] = None  # a kind, or kinds joined with "|"
    minimum: Optional[float] = None
    validator: Optional[Callable[..., Any]] = None

    def __post_init__(self):
        if self.type is not None:
            unknown = [k for k in self.type.split("|") if k not in VALUE_KINDS]
            if unknown:
                raise ValueError(f"Unknown option type(s): {', '.join(unknown)}")
        if self.minimum is not None and (
            isinstance(self.minimum, bool) or not isinstance(self.minimum, (int, float))
        ):
            raise ValueError(f"Option minimum must be a number, got {self.minimum!r}")
        if self.validator is not None and not callable(self.validator):
            raise ValueError(f"Option validator must be callable, got {self.validator!r}")

    @property
    def expected_type(self) -> str:
        """Declared type, or the kind of ``default`` when none is declared."""
        return self.type or kind_of(self.default)

    @property
    def allowed_types(self) -> frozenset:
        return frozenset(self.expected_type.split("|"))


def kind_of(value: Any) -> str:
    """Classify ``value`` into one of the recognised kinds.

    ``None`` maps to ``"any"``, meaning no type is enforced.
    """
    if value is None:
        return ANY
    if isinstance(value, bool):
        return BOOLEAN
    if isinstance(value, (int, float)):
        return NUMBER
    if isinstance(value, str):
        return STRING
    if isinstance(value, (list, tuple)):
        return ARRAY
    if isinstance(value, Mapping):
        return OBJECT
    if callable(value):
        return FUNCTION
    return OBJECT


def _as_option_def(name: str, definition: Any) -> OptionDef:
    if isinstance(definition, OptionDef):
        return definition
    if isinstance(definition, Mapping):
        unknown = set(definition) - {"default", "type", "minimum", "validator"}
        if unknown:
            raise ValueError(f"Option {name!r} has unknown definition fields: {sorted(unknown)}")
        try:
            return OptionDef(**definition)
        except ValueError as e:
            raise ValueError(f"Option {name!r}: {e}") from e
    raise TypeError(f"Option {name!r} must be defined by an OptionDef or a mapping")


BASE_OPTION_DEFS: Dict[str, OptionDef] = {
    "baseUrl": OptionDef(default="https://app.ocelot.dev"),
    "streamUrl": OptionDef(default="https://stream.ocelot.dev"),
    "eventsUrl": OptionDef(default="https://events.ocelot.dev"),
    "sendEvents": OptionDef(default=True),
    # None is deliberately distinct from False here
    "streaming": OptionDef(type=BOOLEAN),
    "sendLDHeaders": OptionDef(default=True),
    "requestHeaderTransform": OptionDef(type=FUNCTION),
    "sendEventsOnlyForVariation": OptionDef(default=False),
    "useReport": OptionDef(default=False),
    "evaluationReasons": OptionDef(default=False),
    "eventCapacity": OptionDef(default=100, minimum=1),
    "flushInterval": OptionDef(default=2000, minimum=2000),
    "samplingInterval": OptionDef(default=0, minimum=0),
    "streamReconnectDelay": OptionDef(default=1000, minimum=0),
    "allAttributesPrivate": OptionDef(default=False),
    "privateAttributeNames": OptionDef(default=[]),
    "inlineUsersInEvents": OptionDef(default=False),
    "allowFrequentDuplicateEvents": OptionDef(default=False),
    "diagnosticOptOut": OptionDef(default=False),
    "diagnosticRecordingInterval": OptionDef(default=900000, minimum=2000),
    "bootstrap": OptionDef(type=f"{STRING}|{OBJECT}"),
    "userAgentHeaderName": OptionDef(default="User-Agent"),
    "application": OptionDef(type=OBJECT, validator=validate_application),
    "inspectors": OptionDef(default=[]),
    "hooks": OptionDef(default=[]),
}

# old name -> replacement name (None when the option is simply going away)
DEPRECATED_OPTIONS: Dict[str, Optional[str]] = {
    "all_attributes_private": "allAttributesPrivate",
    "private_attribute_names": "privateAttributeNames",
    "allowFrequentDuplicateEvents": None,
}


def resolve_option_defs(
    base: Mapping[str, OptionDef],
    platform_option_defs: Optional[Mapping[str, Any]] = None,
    logger_default: Any = None,
) -> Dict[str, OptionDef]:
    """Build the schema used for one validation pass.

    Order is ``logger``, then ``base``, then platform options. A platform
    entry is only used for names the earlier tables do not define.
    """
    resolved: Dict[str, OptionDef] = {"logger": OptionDef(default=logger_default, type=f"{OBJECT}|{FUNCTION}")}
    for name, definition in base.items():
        resolved.setdefault(name, definition)
    for name, definition in (platform_option_defs or {}).items():
        if name not in resolved:
            resolved[name] = _as_option_def(name, definition)
    return resolved
