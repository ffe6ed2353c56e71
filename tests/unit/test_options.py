"""
Unit tests for option definitions and schema resolution.
"""

import pytest

from ocelot.config.options import (
    BASE_OPTION_DEFS,
    DEPRECATED_OPTIONS,
    OptionDef,
    kind_of,
    resolve_option_defs,
)


class TestKindOf:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, "any"),
            (True, "boolean"),
            (False, "boolean"),
            (0, "number"),
            (2.5, "number"),
            ("", "string"),
            ("abc", "string"),
            ([], "array"),
            ((1, 2), "array"),
            ({}, "object"),
            ({"a": 1}, "object"),
            (len, "function"),
            (lambda: None, "function"),
            (object(), "object"),
        ],
    )
    def test_classification(self, value, expected):
        assert kind_of(value) == expected


class TestOptionDef:
    def test_type_inferred_from_default(self):
        assert OptionDef(default=10).expected_type == "number"
        assert OptionDef(default="x").expected_type == "string"
        assert OptionDef(default=[]).expected_type == "array"

    def test_no_default_no_type_means_any(self):
        assert OptionDef().expected_type == "any"

    def test_declared_type_wins(self):
        assert OptionDef(default=None, type="boolean").expected_type == "boolean"

    def test_union_type(self):
        assert OptionDef(type="string|object").allowed_types == frozenset({"string", "object"})

    def test_unknown_type_rejected(self):
        with pytest.raises(ValueError, match="integer"):
            OptionDef(type="integer")

    @pytest.mark.parametrize("minimum", ["30", True, [1]])
    def test_non_numeric_minimum_rejected(self, minimum):
        with pytest.raises(ValueError, match="minimum"):
            OptionDef(default=10, minimum=minimum)

    def test_float_minimum_accepted(self):
        assert OptionDef(default=1.5, minimum=0.5).minimum == 0.5

    def test_non_callable_validator_rejected(self):
        with pytest.raises(ValueError, match="validator"):
            OptionDef(type="object", validator="validate_application")


class TestBaseTable:
    def test_minimums(self):
        assert BASE_OPTION_DEFS["eventCapacity"].minimum == 1
        assert BASE_OPTION_DEFS["flushInterval"].minimum == 2000
        assert BASE_OPTION_DEFS["samplingInterval"].minimum == 0
        assert BASE_OPTION_DEFS["diagnosticRecordingInterval"].minimum == 2000

    def test_deprecated_without_replacement_is_still_defined(self):
        for old_name, new_name in DEPRECATED_OPTIONS.items():
            if new_name is None:
                assert old_name in BASE_OPTION_DEFS
            else:
                assert new_name in BASE_OPTION_DEFS


class TestResolveOptionDefs:
    def test_order_logger_base_platform(self):
        resolved = resolve_option_defs(BASE_OPTION_DEFS, {"extra": {"default": 1}}, logger_default="log")
        names = list(resolved)
        assert names[0] == "logger"
        assert names[1:-1] == list(BASE_OPTION_DEFS)
        assert names[-1] == "extra"
        assert resolved["logger"].default == "log"

    def test_platform_mapping_converted(self):
        resolved = resolve_option_defs(BASE_OPTION_DEFS, {"extra": {"type": "number", "minimum": 3}})
        assert resolved["extra"] == OptionDef(type="number", minimum=3)

    def test_platform_does_not_override_baseline(self):
        resolved = resolve_option_defs(BASE_OPTION_DEFS, {"sendEvents": {"default": False}})
        assert resolved["sendEvents"] is BASE_OPTION_DEFS["sendEvents"]

    def test_unknown_definition_field_rejected(self):
        with pytest.raises(ValueError, match="maximum"):
            resolve_option_defs(BASE_OPTION_DEFS, {"extra": {"maximum": 3}})

    def test_bad_platform_minimum_names_the_option(self):
        with pytest.raises(ValueError, match="pollInterval"):
            resolve_option_defs(BASE_OPTION_DEFS, {"pollInterval": {"default": 10, "minimum": "30"}})

    def test_definition_must_be_mapping(self):
        with pytest.raises(TypeError):
            resolve_option_defs(BASE_OPTION_DEFS, {"extra": 3})

    def test_none_platform_table(self):
        resolved = resolve_option_defs(BASE_OPTION_DEFS, None)
        assert set(resolved) == set(BASE_OPTION_DEFS) | {"logger"}
