"""Tests for the conversion service.

Covers:
- End-to-end conversion scenarios for each convention
- Pipeline properties (idempotence, round-trip, empty-input closure)
- CaseConverter single and batch conversion with logging
- Recursive mapping-key conversion
"""

import logging
from fractions import Fraction

import pytest

from namecase import (
    MISSING,
    CaseConverter,
    CoercionPolicy,
    ConversionResult,
    InvalidInputError,
    InvalidTypeError,
    NamingConvention,
    convert_keys,
    normalize_to_convention,
    render,
    to_camel,
    to_kebab,
    to_pascal,
    to_screaming_snake,
    to_snake,
    to_space,
    to_words,
    tokenize,
)
from namecase.config.models import ConversionConfig

SERVICE_LOGGER = "namecase.conversion.service"


class TestNormalizeToConvention:
    """End-to-end scenarios."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("Hello World", "hello-world"),
            ("helloWorld", "hello-world"),
            ("HTTPServer", "http-server"),
            ("user_ID-number", "user-id-number"),
            (123, "123"),
            (None, ""),
            ("___hello---world___", "hello-world"),
            ("hello@world!", "hello-world"),
            ("HELLO_WORLD", "hello-world"),
            ("userIDNumber", "user-id-number"),
            ("  MixedCASE_string Example ", "mixed-case-string-example"),
            (-1.5, "1-5"),
            ("", ""),
            ("   ", ""),
            ([], ""),
            ({}, ""),
        ],
    )
    def test_kebab_scenarios(self, value, expected):
        assert normalize_to_convention(value, NamingConvention.KEBAB) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("screen_name", "screenName"),
            ("first name", "firstName"),
            ("user_id", "userId"),
            ("SCREEN_NAME", "screenName"),
            ("mobile-number", "mobileNumber"),
            ("HTTPServer", "httpServer"),
        ],
    )
    def test_camel_scenarios(self, value, expected):
        assert normalize_to_convention(value, "camel") == expected

    def test_screen_name_through_tokenize_and_render(self):
        assert render(tokenize("screen_name"), NamingConvention.CAMEL) == "screenName"

    def test_pascal_scenario(self):
        assert normalize_to_convention("baburao ganpatrao apte", "pascal") == "BaburaoGanpatraoApte"

    def test_convenience_wrappers(self):
        value = "getHTTPResponse"
        assert to_kebab(value) == "get-http-response"
        assert to_snake(value) == "get_http_response"
        assert to_screaming_snake(value) == "GET_HTTP_RESPONSE"
        assert to_camel(value) == "getHttpResponse"
        assert to_pascal(value) == "GetHttpResponse"
        assert to_space(value) == "get http response"

    def test_to_words(self):
        assert to_words("userID_number") == ("user", "id", "number")
        assert to_words(["first", "name"]) == ("first", "name")

    def test_strict_policy_raises(self):
        with pytest.raises(InvalidInputError):
            normalize_to_convention(None, "kebab", CoercionPolicy.STRICT)
        with pytest.raises(InvalidTypeError):
            normalize_to_convention({"a": 1}, "kebab", "strict")

    def test_strict_policy_accepts_strings_and_numbers(self):
        assert normalize_to_convention("fooBar", "snake", "strict") == "foo_bar"
        assert normalize_to_convention(42, "snake", "strict") == "42"

    def test_fraction_renders_decimal_words(self):
        assert normalize_to_convention(Fraction(1, 4), "kebab") == "0-25"

    @pytest.mark.parametrize("policy", list(CoercionPolicy))
    def test_huge_integer_accepted_under_every_policy(self, policy):
        assert normalize_to_convention(10**5000, "snake", policy) == "1" + "0" * 5000


class TestPipelineProperties:
    """Properties that hold across inputs."""

    SAMPLES = [
        "Hello World",
        "helloWorld",
        "HTTPServer",
        "user_ID-number",
        "___hello---world___",
        "getHTTPResponseCode",
        "version2Update",
        "foo123bar",
        "ABc",
        "  MixedCASE_string Example ",
        "",
    ]

    @pytest.mark.parametrize("text", SAMPLES)
    def test_kebab_rendering_is_idempotent(self, text):
        once = render(tokenize(text), NamingConvention.KEBAB)
        twice = render(tokenize(once), NamingConvention.KEBAB)
        assert twice == once

    @pytest.mark.parametrize("text", SAMPLES)
    @pytest.mark.parametrize(
        "convention",
        [NamingConvention.KEBAB, NamingConvention.SNAKE, NamingConvention.SPACE],
    )
    def test_delimited_round_trip_preserves_words(self, text, convention):
        words = tokenize(text)
        assert tokenize(render(words, convention)) == words

    @pytest.mark.parametrize("value", [None, MISSING, "", "   ", []])
    @pytest.mark.parametrize("convention", list(NamingConvention))
    @pytest.mark.parametrize(
        "policy", [CoercionPolicy.STRINGIFY, CoercionPolicy.EMPTY_ON_MISSING]
    )
    def test_empty_input_closure(self, value, convention, policy):
        assert normalize_to_convention(value, convention, policy) == ""


class TestCaseConverter:
    """Tests for the CaseConverter service object."""

    def test_defaults(self):
        converter = CaseConverter()

        assert converter.convention is NamingConvention.KEBAB
        assert converter.policy is CoercionPolicy.STRINGIFY

    def test_accepts_string_settings(self):
        converter = CaseConverter("screaming-snake", "empty-on-missing")

        assert converter.convention is NamingConvention.SCREAMING_SNAKE
        assert converter.policy is CoercionPolicy.EMPTY_ON_MISSING

    def test_invalid_settings_raise(self):
        with pytest.raises(ValueError):
            CaseConverter(convention="dotted")
        with pytest.raises(ValueError):
            CaseConverter(policy="lenient")

    def test_from_config(self):
        config = ConversionConfig(default_convention="pascal", coercion_policy="strict")
        converter = CaseConverter.from_config(config)

        assert converter.convention is NamingConvention.PASCAL
        assert converter.policy is CoercionPolicy.STRICT

    def test_convert_returns_result(self):
        result = CaseConverter().convert("  userID ")

        assert isinstance(result, ConversionResult)
        assert result.source == "  userID "
        assert result.text == "userID"
        assert result.words == ("user", "id")
        assert result.convention is NamingConvention.KEBAB
        assert result.output == "user-id"
        assert result.is_empty is False

    def test_convert_with_override(self):
        result = CaseConverter().convert("user_id", convention="camel")

        assert result.output == "userId"
        assert result.convention is NamingConvention.CAMEL

    def test_convert_empty_result(self):
        result = CaseConverter().convert(None)

        assert result.is_empty is True
        assert result.output == ""
        assert result.to_dict() == {"input": None, "words": [], "output": ""}

    def test_result_to_dict_for_structured_source(self):
        result = CaseConverter().convert(["a", "b"])

        assert result.to_dict() == {"input": "['a', 'b']", "words": ["a", "b"], "output": "a-b"}

    def test_convert_strict_raises(self):
        converter = CaseConverter(policy=CoercionPolicy.STRICT)

        with pytest.raises(InvalidInputError):
            converter.convert(None)

    def test_convert_logs_debug_event(self, caplog):
        caplog.set_level(logging.DEBUG, logger=SERVICE_LOGGER)

        CaseConverter().convert("fooBar")

        records = [r for r in caplog.records if getattr(r, "event", None) == "conversion.value.converted"]
        assert len(records) == 1
        assert records[0].component == "conversion"
        assert records[0].output == "foo-bar"
        assert records[0].word_count == 2

    def test_uses_injected_logger(self):
        class RecordingLogger:
            def __init__(self):
                self.calls = []

            def debug(self, msg, **kwargs):
                self.calls.append((msg, kwargs))

        recorder = RecordingLogger()
        CaseConverter(logger_instance=recorder).convert("a_b")

        assert recorder.calls[0][1]["extra"]["event"] == "conversion.value.converted"


class TestConvertMany:
    """Tests for batch conversion."""

    def test_convert_many(self):
        results = list(CaseConverter("snake").convert_many(["fooBar", 7, None]))

        assert [r.output for r in results] == ["foo_bar", "7", ""]

    def test_convert_many_is_lazy(self):
        results = CaseConverter().convert_many(iter(["a", "b"]))

        assert next(results).output == "a"

    def test_convert_many_skips_rejected_values(self, caplog):
        caplog.set_level(logging.WARNING, logger=SERVICE_LOGGER)
        converter = CaseConverter(policy=CoercionPolicy.STRICT)

        results = list(converter.convert_many(["userId", None, [], "HTTPServer"]))

        assert [r.output for r in results] == ["user-id", "http-server"]

        rejected = [r for r in caplog.records if getattr(r, "event", None) == "conversion.value.rejected"]
        assert [r.position for r in rejected] == [1, 2]
        assert [r.error_type for r in rejected] == ["InvalidInputError", "InvalidTypeError"]


class TestConvertKeys:
    """Tests for recursive mapping-key conversion."""

    def test_nested_mappings_and_lists(self):
        data = {
            "user_id": 1,
            "profile": {"first_name": "Ada", "lastName": "Lovelace"},
            "items": [{"item_id": 1}, "plain_value"],
        }

        assert convert_keys(data, "camel") == {
            "userId": 1,
            "profile": {"firstName": "Ada", "lastName": "Lovelace"},
            "items": [{"itemId": 1}, "plain_value"],
        }

    def test_values_are_not_converted(self):
        assert convert_keys({"screenName": "user_name"}, "snake") == {"screen_name": "user_name"}

    def test_tuples_stay_tuples(self):
        result = convert_keys(({"a_b": 1},), "kebab")

        assert result == ({"a-b": 1},)
        assert isinstance(result, tuple)

    def test_non_string_keys_kept(self):
        assert convert_keys({1: {"a_b": 2}}, "camel") == {1: {"aB": 2}}

    def test_ignore_fields_by_original_or_converted_name(self):
        data = {"user_id": {"keep_me": 1}, "other_key": 2}

        assert convert_keys(data, "camel", ignore_fields=("user_id",)) == {
            "user_id": {"keep_me": 1},
            "otherKey": 2,
        }
        assert convert_keys(data, "camel", ignore_fields=("userId",)) == {
            "user_id": {"keep_me": 1},
            "otherKey": 2,
        }

    def test_keys_without_words_are_kept(self):
        assert convert_keys({"___": 1, "a": 2}, "kebab") == {"___": 1, "a": 2}

    def test_non_container_returned_unchanged(self):
        assert convert_keys("user_id", "camel") == "user_id"
        assert convert_keys(None, "camel") is None

    def test_collision_keeps_last_value_and_warns(self, caplog):
        caplog.set_level(logging.WARNING, logger=SERVICE_LOGGER)

        result = convert_keys({"user_id": 1, "userId": 2}, "camel")

        assert result == {"userId": 2}
        collisions = [r for r in caplog.records if getattr(r, "event", None) == "conversion.keys.collision"]
        assert len(collisions) == 1
        assert collisions[0].key == "userId"
        assert collisions[0].converted_key == "userId"

    def test_converter_method_uses_defaults(self):
        converter = CaseConverter("screaming-snake")

        assert converter.convert_keys({"max_retries": 3}) == {"MAX_RETRIES": 3}
        assert converter.convert_keys({"max_retries": 3}, convention="pascal") == {"MaxRetries": 3}
