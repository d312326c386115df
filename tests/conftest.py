"""
Pytest configuration and shared fixtures for jsonc tests.

Provides immutable test data fixtures for comment stripping, parsing and
log capture.
"""

from dataclasses import dataclass
from io import StringIO
from typing import Any

import pytest

import jsonc


@dataclass(frozen=True)
class JsonTestCase:
    """
    Immutable container for JSON test case data.

    Holds test input and expected behavior for consistent test execution.
    """

    description: str
    input_data: str
    should_fail: bool = False
    expected_output: Any = None
    skip_reason: str = ""


@dataclass(frozen=True)
class StripCase:
    """Input text with its remove-mode and whitespace-mode outputs."""

    description: str
    input_data: str
    stripped: str
    blanked: str


VALID_JSON_WITH_COMMENTS = """
    // comments will be stripped...
    {
        "some": /* special */ "property",
        "value": 1 // don't change this!!!
    }
    """


@pytest.fixture
def commented_json() -> str:
    return VALID_JSON_WITH_COMMENTS


@pytest.fixture
def strip_cases() -> list[StripCase]:
    """
    Provides comment stripping cases covering every lexical state.

    Each blanked output has exactly the length of its input.
    """
    return [
        StripCase("no comments", '{"a":1}', '{"a":1}', '{"a":1}'),
        StripCase(
            "leading line comment",
            '// c\n{"a":1}',
            '\n{"a":1}',
            " " * 4 + '\n{"a":1}',
        ),
        StripCase(
            "line and block comments",
            '// comments\n{"x":/*test*/1}',
            '\n{"x":1}',
            " " * 11 + '\n{"x":' + " " * 8 + "1}",
        ),
        StripCase(
            "comment markers inside string",
            '{"url": "http://x/*y*/"}',
            '{"url": "http://x/*y*/"}',
            '{"url": "http://x/*y*/"}',
        ),
        StripCase(
            "escaped quote inside string",
            '{"q": "say \\"// hi\\""} // tail',
            '{"q": "say \\"// hi\\""} ',
            '{"q": "say \\"// hi\\""} ' + " " * 7,
        ),
        StripCase(
            "escaped backslash before closing quote",
            '["a\\\\"/* gone */]',
            '["a\\\\"]',
            '["a\\\\"' + " " * 10 + "]",
        ),
        StripCase(
            "multi-line block comment",
            "[1,/* a\nb */2]",
            "[1,2]",
            "[1,    \n    2]",
        ),
        StripCase(
            "crlf ends line comment",
            "[1 // one\r\n,2]",
            "[1 \r\n,2]",
            "[1 " + " " * 6 + "\r\n,2]",
        ),
        StripCase(
            "unterminated block comment",
            "[1]/* open",
            "[1]",
            "[1]" + " " * 7,
        ),
        StripCase(
            "unterminated line comment",
            "[1]//",
            "[1]",
            "[1]  ",
        ),
        StripCase(
            "unterminated string",
            '["abc // not a comment',
            '["abc // not a comment',
            '["abc // not a comment',
        ),
        StripCase(
            "star slash outside comment",
            '{"a": 1} */',
            '{"a": 1} */',
            '{"a": 1} */',
        ),
        StripCase(
            "slash star slash",
            "[/*/ 1 */2]",
            "[2]",
            "[" + " " * 8 + "2]",
        ),
    ]


@pytest.fixture
def json_fail_cases() -> list[JsonTestCase]:
    """
    Provides JSON strings that must fail parsing per JSON specification.

    Test cases from json.org JSON_checker; comments are stripped before the
    strict decoder runs, so none of these may become valid by stripping.
    """
    fail_docs = [
        # https://json.org/JSON_checker/test/fail1.json
        '"A JSON payload should be an object or array, not a string."',
        # https://json.org/JSON_checker/test/fail2.json
        '["Unclosed array"',
        # https://json.org/JSON_checker/test/fail3.json
        '{unquoted_key: "keys must be quoted"}',
        # https://json.org/JSON_checker/test/fail4.json
        '["extra comma",]',
        # https://json.org/JSON_checker/test/fail5.json
        '["double extra comma",,]',
        # https://json.org/JSON_checker/test/fail6.json
        '[   , "<-- missing value"]',
        # https://json.org/JSON_checker/test/fail7.json
        '["Comma after the close"],',
        # https://json.org/JSON_checker/test/fail8.json
        '["Extra close"]]',
        # https://json.org/JSON_checker/test/fail9.json
        '{"Extra comma": true,}',
        # https://json.org/JSON_checker/test/fail10.json
        '{"Extra value after close": true} "misplaced quoted value"',
        # https://json.org/JSON_checker/test/fail11.json
        '{"Illegal expression": 1 + 2}',
        # https://json.org/JSON_checker/test/fail12.json
        '{"Illegal invocation": alert()}',
        # https://json.org/JSON_checker/test/fail13.json
        '{"Numbers cannot have leading zeroes": 013}',
        # https://json.org/JSON_checker/test/fail14.json
        '{"Numbers cannot be hex": 0x14}',
        # https://json.org/JSON_checker/test/fail15.json
        '["Illegal backslash escape: \\x15"]',
        # https://json.org/JSON_checker/test/fail16.json
        "[\\naked]",
        # https://json.org/JSON_checker/test/fail17.json
        '["Illegal backslash escape: \\017"]',
        # https://json.org/JSON_checker/test/fail18.json
        '[[[[[[[[[[[[[[[[[[["Too deep"]]]]]]]]]]]]]]]]]]',
        # https://json.org/JSON_checker/test/fail19.json
        '{"Missing colon" null}',
        # https://json.org/JSON_checker/test/fail20.json
        '{"Double colon":: null}',
        # https://json.org/JSON_checker/test/fail21.json
        '{"Comma instead of colon", null}',
        # https://json.org/JSON_checker/test/fail22.json
        '["Colon instead of comma": false]',
        # https://json.org/JSON_checker/test/fail23.json
        '["Bad value", truth]',
        # https://json.org/JSON_checker/test/fail24.json
        "['single quote']",
        # https://json.org/JSON_checker/test/fail25.json
        '["\ttab\tcharacter\tin\tstring\t"]',
        # https://json.org/JSON_checker/test/fail26.json
        '["tab\\   character\\   in\\  string\\  "]',
        # https://json.org/JSON_checker/test/fail27.json
        '["line\nbreak"]',
        # https://json.org/JSON_checker/test/fail28.json
        '["line\\\nbreak"]',
        # https://json.org/JSON_checker/test/fail29.json
        "[0e]",
        # https://json.org/JSON_checker/test/fail30.json
        "[0e+]",
        # https://json.org/JSON_checker/test/fail31.json
        "[0e+-1]",
        # https://json.org/JSON_checker/test/fail32.json
        '{"Comma instead if closing brace": true,',
        # https://json.org/JSON_checker/test/fail33.json
        '["mismatch"}',
        # https://code.google.com/archive/p/simplejson/issues/3
        '["A\u001fZ control characters in string"]',
    ]

    skips = {
        1: "top-level strings parse; is_json is the structural check",
        18: "spec doesn't specify any nesting limitations",
    }

    return [
        JsonTestCase(
            description=f"fail{idx + 1}.json",
            input_data=doc,
            should_fail=True,
            skip_reason=skips.get(idx + 1, ""),
        )
        for idx, doc in enumerate(fail_docs)
    ]


@pytest.fixture
def basic_json_values() -> list[JsonTestCase]:
    """
    Provides basic JSON value test cases for fundamental parsing.

    Covers all JSON primitive types and basic container structures.
    """
    return [
        JsonTestCase("null value", "null", False, None),
        JsonTestCase("true boolean", "true", False, True),
        JsonTestCase("false boolean", "false", False, False),
        JsonTestCase("integer", "42", False, 42),
        JsonTestCase("negative integer", "-17", False, -17),
        JsonTestCase("float", "3.14", False, 3.14),
        JsonTestCase("empty string", '""', False, ""),
        JsonTestCase("simple string", '"hello"', False, "hello"),
        JsonTestCase("empty array", "[]", False, []),
        JsonTestCase("empty object", "{}", False, {}),
        JsonTestCase("simple array", "[1, 2, 3]", False, [1, 2, 3]),
        JsonTestCase(
            "simple object", '{"key": "value"}', False, {"key": "value"}
        ),
        JsonTestCase(
            "commented array", "[1, /* two */ 2] // three", False, [1, 2]
        ),
    ]


@pytest.fixture
def facade() -> jsonc.Jsonc:
    """A Jsonc instance logging into in-memory streams."""
    log_config = jsonc.LogConfig(stream=StringIO(), stream_err=StringIO())
    return jsonc.Jsonc(log_config)
