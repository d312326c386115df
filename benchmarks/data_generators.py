"""
Test data generators for jsonc benchmarks.

Creates value graphs of different shapes and renders them as configuration
style JSON text with line and block comments:
- Different sizes (small/large)
- Different complexity levels (flat/nested/mixed)
- String-heavy content with escapes and comment look-alikes
"""

import json
import random
import string
from typing import Any

DATA_TYPES = [
    "small_object",
    "large_object",
    "mixed_array",
    "nested_structure",
    "string_heavy",
]

# Constants for random data generation
_INT_TYPE = 1
_FLOAT_TYPE = 2
_STRING_TYPE = 3
_BOOL_TYPE = 4
_NULL_TYPE = 5
_ESCAPE_PROBABILITY = 0.3
_COMMENT_EVERY = 3


def generate_test_value(data_type: str) -> Any:
    """Generates a Python value of the specified shape."""
    generators = {
        "small_object": _generate_small_object,
        "large_object": _generate_large_object,
        "mixed_array": _generate_mixed_array,
        "nested_structure": _generate_nested_structure,
        "string_heavy": _generate_string_heavy,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    random.seed(data_type)
    return generators[data_type]()


def generate_test_data(data_type: str) -> str:
    """Generates commented JSON text for the specified shape."""
    return add_comments(json.dumps(generate_test_value(data_type), indent=2))


def add_comments(text: str) -> str:
    """
    Decorates indented JSON with comments.

    Adds a block comment header and a trailing line comment to every third
    line. Line ends of indented JSON are never inside a string, so the
    result still strips back to the input.
    """
    lines = ["/*", " * generated benchmark document", " */"]
    for number, line in enumerate(text.splitlines()):
        if number % _COMMENT_EVERY == 0:
            line += f" // line {number} /* nested-looking */"
        lines.append(line)
    return "\n".join(lines)


def _generate_small_object() -> dict[str, Any]:
    """Generates a small object (< 1KB) with basic key-value pairs."""
    return {
        "id": 12345,
        "name": "Alice Johnson",
        "email": "alice@example.com",
        "active": True,
        "balance": 1234.56,
        "metadata": {"created": "2024-01-15T10:30:00Z", "source": "api"},
    }


def _generate_large_object() -> dict[str, Any]:
    """Generates a large object (> 10KB) resembling a settings file."""
    return {
        "editor": {
            "fontSize": random.randint(10, 20),
            "fontFamily": "Fira Code, monospace",
            "rulers": [80, 100, 120],
            "wordWrap": random.choice(["on", "off", "bounded"]),
        },
        "keybindings": [
            {
                "key": f"ctrl+{random.choice(string.ascii_lowercase)}",
                "command": f"workbench.action.{_random_string(12)}",
                "when": f"editorTextFocus && !{_random_string(8)}",
            }
            for _ in range(120)
        ],
        "files.exclude": {
            f"**/{_random_string(6)}": random.choice([True, False])
            for _ in range(60)
        },
    }


def _generate_mixed_array() -> list[Any]:
    """Generates a large array with mixed data types."""
    array: list[Any] = []

    for i in range(200):
        choice = random.randint(1, 6)
        if choice == _INT_TYPE:
            array.append(random.randint(-1000, 1000))
        elif choice == _FLOAT_TYPE:
            array.append(round(random.uniform(-100.0, 100.0), 3))
        elif choice == _STRING_TYPE:
            array.append(_random_string(random.randint(5, 30)))
        elif choice == _BOOL_TYPE:
            array.append(random.choice([True, False]))
        elif choice == _NULL_TYPE:
            array.append(None)
        else:
            array.append(
                {
                    "index": i,
                    "value": _random_string(10),
                    "score": round(random.uniform(0, 100), 2),
                }
            )

    return array


def _generate_nested_structure() -> dict[str, Any]:
    """Generates a deeply nested structure."""

    def create_nested_dict(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"value": _random_string(10)}

        return {
            "level": depth,
            "data": _random_string(15),
            "items": [create_nested_dict(depth - 1) for _ in range(3)],
            "nested": create_nested_dict(depth - 1),
        }

    return create_nested_dict(6)


def _generate_string_heavy() -> dict[str, Any]:
    """Generates strings full of escapes and comment delimiters."""

    def create_tricky_string() -> str:
        chars = []
        for _ in range(50):
            if random.random() < _ESCAPE_PROBABILITY:
                chars.append(
                    random.choice(['"', "\\", "\n", "\t", "//", "/*", "*/"])
                )
            else:
                chars.append(
                    random.choice(string.ascii_letters + string.digits + " ")
                )
        return "".join(chars)

    return {
        "strings": [create_tricky_string() for _ in range(100)],
        "urls": [f"https://{_random_string(8)}.com/a/b" for _ in range(50)],
        "paths": {
            f"key_{i}": f"C:\\Users\\{_random_string(8)}\\file_{i}.txt"
            for i in range(20)
        },
    }


def _random_string(length: int) -> str:
    """Generates a random string of specified length."""
    return "".join(random.choices(string.ascii_letters, k=length))
