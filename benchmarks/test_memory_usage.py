"""
Memory usage benchmarks for parsing.

Measures peak memory consumption across JSON parsing libraries; jsonc is
measured on commented text, the others on the stripped equivalent.
"""

import json
import tracemalloc
from typing import Any

import orjson
import pytest
import ujson  # type: ignore[import-untyped]

import jsonc
from benchmarks.data_generators import DATA_TYPES
from benchmarks.data_generators import generate_test_data


def measure_memory_usage(func: Any, *args: Any) -> tuple[Any, int]:
    """
    Measures peak memory usage during function execution.

    Returns:
        Tuple of (function_result, peak_memory_bytes)
    """
    tracemalloc.start()
    try:
        result = func(*args)
        _, peak = tracemalloc.get_traced_memory()
        return result, peak
    finally:
        tracemalloc.stop()


class TestMemoryUsage:
    """Memory usage benchmarks for parsing."""

    @pytest.mark.parametrize("data_type", DATA_TYPES)
    def test_strip_comments_memory(self, data_type: str) -> None:
        """Measures memory used by the comment lexer."""
        test_data = generate_test_data(data_type)
        result, peak_memory = measure_memory_usage(
            jsonc.strip_comments, test_data
        )

        print(f"\nstrip_comments {data_type}: {peak_memory:,} bytes")
        assert len(result) <= len(test_data)

    def test_memory_comparison_summary(self) -> None:
        """Generates a memory usage comparison table."""
        results = {}

        for data_type in DATA_TYPES:
            commented = generate_test_data(data_type)
            stripped = jsonc.strip_comments(commented)

            _, stdlib_memory = measure_memory_usage(json.loads, stripped)
            _, orjson_memory = measure_memory_usage(
                orjson.loads, stripped.encode("utf-8")
            )
            _, ujson_memory = measure_memory_usage(ujson.loads, stripped)
            _, jsonc_memory = measure_memory_usage(jsonc.parse, commented)

            results[data_type] = {
                "stdlib_json": stdlib_memory,
                "orjson": orjson_memory,
                "ujson": ujson_memory,
                "jsonc": jsonc_memory,
            }

        columns = ["stdlib_json", "orjson", "ujson", "jsonc"]
        print("\n" + "=" * 72)
        print("MEMORY USAGE COMPARISON (bytes)")
        print("=" * 72)
        print(f"{'Data Type':<20}" + "".join(f"{c:<13}" for c in columns))
        print("-" * 72)

        for data_type, measurements in results.items():
            print(
                f"{data_type:<20}"
                + "".join(f"{measurements[c]:<13,}" for c in columns)
            )

        print("=" * 72)
        assert len(results) == len(DATA_TYPES)
