"""
Benchmark suite for jsonc performance.

Compares jsonc against JSON libraries that cannot read comments, fed the
already-stripped text:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Measures comment stripping, parsing and stringify speed plus peak memory.
"""
