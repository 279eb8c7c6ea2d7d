"""Micro-benchmarks for the codecs and identifier constructors.

These tests rely on the ``pytest-benchmark`` plugin and are **extremely** light –
they time one mid-sized identifier per call so they do not slow down the
regular CI pipeline.  Run with

```
pytest tests/test_benchmark_micro.py --benchmark-only
```

which prints a summarised table.  The numbers are **not** asserted; only the
results of the benchmarked calls are.
"""

from __future__ import annotations

import pytest
pytest.importorskip("pytest_benchmark")

from chunkaddr import ChunkID, base10x10_codec, base57_codec

SAMPLE = 10 ** 60 + 12_345  # tier 30


def test_base10x10_round_trip(benchmark):
    codec = base10x10_codec()
    result = benchmark(lambda: codec.decode(codec.encode(SAMPLE)))
    assert result == SAMPLE


def test_base57_round_trip(benchmark):
    codec = base57_codec()
    result = benchmark(lambda: codec.decode(codec.encode(SAMPLE)))
    assert result == SAMPLE


def test_chunk_from_base57(benchmark):
    encoded = base57_codec().encode(SAMPLE)
    chunk = benchmark(ChunkID.from_base57, encoded)
    assert chunk.global_id_base10 == SAMPLE
