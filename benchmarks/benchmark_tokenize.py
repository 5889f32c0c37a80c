"""Benchmark xmltok against the standard library pull parser.

Run with:
    pytest benchmarks/benchmark_tokenize.py -v --benchmark-only

Or for quick comparison:
    python benchmarks/benchmark_tokenize.py
"""

import time
from xml.etree.ElementTree import XMLPullParser

from xmltok import Tokenizer, TokenTag


def _document(sections: int = 400) -> bytes:
    body = "".join(
        f'<section id="{i}"><entry key="k" value="{i}"/><text>t {i}</text></section>'
        for i in range(sections)
    )
    return f'<?xml version="1.0"?>\n<map>{body}</map>\n'.encode()


def drain_xmltok(data: bytes) -> int:
    """Pull every token; returns the token count."""
    tokenizer = Tokenizer(data)
    count = 0
    while tokenizer.pull().tag is not TokenTag.EOF:
        count += 1
    return count


def drain_etree(data: bytes) -> int:
    """Feed the whole buffer to XMLPullParser; returns the event count."""
    parser = XMLPullParser(events=("start", "end"))
    parser.feed(data)
    parser.close()
    return sum(1 for _ in parser.read_events())


def benchmark(func, data: bytes, iterations: int = 20) -> float:
    """Return mean seconds per run."""
    func(data)  # Warmup
    start = time.perf_counter()
    for _ in range(iterations):
        func(data)
    return (time.perf_counter() - start) / iterations


def main() -> None:
    data = _document()
    print("=" * 60)
    print(f"RESULTS: Tokenize {len(data) / 1024:.0f}KB document")
    print("=" * 60)
    for name, func in (("xmltok", drain_xmltok), ("XMLPullParser", drain_etree)):
        print(f"{name:20} {benchmark(func, data) * 1000:8.2f}ms")


# pytest-benchmark integration
try:
    import pytest

    @pytest.mark.benchmark(group="tokenize-large")
    def test_benchmark_xmltok(benchmark, large_document):
        """Pull every token from a ~100KB document."""
        assert benchmark(drain_xmltok, large_document) > 0

    @pytest.mark.benchmark(group="tokenize-large")
    def test_benchmark_etree(benchmark, large_document):
        """Baseline: stdlib pull parser on the same document."""
        assert benchmark(drain_etree, large_document) > 0

    @pytest.mark.benchmark(group="tokenize-many")
    def test_benchmark_xmltok_small(benchmark, small_documents):
        """One tokenizer per short document."""

        def run_all():
            for doc in small_documents:
                drain_xmltok(doc)

        benchmark(run_all)

except ImportError:
    pass


if __name__ == "__main__":
    main()
