"""
Benchmark: bounded repetition over growing inputs.

Every primitive looks characters up by cursor, so repetition should scale
linearly with input size.

Usage:
    python benchmarks/bench_range.py
"""

import timeit

from pyparcore import Range, any, char, is_a, lit


def bench(parser, make_input, sizes: list[int], repeats: int = 5) -> dict[int, float]:
    results = {}
    for n in sizes:
        data = make_input(n)
        t = timeit.timeit(lambda: parser.parse(data), number=repeats)
        results[n] = t / repeats
    return results


def report(name: str, results: dict[int, float]) -> None:
    """Print mean time per parse and time per input character for each size."""
    print(f"\n{name}")
    print(f"  {'chars':>9}  {'ms/parse':>10}  {'ns/char':>9}")
    for size, elapsed in results.items():
        per_char = elapsed / size * 1e9 if size else 0.0
        print(f"  {size:>9,}  {elapsed * 1e3:>10.3f}  {per_char:>9.1f}")


def main() -> None:
    sizes = [1_000, 5_000, 10_000, 50_000, 100_000]

    print("pyparcore Range Benchmark")
    print("Linear scaling shows up as a flat ns/char column.")

    suites = [
        ("char('a').range(Range(0))", char("a").range(Range(0)), lambda n: "a" * n),
        ("is_a(str.isdigit).range(Range(1))", is_a(str.isdigit).range(Range(1)), lambda n: "1" * n),
        ("lit('abc').range(Range(0))", lit("abc").range(Range(0)), lambda n: "abc" * (n // 3)),
        ("any().discard().range(Range(0))", any().discard().range(Range(0)), lambda n: "x" * n),
    ]

    for name, parser, make_input in suites:
        report(name, bench(parser, make_input, sizes))

    print()


if __name__ == "__main__":
    main()
