"""Analyze 10,000 lines on worker threads; output order matches input order."""

from arithlex import AnalyzeConfig, Analyzer

lines = [f"v{i} := {i} * 0x{i:x};" if i % 100 else f"(v{i}" for i in range(10_000)]

analyzer = Analyzer(AnalyzeConfig(max_workers=8, parallel_threshold=1000))
result = analyzer(lines)

print(f"Lexemes: {len(result.lexemes)}")
print(f"Rejected lines: {len(result.errors)}")
print("First error:", result.errors[0])
