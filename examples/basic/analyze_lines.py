"""Classify a few expression lines and print the lexeme table."""

from arithlex import analyze, format_error, render_table

result = analyze(["x := 5 + 0x1F;", "(a + b", "y := x * 2;"])
print(render_table(result))
for err in result.errors:
    print(format_error(err))
