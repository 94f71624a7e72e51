#!/usr/bin/env python3
"""Classic word count demo.

Splits text into one word per line, then counts with the equivalent of:
    sort | uniq -c | sort -rn | head -10

Usage:
    python word_count.py [textfile]
"""

import os
import re
import sys

# Add parent directory to path for local development
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from linepipe import Pipeline, SortOption, StringInput, TextInput, UniqOption

SAMPLE_TEXT = """\
It is a truth universally acknowledged, that a single man in possession
of a good fortune, must be in want of a wife. However little known the
feelings or views of such a man may be on his first entering a
neighbourhood, this truth is so well fixed in the minds of the
surrounding families, that he is considered the rightful property of
some one or other of their daughters.
"""


def words(lines):
    for line in lines:
        yield from re.findall(r"[a-z]+", line.lower())


def read_lines():
    if len(sys.argv) > 1:
        with open(sys.argv[1]) as f:
            return list(TextInput(f))
    return list(StringInput(SAMPLE_TEXT))


pipeline = (
    Pipeline()
    .sort()
    .uniq(UniqOption.COUNT)
    .sort(SortOption.NUMERIC, SortOption.DESCENDING)
    .head(10)
)

print("=== Word Count Demo ===")
print(f"$ {pipeline.to_shell()}")
print("-" * 50)
for row in pipeline.run_lines(words(read_lines())):
    print(row)
