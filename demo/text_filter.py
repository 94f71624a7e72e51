#!/usr/bin/env python3
"""Log file text filtering demo.

Demonstrates grep-style filtering and sorting of log lines in-process.

Usage:
    python text_filter.py [logfile]
"""

import os
import sys
import time

# Add parent directory to path for local development
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from linepipe import GrepOption, Pipeline, SortOption, StringInput, TextInput

SAMPLE_LOG = """\
2024-01-01 10:00:01 INFO  service started
2024-01-01 10:00:05 WARN  cache miss ratio high
2024-01-01 10:01:12 ERROR database connection refused
2024-01-01 10:01:13 INFO  retrying database connection
2024-01-01 10:01:15 ERROR database connection refused
2024-01-01 10:02:00 WARN  slow response from /api/orders
2024-01-01 10:03:30 INFO  service healthy
"""


def read_lines():
    if len(sys.argv) > 1:
        with open(sys.argv[1]) as f:
            return list(TextInput(f))
    return list(StringInput(SAMPLE_LOG))


lines = read_lines()

print("=== Text Filtering Demo ===")
print("Task: Find all ERROR and WARN entries in application logs")
print()

print("=== ERROR entries ===")
start = time.time()
pipeline = Pipeline().grep("ERROR")
print(f"$ {pipeline.to_shell()}")
errors = pipeline.run_lines(lines)
for row in errors:
    print(row)
print(f"\nFound {len(errors)} ERROR entries in {time.time() - start:.3f}s")

print()
print("=== All issues, newest first ===")
pipeline = Pipeline().grep("error|warn", GrepOption.IGNORE_CASE).sort(SortOption.DESCENDING)
print(f"$ {pipeline.to_shell()}")
for row in pipeline.run_lines(lines):
    print(row)

print()
print("=== Issue count ===")
pipeline = Pipeline().grep("INFO", GrepOption.INVERT_MATCH).wc()
print(f"$ {pipeline.to_shell()}")
print(pipeline.run_lines(lines)[0])
