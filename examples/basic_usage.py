#!/usr/bin/env python3
"""
Example: Basic usage of filestats as a Python library
"""

from filestats import collect_stats, run_scan

# Scan a tree with four worker threads
result = collect_stats("/path/to/project", recursive=True, workers=4)

for extension, record in result.records.items():
    print(f"{extension or '(none)'}: {record.count} file(s), {record.lines} lines "
          f"({record.non_empty_lines} non-empty, {record.comment_lines} comments)")

print(f"Scan complete: {result.files_scanned} of {result.files_discovered} files read")

# Or drive the engine directly with an explicit file list
table = run_scan(["build.sh", "src/Main.java"], worker_count=2)
print(sorted(table))
