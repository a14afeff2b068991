#!/usr/bin/env python3
"""Generate sample input lines for benchmarking."""

import random
import sys
import os

def generate_phrases(count: int, output_path: str):
    """Generate random terminator-delimited phrases, one per line."""
    words = [
        "hello",
        "binary",
        "converter",
        "string",
        "mesh",
        "packet",
        "Zürich",
        "naïve",
        "42",
        "tab\there",
    ]

    lines = []
    for _ in range(count):
        phrase = ' '.join(random.choice(words) for _ in range(random.randint(1, 8)))
        lines.append(phrase + '!')

    with open(output_path, 'w', encoding='utf-8') as f:
        f.write('\n'.join(lines) + '\n')

    print(f"Generated {count} lines to {output_path}")
    print(f"File size: {os.path.getsize(output_path):,} bytes")


if __name__ == '__main__':
    count = int(sys.argv[1]) if len(sys.argv) > 1 else 100
    output = sys.argv[2] if len(sys.argv) > 2 else 'test/sample_phrases.txt'
    generate_phrases(count, output)
