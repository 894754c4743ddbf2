#!/usr/bin/env python3
"""
Basic KittyLib example: inspecting and cleaning a nested JSON document.

This example demonstrates:
- Listing every leaf with its dot-path
- Finding values anywhere in the document
- Compacting away empty fields
"""

import json
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from kittylib import compact_object, deep_map_values, filter_deep, get_path, slugify

SAMPLE = {
    "title": "Quarterly Report.final",
    "draft": False,
    "authors": [{"name": "Ada", "email": ""}, {"name": "Lin", "email": "lin@example.com"}],
    "sections": {"intro": {"pages": 2, "notes": None}, "appendix": {"pages": 0}},
}


def main():
    """Walk a JSON document given on the command line, or a built-in sample."""
    if len(sys.argv) > 1:
        document = json.loads(Path(sys.argv[1]).read_text())
    else:
        document = SAMPLE

    print("Leaves:")
    print("-" * 50)
    leaves = []
    deep_map_values(document, lambda value, path: leaves.append((path, value)))
    for path, value in leaves:
        print(f"  {path or '<root>'} = {value!r}")

    emails = filter_deep(document, lambda value: isinstance(value, str) and "@" in value)
    print(f"\nEmail addresses: {emails}")

    title = get_path(document, "title")
    if isinstance(title, str):
        print(f"Slug: {slugify(title)}")

    print("\nCompacted:")
    print(json.dumps(compact_object(document, deep=True), indent=2))


if __name__ == "__main__":
    print("KittyLib - Basic Usage Example")
    print("=" * 50)
    main()
