#!/usr/bin/env python3
"""
Summary Guard CLI

Validate a generated summary against the records it was generated from.

Usage:
    python validate_summary.py --text "I had a great time at Zen Tea House." --records logs.json
    python validate_summary.py --text-file summary.txt --records logs.json --config custom.yaml

The records file holds a JSON list of {"entity_name" (or "entityName" / "placeId"), "rating"} objects.
Prints a JSON verdict; exit code 0 when accepted, 1 when rejected.
"""

import sys
import json
import argparse
from pathlib import Path

from summary_guard.config import get_guard_config, load_config_file
from summary_guard.infrastructure.factory import SummaryGuardFactory


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Validate a generated summary")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--text", help="Summary text to validate")
    source.add_argument("--text-file", type=Path, help="File containing the summary text")
    parser.add_argument("--records", type=Path, help="JSON file with the reference records")
    parser.add_argument("--config", type=Path, help="Alternative YAML config")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    text = args.text if args.text is not None else args.text_file.read_text(encoding="utf-8")
    records = json.loads(args.records.read_text(encoding="utf-8")) if args.records else []
    config = load_config_file(args.config) if args.config else get_guard_config()

    validator = SummaryGuardFactory.create_validator(config)
    outcome = validator.validate(text, records)

    verdict = {
        "accepted": outcome.accepted,
        "kind": outcome.failure.kind.value if outcome.failure else None,
        "detail": outcome.failure.detail if outcome.failure else None,
    }
    print(json.dumps(verdict, indent=2))
    return 0 if outcome.accepted else 1


if __name__ == "__main__":
    sys.exit(main())
