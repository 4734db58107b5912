#!/usr/bin/env python3
"""
CLI for inspecting Lambda trigger payloads.

Classifies a JSON payload file and, for HTTP-shaped triggers, prints the
generic request it projects to.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

from triggerkit.classified_event import ClassifiedEvent
from triggerkit.classifier import classify
from triggerkit.exceptions import TriggerKitError


def load_payload(path: str) -> Any:
    """
    Read and decode a payload file.

    Args:
        path: Path to a JSON file

    Returns:
        Decoded JSON value
    """
    return json.loads(Path(path).read_text(encoding="utf-8"))


def describe_event(event: ClassifiedEvent, include_body: bool = False) -> List[str]:
    """
    Render the projection of a classified event as printable lines.

    Args:
        event: Classified payload
        include_body: Also print the decoded request body

    Returns:
        Output lines
    """
    lines = [f"Kind: {event.kind.value}"]
    if not event.kind.is_http:
        return lines

    request = event.to_http_request()
    lines.append(f"Method: {request.method}")
    lines.append(f"URL: {request.url}")
    lines.append("Headers:")
    encoding = request.headers.encoding
    for key, value in request.headers.raw:
        lines.append(f"  {key.decode(encoding)}: {value.decode(encoding)}")

    if include_body:
        body = request.content
        lines.append(f"Body ({len(body)} bytes):")
        lines.append(body.decode("utf-8", errors="replace"))

    return lines


def cmd_inspect(path: str, include_body: bool = False) -> int:
    """
    Classify a payload file and print its projection.

    Args:
        path: Path to a JSON payload file
        include_body: Also print the decoded request body

    Returns:
        Process exit code (1 when the payload cannot be classified or projected)
    """
    try:
        payload = load_payload(path)
    except (OSError, json.JSONDecodeError) as exc:
        print(f"✗ Cannot read payload: {exc}", file=sys.stderr)
        return 1

    classification = classify(payload)
    if not classification.ok:
        print(f"✗ {classification.error}", file=sys.stderr)
        return 1

    event = ClassifiedEvent(payload, classification.kind)
    try:
        lines = describe_event(event, include_body)
    except TriggerKitError as exc:
        print(f"✗ {exc.error_code}: {exc.message}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Inspect AWS Lambda trigger payloads",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Classify a payload
  python scripts/inspect_event.py events/api_gateway.json

  # Also print the decoded request body
  python scripts/inspect_event.py events/function_url.json --body
        """,
    )
    parser.add_argument("payload", type=str, help="Path to a JSON payload file")
    parser.add_argument(
        "--body",
        action="store_true",
        help="Print the decoded request body of HTTP events",
    )

    args = parser.parse_args(argv)
    sys.exit(cmd_inspect(args.payload, args.body))


if __name__ == "__main__":
    main()
