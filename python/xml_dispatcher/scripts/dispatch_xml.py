#!/usr/bin/env python3
"""
XML Dispatch Script

Dispatch XML documents through the example handlers and print each decoded
record as JSON.

Exit codes:
    0: every document was processed
    1: a matching handler failed to decode a document, or a file was unreadable
    2: no handler recognized at least one document
"""

import argparse
import json
import sys
from typing import List, Optional

from lxml import etree
from pydantic import BaseModel, ValidationError

from xml_dispatcher.config import parse_environment_variables
from xml_dispatcher.exceptions import ConfigurationError, NoHandlerFoundError
from xml_dispatcher.handlers import default_handlers
from xml_dispatcher.logging_config import (
    get_logger,
    redirect_log_stream,
    resolve_log_level,
)
from xml_dispatcher.processor import XMLProcessor

EXIT_OK = 0
EXIT_DECODE_ERROR = 1
EXIT_UNHANDLED = 2


def _read_payloads(paths: List[str], max_payload_bytes: int) -> List[tuple]:
    if not paths:
        return [("<stdin>", sys.stdin.buffer.read(max_payload_bytes + 1))]

    payloads = []
    for path in paths:
        with open(path, "rb") as f:
            payloads.append((path, f.read(max_payload_bytes + 1)))
    return payloads


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Dispatch XML documents to the first matching handler"
    )
    parser.add_argument(
        "files", nargs="*", help="XML files to dispatch (reads stdin if omitted)"
    )
    parser.add_argument(
        "--log-level",
        choices=["ERROR", "WARNING", "INFO", "DEBUG"],
        default=None,
        help="Log level (defaults to XML_DISPATCHER_LOG_LEVEL, then LOG_LEVEL, then ERROR)",
    )

    args = parser.parse_args(argv)

    get_logger().setLevel(args.log_level or resolve_log_level())

    # stdout carries only the JSON result lines
    with redirect_log_stream(sys.stderr):
        return _dispatch(args.files)


def _dispatch(files: List[str]) -> int:
    try:
        config = parse_environment_variables()
        payloads = _read_payloads(files, config.max_payload_bytes)
    except ConfigurationError as e:
        print(f"ERROR: Configuration error: {e}", file=sys.stderr)
        return EXIT_DECODE_ERROR
    except OSError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_DECODE_ERROR

    processor = XMLProcessor()
    for handler in default_handlers(config):
        processor.register_handler(handler)

    exit_code = EXIT_OK
    for source, payload in payloads:
        if len(payload) > config.max_payload_bytes:
            print(
                f"ERROR: {source}: payload exceeds {config.max_payload_bytes} bytes",
                file=sys.stderr,
            )
            exit_code = max(exit_code, EXIT_DECODE_ERROR)
            continue

        try:
            result = processor.process_xml(payload)
        except NoHandlerFoundError as e:
            print(f"ERROR: {source}: {e}", file=sys.stderr)
            exit_code = EXIT_UNHANDLED
            continue
        except (etree.XMLSyntaxError, ValidationError) as e:
            print(f"ERROR: {source}: {e}", file=sys.stderr)
            exit_code = max(exit_code, EXIT_DECODE_ERROR)
            continue

        if isinstance(result, BaseModel):
            result = result.model_dump()
        print(json.dumps({"source": source, "result": result}))

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
