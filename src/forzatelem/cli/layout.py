"""Schema layout report."""

from __future__ import annotations

import argparse
import sys

from .. import __version__
from ..codec.schema import DASH_SCHEMA, TelemetrySchema


def print_layout(schema: TelemetrySchema) -> None:
    """Print the offset and width of every field in the schema.

    Args:
        schema: Schema to report on
    """
    print(f"{'=' * 19} Telemetry datagram layout {'=' * 19}")
    print(f"{len(schema)} field{'s' if len(schema) != 1 else ''}, {schema.total_width()} bytes")
    print()
    print(f"{'#':>3}  {'Field':<40}{'Tag':<6}{'Offset':>7}{'Width':>7}")

    offsets = schema.offsets()
    for i, field in enumerate(schema, 1):
        width = field.width
        if width is None:
            print(f"{i:>3}  {field.name:<40}{field.type_tag:<6}{'-':>7}{'-':>7}  (unknown tag, skipped)")
            continue
        print(f"{i:>3}  {field.name:<40}{field.type_tag:<6}{offsets[field.name]:>7}{width:>7}")

    print()
    print(f"Total width: {schema.total_width()} bytes")


def main() -> int:
    """Entry point for the layout report.

    Returns:
        Exit code (0 for success)
    """
    parser = argparse.ArgumentParser(
        description="forzatelem: telemetry datagram layout",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  forzatelem-layout            Print field offsets and widths
  forzatelem-layout --version  Show version
        """,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"forzatelem {__version__}",
    )
    parser.parse_args()

    print_layout(DASH_SCHEMA)
    return 0


if __name__ == "__main__":
    sys.exit(main())
