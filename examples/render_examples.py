"""Render every example document in this directory next to its source.

Usage:
    python examples/render_examples.py
"""

from pathlib import Path

from gifmaker import FormatError, convert
from gifmaker.io import atomic_write, read_document, setup_logging


def main() -> None:
    setup_logging(log_level="INFO")
    examples_dir = Path(__file__).parent

    for source in sorted(examples_dir.glob("*.txt")):
        target = source.with_suffix(".gif")
        try:
            data = convert(read_document(source))
        except FormatError as e:
            print(f"❌ {source.name}: {e}")
            continue

        with atomic_write(target) as f:
            f.write(data)
        print(f"✅ {source.name} -> {target.name} ({len(data)} bytes)")


if __name__ == "__main__":
    main()
