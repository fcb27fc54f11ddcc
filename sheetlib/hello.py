"""Print a greeting."""

import sys

GREETING = "Hello World!"


def greeting() -> str:
    """Return the greeting text."""
    return GREETING


def main(argv: list[str] | None = None) -> int:
    """Write the greeting to standard output and return 0.

    Command-line arguments are accepted and ignored.
    """
    stream = sys.stdout
    stream.write(f"{greeting()}\n")
    stream.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())