"""
CLI for NoteLayer.

Usage:
    notelayer              # Start the front-end named by APP_MODE (default: repl)
    notelayer repl         # Line-oriented REPL on stdin/stdout
    notelayer http         # HTTP API on HOST:PORT
    notelayer --help       # Show help
"""

import sys
from typing import List, Optional


def print_help() -> None:
    """Print help message."""
    print("""notelayer - note CRUD over a REPL or HTTP

Usage:
    notelayer [repl|http]         Start a front-end (default from APP_MODE)

REPL commands:
    CREATE;<name>;<content>       Create a note
    READ;<id>                     Show one note
    READALL                       Show every note
    UPDATE;<id>;<name>;<content>  Update a note (empty field = keep)
    DELETE;<id>                   Delete a note
    exit                          Leave the REPL

HTTP:
    GET    /notes/[?id=<id>]      List notes or get one
    POST   /notes/                Create from {"name", "content"}
    PUT    /notes/?id=<id>        Update from {"name", "content"}
    DELETE /notes/?id=<id>        Delete a note

Options:
    notelayer --help, -h          Show this help
    notelayer --version, -v       Show version""")


def print_version() -> None:
    """Print version."""
    from notelayer import __version__
    print(f"notelayer {__version__}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = sys.argv[1:] if argv is None else argv

    if args and args[0] in ("--help", "-h", "help"):
        print_help()
        return 0

    if args and args[0] in ("--version", "-v", "version"):
        print_version()
        return 0

    from notelayer.apps import new_application
    from notelayer.config import get_settings
    from notelayer.core.exceptions import ConfigurationError
    from notelayer.core.logging import setup_logging

    settings = get_settings()
    setup_logging(settings)
    mode = args[0] if args else settings.app_mode

    try:
        app = new_application(mode, settings)
    except ConfigurationError as e:
        print(f"error: {e.message}", file=sys.stderr)
        return 2

    try:
        app.run()
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
