import argparse
import logging
import sys
from pathlib import Path

import uvicorn

from src.api.deps import get_settings
from src.rules.loader import load_rules

logger = logging.getLogger("cli")

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%I:%M:%S %p")


def handle_serve(args: argparse.Namespace) -> int:
    settings = get_settings()
    host = args.host if args.host is not None else settings.host
    port = args.port if args.port is not None else settings.port

    uvicorn.run(
        "src.api.main:app",
        host=host,
        port=port,
        reload=args.reload,
        log_level="info",
        access_log=False,
    )
    return 0


def handle_check_rules(args: argparse.Namespace) -> int:
    path = Path(args.path) if args.path else get_settings().rules_path
    try:
        rules = load_rules(path)
    except (FileNotFoundError, ValueError) as e:
        logger.error("%s", e)
        return 1

    contact = rules.forms.contact
    print(f"Rules OK: {rules.project.slug} v{rules.project.rules_version}")
    print(
        "Contact minimum lengths: "
        f"firstName={contact.first_name.min_length}, "
        f"lastName={contact.last_name.min_length}, "
        f"company={contact.company.min_length}, "
        f"subject={contact.subject.min_length}, "
        f"message={contact.message.min_length}"
    )
    print(f"Resource categories: {len(rules.resources.categories)}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="securemdm", description="SecureMDM site server")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # serve
    serve_parser = subparsers.add_parser("serve", help="Run the web server")
    serve_parser.add_argument("--host", default=None, help="Bind address (default: $HOST)")
    serve_parser.add_argument("--port", type=int, default=None, help="Port (default: $PORT)")
    serve_parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    serve_parser.set_defaults(handler=handle_serve)

    # check-rules
    check_parser = subparsers.add_parser("check-rules", help="Validate a rules file")
    check_parser.add_argument("path", nargs="?", default=None, help="Rules file path")
    check_parser.set_defaults(handler=handle_check_rules)

    return parser


def main(argv: list[str] | None = None) -> None:
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    sys.exit(args.handler(args))


if __name__ == "__main__":
    main()
