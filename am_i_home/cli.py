"""
Command-line interface for am-i-home.

Checks whether a device is connected to a Vodafone HomeStation router.
"""

import argparse
import logging
import sys

import urllib3

from .client import HomeStationClient
from .commands import check_by_matcher, list_active, list_devices
from .config import DEFAULT_ROUTER, DEFAULT_USER, PASSWORD_ENV_VAR
from .credentials import PasswordUnavailable, resolve_password
from .errors import RouterError
from .logging_setup import log, setup_logging

EXIT_FOUND = 0
EXIT_ABSENT = 1
EXIT_ERROR = 2

COMMANDS = ("list", "list-all", "check")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="am-i-home",
        description="am-i-home - check if a device is connected to your Vodafone HomeStation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Commands:\n"
            "  list               list all active devices\n"
            "  list-all           list all devices ever connected\n"
            "  check <MATCHER>    print 'true' or 'false'; exit 0 if MATCHER (MAC,\n"
            "                     hostname or IP) is present, 1 if absent, 2 on error\n"
            "\n"
            f"The password falls back to the {PASSWORD_ENV_VAR} env var, then a\n"
            ".env file in the current directory, else an interactive prompt."
        ),
    )
    parser.add_argument(
        "--router", default=DEFAULT_ROUTER,
        help=f"Router address (default: {DEFAULT_ROUTER})",
    )
    parser.add_argument(
        "--user", default=DEFAULT_USER,
        help=f"Router admin username (default: {DEFAULT_USER})",
    )
    parser.add_argument(
        "--pass", dest="password", default="",
        help=f"Router admin password (overrides {PASSWORD_ENV_VAR})",
    )
    parser.add_argument(
        "--no-verify-ssl", dest="verify_ssl", action="store_false", default=True,
        help="Disable TLS certificate verification (use for self-signed certs)",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable verbose debug logging",
    )
    parser.add_argument("command", nargs="?", help="list, list-all or check")
    parser.add_argument("matcher", nargs="?", help="MAC, hostname or IP for 'check'")
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Returns the process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0
    if args.command not in COMMANDS:
        print(f"unknown command {args.command!r}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return EXIT_ERROR
    if args.command == "check" and not args.matcher:
        print("check command requires a matcher argument", file=sys.stderr)
        return EXIT_ERROR
    if not args.user.strip():
        print("--user is required", file=sys.stderr)
        return EXIT_ERROR

    setup_logging(debug=args.debug)
    if args.debug:
        logging.getLogger("urllib3").setLevel(logging.DEBUG)
    if not args.verify_ssl:
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
        log.warning("TLS certificate verification is DISABLED (--no-verify-ssl)")

    try:
        password = resolve_password(args.password, args.user, args.router)
    except PasswordUnavailable as exc:
        print(exc, file=sys.stderr)
        return EXIT_ERROR

    with HomeStationClient(args.router, args.user, password,
                           verify_ssl=args.verify_ssl) as client:
        try:
            if args.command == "list-all":
                list_devices(client)
            elif args.command == "list":
                list_active(client)
            else:
                found = check_by_matcher(client, args.matcher)
                print("true" if found else "false")
                return EXIT_FOUND if found else EXIT_ABSENT
        except RouterError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return EXIT_ERROR
    return 0


if __name__ == "__main__":
    sys.exit(main())
