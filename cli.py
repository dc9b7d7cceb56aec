#!/usr/bin/env python3
"""
Command-line interface for the design pattern demos.

Usage:
    uv run python cli.py [command] [options]

Commands:
    demo        Run a pattern demo
    notify      Send a message through one of the notification factories
    test        Run the test suite
    serve       Start the API server

Examples:
    uv run python cli.py demo observer
    uv run python cli.py demo all
    uv run python cli.py notify factory-method push "You have a new message."
    uv run python cli.py notify abstract-factory urgent sms "Going down at 5pm"
    uv run python cli.py serve
"""

import argparse
import subprocess
import sys
from typing import Optional

from shared.logging_config import configure_logging

PATTERNS = ["abstract-factory", "factory-method", "observer", "singleton"]


def run_demo(pattern: str) -> None:
    """Run a demo scenario."""
    if pattern == "abstract-factory":
        from abstract_factory.demo import run_alert_service_demo
        run_alert_service_demo()
    elif pattern == "factory-method":
        from factory_method.demo import run_notification_service_demo
        run_notification_service_demo()
    elif pattern == "observer":
        from observer.demo import run_channel_demo
        run_channel_demo()
    elif pattern == "singleton":
        from singleton.demo import run_singleton_demo
        run_singleton_demo()
    elif pattern == "all":
        for name in PATTERNS:
            print("\n" + "=" * 70)
            print(f"DEMO: {name}")
            print("=" * 70 + "\n")
            run_demo(name)


def run_notify(args: argparse.Namespace) -> None:
    """Send a single message through the chosen factory."""
    if args.pattern == "factory-method":
        from factory_method.factory import NotificationFactory, UnknownChannelError

        try:
            notification = NotificationFactory().create_notification(args.channel)
        except UnknownChannelError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        if notification is None:
            print("No channel given, nothing sent.")
            return
        notification.send(args.message)

    elif args.pattern == "abstract-factory":
        from abstract_factory.factories import UnknownFamilyError, get_factory

        try:
            factory = get_factory(args.family)
        except UnknownFamilyError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        if not factory.supports(args.kind):
            print(f"{args.kind} is not supported by the {args.family} factory.")
            return
        notification = factory.create_notification(args.kind)
        notification.send(args.message, factory.create_template())


def run_tests(args: list[str]) -> None:
    """Run the test suite."""
    cmd = ["uv", "run", "pytest"] + args
    subprocess.run(cmd)


def run_server(host: str, port: int, reload: bool) -> None:
    """Start the API server."""
    cmd = ["uv", "run", "uvicorn", "api.main:app", f"--host={host}", f"--port={port}"]
    if reload:
        cmd.append("--reload")

    print(f"Starting server at http://{host}:{port}")
    print(f"API docs available at http://{host}:{port}/docs")
    subprocess.run(cmd)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Design Pattern Demos CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s demo abstract-factory
  %(prog)s demo all
  %(prog)s notify factory-method email "Your order has been shipped!"
  %(prog)s notify abstract-factory marketing email "Summer sale!"
  %(prog)s test -v
  %(prog)s serve --reload
        """,
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (logs go to stderr)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Demo command
    demo_parser = subparsers.add_parser("demo", help="Run a pattern demo")
    demo_parser.add_argument(
        "pattern",
        choices=PATTERNS + ["all"],
        help="Which pattern to demonstrate",
    )

    # Notify command
    notify_parser = subparsers.add_parser("notify", help="Send one notification")
    notify_sub = notify_parser.add_subparsers(dest="pattern", required=True)

    fm_parser = notify_sub.add_parser("factory-method", help="Create by channel name")
    fm_parser.add_argument("channel", help="SMS, EMAIL or PUSH (any case)")
    fm_parser.add_argument("message", help="Message to send")

    af_parser = notify_sub.add_parser("abstract-factory", help="Create from a family")
    af_parser.add_argument("family", help="urgent or marketing")
    af_parser.add_argument("kind", help="EMAIL or SMS (any case)")
    af_parser.add_argument("message", help="Message to send")

    # Test command
    test_parser = subparsers.add_parser("test", help="Run the test suite")
    test_parser.add_argument(
        "pytest_args",
        nargs="*",
        default=[],
        help="Arguments to pass to pytest",
    )

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Start the API server")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Host to bind to")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to bind to")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    if args.command == "demo":
        run_demo(args.pattern)
    elif args.command == "notify":
        run_notify(args)
    elif args.command == "test":
        run_tests(args.pytest_args)
    elif args.command == "serve":
        run_server(args.host, args.port, args.reload)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
