import argparse
import logging
import sys

from rich.console import Console

from kibana_me_logs import __version__
from kibana_me_logs.container import DependencyContainer, container
from kibana_me_logs.exceptions import BaseAppError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kibana-me-logs",
        description="Open the Kibana dashboard showing the logs of an application.",
        usage="kibana-me-logs <kibana-app-name> <app-name>",
    )
    parser.add_argument("kibana_app", nargs="?", help="Name of the Kibana app")
    parser.add_argument("app", nargs="?", help="Name of the app whose logs to show")
    parser.add_argument(
        "--service",
        default=None,
        help="Service label shared by both apps (default: KIBANA_SERVICE_LABEL or logstash14)",
    )
    parser.add_argument(
        "--print-only",
        action="store_true",
        help="Print the dashboard URL instead of opening a browser",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def main(
    argv: list[str] | None = None, deps: DependencyContainer | None = None
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    console = Console(highlight=False, soft_wrap=True)

    if not args.kibana_app or not args.app:
        parser.print_help(sys.stdout)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.CRITICAL,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    deps = deps or container
    try:
        use_case = deps.get_open_app_logs_use_case(service_label=args.service)
        if args.print_only:
            link = use_case.resolve(args.kibana_app, args.app)
        else:
            link = use_case.execute(args.kibana_app, args.app)
    except BaseAppError as e:
        console.print(f"ERROR: {e}", style="bold red", markup=False)
        return 1

    if args.print_only:
        console.print(link.url, markup=False)
    else:
        console.print(
            f"Opening logs of {link.app} in {link.kibana_app}: {link.url}",
            markup=False,
        )
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
