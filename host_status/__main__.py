"""
host-status
~~~~~~~~~~~

authenticated host health endpoint (GET /status)
"""

# stdlib imports
import argparse
import logging
import sys

# third party imports
import uvicorn

# app imports
from host_status.config import get_settings


def port(value) -> int:
    """Check if the provided port is valid"""
    try:
        value = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value} is not a number")

    if not 1 <= value <= 65535:
        raise argparse.ArgumentTypeError(f"{value} is not a valid port")
    return value


def setup_parser(default_port: int) -> argparse.ArgumentParser:
    """Set default values and handle arg parser"""
    parser = argparse.ArgumentParser(
        description="Serve host health (CPU, memory, temperatures, network) on GET /status",
    )
    parser.add_argument(
        "--host",
        dest="host",
        default="0.0.0.0",
        help="Address to bind to",
    )
    parser.add_argument(
        "--port",
        "-p",
        dest="port",
        type=port,
        default=default_port,
        help="Port number to run the server on (default: $PORT or 8080)",
    )
    return parser


def main() -> int:
    settings = get_settings()
    args = setup_parser(settings.port).parse_args()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    uvicorn.run(
        "host_status.main:app",
        host=args.host,
        port=args.port,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
