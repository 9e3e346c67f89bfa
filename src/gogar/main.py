"""
Main entry point for the GOGAR application.
"""

import argparse
import asyncio
import logging
import sys
from importlib.metadata import PackageNotFoundError, version

from gogar.config import get_settings
from gogar.io.text_interface import TextInterface


def get_version() -> str:
    try:
        return version("gogar")
    except PackageNotFoundError:
        return "unknown"


def setup_logging() -> None:
    """Configure application logging."""
    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="gogar",
        description="GOGAR -- the game of giving and asking for reasons",
    )
    parser.add_argument(
        "-w",
        "--web",
        nargs="?",
        type=int,
        const=settings.web_port,
        default=None,
        metavar="PORT",
        help=f"Run web version of GOGAR [on port PORT, default {settings.web_port}]",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {get_version()}",
    )
    return parser


def run_web(port: int) -> None:
    """Serve the web front end until interrupted."""
    import uvicorn

    from gogar.web.server import create_app

    settings = get_settings()
    logger = logging.getLogger(__name__)
    logger.info(f"Starting web version of GOGAR on http://{settings.web_host}:{port}")
    uvicorn.run(create_app(), host=settings.web_host, port=port, log_level=settings.log_level.lower())


async def run_console() -> None:
    """Run the terminal version of the game."""
    await TextInterface().run()


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the application."""
    args = build_parser().parse_args(sys.argv[1:] if argv is None else argv)
    setup_logging()

    try:
        if args.web is not None:
            run_web(args.web)
        else:
            asyncio.run(run_console())
    except KeyboardInterrupt:
        print("\nGOGAR session terminated by user.")
        sys.exit(0)
    except Exception as e:
        logging.error(f"Application error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
