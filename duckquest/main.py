"""
DuckQuest — Rubber Ducking Adventure
Main entry point. One quest engine behind one of three hosts.

Modes:
  mcp     — MCP server over stdio (for AI assistants)
  web     — Flask JSON API
  console — interactive prompt on the terminal

Usage:
    python -m duckquest.main --mode mcp
    python -m duckquest.main --mode web --port 5000
    python -m duckquest.main --mode console --selector first

    # Reproducible mentor lines
    export DUCKQUEST_SEED=42
"""

import argparse
import logging
import signal
import sys

from duckquest.core.engine import QuestEngine
from duckquest.generation.mentor import get_selector
from duckquest.web import config as web_config

logger = logging.getLogger(__name__)

CONSOLE_PROMPT = "🦆 > "


def setup_logging(verbose: bool = False) -> None:
    """Configure logging. Always stderr: stdout may carry the MCP protocol."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def main():
    parser = argparse.ArgumentParser(
        description="DuckQuest — gamified rubber duck debugging companion",
        prog="duckquest",
    )
    parser.add_argument(
        "--mode", "-m",
        choices=["mcp", "web", "console"],
        default="mcp",
        help="Host to run (default: mcp)",
    )
    parser.add_argument(
        "--host",
        default=None,
        help="Bind address for web mode (default: 127.0.0.1, or DUCKQUEST_WEB_HOST env)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port for web mode (default: 5000, or DUCKQUEST_WEB_PORT env)",
    )
    parser.add_argument(
        "--selector",
        choices=["random", "first"],
        default=None,
        help="Mentor line selection (default: random, or DUCKQUEST_SELECTOR env)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random selector (default: DUCKQUEST_SEED env)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    args = parser.parse_args()

    setup_logging(args.verbose)

    engine = QuestEngine(selector=get_selector(args.selector, args.seed))

    if args.mode == "mcp":
        _run_mcp(engine)
    elif args.mode == "web":
        _run_web(engine, args.host or web_config.WEB_HOST, args.port or web_config.WEB_PORT)
    else:
        _run_console(engine)


def _run_mcp(engine: QuestEngine) -> None:
    from duckquest.transport.mcp_server import create_server

    server = create_server(engine)
    logger.info("Rubber Ducking Adventure MCP server running on stdio")
    server.run(transport="stdio")


def _run_web(engine: QuestEngine, host: str, port: int) -> None:
    from duckquest.web import create_app

    app = create_app(engine)
    logger.info(f"Web API starting on {host}:{port}")
    app.run(host=host, port=port, threaded=True, use_reloader=False)


def _run_console(engine: QuestEngine) -> None:
    """Read lines until EOF, Ctrl-C, or SIGTERM."""

    def signal_handler(sig, frame):
        logger.info(f"Received signal {sig}, shutting down...")
        raise KeyboardInterrupt

    signal.signal(signal.SIGTERM, signal_handler)

    print(engine.process_message("help"))
    try:
        while True:
            line = input(CONSOLE_PROMPT)
            if line.strip().lower() in ("quit", "exit"):
                break
            response = engine.process_message(line)
            if response:
                print(response)
    except (EOFError, KeyboardInterrupt):
        print()
    logger.info("Farewell, brave hero.")


if __name__ == "__main__":
    main()
