"""Command-line entry points for the assistant and the ordering service."""

import argparse
import asyncio
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from .app import Application
from .config import PROJECT_ROOT, AssistantConfig, ServiceConfig
from .logging_config import get_logger, setup_logging
from .ordering_service import create_ordering_app

logger = get_logger(__name__)


def _load_env(env_file: str | None) -> None:
    load_dotenv(Path(env_file) if env_file else PROJECT_ROOT / ".env")


async def _run_assistant(app: Application) -> None:
    await app.start()
    try:
        await app.run()
    finally:
        await app.stop()


def assistant_main(argv: list[str] | None = None) -> int:
    """Run the voice assistant."""
    parser = argparse.ArgumentParser(prog="pizza-assistant", description=assistant_main.__doc__)
    parser.add_argument("--text", action="store_true", help="type instead of speaking")
    parser.add_argument("--log-level", default=None)
    parser.add_argument("--env-file", default=None)
    args = parser.parse_args(argv)

    _load_env(args.env_file)
    setup_logging(log_level=args.log_level, console=not args.text)

    app = Application(AssistantConfig.from_env(), text_mode=args.text)
    try:
        asyncio.run(_run_assistant(app))
    except KeyboardInterrupt:
        logger.info("Interrupted")
    return 0


def service_main(argv: list[str] | None = None) -> int:
    """Run the ordering microservice."""
    parser = argparse.ArgumentParser(prog="pizza-ordering-service", description=service_main.__doc__)
    parser.add_argument("--host", default=None)
    parser.add_argument("--port", type=int, default=None)
    parser.add_argument("--log-level", default=None)
    parser.add_argument("--env-file", default=None)
    args = parser.parse_args(argv)

    _load_env(args.env_file)
    setup_logging(log_level=args.log_level)

    config = ServiceConfig.from_env()
    app = create_ordering_app(config)

    # Run with uvicorn
    uvicorn.run(
        app,
        host=args.host or config.host,
        port=args.port or config.port,
        log_level="info",
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(assistant_main())
