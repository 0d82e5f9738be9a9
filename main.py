import argparse
import asyncio
import sys
from typing import List, Optional

import structlog
from pydantic import ValidationError

from agent.query_router import QueryRouter
from src.config.config import Config
from src.exceptions.cli import UsageError
from src.utils.logging_config import setup_logging

logger = structlog.get_logger(__name__)

GENERIC_FAILURE_MESSAGE = "I encountered an issue processing your request. Please try again."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weather-agent",
        description="Answer a question, looking up live weather data when the question needs it.",
    )
    parser.add_argument("query", nargs="*", help="The question to answer")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    return parser


def parse_query(parser: argparse.ArgumentParser, argv: Optional[List[str]]) -> argparse.Namespace:
    """
    Parse arguments and join the positional words into a single query.

    Raises:
        UsageError: If no query was given
    """
    args = parser.parse_args(argv)
    args.query = " ".join(args.query).strip()
    if not args.query:
        raise UsageError("A query is required")
    return args


async def run(query: str, settings: Config) -> str:
    router = QueryRouter(settings)
    outcome = await router.handle_query(query)
    return outcome.response


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()

    try:
        args = parse_query(parser, argv)
    except UsageError:
        parser.print_usage(sys.stderr)
        print('Usage: weather-agent "your question"', file=sys.stderr)
        return 2

    try:
        settings = Config()
    except ValidationError as e:
        # Defaults only, the environment is what failed validation
        setup_logging(Config.model_construct(), level="DEBUG" if args.verbose else None)
        logger.error(
            "Invalid configuration",
            error_count=e.error_count(),
            fields=[".".join(str(part) for part in err["loc"]) for err in e.errors()],
        )
        print(GENERIC_FAILURE_MESSAGE, file=sys.stderr)
        return 1

    setup_logging(settings, level="DEBUG" if args.verbose else None)

    print("\n🌤️ Processing your query...")

    try:
        response = asyncio.run(run(args.query, settings))
    except KeyboardInterrupt:
        logger.info("Query cancelled by user")
        return 130
    except Exception as e:
        logger.error(
            "Query failed",
            error_type=type(e).__name__,
            error=str(e),
            exc_info=True,
        )
        print(GENERIC_FAILURE_MESSAGE, file=sys.stderr)
        return 1

    print("\n💡 Response:")
    print(response)
    print("")
    return 0


if __name__ == "__main__":
    sys.exit(main())
