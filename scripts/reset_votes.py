#!/usr/bin/env python3
"""Reset every bot's votes.

Can be run by hand or from a scheduled job so the "most voted" ranking
reflects recent activity.

Usage:
    python scripts/reset_votes.py --actor-id 123456789
"""

import argparse
import asyncio
import sys

import logfire

from botlist.application.usecase.vote import ResetVotesRequest, ResetVotesUseCase
from botlist.config import Settings
from botlist.domain.value import Actor, Role, UserId
from botlist.util.di.container import create_container
from botlist.util.logging import get_logger, setup_logging
from botlist.util.observability import configure_logfire

logger = get_logger(__name__)


async def reset_votes(actor_id: str) -> None:
    """Run the reset as the given site owner."""
    container = create_container()
    try:
        async with container() as request_container:
            use_case = await request_container.get(ResetVotesUseCase)
            response = await use_case.execute(
                ResetVotesRequest(actor=Actor(user_id=UserId(actor_id), role=Role.OWNER))
            )
        logger.info(response.message)
    finally:
        await container.close()


def main() -> int:
    parser = argparse.ArgumentParser(description="Reset all bot votes")
    parser.add_argument(
        "--actor-id", required=True, help="User ID of the site owner running the reset"
    )
    args = parser.parse_args()

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    try:
        with logfire.span("scripts.reset_votes", actor_id=args.actor_id):
            asyncio.run(reset_votes(args.actor_id))
        return 0
    except Exception as e:
        logfire.error(
            "Vote reset failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
