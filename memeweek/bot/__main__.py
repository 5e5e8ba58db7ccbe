"""Entry point for running the contest bot."""

import asyncio
import logging

from dotenv import load_dotenv

from memeweek.bot.client import run_bot


def main() -> None:
    load_dotenv()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    asyncio.run(run_bot())


if __name__ == "__main__":
    main()
