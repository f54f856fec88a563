"""
Main entry point for SPIN & DARE.

Plays a few spins in the console using the default deck.
"""

import asyncio
import logging
import sys

from spindare.config.settings import Settings, get_settings
from spindare.core.events import EventBus
from spindare.feedback import FeedbackRouter
from spindare.runner import SpinLoop
from spindare.wheel.deck import default_pool
from spindare.wheel.machine import SpinStateMachine


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


async def run_game(settings: Settings) -> None:
    """Play ``settings.auto_spins`` spins and print each card."""
    logger = logging.getLogger(__name__)

    event_bus = EventBus()
    machine = SpinStateMachine(default_pool(), settings=settings, event_bus=event_bus)
    loop = SpinLoop(machine, event_bus, fps=settings.timing.fps)
    feedback = FeedbackRouter(
        event_bus,
        haptics=lambda pattern: logger.debug(f"Haptic pattern: {list(pattern)}"),
        notify=print,
    )

    loop_task = asyncio.create_task(loop.run())
    try:
        for _ in range(settings.auto_spins):
            outcome = await loop.spin()
            if outcome is None:
                break
            challenge = outcome.challenge
            print(f"[{outcome.color.value}] {challenge.category}")
            print(f"  {challenge.text}")
    finally:
        loop.shutdown()
        await loop_task
        feedback.close()


def main() -> None:
    """Main entry point."""
    from dotenv import load_dotenv

    # Load environment variables
    load_dotenv()

    settings = get_settings()
    setup_logging(settings.debug)

    logger = logging.getLogger(__name__)
    logger.info("SPIN & DARE starting...")

    try:
        asyncio.run(run_game(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("SPIN & DARE stopped")


if __name__ == "__main__":
    main()
