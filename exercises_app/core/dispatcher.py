import logging
from typing import Mapping

from exercises_app.console_style import red
from exercises_app.core.registry import Exercise

logger = logging.getLogger(__name__)

INVALID_CHOICE = "Invalid choice."


def dispatch(choice: str, registry: Mapping[str, Exercise]) -> bool:
    """Run the exercise registered under `choice`.

    Returns False (after printing the invalid-choice message) when nothing
    matches. Exactly one routine runs per call.
    """
    exercise = registry.get(choice.strip())
    if exercise is None:
        logger.debug("Unknown selector %r", choice)
        print(red(INVALID_CHOICE))
        return False
    logger.debug("Running exercise %s (%s)", exercise.key, exercise.title)
    exercise.run()
    return True
