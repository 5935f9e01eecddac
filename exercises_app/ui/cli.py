# exercises_app/ui/cli.py
import argparse
from typing import List, Optional

from exercises_app.config import configure_logging, load_settings
from exercises_app.console_style import bold, cyan
from exercises_app.core.dispatcher import dispatch
from exercises_app.core.registry import build_registry
from exercises_app.utils import read_choice

PROMPT = "Choose exercise (1-36): "
DONE_MESSAGE = "\nDone. Press any key to exit."


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Numbered language exercises.")
    parser.add_argument("selector", nargs="?", help="exercise number (1-36)")
    parser.add_argument("--config", help="JSON settings file")
    parser.add_argument(
        "--list", action="store_true", help="list the exercises and exit"
    )
    parser.add_argument(
        "--no-wait", action="store_true", help="do not wait for a key at the end"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Prompt for one selector, run that exercise, then wait for a key."""
    args = _parse_args(argv)
    settings = load_settings(args.config)
    configure_logging(settings.log_level)
    registry = build_registry(settings)

    if args.list:
        print(bold("=== Exercises ==="))
        for exercise in registry.values():
            print(f"{cyan(exercise.key.rjust(2))}. {exercise.title}")
        return 0

    choice = args.selector if args.selector is not None else read_choice(PROMPT)
    dispatch(choice, registry)

    print(DONE_MESSAGE)
    if settings.wait_for_key and not args.no_wait:
        read_choice("")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
