# exercises_app/console_style.py
_RESET = "\033[0m"


def _paint(code: str, text: str) -> str:
    return f"\033[{code}m{text}{_RESET}"


def bold(text: str) -> str:
    return _paint("1", text)


def cyan(text: str) -> str:
    return _paint("96", text)


def red(text: str) -> str:
    return _paint("91", text)
