# file: gui_recorder/prompts.py
from typing import List, Tuple


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def ask_text(message: str, default: str = "") -> str:
    suffix = f" [{default}]" if default else ""
    answer = input(f"✏️  {message}{suffix}: ").strip()
    return answer or default


def ask_choice(message: str, options: List[Tuple[str, str]]) -> str:
    """Show numbered options and return the chosen value.

    The answer may be the option number or the value itself. Anything else is
    returned as typed so the caller decides how to reject it.
    """
    print(f"\n{message}")
    for i, (label, _value) in enumerate(options, 1):
        print(f"  {i}. {label}")

    answer = input("👉 Choose an option: ").strip()
    if answer.isdigit() and 1 <= int(answer) <= len(options):
        return options[int(answer) - 1][1]
    return answer


def ask_int(message: str, default: int, low: int, high: int) -> int:
    """Read an integer and clamp it into [low, high].

    Empty or non-numeric answers fall back to the default.
    """
    answer = input(f"🔢 {message} [{default}]: ").strip()
    if not answer:
        value = default
    else:
        try:
            value = int(answer)
        except ValueError:
            print(f"⚠️  Not a number: {answer!r}, using {default}")
            value = default
    return clamp(value, low, high)


def ask_confirm(message: str, default: bool = False) -> bool:
    hint = "Y/n" if default else "y/N"
    answer = input(f"❓ {message} ({hint}): ").strip().lower()
    if not answer:
        return default
    return answer.startswith("y")
