"""Interactive console prompts and status output."""
import sys
from typing import List, Optional


def info(*parts) -> None:
    """Print an informational line."""
    print("ℹ️ ", *parts)


def success(*parts) -> None:
    """Print a success line."""
    print("✅", *parts)


def warning(message: str) -> None:
    """Print a warning line."""
    print(f"⚠️  {message}")


def error(message: str) -> None:
    """Print an error line to stderr."""
    print(f"❌ {message}", file=sys.stderr)


def ask_text(
    message: str,
    default: Optional[str] = None,
    empty_message: str = "Please enter a value",
) -> str:
    """
    Ask for a free-text value, re-asking until a non-empty answer is given.

    Pressing enter on a blank line accepts ``default`` when one is set.

    Args:
        message: Question shown to the user
        default: Pre-filled answer, shown in parentheses
        empty_message: Hint printed when the answer is blank

    Returns:
        The stripped answer
    """
    suffix = f" ({default})" if default else ""
    while True:
        answer = input(f"? {message}{suffix} ").strip()
        if not answer and default:
            return default
        if answer:
            return answer
        print(f">> {empty_message}")


def ask_choice(message: str, choices: List[str]) -> str:
    """
    Show a numbered single-choice menu and return the selected label.

    Either the option number or its label (case-insensitive) is accepted.
    """
    print(f"? {message}")
    for idx, choice in enumerate(choices, start=1):
        print(f"  {idx}. {choice}")

    while True:
        answer = input(f"Enter choice [1-{len(choices)}]: ").strip()
        if answer.isdigit() and 1 <= int(answer) <= len(choices):
            return choices[int(answer) - 1]
        for choice in choices:
            if answer and answer.lower() in (choice.lower(), choice.split()[-1].lower()):
                return choice
        print("Invalid choice")
