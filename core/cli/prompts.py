"""
Minimal interactive prompts on top of input().
Ctrl-C and EOF surface as PromptCancelled so callers can exit cleanly.
"""

from typing import Callable, List, Optional, Sequence, TypeVar

T = TypeVar("T")


class PromptCancelled(Exception):
    pass


class Prompter:
    def __init__(self, input_func: Callable[[str], str] = input, output_func: Callable[..., None] = print):
        self._input = input_func
        self._print = output_func

    def _ask(self, message: str) -> str:
        try:
            return self._input(message)
        except (KeyboardInterrupt, EOFError) as e:
            raise PromptCancelled() from e

    def text(self, message: str, hint: str = "", validate: Optional[Callable[[str], Optional[str]]] = None) -> str:
        """Ask until validate returns None for the trimmed answer."""
        suffix = f" ({hint})" if hint else ""
        while True:
            answer = self._ask(f"{message}{suffix}\n> ").strip()
            error = validate(answer) if validate else None
            if error is None:
                return answer
            self._print(f"❌ {error}")

    def select(self, message: str, choices: Sequence[T], labels: Sequence[str]) -> T:
        """Numbered choice; accepts the number or the label (case-insensitive)."""
        self._print(message)
        for index, label in enumerate(labels, start=1):
            self._print(f"  {index:>2}. {label}")

        lookup: List[str] = [label.lower() for label in labels]
        while True:
            answer = self._ask("> ").strip()
            if answer.isdigit() and 1 <= int(answer) <= len(choices):
                return choices[int(answer) - 1]
            if answer.lower() in lookup:
                return choices[lookup.index(answer.lower())]
            self._print(f"❌ Please enter a number between 1 and {len(choices)}")

    def confirm(self, message: str, default: bool = True) -> bool:
        marker = "Y/n" if default else "y/N"
        while True:
            answer = self._ask(f"{message} ({marker}) ").strip().lower()
            if not answer:
                return default
            if answer in ("y", "yes"):
                return True
            if answer in ("n", "no"):
                return False
            self._print("❌ Please answer 'y' or 'n'")
