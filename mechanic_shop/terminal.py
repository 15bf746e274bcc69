"""
Line-oriented terminal used by the menu and the handlers.
"""


class ConsoleTerminal:
    """Prompts on stdout and reads answers from stdin."""

    def prompt(self, label: str) -> str:
        """Return one line of input; raises EOFError when stdin is exhausted."""
        return input(f"\t{label}")

    def show(self, text: str = "") -> None:
        print(text)
