"""Interactive operator prompts."""

from __future__ import annotations

import questionary
from rich.console import Console
from rich.panel import Panel

from project_migrator.engine.status import OperatorPrompt


class QuestionaryOperatorPrompt(OperatorPrompt):
    """Shows the instructions in a Rich panel and waits for Enter.

    Ctrl-C at the prompt makes questionary return ``None``, which is reported
    as an abort.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(stderr=True)

    async def acknowledge(self, message: str) -> bool:
        self._console.print(Panel(message, title="Action required", border_style="yellow"))
        answer = await questionary.text("Press Enter to continue...").ask_async()
        return answer is not None
