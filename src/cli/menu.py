"""Interactive operation menu.

Shows the numbered registry, reads a selection, runs it to completion and asks
whether to run another one. Only one operation runs at a time: each one is
driven to completion with `asyncio.run` before the next prompt.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable, Sequence

from rich.console import Console

from core.services.operations import Operation

logger = logging.getLogger(__name__)

INVALID_SELECTION_MESSAGE = "An invalid test method index was entered.  Please try again."
CONTINUE_PROMPT = "Execute another test method?  (Y/N)"


class MenuLoop:
    def __init__(
        self,
        operations: Sequence[Operation],
        console: Console,
        *,
        read_line: Callable[[], str] | None = None,
        clear_screen: bool = True,
    ) -> None:
        if not operations:
            raise ValueError("The menu needs at least one operation")
        self._operations = list(operations)
        self._console = console
        self._read_line = read_line or console.input
        self._clear_screen = clear_screen

    @property
    def operations(self) -> list[Operation]:
        return list(self._operations)

    def display(self) -> None:
        self._console.print("Choose a method to execute by entering the numeral for the selected method.")
        self._console.print(
            "The results of the test method executions will be displayed within the system text editor."
        )
        for index, operation in enumerate(self._operations, start=1):
            self._console.print(f"{index:>3}:  {operation.label}", markup=False, highlight=False)

    def parse_selection(self, raw: str) -> int | None:
        """1-based index if `raw` names an operation, otherwise None."""

        text = raw.strip()
        if not (text.isascii() and text.isdigit()):
            return None
        index = int(text)
        if 1 <= index <= len(self._operations):
            return index
        return None

    def read_selection(self) -> int:
        """Prompt until the input is an index in [1, N]."""

        index = self.parse_selection(self._read_line())
        while index is None:
            self._console.print(INVALID_SELECTION_MESSAGE)
            index = self.parse_selection(self._read_line())
        return index

    def execute(self, index: int) -> float:
        """Run operation `index` (1-based) and return the elapsed milliseconds."""

        operation = self._operations[index - 1]
        self._console.print(f"Executing:  {operation.label}...", markup=False)

        started = time.perf_counter()
        asyncio.run(operation.invoke())
        elapsed_ms = (time.perf_counter() - started) * 1000

        logger.debug("%s finished in %.0f ms", operation.label, elapsed_ms)
        self._console.print(f"Total Method Execution Time (ms):  {elapsed_ms:.0f}")
        return elapsed_ms

    def should_continue(self) -> bool:
        self._console.print(CONTINUE_PROMPT)
        return self._read_line().lower() == "y"

    def run(self) -> None:
        """Menu, selection, execution; repeat while the operator answers "y".

        End of input stops the loop.
        """

        try:
            while True:
                if self._clear_screen:
                    self._console.clear()
                self.display()
                self.execute(self.read_selection())
                if not self.should_continue():
                    break
        except EOFError:
            logger.debug("Input closed, leaving the menu")
