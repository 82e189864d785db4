"""Use Case: Run the replace / append / custom-separator walkthrough.

Exercises a slot the same way a first-time user would: overwrite it with
a timestamped line, append a line, append again with a custom separator,
re-reading the slot after each write.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from notems.domain.models.save_result import SaveResult
from notems.infrastructure.http.note_client import NoteClient

CUSTOM_SEPARATOR = " | "


@dataclass
class DemoStep:
    """One write of the walkthrough plus the content read back after it."""

    name: str
    result: SaveResult
    content_after: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.result.success


class RunDemoUseCase:
    """Drive a slot through replace, append and custom-separator append."""

    def __init__(self, client: NoteClient) -> None:
        self._client = client

    def execute(self, now: datetime) -> list[DemoStep]:
        """Run all three steps against the client's slot.

        Args:
            now: Timestamp embedded in the replace step's text. Passed in
                so the caller owns the clock and timezone.

        Returns:
            One ``DemoStep`` per write, in order. A failed write leaves
            ``content_after`` as ``None`` and does not stop later steps.
        """
        stamp = now.strftime("%Y-%m-%d %H:%M:%S")
        writes = [
            (
                "replace",
                f"This content was written by notems at {stamp} (replace).",
                False,
                None,
            ),
            ("append", "This line was appended.", True, None),
            (
                "append-custom-separator",
                f"This text was appended with '{CUSTOM_SEPARATOR}' as separator.",
                True,
                CUSTOM_SEPARATOR,
            ),
        ]

        steps: list[DemoStep] = []
        for name, text, append, separator in writes:
            result = self._client.save(text, append=append, separator=separator)
            step = DemoStep(name=name, result=result)
            if result:
                step.content_after = self._client.try_fetch()
            steps.append(step)
        return steps
