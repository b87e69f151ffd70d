"""Configuration for entry-point error reporting."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from pydantic import BaseModel, ConfigDict, Field


class ReportConfig(BaseModel):
    """How ``run_main`` reports a failure.

    Attributes:
        exit_code: Status returned when the entry point fails; never zero
        show_causes: Append one line per chained cause after the message
        cause_prefix: Leader for each cause line
        stream: Where the report is written; stderr when unset
    """

    model_config = ConfigDict(frozen=True)

    exit_code: int = Field(default=1, ge=1, le=255)
    show_causes: bool = True
    cause_prefix: str = "caused by: "
    stream: Any | None = None

    def output(self) -> TextIO:
        return self.stream if self.stream is not None else sys.stderr
