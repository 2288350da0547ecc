# worksheet/errors.py
from __future__ import annotations


class WorksheetError(ValueError):
    pass


class UnknownSnippetError(WorksheetError, KeyError):
    def __init__(self, name: str):
        super().__init__(f"Unknown snippet: {name}")
        self.name = name

    def __str__(self) -> str:
        return f"Unknown snippet: {self.name}"
