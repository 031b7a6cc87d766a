"""
Resolvers decide what happens to a designator the catalog does not know.

A resolver returns None when the operator declines, otherwise a new
ComponentEntry whose target_file names the catalog file to append it to.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict, List, Optional, Protocol, TextIO

from .models import ComponentEntry


class Resolver(Protocol):
    def resolve(self, designator: str, catalog_files: List[Path]) -> Optional[ComponentEntry]:
        ...


class DecliningResolver:
    """Non-interactive: declines everything and remembers what it was asked."""

    def __init__(self):
        self.unresolved: List[str] = []

    def resolve(self, designator: str, catalog_files: List[Path]) -> Optional[ComponentEntry]:
        if designator not in self.unresolved:
            self.unresolved.append(designator)
        return None


class ScriptedResolver:
    """
    Answers from a prepared table, keyed by lowercased designator.

    A missing key or a None value declines. An answer without target_file goes
    to the first catalog file.
    """

    def __init__(self, answers: Optional[Dict[str, Optional[ComponentEntry]]] = None):
        self.answers = {k.lower(): v for k, v in (answers or {}).items()}
        self.calls: List[str] = []

    def resolve(self, designator: str, catalog_files: List[Path]) -> Optional[ComponentEntry]:
        self.calls.append(designator)
        answer = self.answers.get(designator.lower())
        if answer is None:
            return None
        target = answer.target_file
        if target is None:
            if not catalog_files:
                return None
            target = catalog_files[0]
        return answer.model_copy(update={"key": designator.lower(), "target_file": target})


class ConsoleResolver:
    """Asks the operator on a terminal. Blocks until every question is answered."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def _say(self, text: str = "") -> None:
        self.stdout.write(text + "\n")
        self.stdout.flush()

    def _ask(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        return self.stdin.readline().rstrip("\r\n")

    def ask_yes_no(self, question: str, default: bool = False) -> bool:
        suffix = " [Y/n]: " if default else " [y/N]: "
        while True:
            answer = self._ask(question + suffix).strip()
            if not answer:
                return default
            c = answer[0].lower()
            if c == "y":
                return True
            if c == "n":
                return False

    def choose_file(self, designator: str, catalog_files: List[Path]) -> Optional[Path]:
        self._say(f'=== Choose catalog file for: "{designator}" ===')
        for i, path in enumerate(catalog_files, start=1):
            self._say(f"{i}. {path.name}")
        while True:
            answer = self._ask("Number (Enter = skip): ").strip()
            if not answer:
                return None
            if answer.isdigit() and 1 <= int(answer) <= len(catalog_files):
                return catalog_files[int(answer) - 1]

    def resolve(self, designator: str, catalog_files: List[Path]) -> Optional[ComponentEntry]:
        self._say(f'Component not found in catalog: "{designator}"')
        if not self.ask_yes_no("Add this component to the catalog?", default=False):
            return None

        target = self.choose_file(designator, catalog_files) if catalog_files else None
        if target is None:
            self._say("No catalog file selected. Skipping.")
            return None

        self._say("Enter the standard name (Enter = keep as is):")
        self._say(f"  non-std: {designator}")
        standard = self._ask("  std    : ")
        if not standard:
            standard = designator

        delete = self.ask_yes_no("Delete this component in future conversions?", default=True)
        return ComponentEntry(key=designator.lower(), standard_name=standard, delete=delete, target_file=target)
