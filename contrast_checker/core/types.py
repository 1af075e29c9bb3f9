"""Shared types for contrast-tool: ColourSubject, Check, Report."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from contrast_checker.core.colour import Color


@dataclass
class ColourSubject:
    """A named colour under evaluation, from the command line or a palette file."""

    name: str
    colour: Color
    colour_type: str | None = None  # brand type, e.g. 'primary'
    doc: str | None = None  # /// doc comments


class Check:
    """A self-registering colour check.

    Usage in a check module:

        check = Check(name='contrast', help='Contrast against backgrounds')

        @check.run
        def run(subjects, report, args):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, subjects: list[ColourSubject], report: Report, args: Any) -> None:
        """Execute the check's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Check {self.name} has no run function')
        self._run_fn(subjects, report, args)


@dataclass
class Report:
    """Accumulates results from checks for text/JSON output."""

    palette_path: str | None = None
    subjects: dict[str, dict[str, Any]] = field(default_factory=dict)
    pass_count: int = 0
    fail_count: int = 0
    ratios: list[float] = field(default_factory=list)  # every evaluated pair, for --fail-under

    def _entry(self, name: str) -> dict[str, Any]:
        if name not in self.subjects:
            self.subjects[name] = {'hex': None, 'type': None, 'checks': {}}
        return self.subjects[name]

    def add(self, subject_name: str, check_name: str, data: dict[str, Any]) -> None:
        """Add check results for a subject."""
        self._entry(subject_name)['checks'][check_name] = data

    def set_subject(self, subject: ColourSubject) -> None:
        """Record the colour and type for a subject in the report."""
        entry = self._entry(subject.name)
        entry['hex'] = subject.colour.hex
        entry['type'] = subject.colour_type

    def record_ratio(self, ratio: float) -> None:
        self.ratios.append(ratio)

    def record_pass(self, subject_name: str) -> None:
        self.pass_count += 1

    def record_fail(self, subject_name: str) -> None:
        self.fail_count += 1
