"""Render generated suites as the nested describe/it spec text.

Every numeric literal must re-parse to the exact double it came from. Twenty
fixed decimals cover the usual range; values too small or too large for that
fall back to ``repr``, which is the shortest round-tripping form.
"""
import json
from typing import IO, List, Sequence

from projspec.config import DEFAULT_BINDING
from projspec.models.schemas import ProjectionSuite, TestCase


def format_literal(value: float) -> str:
    text = "%.20f" % value
    if float(text) == value:
        return text
    return repr(value)


def format_label(value: float) -> str:
    return "%f" % value


class SpecEmitter:
    def __init__(self, binding: str = DEFAULT_BINDING, indent: str = "\t"):
        self.binding = binding
        self.indent = indent

    def _line(self, lines: List[str], depth: int, text: str) -> None:
        lines.append(self.indent * depth + text)

    def _assertion(
        self,
        lines: List[str],
        name: str,
        label: str,
        method: str,
        inputs: Sequence[float],
        expected: Sequence[float],
    ) -> None:
        self._line(lines, 2, f"it '{label}'")
        self._line(
            lines,
            3,
            f"xy = Projections.{name}.{method}"
            f"({{x: {format_literal(inputs[0])}, y: {format_literal(inputs[1])}}})",
        )
        self._line(lines, 3, f"xy.x.should.equal_approximately {format_literal(expected[0])}")
        self._line(lines, 3, f"xy.y.should.equal_approximately {format_literal(expected[1])}")
        self._line(lines, 2, "end")

    def _case(self, lines: List[str], case: TestCase) -> None:
        name = case.projection.name
        source = (case.input.lon, case.input.lat)
        projected = (case.forward_output.x, case.forward_output.y)
        restored = (case.inverse_output.lon, case.inverse_output.lat)

        self._assertion(
            lines,
            name,
            f"should forward transform ({format_label(source[0])}, {format_label(source[1])}) "
            f"to ({format_label(projected[0])},{format_label(projected[1])})",
            "forward",
            source,
            projected,
        )
        # the inverse input is the forward output, literally
        self._assertion(
            lines,
            name,
            f"should inverse transform ({format_label(projected[0])}, {format_label(projected[1])}) "
            f"to ({format_label(restored[0])},{format_label(restored[1])})",
            "inverse",
            projected,
            restored,
        )

    def render(self, suites: Sequence[ProjectionSuite]) -> str:
        lines: List[str] = []
        self._line(lines, 0, "describe 'Projections'")
        self._line(lines, 1, "before_each")
        self._line(lines, 2, f"Projections = {self.binding}")
        self._line(lines, 1, "end")
        for suite in suites:
            self._line(lines, 1, f"describe '{suite.projection.name}'")
            for case in suite.cases:
                self._case(lines, case)
            self._line(lines, 1, "end")
        self._line(lines, 0, "end")
        return "\n".join(lines) + "\n"

    def emit(self, suites: Sequence[ProjectionSuite], stream: IO[str]) -> None:
        stream.write(self.render(suites))


def render_json(suites: Sequence[ProjectionSuite]) -> str:
    # json.dumps writes floats with repr, so the values survive a reload exactly
    payload = [suite.model_dump(exclude={"cases": {"__all__": {"projection"}}}) for suite in suites]
    return json.dumps(payload, indent=2) + "\n"
