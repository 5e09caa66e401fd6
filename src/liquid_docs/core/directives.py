"""Line-oriented parsing of ``{% doc %}`` block interiors.

A block is read one line at a time. Lines that start (after indentation)
with ``@description``, ``@param`` or ``@example`` are directives and switch
the parser state; every other line is folded into whatever the current state
is collecting:

* ``DESCRIPTION``: lines extend the block description,
* ``IN_PARAM``: non-blank lines extend the last parameter's description,
* ``IN_EXAMPLE``: lines are kept verbatim as the example body.

Malformed directives never abort the block. They produce a ``Diagnostic``
and the offending parameter is dropped (or kept untyped for unknown types).
"""

from __future__ import annotations

import re
import textwrap
from dataclasses import dataclass, field
from enum import Enum

from liquid_docs.core.types import TypeResolver
from liquid_docs.models import Diagnostic, DocBlock, Param, TypeSpec

_DIRECTIVE = re.compile(r"\s*@(description|param|example)(?=\s|$)", re.IGNORECASE)

SEPARATOR = "-"


class ParserState(Enum):
    DESCRIPTION = "description"
    IN_PARAM = "param"
    IN_EXAMPLE = "example"


def missing_name_message(line: int, column: int) -> str:
    return f"Missing parameter name on {line}:{column}"


def unexpected_end_message(line: int, column: int) -> str:
    return f"Unexpected parameter end on {line}:{column}"


def missing_bracket_message(line: int, column: int) -> str:
    return f"Missing closing bracket for optional parameter on {line}:{column}"


def strip_separator(text: str) -> str:
    """Strip surrounding whitespace and at most one leading dash separator."""
    text = text.strip()
    if text.startswith(SEPARATOR):
        text = text[len(SEPARATOR) :].lstrip()
    return text


def _skip_whitespace(text: str, index: int) -> int:
    while index < len(text) and text[index].isspace():
        index += 1
    return index


def _finish_example(first_line: str, body: list[str]) -> str:
    dedented = textwrap.dedent("\n".join(body)).strip("\n").rstrip()
    if not first_line:
        return dedented
    if not dedented:
        return first_line
    return f"{first_line}\n{dedented}"


@dataclass
class _PendingParam:
    name: str
    optional: bool
    type: TypeSpec | None
    description: list[str] = field(default_factory=list)

    def build(self) -> Param:
        return Param(
            name=self.name,
            description=" ".join(self.description),
            type=self.type,
            optional=self.optional,
        )


@dataclass
class _BlockBuilder:
    state: ParserState = ParserState.DESCRIPTION
    description: list[str] = field(default_factory=list)
    params: list[Param] = field(default_factory=list)
    examples: list[str] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    param: _PendingParam | None = None
    example_first_line: str = ""
    example_body: list[str] = field(default_factory=list)

    def close(self) -> None:
        """Close whatever directive is currently open."""
        if self.state is ParserState.IN_PARAM and self.param is not None:
            self.params.append(self.param.build())
        elif self.state is ParserState.IN_EXAMPLE:
            self.examples.append(_finish_example(self.example_first_line, self.example_body))
        self.param = None
        self.example_first_line = ""
        self.example_body = []
        self.state = ParserState.DESCRIPTION

    def to_block(self) -> DocBlock:
        return DocBlock(
            description="\n".join(self.description).strip(),
            params=self.params,
            examples=self.examples,
        )


class DirectiveParser:
    """Turn the interior text of a documentation block into a ``DocBlock``."""

    def __init__(self, resolver: TypeResolver) -> None:
        self._resolver = resolver

    def parse(self, content: str, line: int = 1, column: int = 1) -> tuple[DocBlock, list[Diagnostic]]:
        """Parse one block interior.

        ``line`` and ``column`` locate the first character of ``content`` in
        the enclosing file so diagnostics carry file positions.
        """
        builder = _BlockBuilder()

        for index, raw in enumerate(content.split("\n")):
            text = raw.removesuffix("\r")
            line_no = line + index
            base_column = column if index == 0 else 1

            directive = _DIRECTIVE.match(text)
            if directive is None:
                self._continue(builder, text)
                continue

            builder.close()
            name = directive.group(1).lower()
            rest_start = directive.end()

            if name == "description":
                extra = strip_separator(text[rest_start:])
                if extra:
                    builder.description.append(extra)
            elif name == "param":
                # a dropped param still swallows its continuation lines
                builder.param = self._parse_param(builder, text, rest_start, line_no, base_column)
                builder.state = ParserState.IN_PARAM
            else:
                builder.example_first_line = text[rest_start:].strip()
                builder.state = ParserState.IN_EXAMPLE

        builder.close()
        return builder.to_block(), builder.diagnostics

    @staticmethod
    def _continue(builder: _BlockBuilder, text: str) -> None:
        if builder.state is ParserState.DESCRIPTION:
            builder.description.append(text)
        elif builder.state is ParserState.IN_PARAM:
            if text.strip() and builder.param is not None:
                builder.param.description.append(text.strip())
        else:
            builder.example_body.append(text)

    def _parse_param(
        self,
        builder: _BlockBuilder,
        text: str,
        index: int,
        line: int,
        base_column: int,
    ) -> _PendingParam | None:
        directive_column = base_column + _skip_whitespace(text, 0)

        def report(message: str) -> None:
            builder.diagnostics.append(Diagnostic(line=line, column=directive_column, message=message))

        index = _skip_whitespace(text, index)

        type_expression: tuple[str, int] | None = None
        if index < len(text) and text[index] == "{":
            close = text.find("}", index + 1)
            if close == -1:
                report(unexpected_end_message(line, directive_column))
                return None
            type_expression = (text[index + 1 : close], base_column + index)
            index = _skip_whitespace(text, close + 1)

        optional = index < len(text) and text[index] == "["
        if optional:
            close = text.find("]", index + 1)
            if close == -1:
                report(missing_bracket_message(line, directive_column))
                return None
            name = text[index + 1 : close].strip()
            index = close + 1
        else:
            end = index
            while end < len(text) and not text[end].isspace():
                end += 1
            name = text[index:end]
            index = end

        if not name or not name.strip(SEPARATOR):
            report(missing_name_message(line, directive_column))
            return None

        param_type: TypeSpec | None = None
        if type_expression is not None:
            expression, type_column = type_expression
            resolution = self._resolver.resolve(expression, line, type_column)
            if resolution.diagnostic is not None:
                builder.diagnostics.append(resolution.diagnostic)
            param_type = resolution.type

        pending = _PendingParam(name=name, optional=optional, type=param_type)
        description = strip_separator(text[index:])
        if description:
            pending.description.append(description)
        return pending
