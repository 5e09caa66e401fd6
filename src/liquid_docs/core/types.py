from dataclasses import dataclass

from liquid_docs.core.ports.registry import TypeLookup
from liquid_docs.models import ArrayOf, Diagnostic, Scalar, ScalarKind, TypeSpec, VendorType

ARRAY_MARKER = "[]"

_SCALAR_NAMES = {
    "string": ScalarKind.STRING,
    "number": ScalarKind.NUMBER,
    "boolean": ScalarKind.BOOLEAN,
    "object": ScalarKind.OBJECT,
}


def unknown_type_message(identifier: str, line: int, column: int) -> str:
    return f'Unknown parameter type on {line}:{column}: "{identifier}"'


@dataclass(frozen=True)
class TypeResolution:
    type: TypeSpec | None = None
    diagnostic: Diagnostic | None = None


class TypeResolver:
    """Classify ``@param`` type expressions.

    Built-in scalars match case-insensitively and may carry the ``[]`` array
    marker. Anything else must be present in the injected vendor lookup, and
    vendor types cannot be array-marked.
    """

    def __init__(self, vendor_types: TypeLookup) -> None:
        self._vendor_types = vendor_types

    def resolve(self, expression: str, line: int, column: int) -> TypeResolution:
        """Resolve the text between ``{`` and ``}``; ``line``/``column`` locate the ``{``."""
        identifier = expression.strip()
        name = identifier
        is_array = name.endswith(ARRAY_MARKER)
        if is_array:
            name = name[: -len(ARRAY_MARKER)].rstrip()

        kind = _SCALAR_NAMES.get(name.lower())
        if kind is not None:
            return TypeResolution(type=ArrayOf(kind=kind) if is_array else Scalar(kind=kind))

        if not is_array and name and name in self._vendor_types:
            return TypeResolution(type=VendorType(identifier=name))

        return TypeResolution(
            diagnostic=Diagnostic(
                line=line,
                column=column,
                message=unknown_type_message(identifier, line, column),
            )
        )
