from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class ScalarKind(str, Enum):
    STRING = "String"
    NUMBER = "Number"
    BOOLEAN = "Boolean"
    OBJECT = "Object"


class Scalar(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["scalar"] = "scalar"
    kind: ScalarKind


class ArrayOf(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["array"] = "array"
    kind: ScalarKind


class VendorType(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["vendor"] = "vendor"
    identifier: str


TypeSpec = Annotated[Scalar | ArrayOf | VendorType, Field(discriminator="type")]


class Diagnostic(BaseModel):
    model_config = ConfigDict(frozen=True)

    line: int = Field(ge=1)
    column: int = Field(ge=1)
    message: str


class Param(BaseModel):
    name: str = Field(min_length=1)
    description: str = ""
    type: TypeSpec | None = None
    optional: bool = False


class DocBlock(BaseModel):
    description: str = ""
    params: list[Param] = Field(default_factory=list)
    examples: list[str] = Field(default_factory=list)


class FileInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    content: str


class ParseResult(BaseModel):
    blocks: list[DocBlock] = Field(default_factory=list)
    diagnostics: list[Diagnostic] = Field(default_factory=list)


class FileResult(BaseModel):
    path: str
    blocks: list[DocBlock] = Field(default_factory=list)
    diagnostics: list[Diagnostic] = Field(default_factory=list)

    @property
    def has_docs(self) -> bool:
        return bool(self.blocks)
