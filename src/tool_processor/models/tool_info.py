# tool_processor/models/tool_info.py
"""
Tool descriptors advertised to chat models.

A tool's parameter schema is an explicit value - a small tree of
``PrimitiveParam`` / ``ArrayParam`` / ``ObjectParam`` descriptors - built
once when the tool is constructed.  ``schema_from_model`` derives that tree
from a pydantic input model; ``to_json_schema`` renders it back to the JSON
schema dialect function-calling backends expect.
"""
from __future__ import annotations

from typing import Annotated, Any, Dict, List, Literal, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "PrimitiveParam",
    "ArrayParam",
    "ObjectParam",
    "Param",
    "ToolInfo",
    "schema_from_model",
]

PrimitiveType = Literal["string", "integer", "number", "boolean"]


class _ParamBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    description: Optional[str] = None


class PrimitiveParam(_ParamBase):
    kind: Literal["primitive"] = "primitive"
    type: PrimitiveType = "string"
    enum: Optional[List[Any]] = None

    def to_json_schema(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": self.type}
        if self.description:
            out["description"] = self.description
        if self.enum:
            out["enum"] = list(self.enum)
        return out


class ArrayParam(_ParamBase):
    kind: Literal["array"] = "array"
    items: "Param"

    def to_json_schema(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": "array", "items": self.items.to_json_schema()}
        if self.description:
            out["description"] = self.description
        return out


class ObjectParam(_ParamBase):
    kind: Literal["object"] = "object"
    properties: Dict[str, "Param"] = Field(default_factory=dict)
    required: List[str] = Field(default_factory=list)

    def to_json_schema(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "type": "object",
            "properties": {k: v.to_json_schema() for k, v in self.properties.items()},
        }
        if self.required:
            out["required"] = list(self.required)
        if self.description:
            out["description"] = self.description
        return out


Param = Annotated[
    Union[PrimitiveParam, ArrayParam, ObjectParam],
    Field(discriminator="kind"),
]

ArrayParam.model_rebuild()
ObjectParam.model_rebuild()


class ToolInfo(BaseModel):
    """Name, description and parameter schema of a tool."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    description: str = ""
    parameters: ObjectParam = Field(default_factory=ObjectParam)

    def to_json_schema(self) -> Dict[str, Any]:
        return self.parameters.to_json_schema()


# ---------------------------------------------------------------- derivation
_PRIMITIVES = {"string", "integer", "number", "boolean"}


def schema_from_model(model_cls: Type[BaseModel]) -> ObjectParam:
    """Build the descriptor tree for a pydantic model's fields."""
    schema = model_cls.model_json_schema()
    param = _convert(schema, schema.get("$defs", {}))
    if not isinstance(param, ObjectParam):
        raise ValueError(f"{model_cls.__name__} does not describe an object")
    return param


def _convert(node: Dict[str, Any], defs: Dict[str, Any], description: Optional[str] = None):
    description = node.get("description", description)

    if "$ref" in node:
        target = defs[node["$ref"].rsplit("/", 1)[-1]]
        return _convert(target, defs, description)

    if "allOf" in node and len(node["allOf"]) == 1:
        return _convert(node["allOf"][0], defs, description)

    if "anyOf" in node:
        # Optional[X] shows up as anyOf [X, null]
        branches = [b for b in node["anyOf"] if b.get("type") != "null"]
        if len(branches) != 1:
            raise ValueError(f"Unsupported union in tool schema: {node['anyOf']!r}")
        return _convert(branches[0], defs, description)

    typ = node.get("type")
    if typ is None and "enum" in node:
        typ = "string"

    if typ == "object":
        props = node.get("properties", {})
        return ObjectParam(
            description=description,
            properties={name: _convert(sub, defs) for name, sub in props.items()},
            required=list(node.get("required", [])),
        )
    if typ == "array":
        return ArrayParam(
            description=description,
            items=_convert(node.get("items", {"type": "string"}), defs),
        )
    if typ in _PRIMITIVES:
        return PrimitiveParam(type=typ, description=description, enum=node.get("enum"))

    raise ValueError(f"Unsupported schema fragment: {node!r}")
