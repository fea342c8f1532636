from __future__ import annotations

import inspect
import types
from dataclasses import dataclass, field
from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

from .errors import McpError, internal_error, method_not_found

JsonSchema = Dict[str, Any]

_PRIMITIVES = {
    str: "string",
    int: "integer",
    float: "number",
    bool: "boolean",
    dict: "object",
    list: "array",
}


def _strip_optional(annotation: Any) -> Any:
    if get_origin(annotation) in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        return args[0] if args else str
    return annotation


def _type_schema(annotation: Any) -> JsonSchema:
    annotation = _strip_optional(annotation)
    origin = get_origin(annotation)
    if origin is None:
        return {"type": _PRIMITIVES.get(annotation, "string")}
    if origin in (list, List):
        args = get_args(annotation)
        schema: JsonSchema = {"type": "array"}
        if args:
            schema["items"] = _type_schema(args[0])
        return schema
    if origin in (dict, Dict):
        return {"type": "object"}
    return {"type": "string"}


@dataclass(frozen=True)
class ApiFunction:
    name: str
    func: Callable[..., Any]
    description: str
    category: str
    tags: tuple[str, ...]
    signature: inspect.Signature
    hints: Mapping[str, Any] = field(default_factory=dict)
    parameter_descriptions: Mapping[str, str] = field(default_factory=dict)

    @property
    def required(self) -> List[str]:
        return [
            param.name
            for param in self.signature.parameters.values()
            if param.default is inspect.Parameter.empty
        ]

    @property
    def parameter_schema(self) -> JsonSchema:
        schema: JsonSchema = {"type": "object", "properties": {}, "required": self.required}
        for param in self.signature.parameters.values():
            prop = _type_schema(self.hints.get(param.name, str))
            description = self.parameter_descriptions.get(param.name)
            if description:
                prop["description"] = description
            schema["properties"][param.name] = prop
        return schema

    def as_tool(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.parameter_schema,
        }


REGISTRY: Dict[str, ApiFunction] = {}


def register_api(
    name: str,
    *,
    description: str,
    category: str,
    tags: Optional[Iterable[str]] = None,
    parameters: Optional[Mapping[str, str]] = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if name in REGISTRY:
            raise ValueError(f"API function '{name}' is already registered.")
        hints = get_type_hints(func)
        hints.pop("return", None)
        REGISTRY[name] = ApiFunction(
            name=name,
            func=func,
            description=description,
            category=category,
            tags=tuple(tags or ()),
            signature=inspect.signature(func),
            hints=hints,
            parameter_descriptions=dict(parameters or {}),
        )
        return func

    return decorator


def get_api_functions() -> List[ApiFunction]:
    return list(REGISTRY.values())


def list_tools() -> List[Dict[str, Any]]:
    return [api_function.as_tool() for api_function in get_api_functions()]


def call_api(name: str, **kwargs: Any) -> Any:
    if name not in REGISTRY:
        raise method_not_found(name)
    try:
        return REGISTRY[name].func(**kwargs)
    except McpError:
        raise
    except TypeError as exc:
        raise internal_error(str(exc)) from exc
