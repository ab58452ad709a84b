"""LangChain binding for the Avni tool registry.

Wraps every registry entry as a LangChain ``StructuredTool`` so the same
catalog can be handed to a LangChain or LangGraph agent, e.g.:

    agent = create_react_agent(model=model, tools=build_tools())

The argument schema is a pydantic model generated from the registry's
parameter metadata, keeping the camelCase wire names and per-parameter
descriptions the MCP binding advertises.
"""

from __future__ import annotations

from typing import Any, Literal

from langchain_core.tools import StructuredTool
from pydantic import BaseModel, Field, create_model

from avni_mcp.tools.registry import TOOLS, ToolParameter, ToolSpec

_JSON_TYPES: dict[str, Any] = {
    "string": str,
    "integer": int,
    "number": float,
    "boolean": bool,
}


def _annotation(param: ToolParameter) -> Any:
    if param.enum is not None:
        return Literal[param.enum]
    if param.type == "array":
        return list[_JSON_TYPES[param.items or "string"]]
    return _JSON_TYPES[param.type]


def _args_schema(spec: ToolSpec) -> type[BaseModel]:
    """Build a pydantic model describing ``spec``'s arguments."""
    fields: dict[str, Any] = {}
    for param in spec.parameters:
        annotation = _annotation(param)
        if param.required:
            fields[param.name] = (annotation, Field(..., description=param.description))
        else:
            fields[param.name] = (
                annotation | None,
                Field(default=None, description=param.description),
            )
    model_name = "".join(part.title() for part in spec.name.split("_")) + "Args"
    return create_model(model_name, **fields)


def _to_structured_tool(spec: ToolSpec) -> StructuredTool:
    async def _run(**kwargs: Any) -> str:
        return await spec.invoke(kwargs)

    return StructuredTool.from_function(
        coroutine=_run,
        name=spec.name,
        description=spec.description,
        args_schema=_args_schema(spec),
    )


def build_tools() -> list[StructuredTool]:
    """Wrap all registry tools as LangChain StructuredTools."""
    return [_to_structured_tool(spec) for spec in TOOLS]
