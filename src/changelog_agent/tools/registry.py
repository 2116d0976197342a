"""Tool descriptors and the name-keyed registry that executes them."""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from loguru import logger

from changelog_agent.models.result import ToolResult

EMPTY_INPUT_SCHEMA: Dict[str, Any] = {"type": "object", "properties": {}}


@dataclass(frozen=True)
class ToolDescriptor:
    """Static description of a tool as advertised to the model."""

    name: str
    description: str
    input_schema: Dict[str, Any] = field(default_factory=lambda: dict(EMPTY_INPUT_SCHEMA))

    def to_openai_tool(self) -> Dict[str, Any]:
        """Function-tool schema accepted by ``bind_tools``."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.input_schema,
            },
        }


@dataclass(frozen=True)
class ToolSpec:
    """A descriptor paired with the handler that implements it."""

    descriptor: ToolDescriptor
    handler: Callable[..., ToolResult]
    error_prefix: str = "Error"


@dataclass(frozen=True)
class ToolOutput:
    """Text rendering of a ToolResult, ready to become a tool message."""

    content: str
    is_error: bool = False


class ToolRegistry:
    """Fixed set of tools, looked up by name at execution time."""

    def __init__(self, specs: Optional[List[ToolSpec]] = None):
        self._specs: Dict[str, ToolSpec] = {}
        for spec in specs or []:
            self.register(spec)

    def register(self, spec: ToolSpec) -> None:
        name = spec.descriptor.name
        if name in self._specs:
            raise ValueError(f"Tool '{name}' is already registered")
        self._specs[name] = spec

    def __contains__(self, name: str) -> bool:
        return name in self._specs

    @property
    def descriptors(self) -> List[ToolDescriptor]:
        return [spec.descriptor for spec in self._specs.values()]

    def execute(self, name: str, args: Optional[Dict[str, Any]] = None) -> ToolOutput:
        """Run the named tool and render its result as text.

        Never raises: unknown tools, ``Err`` results and handler exceptions all
        come back as error output.
        """
        spec = self._specs.get(name)
        if spec is None:
            logger.error(f"Model requested unknown tool: {name}")
            return ToolOutput(content=f"Error: unknown tool '{name}'", is_error=True)

        try:
            result = spec.handler(**(args or {}))
        except Exception as e:
            logger.error(f"Tool {name} raised: {str(e)}")
            result = ToolResult.err("unexpected", str(e))

        if result.is_ok:
            return ToolOutput(content=result.payload or "")

        logger.error(f"Tool {name} failed ({result.error_kind}): {result.detail}")
        return ToolOutput(content=f"{spec.error_prefix}: {result.detail}", is_error=True)
