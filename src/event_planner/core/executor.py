"""Tool registry and the concurrent, failure-isolating tool executor."""

import logging
from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor
from types import MappingProxyType
from typing import Iterable, Iterator, List, Optional, Sequence

from langchain_core.tools import BaseTool

from .models import ToolInvocationResult


class ToolRegistry(Mapping):
    """Immutable name -> tool mapping, resolved once at agent construction."""

    def __init__(self, tools: Iterable[BaseTool]):
        registry = {}
        for t in tools:
            if t.name in registry:
                raise ValueError(f"Tool '{t.name}' is already registered.")
            registry[t.name] = t
        self._tools = MappingProxyType(registry)

    def __getitem__(self, name: str) -> BaseTool:
        return self._tools[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._tools)

    def __len__(self) -> int:
        return len(self._tools)

    def describe(self) -> str:
        return "\n".join(f"- {t.name}: {t.description}" for t in self._tools.values())


class ToolExecutor:
    """Invokes selected tools concurrently and captures every failure as data."""

    def __init__(self, registry: ToolRegistry):
        self.registry = registry

    def _invoke(self, name: str, params: dict) -> ToolInvocationResult:
        selected_tool = self.registry.get(name)
        if selected_tool is None:
            logging.warning(f"Requested unknown tool: '{name}'")
            return ToolInvocationResult.failed(name, f"Unknown tool '{name}'.")

        try:
            logging.info(f"Invoking tool: {name}")
            output = selected_tool.invoke(params)
        except Exception as e:
            logging.error(f"Error executing tool '{name}': {e}", exc_info=True)
            return ToolInvocationResult.failed(name, f"Execution failed: {e}")

        logging.info(f"Tool '{name}' executed successfully. Output snippet: {str(output)[:200]}...")
        return ToolInvocationResult.ok(name, output)

    def execute(self, tool_names: Sequence[str], utterance: str,
                location: Optional[str] = None) -> List[ToolInvocationResult]:
        """Run ``tool_names`` in parallel; results keep the order of ``tool_names``."""
        if not tool_names:
            return []

        params = {"utterance": utterance, "location": location}
        logging.info(f"Executing {len(tool_names)} tools: {list(tool_names)}")
        with ThreadPoolExecutor(max_workers=len(tool_names)) as pool:
            futures = [pool.submit(self._invoke, name, dict(params)) for name in tool_names]
            return [future.result() for future in futures]
