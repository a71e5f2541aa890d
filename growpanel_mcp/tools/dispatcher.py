"""
Tool Dispatcher

Every tools/call passes through ToolDispatcher.dispatch(), whichever
transport received it. The dispatcher resolves the tool, validates the
arguments against the tool's filter model, runs the handler and returns a
ToolEnvelope. Every failure leaves as a DispatchError; nothing else is
allowed to reach the transport layer.

Pattern: Command Executor (executes tool calls as commands)
Pattern: Fail-fast validation with graceful error wrapping
"""

import time

from growpanel_mcp.core.exceptions import (
    DispatchError,
    DispatchErrorKind,
    FilterValidationError,
    ToolNotFoundError,
)
from growpanel_mcp.models.domain import InvocationRequest, RawValue, ToolEnvelope
from growpanel_mcp.models.filters import validate_arguments
from growpanel_mcp.observability.logging import get_logger
from growpanel_mcp.tools.registry import ToolRegistry

logger = get_logger(__name__)


class ToolDispatcher:
    """
    Dispatcher for registered tools.

    Attributes:
        registry: The ToolRegistry to resolve tools from.

    Example:
        >>> dispatcher = ToolDispatcher(registry)
        >>> envelope = await dispatcher.dispatch(
        ...     InvocationRequest(tool_name="getMRR", arguments={"interval": "month"})
        ... )
    """

    def __init__(self, registry: ToolRegistry) -> None:
        self.registry = registry

    async def dispatch(self, request: InvocationRequest) -> ToolEnvelope:
        """
        Run one tool call and return its envelope.

        Steps:
        1. Resolve the tool (unknown name -> METHOD_NOT_FOUND)
        2. Validate arguments (failure -> INVALID_PARAMS, no handler call)
        3. Invoke the handler with the validated filters
        4. Any exception from the handler -> INTERNAL_ERROR
        5. Envelopes pass through; RawValue results are wrapped

        Args:
            request: Tool name and raw arguments.

        Returns:
            ToolEnvelope with the tool's content blocks.

        Raises:
            DispatchError: For every failure, tagged with its kind.
        """
        tool_name = request.tool_name

        try:
            tool = self.registry.get(tool_name)
        except ToolNotFoundError as e:
            logger.warning("unknown tool", tool=tool_name)
            raise DispatchError(
                DispatchErrorKind.METHOD_NOT_FOUND,
                e.message,
                tool_name=tool_name,
            ) from e

        try:
            filters = validate_arguments(tool.input_model, request.arguments)
        except FilterValidationError as e:
            logger.warning(
                "invalid tool arguments",
                tool=tool_name,
                field=e.field,
                reason=e.reason,
            )
            raise DispatchError(
                DispatchErrorKind.INVALID_PARAMS,
                e.message,
                tool_name=tool_name,
                data=e.to_dict(),
            ) from e

        logger.info("running tool", tool=tool_name, filters=filters.model_dump(exclude_none=True))
        started = time.perf_counter()
        try:
            outcome = await tool.handler(filters)
        except Exception as e:
            logger.error(
                "tool execution failed",
                tool=tool_name,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise DispatchError(
                DispatchErrorKind.INTERNAL_ERROR,
                f"Tool execution failed: {tool_name}",
                tool_name=tool_name,
                data=str(e),
            ) from e

        envelope = self._to_envelope(outcome)
        logger.info(
            "tool completed",
            tool=tool_name,
            blocks=len(envelope.content),
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        return envelope

    @staticmethod
    def _to_envelope(outcome: object) -> ToolEnvelope:
        """Pass envelopes through unchanged; wrap everything else."""
        if isinstance(outcome, ToolEnvelope):
            return outcome
        if isinstance(outcome, RawValue):
            return outcome.to_envelope()
        return RawValue(value=outcome).to_envelope()
