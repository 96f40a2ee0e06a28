"""Tool endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from food_tracker.api.tool_models import (
    TextContent,
    ToolCallRequest,
    ToolCallResponse,
)
from food_tracker.tool_commands import tool_definitions

if TYPE_CHECKING:
    from food_tracker.containers import AppContainer

router = APIRouter(prefix="/tools", tags=["tools"])


def _get_api_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.api_token


async def require_token(
    x_api_token: str | None = Header(default=None),
    api_token: str = Depends(_get_api_token),
) -> None:
    """Ensure requests include a valid API token."""
    if not x_api_token or x_api_token != api_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("", dependencies=[Depends(require_token)])
async def list_tools() -> dict[str, object]:
    """Return the available tools with their argument schemas."""
    return {"tools": tool_definitions()}


@router.post(
    "/{name}",
    dependencies=[Depends(require_token)],
    response_model=ToolCallResponse,
)
async def call_tool(
    name: str, body: ToolCallRequest, request: Request
) -> ToolCallResponse:
    """Run a tool and return its text result."""
    container: AppContainer = request.app.state.container
    result = await container.tool_registry.call(name, body.arguments)
    return ToolCallResponse(
        content=[TextContent(text=result.text)],
        is_error=result.is_error,
    )
