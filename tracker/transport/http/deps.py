"""Request-scoped dependencies."""

import json
import logging
from typing import Any, Dict, Optional

from fastapi import Header, Request

from core.exceptions import UnauthorizedError
from tracker.providers import DIContainer
from tracker.utils.auth import check_token

logger = logging.getLogger(__name__)


def get_container(request: Request) -> DIContainer:
    """Dependency to get the container from app state."""
    return request.app.state.container


async def read_json_body(request: Request) -> Dict[str, Any]:
    """Parse the body as a JSON object; anything else is treated as empty."""
    raw = await request.body()
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.debug(f"Ignoring non-JSON body on {request.url.path}")
        return {}
    return data if isinstance(data, dict) else {}


async def require_admin(
    request: Request,
    x_admin_token: Optional[str] = Header(default=None),
) -> None:
    """Shared credential check; a no-op when no admin token is configured."""
    expected = get_container(request).settings.admin_api_token
    if expected and not check_token(x_admin_token, expected):
        raise UnauthorizedError("Admin token required", error_code="admin_unauthorized")
