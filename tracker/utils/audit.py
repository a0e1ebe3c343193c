"""Audit logging for administrative actions."""

import json
import logging
from typing import Any, Dict, Optional

logger = logging.getLogger("tracker.audit")


def audit_log(
    action: str,
    current_task: int,
    participant_id: Optional[str] = None,
    extra: Optional[Dict[str, Any]] = None,
) -> None:
    """Log administrative action.

    Args:
        action: Action name (e.g., 'set_task', 'reset', 'remove_participant')
        current_task: Active task after the action
        participant_id: Affected participant (if any)
        extra: Additional data (e.g., participant counts)
    """
    log_line = f"[AUDIT] {action} | task:{current_task}"
    if participant_id:
        log_line += f" | participant:{participant_id}"

    if extra:
        extra_str = json.dumps(extra, ensure_ascii=False)
        log_line += f" | {extra_str}"

    logger.info(log_line)
