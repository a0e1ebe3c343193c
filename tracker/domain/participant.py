"""Participant progress record."""

import re
import secrets
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set

_SLUG_RE = re.compile(r"[^a-z0-9]")
SLUG_LENGTH = 20


def make_participant_id(name: str) -> str:
    """Derive an opaque id: name slug plus a random 4-hex suffix."""
    slug = _SLUG_RE.sub("-", name.lower())[:SLUG_LENGTH]
    return f"{slug}-{secrets.token_hex(2)}"


@dataclass
class Participant:
    """Represents a registered competitor and their progress."""

    id: str
    name: str
    completed_tasks: Set[int] = field(default_factory=set)
    post_count: int = 0
    secret_key: Optional[str] = None

    def has_completed(self, task_id: int) -> bool:
        return task_id in self.completed_tasks

    def mark_completed(self, task_id: int) -> bool:
        """Add ``task_id`` to the completed set. Returns False if already there."""
        if task_id in self.completed_tasks:
            return False
        self.completed_tasks.add(task_id)
        return True

    def reset_progress(self) -> None:
        self.completed_tasks = set()
        self.post_count = 0
        self.secret_key = None

    @property
    def completed_list(self) -> List[int]:
        return sorted(self.completed_tasks)

    def to_dict(self) -> Dict[str, Any]:
        """Public view; the secret key is never exposed."""
        return {
            "id": self.id,
            "name": self.name,
            "completedTasks": self.completed_list,
            "postCount": self.post_count,
        }
