"""Static catalog of the six challenges."""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Tuple

FIRST_TASK = 1
SPEED_TASK = 4
KEY_EXCHANGE_TASK = 5
SPEED_TARGET = 4

# Fixed Basic-Auth pair for tasks 2 and 3; shown in their hints
TASK_AUTH_USER = "n8n"
TASK_AUTH_PASSWORD = "rocks"


@dataclass(frozen=True)
class TaskDefinition:
    """Descriptive data for one challenge. Never mutated."""

    id: int
    title: str
    subtitle: str
    description: str
    hint: str
    icon: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert task definition to dictionary."""
        return asdict(self)


def build_tasks(auth_user: str, auth_password: str) -> Tuple[TaskDefinition, ...]:
    """Build the catalog; tasks 2 and 3 show the Basic-Auth credentials."""
    return (
        TaskDefinition(
            id=1,
            title="Hello World",
            subtitle="Make a GET request",
            description="Make a <strong>GET</strong> request to your endpoint.",
            hint="GET /api/player/{your-id}/task1",
            icon="🌐",
        ),
        TaskDefinition(
            id=2,
            title="Authenticated",
            subtitle="GET with Basic Auth",
            description="Make a <strong>GET</strong> request with <strong>Basic Auth</strong>.",
            hint=(
                "GET /api/player/{your-id}/task2<br>"
                f"Username: <code>{auth_user}</code> &nbsp; Password: <code>{auth_password}</code>"
            ),
            icon="🔐",
        ),
        TaskDefinition(
            id=3,
            title="Say Something",
            subtitle="Authenticated POST with message",
            description=(
                "Make an authenticated <strong>POST</strong> request with a JSON body "
                "containing a <code>message</code> field."
            ),
            hint=(
                "POST /api/player/{your-id}/task3<br>"
                'Basic Auth + Body: <code>{ "message": "your text" }</code>'
            ),
            icon="💬",
        ),
        TaskDefinition(
            id=4,
            title="Speed Round",
            subtitle=f"First to {SPEED_TARGET} POST requests",
            description=(
                f"First player to make <strong>{SPEED_TARGET} POST requests</strong> wins! "
                "Progress is tracked live."
            ),
            hint=f"POST /api/player/{{your-id}}/task4<br>Any body works. First to {SPEED_TARGET} wins!",
            icon="⚡",
        ),
        TaskDefinition(
            id=5,
            title="Secret Key",
            subtitle="GET a key, then POST it back",
            description="First <strong>GET</strong> a secret key, then <strong>POST</strong> it back.",
            hint=(
                "GET /api/player/{your-id}/task5/key → receive a key<br>"
                'POST /api/player/{your-id}/task5 with <code>{ "key": "..." }</code>'
            ),
            icon="🗝️",
        ),
        TaskDefinition(
            id=6,
            title="Picture Time",
            subtitle="Send a base64 image",
            description="Send a <strong>POST</strong> request with a <strong>base64-encoded image</strong>.",
            hint='POST /api/player/{your-id}/task6<br>Body: <code>{ "image": "data:image/png;base64,..." }</code>',
            icon="🖼️",
        ),
    )


TASKS: Tuple[TaskDefinition, ...] = build_tasks(TASK_AUTH_USER, TASK_AUTH_PASSWORD)
TASK_IDS = tuple(task.id for task in TASKS)


def get_task(task_id: int) -> Optional[TaskDefinition]:
    """Return the definition for ``task_id`` or None."""
    for task in TASKS:
        if task.id == task_id:
            return task
    return None
