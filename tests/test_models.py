"""Tests for domain models."""

import re

from tracker.domain.participant import Participant, make_participant_id
from tracker.domain.session import GameState
from tracker.domain.task import TASKS, build_tasks, get_task


class TestTaskDefinition:
    """Tests for the task catalog."""

    def test_catalog_has_six_tasks_in_order(self):
        """Test task ids are 1..6."""
        assert [t.id for t in TASKS] == [1, 2, 3, 4, 5, 6]

    def test_task_to_dict(self):
        """Test task serialization keys."""
        data = TASKS[0].to_dict()
        assert set(data) == {"id", "title", "subtitle", "description", "hint", "icon"}
        assert data["title"] == "Hello World"

    def test_get_task(self):
        assert get_task(4).title == "Speed Round"
        assert get_task(7) is None

    def test_auth_hints_show_credentials(self):
        """Test that tasks 2 and 3 advertise the configured credentials."""
        tasks = build_tasks("alice", "secret")
        assert "alice" in tasks[1].hint
        assert "secret" in tasks[1].hint
        assert "Basic Auth" in tasks[2].hint


class TestParticipant:
    """Tests for Participant model."""

    def test_make_participant_id(self):
        """Test id is a slug plus a 4-hex suffix."""
        assert re.fullmatch(r"ada-[0-9a-f]{4}", make_participant_id("Ada"))
        assert re.fullmatch(r"grace-hopper--[0-9a-f]{4}", make_participant_id("Grace Hopper!"))

    def test_make_participant_id_truncates_slug(self):
        participant_id = make_participant_id("A" * 40)
        assert participant_id.startswith("a" * 20 + "-")
        assert len(participant_id) == 25

    def test_mark_completed_is_idempotent(self):
        """Test re-completion is a no-op."""
        participant = Participant(id="ada-0000", name="Ada")
        assert participant.mark_completed(1) is True
        assert participant.mark_completed(1) is False
        assert participant.completed_tasks == {1}

    def test_to_dict_hides_secret(self):
        """Test public view."""
        participant = Participant(id="ada-0000", name="Ada", completed_tasks={3, 1}, post_count=2, secret_key="k")
        assert participant.to_dict() == {
            "id": "ada-0000",
            "name": "Ada",
            "completedTasks": [1, 3],
            "postCount": 2,
        }

    def test_reset_progress(self):
        participant = Participant(id="ada-0000", name="Ada", completed_tasks={1, 2}, post_count=3, secret_key="k")
        participant.reset_progress()
        assert participant.completed_tasks == set()
        assert participant.post_count == 0
        assert participant.secret_key is None


class TestGameState:
    """Tests for GameState container."""

    def setup_method(self):
        self.state = GameState()
        self.ada = Participant(id="ada-0000", name="Ada", completed_tasks={1}, post_count=3, secret_key="k1")
        self.bob = Participant(id="bob-0000", name="Bob", post_count=1, secret_key="k2")
        self.state.add_participant(self.ada)
        self.state.add_participant(self.bob)

    def test_default_task(self):
        assert GameState().current_task == 1

    def test_activate_speed_task_resets_post_counts(self):
        """Test switching to task 4 zeroes every counter."""
        self.state.activate_task(4)
        assert self.state.current_task == 4
        assert self.ada.post_count == 0
        assert self.bob.post_count == 0
        assert self.ada.secret_key == "k1"

    def test_activate_key_task_clears_secrets(self):
        """Test switching to task 5 clears every secret."""
        self.state.activate_task(5)
        assert self.ada.secret_key is None
        assert self.bob.secret_key is None
        assert self.ada.post_count == 3

    def test_activate_other_task_keeps_scratch_state(self):
        self.state.activate_task(6)
        assert self.ada.post_count == 3
        assert self.ada.secret_key == "k1"

    def test_reset_keeps_participants(self):
        """Test full reset clears progress only."""
        self.state.current_task = 5
        self.state.reset()
        assert self.state.current_task == 1
        assert set(self.state.participants) == {"ada-0000", "bob-0000"}
        assert self.ada.completed_tasks == set()
        assert self.ada.post_count == 0
        assert self.bob.secret_key is None

    def test_remove_participant(self):
        assert self.state.remove_participant("bob-0000") is True
        assert self.state.remove_participant("bob-0000") is False
        assert self.state.get_participant("bob-0000") is None

    def test_snapshot_shape(self):
        """Test snapshot has the dashboard shape."""
        snapshot = self.state.to_snapshot()
        assert snapshot["currentTask"] == 1
        assert snapshot["participants"][0] == {
            "id": "ada-0000",
            "name": "Ada",
            "completedTasks": [1],
            "postCount": 3,
        }
        assert len(snapshot["taskDescriptions"]) == 6
