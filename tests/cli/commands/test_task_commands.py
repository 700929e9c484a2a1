"""Tests for task commands."""

import json
import pytest
from unittest.mock import patch

from do_list.cli.main import cli
from do_list.core.task_storage import TaskStorageManager
from do_list.services.exceptions import PersistenceError


class TestTaskCommands:
    """Test task command functionality."""

    @pytest.fixture
    def run(self, cli_runner, data_dir):
        """Invoke the CLI against the temporary data directory."""
        def invoke(*args, **kwargs):
            return cli_runner.invoke(cli, ['--data-dir', str(data_dir), *args], **kwargs)
        return invoke

    @staticmethod
    def added_id(result):
        for line in result.output.splitlines():
            if line.startswith("ID: "):
                return line[len("ID: "):]
        raise AssertionError(f"no ID in output: {result.output!r}")

    def stored(self, data_dir):
        return TaskStorageManager(data_dir).load()

    # Tests for ADD command
    def test_add(self, run, data_dir):
        result = run('add', 'Buy', 'milk')

        assert result.exit_code == 0
        assert "Task added!" in result.output
        tasks = self.stored(data_dir)
        assert [t.title for t in tasks] == ["Buy milk"]
        assert self.added_id(result) == tasks[0].id

    def test_add_empty_title(self, run, data_dir):
        result = run('add', '   ')

        assert result.exit_code == 1
        assert "Error: Task title must not be empty" in result.output
        assert self.stored(data_dir) == []

    def test_add_requires_title(self, run):
        result = run('add')
        assert result.exit_code == 2

    def test_add_save_failure(self, run):
        with patch('do_list.core.task_storage.TaskStorageManager.save',
                   side_effect=PersistenceError("Could not write tasks")):
            result = run('add', 'Buy milk')

        assert result.exit_code == 1
        assert "Error: Could not write tasks" in result.output

    # Tests for TOGGLE command
    def test_toggle_with_short_id(self, run, data_dir):
        task_id = self.added_id(run('add', 'Buy milk'))

        result = run('toggle', task_id[:8])

        assert result.exit_code == 0
        assert "Task completed!" in result.output
        assert self.stored(data_dir)[0].completed is True

        result = run('toggle', task_id)
        assert "Task reopened!" in result.output
        assert self.stored(data_dir)[0].completed_at is None

    def test_toggle_unknown(self, run):
        result = run('toggle', 'nope')

        assert result.exit_code == 1
        assert "Error: No task found with ID: nope" in result.output

    # Tests for EDIT command
    def test_edit(self, run, data_dir):
        task_id = self.added_id(run('add', 'Buy milk'))

        result = run('edit', task_id, ' Buy', 'oat', 'milk ')

        assert result.exit_code == 0
        assert "Task updated!" in result.output
        assert self.stored(data_dir)[0].title == "Buy oat milk"

    def test_edit_empty_title(self, run, data_dir):
        task_id = self.added_id(run('add', 'Buy milk'))

        result = run('edit', task_id, ' ')

        assert result.exit_code == 1
        assert self.stored(data_dir)[0].title == "Buy milk"

    # Tests for DELETE command
    def test_delete_confirmed(self, run, data_dir):
        keep_id = self.added_id(run('add', 'Keep'))
        drop_id = self.added_id(run('add', 'Drop'))

        result = run('delete', drop_id, input='y\n')

        assert result.exit_code == 0
        assert "Task deleted!" in result.output
        assert [t.id for t in self.stored(data_dir)] == [keep_id]

    def test_delete_aborted(self, run, data_dir):
        task_id = self.added_id(run('add', 'Keep'))

        result = run('delete', task_id, input='n\n')

        assert result.exit_code == 1
        assert len(self.stored(data_dir)) == 1

    def test_delete_unknown(self, run):
        result = run('delete', 'nope', '--yes')

        assert result.exit_code == 1
        assert "No task found" in result.output

    # Tests for CLEAR command
    def test_clear(self, run, data_dir):
        run('add', 'Pending')
        done_id = self.added_id(run('add', 'Done'))
        run('toggle', done_id)

        result = run('clear', '--yes')

        assert result.exit_code == 0
        assert "1 completed task removed." in result.output
        assert [t.title for t in self.stored(data_dir)] == ["Pending"]

        result = run('clear', '--yes')
        assert "No completed tasks to clear" in result.output

    # Tests for LIST command
    def test_list_empty_states(self, run):
        assert "No tasks yet" in run('list').output
        assert "No pending tasks" in run('list', '--filter', 'pending').output
        assert "No completed tasks" in run('list', '-f', 'completed').output

    def test_list_filters(self, run):
        run('add', 'Pending task')
        done_id = self.added_id(run('add', 'Finished task'))
        run('toggle', done_id)

        result = run('list')
        assert result.exit_code == 0
        assert result.output.index("Finished task") < result.output.index("Pending task")
        assert "Showing 2 of 2 tasks (all)" in result.output

        result = run('list', '--filter', 'pending')
        assert "Pending task" in result.output
        assert "Finished task" not in result.output
        assert "Showing 1 of 2 tasks (pending)" in result.output

        result = run('list', '--filter', 'completed')
        assert "Finished task" in result.output
        assert "DONE" in result.output

    def test_list_uses_configured_default_filter(self, run):
        run('add', 'Pending task')
        run('config', 'set', 'default_filter', 'completed')

        result = run('list')

        assert "No completed tasks" in result.output

    def test_list_invalid_filter(self, run):
        result = run('list', '--filter', 'done')
        assert result.exit_code == 2

    # Tests for STATS command
    def test_stats(self, run):
        run('add', 'One')
        done_id = self.added_id(run('add', 'Two'))
        run('toggle', done_id)

        result = run('stats')

        assert result.exit_code == 0
        assert "Total Tasks" in result.output
        assert "50% completion rate" in result.output
        assert "completed today" in result.output

    # Notifications and storage settings
    def test_notifications_disabled(self, run):
        run('config', 'set', 'notifications', 'false')

        result = run('add', 'Quiet')

        assert result.exit_code == 0
        assert "Task added!" not in result.output

    def test_custom_storage_key(self, run, data_dir):
        run('config', 'set', 'storage_key', 'work')
        run('add', 'Write report')

        with open(data_dir / "work.json") as f:
            payload = json.load(f)
        assert payload["tasks"][0]["title"] == "Write report"
        assert not (data_dir / "do-list-tasks.json").exists()

    def test_corrupt_record_starts_empty(self, run, data_dir):
        data_dir.mkdir()
        (data_dir / "do-list-tasks.json").write_text("{oops")

        result = run('list')

        assert result.exit_code == 0
        assert "No tasks yet" in result.output
