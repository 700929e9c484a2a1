import pytest
from click.testing import CliRunner
from datetime import datetime, timedelta, timezone

from do_list.core.task_storage import TaskStorageManager
from do_list.core.task_store import TaskStore


TZ = timezone(timedelta(hours=2))


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clear_data_dir_env(monkeypatch):
    """Keep a developer's DO_LIST_DATA_DIR out of the tests."""
    monkeypatch.delenv("DO_LIST_DATA_DIR", raising=False)


@pytest.fixture
def data_dir(tmp_path):
    """Path of a not-yet-created data directory."""
    return tmp_path / ".do-list"


@pytest.fixture
def storage(data_dir):
    """Provides a TaskStorageManager on the temporary data directory."""
    return TaskStorageManager(data_dir)


@pytest.fixture
def clock():
    """Clock fixed at 10:30 on 2024-03-15 (UTC+2)."""
    return FakeClock(datetime(2024, 3, 15, 10, 30, tzinfo=TZ))


@pytest.fixture
def notifications():
    """Collects notifications sent by a task store."""
    return []


@pytest.fixture
def store(storage, clock, notifications):
    """Provides an empty TaskStore with a fake clock."""
    return TaskStore(storage, clock=clock, notifier=notifications.append)


@pytest.fixture
def isolated_cli_runner(cli_runner):
    """Provides a CLI runner with isolated filesystem."""
    with cli_runner.isolated_filesystem():
        yield cli_runner
