"""Tests for task listing: filtering and sorting."""

from datetime import datetime, timedelta, timezone

from taskmanager.engine.query import query_tasks, SortField
from taskmanager.models.task import TaskStatus, TaskPriority

BASE = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class TestFiltering:
    """Test status/priority filters."""

    def test_no_filters_returns_everything_in_order(self, make_task):
        tasks = [make_task(title=f"Task {i}") for i in range(3)]

        result = query_tasks(tasks)

        assert result.tasks == tasks
        assert result.count == 3

    def test_filter_by_status(self, make_task):
        """Only tasks with exactly the requested status are kept."""
        done = make_task(title="Done", status=TaskStatus.COMPLETED)
        pending = make_task(title="Pending", status=TaskStatus.PENDING)
        doing = make_task(title="Doing", status=TaskStatus.IN_PROGRESS)

        result = query_tasks([done, pending, doing], status="completed")

        assert [t.title for t in result.tasks] == ["Done"]
        assert result.count == 1

    def test_status_and_priority_intersect(self, make_task):
        a = make_task(title="A", status=TaskStatus.PENDING, priority=TaskPriority.HIGH)
        b = make_task(title="B", status=TaskStatus.PENDING, priority=TaskPriority.LOW)
        c = make_task(title="C", status=TaskStatus.COMPLETED, priority=TaskPriority.HIGH)

        result = query_tasks([a, b, c], status="pending", priority="high")

        assert [t.title for t in result.tasks] == ["A"]

    def test_unknown_filter_value_matches_nothing(self, make_task):
        result = query_tasks([make_task()], status="archived")
        assert result.tasks == []
        assert result.count == 0

    def test_empty_filter_value_is_ignored(self, make_task):
        tasks = [make_task(), make_task()]
        assert query_tasks(tasks, status="", priority="").count == 2

    def test_input_is_not_mutated(self, make_task):
        low = make_task(title="Low", priority=TaskPriority.LOW)
        high = make_task(title="High", priority=TaskPriority.HIGH)
        tasks = [low, high]

        query_tasks(tasks, sort_by="priority")

        assert tasks == [low, high]


class TestSorting:
    """Test sortBy handling."""

    def test_sort_by_priority_high_first_and_stable(self, make_task):
        low = make_task(title="Low", priority=TaskPriority.LOW)
        med1 = make_task(title="Medium 1", priority=TaskPriority.MEDIUM)
        high = make_task(title="High", priority=TaskPriority.HIGH)
        med2 = make_task(title="Medium 2", priority=TaskPriority.MEDIUM)

        result = query_tasks([low, med1, high, med2], sort_by=SortField.PRIORITY.value)

        assert [t.title for t in result.tasks] == ["High", "Medium 1", "Medium 2", "Low"]

    def test_sort_by_due_date_puts_undated_last(self, make_task):
        undated1 = make_task(title="Undated 1", due_date=None)
        later = make_task(title="Later", due_date=BASE + timedelta(days=5))
        undated2 = make_task(title="Undated 2", due_date=None)
        sooner = make_task(title="Sooner", due_date=BASE + timedelta(days=1))

        result = query_tasks([undated1, later, undated2, sooner], sort_by="dueDate")

        assert [t.title for t in result.tasks] == ["Sooner", "Later", "Undated 1", "Undated 2"]

    def test_sort_by_due_date_handles_mixed_offsets(self, make_task):
        """Due dates in different offsets compare as instants."""
        utc_noon = make_task(title="UTC noon", due_date="2024-06-01T12:00:00Z")
        early = make_task(title="Earlier instant", due_date="2024-06-01T13:00:00+02:00")

        result = query_tasks([utc_noon, early], sort_by="dueDate")

        assert [t.title for t in result.tasks] == ["Earlier instant", "UTC noon"]

    def test_sort_by_created_at(self, make_task):
        newest = make_task(title="Newest", created_at=BASE + timedelta(hours=2), updated_at=BASE + timedelta(hours=2))
        oldest = make_task(title="Oldest", created_at=BASE, updated_at=BASE)
        middle = make_task(title="Middle", created_at=BASE + timedelta(hours=1), updated_at=BASE + timedelta(hours=1))

        result = query_tasks([newest, oldest, middle], sort_by="createdAt")

        assert [t.title for t in result.tasks] == ["Oldest", "Middle", "Newest"]

    def test_unknown_sort_keeps_store_order(self, make_task):
        tasks = [make_task(title="B", priority=TaskPriority.LOW), make_task(title="A", priority=TaskPriority.HIGH)]

        result = query_tasks(tasks, sort_by="title")

        assert [t.title for t in result.tasks] == ["B", "A"]

    def test_filter_then_sort(self, make_task):
        a = make_task(title="A", status=TaskStatus.PENDING, priority=TaskPriority.LOW)
        b = make_task(title="B", status=TaskStatus.COMPLETED, priority=TaskPriority.HIGH)
        c = make_task(title="C", status=TaskStatus.PENDING, priority=TaskPriority.HIGH)

        result = query_tasks([a, b, c], status="pending", sort_by="priority")

        assert [t.title for t in result.tasks] == ["C", "A"]
        assert result.count == 2
