# tests/test_task_models.py

from __future__ import annotations

import pytest

from todo_cli.tasks.errors import InvalidArgument, ItemNotFound
from todo_cli.tasks.task_models import Task, TaskList


def test_first_item_gets_id_1_and_is_not_done() -> None:
    todo = TaskList()
    assert todo.add("X") == 1

    (task,) = todo.list(all=True)
    assert task == Task(id=1, label="X", done=False)


def test_ids_are_sequential_and_follow_highest_existing() -> None:
    todo = TaskList([Task(1, "a"), Task(4, "b", done=True)])
    assert todo.add("c") == 5
    assert todo.add("d") == 6
    assert [t.id for t in todo] == [1, 4, 5, 6]


def test_add_rejects_blank_label_and_strips() -> None:
    todo = TaskList()
    with pytest.raises(InvalidArgument):
        todo.add("   ")
    assert len(todo) == 0

    tid = todo.add("  Walk the dog \n")
    assert todo.get(tid).label == "Walk the dog"


def test_complete_and_list_filtering() -> None:
    todo = TaskList()
    first = todo.add("one")
    todo.add("two")
    todo.add("three")

    assert todo.complete(first) is True
    assert [t.label for t in todo.list()] == ["two", "three"]
    assert [t.label for t in todo.list(all=True)] == ["one", "two", "three"]
    assert all(not t.done for t in todo.list())


def test_complete_twice_is_a_noop() -> None:
    todo = TaskList()
    tid = todo.add("one")
    assert todo.complete(tid) is True
    assert todo.complete(tid) is False
    assert todo.get(tid).done is True


def test_complete_missing_id_raises_not_found() -> None:
    todo = TaskList()
    todo.add("a")
    todo.add("b")
    with pytest.raises(ItemNotFound) as err:
        todo.complete(99)
    assert err.value.item_id == 99


def test_rejects_out_of_order_ids() -> None:
    with pytest.raises(ValueError):
        TaskList([Task(2, "a"), Task(1, "b")])


def test_render_is_fixed_width() -> None:
    assert Task(1, "Walk the dog").render() == "  1. [ ] Walk the dog"
    assert Task(12, "Feed cat", done=True).render() == " 12. [X] Feed cat"


@pytest.mark.parametrize(
    "raw",
    [
        "nope",
        {"text": "no id"},
        {"id": 0, "text": "zero"},
        {"id": True, "text": "bool id"},
        {"id": 1, "text": 5},
        {"id": 1, "text": "x", "done": "yes"},
    ],
)
def test_from_dict_rejects_bad_records(raw) -> None:
    with pytest.raises(ValueError):
        Task.from_dict(raw)
