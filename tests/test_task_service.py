import pytest

from taskboard.exceptions import ResourceNotFoundError
from taskboard.models.task import Task, ChecklistItem, TaskStatus, TaskPriority
from taskboard.models.user import User
from taskboard.schemas.task import TaskCreate, TaskUpdate, ChecklistItemCreate, ChecklistItemUpdate
from taskboard.services.task_service import TaskService, to_task_out


def _items(*texts):
    return [ChecklistItemCreate(text=text) for text in texts]


def test_create_task_round_trip(db, make_user):
    alice = make_user("alice@example.com")
    bob = make_user("bob@example.com")

    created = TaskService.create_task(db, TaskCreate(
        title="Groceries",
        description="Weekly errands",
        priority=TaskPriority.HIGH,
        user_ids=[bob.id, alice.id],
        checklist_items=_items("Buy milk", "Pay bills", "Call plumber"),
    ))
    fetched = TaskService.get_task(db, created.id)

    assert {user.id for user in fetched.assigned_users} == {alice.id, bob.id}
    assert [item.text for item in fetched.checklist_items] == ["Buy milk", "Pay bills", "Call plumber"]
    assert all(item.completed is False for item in fetched.checklist_items)
    assert fetched.status == TaskStatus.PENDING
    assert fetched.start_date is None
    assert fetched.priority == TaskPriority.HIGH


def test_create_task_with_duplicate_assignee_ids_keeps_a_set(db, make_user):
    alice = make_user("alice@example.com")

    task = TaskService.create_task(db, TaskCreate(title="Dup", user_ids=[alice.id, alice.id]))

    assert [user.id for user in task.assigned_users] == [alice.id]


def test_create_task_with_unknown_assignee_creates_nothing(db, make_user):
    alice = make_user("alice@example.com")

    with pytest.raises(ResourceNotFoundError) as exc:
        TaskService.create_task(db, TaskCreate(
            title="Broken",
            user_ids=[alice.id, 4242],
            checklist_items=_items("One"),
        ))

    assert exc.value.message == "User not found with id: 4242"
    assert db.query(Task).count() == 0
    assert db.query(ChecklistItem).count() == 0


def test_create_task_with_completed_items_derives_status(db):
    task = TaskService.create_task(db, TaskCreate(
        title="Half done",
        status=TaskStatus.COMPLETED,
        checklist_items=[ChecklistItemCreate(text="a", completed=True), ChecklistItemCreate(text="b")],
    ))

    assert task.status == TaskStatus.IN_PROGRESS
    assert task.start_date is not None


def test_create_task_without_checklist_keeps_requested_status(db):
    task = TaskService.create_task(db, TaskCreate(title="Manual", status=TaskStatus.IN_PROGRESS))

    assert task.status == TaskStatus.IN_PROGRESS
    assert task.start_date is None


def test_update_task_merges_fields(db):
    task = TaskService.create_task(db, TaskCreate(title="Old", description="keep me"))

    updated = TaskService.update_task(db, task.id, TaskUpdate(title="New", priority=TaskPriority.LOW))

    assert updated.title == "New"
    assert updated.description == "keep me"
    assert updated.priority == TaskPriority.LOW


def test_update_task_replaces_assignees_wholesale(db, make_user):
    alice = make_user("alice@example.com")
    bob = make_user("bob@example.com")
    carol = make_user("carol@example.com")
    task = TaskService.create_task(db, TaskCreate(title="Team", user_ids=[alice.id, bob.id]))

    updated = TaskService.update_task(db, task.id, TaskUpdate(user_ids=[carol.id]))
    assert [user.id for user in updated.assigned_users] == [carol.id]

    cleared = TaskService.update_task(db, task.id, TaskUpdate(user_ids=[]))
    assert cleared.assigned_users == []


def test_update_task_without_user_ids_keeps_assignees(db, make_user):
    alice = make_user("alice@example.com")
    task = TaskService.create_task(db, TaskCreate(title="Team", user_ids=[alice.id]))

    updated = TaskService.update_task(db, task.id, TaskUpdate(title="Renamed"))

    assert [user.id for user in updated.assigned_users] == [alice.id]


def test_update_task_with_unknown_assignee_changes_nothing(db, make_user):
    alice = make_user("alice@example.com")
    task = TaskService.create_task(db, TaskCreate(title="Stable", user_ids=[alice.id]))

    with pytest.raises(ResourceNotFoundError):
        TaskService.update_task(db, task.id, TaskUpdate(title="Changed", user_ids=[777]))

    db.expire_all()
    reloaded = TaskService.get_task(db, task.id)
    assert reloaded.title == "Stable"
    assert [user.id for user in reloaded.assigned_users] == [alice.id]


def test_update_missing_task_fails(db):
    with pytest.raises(ResourceNotFoundError):
        TaskService.update_task(db, 12345, TaskUpdate(title="Nope"))


def test_update_task_status_is_overridden_by_checklist(db):
    task = TaskService.create_task(db, TaskCreate(title="Derived", checklist_items=_items("a")))

    updated = TaskService.update_task(db, task.id, TaskUpdate(status=TaskStatus.COMPLETED))

    assert updated.status == TaskStatus.PENDING


def test_update_task_status_without_checklist_is_kept(db):
    task = TaskService.create_task(db, TaskCreate(title="Manual"))

    updated = TaskService.update_task(db, task.id, TaskUpdate(status=TaskStatus.COMPLETED))

    assert updated.status == TaskStatus.COMPLETED


def test_first_checklist_item_rederives_manual_status(db):
    task = TaskService.create_task(db, TaskCreate(title="Manual", status=TaskStatus.COMPLETED))

    TaskService.add_checklist_item(db, task.id, ChecklistItemCreate(text="Now tracked"))

    assert TaskService.get_task(db, task.id).status == TaskStatus.PENDING


def test_delete_task_cascades_items_but_keeps_users(db, make_user):
    alice = make_user("alice@example.com")
    task = TaskService.create_task(db, TaskCreate(
        title="Doomed", user_ids=[alice.id], checklist_items=_items("a", "b"),
    ))

    TaskService.delete_task(db, task.id)

    with pytest.raises(ResourceNotFoundError):
        TaskService.get_task(db, task.id)
    assert db.query(ChecklistItem).count() == 0
    assert db.query(User).filter(User.email == "alice@example.com").count() == 1


def test_delete_missing_task_fails(db):
    with pytest.raises(ResourceNotFoundError):
        TaskService.delete_task(db, 1)


def test_update_checklist_item_unknown_item_fails(db):
    task = TaskService.create_task(db, TaskCreate(title="List", checklist_items=_items("a")))
    other = TaskService.create_task(db, TaskCreate(title="Other", checklist_items=_items("b")))
    foreign_item_id = other.checklist_items[0].id

    with pytest.raises(ResourceNotFoundError) as exc:
        TaskService.update_checklist_item(db, task.id, foreign_item_id, ChecklistItemUpdate(completed=True))

    assert exc.value.message == f"Checklist item not found with id: {foreign_item_id} for task: {task.id}"


def test_update_checklist_item_missing_task_fails(db):
    with pytest.raises(ResourceNotFoundError):
        TaskService.update_checklist_item(db, 99, 1, ChecklistItemUpdate(completed=True))


def test_update_checklist_item_without_completed_changes_nothing(db):
    task = TaskService.create_task(db, TaskCreate(
        title="List", checklist_items=[ChecklistItemCreate(text="a", completed=True), ChecklistItemCreate(text="b")],
    ))
    item_id = task.checklist_items[0].id

    item = TaskService.update_checklist_item(db, task.id, item_id, ChecklistItemUpdate())

    assert item.completed is True
    assert TaskService.get_task(db, task.id).status == TaskStatus.IN_PROGRESS


def test_checklist_scenario(db):
    task = TaskService.create_task(db, TaskCreate(title="Errands", checklist_items=_items("Buy milk", "Pay bills")))
    milk_id, bills_id = [item.id for item in task.checklist_items]
    assert task.status == TaskStatus.PENDING
    assert task.start_date is None

    def toggle(item_id, completed):
        TaskService.update_checklist_item(db, task.id, item_id, ChecklistItemUpdate(completed=completed))
        return TaskService.get_task(db, task.id)

    state = toggle(milk_id, True)
    assert state.status == TaskStatus.IN_PROGRESS
    t1 = state.start_date
    assert t1 is not None

    state = toggle(bills_id, True)
    assert (state.status, state.start_date) == (TaskStatus.COMPLETED, t1)

    state = toggle(milk_id, False)
    assert (state.status, state.start_date) == (TaskStatus.IN_PROGRESS, t1)

    state = toggle(bills_id, False)
    assert (state.status, state.start_date) == (TaskStatus.PENDING, None)


def test_delete_checklist_item_rederives_status(db):
    task = TaskService.create_task(db, TaskCreate(
        title="List",
        checklist_items=[ChecklistItemCreate(text="done", completed=True), ChecklistItemCreate(text="open")],
    ))
    open_id = task.checklist_items[1].id

    TaskService.delete_checklist_item(db, task.id, open_id)

    reloaded = TaskService.get_task(db, task.id)
    assert [item.text for item in reloaded.checklist_items] == ["done"]
    assert reloaded.status == TaskStatus.COMPLETED


def test_to_task_out_lists_assignees_in_id_order(db, make_user):
    alice = make_user("alice@example.com")
    bob = make_user("bob@example.com")
    task = TaskService.create_task(db, TaskCreate(title="Out", user_ids=[bob.id, alice.id]))

    out = to_task_out(task)

    assert [summary.id for summary in out.assigned_users] == sorted([alice.id, bob.id])
    assert out.checklist_items == []
