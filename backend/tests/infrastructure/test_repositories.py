"""SQL Repositories: storage-level behavior beneath the routes.

Tests cover:
    - Email mirror column follows inserts and updates
    - Email lookups compare strings on the mirror and other values on the body
    - Task operations never cross owners
"""

from sqlalchemy import select

from task_manager.core.documents import build_task
from task_manager.infrastructure.repositories import (
    SqlTaskRepository, SqlUserRepository,
)
from task_manager.models.user_document import UserDocument


async def test_insert_mirrors_string_email(test_db):
    users = SqlUserRepository(test_db)
    doc = await users.insert({"email": "a@x.com", "name": "A"})

    row = (await test_db.execute(select(UserDocument))).scalar_one()
    assert row.email == "a@x.com"
    assert row.body == {"email": "a@x.com", "name": "A"}
    assert doc == {"_id": row.id, "email": "a@x.com", "name": "A"}


async def test_non_string_email_is_not_indexed(test_db):
    users = SqlUserRepository(test_db)
    await users.insert({"email": 42})

    row = (await test_db.execute(select(UserDocument))).scalar_one()
    assert row.email is None
    assert row.body["email"] == 42


async def test_find_by_none_matches_user_without_email(test_db):
    users = SqlUserRepository(test_db)
    await users.insert({"email": "a@x.com"})
    inserted = await users.insert({"name": "anonymous"})

    assert (await users.find_by_email(None)) == inserted


async def test_non_string_email_does_not_match_user_without_email(test_db):
    users = SqlUserRepository(test_db)
    await users.insert({"name": "anonymous"})

    assert (await users.find_by_email(5)) is None


async def test_find_by_non_string_email_compares_stored_value(test_db):
    users = SqlUserRepository(test_db)
    await users.insert({"email": 6})
    inserted = await users.insert({"email": 5})

    assert (await users.find_by_email(5)) == inserted
    assert (await users.find_by_email(None)) is None


async def test_long_emails_are_stored_and_found(test_db):
    users = SqlUserRepository(test_db)
    tasks = SqlTaskRepository(test_db)
    email = "a" * 400 + "@x.com"
    inserted = await users.insert({"email": email})
    await tasks.insert({"title": "x", "user": email})

    assert (await users.find_by_email(email)) == inserted
    assert [t["title"] for t in await tasks.list_by_owner(email)] == ["x"]


async def test_update_fields_refreshes_email_mirror(test_db):
    users = SqlUserRepository(test_db)
    doc = await users.insert({"email": "a@x.com"})

    result = await users.update_fields(doc["_id"], {"email": "b@x.com"})

    assert result.modified_count == 1
    assert await users.find_by_email("a@x.com") is None
    assert (await users.find_by_email("b@x.com"))["_id"] == doc["_id"]


async def test_update_fields_dotted_path(test_db):
    users = SqlUserRepository(test_db)
    doc = await users.insert({"email": "a@x.com", "profile": {"name": "A"}})

    await users.update_fields(doc["_id"], {"profile.city": "Lisbon"})

    stored = await users.get(doc["_id"])
    assert stored["profile"] == {"name": "A", "city": "Lisbon"}


async def test_task_update_requires_owner(test_db):
    tasks = SqlTaskRepository(test_db)
    task = await tasks.insert(build_task({"title": "x"}, "b@x.com"))

    miss = await tasks.update_status(task["_id"], "a@x.com", "Done")
    hit = await tasks.update_status(task["_id"], "b@x.com", "Done")

    assert miss.matched_count == 0
    assert hit.matched_count == 1
    assert hit.modified_count == 1


async def test_task_update_same_status_matches_without_modifying(test_db):
    tasks = SqlTaskRepository(test_db)
    task = await tasks.insert(build_task({"title": "x"}, "a@x.com"))

    result = await tasks.update_status(task["_id"], "a@x.com", "To-Do")

    assert result.matched_count == 1
    assert result.modified_count == 0


async def test_task_delete_requires_owner(test_db):
    tasks = SqlTaskRepository(test_db)
    task = await tasks.insert(build_task({"title": "x"}, "b@x.com"))

    assert (await tasks.delete(task["_id"], "a@x.com")).deleted_count == 0
    assert (await tasks.delete(task["_id"], "b@x.com")).deleted_count == 1
    assert await tasks.list_by_owner("b@x.com") == []


async def test_list_by_owner_keeps_insertion_order(test_db):
    tasks = SqlTaskRepository(test_db)
    for title in ("first", "second", "third"):
        await tasks.insert(build_task({"title": title}, "a@x.com"))

    titles = [t["title"] for t in await tasks.list_by_owner("a@x.com")]
    assert titles == ["first", "second", "third"]
