import pytest

from firefluent.errors import DataNotFoundError, FirestoreError
from firefluent.select_by_id import SelectByIdBuilder, SelectObjByIdBuilder


class RecordingDb:
    def __init__(self, result=None, error=None):
        self.calls = []
        self.result = result
        self.error = error

    def __getattr__(self, name):
        async def call(*args):
            self.calls.append((name, args))
            if self.error is not None:
                raise self.error
            return self.result

        return call


class Item:
    pass


@pytest.mark.asyncio
async def test_one_without_parent():
    db = RecordingDb(result={"id": "a"})
    got = await SelectByIdBuilder(db, "users").one("a")
    assert got == {"id": "a"}
    assert db.calls == [("get_doc", ("users", "a", None))]


@pytest.mark.asyncio
async def test_one_with_parent_and_fields():
    db = RecordingDb(result="doc")
    builder = SelectByIdBuilder(db, "kids", ("name",)).parent("parents/p1")
    assert await builder.one("k1") == "doc"
    assert db.calls == [("get_doc_at", ("parents/p1", "kids", "k1", ["name"]))]


@pytest.mark.asyncio
async def test_one_missing_returns_none():
    db = RecordingDb(error=DataNotFoundError("missing"))
    assert await SelectByIdBuilder(db, "users").one("nope") is None


@pytest.mark.asyncio
async def test_one_other_error_propagates():
    db = RecordingDb(error=FirestoreError("boom"))
    with pytest.raises(FirestoreError, match="boom"):
        await SelectByIdBuilder(db, "users").one("a")


@pytest.mark.asyncio
async def test_batch_routes_by_parent():
    db = RecordingDb(result=["stream"])
    await SelectByIdBuilder(db, "users").batch(iter(["a", "b"]))
    await SelectByIdBuilder(db, "users").parent("x/y").batch(["c"])
    assert db.calls == [
        ("batch_stream_get_docs", ("users", ["a", "b"], None)),
        ("batch_stream_get_docs_at", ("x/y", "users", ["c"], None)),
    ]


@pytest.mark.asyncio
async def test_batch_with_errors_routes_by_parent():
    db = RecordingDb()
    await SelectByIdBuilder(db, "users").batch_with_errors(["a"])
    await SelectByIdBuilder(db, "users").parent("x/y").batch_with_errors(["b"])
    assert [name for name, _ in db.calls] == [
        "batch_stream_get_docs_with_errors",
        "batch_stream_get_docs_at_with_errors",
    ]


@pytest.mark.asyncio
async def test_batch_rejects_single_string():
    with pytest.raises(TypeError):
        await SelectByIdBuilder(RecordingDb(), "users").batch("abc")


def test_parent_does_not_change_original():
    base = SelectByIdBuilder(RecordingDb(), "users")
    child = base.parent("a/b")
    assert base.parent_path is None
    assert child.parent_path == "a/b"


def test_obj_carries_settings():
    db = RecordingDb()
    built = SelectByIdBuilder(db, "users", ["f"]).parent("a/b").obj(Item)
    assert built == SelectObjByIdBuilder(db, "users", "a/b", ("f",), Item)


@pytest.mark.asyncio
async def test_obj_one_passes_class():
    db = RecordingDb(result="object")
    assert await SelectByIdBuilder(db, "users").obj(Item).one("a") == "object"
    assert db.calls == [("get_obj_return_fields", ("users", "a", None, Item))]


@pytest.mark.asyncio
async def test_obj_one_with_parent():
    db = RecordingDb(result="object")
    await SelectByIdBuilder(db, "kids").parent("p/1").obj(Item).one("k")
    assert db.calls == [("get_obj_at_return_fields", ("p/1", "kids", "k", None, Item))]


@pytest.mark.asyncio
async def test_obj_one_missing_returns_none():
    db = RecordingDb(error=DataNotFoundError("gone"))
    assert await SelectByIdBuilder(db, "users").obj(Item).one("a") is None


@pytest.mark.asyncio
async def test_obj_batch_variants():
    db = RecordingDb()
    plain = SelectByIdBuilder(db, "users").obj(Item)
    nested = SelectByIdBuilder(db, "users").parent("p/1").obj(Item)
    await plain.batch(["a"])
    await nested.batch(["b"])
    await plain.batch_with_errors(["c"])
    await nested.batch_with_errors(["d"])
    assert db.calls == [
        ("batch_stream_get_objects", ("users", ["a"], None, Item)),
        ("batch_stream_get_objects_at", ("p/1", "users", ["b"], None, Item)),
        ("batch_stream_get_objects_with_errors", ("users", ["c"], None, Item)),
        ("batch_stream_get_objects_at_with_errors", ("p/1", "users", ["d"], None, Item)),
    ]