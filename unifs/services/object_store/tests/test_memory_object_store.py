import pytest

from unifs.services.object_store.memory_object_store import MemoryObjectStore


@pytest.mark.asyncio
async def test_put_and_get():
    store = MemoryObjectStore()
    await store.put_object("data/file.txt", b"hello world")
    assert await store.get_object("data/file.txt") == b"hello world"


@pytest.mark.asyncio
async def test_get_missing_raises_native_not_found():
    store = MemoryObjectStore()
    with pytest.raises(FileNotFoundError) as exc_info:
        await store.get_object("nope.txt")
    assert store.is_not_found(exc_info.value)


@pytest.mark.asyncio
async def test_list_filters_by_prefix():
    store = MemoryObjectStore()
    store.seed({"raw/a.txt": "a", "raw/b/c.txt": "c", "cleaned/d.txt": "d"})
    listing = await store.list_objects("raw/")
    assert listing.keys == ["raw/a.txt", "raw/b/c.txt"]
    assert listing.continuation_token is None


@pytest.mark.asyncio
async def test_list_paginates_with_continuation_token():
    store = MemoryObjectStore(page_size=2)
    store.seed({f"d/{i}": str(i) for i in range(5)})

    first = await store.list_objects("d/")
    second = await store.list_objects("d/", first.continuation_token)
    third = await store.list_objects("d/", second.continuation_token)

    assert first.keys == ["d/0", "d/1"]
    assert second.keys == ["d/2", "d/3"]
    assert third.keys == ["d/4"]
    assert third.continuation_token is None


@pytest.mark.asyncio
async def test_max_keys_caps_page_size():
    store = MemoryObjectStore(page_size=10)
    store.seed({"d/1": "", "d/2": ""})
    listing = await store.list_objects("d/", max_keys=1)
    assert listing.keys == ["d/1"]
    assert listing.continuation_token == "d/1"


@pytest.mark.asyncio
async def test_copy_and_stat():
    store = MemoryObjectStore()
    await store.put_object("a.txt", b"abc", content_type="text/plain")
    await store.copy_object("a.txt", "b.txt")
    info = await store.stat_object("b.txt")
    assert info.size == 3
    assert info.content_type == "text/plain"


@pytest.mark.asyncio
async def test_copy_missing_source_raises():
    store = MemoryObjectStore()
    with pytest.raises(FileNotFoundError):
        await store.copy_object("missing", "dst")


@pytest.mark.asyncio
async def test_delete_is_idempotent():
    store = MemoryObjectStore()
    store.seed({"a": "1", "b": "2", "c": "3"})
    await store.delete_object("a")
    await store.delete_object("a")
    await store.delete_objects(["b", "c", "zzz"])
    assert store.keys == []


@pytest.mark.asyncio
async def test_calls_are_recorded():
    store = MemoryObjectStore()
    await store.put_object("x", b"")
    await store.get_object("x")
    assert store.calls == [("put_object", "x"), ("get_object", "x")]
    assert store.calls_to("get_object") == ["x"]
