"""Tests for the functional q_* interface."""

from strqueue import (
    Allocator,
    StringQueue,
    q_delete_dup,
    q_delete_mid,
    q_free,
    q_insert_head,
    q_insert_tail,
    q_new,
    q_release_element,
    q_remove_head,
    q_remove_tail,
    q_reverse,
    q_size,
    q_sort,
    q_swap,
)


def test_null_queue_is_tolerated() -> None:
    """Test every operation accepts None as the queue handle."""
    buf = bytearray(4)
    q_free(None)
    assert q_insert_head(None, "a") is False
    assert q_insert_tail(None, "a") is False
    assert q_remove_head(None, buf, 4) is None
    assert q_remove_tail(None) is None
    assert q_size(None) == 0
    assert q_delete_mid(None) is False
    assert q_delete_dup(None) is False
    q_swap(None)
    q_reverse(None)
    q_sort(None)
    assert buf == bytearray(4)


def test_q_new_returns_none_when_out_of_memory() -> None:
    """Test q_new reports allocation failure with None."""
    assert q_new(allocator=Allocator(fail_probability=1.0)) is None


def test_full_session() -> None:
    """Test a typical driver session through the functional layer."""
    alloc = Allocator()
    q = q_new(allocator=alloc)
    assert isinstance(q, StringQueue)

    for s in ("dolphin", "bear", "gerbil"):
        assert q_insert_tail(q, s)
    assert q_insert_head(q, "bear")
    assert q_size(q) == 4

    q_sort(q)
    assert q.values() == ["bear", "bear", "dolphin", "gerbil"]

    assert q_delete_dup(q)
    assert q.values() == ["dolphin", "gerbil"]

    q_reverse(q)
    q_swap(q)
    assert q.values() == ["dolphin", "gerbil"]

    buf = bytearray(4)
    e = q_remove_tail(q, buf, 4)
    assert e is not None
    assert bytes(buf) == b"ger\x00"
    q_release_element(e)

    assert q_delete_mid(q)
    assert q_size(q) == 0
    assert q_remove_head(q) is None

    q_free(q)
    alloc.check_leaks()
