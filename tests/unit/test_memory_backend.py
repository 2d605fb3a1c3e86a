import pytest

from kvstorage_lib.errors import QuotaExceededError
from kvstorage_lib.storage.memory_backend import MemoryStorage


def test_memory_basic_operations():
    m = MemoryStorage()

    # set/get
    m.set_item('k', 'v')
    assert m.get_item('k') == 'v'
    assert len(m) == 1

    # overwrite keeps a single entry
    m.set_item('k', 'w')
    assert m.get_item('k') == 'w'
    assert len(m) == 1

    # remove, including a missing key
    m.remove_item('k')
    m.remove_item('k')
    assert m.get_item('k') is None
    assert len(m) == 0


def test_memory_key_enumeration_follows_insertion_order():
    m = MemoryStorage()
    for k in ('b', 'a', 'c'):
        m.set_item(k, '1')
    assert m.keys() == ['b', 'a', 'c']
    assert m.key(0) == 'b'
    assert m.key(2) == 'c'
    assert m.key(3) is None
    assert m.key(-1) is None


def test_memory_clear():
    m = MemoryStorage()
    m.set_item('a', '1')
    m.set_item('b', '2')
    m.clear()
    assert len(m) == 0
    assert m.keys() == []


def test_memory_quota():
    m = MemoryStorage(quota=10)
    m.set_item('ab', '123')          # 5
    m.set_item('ab', '12345678')     # overwrite counts once: 10
    with pytest.raises(QuotaExceededError):
        m.set_item('c', '1')
    assert m.get_item('c') is None
    m.remove_item('ab')
    m.set_item('c', '1')
    assert m.get_item('c') == '1'


def test_memory_quota_counts_utf8_bytes():
    m = MemoryStorage(quota=4)
    with pytest.raises(QuotaExceededError):
        m.set_item('é', 'éé')        # 2 + 4
    m.set_item('é', 'é')             # 2 + 2
    assert m.get_item('é') == 'é'
