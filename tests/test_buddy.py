import random

import pytest

from runikit import alloc as alloc_registry
from runikit.buddy import (
    MIN_SIZE,
    BuddyAllocator,
    find_n_meta,
    log2_floor,
    min_power2,
)

REGION = 4096


def _free_bytes(allocator):
    return sum((1 << order) * len(blocks) for order, blocks in allocator.free_lists().items())


@pytest.mark.parametrize("k", range(1, 48))
def test_log2_floor_of_powers_and_neighbours(k):
    assert log2_floor(1 << k) == k
    assert log2_floor((1 << k) + 1) == k
    assert log2_floor((1 << k) - 1) == k - 1


@pytest.mark.parametrize("k", range(1, 48))
def test_min_power2(k):
    assert min_power2(1 << k) == 1 << k
    assert min_power2((1 << k) + 1) == 1 << (k + 1)


@pytest.mark.parametrize("total", list(range(1, 600)) + [65536, 1 << 20])
def test_find_n_meta_is_least_sufficient(total):
    meta = find_n_meta(total)
    assert 0 < meta <= total
    data = total - meta
    assert meta * 128 > min_power2(data) - 2 + data
    smaller = meta - 1
    data_smaller = total - smaller
    assert smaller * 128 <= min_power2(data_smaller) - 2 + data_smaller


def test_initial_state_is_consistent():
    buddy = BuddyAllocator(REGION)
    assert buddy.total_size() == REGION
    assert 0 < buddy.free_size() < REGION
    assert _free_bytes(buddy) == buddy.free_size()
    for blocks in buddy.free_lists().values():
        assert len(blocks) <= 1


def test_alloc_rounds_up_to_power_of_two():
    buddy = BuddyAllocator(REGION)
    before = buddy.free_size()
    address = buddy.alloc(100, 1)
    assert address % min_power2(100) == 0
    assert buddy.free_size() == before - min_power2(100)
    small = buddy.alloc(1, 1)
    assert buddy.free_size() == before - min_power2(100) - MIN_SIZE
    assert small % MIN_SIZE == 0


def test_alignment_is_honoured():
    buddy = BuddyAllocator(REGION)
    for align in (1, 2, 16, 64, 256):
        address = buddy.alloc(8, align)
        assert address % align == 0


def test_allocations_do_not_overlap():
    buddy = BuddyAllocator(REGION)
    rng = random.Random(7)
    spans = []
    while True:
        size = rng.choice([1, 16, 30, 64, 100])
        address = buddy.alloc(size, 1)
        if address is None:
            break
        spans.append((address, address + min_power2(max(size, MIN_SIZE))))
    spans.sort()
    for (_, end), (start, _) in zip(spans, spans[1:]):
        assert end <= start
    assert spans[-1][1] <= REGION


def test_free_everything_restores_free_lists():
    buddy = BuddyAllocator(REGION)
    initial = buddy.free_lists()
    initial_free = buddy.free_size()
    addresses = []
    while (address := buddy.alloc(MIN_SIZE, 1)) is not None:
        addresses.append(address)
    assert len(addresses) * MIN_SIZE == initial_free
    assert buddy.free_size() == 0
    random.Random(3).shuffle(addresses)
    for address in addresses:
        buddy.dealloc(address, MIN_SIZE, 1)
    assert buddy.free_size() == initial_free
    assert buddy.free_lists() == initial


def test_out_of_memory_returns_none():
    buddy = BuddyAllocator(REGION)
    assert buddy.alloc(REGION, 1) is None
    assert buddy.free_size() == _free_bytes(buddy)


def test_write_and_read_round_trip():
    buddy = BuddyAllocator(REGION)
    address = buddy.alloc(64, 16)
    payload = bytes(range(64))
    buddy.write(address, payload)
    assert buddy.read(address, 64) == payload


def test_alloc_zeroed_clears_memory():
    buddy = BuddyAllocator(REGION)
    address = buddy.alloc(64, 16)
    buddy.write(address, b"\xff" * 64)
    buddy.dealloc(address, 64, 16)
    again = buddy.alloc_zeroed(64, 16)
    assert buddy.read(again, 64) == bytes(64)


def test_dealloc_ext_finds_size():
    buddy = BuddyAllocator(REGION)
    before = buddy.free_size()
    first = buddy.alloc(256, 1)
    second = buddy.alloc(MIN_SIZE, 1)
    buddy.dealloc_ext(first)
    assert buddy.free_size() == before - MIN_SIZE
    buddy.dealloc_ext(second)
    assert buddy.free_size() == before
    buddy.dealloc_ext(None)
    assert buddy.free_size() == before


def test_realloc_ext_keeps_content():
    buddy = BuddyAllocator(REGION)
    before = buddy.free_size()
    address = buddy.alloc(32, 16)
    payload = b"abc" * 10 + b"xy"
    buddy.write(address, payload)
    moved = buddy.realloc_ext(address, 200)
    assert buddy.read(moved, len(payload)) == payload
    assert buddy.free_size() == before - min_power2(200)


def test_realloc_ext_of_none_allocates():
    buddy = BuddyAllocator(REGION)
    before = buddy.free_size()
    address = buddy.realloc_ext(None, 40)
    assert address % MIN_SIZE == 0
    assert buddy.free_size() == before - min_power2(40)


def test_realloc_same_size_keeps_address():
    buddy = BuddyAllocator(REGION)
    address = buddy.alloc(64, 16)
    assert buddy.realloc(address, 64, 64, 16) == address


def test_base_address_offsets_results():
    base = 16 * REGION
    buddy = BuddyAllocator(REGION, base=base)
    address = buddy.alloc(64, 64)
    assert base <= address < base + REGION
    buddy.write(address, b"data")
    assert buddy.read(address, 4) == b"data"
    assert all(a >= base for blocks in buddy.free_lists().values() for a in blocks)


def test_invalid_construction():
    with pytest.raises(ValueError):
        BuddyAllocator(100)
    with pytest.raises(ValueError):
        BuddyAllocator(REGION, base=100)


def test_invalid_alignment():
    buddy = BuddyAllocator(REGION)
    with pytest.raises(ValueError):
        buddy.alloc(16, 3)
    with pytest.raises(ValueError):
        buddy.alloc(16, 2 * REGION)


def test_dealloc_ext_rejects_bad_addresses():
    buddy = BuddyAllocator(REGION)
    with pytest.raises(ValueError):
        buddy.dealloc_ext(8)
    with pytest.raises(ValueError):
        buddy.read(REGION * 2, 1)


def test_debug_text():
    buddy = BuddyAllocator(REGION)
    text = str(buddy)
    assert text.startswith("free_list_head:\n")
    assert "#4: (empty)" in text
    assert "#11: [ 0 ]" in text


def test_registration_as_default():
    buddy = BuddyAllocator(REGION)
    try:
        alloc_registry.register(buddy)
        alloc_registry.register_ext(buddy)
        alloc_registry.register_state(buddy)
        assert alloc_registry.get_default() is buddy
        assert alloc_registry.get_default_ext() is buddy
        assert alloc_registry.get_default_state().total_size() == REGION
    finally:
        alloc_registry.register(None)
        alloc_registry.register_ext(None)
        alloc_registry.register_state(None)