"""Fixed-capacity separate-chaining hash table of text keys to integers.

The table never resizes and has no per-key removal. It is not thread-safe:
callers must not share a Table between threads without their own locking.
"""
from dataclasses import dataclass
from typing import Callable

from .node import Node, create_node, free_node, node_append, node_find_by_key
from .shared import debugf, printf_err


BUCKET_COUNT = 100
KEY_CAPACITY = 32


HashFunction = Callable[[bytes, int], int]


def additive_hash(key: bytes, key_capacity: int) -> int:
    # anagrams collide
    return sum(key[:key_capacity])


def fnv1a_hash(key: bytes, key_capacity: int) -> int:
    hash = 2166136261
    for byte in key[:key_capacity]:
        hash ^= byte
        hash = (hash * 16777619) & 0xFFFFFFFF
    return hash


@dataclass(frozen=True)
class TableConfig:
    bucket_count: int = BUCKET_COUNT
    key_capacity: int = KEY_CAPACITY
    hash_function: HashFunction = additive_hash

    def __post_init__(self):
        if self.bucket_count < 1:
            raise ValueError(f"bucket_count must be positive, got {self.bucket_count}")
        if self.key_capacity < 2:
            raise ValueError(f"key_capacity must be at least 2, got {self.key_capacity}")


@dataclass
class Table:
    config: TableConfig
    buckets: list[Node | None]
    count: int = 0
    destroyed: bool = False


@dataclass(frozen=True)
class SetOk:
    pass


@dataclass(frozen=True)
class DestroyOk:
    pass


@dataclass(frozen=True)
class TableError:
    pass


@dataclass(frozen=True)
class OutOfMemory(TableError):
    pass


@dataclass(frozen=True)
class InvalidKey(TableError):
    pass


@dataclass(frozen=True)
class InvalidHandle(TableError):
    pass


SetResult = SetOk | OutOfMemory | InvalidKey | InvalidHandle
DestroyResult = DestroyOk | InvalidHandle


def calculate_hash(key: str | bytes, config: TableConfig) -> int:
    if isinstance(key, str):
        key = key.encode("utf-8")
    return config.hash_function(key, config.key_capacity) % config.bucket_count


def encode_key(key: str, config: TableConfig) -> bytes | None:
    """Encode a text key, or return None if it can never be stored.

    Keys are limited to key_capacity - 1 bytes of UTF-8 and may not contain
    NUL characters.
    """
    try:
        encoded = key.encode("utf-8")
    except UnicodeEncodeError:
        debugf("key {0!r} is not encodable as UTF-8", key)
        return None

    if len(encoded) >= config.key_capacity:
        debugf("key {0!r} does not fit in {1:d} bytes", key, config.key_capacity - 1)
        return None
    if b"\0" in encoded:
        debugf("key {0!r} contains a NUL character", key)
        return None
    return encoded


def table_create(config: TableConfig | None = None) -> Table | None:
    if config is None:
        config = TableConfig()

    try:
        return Table(config=config, buckets=[None] * config.bucket_count)
    except MemoryError:
        debugf("Out of memory")
        return None


def table_destroy(table: Table | None) -> DestroyResult:
    if table is None or table.destroyed:
        printf_err("Cannot free a NULL hashtable\n")
        return InvalidHandle()

    for index, head in enumerate(table.buckets):
        current = head
        while current is not None:
            node = current
            current = current.next
            free_node(node)
        table.buckets[index] = None

    table.buckets = []
    table.count = 0
    table.destroyed = True
    return DestroyOk()


def table_get(table: Table | None, key: str) -> int:
    if table is None or table.destroyed:
        debugf("Cannot read from a NULL hashtable")
        return 0

    encoded = encode_key(key, table.config)
    if encoded is None:
        return 0

    hash = calculate_hash(encoded, table.config)
    debugf("Trying for key {0!r} in slot {1:d}", key, hash)
    found = node_find_by_key(table.buckets[hash], encoded, table.config.key_capacity)
    if found is None:
        return 0
    return found.value


def table_set(table: Table | None, key: str, value: int) -> SetResult:
    if table is None or table.destroyed:
        debugf("Cannot write to a NULL hashtable")
        return InvalidHandle()

    encoded = encode_key(key, table.config)
    if encoded is None:
        return InvalidKey()

    hash = calculate_hash(encoded, table.config)
    debugf("Hash for {0!r} is {1:d}", key, hash)

    head = table.buckets[hash]
    found = node_find_by_key(head, encoded, table.config.key_capacity)
    if found is not None:
        debugf("Found node for key {0!r}. Setting value {1:d} to it", key, value)
        found.value = value
        return SetOk()

    node = create_node(encoded, value, table.config.key_capacity)
    if node is None:
        debugf("Cannot allocate node for key {0!r}, value {1:d}", key, value)
        return OutOfMemory()

    if head is None:
        debugf("Empty hash slot {0:d}. Setting value {1:d} for key {2!r}", hash, value, key)
        table.buckets[hash] = node
    else:
        debugf("Appending key {0!r} with value {1:d} to slot {2:d}", key, value, hash)
        node_append(head, node)

    table.count += 1
    return SetOk()
