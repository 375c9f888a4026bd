from dataclasses import dataclass

from .shared import debugf


@dataclass
class Node:
    key: bytes
    value: int
    next: "Node|None"


_live_nodes = 0


def live_nodes() -> int:
    return _live_nodes


def create_node(key: bytes, value: int, key_capacity: int) -> Node | None:
    global _live_nodes
    try:
        node = Node(key=bytes(key[: key_capacity - 1]), value=value, next=None)
    except MemoryError:
        debugf("Out of memory")
        return None

    _live_nodes += 1
    return node


def node_append(head: Node, new_node: Node):
    new_node.next = None

    current = head
    while current.next is not None:
        current = current.next
    current.next = new_node


def node_find_by_key(head: Node | None, key: bytes, key_capacity: int) -> Node | None:
    if len(key) >= key_capacity:
        debugf("key's length is greater than key capacity {0:d}", key_capacity)
        return None

    current = head
    while current is not None:
        if current.key == key:
            debugf("found value {0:d} for key {1!r}", current.value, key)
            return current
        current = current.next

    debugf("Cannot find node for key {0!r}", key)
    return None


def free_node(node: Node):
    global _live_nodes
    # the caller has already advanced past this node
    node.next = None
    _live_nodes -= 1
