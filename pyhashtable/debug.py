from .node import Node
from .shared import printf
from .table import Table


def dump_table(table: Table, name: str):
    printf("== {0:s} ==\n", name)

    for index, head in enumerate(table.buckets):
        if head is None:
            continue
        printf("{0:04d} ", index)
        dump_chain(head)


def dump_chain(head: Node):
    current: Node | None = head
    while current is not None:
        printf("{0:s}={1:d}", current.key.decode("utf-8"), current.value)
        if current.next is not None:
            printf(" -> ")
        current = current.next
    printf("\n")


def chain_lengths(table: Table) -> list[int]:
    lengths = []
    for head in table.buckets:
        length = 0
        current = head
        while current is not None:
            length += 1
            current = current.next
        lengths.append(length)
    return lengths
