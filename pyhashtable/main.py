import sys

from .debug import dump_table
from .shared import debugf, printf, printf_err, set_debug_trace
from .table import table_create, table_destroy, table_get, table_set


def demo(dump: bool = False) -> int:
    table = table_create()
    if table is None:
        debugf("Cannot allocate hashtable")
        return 1

    table_set(table, "eric", 111)
    table_set(table, "erhd", 222)
    table_set(table, "john", 333)
    printf_err("eric = {0:d}\n", table_get(table, "eric"))
    printf_err("erhd = {0:d}\n", table_get(table, "erhd"))
    printf_err("john = {0:d}\n", table_get(table, "john"))

    if dump:
        dump_table(table, "hashtable")

    table_destroy(table)
    return 0


def main():
    debug = False
    if len(sys.argv) == 2 and sys.argv[1] in ("-d", "--debug"):
        debug = True
        set_debug_trace(True)
    elif len(sys.argv) != 1:
        printf("Usage: pyhashtable [-d]\n")
        sys.exit(64)

    sys.exit(demo(dump=debug))
