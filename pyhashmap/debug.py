import sys
from typing import Any

from .table import HashTable


def printf(format: str, *args: Any):
    print(format.format(*args), end="")


def printf_err(format: str, *args: Any):
    print(format.format(*args), end="", file=sys.stderr)


def dump_table(table: HashTable, name: str):
    printf("== {0:s} ==\n", name)

    for index in range(table.capacity):
        if table.buckets[index]:
            dump_bucket(table, index)

    printf(
        "size {0:d} / capacity {1:d} (load {2:.2f}, max {3:.2f})\n",
        table.size,
        table.capacity,
        table.size / table.capacity,
        table.load_factor,
    )


def dump_bucket(table: HashTable, index: int):
    if index < 0 or index >= table.capacity:
        printf_err("Unknown bucket {0:d}\n", index)
        return

    printf("{0:04d} |", index)
    for entry in table.buckets[index]:
        printf(" {0:s}={1!r}", entry.key, entry.value)
    printf("\n")
