"""
Merge kernels for sorted pixel sequences.

Every kernel walks both operands once, front to back, comparing the heads
by key. Both inputs must be strictly ascending; so is every output.

    - union: keeps every head, equal heads once
    - intersection: keeps equal heads only, no remainder
    - difference: keeps the left side's unmatched heads and left remainder
    - symmetric_difference: keeps every unmatched head and both remainders

Complexity: O(n + m).
"""

from collections.abc import Sequence

from localtypes import Pixel


def merge_union(left: Sequence[Pixel], right: Sequence[Pixel]) -> list[Pixel]:
    merged: list[Pixel] = []
    i = j = 0
    n, m = len(left), len(right)

    while i < n and j < m:
        lkey, rkey = left[i].key, right[j].key
        if lkey < rkey:
            merged.append(left[i])
            i += 1
        elif lkey > rkey:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
            j += 1

    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_intersection(
    left: Sequence[Pixel], right: Sequence[Pixel]
) -> list[Pixel]:
    merged: list[Pixel] = []
    i = j = 0
    n, m = len(left), len(right)

    while i < n and j < m:
        lkey, rkey = left[i].key, right[j].key
        if lkey < rkey:
            i += 1
        elif lkey > rkey:
            j += 1
        else:
            merged.append(left[i])
            i += 1
            j += 1

    # An unmatched remainder cannot intersect anything
    return merged


def merge_difference(
    left: Sequence[Pixel], right: Sequence[Pixel]
) -> list[Pixel]:
    merged: list[Pixel] = []
    i = j = 0
    n, m = len(left), len(right)

    while i < n and j < m:
        lkey, rkey = left[i].key, right[j].key
        if lkey < rkey:
            merged.append(left[i])
            i += 1
        elif lkey > rkey:
            j += 1
        else:
            i += 1
            j += 1

    merged.extend(left[i:])
    return merged


def merge_symmetric_difference(
    left: Sequence[Pixel], right: Sequence[Pixel]
) -> list[Pixel]:
    merged: list[Pixel] = []
    i = j = 0
    n, m = len(left), len(right)

    while i < n and j < m:
        lkey, rkey = left[i].key, right[j].key
        if lkey < rkey:
            merged.append(left[i])
            i += 1
        elif lkey > rkey:
            merged.append(right[j])
            j += 1
        else:
            i += 1
            j += 1

    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged
