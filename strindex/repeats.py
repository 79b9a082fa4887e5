# Copyright (C) 2020 Björn Lindqvist <bjourne@gmail.com>
#
# Repeat detection and substring search on top of the suffix and lcp
# arrays.
from strindex.lcp import build_lcp
from strindex.suffix_array import build_suffix_array

import numpy as np

# Generate lcp intervals from the lcp array.
def lcp_intervals(lcp):
    '''Yields (c, lb, rb) such that the suffixes sa[lb:rb] all share a
    prefix of exactly length c and the range can't be widened. Only
    intervals with c > 0 are generated, innermost first.
    '''
    n = len(lcp)
    stack = [(0, 0)]
    for i in range(1, n + 1):
        c = lcp[i] if i < n else 0
        lb = i - 1
        while c < stack[-1][0]:
            i_c, lb = stack.pop()
            yield i_c, lb, i
        if c > stack[-1][0]:
            stack.append((c, lb))

def longest_repeats(seq):
    '''Returns the length of the longest subsequence occurring at
    least twice in seq and the sorted start positions of each such
    subsequence.
    '''
    sa = build_suffix_array(seq)
    lcp = build_lcp(seq, sa)
    bestlen = max(lcp, default = 0)
    if bestlen == 0:
        return 0, []
    groups = [sorted(sa[lb:rb])
              for c, lb, rb in lcp_intervals(lcp)
              if c == bestlen]
    return bestlen, sorted(groups)

def find_occurrences(seq, sa, pattern):
    '''Sorted start positions of pattern in seq. Pattern must be
    sliceable and comparable like seq, e.g. a str for a str. numpy
    arrays are searched as lists.
    '''
    if isinstance(seq, np.ndarray):
        seq = seq.tolist()
    if isinstance(pattern, np.ndarray):
        pattern = pattern.tolist()
    m = len(pattern)
    lo, hi = 0, len(sa)
    while lo < hi:  # like bisect.bisect_left
        mid = (lo + hi) // 2
        i = sa[mid]
        if seq[i : i + m] < pattern:
            lo = mid + 1
        else:
            hi = mid
    lb = lo
    hi = len(sa)
    while lo < hi:  # like bisect.bisect_right
        mid = (lo + hi) // 2
        i = sa[mid]
        if pattern < seq[i : i + m]:
            hi = mid
        else:
            lo = mid + 1
    return sorted(sa[lb:lo])

def count_distinct_substrings(seq, lcp):
    n = len(seq)
    if len(lcp) != n:
        raise ValueError('lcp array has length %d, expected %d'
                         % (len(lcp), n))
    return n * (n + 1) // 2 - sum(lcp)
