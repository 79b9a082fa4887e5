# Copyright (C) 2020 Björn Lindqvist <bjourne@gmail.com>
#
# Suffix array construction by prefix doubling, O(n log^2 n).
from strindex.utils import SP, symbol_ranks

import numpy as np

def doubling_round(rank, k):
    '''Sorts all suffixes by their first 2k symbols given ranks for
    the first k. Returns the sorted positions and the new ranks.
    '''
    n = len(rank)
    # Suffixes running past the end get -1, below every real rank.
    rank2 = np.full(n, -1, dtype = np.int64)
    rank2[:n - k] = rank[k:]
    inds = np.lexsort((rank2, rank))

    # Ties inherit the rank of the first member of their group, every
    # other suffix gets its position in sorted order.
    starts = np.ones(n, dtype = bool)
    starts[1:] = np.logical_or(np.diff(rank[inds]),
                               np.diff(rank2[inds]))
    new_rank = np.empty(n, dtype = np.int64)
    new_rank[inds] = np.maximum.accumulate(
        np.where(starts, np.arange(n), 0))
    return inds, new_rank

def build_suffix_array(seq):
    if seq is None:
        raise TypeError('cannot build a suffix array for None')
    n = len(seq)
    if n == 0:
        return []
    rank = symbol_ranks(seq)
    inds = np.argsort(rank, kind = 'stable')
    k = 1
    n_rounds = 0
    while k < n:
        SP.header('ROUND', 'k = %d', k)
        inds, rank = doubling_round(rank, k)
        n_rounds += 1
        n_distinct = 1 + np.count_nonzero(np.diff(rank[inds]))
        SP.print('%d of %d ranks distinct.', (n_distinct, n))
        SP.leave()
        if n_distinct == n:
            break
        k *= 2
    SP.print('Sorted %d suffixes in %d rounds.', (n, n_rounds))
    return inds.tolist()
