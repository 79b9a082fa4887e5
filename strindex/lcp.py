# Copyright (C) 2020 Björn Lindqvist <bjourne@gmail.com>
#
# Kasai's linear time LCP construction.
from strindex.utils import inverse_rank

def build_lcp(seq, sa):
    '''lcp[i] is the length of the longest common prefix of the
    suffixes at sa[i] and sa[i - 1]. lcp[0] is always 0.

    Positions are visited in text order. If suffix i shares h symbols
    with its sorted predecessor then suffix i + 1 shares at least h - 1
    with its own, so the comparison resumes where it left off instead
    of restarting from zero.
    '''
    if seq is None:
        raise TypeError('cannot build an lcp array for None')
    n = len(seq)
    rank = inverse_rank(sa, n)
    lcp = [0] * n
    k = 0
    for i, rank_el in enumerate(rank):
        if rank_el == 0:
            k = 0
            continue
        if k > 0:
            k -= 1
        j = sa[rank_el - 1]
        while i + k < n and j + k < n and seq[i + k] == seq[j + k]:
            k += 1
        lcp[rank_el] = k
    return lcp
