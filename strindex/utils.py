# Copyright (C) 2020 Björn Lindqvist <bjourne@gmail.com>
#
# Rank helpers shared by the builders and random utils for the tools.
import sys

import numpy as np

class StructuredPrinter:
    '''Indented progress output. Goes to stderr so that it never
    mixes with the arrays a tool prints.
    '''
    def __init__(self, enabled):
        self.indent = 0
        self.enabled = enabled

    def emit(self, fmt, args):
        if not self.enabled:
            return
        s = fmt % args if args is not None else str(fmt)
        print(' ' * self.indent + s, file = sys.stderr)

    def header(self, name, fmt = None, args = None):
        if fmt is None:
            self.emit('* %s', name)
        else:
            self.emit('* %s %s', (name, fmt % args))
        self.indent += 2

    def print(self, fmt, args = None):
        self.emit(fmt, args)

    def leave(self):
        assert self.indent >= 2
        self.indent -= 2

SP = StructuredPrinter(False)

def symbol_ranks(seq):
    '''Rank of each symbol in the sorted alphabet of seq. The ranks
    order exactly like the symbols themselves, so any totally ordered
    hashable symbol type works, not only characters.
    '''
    vocab = sorted(set(seq))
    ch2idx = {ch: i for i, ch in enumerate(vocab)}
    return np.array([ch2idx[ch] for ch in seq], dtype = np.int64)

def inverse_rank(sa, n):
    '''Returns rank such that sa[rank[i]] == i. Raises ValueError
    unless sa is a permutation of range(n).
    '''
    if len(sa) != n:
        raise ValueError('suffix array has length %d, expected %d'
                         % (len(sa), n))
    if n == 0:
        return []
    arr = np.asarray(sa)
    if arr.ndim != 1 or not np.issubdtype(arr.dtype, np.integer):
        raise ValueError('suffix array must be a flat sequence of ints')
    if arr.min() < 0 or arr.max() >= n:
        raise ValueError('suffix array values must be in [0, %d)' % n)
    rank = np.full(n, -1, dtype = np.int64)
    rank[arr] = np.arange(n)
    if (rank < 0).any():
        raise ValueError('suffix array contains duplicate positions')
    return rank.tolist()

def parse_comma_list(seq):
    seq = seq.strip()
    if not seq:
        return []
    return [int(e) for e in seq.split(',')]

def load_fixtures(path):
    '''Reads test vectors from a file with one "text<TAB>sa<TAB>lcp"
    case per line. Blank lines and lines starting with # are skipped.
    '''
    cases = []
    with open(path, encoding = 'utf-8') as f:
        for lineno, line in enumerate(f, 1):
            line = line.rstrip('\n')
            if not line.strip() or line.startswith('#'):
                continue
            parts = line.split('\t')
            if len(parts) != 3:
                raise ValueError('%s:%d: expected 3 tab-separated fields, '
                                 'got %d' % (path, lineno, len(parts)))
            text, sa, lcp = parts
            try:
                cases.append((text, parse_comma_list(sa),
                              parse_comma_list(lcp)))
            except ValueError:
                raise ValueError('%s:%d: bad integer list'
                                 % (path, lineno)) from None
    return cases
