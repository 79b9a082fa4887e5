# Copyright (C) 2020 Björn Lindqvist <bjourne@gmail.com>
#
# Tool for building suffix and lcp arrays of lines of text.
"""Suffix array tool

Usage:
    index-strings.py [-v] print [<text-file>]
    index-strings.py [-v] repeats [<text-file>]
    index-strings.py [-v] check <fixture-file>

Options:
    -h --help              show this screen
    -v --verbose           print more output
"""
from docopt import docopt
from strindex.lcp import build_lcp
from strindex.repeats import longest_repeats
from strindex.suffix_array import build_suffix_array
from strindex.utils import SP, load_fixtures
from sys import exit, stderr, stdin
from termtables import print as tt_print
from termtables.styles import markdown

def read_lines(path):
    if path is None:
        lines = stdin.readlines()
    else:
        with open(path, encoding = 'utf-8') as f:
            lines = f.readlines()
    return [line.rstrip('\r\n') for line in lines]

def print_arrays(text):
    print("string is: '%s'" % text)
    sa = build_suffix_array(text)
    lcp = build_lcp(text, sa)
    if not sa:
        print('(empty)')
        return
    rows = [(i, s, h, text[s:]) for i, (s, h) in enumerate(zip(sa, lcp))]
    tt_print(rows,
             padding = (0, 1),
             alignment = 'rrrl',
             style = markdown,
             header = ['Rank', 'SA', 'LCP', 'Suffix'])

def print_repeats(text):
    length, groups = longest_repeats(text)
    if not groups:
        print("'%s': no repeats" % text)
        return
    for positions in groups:
        s = positions[0]
        print("'%s': '%s' (length %d) at %s"
              % (text, text[s:s + length], length,
                 ', '.join(str(p) for p in positions)))

def check_fixtures(path):
    cases = load_fixtures(path)
    SP.header('CHECKING %d CASES FROM %s' % (len(cases), path))
    n_failed = 0
    for i, (text, exp_sa, exp_lcp) in enumerate(cases):
        sa = build_suffix_array(text)
        lcp = build_lcp(text, sa)
        if sa == exp_sa and lcp == exp_lcp:
            print("Case %d: Passed!, string = '%s'" % (i, text))
            continue
        n_failed += 1
        print('Case %d: Failed' % i)
        print('%s:' % text)
        print('sa given:     %s' % sa)
        print('sa expected:  %s' % exp_sa)
        print('lcp given:    %s' % lcp)
        print('lcp expected: %s' % exp_lcp)
    SP.print('%d of %d cases failed.' % (n_failed, len(cases)))
    SP.leave()
    return n_failed

def main():
    args = docopt(__doc__, version = 'Suffix array tool 1.0')
    SP.enabled = args['--verbose']

    if args['check']:
        try:
            n_failed = check_fixtures(args['<fixture-file>'])
        except ValueError as e:
            print('Bad fixture file: %s' % e, file = stderr)
            exit(2)
        exit(1 if n_failed else 0)

    for text in read_lines(args['<text-file>']):
        if args['print']:
            print_arrays(text)
        else:
            print_repeats(text)

if __name__ == '__main__':
    main()
