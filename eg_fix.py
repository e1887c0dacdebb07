#!/usr/bin/env python3
import logging
import argparse

import backbone.fixpoint as fixpoint
import backbone.funcutils as funcutils
import backbone.arrows as arrows

# recursive bodies, each parameterized over the function to recur through
bodies = \
    { 'factorial': lambda rec: lambda n: 1 if n <= 1 else n * rec(n - 1)
    , 'fibonacci': lambda rec: lambda n: n if n < 2 else rec(n - 1) + rec(n - 2)
    }

def nonNegative(s):
    n = int(s)
    if n < 0:
        raise argparse.ArgumentTypeError('{} is negative'.format(n))
    return n

def main(args):
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    f = fixpoint.fix(bodies[args.fn])
    row = funcutils.pipe(arrows.fork(funcutils.identity, f), funcutils.splat('{}\t{}'.format))
    for n in args.n:
        print(row(n))
    return 0

if __name__ == '__main__':
    p = argparse.ArgumentParser(description='''Print values of a recursive
    function built without naming itself.''')
    p.add_argument \
        ( 'n'
        , type = nonNegative
        , nargs = '+'
        , help = '''Arguments to evaluate the function at.''')
    p.add_argument \
        ( '-f'
        , '--fn'
        , choices = sorted(bodies)
        , default = 'factorial'
        , help = '''Which function to evaluate. (default: factorial)''')
    p.add_argument \
        ( '-v'
        , '--verbose'
        , action = 'store_true'
        , help = '''Log at DEBUG level.''')
    # main
    exit(main(p.parse_args()))

# eof
