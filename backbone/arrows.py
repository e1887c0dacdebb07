'''Combinators over tuples of values and tuples of functions.

   >>> fork(min, max, len)([3, 1, 2])
   (1, 3, 3)
   >>> cross(str, abs)(1, -2)
   ('1', 2)
'''
import functools

import backbone.funcutils as funcutils

# tuple accessors
first = lambda xs: xs[0]
second = lambda xs: xs[1]
third = lambda xs: xs[2]

duplicate = lambda x: (x, x)
triplicate = lambda x: (x, x, x)
swap = lambda a, b: (b, a)

def fork(*fs):
    '''(a -> b), (a -> c), ... -> (a -> (b, c, ...))

       Feed one argument to every function.
    '''
    def f1(x):
        return tuple(f(x) for f in fs)
    return f1

def cross(*fs):
    '''(a -> b), (c -> d), ... -> (a, c, ... -> (b, d, ...))

       Feed each argument to the function in the same position.
    '''
    def f1(*xs):
        if len(xs) != len(fs):
            raise TypeError('expected {} argument(s), got {}'.format(len(fs), len(xs)))
        return tuple(f(x) for f, x in zip(fs, xs))
    return f1

def both(f0):
    '''(a -> b) -> (a, a -> (b, b))

       >>> both(len)('ab', 'cde')
       (2, 3)
    '''
    return cross(f0, f0)

def on(f0, g0):
    '''(b, b -> c), (a -> b) -> (a, a -> c)

       Apply `g0` to both arguments before combining them with `f0`.

       >>> on(max, abs)(-7, 3)
       7
    '''
    @functools.wraps(f0)
    def f1(a, b):
        return f0(g0(a), g0(b))
    return f1

def dimap(f0, g0):
    '''(b -> a), (c -> d) -> ((a -> c) -> (b -> d))

       Adapt a function on both ends: pre-process its input with `f0` and
       post-process its output with `g0`.

       >>> dimap(int, str)(lambda n: n * 2)('21')
       '42'
    '''
    def f1(h):
        return funcutils.compose(g0, h, f0)
    return f1

def mapAt(i, f0):
    '''int, (a -> b) -> ((..., a, ...) -> (..., b, ...))

       Transform the `i`th element of a tuple, keeping the others. Negative
       indexes count from the end; an index outside the tuple raises IndexError.

       >>> mapAt(1, str.upper)(('a', 'b', 'c'))
       ('a', 'B', 'c')
       >>> mapAt(-1, str.upper)(('a', 'b', 'c'))
       ('a', 'b', 'C')
    '''
    def f1(xs):
        xs = tuple(xs)
        j = range(len(xs))[i]
        return xs[:j] + (f0(xs[j]),) + xs[j + 1:]
    return f1

mapFst = functools.partial(mapAt, 0)
mapSnd = functools.partial(mapAt, 1)
mapTrd = functools.partial(mapAt, 2)

# eof
