import itertools

# a source is a generator
# a stage is a function applied repeatedly to its own output
# a sink is a reducer, eg list() or until()

def iterate(f0, x):
    '''(a -> a), a -> iter<a>

       Infinite. Produce `x`, `f0(x)`, `f0(f0(x))`, ...

       >>> list(itertools.islice(iterate(lambda n: n * 2, 1), 5))
       [1, 2, 4, 8, 16]
    '''
    while True:
        yield x
        x = f0(x)

def repeatedly(thunk):
    '''(-> a) -> iter<a>

       Infinite. Produce the result of a fresh call to `thunk` on every iteration.

       >>> counter = itertools.count()
       >>> list(itertools.islice(repeatedly(lambda: next(counter)), 3))
       [0, 1, 2]
    '''
    while True:
        yield thunk()

def until(p, f0):
    '''(a -> bool), (a -> a) -> (a -> a)

       Apply `f0` until its result satisfies `p`.

       >>> until(lambda n: n > 100, lambda n: n * 2)(1)
       128
       >>> until(lambda n: n > 100, lambda n: n * 2)(500)
       500
    '''
    def f1(x):
        for y in iterate(f0, x):
            if p(y):
                return y
    return f1

def replicate(n):
    '''int -> (a -> [a])

       >>> replicate(3)('x')
       ['x', 'x', 'x']
    '''
    if n < 0:
        raise ValueError('cannot replicate {} times'.format(n))
    def f1(x):
        return list(itertools.repeat(x, n))
    return f1

# eof
