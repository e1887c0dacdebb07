'''Statements as expressions.

   A branch that should only run on demand is passed as a zero-argument
   callable.
'''
import backbone.either as either

def _force(x):
    return x() if callable(x) else x

def implies(p, q):
    '''bool, bool|(-> bool) -> bool

       Material implication, `not p or q`. A callable `q` is only evaluated
       when `p` holds.

       ====  ====  =======
       p     q     p => q
       ====  ====  =======
       T     T     T
       T     F     F
       F     T     T
       F     F     T
       ====  ====  =======

       >>> method, body = 'PUT', None
       >>> implies(method == 'PUT', lambda: body is not None)
       False
       >>> implies(method == 'GET', lambda: body is not None)
       True
    '''
    return not p or bool(_force(q))

def when(b, f0):
    '''bool, (-> a) -> a or None
       (a -> bool), (a -> b) -> (a -> b or None)

       Given a flag, run `f0` now if it holds. Given a predicate, return a
       function applying `f0` to the values that satisfy it.

       >>> when(True, lambda: 'ran'), when(False, lambda: 'ran')
       ('ran', None)
       >>> halve = when(lambda n: n % 2 == 0, lambda n: n // 2)
       >>> halve(10), halve(7)
       (5, None)
    '''
    if callable(b):
        def f1(x):
            return f0(x) if b(x) else None
        return f1
    return f0() if b else None

def unless(b, f0):
    '''bool, (-> a) -> a or None
       (a -> bool), (a -> b) -> (a -> b or None)

       The converse of `when`.
    '''
    if callable(b):
        def f1(x):
            return None if b(x) else f0(x)
        return f1
    return None if b else f0()
def iff(p, f0, g0):
    '''(a -> bool), (a -> b), (a -> b) -> (a -> b)

       >>> sign = iff(lambda n: n < 0, lambda n: '-', lambda n: '+')
       >>> sign(-3), sign(3)
       ('-', '+')
    '''
    def f1(x):
        return f0(x) if p(x) else g0(x)
    return f1

def given(b, a, c):
    '''bool, (-> a), (-> c) -> Left a | Right c

       >>> given(1 > 0, lambda: 'yes', lambda: 'no')
       Left(value='yes')
    '''
    return either.Left(a()) if b else either.Right(c())

def choice(a, b):
    '''(-> a), (-> a) -> (bool -> a)

       >>> list(map(choice(lambda: 'on', lambda: 'off'), [True, False]))
       ['on', 'off']
    '''
    def f1(flag):
        return a() if flag else b()
    return f1

# eof
