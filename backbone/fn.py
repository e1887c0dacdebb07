'''Composition as infix operators.

   Python has no user-defined operators, so a wrapped function borrows three:

   ======  ==============  =====================
   op      reads as        means
   ======  ==============  =====================
   f @ g   f • g           x -> f(g(x))
   f << g  f <<< g         x -> f(g(x))
   f >> g  f >>> g         x -> g(f(x))
   ======  ==============  =====================

   Only one side needs to be an `Fn`; the other may be any callable, or the hole
   marker to get an operator section.

   >>> from backbone.holes import __
   >>> inc = Fn(lambda x: x + 1)
   >>> (inc >> str)(1), (inc @ abs)(-5), (str << inc)(1)
   ('2', 6, '2')
   >>> (__ >> inc)(abs)(-5)
   6
'''
import backbone.holes as holes
import backbone.partial as partial
import backbone.funcutils as funcutils


class Fn(object):
    __slots__ = ('__f', '__weakref__')

    def __init__(self, f0):
        '''callable -> Fn'''
        if not callable(f0):
            raise TypeError('{!r} is not callable'.format(f0))
        self.__f = f0.func if isinstance(f0, Fn) else f0

    @property
    def func(self):
        return self.__f

    def __call__(self, *args, **kwargs):
        return self.__f(*args, **kwargs)

    def __matmul__(self, other):
        return _combine(funcutils.compose, self.__f, other)

    def __rmatmul__(self, other):
        return _combine(funcutils.compose, other, self.__f)

    def __lshift__(self, other):
        return _combine(funcutils.compose, self.__f, other)

    def __rlshift__(self, other):
        return _combine(funcutils.compose, other, self.__f)

    def __rshift__(self, other):
        return _combine(funcutils.pipe, self.__f, other)

    def __rrshift__(self, other):
        return _combine(funcutils.pipe, other, self.__f)

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, self.__f)


def _combine(op, lhs, rhs):
    '''(f, g -> h), f|__, g|__ -> Fn'''
    if holes.isHole(lhs) or holes.isHole(rhs):
        return Fn(partial.section(op, lhs, rhs))
    for x in (lhs, rhs):
        if not callable(x):
            return NotImplemented
    return Fn(op(lhs, rhs))

# eof
