'''A value of one of two kinds: Left or Right.

   >>> parse = lambda s: Right(int(s)) if s.isdigit() else Left(s)
   >>> es = [parse(s) for s in ['1', 'x', '22']]
   >>> es
   [Right(value=1), Left(value='x'), Right(value=22)]
   >>> partitioned(es)
   (['x'], [1, 22])
'''
import collections


class Left(collections.namedtuple('Left', 'value')):
    __slots__ = ()
    isLeft = True
    isRight = False

    def __eq__(self, other):
        return type(self) is type(other) and self.value == other.value

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((Left, self.value))


class Right(collections.namedtuple('Right', 'value')):
    __slots__ = ()
    isLeft = False
    isRight = True

    def __eq__(self, other):
        return type(self) is type(other) and self.value == other.value

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((Right, self.value))


def either(f0, g0):
    '''(a -> c), (b -> c) -> (Left a | Right b -> c)

       >>> either(len, abs)(Left('abc')), either(len, abs)(Right(-2))
       (3, 2)
    '''
    def f1(e):
        if isinstance(e, Left):
            return f0(e.value)
        if isinstance(e, Right):
            return g0(e.value)
        raise TypeError('expected Left or Right, got {!r}'.format(e))
    return f1

def choose(f0, g0):
    '''(a -> c), (b -> d) -> (Left a | Right b -> Left c | Right d)

       >>> choose(len, abs)(Right(-2))
       Right(value=2)
    '''
    return either(lambda a: Left(f0(a)), lambda b: Right(g0(b)))

def lefts(es):
    '''iter<Left a | Right b> -> [a]'''
    return [e.value for e in es if isinstance(e, Left)]

def rights(es):
    '''iter<Left a | Right b> -> [b]'''
    return [e.value for e in es if isinstance(e, Right)]

def partitioned(es):
    '''iter<Left a | Right b> -> ([a], [b])'''
    es = list(es)
    return lefts(es), rights(es)

# eof
