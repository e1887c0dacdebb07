'''Reshaping functions: currying, flipping, splatting, composing.

   Every combinator here is a pure transformation from functions to a function.
   Exceptions raised by the wrapped functions propagate unchanged.
'''
import copy
import inspect
import functools

import backbone.holes as holes

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)

def identity(x):
    '''a -> a'''
    return x

def const(x):
    '''a -> (... -> a)

       >>> const(3)('ignored', key='ignored')
       3
    '''
    def f1(*args, **kwargs):
        return x
    return f1

def noop(*args, **kwargs):
    '''... -> None'''

def ap(datum, fun):
    '''a, (a -> b) -> b'''
    return fun(datum)

def with_(datum):
    '''a -> ((a -> b) -> b)

       The curried, argument-first form of `ap`.

       >>> list(map(with_(-2), [abs, str]))
       [2, '-2']
    '''
    def f1(fun):
        return fun(datum)
    return f1

def tap(f0):
    '''(a -> b) -> (a -> a)

       Call `f0` for its side effect and pass the argument through.

       >>> seen = []
       >>> tap(seen.append)(4), seen
       (4, [4])
    '''
    @functools.wraps(f0)
    def f1(x):
        f0(x)
        return x
    return f1

def mutate(x, f0):
    '''a, (a -> None) -> a

       Let `f0` modify `x` in place and return `x` itself. Values that cannot
       be modified in place are passed in a `backbone.weak.MutBox`.
    '''
    f0(x)
    return x

def mutating(f0):
    '''(a -> None) -> (a -> a)

       Return a function that modifies a deep copy of its argument with `f0`
       and returns the copy; the argument itself is left untouched.

       >>> xs = [3, 1, 2]
       >>> mutating(list.sort)(xs), xs
       ([1, 2, 3], [3, 1, 2])
    '''
    @functools.wraps(f0)
    def f1(x):
        return mutate(copy.deepcopy(x), f0)
    return f1

def ownSignature(f1):
    '''Report the parameters `f1` itself takes instead of those of the function
       it wraps.
    '''
    f1.__dict__.pop('__signature__', None)
    f1.__signature__ = inspect.signature(f1, follow_wrapped=False)
    return f1

def positionalArity(f0):
    '''callable -> (int, int or None)

       The number of required positional parameters of `f0` and the number
       it accepts at most (None when it takes *args).

       >>> positionalArity(lambda a, b, c=0: None)
       (2, 3)
       >>> positionalArity(lambda a, *rest: None)
       (1, None)
    '''
    try:
        sig = inspect.signature(f0, follow_wrapped=False)
    except (TypeError, ValueError) as e:
        raise TypeError('cannot inspect the signature of {!r}'.format(f0)) from e
    params = list(sig.parameters.values())
    positional = [p for p in params if p.kind in _POSITIONAL]
    required = sum(1 for p in positional if p.default is p.empty)
    if any(p.kind == p.VAR_POSITIONAL for p in params):
        return required, None
    return required, len(positional)

def curry(f0, arity=None):
    '''(a, b, ... -> c)[, int] -> (a -> b -> ... -> c)

       Collect each argument of `f0` with a chain of unary functions, deferring
       the call until `arity` arguments are collected. The arity defaults to the
       number of required positional parameters of `f0`.

       >>> add3 = curry(lambda a, b, c: a + b + c)
       >>> add3('a')('b')('c')
       'abc'
       >>> curry(str.replace)('banana')('a')('o')
       'bonono'
    '''
    if arity is None:
        required, _ = positionalArity(f0)
        if required == 0:
            raise TypeError('cannot infer the arity of {!r}; pass it explicitly'.format(f0))
        arity = required
    if arity < 1:
        raise ValueError('arity must be positive, got {}'.format(arity))
    def link(args):
        @ownSignature
        @functools.wraps(f0)
        def f1(x):
            holes.rejectHoles((x,))
            acc = args + (x,)
            return f0(*acc) if len(acc) == arity else link(acc)
        return f1
    return link(())

def uncurry(f0):
    '''(a -> b -> ... -> c) -> (a, b, ... -> c)

       >>> uncurry(lambda a: lambda b: a - b)(5, 3)
       2
    '''
    @ownSignature
    @functools.wraps(f0)
    def f1(*args):
        holes.rejectHoles(args)
        return functools.reduce(flip(ap), args, f0)
    return f1

def splat(f0):
    '''(a, b, ... -> c) -> ([a, b, ...] -> c)

       >>> splat(max)((3, 9, 4))
       9
    '''
    @ownSignature
    @functools.wraps(f0)
    def f1(args, **kwargs):
        return f0(*args, **kwargs)
    return f1

def unsplat(f0):
    '''([a, b, ...] -> c) -> (a, b, ... -> c)

       >>> unsplat(sum)(1, 2, 3)
       6
    '''
    @ownSignature
    @functools.wraps(f0)
    def f1(*args, **kwargs):
        return f0(args, **kwargs)
    return f1

def flip(f0):
    '''(a, b, ... -> c) -> (..., b, a -> c)

       >>> flip(lambda a, b: a + b)('hello', 'world')
       'worldhello'
    '''
    @functools.wraps(f0)
    def f1(*args, **kwargs):
        return f0(*args[::-1], **kwargs)
    return f1

def flipCurried(f0, arity=2):
    '''(a -> b -> ... -> c)[, int] -> (... -> b -> a -> c)

       >>> flipCurried(lambda a: lambda b: a - b)(1)(10)
       9
    '''
    if arity < 1:
        raise ValueError('arity must be positive, got {}'.format(arity))
    @functools.wraps(f0)
    def f1(*args):
        return uncurry(f0)(*args[::-1])
    return curry(f1, arity)

def flipMutating(f0):
    '''(a -> (b, c, ... -> r)) -> (..., c, b -> (a -> r))

       `a` is the argument that `f0` mutates. It is supplied last and only the
       remaining arguments are reversed.

       >>> xs = [1]
       >>> extendBy = lambda target: lambda a, b: target.extend([a, b])
       >>> flipMutating(extendBy)(3, 2)(xs)
       >>> xs
       [1, 2, 3]
    '''
    @ownSignature
    @functools.wraps(f0)
    def f1(*args, **kwargs):
        def f2(target):
            return f0(target)(*args[::-1], **kwargs)
        return f2
    return f1

def flipMethod(f0):
    '''(s, a, b, ... -> r) -> (..., b, a -> (s -> r))

       Reverse the arguments of an instance method and defer the receiver.

       >>> flipMethod(str.replace)('o', 'a')('banana')
       'bonono'
    '''
    @ownSignature
    @functools.wraps(f0)
    def f1(*args, **kwargs):
        def f2(receiver):
            return f0(receiver, *args[::-1], **kwargs)
        return f2
    return f1

def compose(*fs):
    '''(y -> z), ..., (a, b, ... -> x) -> (a, b, ... -> z)

       Right-to-left composition. The innermost function receives every
       argument; each outer function receives the result of the one after it.

       >>> compose(str, abs, lambda a, b: a - b)(2, 5)
       '3'
    '''
    if not fs:
        return identity
    outer, inner = fs[:-1], fs[-1]
    def f1(*args, **kwargs):
        return functools.reduce(ap, reversed(outer), inner(*args, **kwargs))
    return f1

def pipe(*fs):
    '''(a, b, ... -> x), ..., (y -> z) -> (a, b, ... -> z)

       Left-to-right composition.

       >>> pipe(abs, str)(-7)
       '7'
    '''
    return compose(*fs[::-1])

def kleisli(*fs):
    '''(a -> b or None), (b -> c or None), ... -> (a -> z or None)

       Left-to-right composition of functions that may return None. The first
       None ends the chain and is the result; later functions are not called.

       >>> parse = lambda s: int(s) if s.isdigit() else None
       >>> recip = lambda n: 1 / n if n else None
       >>> f = kleisli(parse, recip)
       >>> f('4'), f('0'), f('x')
       (0.25, None, None)
    '''
    def f1(x):
        for f in fs:
            if x is None:
                break
            x = f(x)
        return x
    return f1

def kleisliEnv(f0, g0):
    '''(a -> (e -> b)), (b -> (e -> c)) -> (a -> (e -> c))

       Compose two functions whose results still wait for a shared environment
       `e`; both receive the same environment.

       >>> scale = lambda x: lambda env: x * env['k']
       >>> shift = lambda y: lambda env: y + env['d']
       >>> kleisliEnv(scale, shift)(3)({'k': 10, 'd': 1})
       31
    '''
    def f1(x):
        def f2(env):
            return g0(f0(x)(env))(env)
        return f2
    return f1

# pass datums through a list of functions expressing a pipeline
# pipeline :: [(a -> b), (b -> c), ... (d -> e)], a -> e
pipeline = functools.partial(functools.reduce, ap)

# eof
