'''Positional partial application with holes, and operator sections.

   Unlike functools.partial, any position can be left open:

   >>> import operator
   >>> from backbone.holes import __
   >>> half = partial(operator.truediv, __, 2)
   >>> half(9)
   4.5
   >>> partial(operator.truediv, 1, __)(4)
   0.25
'''
import inspect
import operator
import functools

import backbone.holes as holes
import backbone.funcutils as funcutils

def _checkArgCount(f0, args):
    '''Reject an argument list that cannot line up with the positional parameters of `f0`.'''
    try:
        required, accepted = funcutils.positionalArity(f0)
    except TypeError:
        # no signature to check against; the call itself will complain
        return
    if len(args) < required or (accepted is not None and len(args) > accepted):
        expected = '{}'.format(required) if required == accepted \
            else 'at least {}'.format(required) if accepted is None \
            else '{} to {}'.format(required, accepted)
        raise TypeError('{!r} takes {} positional argument(s), {} given'.format(f0, expected, len(args)))

def _holeSignature(f0, args, slots):
    '''The signature of the function taking the holes of `args`, or None when
       `f0` has no signature to derive it from.
    '''
    try:
        sig = inspect.signature(f0, follow_wrapped=False)
    except (TypeError, ValueError):
        return None
    params = list(sig.parameters.values())
    positional = [p for p in params if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)]
    if any(i >= len(positional) for i in slots):
        # holes fall into *args
        return None
    kept = [positional[i].replace(kind=inspect.Parameter.POSITIONAL_ONLY, default=inspect.Parameter.empty)
            for i in slots]
    kept += [p.replace(kind=inspect.Parameter.KEYWORD_ONLY) for p in positional[len(args):]
             if p.kind == p.POSITIONAL_OR_KEYWORD]
    kept += [p for p in params if p.kind in (p.KEYWORD_ONLY, p.VAR_KEYWORD)]
    return sig.replace(parameters=kept)

def partial(f0, *args):
    '''(a, b, ... -> r), a|__, b|__, ... -> (holes... -> r)

       Fix the non-hole arguments of `f0` and return a function taking the
       missing ones in their original relative order. Keyword arguments given
       to the returned function are passed through to `f0`.

       >>> from backbone.holes import __
       >>> f = lambda a, b, c, d: a + b + c + d
       >>> partial(f, 'a', __, 'c', __)('B', 'D')
       'aBcD'
    '''
    _checkArgCount(f0, args)
    slots = [i for i, x in enumerate(args) if holes.isHole(x)]
    @functools.wraps(f0)
    def f1(*missing, **kwargs):
        if len(missing) != len(slots):
            raise TypeError('expected {} argument(s), got {}'.format(len(slots), len(missing)))
        holes.rejectHoles(missing, kwargs)
        full = list(args)
        for i, x in zip(slots, missing):
            full[i] = x
        return f0(*full, **kwargs)
    sig = _holeSignature(f0, args, slots)
    if sig is None:
        return funcutils.ownSignature(f1)
    f1.__signature__ = sig
    return f1

def section(op, lhs, rhs):
    '''(a, b -> c), a|__, b|__ -> (a|b -> c)

       A binary operator with exactly one operand supplied.

       >>> from backbone.holes import __
       >>> section(operator.sub, __, 1)(10), section(operator.sub, 1, __)(10)
       (9, -9)
    '''
    if holes.isHole(lhs) == holes.isHole(rhs):
        raise TypeError('a section needs exactly one hole, got ({!r}, {!r})'.format(lhs, rhs))
    return partial(op, lhs, rhs)

# equality and identity
equals = functools.partial(section, operator.eq)
notEquals = functools.partial(section, operator.ne)
identical = functools.partial(section, operator.is_)
notIdentical = functools.partial(section, operator.is_not)

# composition: (f • __)(g) is f • g and (__ >>> g)(f) is f >>> g
composing = functools.partial(section, funcutils.compose)
piping = functools.partial(section, funcutils.pipe)

# eof
