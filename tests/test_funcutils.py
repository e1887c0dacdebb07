import pytest

import backbone.funcutils as funcutils
from backbone.holes import __, UnboundArgumentError


def sub(a, b):
    return a - b

def concat3(a, b, c):
    return a + b + c

def concat4(a, b, c, d):
    return a + b + c + d


class Boom(Exception):
    pass

def explode(*args):
    raise Boom(args)


# --- curry / uncurry ---

def test_curry_binary():
    assert funcutils.curry(sub)(10)(3) == 7

def test_curry_ternary_collects_in_order():
    assert funcutils.curry(concat3)('a')('b')('c') == 'abc'

def test_curry_links_are_reusable():
    prefix = funcutils.curry(concat3)('x')
    assert prefix('1')('2') == 'x12'
    assert prefix('3')('4') == 'x34'

def test_curry_ignores_defaulted_parameters():
    def f(a, b, c='!'):
        return a + b + c
    assert funcutils.curry(f)('a')('b') == 'ab!'

def test_curry_explicit_arity_for_varargs():
    assert funcutils.curry(lambda *xs: sum(xs), 3)(1)(2)(3) == 6

def test_curry_varargs_without_arity_is_rejected():
    with pytest.raises(TypeError):
        funcutils.curry(lambda *xs: sum(xs))

def test_curry_nullary_is_rejected():
    with pytest.raises(TypeError):
        funcutils.curry(lambda: 1)
    with pytest.raises(ValueError):
        funcutils.curry(lambda: 1, 0)

def test_curry_all_defaulted_needs_explicit_arity():
    with pytest.raises(TypeError):
        funcutils.curry(lambda a=1: a)
    assert funcutils.curry(lambda a=1, b=2: a + b, 2)(3)(4) == 7

def test_curry_instance_method():
    assert funcutils.curry(str.replace)('banana')('a')('o') == 'bonono'

def test_curry_rejects_hole():
    with pytest.raises(UnboundArgumentError):
        funcutils.curry(sub)(__)

def test_uncurry_curry_round_trip():
    for a, b in [(1, 2), (5, -5), (0, 0)]:
        assert funcutils.uncurry(funcutils.curry(sub))(a, b) == sub(a, b)
    assert funcutils.uncurry(funcutils.curry(concat3))('a', 'b', 'c') == 'abc'

def test_uncurry_hand_written_chain():
    chain = lambda a: lambda b: lambda c: (a, b, c)
    assert funcutils.uncurry(chain)(1, 2, 3) == (1, 2, 3)

def test_curry_propagates_exceptions():
    with pytest.raises(Boom):
        funcutils.curry(explode, 2)(1)(2)


# --- splat ---

def test_splat_unsplat():
    assert funcutils.splat(sub)((9, 4)) == 5
    assert funcutils.unsplat(tuple)(1, 2) == (1, 2)
    assert funcutils.splat(funcutils.unsplat(tuple))((1, 2)) == (1, 2)


# --- flip ---

def test_flip_binary():
    assert funcutils.flip(sub)(3, 10) == 7

def test_flip_reverses_all_positions():
    assert funcutils.flip(concat4)('d', 'c', 'b', 'a') == 'abcd'

def test_flip_is_an_involution():
    for f, args in [(sub, (4, 9)), (concat3, ('x', 'y', 'z')), (concat4, ('1', '2', '3', '4'))]:
        assert funcutils.flip(funcutils.flip(f))(*args) == f(*args)

def test_flip_passes_keywords_through():
    def f(a, b, sep='-'):
        return a + sep + b
    assert funcutils.flip(f)('b', 'a', sep='+') == 'a+b'

def test_flip_propagates_exceptions():
    with pytest.raises(Boom):
        funcutils.flip(explode)(1, 2)

def test_flip_curried():
    chain = lambda a: lambda b: lambda c: a + b + c
    flipped = funcutils.flipCurried(chain, 3)
    assert flipped('c')('b')('a') == 'abc'
    assert funcutils.flipCurried(flipped, 3)('a')('b')('c') == 'abc'

def test_flip_curried_rejects_bad_arity():
    with pytest.raises(ValueError):
        funcutils.flipCurried(lambda a: a, 0)

def test_flip_mutating_keeps_the_target():
    box = []
    def extend(target):
        def f1(a, b, c):
            target.extend([a, b, c])
            return len(target)
        return f1
    flipped = funcutils.flipMutating(extend)
    assert flipped(3, 2, 1)(box) == 3
    assert box == [1, 2, 3]

def test_flip_mutating_propagates_exceptions():
    flipped = funcutils.flipMutating(lambda target: explode)
    with pytest.raises(Boom):
        flipped(1, 2)([])

def test_flip_method():
    assert funcutils.flipMethod(str.replace)('o', 'a')('banana') == 'bonono'

def test_flip_method_user_class():
    class Account(object):
        def __init__(self):
            self.log = []
        def move(self, src, dst):
            self.log.append((src, dst))
    acct = Account()
    funcutils.flipMethod(Account.move)('to', 'from')(acct)
    assert acct.log == [('from', 'to')]


# --- composition ---

def test_compose_order():
    inc = lambda x: x + 1
    dbl = lambda x: x * 2
    assert funcutils.compose(inc, dbl)(5) == 11
    assert funcutils.pipe(inc, dbl)(5) == 12

def test_compose_is_associative():
    f, g, h = (lambda x: x + 1), (lambda x: x * 3), (lambda x: x - 2)
    c = funcutils.compose
    for x in range(-3, 4):
        assert c(c(f, g), h)(x) == c(f, c(g, h))(x) == f(g(h(x)))

def test_compose_empty_is_identity():
    assert funcutils.compose()(42) == 42

def test_compose_inner_gets_all_arguments():
    assert funcutils.compose(str, concat3)('a', 'b', c='c') == 'abc'

def test_compose_short_circuits_on_failure():
    calls = []
    outer = lambda x: calls.append(x)
    with pytest.raises(Boom):
        funcutils.compose(outer, explode)(1)
    with pytest.raises(Boom):
        funcutils.pipe(explode, outer)(1)
    assert calls == []

def test_pipeline():
    assert funcutils.pipeline([abs, str, len], -1234) == 4


# --- base helpers ---

def test_const_and_identity():
    assert funcutils.const('k')(1, 2, x=3) == 'k'
    assert funcutils.identity([1]) == [1]
    assert funcutils.noop(1, x=2) is None

def test_ap_and_tap():
    seen = []
    assert funcutils.ap(3, str) == '3'
    assert funcutils.tap(seen.append)('x') == 'x'
    assert seen == ['x']

def test_positional_arity():
    assert funcutils.positionalArity(sub) == (2, 2)
    assert funcutils.positionalArity(lambda a, *rest, **kw: None) == (1, None)
    assert funcutils.positionalArity(lambda a, *, b: None) == (1, 1)

def test_flip_mutating_with_mut_box():
    from backbone.weak import MutBox
    acc = MutBox(2)
    def affine(box):
        def f1(scale, offset):
            box.value = box.value * scale + offset
            return box.value
        return f1
    assert funcutils.flipMutating(affine)(1, 10)(acc) == 21
    assert acc.value == 21


# --- signatures ---

def test_curried_links_report_one_parameter():
    link = funcutils.curry(concat3)
    assert funcutils.positionalArity(link) == (1, 1)
    assert funcutils.positionalArity(link('a')) == (1, 1)

def test_reshaped_functions_report_their_own_parameters():
    assert funcutils.positionalArity(funcutils.uncurry(lambda a: lambda b: a)) == (0, None)
    assert funcutils.positionalArity(funcutils.splat(sub)) == (1, 1)
    assert funcutils.positionalArity(funcutils.flipMethod(str.replace)) == (0, None)
    assert funcutils.curry(sub).__name__ == 'sub'


# --- mutation ---

def test_mutate_returns_the_same_object():
    xs = [2, 1]
    assert funcutils.mutate(xs, list.sort) is xs
    assert xs == [1, 2]

def test_mutating_leaves_the_argument_alone():
    nested = {'xs': [3, 1, 2]}
    sortXs = lambda d: d['xs'].sort()
    result = funcutils.mutating(sortXs)(nested)
    assert result == {'xs': [1, 2, 3]}
    assert nested == {'xs': [3, 1, 2]}

def test_mutating_an_immutable_value_through_a_box():
    from backbone.weak import MutBox
    def incr(box):
        box.value += 1
    start = MutBox(1)
    assert funcutils.mutating(incr)(start).value == 2
    assert start.value == 1


# --- with_ and kleisli ---

def test_with_applies_functions_to_a_fixed_value():
    assert [funcutils.with_(3)(f) for f in (str, lambda n: n * n)] == ['3', 9]
    assert funcutils.with_(4)(str) == funcutils.ap(4, str)

def test_kleisli_short_circuits_on_none():
    calls = []
    def step(x):
        calls.append(x)
        return x + 1
    halfEven = lambda n: n // 2 if n % 2 == 0 else None
    assert funcutils.kleisli(halfEven, step)(8) == 5
    assert funcutils.kleisli(halfEven, step)(7) is None
    assert calls == [4]

def test_kleisli_empty_is_identity():
    assert funcutils.kleisli()('x') == 'x'

def test_kleisli_env_shares_the_environment():
    seen = []
    def f(x):
        return lambda env: seen.append(('f', env)) or x + env
    def g(y):
        return lambda env: seen.append(('g', env)) or y * env
    assert funcutils.kleisliEnv(f, g)(1)(10) == 110
    assert seen == [('f', 10), ('g', 10)]
