'''Anonymous recursion through a fixed-point combinator.

   Python evaluates arguments eagerly, so the self-application of the classic Y
   combinator would recurse forever while the fixed point is being built:

       Y = λf.(λx.f(xx))(λx.f(xx))

   The eta-expanded Z combinator defers `xx` behind an extra argument list, but
   rebuilds the body on every recursive call. `fix` instead ties the knot once
   through a closure: the body is built a single time around a forwarding
   function, and that forwarding function is the only indirection a recursive
   call goes through.

   There is no depth limit beyond the interpreter's recursion limit; a
   generator whose recursion does not terminate does not terminate under `fix`
   either.
'''

def fix(f0):
    '''((a -> b) -> (a -> b)) -> (a -> b)

       Return `h` such that `h(x) == f0(h)(x)`. `f0` receives the function to
       recur through and returns the function body; it is called exactly once.

       >>> fact = fix(lambda rec: lambda n: 1 if n <= 1 else n * rec(n - 1))
       >>> fact(5), fact(0)
       (120, 1)
       >>> fib = fix(lambda rec: lambda a, b, n: a if n == 0 else rec(b, a + b, n - 1))
       >>> fib(0, 1, 10)
       55
    '''
    def rec(*args, **kwargs):
        return body(*args, **kwargs)
    body = f0(rec)
    return rec

# eof
