'''The hole marker: a placeholder for a positional argument not yet supplied.

   >>> __
   __
   >>> isHole(__), isHole(None)
   (True, False)
'''


class UnboundArgumentError(TypeError):
    '''A hole marker was passed where a concrete argument is required.'''


class Hole(object):
    '''Singleton marking an unbound positional argument.

       Distinct from `None` so that optional arguments never collide with it.
    '''
    __slots__ = ()
    __instance = None

    def __new__(cls):
        if cls.__instance is None:
            cls.__instance = super(Hole, cls).__new__(cls)
        return cls.__instance

    def __reduce__(self):
        return (Hole, ())

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __repr__(self):
        return '__'

__ = Hole()


def isHole(x):
    '''a -> bool'''
    return x is __

def rejectHoles(args, kwargs=None):
    '''[a][, {str: a}] -> None

       Raise UnboundArgumentError if any argument is the hole marker.

       >>> rejectHoles((1, 2))
       >>> rejectHoles((1, __))
       Traceback (most recent call last):
       ...
       backbone.holes.UnboundArgumentError: argument 1 is unbound
    '''
    for i, x in enumerate(args):
        if isHole(x):
            raise UnboundArgumentError('argument {} is unbound'.format(i))
    for k, x in (kwargs or {}).items():
        if isHole(x):
            raise UnboundArgumentError('argument {!r} is unbound'.format(k))

# eof
