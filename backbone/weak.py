'''Reference cells and callbacks that do not keep their receiver alive.

   >>> class Controller(object):
   ...     def title(self, suffix):
   ...         return 'main' + suffix
   >>> c = Controller()
   >>> title = weak(c, Controller.title)
   >>> title('!')
   'main!'
   >>> del c
   >>> title('!') is None
   True
'''
import logging
import weakref

log = logging.getLogger(__name__)


class Box(object):
    '''A read-only cell holding a value.'''
    __slots__ = ('_value',)

    def __init__(self, value):
        self._value = value

    @property
    def value(self):
        return self._value

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, self._value)


class MutBox(Box):
    '''A cell whose value may be replaced; stands in for a mutated argument.

       >>> b = MutBox(1)
       >>> b.value += 1
       >>> b
       MutBox(2)
    '''
    __slots__ = ()

    @Box.value.setter
    def value(self, value):
        self._value = value


class Weak(object):
    '''A weak reference; `object` is None once the referent is collected.'''
    __slots__ = ('__ref',)

    def __init__(self, obj):
        self.__ref = weakref.ref(obj)

    @property
    def object(self):
        return self.__ref()

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, self.object)


class Unowned(object):
    '''A reference assumed to outlive its holder; dereferencing a collected
       referent raises ReferenceError.
    '''
    __slots__ = ('__ref',)

    def __init__(self, obj):
        self.__ref = weakref.ref(obj)

    @property
    def object(self):
        obj = self.__ref()
        if obj is None:
            raise ReferenceError('unowned referent was collected')
        return obj


def weak(root, body):
    '''a, (a, b, ... -> c) -> (b, ... -> c or None)

       Bind `root` as the first argument of `body` without keeping it alive.
       Once `root` has been collected the returned function does nothing and
       returns None.
    '''
    ref = weakref.ref(root)
    def f1(*args, **kwargs):
        obj = ref()
        if obj is None:
            log.debug('skipping %r: receiver was collected', body)
            return None
        return body(obj, *args, **kwargs)
    return f1

def weakly(body):
    '''(a, b, ... -> c) -> (a -> (b, ... -> c or None))'''
    def f1(root):
        return weak(root, body)
    return f1

# eof
