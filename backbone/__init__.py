'''Functional combinators: currying, flipping, partial application, composition.'''

__version__ = '0.1.0'

# eof
