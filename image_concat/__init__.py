__version__ = '0.1'

class ConcatError(Exception):
    pass
