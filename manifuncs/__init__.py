from .info import VERSION

__version__ = VERSION
