from .lazy import Lazy, lazify
from .lazy_async import LazyAsync, lazify_async
from .errors import LazyError, UninitializedError
from .version import __version__

__all__ = ["Lazy", "lazify", "LazyAsync", "lazify_async", "LazyError",
           "UninitializedError", "__version__"]
