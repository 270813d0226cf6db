"""Top-level package for iterprogress.

Decorators that rate limit iterators and print a percent-complete bar for
iterators whose length is known up front::

    from iterprogress import extend

    for n in extend(range(27)).rate_limit(0.01).show_percent():
        ...
"""

from .bounded import CountedIterator, SizedIterator, as_bounded
from .errors import ProgressStageError
from .extensions import ExtendedIterator, extend, rate_limit, show_percent
from .percent import PercentIterator
from .ratelimit import RateLimiter, RateLimitIterator

__all__ = [
    "CountedIterator",
    "ExtendedIterator",
    "PercentIterator",
    "ProgressStageError",
    "RateLimitIterator",
    "RateLimiter",
    "SizedIterator",
    "__version__",
    "as_bounded",
    "extend",
    "rate_limit",
    "show_percent",
]

__version__ = "0.1.0"
