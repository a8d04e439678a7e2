"""
palfilter: filter palindrome numbers out of lists of ints,
sequentially or with a thread pool.
"""

# MUST be first: installs Logger class before any getLogger call
from palfilter import logging

from palfilter.palindrome import (
    digit_at,
    digit_length,
    filter_parallel,
    filter_sequential,
    is_palindrome,
    is_palindrome_recursive,
    PalindromeWorker,
    ParallelPalindromeWorker,
)
from palfilter.worker import InvalidArgument, PalFilterException

__version__ = '0.1.0'

__all__ = [
    'digit_at',
    'digit_length',
    'filter_parallel',
    'filter_sequential',
    'InvalidArgument',
    'is_palindrome',
    'is_palindrome_recursive',
    'PalFilterException',
    'PalindromeWorker',
    'ParallelPalindromeWorker',
]
