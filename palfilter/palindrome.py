"""
palindrome number filtering:
takes lists of ints and returns the palindromes.
"""

from typing import Iterable, List, Optional

from palfilter.worker import ListWorker, ParallelListWorker


def digit_length(number: int) -> int:
    """
    return number of decimal digits in abs(number);
    zero has one digit.
    """
    if number == 0:
        return 1

    number = abs(number)
    length = 0
    while number > 0:
        number //= 10
        length += 1
    return length

def digit_at(number: int, position: int) -> int:
    """
    return code point of decimal digit `position` of abs(number),
    counting from the most significant digit (position 0).
    """
    return ord(str(abs(number))[position])

def is_palindrome(number: int) -> bool:
    """
    True if decimal digits of number read the same in both directions.
    Negative numbers are never palindromes.
    """
    if number < 0:
        return False

    length = digit_length(number)
    i = 0
    # NOTE: runs one step past the midpoint for some lengths
    # (re-checks a pair already seen)
    while i <= length - i:
        if digit_at(number, i) != digit_at(number, length - (i + 1)):
            return False
        i += 1
    return True

def _peel(number: int, divider: int) -> bool:
    # compare outermost digits, then recurse on what's inside.
    # divider is 10**(digits-1) for the ORIGINAL width, so inner
    # zeros stripped by the division are still accounted for.
    if number <= 0:
        return False

    if number // divider != number % 10:
        return False

    number = (number % divider) // 10
    divider //= 100
    return number == 0 or _peel(number, divider)

def is_palindrome_recursive(number: int) -> bool:
    """
    alternate to is_palindrome using integer arithmetic only
    (peels off the first and last digits on each call).
    Recursion depth is half the digit count.
    """
    if number < 0:
        return False
    if number == 0:
        return True
    return _peel(number, 10 ** (digit_length(number) - 1))


class PalindromeWorker(ListWorker):
    """
    takes lists of ints and returns the palindromes, in order
    """

    def __init__(self, process_name: str = "palindrome",
                 descr: str = "sequential palindrome filter"):
        super().__init__(process_name, descr)

    def process_item(self, item: int) -> bool:
        return is_palindrome(item)


class ParallelPalindromeWorker(ParallelListWorker):
    """
    takes lists of ints and returns the palindromes,
    in no particular order
    """

    def __init__(self, process_name: str = "palindrome-parallel",
                 descr: str = "parallel palindrome filter",
                 max_workers: Optional[int] = None,
                 chunk_size: Optional[int] = None):
        super().__init__(process_name, descr, max_workers, chunk_size)

    def process_item(self, item: int) -> bool:
        return is_palindrome(item)


def filter_sequential(numbers: Optional[Iterable[int]]) -> List[int]:
    """
    Return palindromes from `numbers`, in input order.
    Raises InvalidArgument if numbers is None.
    """
    return PalindromeWorker().process_list(numbers)

def filter_parallel(numbers: Optional[Iterable[int]],
                    max_workers: Optional[int] = None,
                    chunk_size: Optional[int] = None) -> List[int]:
    """
    Return palindromes from `numbers` using a thread pool.
    Same items (and counts) as filter_sequential, order not defined.
    Raises InvalidArgument if numbers is None.
    """
    worker = ParallelPalindromeWorker(max_workers=max_workers,
                                      chunk_size=chunk_size)
    return worker.process_list(numbers)
