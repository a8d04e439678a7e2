"""
simple palindrome example:
generates lists of numbers and prints the palindromes in each.
"""

import argparse
import logging

# app:
from palfilter import __version__, filter_parallel, filter_sequential
from palfilter.logging import NOTICE, sentry_setup

logger = logging.getLogger("simple-pal")

def main():
    ap = argparse.ArgumentParser("simple-pal", description="palindrome example")
    ap.add_argument('--count', '-n', type=int, default=100,
                    help="numbers per list (default 100)")
    ap.add_argument('--lists', '-l', type=int, default=3,
                    help="number of lists (default 3)")
    ap.add_argument('--parallel', '-p', action='store_true',
                    help="use thread pool")
    ap.add_argument('--workers', '-w', type=int, default=None,
                    help="thread pool size (default PALFILTER_WORKERS or CPU count)")
    args = ap.parse_args()

    logging.basicConfig(level=NOTICE)
    sentry_setup(release=__version__)

    n = 0
    for _ in range(args.lists):
        start = n
        n += args.count
        l = list(range(start, n))

        if args.parallel:
            pals = sorted(filter_parallel(l, max_workers=args.workers))
        else:
            pals = filter_sequential(l)
        logger.notice("%d..%d: %d palindromes", start, n - 1, len(pals))
        print(pals)

if __name__ == '__main__':
    main()
