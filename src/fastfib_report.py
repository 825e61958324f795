'''
console report comparing naive and fast fibonacci

first part uses the fixed-width engine, compares slow and fast for small n,
then fast only for larger n up to the 64-bit limit
second part uses the arbitrary-precision engine for n far beyond that limit
'''

import time
from typing import Callable, List, Tuple
import fastfib_int64
import fastfib_bigint


SPEED_COMPARISON_RANGE = (20, 30, 5)
LARGE_VALUES = [50, 75, 90]
BIGINT_VALUES = [50, 100, 1000, 10000, 100000]
BIGINT_FULL_MAX_N = 100


def timed(fib: Callable[[int], int], n: int) -> Tuple[int, float]:
    '''return fib(n) with elapsed seconds'''
    start = time.perf_counter()
    result = fib(n)
    return result, time.perf_counter() - start


def report_int64() -> List[str]:
    lines = ['=== FAST FIBONACCI: O(log n) Matrix Exponentiation ===', '']
    lines.append('SPEED COMPARISON:')
    lo, hi, step = SPEED_COMPARISON_RANGE
    for n in range(lo, hi+1, step):
        result, sec = timed(fastfib_int64.slow_fib, n)
        lines.append('SLOW fib(%d) = %d  [%.6fs]' % (n, result, sec))
        result, sec = timed(fastfib_int64.fast_fib, n)
        lines.append('FAST fib(%d) = %d  [%.6fs]' % (n, result, sec))
        lines.append('')
    lines.append('LARGE VALUES (slow version would take years):')
    for n in LARGE_VALUES:
        result, sec = timed(fastfib_int64.fast_fib, n)
        lines.append('fib(%d) = %d  [%.6fs]' % (n, result, sec))
    lines.append('')
    n_max = fastfib_int64.INT64_FIB_MAX_N
    lines.append('Max value: fib(%d) = %d' % (n_max, fastfib_int64.fast_fib(n_max)))
    lines.append('For larger n use the arbitrary-precision engine')
    return lines


def report_bigint() -> List[str]:
    lines = ['=== FAST FIBONACCI (ARBITRARY PRECISION) ===', '']
    for n in BIGINT_VALUES:
        result, sec = timed(fastfib_bigint.fast_fib, n)
        if n <= BIGINT_FULL_MAX_N:
            lines.append('fib(%d) = %d  [%.6fs]' % (n, result, sec))
        else:
            text, digits = fastfib_bigint.format_bigint(result)
            lines.append('fib(%d) = %s' % (n, text))
            lines.append('  [%d digits, %.6fs]' % (digits, sec))
        lines.append('')
    return lines


def main():
    for line in report_int64():
        print(line)
    print('')
    for line in report_bigint():
        print(line)


def test_int64():
    lines = report_int64()
    assert lines[0] == '=== FAST FIBONACCI: O(log n) Matrix Exponentiation ==='
    assert lines[3].startswith('SLOW fib(20) = 6765  [')
    assert lines[4].startswith('FAST fib(20) = 6765  [')
    assert any(line.startswith('FAST fib(30) = 832040  [') for line in lines)
    assert any(line.startswith('fib(90) = 2880067194370816120  [') for line in lines)
    assert 'Max value: fib(92) = 7540113804746346429' in lines


def test_bigint():
    lines = report_bigint()
    assert lines[0] == '=== FAST FIBONACCI (ARBITRARY PRECISION) ==='
    assert any(line.startswith('fib(100) = 354224848179261915075  [') for line in lines)
    i = lines.index('fib(1000) = %s' % fastfib_bigint.format_bigint(fastfib_bigint.fast_fib(1000))[0])
    assert lines[i+1].startswith('  [209 digits, ')
    assert any(line.startswith('  [20899 digits, ') for line in lines)


def test():
    test_int64()
    test_bigint()
    main()


if __name__ == '__main__':
    test()
