'''
arbitrary-precision fibonacci engine

same matrix exponentiation as the fixed-width engine, but cells are plain python int
so there is no overflow, fib(n) is exact for any n as long as memory and time allow
'''

import sys
from typing import Tuple
from fastfib_matrix import make_base_matrix, mat22power

# python refuses to convert very long ints to decimal string by default
if hasattr(sys, 'set_int_max_str_digits'):
    sys.set_int_max_str_digits(0)

FORMAT_MAX_DIGITS = 100
FORMAT_EDGE_DIGITS = 50


def fast_fib(n: int) -> int:
    '''log(n) multiplications fibonacci with arbitrary precision'''
    if n < 0:
        raise ValueError('fibonacci index should be non-negative, now %d' % n)
    if n == 0:
        return 0
    f = make_base_matrix()
    mat22power(f, n-1)
    return f[0][0]


def slow_fib(n: int) -> int:
    if n <= 1:
        return n
    return slow_fib(n-1) + slow_fib(n-2)


def format_bigint(value: int) -> Tuple[str, int]:
    '''
    decimal string for display, together with its digit count
    above 100 digits only the first 50 and last 50 digits are kept
    '''
    s = str(value)
    digits = len(s.lstrip('-'))
    if len(s) <= FORMAT_MAX_DIGITS:
        return s, digits
    return '%s...%s' % (s[:FORMAT_EDGE_DIGITS], s[-FORMAT_EDGE_DIGITS:]), digits


def test_one(n: int, res_exp: int):
    fi = fast_fib(n)
    print('fast_fib(%d) = %d' % (n, fi))
    assert fi == res_exp


def test_known():
    test_one(0, 0)
    test_one(1, 1)
    test_one(2, 1)
    test_one(10, 55)
    test_one(20, 6765)
    test_one(92, 7540113804746346429)
    test_one(93, 12200160415121876738)
    test_one(100, 354224848179261915075)


def test_against_slow():
    for n in range(31):
        assert fast_fib(n) == slow_fib(n)
    print('fast_fib agrees with slow_fib for n in [0, 30]')


def test_against_iteration():
    a, b = 0, 1
    for n in range(500):
        assert fast_fib(n) == a
        a, b = b, a+b


def test_large():
    f1000 = fast_fib(1000)
    text, digits = format_bigint(f1000)
    print('fast_fib(1000) = %s [%d digits]' % (text, digits))
    assert digits == 209
    assert len(text) == FORMAT_EDGE_DIGITS * 2 + 3
    assert text.startswith('434665576869374564356885276750406258025646605173')
    assert text.endswith('849228875')
    # fib(n+1)^2 - fib(n)*fib(n+2) = (-1)^n, cassini identity
    n = 10000
    fa, fb, fc = fast_fib(n), fast_fib(n+1), fast_fib(n+2)
    assert fb * fb - fa * fc == 1
    assert fast_fib(n) == fast_fib(n)


def test_format():
    assert format_bigint(0) == ('0', 1)
    assert format_bigint(354224848179261915075) == ('354224848179261915075', 21)
    exact = 10 ** 99
    assert format_bigint(exact) == (str(exact), 100)
    text, digits = format_bigint(10 ** 100)
    assert digits == 101
    assert text == '1' + '0' * 49 + '...' + '0' * 50


def test():
    test_known()
    test_against_slow()
    test_against_iteration()
    test_large()
    test_format()


if __name__ == '__main__':
    test()
