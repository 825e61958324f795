'''
fixed-width fibonacci engine, every matrix cell is a signed 64-bit integer

python int never overflows, so each sum and product is wrapped to two's complement 64 bits
this reproduces the numbers a machine with long long would give
fib(92) is the largest fibonacci number fitting in signed 64 bits
beyond that the wrapped value is wrong, so by default fast_fib refuses n > 92

set fib_config['check_overflow'] to False to get the wrapped value instead
'''

from fastfib_matrix import make_base_matrix, mat22power

INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1
INT64_FIB_MAX_N = 92

fib_config = {
    'check_overflow': True
}


class FibOverflowError(OverflowError):
    def __init__(self, n: int):
        super().__init__('fib(%d) overflows signed 64-bit integer, max n is %d' % (n, INT64_FIB_MAX_N))
        self.n = n


def to_int64(x: int):
    '''wrap to [INT64_MIN, INT64_MAX] as two's complement'''
    return ((x - INT64_MIN) % 2 ** 64) + INT64_MIN


def fast_fib(n: int) -> int:
    '''log(n) time fibonacci by matrix exponentiation, valid for 0 <= n <= 92'''
    if n < 0:
        raise ValueError('fibonacci index should be non-negative, now %d' % n)
    if n > INT64_FIB_MAX_N and fib_config['check_overflow']:
        raise FibOverflowError(n)
    if n == 0:
        return 0
    f = make_base_matrix()
    mat22power(f, n-1, to_int64)
    return f[0][0]


def slow_fib(n: int) -> int:
    '''exponential time fibonacci, only as reference and baseline'''
    if n <= 1:
        return n
    return to_int64(slow_fib(n-1) + slow_fib(n-2))


def test_wrap():
    assert to_int64(0) == 0
    assert to_int64(INT64_MAX) == INT64_MAX
    assert to_int64(INT64_MIN) == INT64_MIN
    assert to_int64(INT64_MAX + 1) == INT64_MIN
    assert to_int64(INT64_MIN - 1) == INT64_MAX
    assert to_int64(2 ** 64) == 0
    assert to_int64(-1) == -1


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
    test_one(50, 12586269025)
    test_one(90, 2880067194370816120)
    test_one(92, 7540113804746346429)


def test_against_slow():
    for n in range(31):
        assert fast_fib(n) == slow_fib(n)
    print('fast_fib agrees with slow_fib for n in [0, 30]')


def test_idempotent():
    first = [fast_fib(n) for n in range(93)]
    second = [fast_fib(n) for n in range(93)]
    assert first == second
    assert fast_fib(92) == fast_fib(92)


def test_overflow():
    try:
        fast_fib(93)
        assert False
    except FibOverflowError as err:
        assert err.n == 93
        print('fast_fib(93): %s' % err)
    try:
        fast_fib(-1)
        assert False
    except ValueError as err:
        assert str(err) == 'fibonacci index should be non-negative, now -1'
    # without the check the machine value comes back, wrapped around 2^64
    fib93 = 7540113804746346429 + 4660046610375530309
    fib_config['check_overflow'] = False
    try:
        wrapped = fast_fib(93)
    finally:
        fib_config['check_overflow'] = True
    print('fast_fib(93) unchecked = %d' % wrapped)
    assert wrapped != fib93
    assert wrapped == fib93 - 2 ** 64
    assert wrapped == -6246583658587674878


def test():
    test_wrap()
    test_known()
    test_against_slow()
    test_idempotent()
    test_overflow()


if __name__ == '__main__':
    test()
