import pytest

from cryptolab.dlog import (
    DEFAULT_G,
    DEFAULT_P,
    brute_force_dlog,
    main,
    meet_in_the_middle_dlog,
)

SMALL_P = 1589946103
SMALL_G = 1154947122


@pytest.mark.parametrize("x", [0, 1, 2, 17, 999])
def test_brute_force_solves(x):
    h = pow(SMALL_G, x, SMALL_P)
    result = brute_force_dlog(SMALL_G, h, SMALL_P, 1000)
    assert pow(SMALL_G, result, SMALL_P) == h
    assert 0 <= result < 1000


def test_brute_force_returns_largest_solution():
    # 2 has order 3 modulo 7, so 2^1 = 2^4 = 2^7 = 2.
    assert brute_force_dlog(2, 2, 7, 8) == 7
    assert brute_force_dlog(2, 2, 7, 4) == 1


@pytest.mark.parametrize("x", [0, 5, 255, 256, 4095, 12345])
def test_mitm_solves_large_prime(x):
    h = pow(DEFAULT_G, x, DEFAULT_P)
    result = meet_in_the_middle_dlog(DEFAULT_G, h, DEFAULT_P, 128)
    assert pow(DEFAULT_G, result, DEFAULT_P) == h
    assert 0 <= result < 128 * 128


def test_mitm_agrees_with_brute_force_below_order():
    h = pow(DEFAULT_G, 777, DEFAULT_P)
    assert meet_in_the_middle_dlog(DEFAULT_G, h, DEFAULT_P, 40) == brute_force_dlog(
        DEFAULT_G, h, DEFAULT_P, 1000
    )


def test_no_solution_raises():
    # 3 is not a power of 2 modulo 7.
    with pytest.raises(ValueError):
        brute_force_dlog(2, 3, 7, 20)
    with pytest.raises(ValueError):
        meet_in_the_middle_dlog(2, 3, 7, 5)


def test_solution_out_of_range_raises():
    h = pow(DEFAULT_G, 5000, DEFAULT_P)
    with pytest.raises(ValueError):
        meet_in_the_middle_dlog(DEFAULT_G, h, DEFAULT_P, 10)
    with pytest.raises(ValueError):
        brute_force_dlog(DEFAULT_G, h, DEFAULT_P, 100)


def test_invalid_arguments():
    with pytest.raises(ValueError):
        brute_force_dlog(2, 1, 1, 10)
    with pytest.raises(ValueError):
        brute_force_dlog(2, 1, 7, 0)
    with pytest.raises(ValueError):
        meet_in_the_middle_dlog(2, 1, 7, 0)
    with pytest.raises(ValueError):
        meet_in_the_middle_dlog(6, 1, 9, 3)


def test_main_mitm_prints_result(capsys):
    h = pow(DEFAULT_G, 1000, DEFAULT_P)
    assert main(["--h", format(h, "x"), "--bound", "64"]) == 0
    out = capsys.readouterr().out
    assert "found using Meet-In-The-Middle attack [such that h = (g^x) mod p] = 1000" in out


def test_main_brute_prints_result(capsys):
    h = pow(DEFAULT_G, 42, DEFAULT_P)
    assert main(["--h", format(h, "x"), "--method", "brute", "--upper", "100"]) == 0
    out = capsys.readouterr().out
    assert "found using brute-force method [such that h = (g^x) mod p] = 42" in out


def test_main_reports_failure():
    with pytest.raises(SystemExit):
        main(["--p", "7", "--g", "2", "--h", "3", "--bound", "5"])