import pytest

from cryptolab.dh_params import DEFAULT_G, DEFAULT_P, DEFAULT_X, dh_public_value, main


def test_exponent_addition_law():
    a, b = 123456, 789012
    combined = dh_public_value(DEFAULT_G, a + b, DEFAULT_P)
    split = dh_public_value(DEFAULT_G, a, DEFAULT_P) * dh_public_value(DEFAULT_G, b, DEFAULT_P) % DEFAULT_P
    assert combined == split


def test_fermat_little_theorem_on_small_prime():
    p = 761
    for g in (2, 6, 11, 760):
        assert dh_public_value(g, p - 1, p) == 1


def test_result_lies_in_range():
    h = dh_public_value(DEFAULT_G, DEFAULT_X, DEFAULT_P)
    assert 0 <= h < DEFAULT_P


def test_zero_exponent_gives_one():
    assert dh_public_value(DEFAULT_G, 0, DEFAULT_P) == 1


@pytest.mark.parametrize("p", [0, -7])
def test_non_positive_modulus_raises(p):
    with pytest.raises(ValueError):
        dh_public_value(3, 5, p)


def test_main_prints_parameters(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == (
        "1. e7e94db309dc10540a75e38be90c32141ecb958802ae172e09de549156e028f443ea6f78"
        "8074e1fec332703352b376170006f6ef4f4a2fb1d0d943d0bed9"
    )
    assert lines[1] == (
        "2. 2f26760e85950864d1f24421f2ab599a2de6a4379b86ad5972ca348938b2b25ed6abf80d"
        "03e9bc7c9f54cfdc670b15ec33dda88cbffc53f725d779247813"
    )
    assert lines[2] == "3. 59810694624132513"
    assert lines[3] == f"4. {dh_public_value(DEFAULT_G, DEFAULT_X, DEFAULT_P)}"


def test_main_with_overrides(capsys):
    assert main(["--p", "2f9", "--g", "6", "--x", "5"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "1. 2f9"
    assert lines[2] == "3. 5"
    assert lines[3] == f"4. {dh_public_value(6, 5, 0x2F9)}"