from itertools import product

import pytest

from cryptofound.sumcheck import (
    MultiVarPolynomial,
    SumCheck,
    SumCheckError,
    SumCheckProver,
    SumCheckVerifier,
    format_polynomial,
)

MODULUS = 101


def create_test_polynomial():
    # 3 x^2 y^2 z^2 + 2 x^2 y + 5 x^2 z^2 + 4 yz + 6x + 1
    coordinates = [
        [0, 0, 0],
        [1, 0, 0],
        [0, 1, 1],
        [2, 0, 2],
        [2, 1, 0],
        [2, 2, 2],
    ]
    coefficients = [1, 6, 4, 5, 2, 3]
    return MultiVarPolynomial.from_coordinates(coordinates, coefficients, MODULUS)


def test_sumcheck_protocol():
    sumcheck = SumCheck(create_test_polynomial(), False)
    sumcheck.run_interactive_protocol()
    assert sumcheck.verifier.result == 57
    assert sumcheck.verifier.current_round == 3
    assert len(sumcheck.verifier.challenges_sent) == 3


def test_sumcheck_protocol_incorrect():
    sumcheck = SumCheck(create_test_polynomial(), False)
    sumcheck.verifier.claim = 58
    sumcheck.verifier.result = 58
    with pytest.raises(SumCheckError):
        sumcheck.run_interactive_protocol()


def test_verbose_run_prints(capsys):
    sumcheck = SumCheck(create_test_polynomial(), True)
    sumcheck.run_interactive_protocol()
    out = capsys.readouterr().out
    assert "Starting Sum-Check Protocol" in out
    assert "Protocol completed successfully" in out


def test_from_coordinates_degree():
    poly = create_test_polynomial()
    assert poly.degree == [2, 2, 2]
    assert poly.num_var() == 3
    assert len(poly.coefficients) == 27


def test_evaluation_values():
    poly = create_test_polynomial()
    assert poly.evaluation([0, 0, 0]) == 1
    assert poly.evaluation([1, 1, 1]) == 21


def test_hypercube_sum_matches_evaluations():
    poly = create_test_polynomial()
    total = sum(poly.evaluation(list(x)) for x in product((0, 1), repeat=3)) % MODULUS
    assert poly.sum_over_bool_hypercube() == total == 57


def test_wrong_coefficient_count_rejected():
    with pytest.raises(ValueError):
        MultiVarPolynomial([1, 1], [1, 2, 3], MODULUS)


def test_evaluation_wrong_arity():
    with pytest.raises(ValueError):
        create_test_polynomial().evaluation([1, 2])


def test_add_and_scale():
    a = MultiVarPolynomial([1], [1, 2], MODULUS)
    b = MultiVarPolynomial([2], [3, 4, 5], MODULUS)
    assert (a + b).coefficients == [4, 6, 5]
    assert (a * 3).coefficients == [3, 6]
    assert (a * 101).coefficients == [0, 0]


def test_reduce_preserves_claim():
    prover = SumCheckProver(create_test_polynomial())
    h = prover.send_poly()
    assert (h[0] + sum(h)) % MODULUS == 57
    r = 7
    expected = sum(c * pow(r, i, MODULUS) for i, c in enumerate(h)) % MODULUS
    prover.reduce_poly(r)
    assert prover.multi_var_poly.num_var() == 2
    assert prover.sum_poly() == expected
    assert prover.current_round == 1


def test_reduce_last_variable():
    prover = SumCheckProver(MultiVarPolynomial([1], [2, 3], MODULUS))
    prover.reduce_poly(4)
    assert prover.multi_var_poly.coefficients == [14]
    assert prover.multi_var_poly.degree == [0]


def test_verifier_rejects_wrong_size():
    verifier = SumCheckVerifier(57, [2, 2, 2], MODULUS)
    with pytest.raises(SumCheckError):
        verifier.verify_internal_rounds([1, 2])


def test_verifier_rejects_wrong_sum():
    verifier = SumCheckVerifier(5, [1], MODULUS)
    with pytest.raises(SumCheckError):
        verifier.verify_internal_rounds([1, 1])


def test_final_result_oracle_failure():
    verifier = SumCheckVerifier(0, [1], MODULUS)
    with pytest.raises(SumCheckError):
        verifier.verify_final_result(lambda r, claim: False)


def test_format_polynomial():
    assert format_polynomial([0, 0]) == "0"
    assert format_polynomial([1, 0, 3]) == "1 + 3 X^2"
    assert format_polynomial([0, 2, 5]) == "2 X + 5 X^2"