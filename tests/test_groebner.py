"""Tests for S-polynomials, leading-monomial lcms and multivariate division."""

import pytest

from groebner import divide, lcm_of_leading_monomials, remainder, s_polynomial
from monomial import compare_exponents
from polynomial import Polynomial
from rational import Rational

X, Y, Z = 0, 1, 2
VARS = ["x", "y", "z"]


def var(index, power=1):
    return Polynomial.variable(index, power)


def const(num, den=1):
    return Polynomial.constant(Rational(num, den))


class TestLcmOfLeadingMonomials:
    def test_lcm(self):
        p = var(X, 2) * var(Y) + const(1)
        q = var(X) * var(Y, 3) + var(Y)
        lcm = lcm_of_leading_monomials(p, q)
        assert lcm.to_string(VARS) == "x^2y^3"

    def test_unit_coefficient(self):
        p = var(X) * const(4)
        q = var(Y) * const(-3)
        assert lcm_of_leading_monomials(p, q).leading_coefficient() == Rational(1)


class TestSPolynomial:
    def test_cancels_leading_terms(self):
        p = var(X, 2) * var(Y) + const(1)
        q = var(X) * var(Y, 3) + var(Y)
        s = s_polynomial(p, q)
        assert s == var(Y, 2) - var(X) * var(Y)
        assert s.to_string(VARS) == "-xy + y^2"

    def test_rational_coefficients(self):
        p = var(X, 2) * const(2) + var(Y)
        q = var(X) * var(Y) * const(3) - const(1)
        s = s_polynomial(p, q)
        assert s == var(Y, 2) * const(1, 2) + var(X) * const(1, 3)
        assert s.normalize().to_string(VARS) == "3y^2 + 2x"

    def test_leading_monomial_below_lcm(self):
        pairs = [
            (var(X, 2) * var(Y) + const(1), var(X) * var(Y, 3) + var(Y)),
            (var(X, 3) - var(X) * var(Y) * const(2), var(X, 2) * var(Y) - var(Y, 2) * const(2) + var(X)),
            (var(X) + var(Y) + var(Z), var(X) * var(Z) - var(Y, 2) + const(5)),
            (var(Z, 2) * const(3) - var(X), var(Y) * var(Z) - const(1, 2)),
        ]
        for p, q in pairs:
            s = s_polynomial(p, q)
            lcm = lcm_of_leading_monomials(p, q)
            if not s.is_zero():
                assert compare_exponents(s.leading_monomial().vars, lcm.leading_monomial().vars) < 0

    def test_identical_polynomials(self):
        p = var(X, 2) - var(Y) + const(3)
        assert s_polynomial(p, p).is_zero()

    def test_zero_input(self):
        with pytest.raises(ValueError):
            s_polynomial(Polynomial.zero(), var(X))
        with pytest.raises(ValueError):
            s_polynomial(var(X), Polynomial.zero())


class TestDivide:
    def test_division_identity(self):
        f = var(X, 2) * var(Y) + var(X) * var(Y, 2) + var(Y, 2)
        g1 = var(X) * var(Y) - const(1)
        g2 = var(Y, 2) - const(1)
        (q1, q2), r = divide(f, [g1, g2])
        assert q1 == var(X) + var(Y)
        assert q2 == const(1)
        assert r == var(X) + var(Y) + const(1)
        assert q1 * g1 + q2 * g2 + r == f

    def test_remainder_not_divisible(self):
        f = var(X, 3) * var(Z) - var(Y, 2) * const(2) + var(Z) * const(1, 3)
        gs = [var(X) * var(Z) - var(Y), var(Y, 2) + var(Z)]
        quotients, r = divide(f, gs)
        total = r
        for q, g in zip(quotients, gs):
            total = total + q * g
        assert total == f
        for term in r.terms:
            for g in gs:
                lead = g.leading_monomial()
                assert any(term.degree(v) < e for v, e in lead.vars)

    def test_remainder(self):
        g1 = var(X) * var(Y) - const(1)
        g2 = var(Z) + const(2)
        assert remainder(g1 * g2, [g1]).is_zero()
        assert remainder(var(Y), [g1]) == var(Y)

    def test_zero_dividend(self):
        quotients, r = divide(Polynomial.zero(), [var(X)])
        assert quotients == [Polynomial.zero()]
        assert r.is_zero()

    def test_zero_divisor(self):
        with pytest.raises(ZeroDivisionError):
            divide(var(X), [Polynomial.zero()])
