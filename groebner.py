"""
Groebner basis primitives

The reduction steps a Buchberger-style completion repeatedly applies:
least common multiples of leading monomials, S-polynomials, and
multivariate division by a list of polynomials.
"""
from __future__ import annotations
import logging
from typing import List, Sequence, Tuple
from monomial import least_common_multiple, try_divide
from polynomial import Polynomial

logger = logging.getLogger(__name__)


def lcm_of_leading_monomials(p: Polynomial, q: Polynomial) -> Polynomial:
    lcm_m = least_common_multiple(p.leading_monomial(), q.leading_monomial())
    return Polynomial((lcm_m,), p.field, canonical=True)


def s_polynomial(p: Polynomial, q: Polynomial) -> Polynomial:
    """Combination of p and q in which their leading terms cancel.

    Any remaining leading monomial is strictly below the lcm of the two
    leading monomials.
    """
    if p.is_zero() or q.is_zero():
        raise ValueError("S-polynomial is undefined for the zero polynomial")
    lcm_p_q = lcm_of_leading_monomials(p, q)
    coef_p = lcm_p_q.try_divide(p.leading_term())
    coef_q = lcm_p_q.try_divide(q.leading_term())
    if coef_p is None or coef_q is None:
        # the lcm is a multiple of both leading terms by construction
        raise RuntimeError(
            f"leading term does not divide lcm {lcm_p_q}: {p.leading_term()}, {q.leading_term()}"
        )
    s = coef_p * p - coef_q * q
    logger.debug("S(%s, %s) = %s", p, q, s)
    return s


def divide(f: Polynomial, divisors: Sequence[Polynomial]) -> Tuple[List[Polynomial], Polynomial]:
    """Divide f by an ordered list of polynomials.

    Returns (quotients, remainder) with f == sum(q_i * g_i) + remainder, where
    no term of the remainder is divisible by the leading term of any g_i.
    """
    if any(g.is_zero() for g in divisors):
        raise ZeroDivisionError("division by the zero polynomial")
    quotients = [Polynomial.zero(f.field) for _ in divisors]
    r = Polynomial.zero(f.field)
    p = f
    steps = 0
    while not p.is_zero():
        lead = p.leading_monomial()
        for i, g in enumerate(divisors):
            q = try_divide(lead, g.leading_monomial())
            if q is not None:
                q_term = Polynomial((q,), f.field, canonical=True)
                quotients[i] = quotients[i] + q_term
                p = p - q_term * g
                break
        else:
            c = p.leading_term()
            r = r + c
            p = p - c
        steps += 1
    logger.debug("divided %s by %d polynomials in %d steps", f, len(divisors), steps)
    return quotients, r


def remainder(f: Polynomial, divisors: Sequence[Polynomial]) -> Polynomial:
    return divide(f, divisors)[1]
