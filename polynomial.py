from __future__ import annotations
from math import gcd, lcm
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Type, Union
from field import Field
from monomial import Exponents, Monomial, compare_exponents, order_key, try_divide
from rational import Rational


class Polynomial:
    """Sparse multivariate polynomial over a coefficient field.

    Terms are kept sorted ascending under the graded reverse lexicographic
    order, so the leading term is the last one. No two terms share an exponent
    vector and no term has a zero coefficient; the empty sequence is zero.
    """

    __slots__ = ("terms", "field")

    def __init__(
        self,
        terms: Iterable[Monomial] = (),
        field: Type[Field] = Rational,
        canonical: bool = False,
    ) -> None:
        self.field = field
        self.terms: Tuple[Monomial, ...] = (
            tuple(terms) if canonical else self._collect(terms)
        )

    @staticmethod
    def _collect(terms: Iterable[Monomial]) -> Tuple[Monomial, ...]:
        # combine like terms
        acc: Dict[Exponents, Field] = {}
        for m in terms:
            if m.vars in acc:
                acc[m.vars] = acc[m.vars] + m.coeff
            else:
                acc[m.vars] = m.coeff
        new_terms = [Monomial(c, vm) for vm, c in acc.items() if not c.is_zero()]
        new_terms.sort(key=order_key)
        return tuple(new_terms)

    @staticmethod
    def zero(field: Type[Field] = Rational) -> "Polynomial":
        return Polynomial((), field, canonical=True)

    @staticmethod
    def constant(value: Union[Field, int], field: Optional[Type[Field]] = None) -> "Polynomial":
        if field is None:
            field = Rational if isinstance(value, int) else type(value)
        if isinstance(value, int):
            value = field.from_int(value)
        if value.is_zero():
            return Polynomial.zero(field)
        return Polynomial((Monomial(value, ()),), field, canonical=True)

    @staticmethod
    def variable(index: int, power: int = 1, field: Type[Field] = Rational) -> "Polynomial":
        if power == 0:
            return Polynomial((Monomial(field.one(), ()),), field, canonical=True)
        return Polynomial((Monomial(field.one(), ((index, power),)),), field, canonical=True)

    def _like(self, terms: Iterable[Monomial], canonical: bool = True) -> "Polynomial":
        return Polynomial(terms, self.field, canonical)

    def is_zero(self) -> bool:
        return len(self.terms) == 0

    def is_constant(self) -> bool:
        return all(m.is_constant() for m in self.terms)

    def constant_value(self) -> Optional[int]:
        """Integer value of a constant polynomial, None if it has variables or a fractional value."""
        if self.is_zero():
            return 0
        if len(self.terms) == 1 and self.terms[0].is_constant():
            return self.terms[0].coeff.try_int()
        return None

    def degree(self, var: int) -> int:
        return max((m.degree(var) for m in self.terms), default=0)

    def total_degree(self) -> int:
        return max((m.total_degree() for m in self.terms), default=0)

    def leading_monomial(self) -> Monomial:
        if not self.terms:
            return Monomial(self.field.zero(), ())
        return self.terms[-1]

    def leading_term(self) -> "Polynomial":
        return self._like(self.terms[-1:])

    def leading_coefficient(self) -> Field:
        return self.leading_monomial().coeff

    # arithmetic

    def _merge(self, rhs: "Polynomial", negate: bool) -> "Polynomial":
        a, b = self.terms, rhs.terms
        out: List[Monomial] = []
        i = j = 0
        while i < len(a) and j < len(b):
            c = compare_exponents(a[i].vars, b[j].vars)
            if c < 0:
                out.append(a[i])
                i += 1
            elif c > 0:
                out.append(-b[j] if negate else b[j])
                j += 1
            else:
                s = a[i].coeff - b[j].coeff if negate else a[i].coeff + b[j].coeff
                if not s.is_zero():
                    out.append(Monomial(s, a[i].vars))
                i += 1
                j += 1
        out.extend(a[i:])
        out.extend(-m if negate else m for m in b[j:])
        return self._like(out)

    def __add__(self, rhs: "Polynomial") -> "Polynomial":
        if not isinstance(rhs, Polynomial):
            return NotImplemented
        return self._merge(rhs, negate=False)

    def __sub__(self, rhs: "Polynomial") -> "Polynomial":
        if not isinstance(rhs, Polynomial):
            return NotImplemented
        return self._merge(rhs, negate=True)

    def __neg__(self) -> "Polynomial":
        return self._like(-m for m in self.terms)

    def __mul__(self, rhs: Union["Polynomial", Field, int]) -> "Polynomial":
        if isinstance(rhs, Polynomial):
            result = self._like(())
            for a in self.terms:
                row = self._like((a.mul_m(b) for b in rhs.terms), canonical=False)
                result = result + row
            return result
        if isinstance(rhs, int) or isinstance(rhs, self.field):
            return self.scalar_mul(rhs)
        return NotImplemented

    def __rmul__(self, lhs: Union[Field, int]) -> "Polynomial":
        if isinstance(lhs, int) or isinstance(lhs, self.field):
            return self.scalar_mul(lhs)
        return NotImplemented

    def scalar_mul(self, r: Union[Field, int]) -> "Polynomial":
        return self._like((m.mul_r(r) for m in self.terms), canonical=False)

    def __truediv__(self, rhs: Union[Field, int]) -> "Polynomial":
        if isinstance(rhs, int):
            rhs = self.field.from_int(rhs)
        if not isinstance(rhs, self.field):
            return NotImplemented
        if rhs.is_zero():
            raise ZeroDivisionError("polynomial division by zero scalar")
        return self._like((Monomial(m.coeff / rhs, m.vars) for m in self.terms), canonical=False)

    def pow(self, exp: int) -> "Polynomial":
        if exp < 0:
            raise ValueError("negative exponent")
        res = Polynomial.constant(self.field.one())
        for _ in range(exp):
            res = res * self
        return res

    def __pow__(self, exp: int) -> "Polynomial":
        return self.pow(exp)

    def try_divide(self, divisor: "Polynomial") -> Optional["Polynomial"]:
        """Exact quotient self / divisor, or None if divisor does not divide self."""
        if divisor.is_zero():
            raise ZeroDivisionError("polynomial division by zero")
        lead = divisor.leading_monomial()
        quotient = self._like(())
        rest = self
        while not rest.is_zero():
            q = try_divide(rest.leading_monomial(), lead)
            if q is None:
                return None
            step = self._like((q,))
            quotient = quotient + step
            rest = rest - step * divisor
        return quotient

    # univariate views

    def coefficient_decomposition(self, var: int) -> List["Polynomial"]:
        """Coefficients of self seen as a polynomial in var, highest power first."""
        deg = self.degree(var)
        coefs = [self._like(()) for _ in range(deg + 1)]
        for term in reversed(self.terms):
            term_deg, rest = term.coefficient_decomposition(var)
            coefs[deg - term_deg] = coefs[deg - term_deg] + self._like((rest,))
        return coefs

    @staticmethod
    def from_univariate_form(coefficients: Sequence["Polynomial"], var: int) -> "Polynomial":
        if not coefficients:
            return Polynomial.zero()
        field = coefficients[0].field
        new = Polynomial.zero(field)
        deg = len(coefficients) - 1
        for i, coef in enumerate(coefficients):
            if i == deg:
                new = new + coef
            else:
                new = new + coef * Polynomial.variable(var, deg - i, field)
        return new

    def evaluate(self, var: int, value: Union[Field, int]) -> "Polynomial":
        """Substitute a field value for var (Horner scheme), leaving the other variables."""
        if isinstance(value, int):
            value = self.field.from_int(value)
        result = self._like(())
        for coef in self.coefficient_decomposition(var):
            result = result * value + coef
        return result

    def normalize(self) -> "Polynomial":
        """Integer-coefficient representative with content 1 and a positive leading coefficient."""
        if self.field is not Rational:
            raise TypeError("normalize requires rational coefficients")
        if self.is_zero():
            return self
        den = 1
        for m in self.terms:
            den = lcm(den, m.coeff.denominator())
        nums = [m.coeff.numerator() * (den // m.coeff.denominator()) for m in self.terms]
        content = 0
        for n in nums:
            content = gcd(content, n)
        if nums[-1] < 0:
            content = -content
        return self._like(
            (Monomial(Rational(n // content), m.vars) for n, m in zip(nums, self.terms)),
            canonical=False,
        )

    # comparison and display

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.field is other.field and self.terms == other.terms

    def __hash__(self) -> int:
        return hash(self.terms)

    def __bool__(self) -> bool:
        return bool(self.terms)

    def to_string(self, var_dict: Optional[Sequence[str]] = None) -> str:
        if len(self.terms) == 0:
            return "0"
        parts: List[str] = []
        for idx, m in enumerate(reversed(self.terms)):
            s = m.to_string(var_dict)
            if s.startswith("-"):
                body = s[1:]
                if idx == 0:
                    parts.append(f"-{body}")
                else:
                    parts.append(f" - {body}")
            else:
                if idx == 0:
                    parts.append(s)
                else:
                    parts.append(f" + {s}")
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Polynomial({self.to_string()!r})"
