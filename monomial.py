from __future__ import annotations
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Iterator, Optional, Sequence, Tuple
import numpy as np
from config import DEFAULT_VARIABLE_PREFIX
from field import Field
from rational import Rational

Exponents = Tuple[Tuple[int, int], ...]

def lockstep(a: Exponents, b: Exponents) -> Iterator[Tuple[int, int, int]]:
	"""Walk two exponent vectors together, yielding (var, exp_a, exp_b) in variable order."""
	i = j = 0
	while i < len(a) and j < len(b):
		va, ea = a[i]
		vb, eb = b[j]
		if va < vb:
			yield va, ea, 0
			i += 1
		elif vb < va:
			yield vb, 0, eb
			j += 1
		else:
			yield va, ea, eb
			i += 1
			j += 1
	for va, ea in a[i:]:
		yield va, ea, 0
	for vb, eb in b[j:]:
		yield vb, 0, eb

def compare_exponents(a: Exponents, b: Exponents) -> int:
	"""Graded reverse lexicographic order, variable 0 being the largest variable."""
	deg_a = sum(e for _, e in a)
	deg_b = sum(e for _, e in b)
	if deg_a != deg_b:
		return -1 if deg_a < deg_b else 1
	for _, ea, eb in reversed(tuple(lockstep(a, b))):
		if ea != eb:
			# more of the smallest variable means a smaller monomial
			return -1 if ea > eb else 1
	return 0

def format_value(value: float) -> str:
	# positional digits, never exponent notation; "2" rather than "2."
	return np.format_float_positional(value, trim="-")

@dataclass(frozen=True)
class Monomial:
	coeff: Field = field(default_factory=Rational.zero)
	vars: Exponents = ()

	def __post_init__(self) -> None:
		v = tuple((int(var), int(exp)) for var, exp in self.vars)
		for k, (var, exp) in enumerate(v):
			if exp <= 0:
				raise ValueError(f"non-positive exponent {exp} for variable {var}")
			if k > 0 and v[k-1][0] >= var:
				raise ValueError(f"variable indices must be strictly increasing: {v}")
		object.__setattr__(self, "vars", v)

	def total_degree(self) -> int:
		return sum(e for _, e in self.vars)
	def degree(self, var: int) -> int:
		for v, e in self.vars:
			if v == var:
				return e
		return 0
	def is_constant(self) -> bool:
		return len(self.vars) == 0
	def is_zero(self) -> bool:
		return self.coeff.is_zero()
	def coefficient_decomposition(self, var: int) -> Tuple[int, Monomial]:
		rest = tuple((v, e) for v, e in self.vars if v != var)
		return self.degree(var), Monomial(self.coeff, rest)
	def mul_r(self, r: Field) -> Monomial:
		return Monomial(self.coeff * r, self.vars)
	def mul_m(self, other: Monomial) -> Monomial:
		v = tuple((x, ei + ej) for x, ei, ej in lockstep(self.vars, other.vars))
		return Monomial(self.coeff * other.coeff, v)
	def __neg__(self) -> Monomial:
		return Monomial(-self.coeff, self.vars)
	def compare(self, other: Monomial) -> int:
		return compare_exponents(self.vars, other.vars)

	def to_string(self, var_dict: Optional[Sequence[str]] = None) -> str:
		value = self.coeff.to_float()
		if len(self.vars) == 0:
			return format_value(value)
		sign = "-" if value < 0 else ""
		magnitude = -value if sign else value
		coeff_part = "" if magnitude == 1 else format_value(magnitude)
		vars_part = ""
		for var, exp in self.vars:
			name = var_dict[var] if var_dict is not None else f"{DEFAULT_VARIABLE_PREFIX}{var}"
			vars_part += name if exp == 1 else f"{name}^{exp}"
		return f"{sign}{coeff_part}{vars_part}"
	def __str__(self) -> str:
		return self.to_string()

order_key = cmp_to_key(Monomial.compare)

def least_common_multiple(m1: Monomial, m2: Monomial) -> Monomial:
	one = type(m1.coeff).one()
	return Monomial(one, tuple((x, max(ei, ej)) for x, ei, ej in lockstep(m1.vars, m2.vars)))

def divides(divisor: Monomial, dividend: Monomial) -> bool:
	return all(ei <= ej for _, ei, ej in lockstep(divisor.vars, dividend.vars))

def try_divide(dividend: Monomial, divisor: Monomial) -> Optional[Monomial]:
	"""Quotient of two terms, or None when the divisor's exponents exceed the dividend's."""
	if not divides(divisor, dividend):
		return None
	v = tuple((x, ej - ei) for x, ej, ei in lockstep(dividend.vars, divisor.vars) if ej != ei)
	return Monomial(dividend.coeff / divisor.coeff, v)
