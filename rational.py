from __future__ import annotations
import logging
from fractions import Fraction
from math import gcd
from numbers import Rational as _Exact
from typing import Optional, Tuple
from config import INT64_MIN, INT64_MAX

logger = logging.getLogger(__name__)

Pair = Tuple[int, int]

def _fits(v: int) -> bool:
	return INT64_MIN <= v <= INT64_MAX

def _checked(v: int) -> Optional[int]:
	return v if _fits(v) else None

def _halve(num: int, den: int) -> Pair:
	# arithmetic shift; the denominator never reaches zero
	return num >> 1, max(den >> 1, 1)

def _reduce(num: int, den: int) -> Pair:
	if den < 0:
		num, den = -num, -den
	g = gcd(num, den)
	if g > 1:
		num, den = num // g, den // g
	while not (_fits(num) and _fits(den)):
		logger.debug("approximating %s/%s outside 64-bit range", num, den)
		num, den = _halve(num, den)
		g = gcd(num, den)
		num, den = num // g, den // g
	return num, den

class Rational:
	"""Overflow-safe fraction over 64-bit integers.

	Results that cannot be represented exactly are approximated by halving the
	larger operand and retrying, so arithmetic never raises on overflow.
	"""
	__slots__ = ("_num", "_den")
	def __init__(self, num: int | float | Fraction = 0, den: int | float | Fraction = 1) -> None:
		for v in (num, den):
			if not isinstance(v, (_Exact, float)):
				raise TypeError(f"cannot build a Rational from {type(v).__name__}")
		if den == 0:
			raise ZeroDivisionError("zero denominator")
		if isinstance(num, int) and isinstance(den, int):
			self._num, self._den = _reduce(num, den)
		else:
			# floats and fractions convert exactly before any 64-bit approximation
			f = Fraction(num) / Fraction(den)
			self._num, self._den = _reduce(f.numerator, f.denominator)

	@classmethod
	def _raw(cls, num: int, den: int) -> Rational:
		r = cls.__new__(cls)
		r._num, r._den = _reduce(num, den)
		return r

	@classmethod
	def zero(cls) -> Rational:
		return cls(0, 1)
	@classmethod
	def one(cls) -> Rational:
		return cls(1, 1)
	@classmethod
	def from_int(cls, value: int) -> Rational:
		return cls(value, 1)

	@staticmethod
	def _coerce(other: Rational | int) -> Rational:
		if isinstance(other, Rational):
			return other
		if isinstance(other, int):
			return Rational(other, 1)
		raise TypeError(f"unsupported operand type {type(other).__name__}")

	def _combine(self, other: Rational, sign: int) -> Rational:
		a_num, a_den = self._num, self._den
		b_num, b_den = other._num, other._den
		while True:
			den_gcd = gcd(a_den, b_den)
			lhs = _checked(b_den // den_gcd * a_num)
			if lhs is None:
				a_num, a_den = _halve(a_num, a_den)
				continue
			rhs = _checked(a_den // den_gcd * b_num)
			if rhs is None:
				b_num, b_den = _halve(b_num, b_den)
				continue
			num = _checked(lhs + rhs if sign > 0 else lhs - rhs)
			if num is None:
				if abs(a_num) >= abs(b_num):
					a_num, a_den = _halve(a_num, a_den)
				else:
					b_num, b_den = _halve(b_num, b_den)
				continue
			den = _checked(a_den // den_gcd * b_den)
			if den is None:
				if a_den >= b_den:
					a_num, a_den = _halve(a_num, a_den)
				else:
					b_num, b_den = _halve(b_num, b_den)
				continue
			return Rational._raw(num, den)

	def __add__(self, other: Rational | int) -> Rational:
		return self._combine(self._coerce(other), 1)
	def __radd__(self, other: int) -> Rational:
		return self._coerce(other)._combine(self, 1)
	def __sub__(self, other: Rational | int) -> Rational:
		return self._combine(self._coerce(other), -1)
	def __rsub__(self, other: int) -> Rational:
		return self._coerce(other)._combine(self, -1)

	def __mul__(self, other: Rational | int) -> Rational:
		other = self._coerce(other)
		a_num, a_den = self._num, self._den
		b_num, b_den = other._num, other._den
		while True:
			lhs_gcd = gcd(a_num, b_den)
			rhs_gcd = gcd(b_num, a_den)
			num = _checked((a_num // lhs_gcd) * (b_num // rhs_gcd))
			den = _checked((a_den // rhs_gcd) * (b_den // lhs_gcd))
			if num is not None and den is not None:
				return Rational._raw(num, den)
			if num is None:
				if abs(a_num) >= abs(b_num):
					a_num, a_den = _halve(a_num, a_den)
				else:
					b_num, b_den = _halve(b_num, b_den)
			elif a_den >= b_den:
				a_num, a_den = _halve(a_num, a_den)
			else:
				b_num, b_den = _halve(b_num, b_den)
	def __rmul__(self, other: int) -> Rational:
		return self.__mul__(other)

	def reciprocal(self) -> Rational:
		if self._num == 0:
			raise ZeroDivisionError("division by zero")
		return Rational._raw(self._den, self._num)
	def __truediv__(self, other: Rational | int) -> Rational:
		return self * self._coerce(other).reciprocal()
	def __rtruediv__(self, other: int) -> Rational:
		return self._coerce(other) * self.reciprocal()

	def __neg__(self) -> Rational:
		return Rational._raw(-self._num, self._den)
	def __pow__(self, exp: int) -> Rational:
		if exp < 0:
			return (self ** -exp).reciprocal()
		result = Rational.one()
		for _ in range(exp):
			result = result * self
		return result

	def _pair(self, other: object) -> Optional[Pair]:
		if isinstance(other, Rational):
			return other._num, other._den
		if isinstance(other, int):
			return other, 1
		return None
	def __eq__(self, other: object) -> bool:
		p = self._pair(other)
		if p is None:
			return NotImplemented
		return (self._num, self._den) == p
	def __hash__(self) -> int:
		# integral values hash like the int they equal
		if self._den == 1:
			return hash(self._num)
		return hash((self._num, self._den))
	def __lt__(self, other: Rational | int) -> bool:
		o = self._coerce(other)
		return self._num * o._den < o._num * self._den
	def __le__(self, other: Rational | int) -> bool:
		o = self._coerce(other)
		return self._num * o._den <= o._num * self._den
	def __gt__(self, other: Rational | int) -> bool:
		o = self._coerce(other)
		return self._num * o._den > o._num * self._den
	def __ge__(self, other: Rational | int) -> bool:
		o = self._coerce(other)
		return self._num * o._den >= o._num * self._den

	def is_zero(self) -> bool:
		return self._num == 0
	def is_one(self) -> bool:
		return self._num == 1 and self._den == 1
	def is_int(self) -> bool:
		return self._den == 1
	def try_int(self) -> Optional[int]:
		return self._num if self._den == 1 else None
	def to_int(self) -> int:
		if self._den != 1:
			raise ValueError(f"{self.to_string()} is not an integer")
		return self._num
	def to_float(self) -> float:
		return self._num / self._den
	def to_rational(self) -> Rational:
		return self
	def numerator(self) -> int:
		return self._num
	def denominator(self) -> int:
		return self._den
	def to_string(self) -> str:
		if self._den == 1:
			return str(self._num)
		return f"{self._num}/{self._den}"
	def __str__(self) -> str:
		return self.to_string()
	def __repr__(self) -> str:
		return f"Rational({self._num}, {self._den})"
