from __future__ import annotations
import logging
import re
from fractions import Fraction
from typing import Iterable, List, Sequence, Tuple, Union
from rational import Rational
from polynomial import Polynomial
from system import System, VariableDictionary

logger = logging.getLogger(__name__)

# (coefficient, [(variable name, power), ...]) for one term of a structured polynomial
RawTerm = Tuple[Union[int, float, Fraction, Rational], Sequence[Tuple[str, int]]]
Source = Union[str, Sequence[RawTerm]]

# Lexer + shunting-yard for polynomial text
class Tok:
	def __init__(self, kind: str, lex: str = "", num: Rational | None = None):
		self.kind, self.lex, self.num = kind, lex, num
	def __repr__(self) -> str:
		return f"Tok({self.kind!r}, {self.lex!r})"

_TOKEN_RE = re.compile(
	r"\s*(?:"
	r"(?P<dec>\d+\.\d*|\.\d+)"
	r"|(?P<int>\d+)"
	r"|(?P<id>[A-Za-z_][A-Za-z0-9_]*)"
	r"|(?P<op>[-+*/^()])"
	r")"
)

def _decimal(text: str) -> Rational:
	whole, _, digits = text.partition(".")
	return Rational(int((whole or "0") + digits), 10 ** len(digits))

def tokenize(expr: str) -> List[Tok]:
	toks: List[Tok] = []
	def operand(t: Tok) -> None:
		# implicit multiplication, e.g. "2x", "x y", ")(" or "3(x+1)"
		if toks and toks[-1].kind in ('ID','NUM',')'):
			toks.append(Tok('*', '*'))
		toks.append(t)
	pos, n = 0, len(expr)
	while pos < n:
		if expr[pos:].strip() == "":
			break
		m = _TOKEN_RE.match(expr, pos)
		if m is None or m.end() == pos:
			raise ValueError(f"Unexpected char {expr[pos:].lstrip()[0]!r}")
		pos = m.end()
		if m.group('dec'):
			operand(Tok('NUM', m.group('dec'), _decimal(m.group('dec'))))
		elif m.group('int'):
			operand(Tok('NUM', m.group('int'), Rational(int(m.group('int')))))
		elif m.group('id'):
			name = m.group('id')
			# "xy" is x*y; names carrying digits or underscores stay whole
			if name.isalpha():
				for ch in name:
					operand(Tok('ID', ch))
			else:
				operand(Tok('ID', name))
		else:
			k = m.group('op')
			if k == '-' and (not toks or toks[-1].kind in ('+','-','*','/','^','(','NEG')):
				k = 'NEG'
			if k == '(':
				operand(Tok('(', '('))
			else:
				toks.append(Tok(k, k))
	return toks

prec = {'NEG':3,'^':4,'*':2,'/':2,'+':1,'-':1}
right_assoc = {'NEG', '^'}

def to_rpn(toks: List[Tok]) -> List[Tok]:
	out: List[Tok] = []
	op: List[Tok] = []
	for t in toks:
		if t.kind in ('NUM','ID'):
			out.append(t)
		elif t.kind == 'NEG':
			# prefix operator, nothing on its left to reduce
			op.append(t)
		elif t.kind in prec:
			while op and op[-1].kind != '(':
				top = prec[op[-1].kind]
				if top > prec[t.kind] or (top == prec[t.kind] and t.kind not in right_assoc):
					out.append(op.pop())
				else:
					break
			op.append(t)
		elif t.kind == '(':
			op.append(t)
		elif t.kind == ')':
			while op and op[-1].kind != '(':
				out.append(op.pop())
			if not op:
				raise ValueError("Mismatched parens")
			op.pop()
		else:
			raise ValueError(f"Unknown token kind {t.kind}")
	while op:
		if op[-1].kind == '(':
			raise ValueError("Mismatched parens")
		out.append(op.pop())
	return out

def eval_rpn(rpn: List[Tok], var_dict: VariableDictionary) -> Polynomial:
	stack: List[Polynomial] = []
	for t in rpn:
		if t.kind == 'NUM':
			stack.append(Polynomial.constant(t.num))
		elif t.kind == 'ID':
			stack.append(Polynomial.variable(var_dict.index(t.lex)))
		elif t.kind == 'NEG':
			if not stack:
				raise ValueError("neg missing operand")
			stack.append(-stack.pop())
		else:
			if len(stack) < 2:
				raise ValueError(f"'{t.kind}' missing operands")
			b = stack.pop(); a = stack.pop()
			if t.kind == '+': stack.append(a + b)
			elif t.kind == '-': stack.append(a - b)
			elif t.kind == '*': stack.append(a * b)
			elif t.kind == '/':
				if not b.is_constant():
					raise ValueError("Division by non-constant not supported in polynomial parser")
				if b.is_zero():
					raise ValueError("Division by zero in polynomial expression")
				stack.append(a / b.leading_coefficient())
			elif t.kind == '^':
				exp = b.constant_value()
				if not b.is_constant() or exp is None or exp < 0:
					raise ValueError("Exponent must be non-negative integer")
				stack.append(a.pow(exp))
			else:
				raise ValueError(f"Unknown RPN token {t.kind}")
	if len(stack) != 1:
		raise ValueError("Invalid expression")
	return stack[-1]

def parse_polynomial(expr: str, var_dict: VariableDictionary) -> Polynomial:
	return eval_rpn(to_rpn(tokenize(expr)), var_dict)

def _from_terms(terms: Sequence[RawTerm], var_dict: VariableDictionary) -> Polynomial:
	acc = Polynomial.zero()
	for coef, powers in terms:
		term = Polynomial.constant(coef if isinstance(coef, Rational) else Rational(coef))
		for name, power in powers:
			if power < 0:
				raise ValueError(f"negative power {power} for '{name}'")
			term = term * Polynomial.variable(var_dict.index(name), power)
		acc = acc + term
	return acc

def _names(source: Source) -> List[str]:
	if isinstance(source, str):
		return [t.lex for t in tokenize(source) if t.kind == 'ID']
	return [name for _, powers in source for name, _ in powers]

def build_system(sources: Iterable[Source], variables: Iterable[str] = ()) -> System:
	"""Build polynomials sharing one variable dictionary.

	Each source is polynomial text or a list of (coefficient, [(name, power), ...])
	terms. Names are numbered in order of first appearance, after `variables`.
	"""
	sources = list(sources)
	names: List[str] = []
	for name in list(variables) + [n for s in sources for n in _names(s)]:
		if name not in names:
			names.append(name)
	var_dict = VariableDictionary(names)
	members = [
		parse_polynomial(s, var_dict) if isinstance(s, str) else _from_terms(s, var_dict)
		for s in sources
	]
	logger.debug("built system of %d polynomials over %s", len(members), var_dict.names)
	return System(var_dict, members)
