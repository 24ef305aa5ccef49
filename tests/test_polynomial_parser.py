"""Tests for building polynomial systems from text and structured terms."""

from fractions import Fraction

import pytest

from polynomial import Polynomial
from polynomial_parser import build_system, parse_polynomial, tokenize
from rational import Rational
from system import VariableDictionary


class TestTokenize:
    def test_implicit_multiplication(self):
        kinds = [t.kind for t in tokenize("2x(y+1)")]
        assert kinds == ["NUM", "*", "ID", "*", "(", "ID", "+", "NUM", ")"]

    def test_split_identifiers(self):
        assert [t.lex for t in tokenize("xy") if t.kind == "ID"] == ["x", "y"]
        assert [t.lex for t in tokenize("x1 y_2") if t.kind == "ID"] == ["x1", "y_2"]

    def test_unary_minus(self):
        assert [t.kind for t in tokenize("-x - -1")] == ["NEG", "ID", "-", "NEG", "NUM"]

    def test_exact_decimal(self):
        (tok,) = tokenize("0.125")
        assert tok.num == Rational(1, 8)

    def test_bad_character(self):
        with pytest.raises(ValueError):
            tokenize("x $ 1")


class TestBuildSystem:
    def test_scenario(self):
        system = build_system(["x^4 + 3x^2 + 5x^2z^3 + 4xy + z + 2"], variables=["x", "y", "z"])
        assert system.formatted() == ["5x^2z^3 + x^4 + 3x^2 + 4xy + z + 2"]
        g = system[0]
        assert [system.format(c) for c in g.coefficient_decomposition(0)] == ["1", "0", "5z^3 + 3", "4y", "z + 2"]
        assert system.format(g.evaluate(0, 2)) == "20z^3 + 8y + z + 30"

    def test_first_appearance_order(self):
        system = build_system(["y + x", "z - y"])
        assert system.var_dict.names == ("y", "x", "z")
        assert len(system) == 2

    def test_shared_dictionary(self):
        system = build_system(["a + b", "b*c"])
        assert system.var_dict.index("b") == 1
        assert system.format(system[1]) == "bc"

    def test_structured_terms(self):
        system = build_system([[(1, [("x", 2)]), (-3, [("x", 1), ("y", 1)]), (2, [])]])
        assert system.formatted() == ["x^2 - 3xy + 2"]

    def test_structured_fraction_and_repeat(self):
        system = build_system([[(Rational(1, 2), [("x", 1), ("x", 1)])]])
        assert system.formatted() == ["0.5x^2"]

    def test_structured_float_and_fraction_coefficients(self):
        system = build_system([[(0.5, [("x", 1)]), (Fraction(3, 4), [])], [(2.9, [])]])
        assert system.formatted() == ["0.5x + 0.75", "2.9"]
        assert system[0].leading_coefficient() == Rational(1, 2)
        assert system[1] == Polynomial.constant(Rational(Fraction(2.9)))

    def test_small_coefficients_render_positionally(self):
        system = build_system(["x/100000 + 1/3"])
        assert system.formatted() == ["0.00001x + 0.3333333333333333"]

    def test_mixed_sources(self):
        system = build_system(["x + 1", [(5, [("y", 3)])]])
        assert system.var_dict.names == ("x", "y")
        assert system.formatted() == ["x + 1", "5y^3"]

    def test_zero_polynomial(self):
        system = build_system(["x - x"])
        assert system[0].is_zero()
        assert system.formatted() == ["0"]


class TestParseExpressions:
    def setup_method(self):
        self.vars = VariableDictionary(["x", "y"])

    def fmt(self, expr):
        return parse_polynomial(expr, self.vars).to_string(self.vars)

    def test_precedence(self):
        assert self.fmt("-x^2") == "-x^2"
        assert self.fmt("2(x - y)") == "2x - 2y"
        assert self.fmt("(x + 1)^2") == "x^2 + 2x + 1"
        assert self.fmt("x - y - 1") == "x - y - 1"
        assert self.fmt("2^3^2") == "512"

    def test_fractions(self):
        assert self.fmt("x/2 + 0.25") == "0.5x + 0.25"
        assert self.fmt("x^2/4") == "0.25x^2"
        assert parse_polynomial("1/3", self.vars) == Polynomial.constant(Rational(1, 3))

    def test_unknown_variable(self):
        with pytest.raises(KeyError):
            parse_polynomial("z + 1", self.vars)

    @pytest.mark.parametrize("expr", ["x / y", "x^y", "x^-1", "(x + 1", "x + 1)", "x +", "x / 0", ""])
    def test_invalid(self, expr):
        with pytest.raises(ValueError):
            parse_polynomial(expr, self.vars)
