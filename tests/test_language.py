"""
The language underneath the console: scanning, parsing, checking, evaluating, and printing.
"""
import unittest

from glambda import syntax
from glambda.algebra import INT, BOOL, Arrow
from glambda.check import check
from glambda.diagnostics import LexError, ParseError, CheckError, EvalError
from glambda.environment import EMPTY
from glambda.evaluator import evaluate, step, reductions
from glambda.front_end import tokenize, parse_expression, parse_statement
from glambda.pretty import render, with_type

FACTORIAL = r"fix (\f:Int -> Int. \n:Int. if n == 0 then 1 else n * f (n - 1))"

def _parse(text):
	return parse_expression(tokenize(text))

def _checked(text, env=EMPTY):
	return check(_parse(text), env)

def _run(text, env=EMPTY):
	ty, expr = _checked(text, env)
	return with_type(evaluate(expr), ty)

def _kinds(text):
	return [t.kind for t in tokenize(text)]

class LexerTests(unittest.TestCase):

	def test_punctuation_and_names(self):
		self.assertEqual(
			["\\", "name", ":", "Int", "->", "Bool", ".", "name", "<=", "integer"],
			_kinds(r"\x:Int -> Bool. x <= 10  # and a comment"),
		)

	def test_unicode_lambda(self):
		self.assertEqual(["\\", "name", ":", "Int", ".", "name"], _kinds("λx:Int. x"))

	def test_keywords(self):
		self.assertEqual(["if", "true", "then", "integer", "else", "fix", "name"], _kinds("if true then 1 else fix g"))

	def test_type_names_are_reserved(self):
		self.assertEqual(["Int", "Bool", "name", "name"], _kinds("Int Bool Integer bool"))

	def test_equals_versus_equality(self):
		self.assertEqual(["name", "=", "name", "==", "integer"], _kinds("x = y == 3"))

	def test_columns(self):
		self.assertEqual([0, 2, 4], [t.column for t in tokenize("a + b")])

	def test_bad_character(self):
		with self.assertRaises(LexError) as cm:
			tokenize("1 $ 2")
		self.assertIn("'$' at column 3", cm.exception.message)
		self.assertEqual("Lex", cm.exception.stage)

	def test_blank_is_no_tokens(self):
		self.assertEqual([], tokenize("   "))

class ParserTests(unittest.TestCase):

	def test_named_definition(self):
		stmt = parse_statement(tokenize(r"id = \x:Bool. x"))
		self.assertIsInstance(stmt, syntax.NamedDefinition)
		self.assertEqual("id", stmt.name)
		self.assertIsInstance(stmt.expr, syntax.Lam)
		self.assertEqual(BOOL, stmt.expr.param_type)

	def test_bare_expression(self):
		stmt = parse_statement(tokenize("x == 3"))
		self.assertIsInstance(stmt, syntax.BareExpression)
		self.assertIsInstance(stmt.expr, syntax.BinOp)

	def test_arrow_types_associate_right(self):
		lam = _parse(r"\f:Int -> Int -> Bool. f")
		self.assertEqual(Arrow(INT, Arrow(INT, BOOL)), lam.param_type)
		lam = _parse(r"\f:(Int -> Int) -> Bool. f")
		self.assertEqual(Arrow(Arrow(INT, INT), BOOL), lam.param_type)

	def test_application_binds_tighter_than_arithmetic(self):
		expr = _parse("f 1 + g 2")
		self.assertIsInstance(expr, syntax.BinOp)
		self.assertIsInstance(expr.lhs, syntax.App)
		self.assertIsInstance(expr.rhs, syntax.App)

	def test_fix_takes_one_atom(self):
		expr = _parse("fix f 3")
		self.assertIsInstance(expr, syntax.App)
		self.assertIsInstance(expr.fn, syntax.Fix)

	def test_bogons(self):
		for bogon in [
			"",
			"(1 + 2",
			"1 +",
			r"\x:Foo. x",
			r"\x Int. x",
			"1 < 2 < 3",
			"if true then 1",
			"x = ",
			")",
		]:
			with self.subTest(bogon):
				with self.assertRaises(ParseError):
					parse_statement(tokenize(bogon))

	def test_empty_input_message(self):
		with self.assertRaises(ParseError) as cm:
			parse_statement([])
		self.assertEqual("Parse error: Unexpected end of input", str(cm.exception))

	def test_message_names_the_token_and_column(self):
		with self.assertRaises(ParseError) as cm:
			parse_statement(tokenize("(1 + 2))"))
		self.assertEqual("Parse error: Unexpected ')' at column 8", str(cm.exception))

	def test_deep_parentheses(self):
		expr = _parse("("*3000 + "1" + ")"*3000)
		self.assertIsInstance(expr, syntax.IntLit)
		self.assertEqual(1, expr.value)

class PrettyTests(unittest.TestCase):

	def test_round_trip(self):
		for text in [
			"1 + 2 * 3",
			"(1 + 2) * 3",
			"1 - 2 - 3",
			"1 - (2 - 3)",
			"1 < 2",
			"f x y",
			"f (g x)",
			r"\x:Int. x + 1",
			r"(\x:Int. x) 1 + 2",
			"if x then 1 else 2",
			"fix f 3",
			"f (fix g)",
			r"\f:(Int -> Int) -> Int. f",
			r"\f:Int -> Int -> Int. f",
		]:
			with self.subTest(text):
				self.assertEqual(text, render(_parse(text)))

	def test_negative_literals(self):
		minus_five = syntax.IntLit(-5)
		succ = syntax.Lam("x", INT, syntax.BinOp("+", syntax.Var("x"), syntax.IntLit(1)))
		self.assertEqual("-5", render(minus_five))
		self.assertEqual(r"(\x:Int. x + 1) (-5)", render(syntax.App(succ, minus_five)))
		self.assertEqual("1 - (-5)", render(syntax.BinOp("-", syntax.IntLit(1), minus_five)))
		self.assertEqual("-5 + 1", render(syntax.BinOp("+", minus_five, syntax.IntLit(1))))

	def test_types(self):
		self.assertEqual("Int -> Int -> Bool", render(Arrow(INT, Arrow(INT, BOOL))))
		self.assertEqual("(Int -> Int) -> Bool", render(Arrow(Arrow(INT, INT), BOOL)))

class CheckerTests(unittest.TestCase):

	def test_simple_types(self):
		self.assertEqual(INT, _checked("1 + 2")[0])
		self.assertEqual(BOOL, _checked("1 < 2")[0])
		self.assertEqual(Arrow(BOOL, BOOL), _checked(r"\x:Bool. x")[0])
		self.assertEqual(Arrow(INT, INT), _checked(FACTORIAL)[0])

	def test_ill_typed(self):
		for bogon in [
			"1 + true",
			"true 1",
			"nope",
			"if 1 then 2 else 3",
			"if true then 1 else false",
			r"(\x:Int. x) true",
			r"fix (\x:Int. true)",
			"fix 3",
		]:
			with self.subTest(bogon):
				with self.assertRaises(CheckError):
					_checked(bogon)

	def test_deep_nesting_is_a_check_error(self):
		with self.assertRaises(CheckError) as cm:
			_checked("(1 + "*2000 + "1" + ")"*2000)
		self.assertIn("nested too deeply", cm.exception.message)

	def test_globals_are_inlined(self):
		env = EMPTY.extend("one", INT, syntax.IntLit(1))
		ty, expr = _checked("one + one", env)
		self.assertEqual(INT, ty)
		self.assertEqual("1 + 1", render(expr))

	def test_lambda_shadows_global(self):
		env = EMPTY.extend("x", INT, syntax.IntLit(1))
		self.assertEqual(r"true : Bool", _run(r"(\x:Bool. x) true", env))
		ty, expr = _checked(r"\x:Bool. x", env)
		self.assertEqual(r"\x:Bool. x : Bool -> Bool", with_type(expr, ty))

class EvaluatorTests(unittest.TestCase):

	def test_arithmetic(self):
		self.assertEqual("7 : Int", _run("1 + 2 * 3"))
		self.assertEqual("3 : Int", _run("7 / 2"))
		self.assertEqual("-4 : Int", _run("(0 - 7) / 2"))
		self.assertEqual("1 : Int", _run("7 % 3"))
		self.assertEqual("true : Bool", _run("2 * 3 == 6"))

	def test_division_by_zero(self):
		for bogon in ["1 / 0", "7 % (2 - 2)"]:
			with self.subTest(bogon):
				with self.assertRaises(EvalError):
					_run(bogon)

	def test_application_and_conditional(self):
		self.assertEqual("42 : Int", _run(r"(\x:Int. x * 2) 21"))
		self.assertEqual("2 : Int", _run("if 1 > 2 then 1 else 2"))

	def test_functions_are_values(self):
		self.assertEqual(r"\y:Int. 3 + y : Int -> Int", _run(r"(\x:Int. \y:Int. x + y) 3"))

	def test_substitution_respects_shadowing(self):
		self.assertEqual("2 : Int", _run(r"(\x:Int. (\x:Int. x) 2) 1"))

	def test_fix(self):
		self.assertEqual("120 : Int", _run(FACTORIAL+" 5"))

	def test_runaway_recursion_is_reported(self):
		with self.assertRaises(EvalError):
			_run(r"fix (\f:Int -> Int. \n:Int. f n) 1")

	def test_single_step(self):
		ty, expr = _checked(r"(\x:Int. x + 1) 41")
		once = step(expr)
		self.assertEqual("41 + 1", render(once))
		self.assertEqual("42", render(step(once)))
		value = step(once)
		self.assertIs(value, step(value))

	def test_small_and_big_steps_agree(self):
		for text in [
			"1 + 2 * 3",
			FACTORIAL+" 4",
			r"(\f:Int -> Int. f (f 1)) (\n:Int. n * 3)",
			r"if (\b:Bool. b) false then 1 else 0",
		]:
			with self.subTest(text):
				ty, expr = _checked(text)
				*_, last = reductions(expr)
				self.assertEqual(render(evaluate(expr)), render(last))

	def test_values_have_no_reductions(self):
		self.assertEqual([], list(reductions(syntax.IntLit(3))))


if __name__ == '__main__':
	unittest.main()
