"""
Evaluating checked expressions with a straight-up substitution model of computation.
  --  Simple and working is better than stuck in the mud.  --

Checked expressions are closed, and call-by-value only ever substitutes closed
terms, so substitution never has to worry about capture.

There are two evaluators. The big-step one goes straight to the value.
The small-step one performs a single reduction, so a console can show its work.
"""
from typing import Iterator
from boozetools.support.foundation import Visitor
from . import syntax
from .diagnostics import EvalError

def _divide(a, b):
	if b == 0: raise EvalError("Division by zero")
	return a // b

def _modulo(a, b):
	if b == 0: raise EvalError("Division by zero")
	return a % b

OPS = {
	"+": lambda a, b: syntax.IntLit(a + b),
	"-": lambda a, b: syntax.IntLit(a - b),
	"*": lambda a, b: syntax.IntLit(a * b),
	"/": lambda a, b: syntax.IntLit(_divide(a, b)),
	"%": lambda a, b: syntax.IntLit(_modulo(a, b)),
	"<": lambda a, b: syntax.BoolLit(a < b),
	"<=": lambda a, b: syntax.BoolLit(a <= b),
	">": lambda a, b: syntax.BoolLit(a > b),
	">=": lambda a, b: syntax.BoolLit(a >= b),
	"==": lambda a, b: syntax.BoolLit(a == b),
}

class Substitution(Visitor):
	""" Replace free occurrences of a name. Lambdas binding the same name stop the search. """
	def __init__(self, name:str, replacement:syntax.Expr):
		self._name = name
		self._replacement = replacement

	def visit_Var(self, expr:syntax.Var):
		return self._replacement if expr.name == self._name else expr

	def visit_IntLit(self, expr:syntax.IntLit): return expr
	def visit_BoolLit(self, expr:syntax.BoolLit): return expr

	def visit_Lam(self, expr:syntax.Lam):
		if expr.name == self._name: return expr
		return syntax.Lam(expr.name, expr.param_type, self.visit(expr.body))

	def visit_App(self, expr:syntax.App):
		return syntax.App(self.visit(expr.fn), self.visit(expr.arg))

	def visit_BinOp(self, expr:syntax.BinOp):
		return syntax.BinOp(expr.glyph, self.visit(expr.lhs), self.visit(expr.rhs))

	def visit_Cond(self, expr:syntax.Cond):
		return syntax.Cond(self.visit(expr.if_part), self.visit(expr.then_part), self.visit(expr.else_part))

	def visit_Fix(self, expr:syntax.Fix):
		return syntax.Fix(self.visit(expr.body))

def substitute(body:syntax.Expr, name:str, replacement:syntax.Expr) -> syntax.Expr:
	return Substitution(name, replacement).visit(body)

def _unroll(fix:syntax.Fix) -> syntax.Expr:
	fn = fix.body
	assert isinstance(fn, syntax.Lam), fn
	return substitute(fn.body, fn.name, fix)

def _free_variable(expr:syntax.Var):
	# The checker closes every term, so this means a bug upstream.
	raise EvalError("Free variable %r in a checked expression"%expr.name)

class BigStep(Visitor):

	def visit_IntLit(self, expr): return expr
	def visit_BoolLit(self, expr): return expr
	def visit_Lam(self, expr): return expr
	def visit_Var(self, expr): _free_variable(expr)

	def visit_App(self, expr:syntax.App):
		fn = self.visit(expr.fn)
		arg = self.visit(expr.arg)
		assert isinstance(fn, syntax.Lam), fn
		return self.visit(substitute(fn.body, fn.name, arg))

	def visit_BinOp(self, expr:syntax.BinOp):
		lhs = self.visit(expr.lhs)
		rhs = self.visit(expr.rhs)
		return OPS[expr.glyph](lhs.value, rhs.value)

	def visit_Cond(self, expr:syntax.Cond):
		if_part = self.visit(expr.if_part)
		return self.visit(expr.then_part if if_part.value else expr.else_part)

	def visit_Fix(self, expr:syntax.Fix):
		fn = self.visit(expr.body)
		return self.visit(_unroll(syntax.Fix(fn)))

class SmallStep(Visitor):
	""" Exactly one call-by-value reduction, leftmost-innermost. Values stay put. """

	def visit_IntLit(self, expr): return expr
	def visit_BoolLit(self, expr): return expr
	def visit_Lam(self, expr): return expr
	def visit_Var(self, expr): _free_variable(expr)

	def visit_App(self, expr:syntax.App):
		if not expr.fn.is_value():
			return syntax.App(self.visit(expr.fn), expr.arg)
		if not expr.arg.is_value():
			return syntax.App(expr.fn, self.visit(expr.arg))
		return substitute(expr.fn.body, expr.fn.name, expr.arg)

	def visit_BinOp(self, expr:syntax.BinOp):
		if not expr.lhs.is_value():
			return syntax.BinOp(expr.glyph, self.visit(expr.lhs), expr.rhs)
		if not expr.rhs.is_value():
			return syntax.BinOp(expr.glyph, expr.lhs, self.visit(expr.rhs))
		return OPS[expr.glyph](expr.lhs.value, expr.rhs.value)

	def visit_Cond(self, expr:syntax.Cond):
		if not expr.if_part.is_value():
			return syntax.Cond(self.visit(expr.if_part), expr.then_part, expr.else_part)
		return expr.then_part if expr.if_part.value else expr.else_part

	def visit_Fix(self, expr:syntax.Fix):
		if not expr.body.is_value():
			return syntax.Fix(self.visit(expr.body))
		return _unroll(expr)

_big_step = BigStep()
_small_step = SmallStep()

def evaluate(expr:syntax.Expr) -> syntax.Expr:
	try: return _big_step.visit(expr)
	except RecursionError:
		raise EvalError("Evaluation went too deep to finish") from None

def step(expr:syntax.Expr) -> syntax.Expr:
	try: return _small_step.visit(expr)
	except RecursionError:
		raise EvalError("Evaluation went too deep to finish") from None

def reductions(expr:syntax.Expr) -> Iterator[syntax.Expr]:
	""" Each successive expression on the way to a value, not including the start. """
	while not expr.is_value():
		expr = step(expr)
		yield expr
