"""
The type checker.

Checking is also where global names get resolved. Each reference to a global
is replaced by the checked expression bound to it, so the tree that comes out
is closed and means the same thing no matter what gets defined later.
"""
from typing import Mapping
from boozetools.support.foundation import Visitor
from . import syntax
from .algebra import GlamType, Arrow, INT, BOOL
from .diagnostics import CheckError
from .environment import Environment
from .pretty import render

ARITHMETIC = frozenset(["+", "-", "*", "/", "%"])
RELATIONAL = frozenset(["<", "<=", ">", ">=", "=="])

Scope = Mapping[str, GlamType]

def check(expr:syntax.Expr, env:Environment) -> tuple[GlamType, syntax.Expr]:
	try: return TypeChecker(env).visit(expr, {})
	except RecursionError:
		raise CheckError("Expression is nested too deeply to check") from None

class TypeChecker(Visitor):
	"""
	Each visit returns a pair: the type, and the checked copy of the expression.
	The scope maps lambda-bound names to their declared types.
	Those shadow globals of the same name.
	"""
	def __init__(self, env:Environment):
		self._env = env

	def visit_Var(self, expr:syntax.Var, scope:Scope):
		if expr.name in scope:
			return scope[expr.name], expr
		binding = self._env.lookup(expr.name)
		if binding is None:
			raise CheckError("Unbound variable %r"%expr.name)
		return binding.type, binding.expr

	def visit_IntLit(self, expr:syntax.IntLit, scope:Scope):
		return INT, expr

	def visit_BoolLit(self, expr:syntax.BoolLit, scope:Scope):
		return BOOL, expr

	def visit_Lam(self, expr:syntax.Lam, scope:Scope):
		inner = dict(scope)
		inner[expr.name] = expr.param_type
		body_type, body = self.visit(expr.body, inner)
		return Arrow(expr.param_type, body_type), syntax.Lam(expr.name, expr.param_type, body)

	def visit_App(self, expr:syntax.App, scope:Scope):
		fn_type, fn = self.visit(expr.fn, scope)
		arg_type, arg = self.visit(expr.arg, scope)
		if not fn_type.is_arrow():
			raise CheckError("%s has type %s, which is not a function"%(render(fn), render(fn_type)))
		_expect(fn_type.arg, arg_type, arg)
		return fn_type.res, syntax.App(fn, arg)

	def visit_BinOp(self, expr:syntax.BinOp, scope:Scope):
		lhs_type, lhs = self.visit(expr.lhs, scope)
		rhs_type, rhs = self.visit(expr.rhs, scope)
		_expect(INT, lhs_type, lhs)
		_expect(INT, rhs_type, rhs)
		result = INT if expr.glyph in ARITHMETIC else BOOL
		return result, syntax.BinOp(expr.glyph, lhs, rhs)

	def visit_Cond(self, expr:syntax.Cond, scope:Scope):
		if_type, if_part = self.visit(expr.if_part, scope)
		_expect(BOOL, if_type, if_part)
		then_type, then_part = self.visit(expr.then_part, scope)
		else_type, else_part = self.visit(expr.else_part, scope)
		_expect(then_type, else_type, else_part)
		return then_type, syntax.Cond(if_part, then_part, else_part)

	def visit_Fix(self, expr:syntax.Fix, scope:Scope):
		body_type, body = self.visit(expr.body, scope)
		if not (body_type.is_arrow() and body_type.arg == body_type.res):
			raise CheckError("fix needs a function of type t -> t, but %s has type %s"%(render(body), render(body_type)))
		return body_type.res, syntax.Fix(body)

def _expect(need:GlamType, got:GlamType, culprit:syntax.Expr):
	if need != got:
		raise CheckError("Type mismatch: %s has type %s, but %s is expected"%(render(culprit), render(got), render(need)))
