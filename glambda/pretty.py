"""
Turn expressions, types, and values back into text.

The printer knows the precedence ladder the parser climbs,
so it adds parentheses only where reading the text back would otherwise
give a different tree.
"""
from typing import Union
from boozetools.support.foundation import Visitor
from . import syntax, algebra

# Precedence levels, loosest first.
OPEN, COMPARE, ADD, MULTIPLY, APPLY, ATOM = range(6)

_level_of_glyph = {
	"<":COMPARE, "<=":COMPARE, ">":COMPARE, ">=":COMPARE, "==":COMPARE,
	"+":ADD, "-":ADD,
	"*":MULTIPLY, "/":MULTIPLY, "%":MULTIPLY,
}

def _wrap(text:str, level:int, context:int) -> str:
	return "(%s)"%text if level < context else text

class Render(Visitor):

	def visit_Primitive(self, ty:algebra.Primitive, context=OPEN):
		return ty.name

	def visit_Arrow(self, ty:algebra.Arrow, context=OPEN):
		text = "%s -> %s"%(self.visit(ty.arg, ATOM), self.visit(ty.res, OPEN))
		return _wrap(text, OPEN, context)

	def visit_Var(self, expr:syntax.Var, context=OPEN):
		return expr.name

	def visit_IntLit(self, expr:syntax.IntLit, context=OPEN):
		# There is no unary minus: bare, `f -5` would read back as a subtraction.
		text = str(expr.value)
		return _wrap(text, ADD, context) if expr.value < 0 else text

	def visit_BoolLit(self, expr:syntax.BoolLit, context=OPEN):
		return "true" if expr.value else "false"

	def visit_Lam(self, expr:syntax.Lam, context=OPEN):
		text = "\\%s:%s. %s"%(expr.name, self.visit(expr.param_type), self.visit(expr.body, OPEN))
		return _wrap(text, OPEN, context)

	def visit_Cond(self, expr:syntax.Cond, context=OPEN):
		text = "if %s then %s else %s"%(
			self.visit(expr.if_part, OPEN),
			self.visit(expr.then_part, OPEN),
			self.visit(expr.else_part, OPEN),
		)
		return _wrap(text, OPEN, context)

	def visit_Fix(self, expr:syntax.Fix, context=OPEN):
		return _wrap("fix "+self.visit(expr.body, ATOM), APPLY, context)

	def visit_App(self, expr:syntax.App, context=OPEN):
		text = "%s %s"%(self.visit(expr.fn, APPLY), self.visit(expr.arg, ATOM))
		return _wrap(text, APPLY, context)

	def visit_BinOp(self, expr:syntax.BinOp, context=OPEN):
		level = _level_of_glyph[expr.glyph]
		# Comparisons do not chain, so both sides must bind tighter.
		left_context = level+1 if level == COMPARE else level
		text = "%s %s %s"%(self.visit(expr.lhs, left_context), expr.glyph, self.visit(expr.rhs, level+1))
		return _wrap(text, level, context)

_render = Render()

def render(thing:Union[syntax.Expr, algebra.GlamType]) -> str:
	return _render.visit(thing)

def with_type(expr:syntax.Expr, ty:algebra.GlamType) -> str:
	return "%s : %s"%(render(expr), render(ty))
