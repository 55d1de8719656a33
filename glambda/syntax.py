"""
The set of parse-nodes.

The same node classes serve both before and after type-checking.
The checker returns a fresh tree in which every reference to a global name
has been replaced by that global's own checked expression,
so a checked tree is closed: it mentions no name it does not bind itself.
"""
from typing import NamedTuple
from .algebra import GlamType

class Expr:
	def is_value(self): return False

class Var(Expr):
	def __init__(self, name:str): self.name = name
	def __repr__(self): return "<var:%s>"%self.name

class Lam(Expr):
	def __init__(self, name:str, param_type:GlamType, body:Expr):
		self.name, self.param_type, self.body = name, param_type, body
	def is_value(self): return True
	def __repr__(self): return "<lam:%s:%r. %r>"%(self.name, self.param_type, self.body)

class App(Expr):
	def __init__(self, fn:Expr, arg:Expr):
		self.fn, self.arg = fn, arg
	def __repr__(self): return "<app:%r %r>"%(self.fn, self.arg)

class IntLit(Expr):
	def __init__(self, value:int): self.value = value
	def is_value(self): return True
	def __repr__(self): return "<int:%d>"%self.value

class BoolLit(Expr):
	def __init__(self, value:bool): self.value = value
	def is_value(self): return True
	def __repr__(self): return "<bool:%s>"%self.value

class BinOp(Expr):
	def __init__(self, glyph:str, lhs:Expr, rhs:Expr):
		self.glyph, self.lhs, self.rhs = glyph, lhs, rhs
	def __repr__(self): return "<%r %s %r>"%(self.lhs, self.glyph, self.rhs)

class Cond(Expr):
	def __init__(self, if_part:Expr, then_part:Expr, else_part:Expr):
		self.if_part, self.then_part, self.else_part = if_part, then_part, else_part
	def __repr__(self): return "<if %r then %r else %r>"%(self.if_part, self.then_part, self.else_part)

class Fix(Expr):
	def __init__(self, body:Expr): self.body = body
	def __repr__(self): return "<fix %r>"%self.body

class BareExpression(NamedTuple):
	expr: Expr

class NamedDefinition(NamedTuple):
	name: str
	expr: Expr
