"""
The types of glambda: two primitives and the arrow between them.

Types are immutable and compare structurally,
so the checker can simply ask whether two of them are equal.
"""

class GlamType:
	def is_arrow(self): return False

class Primitive(GlamType):
	def __init__(self, name:str): self.name = name
	def __repr__(self): return self.name
	def __eq__(self, other): return isinstance(other, Primitive) and other.name == self.name
	def __hash__(self): return hash(self.name)

INT = Primitive("Int")
BOOL = Primitive("Bool")
PRIMITIVES = {p.name: p for p in (INT, BOOL)}

class Arrow(GlamType):
	def __init__(self, arg:GlamType, res:GlamType):
		self.arg, self.res = arg, res
	def is_arrow(self): return True
	def __repr__(self): return "<%r -> %r>"%(self.arg, self.res)
	def __eq__(self, other):
		return isinstance(other, Arrow) and other.arg == self.arg and other.res == self.res
	def __hash__(self): return hash((self.arg, self.res))
