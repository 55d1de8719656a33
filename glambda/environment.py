"""
Simplest possible environment concept.

This is the canonical list-structured search: each environment is one binding
stacked atop the environment it extends. Nothing is ever changed in place,
so any number of environments may share a tail, and a turn that captured an
older one keeps seeing exactly what it saw.
"""
from typing import NamedTuple, Optional, Iterator
from .algebra import GlamType
from .syntax import Expr

class Binding(NamedTuple):
	name: str
	type: GlamType
	expr: Expr

class Environment:
	__slots__ = ("_binding", "_tail", "_size")

	def __init__(self, binding:Optional[Binding]=None, tail:Optional["Environment"]=None):
		assert (binding is None) == (tail is None)
		self._binding = binding
		self._tail = tail
		self._size = 0 if tail is None else len(tail) + 1

	def extend(self, name:str, type:GlamType, expr:Expr) -> "Environment":
		return Environment(Binding(name, type, expr), self)

	def lookup(self, name:str) -> Optional[Binding]:
		for binding in self:
			if binding.name == name:
				return binding
		return None

	def __iter__(self) -> Iterator[Binding]:
		env = self
		while env._binding is not None:
			yield env._binding
			env = env._tail

	def __len__(self): return self._size

	def __bool__(self): return self._size > 0

	def __repr__(self):
		return "<env: %s>"%", ".join(b.name for b in self)

EMPTY = Environment()

def extend(env:Environment, name:str, type:GlamType, expr:Expr) -> Environment:
	return env.extend(name, type, expr)
