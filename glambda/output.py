"""
What a command hands back to be shown, and how each kind gets shown.

There are exactly three shapes of result. `classify` decides which shape a
raw result has, trying them in a fixed order, and `render` has one rule per
shape. A Document wins over everything, then the explicit no-output signal,
and anything else falls through to plain `str`.
"""
from typing import Any, Optional, Sequence, Union, IO
from .diagnostics import Report, quiet

class Document:
	""" Pre-built lines of output, shown verbatim. """
	def __init__(self, lines:Sequence[str]=()):
		self.lines = list(lines)
	@classmethod
	def text(cls, text:str) -> "Document":
		return cls(text.split("\n"))
	def __add__(self, other:"Document") -> "Document":
		return Document(self.lines + other.lines)
	def __str__(self): return "\n".join(self.lines)
	def __repr__(self): return "<Document: %r>"%self.lines

def hang(head:str, indent:int, items:Sequence[str]) -> Document:
	return Document([head] + [" "*indent + item for item in items])

class Silence:
	""" The explicit signal that there is nothing to show. """
	def __repr__(self): return "<Silence>"

SILENCE = Silence()

class Printable:
	""" Anything else, shown by its ordinary string form. """
	def __init__(self, value:Any): self.value = value
	def __repr__(self): return "<Printable: %r>"%self.value

Shape = Union[Document, Silence, Printable]

def classify(result:Any) -> Shape:
	if isinstance(result, Document): return result
	if result is None or isinstance(result, Silence): return SILENCE
	if isinstance(result, Printable): return result
	return Printable(result)

def render(result:Any) -> Optional[str]:
	""" The text for a result, or None when nothing should be printed at all. """
	shape = classify(result)
	if isinstance(shape, Document): return str(shape)
	if isinstance(shape, Silence): return None
	if isinstance(shape, Printable): return str(shape.value)
	raise TypeError(shape)

def show(result:Any, dest:IO[str]):
	text = render(result)
	if text is not None:
		print(text, file=dest)

class Console:
	""" Where a session's output goes, and how loudly it traces. """
	def __init__(self, dest:IO[str], report:Report=quiet):
		self.dest = dest
		self.report = report
	def say(self, result:Any):
		show(result, self.dest)
