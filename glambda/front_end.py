"""
Scanner and parser for one line of glambda, generated from Glambda.md.

Scanning runs to completion before parsing begins.
That way a bad character anywhere on the line is reported as such,
even where the parse would have gone wrong sooner.
"""
import sys
from pathlib import Path
from typing import NamedTuple, Sequence, Union

from boozetools.macroparse.runtime import TypicalApplication, make_tables
from boozetools.scanning.engine import IterableScanner
from boozetools.parsing import shift_reduce
from boozetools.parsing.interface import END_OF_TOKENS
from . import syntax, algebra
from .diagnostics import LexError, ParseError, point_at

_tables = make_tables(Path(__file__).parent/"Glambda.md")
_parse_table = _tables['parser']
RESERVED = frozenset(t for t in _parse_table["terminals"] if t.isalpha()) - {"name", "integer"}

class Token(NamedTuple):
	kind: str
	text: str
	column: int

	def __str__(self):
		if self.kind in ("name", "integer"):
			return "%s(%s)"%(self.kind, self.text)
		return self.kind

Statement = Union[syntax.BareExpression, syntax.NamedDefinition]

def _emit(yy: IterableScanner, kind:str):
	yy.token(kind, Token(kind, yy.match(), yy.left))

class GlambdaParser(TypicalApplication):

	text = ""

	def bind_scan_actions(self, each_action):
		self.scan_bindings = super().bind_scan_actions(each_action)
		return self.scan_bindings

	def bind_parse_actions(self, each_constructor):
		self.combine = super().bind_parse_actions(each_constructor)
		return self.combine

	def tokenize(self, text:str) -> list[Token]:
		self.text = text
		return [token for kind, token in IterableScanner(text, self.dfa, self.scan_bindings)]

	def parse_tokens(self, tokens:Sequence[Token], language:str):
		pairs = ((token.kind, token) for token in tokens)
		return shift_reduce.parse(self.hfa, self.combine, pairs, language=language, on_error=self)

	def scan_ignore(self, yy: IterableScanner): pass

	@staticmethod
	def scan_punctuation(yy: IterableScanner): _emit(yy, sys.intern(yy.match()))

	@staticmethod
	def scan_lambda(yy: IterableScanner): _emit(yy, "\\")

	@staticmethod
	def scan_integer(yy: IterableScanner): _emit(yy, "integer")

	@staticmethod
	def scan_word(yy: IterableScanner):
		word = yy.match()
		_emit(yy, word if word in RESERVED else "name")

	def on_stuck(self, yy: IterableScanner):
		raise LexError("Unexpected character %r at column %d\n%s"%(
			yy.match(), yy.left+1, point_at(self.text, yy.left, 1, "here"),
		))

	@staticmethod
	def parse_definition(name:Token, expr): return syntax.NamedDefinition(name.text, expr)
	@staticmethod
	def parse_lambda(name:Token, param_type, body): return syntax.Lam(name.text, param_type, body)
	@staticmethod
	def parse_binary(lhs, op:Token, rhs): return syntax.BinOp(op.kind, lhs, rhs)
	@staticmethod
	def parse_variable(name:Token): return syntax.Var(name.text)
	@staticmethod
	def parse_integer(digits:Token): return syntax.IntLit(int(digits.text))
	@staticmethod
	def parse_true(): return syntax.BoolLit(True)
	@staticmethod
	def parse_false(): return syntax.BoolLit(False)
	@staticmethod
	def parse_int_type(): return algebra.INT
	@staticmethod
	def parse_bool_type(): return algebra.BOOL
	@staticmethod
	def parse_arrow(arg, res): return algebra.Arrow(arg, res)

	@staticmethod
	def default_parse(ctor, *args):
		return getattr(syntax, ctor)(*args)

	def unexpected_token(self, kind, semantic, pds):
		if kind == END_OF_TOKENS:
			raise ParseError("Unexpected end of input")
		raise ParseError("Unexpected %r at column %d"%(semantic.text, semantic.column+1))

	pass

glambda_parser = GlambdaParser(_tables)

def tokenize(text:str) -> list[Token]:
	return glambda_parser.tokenize(text)

def parse_statement(tokens:Sequence[Token]) -> Statement:
	return glambda_parser.parse_tokens(tokens, "statement")

def parse_expression(tokens:Sequence[Token]) -> syntax.Expr:
	return glambda_parser.parse_tokens(tokens, "expr")
