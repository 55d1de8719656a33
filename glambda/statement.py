"""
Execute one line of glambda as a statement.

The stages run strictly in order: tokenize, parse, check, evaluate.
The first one to complain ends the turn, and the outcome is then a Diagnostic,
whose environment transform is the identity. Only a named definition that
makes it all the way through carries a transform that adds a binding.
"""
from typing import Callable, NamedTuple, Union
from . import syntax
from .check import check
from .diagnostics import PipelineError, Report, quiet
from .environment import Environment
from .evaluator import evaluate
from .front_end import tokenize, parse_statement
from .pretty import with_type

Transform = Callable[[Environment], Environment]

def identity(env:Environment) -> Environment:
	return env

class Rendered(NamedTuple):
	text: str
	transform: Transform = identity
	def apply(self, env:Environment) -> Environment:
		return self.transform(env)

class Diagnostic(NamedTuple):
	message: str
	@property
	def text(self): return self.message
	@property
	def transform(self): return identity
	def apply(self, env:Environment) -> Environment:
		return env

TurnOutcome = Union[Rendered, Diagnostic]

def execute(text:str, env:Environment, report:Report=quiet) -> TurnOutcome:
	try:
		tokens = tokenize(text)
		report.stage("lex", " ".join(map(str, tokens)))
		stmt = parse_statement(tokens)
		report.stage("parse", stmt)
		ty, expr = check(stmt.expr, env)
		report.stage("check", ty)
		if isinstance(stmt, syntax.NamedDefinition):
			return _define(stmt.name, ty, expr)
		else:
			value = evaluate(expr)
			report.stage("eval", value)
			return Rendered(with_type(value, ty))
	except PipelineError as ex:
		report.stage("failed", ex.stage)
		return Diagnostic(str(ex))

def _define(name, ty, expr) -> Rendered:
	def transform(env:Environment) -> Environment:
		return env.extend(name, ty, expr)
	return Rendered("%s = %s"%(name, with_type(expr, ty)), transform)
