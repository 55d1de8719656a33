"""
Everything that can go wrong in a turn, and the means to talk about it.

No error defined here is fatal: the session loop renders each one as text
and carries on with the environment it had before the turn began.
"""
import sys
from typing import Sequence
from boozetools.support.failureprone import illustration

class GlambdaError(Exception):
	""" Root of the family. str() gives the text the user should see. """
	pass

class UnknownCommand(GlambdaError):
	def __init__(self, name:str):
		super().__init__(name)
		self.name = name
	def __str__(self):
		return "Unknown command: %s"%self.name

class AmbiguousCommand(GlambdaError):
	def __init__(self, name:str, candidates:Sequence[str]):
		super().__init__(name, candidates)
		self.name = name
		self.candidates = tuple(candidates)
	def __str__(self):
		return "Ambiguous command: %s"%self.name

class PipelineError(GlambdaError):
	""" One stage of tokenize -> parse -> check -> evaluate refused to go on. """
	stage = "?"
	def __init__(self, message:str):
		super().__init__(message)
		self.message = message
	def __str__(self):
		return "%s error: %s"%(self.stage, self.message)

class LexError(PipelineError):
	stage = "Lex"

class ParseError(PipelineError):
	stage = "Parse"

class CheckError(PipelineError):
	stage = "Check"

class EvalError(PipelineError):
	stage = "Eval"

def point_at(text:str, column:int, width:int, caption:str) -> str:
	""" Headline-free picture of where in the line something went wrong. """
	return illustration(text, column, max(width, 1), prefix="  |", caption=caption)


class Report:
	""" Verbose tracing. It goes to stderr; what the user asked for goes to the console. """
	def __init__(self, *, verbose:int=0):
		self._verbose = verbose or 0   # Because None is incomparable.

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def stage(self, name:str, outcome):
		self.info("  [%s]"%name, outcome)

quiet = Report(verbose=0)
