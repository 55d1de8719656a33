"""
The colon-commands of the console, and how a typed name finds one.

A command name may be abbreviated to any prefix that picks out exactly one
entry of the table. The table is fixed at import, so it is checked once,
right here, to make sure no entry's name is a prefix of another's.
Otherwise that shorter entry could never be chosen.

Every handler takes the console, the current environment, and the argument
text. It answers True to keep the session going. Handlers may read the
environment but have no way to change it.
"""
from typing import Callable, NamedTuple, Sequence, Any
from .check import check
from .diagnostics import PipelineError, UnknownCommand, AmbiguousCommand
from .environment import Environment
from .evaluator import evaluate, reductions
from .front_end import tokenize, parse_expression
from .output import Console, Document, SILENCE, hang
from .pretty import render, with_type

FAREWELL = "Good-bye."

Handler = Callable[[Console, Environment, str], bool]

class Command(NamedTuple):
	name: str
	handler: Handler

def split_command(line:str) -> tuple[str, str]:
	""" The name runs up to the first whitespace; everything after is the argument. """
	for index, ch in enumerate(line):
		if ch.isspace():
			return line[:index], line[index:].strip()
	return line, ""

def resolve(name:str, table:Sequence[Command]) -> Command:
	matches = [c for c in table if c.name.startswith(name)]
	if not matches:
		raise UnknownCommand(name)
	if len(matches) > 1:
		raise AmbiguousCommand(name, [c.name for c in matches])
	return matches[0]

def dispatch(console:Console, env:Environment, line:str, table:Sequence[Command]=None) -> bool:
	""" Run the command on this line (without its leading colon). Answer whether to keep going. """
	name, arg = split_command(line)
	try: command = resolve(name, COMMAND_TABLE if table is None else table)
	except UnknownCommand as ex:
		console.say(Document([str(ex)]))
		return True
	except AmbiguousCommand as ex:
		console.say(Document([str(ex)]) + hang("Possibilities:", 2, ex.candidates))
		return True
	console.report.info("  [command]", command.name, repr(arg))
	return command.handler(console, env, arg)

def quit_command(console:Console, env:Environment, arg:str) -> bool:
	console.say(Document([FAREWELL]))
	return False

def reporting(body:Callable[[Console, Environment, str], Any]) -> Handler:
	""" Show what the body returns, or the pipeline error it raised. Either way, carry on. """
	def handler(console:Console, env:Environment, arg:str) -> bool:
		try: result = body(console, env, arg)
		except PipelineError as ex:
			console.say(Document.text(str(ex)))
		else:
			console.say(result)
		return True
	handler.__name__ = body.__name__
	handler.__doc__ = body.__doc__
	return handler

def _checked(env:Environment, arg:str):
	return check(parse_expression(tokenize(arg)), env)

@reporting
def lex_command(console, env, arg):
	""" The tokens, in brackets. """
	return "[%s]"%", ".join(map(str, tokenize(arg)))

@reporting
def parse_command(console, env, arg):
	return render(parse_expression(tokenize(arg)))

@reporting
def eval_command(console, env, arg):
	ty, expr = _checked(env, arg)
	return Document([with_type(evaluate(expr), ty)])

@reporting
def step_command(console, env, arg):
	""" Show every reduction on the way to a value, then the value. """
	ty, expr = _checked(env, arg)
	console.say(Document([with_type(expr, ty)]))
	value = expr
	for value in reductions(expr):
		console.say(Document(["--> "+with_type(value, ty)]))
	return Document([with_type(value, ty)])

@reporting
def type_command(console, env, arg):
	ty, expr = _checked(env, arg)
	return Document([with_type(expr, ty)])

@reporting
def all_command(console, env, arg):
	console.say(Document(["Small step:"]))
	step_command(console, env, arg)
	console.say(Document([""]))
	console.say(Document(["Big step:"]))
	eval_command(console, env, arg)
	return SILENCE

COMMAND_TABLE = (
	Command("quit", quit_command),
	Command("lex", lex_command),
	Command("parse", parse_command),
	Command("eval", eval_command),
	Command("step", step_command),
	Command("type", type_command),
	Command("all", all_command),
)

def _assert_prefix_free(table:Sequence[Command]):
	for a in table:
		for b in table:
			assert a is b or not b.name.startswith(a.name), (a.name, b.name)

_assert_prefix_free(COMMAND_TABLE)
