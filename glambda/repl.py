"""
The read-execute-print loop.

The only state carried from one turn to the next is the environment,
and it travels by being returned from one turn and passed into the next.
Each turn either runs a colon-command, which never changes the environment,
or executes a statement, whose outcome says how the environment moves on.
Whatever goes wrong inside a turn is shown and then forgotten.
The one way out is the quit command, which the end of input also triggers.
"""
from importlib import metadata
from traceback import format_exc
from typing import Callable, Iterable, Optional
from .commands import dispatch
from .environment import Environment, EMPTY
from .output import Console, Document
from .statement import execute

PROMPT = "λ> "

Reader = Callable[[str], Optional[str]]

LAMBDA = Document([
	r"                   \\\\\\          ",
	r"                    \\\\\\         ",
	r"                 /-\ \\\\\\       ",
	r"                |   | \\\\\\       ",
	r"                 \-/|  \\\\\\     ",
	r"                    | //\\\\\\     ",
	r"                 \-/ ////\\\\\\   ",
	r"                    //////\\\\\\   ",
	r"                   //////  \\\\\\  ",
	r"                  //////    \\\\\\ ",
])

def version() -> str:
	try: return metadata.version("glambda")
	except metadata.PackageNotFoundError: return "?"

def hello_world(console:Console):
	console.say(LAMBDA)
	console.say(Document(["Welcome to the Glamorous Glambda interpreter, version %s."%version()]))

def console_reader(prompt:str) -> Optional[str]:
	""" Read from the terminal. None means there is no more input. """
	try: return input(prompt)
	except EOFError: return None

def script_reader(lines:Iterable[str], console:Console) -> Reader:
	""" Feed canned lines to a session, echoing the prompt as a terminal would. """
	each_line = iter(lines)
	def read(prompt:str) -> Optional[str]:
		print(prompt, end="", file=console.dest)
		return next(each_line, None)
	return read

def turn(console:Console, env:Environment, line:Optional[str]) -> tuple[bool, Environment]:
	""" One full turn. Answers whether to keep going, and the environment for the next turn. """
	if line is None:
		return dispatch(console, env, "quit"), env
	try:
		text = line.lstrip()
		if text.startswith(":"):
			return dispatch(console, env, text[1:]), env
		outcome = execute(text.rstrip(), env, console.report)
		console.say(outcome.text)
		return True, outcome.apply(env)
	except Exception as ex:
		console.report.info(format_exc())
		console.say("Internal error: %s: %s"%(type(ex).__name__, ex))
		return True, env

def run_session(console:Console, read:Reader=console_reader, *, banner=True) -> Environment:
	""" Run until quit or end of input. Returns the final environment, mostly for the tests' sake. """
	if banner:
		hello_world(console)
	env = EMPTY
	keep_looping = True
	while keep_looping:
		try: line = read(PROMPT)
		except KeyboardInterrupt:
			console.say("")
			continue
		keep_looping, env = turn(console, env, line)
	return env
