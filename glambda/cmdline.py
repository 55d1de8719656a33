"""
This is the interactive console for the glambda language,
a simply-typed lambda calculus with integers and booleans.

Type an expression to evaluate it, or `name = expression` to define a name
for use in later lines. Commands start with a colon and may be abbreviated:

    :quit  :lex  :parse  :eval  :step  :type  :all
"""
import sys, argparse

parser = argparse.ArgumentParser(
	prog="glambda",
	description="Interactive console for the glambda language.",
	epilog=__doc__.strip(),
	formatter_class=argparse.RawDescriptionHelpFormatter,
)
parser.add_argument('-v', "--verbose", action="count", help="Trace each stage of the pipeline on stderr.")
parser.add_argument("--no-banner", action="store_true", help="Skip the welcome banner, e.g. when piping input in.")
parser.add_argument("--version", action="store_true", help="Print the version and exit.")

def run(args):
	from .diagnostics import Report
	from .output import Console
	from .repl import run_session, version
	if args.version:
		print(version())
		return 0
	console = Console(sys.stdout, Report(verbose=args.verbose))
	run_session(console, banner=not args.no_banner)
	return 0

def main(argv=None):
	args = parser.parse_args(argv)
	sys.exit(run(args))
