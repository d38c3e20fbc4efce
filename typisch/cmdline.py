"""
Inspect a structural type from the command line.

{0}

For example:

    typisch Integer -m 3 -m 3.5 -s Number

will say whether 3 and 3.5 are integers,
and how Integer and Number relate in the lattice.

Types are named either from the prelude ({1})
or as `package.module:attribute` for a type defined elsewhere.
"""
import sys, json, argparse, importlib
from pathlib import Path

parser = argparse.ArgumentParser(
	prog="typisch",
	description="Inspect structural types and how they relate.",
)
parser.add_argument("target", help="a prelude type like Integer, or package.module:attribute")
parser.add_argument('-m', "--member", action="append", default=[], help="a JSON value to test for membership. May repeat.")
parser.add_argument('-s', "--supersedes", metavar="OTHER", help="compare with another type in both directions.")
parser.add_argument('-o', "--outline", action="store_true", help="show how the type is put together.")
parser.add_argument('-c', "--check", action="count", help="check the lattice for cycles; repeat for more chatter.")

def resolve(text:str, report):
	from .ontology import Type
	from .primitive import PRELUDE
	if ':' in text:
		module_name, attribute = text.split(':', 1)
		if str(Path.cwd()) not in sys.path: sys.path.insert(0, str(Path.cwd()))
		try: found = getattr(importlib.import_module(module_name), attribute)
		except (ImportError, AttributeError) as ex:
			report.no_such_type(text, str(ex))
			return
	elif text in PRELUDE:
		found = PRELUDE[text]
	else:
		report.no_such_type(text, "The prelude has: "+", ".join(PRELUDE))
		return
	if isinstance(found, Type): return found
	report.not_a_type(text, found)

def run(args):
	from .diagnostics import Report, TooManyIssues, CyclicLattice, check_lattice
	from .subsumption import supersedes
	from .render import outline
	report = Report(verbose=args.check and args.check > 1)
	try:
		target = resolve(args.target, report)
		other = resolve(args.supersedes, report) if args.supersedes else None
		members = []
		for text in args.member:
			try: members.append((text, json.loads(text)))
			except ValueError as ex: report.bad_member(text, str(ex))
		if report.sick():
			report.complain_to_console()
			return 1
		print(target.name, "=", target.canonical_name)
		if args.outline:
			print(outline(target))
		for text, value in members:
			print("%s %s %s" % (text, "∈" if target.has(value) else "∉", target.name))
		if other is not None:
			try:
				print("%s supersedes %s: %s" % (target.name, other.name, supersedes(target)(other)))
				print("%s supersedes %s: %s" % (other.name, target.name, supersedes(other)(target)))
			except CyclicLattice as ex:
				report.cyclic_lattice("edges", ex.types)
				report.complain_to_console()
				return 1
		if args.check:
			check_lattice(target, report)
			if other is not None: check_lattice(other, report)
			if report.sick():
				report.complain_to_console()
				return 1
			print("Looks acyclic to me.", file=sys.stderr)
	except TooManyIssues:
		report.complain_to_console()
		print("Giving up after a few issues. One crisis at a time, eh?", file=sys.stderr)
		return 1
	return 0

def main():
	if len(sys.argv) > 1:
		exit(run(parser.parse_args()))
	else:
		from .primitive import PRELUDE
		print(__doc__.strip().format(parser.format_usage(), ", ".join(PRELUDE)))
