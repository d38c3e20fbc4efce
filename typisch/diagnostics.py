"""
Things that go wrong, and how to say so.

The algebra itself validates nothing: hand it garbage and the garbage
propagates as whatever Python exception it causes. The exceptions
here are for the one failure the algebra can recognize on its own,
namely a lattice whose edges go round in circles.
"""
import sys, random
from typing import Sequence
from boozetools.support.foundation import strongly_connected_components_hashable
from .ontology import Type

class TypischError(Exception):
	pass

class CyclicLattice(TypischError):
	""" The subset or superset edges reachable from some type form a cycle. """
	def __init__(self, *types:Type):
		super().__init__(*types)
		self.types = types
	def __str__(self):
		return "Cycle in the type lattice involving: " + ", ".join(map(repr, self.types))

class TooManyIssues(TypischError):
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]
	minced_oaths = ['Drat', 'Rats', 'Fiddlesticks', 'Good Grief', 'Curses', 'Crud', 'Great Scott', 'Nuts']
	resignations = [
		'That does not add up.',
		'I cannot make sense of this.',
		'Something is out of order.',
	]
	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Complaint:
	def __init__(self, intro:str, footer:Sequence[str]=()):
		self._intro, self._footer = intro, list(footer)
	def as_text(self):
		return '\n'.join([self._intro, *self._footer])

class Report:
	""" Collects the issues some operation turns up, for complaining about later. """
	
	def __init__(self, *, verbose:int=0, max_issues=10):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues
	
	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)
	@property
	def issues(self) -> list[Complaint]: return list(self._issues)
	
	def issue(self, it:Complaint):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)
	
	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)
	
	def complain_to_console(self):
		""" Emit all the issues to the console. """
		if self._issues:
			print("*"*60, file=sys.stderr)
			print(_outburst(), file=sys.stderr)
		for i in self._issues:
			print("  -"*20, file=sys.stderr)
			print(i.as_text(), file=sys.stderr)
		sys.stderr.flush()
	
	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)
	
	# Methods the command line calls:
	def no_such_type(self, text:str, why:str):
		self.issue(Complaint("I cannot find a type called %r." % text, [why]))
	
	def not_a_type(self, text:str, found):
		self.issue(Complaint("%r refers to something that is not a type." % text, ["It is a %s." % type(found).__name__]))
	
	def bad_member(self, text:str, why:str):
		self.issue(Complaint("I cannot read %r as a JSON value." % text, [why]))
	
	# Methods the lattice checker calls:
	def cyclic_lattice(self, edge:str, cycle:Sequence[Type]):
		intro = "These types form a cycle through their %s. The lattice must be acyclic." % edge
		footer = [" - The full cycle is:"]
		footer.extend('     '+repr(t) for t in cycle)
		self.issue(Complaint(intro, footer))

#########################

EDGES = ("subsets", "supersets")

def _reachable(root:Type, edge:str) -> dict[Type, tuple[Type, ...]]:
	graph = {}
	agenda = [root]
	while agenda:
		node = agenda.pop()
		if node not in graph:
			graph[node] = tuple(getattr(node, edge))
			agenda.extend(graph[node])
	return graph

def check_lattice(root:Type, report:Report):
	""" Report each cycle in the subset or superset edges reachable from root. """
	for edge in EDGES:
		graph = _reachable(root, edge)
		report.info("Checking %d type(s) reachable through %s from %r"%(len(graph), edge, root))
		for scc in strongly_connected_components_hashable(graph):
			scc = list(scc)
			if len(scc) > 1 or scc[0] in graph[scc[0]]:
				report.cyclic_lattice(edge, scc)
