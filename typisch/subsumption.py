"""
Does one type structurally contain another?

The search runs down the `subsets` edges from the candidate supertype
and up the `supersets` edges from the candidate subtype, stopping
at the first structurally-equal pair. It answers "yes" only when the
lattice edges prove it, so a "no" means "not known", not "disjoint".

Each query keeps a memo of the pairs it has decided, so shared
structure gets searched once. A pair met again while still undecided
can only mean the edges form a cycle, which is reported as an error.
"""
from typing import Callable
from .ontology import Type
from .diagnostics import CyclicLattice

class _Search:
	def __init__(self):
		self.decided : dict[tuple[Type, Type], bool] = {}
		self.pending : set[tuple[Type, Type]] = set()
	
	def supersedes(self, sup:Type, sub:Type) -> bool:
		key = sup, sub
		if key in self.decided: return self.decided[key]
		if key in self.pending: raise CyclicLattice(sup, sub)
		self.pending.add(key)
		answer = (
			sup.equals(sub)
			or any(self.supersedes(s, sub) for s in sup.subsets)
			or any(self.supersedes(sup, s) for s in sub.supersets)
		)
		self.pending.remove(key)
		self.decided[key] = answer
		return answer

def supersedes(sup:Type) -> Callable[[Type], bool]:
	return lambda sub: _Search().supersedes(sup, sub)
