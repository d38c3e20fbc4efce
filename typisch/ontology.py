"""
The shape every type descriptor has, independent of how it was built.

A type node is a membership test together with whatever the algebra
could work out about its neighbors in the lattice at construction time:
	* `subsets` are types known to be contained in this one,
	* `supersets` are types known to contain this one.
Neither list is complete. They are hints for `supersedes` to follow.

Nodes are value-like: once built, nobody changes them. The metadata
layer (names and docs) gets replaced by making a shallow copy.
Python-level `==` and `hash` stay with object identity, so nodes work
as dictionary keys. Structural comparison is the job of `equals`.
"""
import copy
from typing import Callable, NamedTuple, Optional, Sequence

DOC_ROOT = "https://github.com/wearereasonablepeople/typisch"

def doc_link(kind:str) -> str:
	return DOC_ROOT + "#" + kind

class Guard(NamedTuple):
	pred: Callable

class Operands(NamedTuple):
	types: tuple["Type", ...]

class Exclusion(NamedTuple):
	left: "Type"
	right: "Type"

class Container(NamedTuple):
	outer: "Type"
	extractor: Callable
	inner: "Type"

class Type:
	_counter = 0  # Breaks ties between operands with the same name.
	serial: int
	kind: str
	meta: Optional[tuple] = None
	names: tuple[str, ...]
	docs: tuple[str, ...]
	subsets: Sequence["Type"] = ()
	supersets: Sequence["Type"] = ()
	
	def __new__(cls, *args, **kwargs):
		self = super().__new__(cls)
		self.serial = Type._counter
		Type._counter += 1
		return self
	
	def has(self, member) -> bool: raise NotImplementedError(type(self))
	def equals(self, other:"Type") -> bool: raise NotImplementedError(type(self))
	
	@property
	def name(self) -> str: return self.names[0]
	@property
	def canonical_name(self) -> str: return self.names[-1]
	
	def relabel(self, names:Sequence[str]=None, docs:Sequence[str]=None) -> "Type":
		""" Same structure and behavior; different metadata. """
		other = copy.copy(self)
		if names is not None: other.names = tuple(names)
		if docs is not None: other.docs = tuple(docs)
		return other
	
	def __repr__(self) -> str: return self.names[0]
