"""
Constructors for the type algebra.

Every constructor is curried: `union(a)(b)` rather than `union(a, b)`.
That way partially-applied operators make perfectly good refinements
for `compose_type`. Underneath, each kind of node is its own class,
and the classes do the real work.
"""
from functools import cached_property
from typing import Callable, Iterable
from .ontology import Type, Guard, Operands, Exclusion, Container, doc_link
from .canonical import (
	merge_operands, merge_difference_operands, merge_subsets,
	intersection_supersets, flat_map, unique, same_operands, operational_name,
)

class Anything(Type):
	kind = "any"
	def __init__(self):
		self.names = ("Any",)
		self.docs = (doc_link(self.kind),)
	def has(self, member) -> bool: return True
	def equals(self, other:Type) -> bool: return isinstance(other, Anything)

Any = Anything()

class Predicate(Type):
	"""
	Leaf types know nothing of their neighbors in the lattice.
	Two predicate types are the same only if they wrap the very same function.
	"""
	kind = "predicate"
	meta: Guard
	def __init__(self, pred:Callable, name:str=None):
		self.meta = Guard(pred)
		self.names = (name or getattr(pred, "__name__", repr(pred)),)
		self.docs = (doc_link(self.kind),)
	def has(self, member) -> bool: return self.meta.pred(member)
	def equals(self, other:Type) -> bool:
		return isinstance(other, Predicate) and other.meta.pred is self.meta.pred

class Compound(Type):
	""" Common structure of the operators that flatten and sort their operands. """
	glyph: str
	meta: Operands
	def __init__(self, left:Type, right:Type):
		self.meta = Operands(self._merge(left, right))
		self.names = (operational_name(self.glyph, self.meta.types),)
		self.docs = (doc_link(self.kind), *(t.docs[0] for t in self.meta.types))
	def _merge(self, left:Type, right:Type) -> tuple[Type, ...]:
		return merge_operands(type(self), left, right)
	def equals(self, other:Type) -> bool:
		return type(other) is type(self) and same_operands(self.meta.types, other.meta.types)

class Intersection(Compound):
	kind = "intersection"
	glyph = "∩"
	def __init__(self, left:Type, right:Type):
		super().__init__(left, right)
		nearest = (left, right)
		self.supersets = unique([*nearest, *flat_map(lambda t: intersection_supersets(Intersection, t), nearest)])
	def has(self, member) -> bool: return all(t.has(member) for t in self.meta.types)

class Union(Compound):
	kind = "union"
	glyph = "∪"
	def __init__(self, left:Type, right:Type):
		super().__init__(left, right)
		self.subsets = unique(merge_subsets(Union, left, right))
	def has(self, member) -> bool: return any(t.has(member) for t in self.meta.types)

class Difference(Compound):
	"""
	Members are the values every operand rejects. Operands that are
	themselves unions or differences get spliced in. The operands as
	given (before splicing) are the nearest known supersets.
	"""
	kind = "difference"
	glyph = "⊖"
	def __init__(self, left:Type, right:Type):
		super().__init__(left, right)
		self.supersets = (left, right)
	def _merge(self, left:Type, right:Type) -> tuple[Type, ...]:
		return merge_difference_operands(Difference, Union, left, right)
	def has(self, member) -> bool: return all(not t.has(member) for t in self.meta.types)

class Without(Type):
	""" Members of the left operand that are not members of the right. """
	kind = "without"
	meta: Exclusion
	def __init__(self, left:Type, right:Type):
		if isinstance(right, Without):
			# A \ (B \ C) is A \ (B ∪ C)
			right = Union(right.meta.left, right.meta.right)
		self.meta = Exclusion(left, right)
		self.names = ("(%s \\ %s)" % (left.canonical_name, right.canonical_name),)
		self.docs = (doc_link(self.kind), left.docs[0], right.docs[0])
		self.supersets = (left,)
	def has(self, member) -> bool:
		return self.meta.left.has(member) and not self.meta.right.has(member)
	def equals(self, other:Type) -> bool:
		return (
			isinstance(other, Without)
			and other.meta.left.equals(self.meta.left)
			and other.meta.right.equals(self.meta.right)
		)

class Unary(Type):
	"""
	A container-shaped type: the `outer` type says what the container is,
	and every element the `extractor` pulls out of it must be an `inner`.
	
	The lattice edges spell out covariance in both parts as explicit nodes.
	They are worked out on first use: each edge is a fresh unary type,
	which has edges of its own, and nobody needs the whole family at once.
	"""
	kind = "unary"
	meta: Container
	def __init__(self, outer:Type, extractor:Callable[[object], Iterable], inner:Type):
		self.meta = Container(outer, extractor, inner)
		self.names = ("(%s %s)" % (outer.canonical_name, inner.canonical_name),)
		self.docs = (doc_link(self.kind), outer.docs[0], inner.docs[0])
	
	@cached_property
	def subsets(self) -> tuple[Type, ...]:
		outer, extractor, inner = self.meta
		return tuple(
			Unary(o, extractor, i)
			for o in (outer, *outer.subsets)
			for i in ((() if o is outer else (inner,)) + tuple(inner.subsets))
		)
	
	@cached_property
	def supersets(self) -> tuple[Type, ...]:
		outer, extractor, inner = self.meta
		return (outer, *(Unary(outer, extractor, s) for s in inner.supersets))
	
	def has(self, member) -> bool:
		outer, extractor, inner = self.meta
		return outer.has(member) and all(inner.has(x) for x in extractor(member))
	
	def equals(self, other:Type) -> bool:
		return (
			isinstance(other, Unary)
			and other.meta.extractor is self.meta.extractor
			and other.meta.outer.equals(self.meta.outer)
			and other.meta.inner.equals(self.meta.inner)
		)

#########################

def predicate(pred:Callable[[object], bool], name:str=None) -> Type:
	return Predicate(pred, name)

def intersection(left:Type) -> Callable[[Type], Type]:
	return lambda right: Intersection(left, right)

def union(left:Type) -> Callable[[Type], Type]:
	return lambda right: Union(left, right)

def difference(left:Type) -> Callable[[Type], Type]:
	return lambda right: Difference(left, right)

def without(left:Type) -> Callable[[Type], Type]:
	return lambda right: Without(left, right)

def unary(outer:Type):
	return lambda extractor: lambda inner: Unary(outer, extractor, inner)
