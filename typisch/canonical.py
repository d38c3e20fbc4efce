"""
Normal forms for the operators that take lists of operands.

Intersection and union are associative and commutative, so the
algebra keeps them flat and sorted: nesting one union directly inside
another never happens, and the order of operands depends only on
their canonical names, not on the order somebody wrote them in.
The difference operator gets the same treatment, except that it
absorbs both differences and unions.
"""
from typing import Callable, Iterable, Sequence
from .ontology import Type

def flat_map(fn:Callable[[Type], Iterable[Type]], xs:Iterable[Type]) -> list[Type]:
	return [y for x in xs for y in fn(x)]

def by_name(t:Type) -> tuple[str, int]:
	# Same-named operands fall back to the order they were first built in.
	# Aliased copies share the serial of what they alias.
	return t.canonical_name, t.serial

def _sorted(types) -> tuple[Type, ...]:
	return tuple(sorted(types, key=by_name))

def _splice(absorbs:Callable[[Type], bool], left:Type, right:Type, part:Callable[[Type], Sequence[Type]]) -> list[Type]:
	if absorbs(left) and absorbs(right): return [*part(left), *part(right)]
	if absorbs(left): return [*part(left), right]
	if absorbs(right): return [*part(right), left]
	return [left, right]

def _operands(t:Type) -> Sequence[Type]: return t.meta.types
def _subsets(t:Type) -> Sequence[Type]: return t.subsets

def merge_operands(cls:type, left:Type, right:Type) -> tuple[Type, ...]:
	""" Flatten same-kind operands into one canonically-sorted list. """
	return _sorted(_splice(lambda t: isinstance(t, cls), left, right, _operands))

def merge_difference_operands(difference:type, union:type, left:Type, right:Type) -> tuple[Type, ...]:
	absorbs = lambda t: isinstance(t, (difference, union))
	return _sorted(_splice(absorbs, left, right, _operands))

def merge_subsets(cls:type, left:Type, right:Type) -> list[Type]:
	"""
	An operand of the same kind contributes the subsets it already knows;
	any other operand is itself a subset.
	"""
	return _splice(lambda t: isinstance(t, cls), left, right, _subsets)

def intersection_supersets(cls:type, t:Type) -> list[Type]:
	"""
	Whatever contains an intersection's operand contains the intersection.
	An operand that is itself an intersection passes along what it declares.
	"""
	if isinstance(t, cls):
		return flat_map(lambda s: intersection_supersets(cls, s), t.supersets)
	return [t]

def unique(types:Iterable[Type]) -> tuple[Type, ...]:
	""" Drop repeats (by identity) but keep first-seen order. """
	seen = set()
	result = []
	for t in types:
		if t not in seen:
			seen.add(t)
			result.append(t)
	return tuple(result)

def same_operands(these:Sequence[Type], those:Sequence[Type]) -> bool:
	return len(these) == len(those) and all(a.equals(b) for a, b in zip(these, those))

def operational_name(glyph:str, types:Sequence[Type]) -> str:
	return "(%s)" % (" %s " % glyph).join(t.canonical_name for t in types)
