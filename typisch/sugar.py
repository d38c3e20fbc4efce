"""
Conveniences built on the algebra proper.

None of these changes what a type means. `suchthat` is just an
intersection with a predicate, and the rest only touch the names
and documentation that travel with a type.
"""
from functools import reduce
from typing import Callable, Sequence
from .ontology import Type
from .algebra import intersection, predicate

def suchthat(pred:Callable[[object], bool]) -> Callable[[Type], Type]:
	return lambda parent: intersection(predicate(pred))(parent)

def alias(name:str) -> Callable[[Type], Type]:
	return lambda parent: parent.relabel(names=(name, *parent.names))

def unalias(parent:Type) -> Type:
	if len(parent.names) == 1: return parent
	return parent.relabel(names=parent.names[1:])

def doc(docs:Sequence[str]) -> Callable[[Type], Type]:
	return lambda parent: parent.relabel(docs=docs)

def compose_type(name:str):
	"""
	Name a pipeline of refinements. For example:
	
		compose_type("Port")(Integer)([suchthat(positive), suchthat(below_65536)])
	"""
	def with_base(base:Type) -> Callable[[Sequence[Callable[[Type], Type]]], Type]:
		return lambda fns: alias(name)(reduce(lambda t, fn: fn(t), fns, base))
	return with_base
