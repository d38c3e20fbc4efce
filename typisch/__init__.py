"""
An algebra of structural types: membership predicates that know
something about which other types contain them, or are contained.
"""
from .ontology import Type
from .algebra import Any, predicate, intersection, union, difference, without, unary
from .sugar import suchthat, alias, unalias, doc, compose_type
from .subsumption import supersedes
from .diagnostics import TypischError, CyclicLattice
