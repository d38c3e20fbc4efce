"""
A few ready-made types over Python's built-in values,
plus container constructors to go with them.

The extractors live at module level so that every container type
built here shares them, because unary types only compare equal
when they use the very same extractor.
"""
import math
from decimal import Decimal
from numbers import Number as _Number, Integral as _Integral, Real as _Real
from collections.abc import Mapping as _Mapping
from .ontology import Type
from .algebra import predicate, unary, union
from .sugar import alias, suchthat

def _is_null(value): return value is None
def _is_boolean(value): return isinstance(value, bool)
def _is_number(value): return isinstance(value, _Number) and not isinstance(value, bool)
def _is_integral(value):
	if isinstance(value, _Integral): return True
	return isinstance(value, (_Real, Decimal)) and math.isfinite(value) and value == int(value)
def _is_string(value): return isinstance(value, str)
def _is_array(value): return isinstance(value, (list, tuple))
def _is_mapping(value): return isinstance(value, _Mapping)

def elements(value): return list(value)
def values(value): return list(value.values())

PRELUDE : dict[str, Type] = {}

def _built_in_type(name:str, pred) -> Type:
	PRELUDE[name] = it = predicate(pred, name)
	return it

Null = _built_in_type("Null", _is_null)
Boolean = _built_in_type("Boolean", _is_boolean)
Number = _built_in_type("Number", _is_number)
String = _built_in_type("String", _is_string)
Array = _built_in_type("Array", _is_array)
Mapping = _built_in_type("Mapping", _is_mapping)

Integer = PRELUDE["Integer"] = alias("Integer")(suchthat(_is_integral)(Number))
Scalar = PRELUDE["Scalar"] = alias("Scalar")(union(union(Null)(Boolean))(union(Number)(String)))

def array_of(inner:Type) -> Type:
	""" A list or tuple, every element of which is an `inner`. """
	return unary(Array)(elements)(inner)

def mapping_of(inner:Type) -> Type:
	""" A mapping, every value of which is an `inner`. Keys are unconstrained. """
	return unary(Mapping)(values)(inner)

def optional(t:Type) -> Type:
	return union(Null)(t)
