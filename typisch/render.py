"""
A plain-text picture of how a type was put together.
"""
from boozetools.support.foundation import Visitor
from .ontology import Type
from . import algebra

class Outline(Visitor):
	""" One line per node, indented by depth, showing kind and display name. """
	def __init__(self, indent="  "):
		self._indent = indent
		self._lines = []
	
	def render(self, t:Type) -> str:
		self._lines = []
		self.visit(t, 0)
		return "\n".join(self._lines)
	
	def _line(self, t:Type, depth:int, note=""):
		aka = " = " + t.canonical_name if t.name != t.canonical_name else ""
		self._lines.append("%s%s: %s%s%s" % (self._indent*depth, t.kind, t.name, aka, note))
	
	def visit_Anything(self, t:algebra.Anything, depth:int):
		self._line(t, depth)
	
	def visit_Predicate(self, t:algebra.Predicate, depth:int):
		self._line(t, depth)
	
	def _compound(self, t:algebra.Compound, depth:int):
		self._line(t, depth)
		for operand in t.meta.types:
			self.visit(operand, depth+1)
	visit_Intersection = visit_Union = visit_Difference = _compound
	
	def visit_Without(self, t:algebra.Without, depth:int):
		self._line(t, depth)
		self.visit(t.meta.left, depth+1)
		self.visit(t.meta.right, depth+1)
	
	def visit_Unary(self, t:algebra.Unary, depth:int):
		self._line(t, depth, " by " + getattr(t.meta.extractor, "__name__", "?"))
		self.visit(t.meta.outer, depth+1)
		self.visit(t.meta.inner, depth+1)

def outline(t:Type) -> str:
	return Outline().render(t)
