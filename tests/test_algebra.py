import unittest
from decimal import Decimal
from fractions import Fraction

from typisch import (
	Any, predicate, intersection, union, difference, without, unary,
	suchthat, alias, unalias, doc, compose_type, supersedes,
)
from typisch.algebra import Union, Intersection, Without, Difference
from typisch.ontology import doc_link
from typisch.primitive import Array, Number, Integer, String, Null, Scalar, array_of, elements, optional

def even(n): return n % 2 == 0
def positive(n): return n > 0
def small(n): return abs(n) < 10

Even = predicate(even)
Positive = predicate(positive)
Small = predicate(small)
EvenPositive = intersection(Even)(Positive)

SAMPLES = range(-12, 13)

class MembershipTests(unittest.TestCase):
	
	def test_operators_agree_with_boolean_logic(self):
		for v in SAMPLES:
			with self.subTest(v):
				self.assertEqual(intersection(Even)(Positive).has(v), even(v) and positive(v))
				self.assertEqual(union(Even)(Positive).has(v), even(v) or positive(v))
				self.assertEqual(without(Even)(Positive).has(v), even(v) and not positive(v))
	
	def test_difference_admits_what_every_operand_rejects(self):
		sut = difference(Even)(Positive)
		for v in SAMPLES:
			with self.subTest(v):
				self.assertEqual(sut.has(v), not even(v) and not positive(v))
	
	def test_even_positive(self):
		self.assertTrue(EvenPositive.has(4))
		self.assertFalse(EvenPositive.has(-4))
		self.assertFalse(EvenPositive.has(3))
	
	def test_everything_but_positive(self):
		sut = without(Any)(Positive)
		self.assertTrue(sut.has(-1))
		self.assertFalse(sut.has(1))
	
	def test_any(self):
		for v in [None, 0, "", [], object()]:
			self.assertTrue(Any.has(v))
		self.assertTrue(Any.equals(Any))
		self.assertFalse(Any.equals(Even))
		self.assertEqual(("Any",), Any.names)
		self.assertEqual((), Any.subsets)
		self.assertEqual((), Any.supersets)

class PredicateTests(unittest.TestCase):
	
	def test_equality_is_by_function_identity(self):
		self.assertTrue(predicate(even).equals(Even))
		self.assertFalse(predicate(lambda n: n % 2 == 0).equals(Even))
		self.assertFalse(Even.equals(Any))
	
	def test_names(self):
		self.assertEqual("even", Even.name)
		self.assertEqual("Evens", predicate(even, "Evens").name)
		self.assertTrue(predicate(even, "Evens").equals(Even))

class CanonicalFormTests(unittest.TestCase):
	
	def test_union_flattens(self):
		left_heavy = union(union(Even)(Positive))(Small)
		right_heavy = union(Even)(union(Positive)(Small))
		self.assertEqual((Even, Positive, Small), left_heavy.meta.types)
		self.assertEqual(left_heavy.meta.types, right_heavy.meta.types)
		self.assertTrue(left_heavy.equals(right_heavy))
		self.assertFalse(any(isinstance(t, Union) for t in left_heavy.meta.types))
	
	def test_intersection_flattens(self):
		sut = intersection(Small)(intersection(Positive)(Even))
		self.assertEqual((Even, Positive, Small), sut.meta.types)
		self.assertFalse(any(isinstance(t, Intersection) for t in sut.meta.types))
	
	def test_operand_order_does_not_matter(self):
		self.assertEqual(intersection(Small)(Even).meta.types, intersection(Even)(Small).meta.types)
		self.assertTrue(union(Small)(Even).equals(union(Even)(Small)))
	
	def test_same_named_operands_still_sort_the_same_way(self):
		A, B, C = predicate(lambda n: n % 2 == 0), predicate(lambda n: n > 0), predicate(lambda n: n < 10)
		self.assertTrue(intersection(A)(B).equals(intersection(B)(A)))
		self.assertEqual(intersection(A)(B).meta.types, intersection(B)(A).meta.types)
		self.assertEqual(union(union(A)(B))(C).meta.types, union(A)(union(B)(C)).meta.types)
		self.assertEqual((A, B, C), union(C)(union(B)(A)).meta.types)
	
	def test_aliases_sort_with_what_they_alias(self):
		A, B = predicate(lambda n: n > 0), predicate(lambda n: n < 10)
		self.assertTrue(intersection(alias("Aye")(A))(B).equals(intersection(B)(A)))
	
	def test_kinds_do_not_mix(self):
		self.assertFalse(union(Even)(Positive).equals(intersection(Even)(Positive)))
		nested = intersection(union(Even)(Positive))(Small)
		self.assertEqual(2, len(nested.meta.types))
	
	def test_names(self):
		self.assertEqual("(even ∩ positive)", intersection(Even)(Positive).name)
		self.assertEqual("(even ∪ positive)", union(Positive)(Even).name)
		self.assertEqual("(even ⊖ positive)", difference(Even)(Positive).name)
		self.assertEqual("(positive \\ even)", without(Positive)(Even).name)
		self.assertEqual("(even ∩ positive ∩ small)", intersection(Small)(EvenPositive).name)
	
	def test_names_are_built_from_canonical_names(self):
		sut = intersection(alias("Evens")(Even))(Positive)
		self.assertEqual("(even ∩ positive)", sut.name)
	
	def test_docs(self):
		expect = (doc_link("intersection"), doc_link("predicate"), doc_link("predicate"))
		self.assertEqual(expect, EvenPositive.docs)
	
	def test_difference_absorbs_unions(self):
		either = union(Even)(Positive)
		sut = difference(either)(Small)
		self.assertEqual((Even, Positive, Small), sut.meta.types)
		self.assertIs(either, sut.supersets[0])
		self.assertIs(Small, sut.supersets[1])
		self.assertEqual((), sut.subsets)
	
	def test_difference_absorbs_differences(self):
		sut = difference(Small)(difference(Positive)(Even))
		self.assertEqual((Even, Positive, Small), sut.meta.types)
		self.assertFalse(any(isinstance(t, Difference) for t in sut.meta.types))

class WithoutTests(unittest.TestCase):
	
	def test_right_operand_is_never_a_without(self):
		sut = without(Any)(without(Even)(Positive))
		self.assertIsInstance(sut.meta.right, Union)
		self.assertTrue(sut.equals(without(Any)(union(Even)(Positive))))
	
	def test_rewrite_keeps_meaning(self):
		sut = without(Any)(without(Even)(Positive))
		for v in SAMPLES:
			with self.subTest(v):
				self.assertEqual(sut.has(v), not (even(v) or positive(v)))
	
	def test_rewrite_converges(self):
		sut = without(Any)(without(Even)(without(Positive)(Small)))
		self.assertNotIsInstance(sut.meta.right, Without)
		self.assertEqual((Even, Positive, Small), sut.meta.right.meta.types)
	
	def test_operand_order_matters(self):
		self.assertFalse(without(Even)(Positive).equals(without(Positive)(Even)))
	
	def test_edges(self):
		sut = without(Even)(Positive)
		self.assertEqual((Even,), sut.supersets)
		self.assertEqual((), sut.subsets)

class UnaryTests(unittest.TestCase):
	
	def test_membership(self):
		sut = array_of(Integer)
		self.assertTrue(sut.has([1, 2, 3]))
		self.assertTrue(sut.has(()))
		self.assertFalse(sut.has([1, 2.5]))
		self.assertFalse(sut.has("123"))
	
	def test_name(self):
		self.assertEqual("(Array Number)", array_of(Number).name)
	
	def test_equality_needs_the_same_extractor(self):
		self.assertTrue(array_of(Number).equals(array_of(Number)))
		self.assertTrue(unary(Array)(elements)(Number).equals(array_of(Number)))
		self.assertFalse(unary(Array)(lambda v: list(v))(Number).equals(array_of(Number)))
		self.assertFalse(array_of(Number).equals(array_of(String)))
	
	def test_subsets_narrow_the_inner_type(self):
		sut = array_of(union(Integer)(String))
		self.assertEqual(2, len(sut.subsets))
		self.assertTrue(any(s.equals(array_of(Integer)) for s in sut.subsets))
		self.assertTrue(any(s.equals(array_of(String)) for s in sut.subsets))
	
	def test_subsets_narrow_the_outer_type(self):
		Sequential = union(Array)(String)
		sut = unary(Sequential)(elements)(Integer)
		expect = [unary(Array)(elements)(Integer), unary(String)(elements)(Integer)]
		self.assertEqual(len(expect), len(sut.subsets))
		for e in expect:
			self.assertTrue(any(s.equals(e) for s in sut.subsets), e)
	
	def test_supersets_widen_the_inner_type(self):
		sut = array_of(Integer)
		self.assertIs(Array, sut.supersets[0])
		self.assertTrue(any(s.equals(array_of(Number)) for s in sut.supersets))

class SugarTests(unittest.TestCase):
	
	def test_alias(self):
		sut = alias("Foo")(EvenPositive)
		self.assertEqual(("Foo", "(even ∩ positive)"), sut.names)
		self.assertEqual("Foo", sut.name)
		self.assertEqual("(even ∩ positive)", sut.canonical_name)
		self.assertEqual(EvenPositive.names, ("(even ∩ positive)",))
		for v in SAMPLES:
			self.assertEqual(EvenPositive.has(v), sut.has(v))
		self.assertTrue(sut.equals(EvenPositive))
		self.assertTrue(EvenPositive.equals(sut))
		self.assertTrue(supersedes(EvenPositive)(sut))
		self.assertTrue(supersedes(sut)(EvenPositive))
	
	def test_aliases_stack_most_recent_first(self):
		sut = alias("Bar")(alias("Foo")(Even))
		self.assertEqual(("Bar", "Foo", "even"), sut.names)
	
	def test_unalias(self):
		once = alias("Foo")(Even)
		self.assertEqual(Even.names, unalias(once).names)
		self.assertEqual(("Foo", "even"), unalias(alias("Bar")(once)).names)
		self.assertIs(Even, unalias(Even))
	
	def test_doc(self):
		sut = doc(["https://example.com/even"])(Even)
		self.assertEqual(("https://example.com/even",), sut.docs)
		self.assertEqual(Even.names, sut.names)
		self.assertTrue(sut.equals(Even))
		self.assertEqual((doc_link("predicate"),), Even.docs)
	
	def test_suchthat(self):
		sut = suchthat(positive)(Even)
		self.assertIsInstance(sut, Intersection)
		self.assertTrue(sut.has(4))
		self.assertFalse(sut.has(-2))
		self.assertFalse(sut.has(3))
		self.assertTrue(sut.equals(EvenPositive))
		self.assertTrue(supersedes(Even)(sut))
	
	def test_compose_type(self):
		def below_65536(n): return n < 65536
		Port = compose_type("Port")(Integer)([suchthat(positive), suchthat(below_65536)])
		self.assertEqual("Port", Port.name)
		self.assertTrue(Port.has(80))
		self.assertFalse(Port.has(0))
		self.assertFalse(Port.has(70000))
		self.assertFalse(Port.has(80.5))
		self.assertTrue(supersedes(Integer)(Port))
		self.assertTrue(supersedes(Number)(Port))
	
	def test_compose_nothing(self):
		sut = compose_type("Whatever")(Even)([])
		self.assertEqual(("Whatever", "even"), sut.names)

class PreludeTests(unittest.TestCase):
	
	def test_scalars(self):
		for v in [None, True, 1, 2.5, "x"]:
			self.assertTrue(Scalar.has(v), v)
		for v in [[1], {"a": 1}]:
			self.assertFalse(Scalar.has(v), v)
	
	def test_flags_are_not_numbers(self):
		self.assertFalse(Number.has(True))
		self.assertTrue(Integer.has(3.0))
	
	def test_integers_of_every_numeric_kind(self):
		for v in [4, 4.0, Fraction(8, 2), Decimal("4")]:
			with self.subTest(v):
				self.assertTrue(Integer.has(v))
		for v in [4.5, Fraction(1, 2), Decimal("4.5"), float("inf"), True]:
			with self.subTest(v):
				self.assertFalse(Integer.has(v))
	
	def test_optional(self):
		sut = optional(Number)
		self.assertTrue(sut.has(None))
		self.assertTrue(sut.has(7))
		self.assertFalse(sut.has("7"))
		self.assertTrue(supersedes(sut)(Null))

if __name__ == '__main__':
	unittest.main()
