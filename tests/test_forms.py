from collections import namedtuple
from dataclasses import dataclass, field, KW_ONLY
from typing import Generic, NamedTuple, TypeVar
import unittest

from construction.forms import describe, fieldnames, reduce_type, Indescribable, TupleForm, LabeledForm, RecordForm
from construction.labeled import LabeledTuple

T = TypeVar("T")

@dataclass(frozen=True)
class Point(Generic[T]):
	x: T
	y: T

@dataclass
class Derived:
	a: int
	b: int
	total: int = field(init=False)
	def __post_init__(self): self.total = self.a + self.b

@dataclass
class Options:
	name: str
	_: KW_ONLY
	verbose: bool = False
	depth: int = 1

class Pair(NamedTuple):
	left: object
	right: object

Legacy = namedtuple("Legacy", "p q r")

class Celsius:
	def __init__(self, degrees, *, precise=False):
		self._degrees = degrees
		self.precise = precise
	@property
	def degrees(self): return self._degrees

class Declared:
	__properties__ = ("alpha", "beta")
	def __init__(self, *parts): self.alpha, self.beta = parts

class Sprawling:
	def __init__(self, *parts): self.parts = parts

class Bag(tuple): pass

class RecordFormTests(unittest.TestCase):

	def test_dataclass_declaration_order(self):
		self.assertEqual(RecordForm(Point, ("x", "y"), frozenset()), describe(Point))

	def test_generic_alias_is_its_origin(self):
		self.assertIs(Point, reduce_type(Point[int]))
		self.assertEqual(describe(Point), describe(Point[float]))

	def test_fields_not_in_init_are_not_properties(self):
		self.assertEqual(("a", "b"), describe(Derived).names)

	def test_keyword_only_fields(self):
		form = describe(Options)
		self.assertEqual(("name", "verbose", "depth"), form.names)
		self.assertEqual(frozenset({"verbose", "depth"}), form.keywords)

	def test_named_tuples(self):
		for cls, names in [(Pair, ("left", "right")), (Legacy, ("p", "q", "r"))]:
			with self.subTest(cls.__name__):
				self.assertEqual(RecordForm(cls, names, frozenset()), describe(cls))

	def test_constructor_signature(self):
		form = describe(Celsius)
		self.assertEqual(("degrees", "precise"), form.names)
		self.assertEqual(frozenset({"precise"}), form.keywords)

	def test_declared_properties_win(self):
		self.assertEqual(("alpha", "beta"), describe(Declared).names)

	def test_indescribable(self):
		for cls in (Sprawling, Bag):
			with self.subTest(cls.__name__):
				with self.assertRaises(Indescribable): describe(cls)

	def test_form_is_memoized(self):
		self.assertIs(describe(Pair), describe(Pair))

	def test_not_a_type(self):
		with self.assertRaises(TypeError): describe(Point(1, 2))
		with self.assertRaises(TypeError): describe(5)

class SpecialFormTests(unittest.TestCase):

	def test_tuples(self):
		for alias, arity in [
			(tuple, None),
			(tuple[int, ...], None),
			(tuple[()], 0),
			(tuple[int], 1),
			(tuple[int, str, float], 3),
		]:
			with self.subTest(alias):
				self.assertEqual(TupleForm(arity), describe(alias))

	def test_labeled(self):
		self.assertEqual(LabeledForm(("a", "b")), describe(LabeledTuple["a", "b"]))

	def test_fieldnames(self):
		self.assertEqual((0, 1), fieldnames(tuple[int, int]))
		self.assertEqual(("a", "b"), fieldnames(LabeledTuple["a", "b"]))
		self.assertEqual(("x", "y"), fieldnames(Point[int]))
		with self.assertRaises(TypeError): fieldnames(tuple)


if __name__ == '__main__':
	unittest.main()
