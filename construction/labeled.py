"""
Anonymous labeled tuples.

A labeled tuple is a tuple of values together with a fixed sequence of labels,
one per value. Two of them are equal only if both the labels and the values
agree, so `labeled(a=1, b=2)` and `labeled(b=2, a=1)` are different things.

Each distinct label sequence gets its own class, made on first demand and
remembered forever after, so `LabeledTuple["a", "b"] is LabeledTuple["a", "b"]`.
That class is what `type()` reports for an instance, which is what lets the
constructor resolver recover the labels from the type alone.
"""
from operator import itemgetter
from threading import Lock
from typing import Iterable

NAMES = tuple[str, ...]

_specialized: dict[NAMES, type] = {}
_mutex = Lock()

def _check_labels(names: Iterable) -> NAMES:
	names = tuple(names)
	for n in names:
		if not (isinstance(n, str) and n.isidentifier()) or n.startswith("_"):
			raise TypeError("A label must be an identifier not starting with underscore; got %r" % (n,))
	if len(set(names)) < len(names):
		raise TypeError("Duplicate label in %r" % (names,))
	return names

def _specialize(names: NAMES) -> type:
	with _mutex:
		if names not in _specialized:
			title = "LabeledTuple[%s]" % ", ".join(names)
			namespace = {"__slots__": (), "_names": names, "__module__": __name__}
			# Labels shadow tuple methods of the same name, e.g. `count` and `index`.
			for i, n in enumerate(names): namespace[n] = property(itemgetter(i), doc="Alias for field number %d" % i)
			_specialized[names] = type(title, (LabeledTuple,), namespace)
		return _specialized[names]

def _rebuild(names, values):
	return LabeledTuple[names](*values)


class LabeledTuple(tuple):
	"""
	Root of the labeled-tuple classes. Don't instantiate this directly:
	say `LabeledTuple[names](*values)` or `labeled(**values)`.
	"""
	__slots__ = ()
	_names: NAMES = ()

	def __class_getitem__(cls, names) -> type:
		if isinstance(names, str): names = (names,)
		names = _check_labels(names)
		try: return _specialized[names]
		except KeyError: return _specialize(names)

	def __new__(cls, *values):
		if cls is LabeledTuple:
			raise TypeError("Say LabeledTuple[names](...) or labeled(...) to make a labeled tuple.")
		if len(values) != len(cls._names):
			pattern = "%s takes %d value(s) but %d were given"
			raise TypeError(pattern % (cls.__name__, len(cls._names), len(values)))
		return super().__new__(cls, values)

	def __setattr__(self, name, value):
		raise AttributeError("%s is immutable" % type(self).__name__)

	def __delattr__(self, name):
		raise AttributeError("%s is immutable" % type(self).__name__)

	def __eq__(self, other):
		if isinstance(other, LabeledTuple):
			return self._names == other._names and tuple.__eq__(self, other)
		if isinstance(other, tuple): return False
		return NotImplemented

	def __ne__(self, other):
		outcome = self.__eq__(other)
		return outcome if outcome is NotImplemented else not outcome

	def __hash__(self):
		return hash((self._names, tuple(self)))

	def __repr__(self):
		return "(%s)" % ", ".join("%s=%r" % pair for pair in zip(self._names, self))

	def __reduce__(self):
		return _rebuild, (self._names, tuple(self))

	def _asdict(self) -> dict:
		return dict(zip(self._names, self))


def labeled(**values) -> LabeledTuple:
	""" Labels come out in the order the keywords went in. """
	return LabeledTuple[tuple(values)](*values.values())


class LabeledConstructor:
	"""
	Constructor-handle for labeled tuples. The labels are fixed when the handle
	is made; each call supplies just the values, in label order.
	"""
	def __init__(self, names: Iterable):
		if isinstance(names, str): names = (names,)
		self._cls = LabeledTuple[tuple(names)]

	@property
	def names(self) -> NAMES: return self._cls._names

	def __call__(self, *values) -> LabeledTuple:
		return self._cls(*values)

	def __eq__(self, other):
		if isinstance(other, LabeledConstructor): return self._cls is other._cls
		return NotImplemented

	def __hash__(self): return hash((LabeledConstructor, self._cls))

	def __repr__(self): return "LabeledConstructor(%r)" % (self.names,)
