"""
Classify a record type according to how it gets built from its parts.

There are three forms:

* TupleForm: the built-in tuple. Properties are positions 0..n-1.
* LabeledForm: a LabeledTuple specialization. Properties are its labels.
* RecordForm: everything else. Properties are worked out from the class:
	- an explicit `__properties__` sequence wins outright;
	- dataclasses contribute their init-fields, in declaration order;
	- named-tuples contribute their `_fields`;
	- any other class contributes the named parameters of its constructor.

The order of `names` in a form is THE canonical order: it is both the order
in which the default constructor-handle takes its arguments and the order in
which the patcher reads values off an instance.
"""
import dataclasses, inspect, typing
from threading import Lock
from typing import NamedTuple, Optional, Union

from .labeled import LabeledTuple
from . import diagnostics

class Indescribable(TypeError):
	""" A class whose property surface can't be worked out from the class itself. """

class TupleForm(NamedTuple):
	arity: Optional[int]  # None for a bare `tuple`: the instance knows.

	def positions(self) -> tuple[int, ...]:
		if self.arity is None: raise TypeError("A bare tuple type does not say how many positions it has.")
		return tuple(range(self.arity))

class LabeledForm(NamedTuple):
	names: tuple[str, ...]

class RecordForm(NamedTuple):
	cls: type
	names: tuple[str, ...]
	keywords: frozenset  # The subset of names that must be passed by keyword.

FORM = Union[TupleForm, LabeledForm, RecordForm]

_forms: dict[type, FORM] = {}
_mutex = Lock()

def reduce_type(T) -> type:
	""" Strip any type-arguments: Point[int] becomes Point, tuple[int, str] becomes tuple. """
	origin = typing.get_origin(T)
	if origin is not None: T = origin
	if not isinstance(T, type):
		raise TypeError("Expected a type; got %r" % (T,))
	return T

def _tuple_arity(T) -> Optional[int]:
	args = typing.get_args(T)
	if args == ((),): return 0  # Older spelling of tuple[()]
	if len(args) == 2 and args[1] is Ellipsis: return None
	return len(args)

def describe(T) -> FORM:
	""" Work out the form of a type, or of a generic alias of one. """
	cls = reduce_type(T)
	if cls is tuple:
		return TupleForm(_tuple_arity(T) if T is not tuple else None)
	try: return _forms[cls]
	except KeyError: pass
	form = _classify(cls)
	with _mutex: form = _forms.setdefault(cls, form)
	diagnostics.info("form of", cls.__qualname__, "is", form)
	return form

def fieldnames(T) -> tuple:
	""" The canonical property order of a type, which must say its own arity if it's a tuple. """
	form = describe(T)
	if isinstance(form, TupleForm): return form.positions()
	return form.names

def _classify(cls:type) -> FORM:
	if issubclass(cls, LabeledTuple):
		return LabeledForm(cls._names)
	if hasattr(cls, "__properties__"):
		return RecordForm(cls, tuple(cls.__properties__), frozenset())
	if dataclasses.is_dataclass(cls):
		fields = [f for f in dataclasses.fields(cls) if f.init]
		keywords = frozenset(f.name for f in fields if f.kw_only is True)
		return RecordForm(cls, tuple(f.name for f in fields), keywords)
	if issubclass(cls, tuple):
		if hasattr(cls, "_fields"): return RecordForm(cls, tuple(cls._fields), frozenset())
		raise Indescribable("%s is a tuple subclass without named fields." % cls.__qualname__)
	return _from_signature(cls)

def _from_signature(cls:type) -> RecordForm:
	try: signature = inspect.signature(cls)
	except (TypeError, ValueError) as ex:
		raise Indescribable("Cannot see the constructor parameters of %s." % cls.__qualname__) from ex
	names, keywords = [], set()
	for p in signature.parameters.values():
		if p.kind in (p.VAR_POSITIONAL, p.VAR_KEYWORD):
			pattern = "%s takes *%s, so its properties are not a fixed set. Declare __properties__ instead."
			raise Indescribable(pattern % (cls.__qualname__, p.name))
		names.append(p.name)
		if p.kind is p.KEYWORD_ONLY: keywords.add(p.name)
	return RecordForm(cls, tuple(names), frozenset(keywords))
