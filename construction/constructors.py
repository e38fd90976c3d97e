"""
The Constructor Resolver.

`constructorof(T)` answers a callable which, given T's property values in
canonical order, builds a fresh T. Usually that's just the class. It is not
guaranteed to be a class at all, though. It can be any callable such that:

	ctor = constructorof(type(obj))
	ctor(*fieldvalues(obj)) == obj
	type(ctor(*fieldvalues(obj))) is type(obj)

and, for as many argument lists as possible, `fieldvalues(ctor(*args)) == args`.
In particular the default handle of an ordinary class does not fix the types
of the fields, so a Point built from ints can be rebuilt holding floats.

A type whose real constructor does more than assign fields, for instance
one that keeps a checksum, says so by registering its own handle:

	@constructor_for(S)
	def build_s(a, b, checksum=None):
		if checksum is not None and checksum != a + b:
			raise ConstructionError("checksum disagrees with a + b")
		return S(a, b)

Registration is found along the MRO, so subclasses share a base's handle
until they register one of their own.
"""
from threading import Lock
from typing import Callable

from boozetools.support.foundation import Visitor
from boozetools.support.symtab import NameSpace

from .forms import describe, reduce_type, Indescribable, TupleForm, LabeledForm, RecordForm
from .labeled import LabeledConstructor
from . import diagnostics

HANDLE = Callable[..., object]

class ConstructionError(ValueError):
	""" A constructor-handle refused its arguments because they would break an invariant of the type. """


class TupleConstructor:
	""" Collect the arguments into a tuple, in order. """
	def __call__(self, *args) -> tuple: return args
	def __eq__(self, other): return isinstance(other, TupleConstructor)
	def __hash__(self): return hash(TupleConstructor)
	def __repr__(self): return "TupleConstructor()"

class KeywordConstructor:
	"""
	For classes that insist on some arguments by keyword (e.g. kw_only dataclass fields).
	Still called positionally in canonical order, like every other handle.
	"""
	def __init__(self, cls:type, names:tuple, keywords:frozenset):
		self.cls, self.names, self.keywords = cls, tuple(names), frozenset(keywords)

	def __call__(self, *args):
		if len(args) != len(self.names):
			pattern = "%s takes %d argument(s) in canonical order but %d were given"
			raise TypeError(pattern % (self.cls.__qualname__, len(self.names), len(args)))
		positional, named = [], {}
		for name, value in zip(self.names, args):
			if name in self.keywords: named[name] = value
			else: positional.append(value)
		return self.cls(*positional, **named)

	def __eq__(self, other):
		if isinstance(other, KeywordConstructor):
			return (self.cls, self.names, self.keywords) == (other.cls, other.names, other.keywords)
		return NotImplemented
	def __hash__(self): return hash((KeywordConstructor, self.cls, self.names))
	def __repr__(self): return "KeywordConstructor(%s)" % self.cls.__qualname__


class _DefaultHandle(Visitor):
	""" What to do when nobody registered anything better. """
	def visit_TupleForm(self, form:TupleForm): return TupleConstructor()
	def visit_LabeledForm(self, form:LabeledForm): return LabeledConstructor(form.names)
	def visit_RecordForm(self, form:RecordForm):
		if form.keywords: return KeywordConstructor(form.cls, form.names, form.keywords)
		return form.cls

_default_handle = _DefaultHandle()

_registered: NameSpace[HANDLE] = NameSpace(place="registered constructors")
_handles: dict[type, HANDLE] = {}
_mutex = Lock()

def register_constructor(T, handle:HANDLE, *, replace=False) -> HANDLE:
	"""
	Make `handle` the constructor of T (and of subclasses that don't register their own).
	Registering twice for the same class raises SymbolAlreadyExists unless you say replace=True.
	"""
	if not callable(handle):
		raise TypeError("A constructor-handle must be callable; got %r" % (handle,))
	cls = reduce_type(T)
	if replace and cls in _registered.local: _registered.replace(cls, handle)
	else: _registered[cls] = handle
	forget()  # Subclasses may have cached an inherited handle.
	diagnostics.info("registered constructor", handle, "for", cls.__qualname__)
	return handle

def constructor_for(T):
	""" Decorator form of register_constructor. """
	def decorate(handle:HANDLE) -> HANDLE:
		return register_constructor(T, handle)
	return decorate

def _find_registered(cls:type):
	for base in cls.__mro__:
		if base in _registered.local: return _registered.local[base]

def constructorof(T) -> HANDLE:
	""" Resolve the constructor-handle of a type. This does not fail for any class. """
	key = reduce_type(T)  # So all tuple aliases share the one handle.
	try: return _handles[key]
	except KeyError: pass
	handle = _find_registered(key)
	if handle is None:
		try: handle = _default_handle.visit(describe(key))
		except Indescribable: handle = key  # Then the class itself is the best guess going.
	with _mutex: handle = _handles.setdefault(key, handle)
	diagnostics.info("constructor of", key.__qualname__, "is", handle)
	return handle

def forget(T=None):
	""" Drop memoized handles: all of them, or just those of one type. """
	with _mutex:
		if T is None: _handles.clear()
		else: _handles.pop(reduce_type(T), None)
