"""
Reading an instance's properties, and the Field-Name Validator.

Everything here is about the *property* surface: the names a user of the type
reads and writes. That may differ from the storage underneath, as with a
class that keeps `_celsius` but exposes `celsius` and takes `celsius` in its
constructor. The validator checks patches against the property names and
never against storage.
"""
from typing import Iterable, Sequence

from .forms import describe, TupleForm
from .labeled import LabeledTuple

class UnknownPropertyError(ValueError):
	""" A patch mentioned a property which the target record does not have. """
	def __init__(self, record_type:type, name, available:Sequence=()):
		super().__init__(record_type, name, tuple(available))

	@property
	def record_type(self) -> type: return self.args[0]

	@property
	def name(self): return self.args[1]

	@property
	def available(self) -> tuple: return self.args[2]

	def __str__(self):
		pattern = "%s has no property %r. Possibilities are %s"
		return pattern % (self.record_type.__qualname__, self.name, list(self.available))


def propertynames(obj) -> tuple:
	""" The names of an instance's properties, in canonical order. Tuples have positions instead. """
	form = describe(type(obj))
	if isinstance(form, TupleForm): return tuple(range(len(obj)))
	return form.names

def getproperty(obj, name):
	if isinstance(obj, tuple) and isinstance(name, int): return obj[name]
	return getattr(obj, name)

def fieldvalues(obj) -> tuple:
	""" An instance's property values in canonical order: exactly what its constructor-handle takes. """
	return tuple(getproperty(obj, name) for name in propertynames(obj))

def getproperties(obj):
	""" The properties as a labeled tuple; a plain tuple answers itself. """
	if isinstance(describe(type(obj)), TupleForm): return obj
	return LabeledTuple[propertynames(obj)](*fieldvalues(obj))

def check_properties(obj, names:Iterable):
	"""
	Fail fast with UnknownPropertyError on the first name that isn't a property of obj.
	Only names get checked here: whether the values make sense together is for
	the constructor-handle to decide.
	"""
	surface = propertynames(obj)
	for name in names:
		# True == 1, but a flag is not a position.
		if isinstance(name, bool) or name not in surface:
			raise UnknownPropertyError(type(obj), name, surface)
