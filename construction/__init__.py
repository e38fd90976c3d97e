"""
Rebuild records from their parts, and patch their properties without mutation.

	constructorof(T)         -> a callable that builds a T from its property values in order
	setproperties(obj, patch) -> a copy of obj with some properties replaced
"""
from .labeled import LabeledTuple, LabeledConstructor, labeled
from .forms import describe, fieldnames
from .constructors import (
	constructorof, register_constructor, constructor_for, forget,
	ConstructionError, TupleConstructor, KeywordConstructor,
)
from .properties import (
	propertynames, getproperty, getproperties, fieldvalues, check_properties,
	UnknownPropertyError,
)
from .patching import setproperties, default_setproperties, register_patcher, patcher_for
