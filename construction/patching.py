"""
The Property Patcher.

	setproperties(obj, patch)
	setproperties(obj, **changes)

Both answer a copy of `obj` with the named properties replaced and every other
property as it was. The original is never touched.

Customization
--------------
A type can take over patching by registering a patcher:

	@patcher_for(MyType)
	def patch_my_type(obj, patch: dict): ...

The override always receives the patch as a dict, whichever way the caller
spelled it. The keyword spelling just builds that dict and carries on, so
there's exactly one thing to override. An override can hand back to the
generic algorithm by calling `default_setproperties(obj, patch)`.

Contract
---------
Whoever overrides must keep these promises, which the default honors:

1. Purity: no side effects. In particular `obj` is not mutated.
2. Properties, not fields: any subset of `propertynames(obj)` is a valid patch.
3. The lens laws, for any valid p1..pn:
	* You get what you set: `setproperties(obj, {p: v}).p == v`.
	* Setting what was already there changes nothing:
	  `setproperties(obj, {p: obj.p}) == obj`.
	* The last set wins: patching p with v and then with w reads back w.

A registered constructor that recomputes a derived property can break the
first law for that property. That is the price of keeping its invariant.
"""
from typing import Callable, Mapping

from boozetools.support.symtab import NameSpace

from .constructors import constructorof
from .forms import reduce_type
from .labeled import LabeledTuple
from .properties import check_properties, propertynames, getproperty
from . import diagnostics

PATCHER = Callable[[object, dict], object]

_patchers: NameSpace[PATCHER] = NameSpace(place="registered patchers")

def register_patcher(T, patcher:PATCHER, *, replace=False) -> PATCHER:
	""" Take over setproperties for T and its subclasses. """
	cls = reduce_type(T)
	if replace and cls in _patchers.local: _patchers.replace(cls, patcher)
	else: _patchers[cls] = patcher
	diagnostics.info("registered patcher", patcher, "for", cls.__qualname__)
	return patcher

def patcher_for(T):
	def decorate(patcher:PATCHER) -> PATCHER:
		return register_patcher(T, patcher)
	return decorate

def _find_patcher(cls:type):
	for base in cls.__mro__:
		if base in _patchers.local: return _patchers.local[base]

def _as_dict(patch) -> dict:
	if isinstance(patch, LabeledTuple): return patch._asdict()
	if isinstance(patch, Mapping): return dict(patch)
	raise TypeError("A patch maps property names to values; %s does not." % type(patch).__name__)

def setproperties(obj, patch=None, /, **changes):
	""" Return a copy of obj with properties updated according to patch (or the keywords). """
	if patch is None: patch = changes
	elif changes: raise TypeError("setproperties takes a patch or keywords, but not both.")
	patch = _as_dict(patch)
	patcher = _find_patcher(type(obj))
	if patcher is None: return default_setproperties(obj, patch)
	return patcher(obj, patch)

def default_setproperties(obj, patch:dict):
	""" The generic algorithm: check the names, merge in canonical order, rebuild. """
	check_properties(obj, patch)
	args = [patch[name] if name in patch else getproperty(obj, name) for name in propertynames(obj)]
	diagnostics.trace("rebuilding", type(obj).__qualname__, "from", args)
	return constructorof(type(obj))(*args)
