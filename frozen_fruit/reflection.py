"""
Host reflection: Python's answer to "own keys" and "own property descriptor".

A Python class keeps everything in one __dict__, where other runtimes keep a
constructor's statics apart from its prototype. So a class is seen through two
views over the same __dict__, and each entry belongs to exactly one of them:

	StaticView:    static/class methods, plus entries which are not descriptors at all.
	PrototypeView: everything that binds to an instance, i.e. methods and accessors.

Anything else with an attribute namespace is seen through an ObjectView of vars(obj).
"""
import types
from typing import Any, Iterator, Optional
from .ontology import Key, Descriptor, CallableEntity, ConstructorLike, PlainValue, Entity, attribute_of
from .naming import is_special, symbol_for

_STATIC_KINDS = (staticmethod, classmethod, types.ClassMethodDescriptorType)

def classify(value:Any) -> Entity:
	if callable(value): return CallableEntity(value)
	try: vars(value)
	except TypeError: return PlainValue(value)
	else: return ConstructorLike(value)

def _is_static(entry) -> bool:
	return isinstance(entry, _STATIC_KINDS) or not hasattr(type(entry), "__get__")

def _is_accessor(entry) -> bool:
	kind = type(entry)
	if hasattr(kind, "__set__") or hasattr(kind, "__delete__"): return True
	return hasattr(kind, "__get__") and not callable(entry)

def _getter(entry):
	get = type(entry).__get__
	def getter(receiver): return get(entry, receiver, type(receiver))
	return getter

def _setter(entry):
	set = type(entry).__set__
	def setter(receiver, value): set(entry, receiver, value)
	return setter

def _key(attribute:str) -> Key:
	return symbol_for(attribute) if is_special(attribute) else attribute

def _enumerable(attribute:str) -> bool:
	return not attribute.startswith("_")

###############################################################################

class View:
	""" Something the property walker can enumerate. """
	subject: Any

	def __init__(self, subject):
		self.subject = subject

	def __repr__(self): return "<%s of %r>" % (type(self).__name__, self.subject)

	def _namespace(self) -> dict:
		raise NotImplementedError(type(self))

	def _admits(self, entry) -> bool:
		return True

	def own_keys(self) -> Iterator[Key]:
		for attribute, entry in list(self._namespace().items()):
			if self._admits(entry): yield _key(attribute)

	def own_descriptor(self, key:Key) -> Descriptor:
		attribute = attribute_of(key)
		return Descriptor(value=self._namespace()[attribute], enumerable=_enumerable(attribute))

class ObjectView(View):
	def _namespace(self) -> dict:
		# Builtin functions, for one, have no namespace of their own.
		try: return vars(self.subject)
		except TypeError: return {}

class StaticView(View):
	""" A class's own properties, as distinct from what its instances see. """
	def _namespace(self) -> dict:
		return self.subject.__dict__

	def _admits(self, entry) -> bool:
		return _is_static(entry)

	def own_descriptor(self, key:Key) -> Descriptor:
		attribute = attribute_of(key)
		entry = self.subject.__dict__[attribute]
		if isinstance(entry, _STATIC_KINDS):
			# Resolve against the class itself, as `cls.attribute` would.
			entry = entry.__get__(None, self.subject)
		return Descriptor(value=entry, enumerable=_enumerable(attribute))

class PrototypeView(View):
	""" The members a class lends to its instances. """

	def _namespace(self) -> dict:
		return self.subject.__dict__

	def _admits(self, entry) -> bool:
		return not _is_static(entry)

	def own_descriptor(self, key:Key) -> Descriptor:
		attribute = attribute_of(key)
		entry = self.subject.__dict__[attribute]
		enumerable = _enumerable(attribute)
		if isinstance(entry, property):
			return Descriptor(get=entry.fget, set=entry.fset, enumerable=enumerable, accessor=True)
		if _is_accessor(entry):
			kind = type(entry)
			get = _getter(entry) if hasattr(kind, "__get__") else None
			set = _setter(entry) if hasattr(kind, "__set__") else None
			return Descriptor(get=get, set=set, enumerable=enumerable, accessor=True)
		return Descriptor(value=entry, enumerable=enumerable)

###############################################################################

def own_view(entity:Entity) -> View:
	value = entity.value
	if isinstance(value, type): return StaticView(value)
	return ObjectView(value)

def prototype_of(entity:Entity) -> Optional[View]:
	""" Classes have a prototype; nothing else does. """
	value = entity.value
	if isinstance(value, type): return PrototypeView(value)
	return None
