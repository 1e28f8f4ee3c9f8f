"""
The fundamental vocabulary of the walk: keys, descriptors, and the
three kinds of thing a global binding can turn out to be.

These live apart from the walker so that reflection, naming, and both
pipelines can share them without circular imports.
"""
from typing import Any, NamedTuple, Optional, Union, Callable

class _Absent:
	def __repr__(self): return "<absent>"
	def __bool__(self): return False

ABSENT = _Absent()

class SymbolKey(NamedTuple):
	"""
	A key which is not a plain word. The Python host presents the special
	method names (dunders) this way, since they play the part that well-known
	symbols play elsewhere: protocol hooks rather than ordinary members.
	"""
	description: Optional[str]
	attribute: str
	def __repr__(self): return "<Symbol %r>" % self.description

Key = Union[str, SymbolKey]

def attribute_of(key:Key) -> str:
	""" The real attribute name behind a key """
	assert isinstance(key, (str, SymbolKey)), key
	return key.attribute if isinstance(key, SymbolKey) else key

class Descriptor(NamedTuple):
	"""
	One own property, as seen at walk time.
	Accessor functions take the receiver explicitly: get(receiver), set(receiver, value).
	"""
	value: Any = ABSENT
	get: Optional[Callable] = None
	set: Optional[Callable] = None
	enumerable: bool = True
	accessor: bool = False

#######################################################################
# Classification of a source entity. Exactly one of these per global.

class Entity(NamedTuple):
	value: Any

class CallableEntity(Entity):
	""" Functions and classes: walked for own properties, then the prototype if any. """

class ConstructorLike(Entity):
	""" Not callable, but owns an attribute namespace: modules, namespaces, instances. """

class PlainValue(Entity):
	""" Anything else. Becomes a single entry holding the value itself. """
