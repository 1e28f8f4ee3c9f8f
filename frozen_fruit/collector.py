"""
The runtime pipeline: live, unbound references filed under flattened names,
then frozen so nobody can quietly swap one out afterwards.
"""
from collections.abc import Mapping
from types import MappingProxyType
from functools import update_wrapper
from typing import Any, Optional, Iterator
from .ontology import Key, Descriptor
from .diagnostics import Report, Frozen
from .registry import Registry
from .walker import Walker

def unbind(fn):
	"""
	Turn a member into a plain function of its receiver, so that
		unbind(fn)(receiver, *args)
	does what receiver.fn(*args) would have done, had nobody since tampered
	with the receiver's class. Binding goes through the descriptor protocol
	of the member as captured now, not as looked up later.
	"""
	bind = getattr(type(fn), "__get__", None)
	if bind is None:
		def unbound(receiver, *args, **kwargs):
			return fn(receiver, *args, **kwargs)
	else:
		def unbound(receiver, *args, **kwargs):
			return bind(fn, receiver, type(receiver))(*args, **kwargs)
	return update_wrapper(unbound, fn)

class Draft(dict):
	""" A namespace under construction. Remembers which entries are non-enumerable. """
	def __init__(self):
		super().__init__()
		self.hidden = set()

	def freeze(self) -> "FrozenNamespace":
		return FrozenNamespace(self, self.hidden)

class FrozenNamespace(Mapping):
	"""
	The finished product. Read it by key or by attribute;
	every attempt to change it raises Frozen.
	"""
	__slots__ = ("_entries", "_hidden")

	def __init__(self, entries:dict, hidden=()):
		object.__setattr__(self, "_entries", MappingProxyType(dict(entries)))
		object.__setattr__(self, "_hidden", frozenset(hidden))

	def __getitem__(self, name:str) -> Any: return self._entries[name]
	def __iter__(self) -> Iterator[str]: return iter(self._entries)
	def __len__(self) -> int: return len(self._entries)
	def __repr__(self): return "<FrozenNamespace of %d primordials>" % len(self._entries)

	def __getattr__(self, name:str) -> Any:
		# Private names are never entries; a half-built instance must not recurse here.
		if name.startswith("_"): raise AttributeError(name)
		try: return self._entries[name]
		except KeyError: raise AttributeError(name) from None

	def __setattr__(self, name, value): raise Frozen(name)
	def __delattr__(self, name): raise Frozen(name)
	def __setitem__(self, name, value): raise Frozen(name)
	def __delitem__(self, name): raise Frozen(name)

	# Immutable, so a copy may as well be the original.
	def __copy__(self): return self
	def __deepcopy__(self, memo): return self

	def is_enumerable(self, name:str) -> bool:
		return name in self._entries and name not in self._hidden

	def enumerable(self) -> list[str]:
		return [name for name in self._entries if name not in self._hidden]

class RuntimeWalker(Walker):
	dest: Draft

	def __init__(self, dest:Optional[dict]=None, report:Optional[Report]=None):
		super().__init__(Draft() if dest is None else dest, report)

	def define(self, name:str, product:Any, enumerable:bool):
		super().define(name, product, enumerable)
		# Any mapping will do as a destination; only a Draft remembers enumerability.
		if not isinstance(self.dest, Draft): return
		if enumerable: self.dest.hidden.discard(name)
		else: self.dest.hidden.add(name)

	def plain(self, value): return value

	def direct(self, desc:Descriptor, owner, key:Key, is_prototype:bool):
		if is_prototype and callable(desc.value):
			return unbind(desc.value)
		return desc.value

	def getter(self, desc:Descriptor, owner, key:Key): return unbind(desc.get)
	def setter(self, desc:Descriptor, owner, key:Key): return unbind(desc.set)

def get_primordial(src:Any, name:Optional[str]=None, dest:Optional[dict]=None) -> dict:
	"""
	File the primordials of one source under `name` (by default, its __name__)
	into `dest` (by default, a fresh Draft; any dict will do), and return that.
	"""
	return RuntimeWalker(dest).get_primordial(src, name)

def build(registry:Registry, report:Optional[Report]=None) -> FrozenNamespace:
	walker = RuntimeWalker(report=report)
	walker.define("GetPrimordial", get_primordial, True)
	walker.collect(registry)
	return walker.dest.freeze()
