"""
The Global Registry: which names existed before we started.

Capture happens once, up front, so that nothing the process itself defines
later (including our own products) ever gets walked. The names are frozen;
the values are looked up live at walk time.
"""
import builtins
from typing import Any, Mapping, NamedTuple, Optional

class Registry(NamedTuple):
	names: tuple[str, ...]
	namespace: Mapping[str, Any]

	def lookup(self, name:str) -> Any:
		# A name deleted since capture reads as None, which is a plain value.
		return self.namespace.get(name)

def capture(namespace:Optional[Mapping[str, Any]]=None) -> Registry:
	""" Snapshot the names of a namespace; by default, the built-in one. """
	if namespace is None: namespace = vars(builtins)
	return Registry(tuple(namespace), namespace)

AT_START = capture()
