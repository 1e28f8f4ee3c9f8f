"""
The type pipeline: the same walk, but each product is a type expression
describing the primordial rather than the primordial itself. The result is
printed as a stub, meant to be redirected into a .pyi file:

	py -m frozen_fruit > primordials.pyi

Only plain-word keys get described. Special methods and anything
else not starting with a letter are skipped.
"""
import builtins, types
from typing import Any, Optional
from .ontology import Key, Descriptor
from .diagnostics import Report
from .reflection import View, PrototypeView, StaticView
from .registry import Registry, AT_START
from .walker import Walker

PREAMBLE = '''
import types
from typing import Any, Callable, Concatenate, Literal, TypedDict

type UnbindFunction[Owner, Key: str, **Params, Result] = Callable[Concatenate[Owner, Params], Result]

type UnbindGetter[Owner, Key: str, Value] = Callable[[Owner], Value]

type UnbindSetter[Owner, Key: str, Value] = Callable[[Owner, Value], None]

Primordials = TypedDict("Primordials", {
  "GetPrimordial": Callable[..., dict[str, Any]],
'''.strip()

CLOSING = "})"

_LITERAL_KINDS = (bool, int, str, bytes)

def type_expression(cls:type) -> str:
	""" How a stub may spell this class, if it can at all. """
	if cls is type(None): return "None"
	if getattr(builtins, cls.__name__, None) is cls: return cls.__name__
	for name, value in vars(types).items():
		if value is cls and not name.startswith("_"): return "types." + name
	return "Any"

def value_type(value:Any) -> str:
	if isinstance(value, type):
		spelling = type_expression(value)
		return "type" if spelling == "Any" else "type[%s]" % spelling
	if callable(value): return "Callable[..., Any]"
	return type_expression(type(value))

def literal_type(value:Any) -> str:
	if value is None: return "None"
	if type(value) in _LITERAL_KINDS: return "Literal[%r]" % (value,)
	return value_type(value)

def _literal_key(key:Key) -> str:
	return "Literal[%r]" % key

def entry_line(name:str, expression:str) -> str:
	assert '"' not in name, name
	return '  "%s": %s,' % (name, expression)

class TypeWalker(Walker):
	dest: dict[str, str]

	def admits(self, key:Key) -> bool:
		return isinstance(key, str) and key[:1].isascii() and key[:1].isalpha()

	def owner(self, source:View, prefix:str) -> str:
		if isinstance(source, PrototypeView): return prefix
		if isinstance(source, StaticView): return "type[%s]" % prefix
		return type_expression(type(source.subject))

	def plain(self, value) -> str:
		return literal_type(value)

	def direct(self, desc:Descriptor, owner:str, key:Key, is_prototype:bool) -> str:
		if is_prototype and callable(desc.value):
			return "UnbindFunction[%s, %s, ..., Any]" % (owner, _literal_key(key))
		return value_type(desc.value)

	def getter(self, desc:Descriptor, owner:str, key:Key) -> str:
		return "UnbindGetter[%s, %s, Any]" % (owner, _literal_key(key))

	def setter(self, desc:Descriptor, owner:str, key:Key) -> str:
		return "UnbindSetter[%s, %s, Any]" % (owner, _literal_key(key))

def declarations(registry:Registry, report:Optional[Report]=None) -> str:
	entries = TypeWalker(report=report).collect(registry)
	lines = [PREAMBLE, ""]
	lines.extend(entry_line(name, expression) for name, expression in entries.items())
	lines.append(CLOSING)
	return "\n".join(lines)

def main():
	print(declarations(AT_START))
