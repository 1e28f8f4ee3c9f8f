"""
Key formatting: how a property key becomes a capitalized name fragment
fit for gluing onto a prefix like "ValueErrorPrototype".
"""
from typing import Optional
from .ontology import Key, SymbolKey

WELL_KNOWN_PREFIX = "Symbol."
SYMBOL_WORD = "Symbol"

def _capitalize(text:str) -> str:
	# Unlike str.capitalize, this leaves the rest of the word alone.
	return text[:1].upper() + text[1:]

def format_symbol(description:Optional[str]) -> str:
	"""
	"Symbol.iter" -> "SymbolIter"; "foo.bar_baz" -> "SymbolFooBar_baz".
	A missing or empty description leaves just the bare word.
	"""
	description = description or ""
	if description.startswith(WELL_KNOWN_PREFIX):
		description = description[len(WELL_KNOWN_PREFIX):]
	return SYMBOL_WORD + ''.join(map(_capitalize, description.split('.')))

def new_key(key:Key) -> str:
	if isinstance(key, SymbolKey):
		return format_symbol(key.description)
	assert isinstance(key, str), key
	return _capitalize(key)

def symbol_for(attribute:str) -> SymbolKey:
	""" Present a special method name as a well-known symbol: __iter__ -> Symbol.iter """
	assert is_special(attribute), attribute
	return SymbolKey(WELL_KNOWN_PREFIX + attribute[2:-2], attribute)

def is_special(attribute:str) -> bool:
	return len(attribute) > 4 and attribute.startswith("__") and attribute.endswith("__")
