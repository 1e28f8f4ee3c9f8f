import unittest

from frozen_fruit.naming import new_key, format_symbol, symbol_for, is_special
from frozen_fruit.ontology import SymbolKey

class KeyFormatterTests(unittest.TestCase):
	def test_words_get_a_capital_and_nothing_else(self):
		for key, expect in [
			("isArray", "IsArray"),
			("with_traceback", "With_traceback"),
			("Already", "Already"),
			("x", "X"),
			("", ""),
		]:
			with self.subTest(key):
				self.assertEqual(expect, new_key(key))

	def test_well_known_symbols_lose_their_namespace(self):
		self.assertEqual("SymbolIterator", new_key(SymbolKey("Symbol.iterator", "__iterator__")))
		self.assertEqual("SymbolAsyncIterator", format_symbol("Symbol.asyncIterator"))

	def test_other_symbols_are_split_on_dots(self):
		self.assertEqual("SymbolFooBar_baz", format_symbol("foo.bar_baz"))
		self.assertEqual("SymbolNodejs", format_symbol("nodejs"))

	def test_symbol_without_description_is_the_bare_word(self):
		self.assertEqual("Symbol", format_symbol(""))
		self.assertEqual("Symbol", new_key(SymbolKey(None, "__weird__")))

	def test_special_methods_present_as_symbols(self):
		key = symbol_for("__init_subclass__")
		self.assertEqual(SymbolKey("Symbol.init_subclass", "__init_subclass__"), key)
		self.assertEqual("SymbolInit_subclass", new_key(key))
		self.assertEqual("SymbolIter", new_key(symbol_for("__iter__")))

	def test_what_counts_as_special(self):
		self.assertTrue(is_special("__add__"))
		self.assertFalse(is_special("____"))
		self.assertFalse(is_special("_private"))
		self.assertFalse(is_special("__mangled"))
		self.assertFalse(is_special("plain"))


if __name__ == '__main__':
	unittest.main()
