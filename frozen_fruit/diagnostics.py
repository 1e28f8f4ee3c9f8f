"""
Errors and chatter.

The walk has almost nothing that can go wrong in the ordinary course of
events, so the Report here is mostly a place to put verbose narration and
to keep track of the few things worth noticing: names produced twice, and
keys the type emitter chose not to describe.
"""
import sys
from typing import Any

class ConfigurationError(Exception):
	""" A source reached the walk without any name to file it under. Fatal. """

class Frozen(TypeError):
	""" Somebody tried to change a finished namespace of primordials. """

class Report:
	def __init__(self, *, verbose:int=0):
		self._verbose = verbose or 0   # Because None is incomparable.
		self.collisions : list[tuple[str, Any, Any]] = []
		self.skips = 0

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def collision(self, name:str, first:Any, later:Any):
		""" The naming scheme produced the same flattened name twice. The later one wins. """
		self.collisions.append((name, first, later))
		self.info("Name produced twice:", name)

	def skipped(self, owner:str, key:Any):
		self.skips += 1
		if self._verbose > 1:
			self.info("Skipping", repr(key), "of", owner)
