"""
The one non-trivial algorithm here: walk each capitalized global, reflect
over its own properties and those of its prototype, and file a product under
a flattened name for each.

The walk is the same whether the products are live values or descriptions
of their types. Subclasses decide what gets filed; this class decides where.

Naming, for a global G and a key k formatted as K:

	G                     a plain global, taken whole
	GK                    an own property of G
	GPrototypeK           a member G lends to its instances
	G[Prototype]GetK      the getter of an accessor
	G[Prototype]SetK      the setter of an accessor
"""
from typing import Any, Optional
from boozetools.support.foundation import Visitor
from .ontology import Key, Descriptor, Entity, CallableEntity, ConstructorLike, PlainValue
from .diagnostics import Report, ConfigurationError
from .naming import new_key
from .reflection import View, classify, own_view, prototype_of
from .registry import Registry

PROTOTYPE = "Prototype"

class Walker(Visitor):
	dest: dict
	report: Report

	def __init__(self, dest:Optional[dict]=None, report:Optional[Report]=None):
		self.dest = {} if dest is None else dest
		self.report = report or Report()

	def collect(self, registry:Registry) -> dict:
		""" The driving loop: every capitalized name in the snapshot, in snapshot order. """
		for name in registry.names:
			if name[:1].isupper():
				self.report.info("Walking", name)
				self.get_primordial(registry.lookup(name), name)
		return self.dest

	def get_primordial(self, src:Any, name:Optional[str]=None) -> dict:
		if name is None:
			name = getattr(src, "__name__", None)
		if not name:
			raise ConfigurationError("src does not have a name", src)
		self.visit(classify(src), name)
		return self.dest

	def visit_PlainValue(self, entity:PlainValue, name:str):
		self.define(name, self.plain(entity.value), True)

	def visit_CallableEntity(self, entity:CallableEntity, name:str):
		self.walk_entity(entity, name)

	def visit_ConstructorLike(self, entity:ConstructorLike, name:str):
		self.walk_entity(entity, name)

	def walk_entity(self, entity:Entity, name:str):
		self.copy_properties(own_view(entity), name, False)
		prototype = prototype_of(entity)
		if prototype is not None:
			self.copy_properties(prototype, name, True)

	def copy_properties(self, source:View, prefix:str, is_prototype:bool):
		owner = self.owner(source, prefix)
		if is_prototype: prefix += PROTOTYPE
		for key in source.own_keys():
			if not self.admits(key):
				self.report.skipped(prefix, key)
				continue
			fragment = new_key(key)
			desc = source.own_descriptor(key)
			if desc.accessor:
				self.copy_descriptor(prefix, fragment, desc, owner, key)
			else:
				product = self.direct(desc, owner, key, is_prototype)
				self.define(prefix + fragment, product, desc.enumerable)

	def copy_descriptor(self, prefix:str, fragment:str, desc:Descriptor, owner:Any, key:Key):
		""" Zero, one, or two entries: never a plain one for an accessor. """
		if desc.get is not None:
			self.define(prefix + "Get" + fragment, self.getter(desc, owner, key), desc.enumerable)
		if desc.set is not None:
			self.define(prefix + "Set" + fragment, self.setter(desc, owner, key), desc.enumerable)

	def define(self, name:str, product:Any, enumerable:bool):
		if name in self.dest:
			self.report.collision(name, self.dest[name], product)
		self.dest[name] = product

	# Hooks for the two pipelines:

	def admits(self, key:Key) -> bool:
		return True

	def owner(self, source:View, prefix:str) -> Any:
		""" Whatever the products need to know about the source they came from. """
		return None

	def plain(self, value:Any) -> Any: raise NotImplementedError(type(self))
	def direct(self, desc:Descriptor, owner:Any, key:Key, is_prototype:bool) -> Any: raise NotImplementedError(type(self))
	def getter(self, desc:Descriptor, owner:Any, key:Key) -> Any: raise NotImplementedError(type(self))
	def setter(self, desc:Descriptor, owner:Any, key:Key) -> Any: raise NotImplementedError(type(self))
