"""
The primordials of this process's built-in namespace, as it stood when
frozen_fruit was first loaded:

	from frozen_fruit.primordials import primordials
	args = primordials.BaseExceptionPrototypeGetArgs(error)
	primordials.BaseExceptionPrototypeAdd_note(error, "while loading the config")
"""
from . import collector, registry

__all__ = ["primordials"]

primordials = collector.build(registry.AT_START)
