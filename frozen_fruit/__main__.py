"""
Print type declarations for the primordials of the built-in namespace.

For example:

    py -m frozen_fruit > primordials.pyi

There are no options. The declarations describe whatever the built-in
namespace held when this process started.
"""
from frozen_fruit.emitter import main

main()
