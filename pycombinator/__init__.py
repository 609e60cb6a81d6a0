# Core type aliases for the PyCombinator data model.
# Numbers are plain Python int/float on the host side; inside the language
# they are wrapped in pycombinator.types.values.Number.
#
# Naming guidance:
# - Numeric:     raw host number handled by primitives.
# - NativeFn:    host callable registered as a primitive.
# - PrimitiveTable: name -> NativeFn mapping used to build the root frame.

from typing import Callable, Mapping, Union

Numeric = Union[int, float]
NativeFn = Callable[..., Numeric]
PrimitiveTable = Mapping[str, NativeFn]
