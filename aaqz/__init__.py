# Core type aliases for the AAQZ interpreter.
# Surface syntax arrives as plain Python data (int, str, Symbol, list/tuple),
# while parsed code and runtime results use the dataclasses in aaqz.types.
#
# Naming guidance:
# - SExpression: use in reader/parser code to denote untyped surface data.

from typing import Any

# Untyped surface data accepted by the parser
SExpression = Any
