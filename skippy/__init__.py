# Core type aliases for Skippy's data model.
# Every runtime datum, including errors, is a `Value` (see skippy.types.value).
#
# Naming guidance:
# - SExpression: use in reader code for freshly read code-as-data trees.
# - LispValue:  use in evaluator/runtime code for evaluated results.
# Both aliases resolve to `Value`; the distinction is documentation only.

from skippy.types.value import Value

__version__ = "0.0.7"

# Runtime value alias
LispValue = Value
SExpression = Value
