# Core type aliases for Risp's data model.
# Code (forms) and runtime values share plain Python types where they can:
# int, float, bool, str and list. Symbols, keywords, functions and
# structured fetch results get their own small classes under risp.types.
#
# Naming guidance:
# - SExpression: Use in reader/parser code to denote syntactic forms.
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

from loguru import logger

# Runtime value alias
LispValue = Any
# Forms alias
SExpression = Any

# Evaluator function type: Python evaluator used inside special forms/builtins
EvaluatorFn = Callable[..., LispValue]

# Library code stays quiet until a host calls risp.logging_utils.configure_logging
logger.disable("risp")
