from risp.types.symbol import Symbol, Keyword
from risp.types.structured import Structured
from risp.types.environment import Environment
from risp.types.closure import Closure
from risp.types.primitive import Primitive

__all__ = ["Symbol", "Keyword", "Structured", "Environment", "Closure", "Primitive"]
