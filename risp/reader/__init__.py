from risp.reader.lexer import lex
from risp.reader.parser import TokenStream, read

__all__ = ["lex", "TokenStream", "read"]
