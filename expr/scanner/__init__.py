from .scanner import Scanner, lex
from .token import Token, TokenKind
