"""structidl struct parser and renderers."""

from .cursor import Cursor as Cursor
from .errors import *
from .lexer import TokenStream as TokenStream
from .lexer import tokenize as tokenize
from .parser import *
from .types import *
