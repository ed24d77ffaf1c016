"""yazlang: a minimal C-like scripting language.

Source text is tokenized by :mod:`yazlang.lexer`, parsed into a tuple-based
AST by :mod:`yazlang.parser` and executed by :mod:`yazlang.interpreter`.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

__version__ = "0.1.0"
