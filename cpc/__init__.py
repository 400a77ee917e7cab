__version__ = '0.1'

___author___ = 'cpc developers'
___license__ = 'GPL-2.0-or-later'
___status__ = 'Prototype'

from .support import excepthook  # noqa, installs the excepthook

from .formula import Formula, PRECEDENCE  # noqa

from .atomic import Atom  # noqa

from .boolean import (BooleanFormula, BinaryFormula, Equivalent, Iff,  # noqa
                      Implies, And, Or, Not)

from .parser import ParserError, TokenizationError, Token, tokenize, parse_formula, cpc  # noqa

from .renderer import render  # noqa

from .translation import Mode, Options, Translation, TranslationError, Translator  # noqa


__all__ = [
    'Formula', 'Atom', 'Equivalent', 'Iff', 'Implies', 'And', 'Or', 'Not',

    'tokenize', 'parse_formula', 'cpc', 'ParserError', 'TokenizationError',

    'render',

    'Mode', 'Options', 'Translation', 'TranslationError', 'Translator'
]
