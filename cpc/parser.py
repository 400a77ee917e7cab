"""A recursive-descent parser for formulas of classical propositional calculus
in the usual notation with the connectives ``¬ ∧ ∨ → ↔``, parentheses, and
atoms ``A`` through ``Z``. From weakest to strongest binding, the grammar is::

    Formula       := Biconditional
    Biconditional := Implication ( '↔' Implication )*
    Implication   := Disjunction ( '→' Implication )?
    Disjunction   := Conjunction ( '∨' Conjunction )*
    Conjunction   := Unary ( '∧' Unary )*
    Unary         := '¬' Unary | '(' Formula ')' | Atom

Chains of ``↔``, ``∨``, ``∧`` fold to the left, chains of ``→`` to the right:

>>> parse_formula('P ∧ Q ∨ R')
Or(And(Atom('P'), Atom('Q')), Atom('R'))
>>> parse_formula('P → Q → R')
Implies(Atom('P'), Implies(Atom('Q'), Atom('R')))
>>> parse_formula('P ↔ Q ↔ R')
Equivalent(Equivalent(Atom('P'), Atom('Q')), Atom('R'))
"""

from __future__ import annotations

from typing import Final, Optional

from .atomic import ATOM_NAMES, Atom
from .boolean import And, Equivalent, Implies, Not, Or
from .formula import Formula
from .support.excepthook import NoTraceException


NOT: Final = '¬'
AND: Final = '∧'
OR: Final = '∨'
IMPLIES: Final = '→'
EQUIVALENT: Final = '↔'
LPAR: Final = '('
RPAR: Final = ')'

SYMBOLS: Final = frozenset((NOT, AND, OR, IMPLIES, EQUIVALENT, LPAR, RPAR))

WHITESPACE: Final = frozenset(' \t\n\r')


class ParserError(NoTraceException, SyntaxError):
    """Raised when a string is not a well-formed formula. Callers typically
    treat this as "not a formula" and fall back to another strategy.
    """
    pass


class TokenizationError(ParserError):
    """Raised by :func:`tokenize` in strict mode on characters that are
    neither whitespace nor part of the formula alphabet.
    """
    pass


class Token(str):
    """A single symbol of a formula together with its offset `pos` in the
    source string. Tokens compare equal to plain strings:

    >>> tokens = tokenize('¬(P ∧ Q)')
    >>> tokens == ['¬', '(', 'P', '∧', 'Q', ')']
    True
    >>> [token.pos for token in tokens]
    [0, 1, 2, 4, 6, 7]
    """

    pos: int

    def __new__(cls, text: str, pos: int) -> Token:
        self = super().__new__(cls, text)
        self.pos = pos
        return self

    @property
    def is_atom(self) -> bool:
        return str(self) in ATOM_NAMES


def tokenize(formula: str, strict: bool = False) -> list[Token]:
    """Split `formula` into tokens. Whitespace is insignificant. Other
    characters outside the formula alphabet are silently dropped, unless
    `strict` is :obj:`True`:

    >>> tokenize('P & q')
    ['P']
    >>> tokenize('P & q', strict=True)
    Traceback (most recent call last):
    ...
    cpc.parser.TokenizationError: unexpected character '&' at position 2
    """
    tokens = []
    for pos, char in enumerate(formula):
        if char in WHITESPACE:
            continue
        if char in SYMBOLS or char in ATOM_NAMES:
            tokens.append(Token(char, pos))
        elif strict:
            raise TokenizationError(f'unexpected character {char!r} at position {pos}')
    return tokens


class Parser:
    """Holds the token sequence of a single formula together with a cursor.
    Each method ``parse_*`` corresponds to one rule of the grammar and leaves
    the cursor behind the text it has consumed.
    """

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        self.index = 0

    def advance(self) -> Token:
        """Consume and return the current token.
        """
        token = self.peek()
        if token is None:
            raise ParserError(f'unexpected end of formula at position {self._end_pos()}')
        self.index += 1
        return token

    def expect(self, symbol: str) -> Token:
        """Consume the current token, which must be `symbol`.
        """
        token = self.peek()
        if token is None:
            raise ParserError(f"expected '{symbol}' at position {self._end_pos()}, "
                              f"got end of formula")
        if token != symbol:
            raise ParserError(f"expected '{symbol}' at position {token.pos}, got '{token}'")
        self.index += 1
        return token

    def peek(self) -> Optional[Token]:
        """The current token, or :obj:`None` at the end.
        """
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return None

    def _end_pos(self) -> int:
        if self.tokens:
            return self.tokens[-1].pos + 1
        return 0

    def parse(self) -> Formula:
        """Parse a complete formula. All tokens must be consumed.
        """
        f = self.parse_biconditional()
        token = self.peek()
        if token is not None:
            raise ParserError(f"unexpected '{token}' at position {token.pos} "
                              f"after complete formula")
        return f

    def parse_biconditional(self) -> Formula:
        f = self.parse_implication()
        while self.peek() == EQUIVALENT:
            self.advance()
            f = Equivalent(f, self.parse_implication())
        return f

    def parse_implication(self) -> Formula:
        f = self.parse_disjunction()
        if self.peek() == IMPLIES:
            self.advance()
            return Implies(f, self.parse_implication())
        return f

    def parse_disjunction(self) -> Formula:
        f = self.parse_conjunction()
        while self.peek() == OR:
            self.advance()
            f = Or(f, self.parse_conjunction())
        return f

    def parse_conjunction(self) -> Formula:
        f = self.parse_unary()
        while self.peek() == AND:
            self.advance()
            f = And(f, self.parse_unary())
        return f

    def parse_unary(self) -> Formula:
        token = self.peek()
        if token == NOT:
            self.advance()
            return Not(self.parse_unary())
        if token == LPAR:
            self.advance()
            f = self.parse_biconditional()
            self.expect(RPAR)
            return f
        token = self.advance()
        if not token.is_atom:
            raise ParserError(f"expected an atom at position {token.pos}, got '{token}'")
        return Atom(str(token))


def parse_formula(formula: str, strict: bool = False) -> Formula:
    """Parse `formula` into a :class:`.Formula`. Raise :exc:`ParserError`
    when `formula` is not well-formed:

    >>> parse_formula('¬(P ∧ Q)')
    Not(And(Atom('P'), Atom('Q')))
    >>> parse_formula('(P ∧ Q')
    Traceback (most recent call last):
    ...
    cpc.parser.ParserError: expected ')' at position 6, got end of formula
    >>> parse_formula('P Q')
    Traceback (most recent call last):
    ...
    cpc.parser.ParserError: unexpected 'Q' at position 2 after complete formula
    >>> parse_formula('P ∧')
    Traceback (most recent call last):
    ...
    cpc.parser.ParserError: unexpected end of formula at position 3

    Parentheses nested beyond the recursion limit of the interpreter are
    reported as :exc:`ParserError`, too:

    >>> parse_formula('(' * 1000 + 'P' + ')' * 1000)
    Traceback (most recent call last):
    ...
    cpc.parser.ParserError: formula nested too deeply
    """
    parser = Parser(tokenize(formula, strict))
    try:
        return parser.parse()
    except RecursionError:
        raise ParserError('formula nested too deeply') from None


class CPCParser:
    """A callable parser for interactive use:

    >>> cpc('P → Q')
    Implies(Atom('P'), Atom('Q'))
    """

    def __init__(self, strict: bool = False) -> None:
        self.strict = strict

    def __call__(self, s: str) -> Formula:
        return parse_formula(s, self.strict)


cpc = CPCParser()
