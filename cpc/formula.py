from __future__ import annotations

from abc import abstractmethod
from types import MappingProxyType
from typing import Any, Final, Iterator, Mapping, Optional, Self
from typing_extensions import TypeIs

from IPython.lib import pretty
import sympy
from sympy.logic import boolalg


class Formula:
    r"""This abstract base class implements representations of and methods on
    formulas of classical propositional calculus, recursively built from
    atoms using the Boolean operators:

    +-----------------+---------------+---------------+--------------+-------------------------+-----------------------------+
    | atom            | :math:`\lnot` | :math:`\land` | :math:`\lor` | :math:`\longrightarrow` | :math:`\longleftrightarrow` |
    +-----------------+---------------+---------------+--------------+-------------------------+-----------------------------+
    | :class:`.Atom`  | :class:`.Not` | :class:`.And` | :class:`.Or` | :class:`.Implies`       | :class:`.Equivalent`        |
    +-----------------+---------------+---------------+--------------+-------------------------+-----------------------------+

    As an abstract base class, :class:`Formula` cannot be instantiated. The
    set of subclasses is closed; all methods here dispatch over exactly these
    six operators.

    >>> P, Q, R = Atom('P'), Atom('Q'), Atom('R')
    >>> f = ~(P & Q) >> R
    >>> f
    Implies(Not(And(Atom('P'), Atom('Q'))), Atom('R'))
    >>> print(f)
    ¬(P ∧ Q) → R
    """  # noqa

    _hash: Optional[int]

    @property
    def op(self) -> type[Self]:
        """Operator. This property yields the respective subclass of
        :class:`Formula`.
        """
        return type(self)

    @property
    def args(self) -> tuple[Any, ...]:
        """The arguments of a formula as a tuple. For :class:`.Atom` this is
        the 1-tuple holding the name.

        .. seealso::
            * :attr:`Not.operand <.boolean.Not.operand>`
            * :attr:`BinaryFormula.left <.boolean.BinaryFormula.left>`
            * :attr:`BinaryFormula.right <.boolean.BinaryFormula.right>`
        """
        return self._args

    @args.setter
    def args(self, args: tuple[Any, ...]) -> None:
        self._args = args

    def __and__(self, other: Formula) -> Formula:
        """Override the :obj:`& <object.__and__>` operator to apply
        :class:`.boolean.And`.

        >>> Atom('P') & Atom('Q') & Atom('R')
        And(And(Atom('P'), Atom('Q')), Atom('R'))
        """
        return And(self, other)

    def __eq__(self, other: object) -> bool:
        """A recursive test for structural equality of `self` and `other`.

        Note that this is not logical equivalence.

        >>> And(Atom('P'), Atom('Q')) == And(Atom('P'), Atom('Q'))
        True
        >>> And(Atom('P'), Atom('Q')) == And(Atom('Q'), Atom('P'))
        False
        """
        if self is other:
            return True
        if not isinstance(other, Formula):
            return False
        if self.op is not other.op:
            return False
        if hash(self) != hash(other):
            return False
        return self.args == other.args

    def __getnewargs__(self) -> tuple[Any, ...]:
        return self.args

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash((self.op.__name__, self.args))
        return self._hash

    @abstractmethod
    def __init__(self, *args: object) -> None:
        """This abstract base class is not supposed to have instances itself.
        Technically this is enforced via this abstract initializer.
        """
        self._hash = None

    def __invert__(self) -> Formula:
        """Override the :obj:`~ <object.__invert__>` operator to apply
        :class:`.boolean.Not`.

        >>> ~ Atom('P')
        Not(Atom('P'))
        """
        return Not(self)

    def __lshift__(self, other: Formula) -> Formula:
        r"""Override the :obj:`\<\< <object.__lshift__>` operator to apply
        :class:`.boolean.Implies` with reversed sides.

        >>> Atom('P') << Atom('Q')
        Implies(Atom('Q'), Atom('P'))
        """
        return Implies(other, self)

    def __or__(self, other: Formula) -> Formula:
        """Override the :obj:`| <object.__or__>` operator to apply
        :class:`.boolean.Or`.

        >>> Atom('P') | Atom('Q')
        Or(Atom('P'), Atom('Q'))
        """
        return Or(self, other)

    def __repr__(self) -> str:
        """A representation of the :class:`Formula` `self` that is suitable
        for use as an input.
        """
        return f'{self.op.__name__}({", ".join(repr(arg) for arg in self.args)})'

    def __rshift__(self, other: Formula) -> Formula:
        """Override the :obj:`>> <object.__rshift__>` operator to apply
        :class:`.boolean.Implies`.

        >>> Atom('P') >> Atom('Q')
        Implies(Atom('P'), Atom('Q'))
        """
        return Implies(self, other)

    def __str__(self) -> str:
        """Representation in CPC notation. Parentheses are inserted only where
        precedence or associativity requires them, so that the result parses
        back to `self`:

        >>> from cpc.parser import parse_formula
        >>> f = parse_formula('(P ∧ Q) ∨ ¬(R → S) ↔ (P → Q) → R')
        >>> str(f)
        'P ∧ Q ∨ ¬(R → S) ↔ (P → Q) → R'
        >>> parse_formula(str(f)) == f
        True
        """
        SYMBOL: Final = {
            Not: '¬', And: '∧', Or: '∨', Implies: '→', Equivalent: '↔'}
        return self._as_infix(SYMBOL, not_spacing='', spacing=' ', method=str)

    def _as_infix(self, symbol: Mapping[type[Formula], str], not_spacing: str,
                  spacing: str, method: Any) -> str:
        match self:
            case Atom():
                return self.name
            case Not():
                operand = method(self.operand)
                if PRECEDENCE[self.operand.op] < PRECEDENCE[Not]:
                    operand = f'({operand})'
                return f'{symbol[Not]}{not_spacing}{operand}'
            case And() | Or() | Implies() | Equivalent():
                left = method(self.left)
                if self._needs_parentheses(self.left, right=False):
                    left = f'({left})'
                right = method(self.right)
                if self._needs_parentheses(self.right, right=True):
                    right = f'({right})'
                return f'{left}{spacing}{symbol[self.op]}{spacing}{right}'
            case _:
                assert False, type(self)

    def _needs_parentheses(self, arg: Formula, right: bool) -> bool:
        # Implies associates to the right, the other binary operators to the
        # left. Distinct binary operators have distinct precedences.
        if PRECEDENCE[arg.op] < PRECEDENCE[self.op]:
            return True
        if arg.op is self.op and Formula.is_binary(arg):
            return right != (self.op is Implies)
        return False

    def as_latex(self) -> str:
        r"""LaTeX representation as a string, which can be used elsewhere.

        >>> from cpc.parser import parse_formula
        >>> parse_formula('¬P ∧ (Q ∨ R)').as_latex()
        '\\neg P \\, \\wedge \\, (Q \\, \\vee \\, R)'

        .. seealso:: :meth:`_repr_latex_` -- LaTeX representation for Jupyter notebooks
        """
        SYMBOL: Final = {
            Not: '\\neg', And: '\\wedge', Or: '\\vee',
            Implies: '\\longrightarrow', Equivalent: '\\longleftrightarrow'}
        return self._as_infix(SYMBOL, not_spacing=' ', spacing=' \\, ',
                              method=lambda arg: arg.as_latex())

    def as_sympy(self) -> boolalg.Boolean:
        """Export to :mod:`sympy.logic.boolalg`. Each atom becomes a
        :class:`sympy.Symbol` of the same name. Note that SymPy applies its
        automatic normalizations, e.g., it flattens nested conjunctions.

        >>> from cpc.parser import parse_formula
        >>> parse_formula('P → Q').as_sympy()
        Implies(P, Q)
        """
        match self:
            case Atom():
                return sympy.Symbol(self.name)
            case Not():
                return boolalg.Not(self.operand.as_sympy())
            case And():
                return boolalg.And(self.left.as_sympy(), self.right.as_sympy())
            case Or():
                return boolalg.Or(self.left.as_sympy(), self.right.as_sympy())
            case Implies():
                return boolalg.Implies(self.left.as_sympy(), self.right.as_sympy())
            case Equivalent():
                return boolalg.Equivalent(self.left.as_sympy(), self.right.as_sympy())
            case _:
                assert False, type(self)

    def atoms(self) -> Iterator[Atom]:
        """An iterator over all occurrences of :class:`.Atom` in `self`, from
        left to right:

        >>> from cpc.parser import parse_formula
        >>> f = parse_formula('P ∧ Q → ¬P')
        >>> list(f.atoms())
        [Atom('P'), Atom('Q'), Atom('P')]
        >>> sorted({atom.name for atom in f.atoms()})
        ['P', 'Q']
        """
        match self:
            case Atom():
                yield self
            case Not() | And() | Or() | Implies() | Equivalent():
                for arg in self.args:
                    yield from arg.atoms()
            case _:
                assert False, type(self)

    def depth(self) -> int:
        """The maximal length of a path from the root to an atom in the
        expression tree. Atoms have depth 0.

        >>> from cpc.parser import parse_formula
        >>> parse_formula('¬(P ∧ Q) ∨ R').depth()
        3
        """
        match self:
            case Atom():
                return 0
            case Not() | And() | Or() | Implies() | Equivalent():
                return max(arg.depth() for arg in self.args) + 1
            case _:
                assert False, type(self)

    @staticmethod
    def is_atom(f: Formula) -> TypeIs[Atom]:
        return isinstance(f, Atom)

    @staticmethod
    def is_binary(f: Formula) -> TypeIs[BinaryFormula]:
        return isinstance(f, BinaryFormula)

    @staticmethod
    def is_not(f: Formula) -> TypeIs[Not]:
        return isinstance(f, Not)

    def _repr_latex_(self) -> str:
        """A LaTeX representation for Jupyter notebooks. In general, the
        underlying method :meth:`as_latex` should be used instead.
        """
        return f'$\\displaystyle {self.as_latex()}$'

    def _repr_pretty_(self, p: pretty.RepresentationPrinter, cycle: bool) -> None:
        assert not cycle
        op = self.__class__.__name__
        with p.group(len(op) + 1, op + '(', ')'):
            for idx, arg in enumerate(self.args):
                if idx:
                    p.text(',')
                    p.breakable()
                p.pretty(arg)


# The following imports are intentionally late to avoid circularity.
from .atomic import Atom
from .boolean import And, BinaryFormula, Equivalent, Implies, Not, Or

PRECEDENCE: Final[Mapping[type[Formula], int]] = MappingProxyType({
    Atom: 5, Not: 5, And: 4, Or: 3, Implies: 2, Equivalent: 1})
"""Binding strength of the operators, strongest first. This is a read-only
mapping.
"""
