"""We introduce formulas with Boolean toplevel operators as subclasses of
:class:`.Formula`. Binary operators are strictly binary: chains of operators
are represented by nested instances reflecting the order of application.
"""
from __future__ import annotations

from typing import final

from .formula import Formula


def _check_formulas(*args: object) -> None:
    for arg in args:
        if not isinstance(arg, Formula):
            raise ValueError(f'{arg!r} is not a Formula')


class BooleanFormula(Formula):
    r"""A class whose instances are Boolean formulas in the sense that their
    toplevel operator is one of the Boolean operators :math:`\lnot`,
    :math:`\wedge`, :math:`\vee`, :math:`\longrightarrow`,
    :math:`\longleftrightarrow`.
    """
    pass


class BinaryFormula(BooleanFormula):
    """A class whose instances have a binary toplevel operator.
    """

    def __init__(self, left: Formula, right: Formula) -> None:
        super().__init__()
        _check_formulas(left, right)
        self.args = (left, right)

    @property
    def left(self) -> Formula:
        """The left-hand side.

        .. seealso::
            * :attr:`args <.formula.Formula.args>` -- all arguments as a tuple
            * :attr:`op <.formula.Formula.op>` -- operator
        """
        return self.args[0]

    @property
    def right(self) -> Formula:
        """The right-hand side.

        .. seealso::
            * :attr:`args <.formula.Formula.args>` -- all arguments as a tuple
            * :attr:`op <.formula.Formula.op>` -- operator
        """
        return self.args[1]


@final
class Equivalent(BinaryFormula):
    r"""A class whose instances are equivalences in the sense that their
    toplevel operator represents the Boolean operator
    :math:`\longleftrightarrow`.

    >>> from cpc.atomic import Atom
    >>> Equivalent(Atom('P'), Atom('Q'))
    Equivalent(Atom('P'), Atom('Q'))
    """
    pass


Iff = Equivalent


@final
class Implies(BinaryFormula):
    r"""A class whose instances are implications in the sense that their
    toplevel operator represents the Boolean operator
    :math:`\longrightarrow`.

    >>> from cpc.atomic import Atom
    >>> Implies(Atom('P'), Atom('Q'))
    Implies(Atom('P'), Atom('Q'))

    .. seealso::
        * :meth:`>>, __rshift__() <.formula.Formula.__rshift__>` -- \
            infix notation of :class:`Implies`
        * :meth:`\<\<, __lshift__() <.formula.Formula.__lshift__>` -- \
            infix notation of converse :class:`Implies`
    """
    pass


@final
class And(BinaryFormula):
    r"""A class whose instances are conjunctions in the sense that their
    toplevel operator represents the Boolean operator :math:`\wedge`. There
    is no flattening of nested conjunctions:

    >>> from cpc.atomic import Atom
    >>> And(And(Atom('P'), Atom('Q')), Atom('R'))
    And(And(Atom('P'), Atom('Q')), Atom('R'))
    >>> And(Atom('P'), 'Q')
    Traceback (most recent call last):
    ...
    ValueError: 'Q' is not a Formula
    """
    pass


@final
class Or(BinaryFormula):
    r"""A class whose instances are disjunctions in the sense that their
    toplevel operator represents the Boolean operator :math:`\vee`.

    >>> from cpc.atomic import Atom
    >>> Or(Atom('P'), Atom('Q'))
    Or(Atom('P'), Atom('Q'))
    """
    pass


@final
class Not(BooleanFormula):
    r"""A class whose instances are negated formulas in the sense that their
    toplevel operator is the Boolean operator :math:`\neg`.

    >>> from cpc.atomic import Atom
    >>> Not(Not(Atom('P')))
    Not(Not(Atom('P')))
    """

    def __init__(self, operand: Formula) -> None:
        super().__init__()
        _check_formulas(operand)
        self.args = (operand, )

    @property
    def operand(self) -> Formula:
        """The one argument of the operator :math:`\\neg`.
        """
        return self.args[0]
