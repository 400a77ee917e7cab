"""Rendering of formulas as Portuguese sentences.

>>> from cpc.parser import parse_formula
>>> render(parse_formula('P ∧ Q'), {'P': 'chove', 'Q': 'faz frio'})
'chove e faz frio'
>>> render(parse_formula('¬(P ∧ Q)'))
'não (proposição P e proposição Q)'
>>> render(parse_formula('(P ∨ Q) ∧ R → S'))
'se (proposição P ou proposição Q) e proposição R, então proposição S'
"""

from __future__ import annotations

from typing import Final, Mapping, Optional

from .boolean import And, Equivalent, Implies, Or
from .formula import PRECEDENCE, Formula


CONNECTIVE: Final = {And: 'e', Or: 'ou'}


def placeholder(name: str) -> str:
    """The phrase used for atoms without a meaning.
    """
    return f'proposição {name}'


def render(f: Formula, meanings: Optional[Mapping[str, str]] = None) -> str:
    """Render `f` as a Portuguese sentence. Atoms are replaced by their
    entries in `meanings`. Atoms without a non-empty entry are rendered as
    :func:`placeholder`. The result is never empty.

    A subformula is parenthesized if and only if its operator binds more
    weakly than the operator of its parent, with precedences according to
    :data:`.formula.PRECEDENCE`.

    The tree is traversed with an explicit stack, so that the depth of `f`
    is not limited by the recursion limit of the interpreter:

    >>> from cpc.parser import parse_formula
    >>> len(render(parse_formula(' ∨ '.join(['P'] * 2000)), {'P': 'x'}))
    9996
    """
    if meanings is None:
        meanings = {}
    # Post-order traversal. Each stack entry holds a subformula, the
    # operator of its parent, and whether its arguments are already rendered.
    stack: list[tuple[Formula, Optional[type[Formula]], bool]] = [(f, None, False)]
    rendered: list[str] = []
    while stack:
        g, parent, ready = stack.pop()
        if Formula.is_atom(g):
            rendered.append(meanings.get(g.name) or placeholder(g.name))
            continue
        if not ready:
            stack.append((g, parent, True))
            stack.extend((arg, g.op, False) for arg in reversed(g.args))
            continue
        args = rendered[-len(g.args):]
        del rendered[-len(g.args):]
        s = _phrase(g, args)
        if parent is not None and PRECEDENCE[parent] > PRECEDENCE[g.op]:
            s = f'({s})'
        rendered.append(s)
    assert len(rendered) == 1
    return rendered[0]


def _phrase(f: Formula, args: list[str]) -> str:
    if Formula.is_not(f):
        return f'não {args[0]}'
    left, right = args
    match f:
        case And() | Or():
            return f'{left} {CONNECTIVE[f.op]} {right}'
        case Implies():
            return f'se {left}, então {right}'
        case Equivalent():
            return f'{left} se e somente se {right}'
        case _:
            assert False, type(f)
