import pytest
import sympy
from sympy.logic import boolalg

from cpc import PRECEDENCE, And, Atom, Equivalent, Iff, Implies, Not, Or, parse_formula

P, Q, R = Atom('P'), Atom('Q'), Atom('R')


def test_atom_names():
    assert Atom('A').name == 'A'
    assert Atom('Z').name == 'Z'
    for name in ('a', 'PQ', '', 'Á', 1):
        with pytest.raises(ValueError):
            Atom(name)


def test_constructors_check_arguments():
    with pytest.raises(ValueError):
        And(P, 'Q')
    with pytest.raises(ValueError):
        Not('P')


def test_accessors():
    f = Implies(P, Not(Q))
    assert f.left == P
    assert f.right == Not(Q)
    assert f.right.operand == Q
    assert f.op is Implies
    assert f.args == (P, Not(Q))


def test_iff_is_equivalent():
    assert Iff is Equivalent


def test_structural_equality_and_hash():
    assert And(P, Q) == And(Atom('P'), Atom('Q'))
    assert And(P, Q) != Or(P, Q)
    assert And(P, Q) != And(Q, P)
    assert len({And(P, Q), And(Atom('P'), Atom('Q'))}) == 1


def test_operators():
    assert ~P == Not(P)
    assert P & Q == And(P, Q)
    assert P | Q == Or(P, Q)
    assert P >> Q == Implies(P, Q)
    assert P << Q == Implies(Q, P)


def test_precedence_table_is_read_only():
    assert PRECEDENCE[Atom] == PRECEDENCE[Not] == 5
    assert PRECEDENCE[And] > PRECEDENCE[Or] > PRECEDENCE[Implies] > PRECEDENCE[Equivalent]
    with pytest.raises(TypeError):
        PRECEDENCE[And] = 0  # type: ignore[index]


@pytest.mark.parametrize('formula, expected', [
    ('P∧Q', 'P ∧ Q'),
    ('(P ∧ Q) ∨ R', 'P ∧ Q ∨ R'),
    ('P ∧ (Q ∨ R)', 'P ∧ (Q ∨ R)'),
    ('P ∧ (Q ∧ R)', 'P ∧ (Q ∧ R)'),
    ('(P → Q) → R', '(P → Q) → R'),
    ('P → (Q → R)', 'P → Q → R'),
    ('P ↔ (Q ↔ R)', 'P ↔ (Q ↔ R)'),
    ('¬¬(P ∨ Q)', '¬¬(P ∨ Q)'),
])
def test_str_is_minimal_and_parses_back(formula, expected):
    f = parse_formula(formula)
    assert str(f) == expected
    assert parse_formula(str(f)) == f


def test_repr():
    assert repr(parse_formula('¬P ∨ Q')) == "Or(Not(Atom('P')), Atom('Q'))"


def test_as_latex():
    assert parse_formula('P → ¬Q').as_latex() == 'P \\, \\longrightarrow \\, \\neg Q'
    assert parse_formula('P').as_latex() == 'P'
    assert parse_formula('P ↔ Q')._repr_latex_() == \
        '$\\displaystyle P \\, \\longleftrightarrow \\, Q$'


def test_as_sympy():
    p, q, r = sympy.symbols('P Q R')
    assert parse_formula('P ∧ Q').as_sympy() == boolalg.And(p, q)
    assert parse_formula('P ↔ ¬Q').as_sympy() == boolalg.Equivalent(p, boolalg.Not(q))
    f = parse_formula('(P ∨ Q) → R').as_sympy()
    assert isinstance(f, boolalg.Implies)
    assert f.free_symbols == {p, q, r}


def test_atoms_and_depth():
    f = parse_formula('P ∧ Q → ¬P')
    assert [atom.name for atom in f.atoms()] == ['P', 'Q', 'P']
    assert f.depth() == 2
    assert P.depth() == 0
