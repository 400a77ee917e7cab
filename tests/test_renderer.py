import pytest

from cpc import And, Atom, Equivalent, Implies, Not, Or, parse_formula, render

MEANINGS = {'P': 'chove', 'Q': 'faz frio', 'R': 'fico em casa'}


@pytest.mark.parametrize('formula, expected', [
    ('P', 'chove'),
    ('¬P', 'não chove'),
    ('P ∧ Q', 'chove e faz frio'),
    ('P ∨ Q', 'chove ou faz frio'),
    ('P → Q', 'se chove, então faz frio'),
    ('P ↔ Q', 'chove se e somente se faz frio'),
])
def test_connective_words(formula, expected):
    assert render(parse_formula(formula), MEANINGS) == expected


def test_missing_meaning_uses_placeholder():
    assert render(parse_formula('P')) == 'proposição P'
    assert render(parse_formula('P'), {}) == 'proposição P'
    assert render(parse_formula('P ∧ S'), MEANINGS) == 'chove e proposição S'


def test_empty_meaning_uses_placeholder():
    assert render(Atom('P'), {'P': ''}) == 'proposição P'


def test_negated_conjunction_is_parenthesized_once():
    assert render(parse_formula('¬(P ∧ Q)'), {}) == 'não (proposição P e proposição Q)'
    assert render(parse_formula('¬P ∧ Q'), {}) == 'não proposição P e proposição Q'


def test_negation_of_each_binary_operator():
    assert render(Not(Or(Atom('P'), Atom('Q'))), MEANINGS) == 'não (chove ou faz frio)'
    assert render(Not(Implies(Atom('P'), Atom('Q'))), MEANINGS) == 'não (se chove, então faz frio)'
    assert render(Not(Equivalent(Atom('P'), Atom('Q'))), MEANINGS) == \
        'não (chove se e somente se faz frio)'


def test_unary_over_unary_needs_no_parentheses():
    assert render(parse_formula('¬¬P'), MEANINGS) == 'não não chove'


def test_weaker_child_is_parenthesized():
    assert render(parse_formula('(P ∨ Q) ∧ R'), MEANINGS) == '(chove ou faz frio) e fico em casa'
    assert render(parse_formula('P ∧ (Q → R)'), MEANINGS) == \
        'chove e (se faz frio, então fico em casa)'
    assert render(And(Atom('P'), Equivalent(Atom('Q'), Atom('R'))), MEANINGS) == \
        'chove e (faz frio se e somente se fico em casa)'


def test_stronger_child_is_not_parenthesized():
    assert render(parse_formula('P ∧ Q ∨ R'), MEANINGS) == 'chove e faz frio ou fico em casa'
    assert render(parse_formula('P ∧ Q → R'), MEANINGS) == \
        'se chove e faz frio, então fico em casa'
    assert render(parse_formula('P → Q ↔ R'), MEANINGS) == \
        'se chove, então faz frio se e somente se fico em casa'


def test_right_nested_implication():
    assert render(parse_formula('P → Q → R'), MEANINGS) == \
        'se chove, então se faz frio, então fico em casa'


@pytest.mark.parametrize('formula', [
    'P', '¬P', 'P ∧ Q ∨ R', '(P ↔ Q) ↔ R', '¬(P → (Q ∨ ¬R))', 'A ∧ B ∧ C ∧ D',
])
def test_render_never_empty(formula):
    assert render(parse_formula(formula))


def test_long_conjunction_is_rendered():
    f = parse_formula(' ∧ '.join(['P'] * 1200))
    assert render(f, MEANINGS) == ' e '.join(['chove'] * 1200)


def test_long_chain_of_negations_is_rendered():
    f = Atom('P')
    for _ in range(5000):
        f = Not(f)
    assert render(f, MEANINGS) == 'não ' * 5000 + 'chove'


def test_parentheses_in_deep_left_chain():
    f = Atom('P')
    for _ in range(1500):
        f = And(Or(f, Atom('Q')), Atom('R'))
    sentence = render(f, MEANINGS)
    assert sentence.count('(') == sentence.count(')') == 1500
    assert sentence.endswith('ou faz frio) e fico em casa')
