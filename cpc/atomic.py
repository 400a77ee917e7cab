"""Atoms are the propositional variables of CPC. An atom is identified solely
by its name, which is a single uppercase ASCII letter.
"""

from __future__ import annotations

import string
from typing import final

from .formula import Formula


ATOM_NAMES = frozenset(string.ascii_uppercase)
"""The admissible names of atoms: ``A`` through ``Z``.
"""


@final
class Atom(Formula):
    """A class whose instances are atoms.

    >>> Atom('P')
    Atom('P')
    >>> Atom('P') == Atom('P')
    True
    >>> Atom('p')
    Traceback (most recent call last):
    ...
    ValueError: 'p' is not a valid atom name; expected one of A-Z
    """

    def __init__(self, name: str) -> None:
        super().__init__()
        if not isinstance(name, str) or name not in ATOM_NAMES:
            raise ValueError(f'{name!r} is not a valid atom name; expected one of A-Z')
        self.args = (name, )

    @property
    def name(self) -> str:
        """The letter naming the atom.
        """
        return self.args[0]
