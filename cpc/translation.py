"""This module :mod:`cpc.translation` orchestrates translations between
Portuguese sentences and CPC formulas around a language model. The model
itself is not part of this package. It is passed to :class:`Translator` as a
callable `generate(prompt, options)` returning the raw model output.

Formulas are translated to Portuguese by :func:`.renderer.render` whenever they
parse, so that the model is only consulted for input that is not a
well-formed formula:

>>> def generate(prompt, options):
...     raise AssertionError('model must not be called')
>>> translator = Translator(generate)
>>> translator('cpc-to-nl', 'P → Q', {'P': 'chove', 'Q': 'a rua fica molhada'})
'se chove, então a rua fica molhada'
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import json
import logging
import re
import time
from typing import Any, Callable, Final, Mapping, Optional

from .parser import ParserError, parse_formula
from .renderer import render
from .support.excepthook import NoTraceException
from .support.logging import DeltaTimeFormatter, Timer

# Create logger
delta_time_formatter = DeltaTimeFormatter(
    '%(asctime)s - %(name)s - %(levelname)-5s - %(delta)s: %(message)s')

stream_handler = logging.StreamHandler()
stream_handler.setFormatter(delta_time_formatter)

logger = logging.getLogger(__name__)
logger.propagate = False
logger.addHandler(stream_handler)
logger.addFilter(lambda record: str(record.msg).strip() != '')
logger.setLevel(logging.WARNING)


class Mode(Enum):
    """The direction of a translation.
    """
    NL_TO_CPC = 'nl-to-cpc'
    CPC_TO_NL = 'cpc-to-nl'


class TranslationError(NoTraceException):
    """The model refused the translation or its answer was unusable.
    """
    pass


class Options:
    """This class holds options that can be provided to :class:`Translator`.
    They are passed on to the `generate` callable with each prompt.

    >>> Options(temperature=3.0)
    Traceback (most recent call last):
    ...
    ValueError: temperature must be in [0.0, 2.0], got 3.0
    """

    model: str
    """The name of the language model.
    """

    temperature: float
    """The sampling temperature. Low values make answers reproducible.
    """

    max_output_tokens: int
    """An upper bound on the length of the model answer.
    """

    log_level: int
    """The `log_level` of the logger used by :class:`Translator`.
    """

    def __init__(self, model: str = 'gemini-2.5-flash', temperature: float = 0.1,
                 max_output_tokens: int = 200, log_level: int = logging.NOTSET) -> None:
        if not 0.0 <= temperature <= 2.0:
            raise ValueError(f'temperature must be in [0.0, 2.0], got {temperature}')
        if max_output_tokens <= 0:
            raise ValueError(f'max_output_tokens must be positive, got {max_output_tokens}')
        self.model = model
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens
        self.log_level = log_level

    def __repr__(self) -> str:
        return (f'{self.__class__.__name__}(model={self.model!r}, '
                f'temperature={self.temperature}, '
                f'max_output_tokens={self.max_output_tokens}, '
                f'log_level={self.log_level})')


STRICT_INSTRUCTIONS: Final = """STRICT INSTRUCTIONS:
- Respond ONLY with a single valid JSON object, no explanations, no extra text, no markdown, no newlines before or after.
- Do NOT use markdown formatting (no triple backticks).
- Do NOT add any commentary, apology, or explanation.
- If you cannot answer, return {"error": "<reason>"}.
- Example valid response: {"sentence": "Se chover, então a grama ficará molhada."}
- Example error: {"error": "Not convertible to propositional logic."}
- If you do not follow these instructions, your output will be discarded and considered invalid."""  # noqa


def nl_to_cpc_prompt(sentence: str) -> str:
    """The prompt asking for a formula and the meanings of its atoms.
    """
    return f"""You are a formal logic assistant. Convert the following Portuguese sentence into a propositional logic formula and list the proposition meanings.

Rules:
- Allowed connectives: → ∧ ∨ ¬ ↔ ( )
- Use uppercase atoms P, Q, R, S, T, U, V in order of appearance.
- Output JSON only: {{"formula":"...", "propositions": {{"P": "...", "Q": "..."}}}}
- No explanations. No extra text.

Sentence: "{sentence}"

{STRICT_INSTRUCTIONS}"""  # noqa


def cpc_to_nl_prompt(formula: str, meanings: Optional[Mapping[str, str]] = None) -> str:
    """The prompt asking for a Portuguese sentence.

    >>> print(cpc_to_nl_prompt('P ∧ Q', {'P': 'chove'}).splitlines()[2])
    Atoms mapping: P: chove
    """
    if meanings:
        mapping = ' | '.join(f'{name}: {meaning}' for name, meaning in meanings.items())
    else:
        mapping = '(none)'
    return f"""You are a formal logic assistant. Convert the following propositional logic formula into a natural Portuguese sentence.

Atoms mapping: {mapping}
Output JSON only: {{"sentence":"..."}}
No explanations. No extra text.

Formula: "{formula}"

{STRICT_INSTRUCTIONS}"""  # noqa


def strip_code_fences(text: str) -> str:
    """Remove a surrounding markdown code block.

    >>> strip_code_fences('```json\\n{"sentence": "chove"}\\n```')
    '{"sentence": "chove"}'
    """
    text = re.sub(r'^\s*```(json)?', '', text, flags=re.IGNORECASE)
    text = re.sub(r'```\s*$', '', text)
    return text.strip()


def extract_json(text: str) -> Optional[dict[str, Any]]:
    """Extract a JSON object from a model answer. Code fences and text around
    the first ``{...}`` block are tolerated. The result is :obj:`None` if
    there is no JSON object.

    >>> extract_json('Claro! {"formula": "P → Q", "propositions": {}} Espero ter ajudado.')
    {'formula': 'P → Q', 'propositions': {}}
    >>> extract_json('["P"]') is None
    True
    """
    text = strip_code_fences(text)
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        match = re.search(r'\{.*\}', text, flags=re.DOTALL)
        if match is None:
            return None
        try:
            data = json.loads(match.group(0))
        except json.JSONDecodeError:
            return None
    return data if isinstance(data, dict) else None


@dataclass
class Translation:
    """A formula together with the meanings of its atoms.
    """

    formula: str
    propositions: dict[str, str] = field(default_factory=dict)

    def as_text(self) -> str:
        """
        >>> print(Translation('P → Q', {'P': 'chove', 'Q': 'molha'}).as_text())
        Fórmula: P → Q
        Proposições:
        P: chove
        Q: molha
        """
        lines = [f'Fórmula: {self.formula}', 'Proposições:']
        lines.extend(f'{name}: {meaning}' for name, meaning in self.propositions.items())
        return '\n'.join(lines)


HEURISTIC_ATOMS: Final = ('P', 'Q', 'R', 'S')


def heuristic_nl_to_cpc(sentence: str) -> Translation:
    """A best-effort guess at the structure of `sentence` based on the
    Portuguese connective words. This is used only when the model answer is
    unusable.

    >>> heuristic_nl_to_cpc('Se chover, então a rua fica molhada')
    Translation(formula='P → Q', propositions={'P': 'chover', 'Q': 'a rua fica molhada'})
    >>> heuristic_nl_to_cpc('João é alto e Maria é inteligente')
    Translation(formula='P ∧ Q', propositions={'P': 'joão é alto', 'Q': 'maria é inteligente'})
    """
    s = sentence.lower().strip()
    if 'se e somente se' in s:
        left, right = s.split('se e somente se')[:2]
        p = re.sub(r'^se\s+', '', left).strip() or 'proposição P'
        q = re.sub(r'^[,\s]+', '', right).strip() or 'proposição Q'
        return Translation('P ↔ Q', {'P': p, 'Q': q})
    if_pos = s.find('se ')
    then_pos = s.find('então')
    if if_pos != -1 and then_pos > if_pos:
        antecedent = s[if_pos + len('se '):then_pos].strip(', \t\n')
        consequent = s[then_pos + len('então'):].strip()
        return Translation('P → Q', {'P': antecedent, 'Q': consequent})
    for word, symbol in ((' e ', ' ∧ '), (' ou ', ' ∨ ')):
        if word in s:
            parts = [part.strip() for part in s.split(word) if part.strip()]
            names = HEURISTIC_ATOMS[:len(parts)]
            return Translation(symbol.join(names), dict(zip(names, parts)))
    if s.startswith('não '):
        return Translation('¬P', {'P': s[len('não '):].strip()})
    return Translation('P', {'P': s})


@dataclass
class Translator:
    """A callable class translating in both directions. The callable
    `generate` receives a prompt and the :class:`Options` and returns the raw
    answer of the language model. Timeouts and retries are its business.
    """

    generate: Callable[[str, Options], str]
    options: Options = field(default_factory=Options)

    def __call__(self, mode: Mode | str, text: str,
                 meanings: Optional[Mapping[str, str]] = None) -> str:
        """Translate `text` in direction `mode`. For :attr:`Mode.NL_TO_CPC`
        the result is :meth:`Translation.as_text`.
        """
        mode = Mode(mode)
        if not text or not text.strip():
            raise ValueError('input is required')
        delta_time_formatter.set_reference_time(time.time())
        save_level = logger.getEffectiveLevel()
        try:
            logger.setLevel(self.options.log_level)
            logger.info(f'{mode.value}: {text.strip()!r}')
            match mode:
                case Mode.CPC_TO_NL:
                    return self.formula_to_portuguese(text.strip(), meanings)
                case Mode.NL_TO_CPC:
                    return self.portuguese_to_formula(text.strip()).as_text()
                case _:
                    assert False, mode
        finally:
            logger.setLevel(save_level)

    def ask(self, prompt: str) -> str:
        timer = Timer()
        answer = self.generate(prompt, self.options)
        logger.info(f'{self.options.model} answered in {timer.get():.3f}s')
        logger.debug(answer)
        return answer

    def formula_to_portuguese(self, formula: str,
                              meanings: Optional[Mapping[str, str]] = None) -> str:
        try:
            sentence = render(parse_formula(formula), meanings)
        except ParserError as exc:
            logger.info(f'not a formula ({exc}), asking the model')
        else:
            logger.info('rendered by the parser')
            return sentence
        answer = self.ask(cpc_to_nl_prompt(formula, meanings))
        data = extract_json(answer)
        if data is None:
            answer = strip_code_fences(answer)
            if 0 < len(answer) < 300 and '{' not in answer and 'error' not in answer:
                return answer
            raise TranslationError('the model did not return a valid JSON object; '
                                   'try rephrasing your input')
        self._check_error(data)
        sentence = data.get('sentence')
        if not isinstance(sentence, str) or not sentence.strip():
            raise TranslationError('the model response is missing the sentence')
        return sentence.strip()

    def portuguese_to_formula(self, sentence: str) -> Translation:
        answer = self.ask(nl_to_cpc_prompt(sentence))
        data = extract_json(answer)
        if data is None:
            logger.warning('model answer is not JSON, using heuristic')
            return heuristic_nl_to_cpc(sentence)
        self._check_error(data)
        formula = data.get('formula')
        if not isinstance(formula, str) or not formula.strip():
            raise TranslationError('the model response is missing the formula')
        propositions = data.get('propositions')
        if not isinstance(propositions, dict):
            raise TranslationError('the model did not return the mapping of propositions; '
                                   'try a simpler sentence')
        try:
            parse_formula(formula)
        except ParserError as exc:
            logger.warning(f'model returned invalid formula {formula!r} ({exc}), '
                           f'using heuristic')
            return heuristic_nl_to_cpc(sentence)
        return Translation(formula.strip(),
                           {str(name): str(meaning) for name, meaning in propositions.items()})

    @staticmethod
    def _check_error(data: Mapping[str, Any]) -> None:
        error = data.get('error')
        if error:
            raise TranslationError(str(error))
