import re
from dataclasses import dataclass
from functools import cache
from typing import ClassVar

from .errors import FormatMismatchError

DEFAULT_FORMAT = 'hh:mm:ss.SSS'

_HOUR_MS = 3_600_000
_MINUTE_MS = 60_000
_SECOND_MS = 1000


@dataclass(frozen=True)
class _Token:
  text: str
  component: str
  width: int
  digits: str


# Longest first, so 'hh' wins over 'h' and 'SSS' over 'S'.
_TOKENS: tuple[_Token, ...] = (
    _Token('SSS', 'milliseconds', 3, r'[0-9]{3}'),
    _Token('hh', 'hours', 2, r'[0-9]{2}'),
    _Token('mm', 'minutes', 2, r'[0-9]{2}'),
    _Token('ss', 'seconds', 2, r'[0-9]{2}'),
    _Token('h', 'hours', 0, r'[0-9]{1,2}'),
    _Token('m', 'minutes', 0, r'[0-9]{1,2}'),
    _Token('s', 'seconds', 0, r'[0-9]{1,2}'),
    _Token('S', 'milliseconds', 0, r'[0-9]{1,3}'),
)


@dataclass(frozen=True)
class DurationFormat:
  """A format pattern split into literal text and component tokens.

  Recognized tokens are `hh`, `h`, `mm`, `m`, `ss`, `s`, `SSS` and `S`, matched longest first.
  When rendering, only the first occurrence of each token is replaced and repeats are printed as
  literal text. When parsing, every occurrence captures digits and the last one of a component wins.
  Digits are ASCII only.

  The one-or-more digit tokens (`h`, `m`, `s`, `S`) are matched greedily. A pattern that puts such a
  token right next to another numeric token, e.g. `hmm`, can split the digits in an unexpected way.
  """

  pattern: str
  pieces: tuple[str | _Token, ...]
  repeats: frozenset[int]

  _SEGMENTS: ClassVar[tuple[tuple[str, int], ...]] = (
      ('hours', _HOUR_MS),
      ('minutes', _MINUTE_MS),
      ('seconds', _SECOND_MS),
      ('milliseconds', 1),
  )

  @classmethod
  def compile(cls, pattern: str) -> 'DurationFormat':
    return _compile(pattern)

  def render(self, milliseconds: int | float) -> str:
    magnitude = int(abs(milliseconds))
    # Sub-millisecond negatives truncate to zero and print without a sign.
    is_negative = magnitude > 0 and milliseconds < 0
    components: dict[str, int] = {}
    for component, unit in self._SEGMENTS:
      components[component], magnitude = divmod(magnitude, unit)

    text = ''.join(self._render_piece(i, piece, components) for i, piece in enumerate(self.pieces))
    return '-' + text if is_negative else text

  def _render_piece(self, i: int, piece: str | _Token, components: dict[str, int]) -> str:
    if isinstance(piece, str):
      return piece
    if i in self.repeats:
      return piece.text
    return str(components[piece.component]).zfill(piece.width)

  def parse(self, text: str) -> tuple[bool, int, int, int, int]:
    """Returns (is_negative, hours, minutes, seconds, milliseconds) with the carries applied."""
    is_negative = text.startswith('-')
    if is_negative:
      text = text[1:]

    if (match := _regex(self.pattern).fullmatch(text)) is None:
      raise FormatMismatchError(f'time string "{text}" does not match expected format "{self.pattern}"')

    components = {'hours': 0, 'minutes': 0, 'seconds': 0, 'milliseconds': 0}
    tokens = [piece for piece in self.pieces if isinstance(piece, _Token)]
    for token, value in zip(tokens, match.groups()):
      components[token.component] = int(value)

    hours = components['hours']
    minutes = components['minutes']
    seconds = components['seconds']
    milliseconds = components['milliseconds']

    if milliseconds >= 1000:
      carry, milliseconds = divmod(milliseconds, 1000)
      seconds += carry
    if seconds >= 60:
      carry, seconds = divmod(seconds, 60)
      minutes += carry
    if minutes >= 60:
      carry, minutes = divmod(minutes, 60)
      hours += carry

    return is_negative, hours, minutes, seconds, milliseconds


@cache
def _compile(pattern: str) -> DurationFormat:
  pieces: list[str | _Token] = []
  seen: set[str] = set()
  repeats: set[int] = set()
  literal = ''
  i = 0

  while i < len(pattern):
    token = next((t for t in _TOKENS if pattern.startswith(t.text, i)), None)
    if token is None:
      literal += pattern[i]
      i += 1
      continue

    i += len(token.text)
    if literal:
      pieces.append(literal)
      literal = ''
    if token.text in seen:
      repeats.add(len(pieces))
    seen.add(token.text)
    pieces.append(token)

  if literal:
    pieces.append(literal)
  return DurationFormat(pattern, tuple(pieces), frozenset(repeats))


@cache
def _regex(pattern: str) -> re.Pattern[str]:
  pieces = _compile(pattern).pieces
  return re.compile(''.join(re.escape(piece) if isinstance(piece, str) else f'({piece.digits})' for piece in pieces))


def format_milliseconds(milliseconds: int | float, format: str = DEFAULT_FORMAT) -> str:
  return DurationFormat.compile(format).render(milliseconds)
