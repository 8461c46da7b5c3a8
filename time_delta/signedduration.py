from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Self

from .durationformat import DEFAULT_FORMAT, DurationFormat, format_milliseconds
from .errors import DivisionByZeroError


@dataclass(frozen=True, order=True, init=False, repr=False)
class SignedDuration:
  """A signed span of time held as a single millisecond count.

  Hours are unbounded, there is no wrap-around at 24 hours. The component properties all carry the
  sign of the total, so a duration of -1h30m reports `hours == -1` and `minutes == -30`.

  Multiplying or dividing by a non-integral scalar can leave a fractional total. The component
  properties and the string form truncate such a total toward zero to whole milliseconds.
  Totals beyond the float-exact integer range are not supported by `multiply` and `divide`.

  >>> str(SignedDuration(1, 30, 45, 500))
  '01:30:45.500'
  >>> str(SignedDuration(-1, -30))
  '-01:30:00.000'
  """

  total_milliseconds: int | float

  _SECOND_MS: ClassVar[int] = 1000
  _MINUTE_MS: ClassVar[int] = _SECOND_MS * 60
  _HOUR_MS: ClassVar[int] = _MINUTE_MS * 60

  def __init__(self, hours: int = 0, minutes: int = 0, seconds: int = 0, milliseconds: int | float = 0) -> None:
    total = hours * self._HOUR_MS + minutes * self._MINUTE_MS + seconds * self._SECOND_MS + milliseconds
    if isinstance(total, float) and total.is_integer():
      total = int(total)
    object.__setattr__(self, 'total_milliseconds', total)

  @classmethod
  def from_milliseconds(cls, milliseconds: int | float) -> Self:
    return cls(milliseconds=milliseconds)

  @classmethod
  def from_hours(cls, hours: int) -> Self:
    return cls(hours=hours)

  @classmethod
  def from_minutes(cls, minutes: int) -> Self:
    return cls(minutes=minutes)

  @classmethod
  def from_seconds(cls, seconds: int) -> Self:
    return cls(seconds=seconds)

  @classmethod
  def from_date(cls, instant: datetime) -> Self:
    """Builds a duration from the local wall-clock time of day of `instant`. The date is ignored.

    Aware datetimes are converted to local time first, naive ones are taken as local already.
    """
    if instant.tzinfo is not None:
      instant = instant.astimezone()
    return cls(instant.hour, instant.minute, instant.second, instant.microsecond // 1000)

  @classmethod
  def from_format(cls, text: str, format: str = DEFAULT_FORMAT) -> Self:
    """Parses `text` against `format`, see `DurationFormat` for the tokens.

    A leading '-' makes the result negative. Parsed components overflowing their unit are carried
    upward (milliseconds into seconds, seconds into minutes, minutes into hours).

    Raises:
      FormatMismatchError: `text` does not match `format` in its entirety.
    """
    is_negative, hours, minutes, seconds, milliseconds = DurationFormat.compile(format).parse(text)
    duration = cls(hours, minutes, seconds, milliseconds)
    return duration.negate() if is_negative else duration

  def _sign(self) -> int:
    return (self.total_milliseconds > 0) - (self.total_milliseconds < 0)

  def _magnitude(self) -> int:
    return int(abs(self.total_milliseconds))

  @property
  def hours(self) -> int:
    return self._magnitude() // self._HOUR_MS * self._sign()

  @property
  def minutes(self) -> int:
    return self._magnitude() % self._HOUR_MS // self._MINUTE_MS * self._sign()

  @property
  def seconds(self) -> int:
    return self._magnitude() % self._MINUTE_MS // self._SECOND_MS * self._sign()

  @property
  def milliseconds(self) -> int:
    return self._magnitude() % self._SECOND_MS * self._sign()

  def add(self, other: Self) -> Self:
    return self.from_milliseconds(self.total_milliseconds + other.total_milliseconds)

  def subtract(self, other: Self) -> Self:
    return self.from_milliseconds(self.total_milliseconds - other.total_milliseconds)

  def multiply(self, scalar: int | float) -> Self:
    return self.from_milliseconds(self.total_milliseconds * scalar)

  def divide(self, scalar: int | float) -> Self:
    if scalar == 0:
      raise DivisionByZeroError(f'cannot divide {self} by zero')
    return self.from_milliseconds(self.total_milliseconds / scalar)

  def negate(self) -> Self:
    return self.from_milliseconds(-self.total_milliseconds)

  def abs(self) -> Self:
    return self.from_milliseconds(abs(self.total_milliseconds))

  def __add__(self, other: object) -> Self:
    if isinstance(other, SignedDuration):
      return self.add(other)
    return NotImplemented

  def __sub__(self, other: object) -> Self:
    if isinstance(other, SignedDuration):
      return self.subtract(other)
    return NotImplemented

  def __mul__(self, other: object) -> Self:
    if isinstance(other, (int, float)):
      return self.multiply(other)
    return NotImplemented

  __rmul__ = __mul__

  def __truediv__(self, other: object) -> Self:
    if isinstance(other, (int, float)):
      return self.divide(other)
    return NotImplemented

  def __neg__(self) -> Self:
    return self.negate()

  def __abs__(self) -> Self:
    return self.abs()

  def equals(self, other: Self) -> bool:
    return self.total_milliseconds == other.total_milliseconds

  def is_greater_than(self, other: Self) -> bool:
    return self.total_milliseconds > other.total_milliseconds

  def is_less_than(self, other: Self) -> bool:
    return self.total_milliseconds < other.total_milliseconds

  def is_between(self, min_duration: Self, max_duration: Self) -> bool:
    """Inclusive at both ends."""
    return not self.is_less_than(min_duration) and not self.is_greater_than(max_duration)

  def is_zero(self) -> bool:
    return self.total_milliseconds == 0

  def is_negative(self) -> bool:
    return self.total_milliseconds < 0

  def is_positive(self) -> bool:
    return self.total_milliseconds > 0

  def clamp(self, min_duration: Self, max_duration: Self) -> Self:
    if min_duration.is_greater_than(max_duration):
      raise ValueError(f'min {min_duration} must not be greater than max {max_duration}')
    if self.is_less_than(min_duration):
      return min_duration
    if self.is_greater_than(max_duration):
      return max_duration
    return self

  def _round_to(self, unit_ms: int) -> Self:
    # Half away from zero: -1.5 units becomes -2 units.
    quotient, remainder = divmod(abs(self.total_milliseconds), unit_ms)
    if remainder * 2 >= unit_ms:
      quotient += 1
    return self.from_milliseconds(int(quotient) * unit_ms * self._sign())

  def round_to_second(self) -> Self:
    return self._round_to(self._SECOND_MS)

  def round_to_minute(self) -> Self:
    return self._round_to(self._MINUTE_MS)

  def round_to_hour(self) -> Self:
    return self._round_to(self._HOUR_MS)

  def __repr__(self) -> str:
    return f'{self.__class__.__name__}.from_milliseconds({self.total_milliseconds!r})'

  def to_string(self, format: str = DEFAULT_FORMAT) -> str:
    return format_milliseconds(self.total_milliseconds, format)

  def __str__(self) -> str:
    return self.to_string()

  def __format__(self, format_spec: str) -> str:
    return self.to_string(format_spec or DEFAULT_FORMAT)

  ZERO: ClassVar[Self]
  SECOND: ClassVar[Self]
  MINUTE: ClassVar[Self]
  HOUR: ClassVar[Self]


SignedDuration.ZERO = SignedDuration()
SignedDuration.SECOND = SignedDuration.from_seconds(1)
SignedDuration.MINUTE = SignedDuration.from_minutes(1)
SignedDuration.HOUR = SignedDuration.from_hours(1)
