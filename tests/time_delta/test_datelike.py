import math
from datetime import datetime, timedelta, timezone

from absl.testing import parameterized

from time_delta.datelike import resolve_instant
from time_delta.errors import InvalidInputError


class TestResolveInstant(parameterized.TestCase):

  def test_naiveDatetime_isUnchanged(self):
    instant = datetime(2024, 1, 1, 10, 30)

    self.assertIs(resolve_instant(instant), instant)

  def test_awareDatetime_isLocal(self):
    instant = datetime(2024, 1, 1, 10, 30, tzinfo=timezone(timedelta(hours=-7)))

    resolved = resolve_instant(instant)

    self.assertEqual(resolved, instant)
    self.assertEqual(resolved, instant.astimezone())

  @parameterized.parameters(
      ('2024-01-01T10:00:00', datetime(2024, 1, 1, 10)),
      ('2024-01-01T12:30:45.500', datetime(2024, 1, 1, 12, 30, 45, 500_000)),
      ('2024-01-01 12:30', datetime(2024, 1, 1, 12, 30)),
      ('2024-01-01', datetime(2024, 1, 1)),
  )
  def test_naiveString(self, s: str, expected_instant: datetime):
    self.assertEqual(resolve_instant(s), expected_instant)

  def test_awareString_isLocal(self):
    resolved = resolve_instant('2024-01-01T10:00:00Z')

    self.assertEqual(resolved, datetime(2024, 1, 1, 10, tzinfo=timezone.utc))
    self.assertEqual(resolved, datetime(2024, 1, 1, 10, tzinfo=timezone.utc).astimezone())

  @parameterized.parameters(
      (0,),
      (1_704_103_200_000,),
      (-86_400_000,),
      (1_704_103_200_500.0,),
  )
  def test_epochMilliseconds(self, milliseconds: float):
    self.assertEqual(resolve_instant(milliseconds), datetime.fromtimestamp(milliseconds / 1000))

  @parameterized.named_parameters(
      ('none', None),
      ('malformedString', 'not-a-date'),
      ('emptyString', ''),
      ('invalidMonth', '2024-13-01T10:00:00'),
      ('nan', math.nan),
      ('infinity', math.inf),
      ('negativeInfinity', -math.inf),
      ('outOfRange', 1e20),
      ('bool', True),
      ('list', [2024, 1, 1]),
  )
  def test_invalid_raises(self, value):
    with self.assertRaises(InvalidInputError):
      resolve_instant(value)
