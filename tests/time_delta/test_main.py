from datetime import datetime
from unittest.mock import patch

from absl.testing import absltest, flagsaver

from time_delta import flag
from time_delta.errors import InvalidInputError
from time_delta.main import main


@patch('builtins.print')
class TestMain(absltest.TestCase):

  def test_defaults(self, mock_print):
    with flagsaver.as_parsed(
        (flag.FROM_TIME, '2024-01-01T12:00:00'),
        (flag.TO_TIME, '2024-01-01T10:30:45.500'),
    ):
      main([])

    mock_print.assert_called_once_with('-01:29:14.500')

  def test_absoluteRoundTo(self, mock_print):
    with flagsaver.as_parsed(
        (flag.FROM_TIME, '2024-01-01T12:00:00'),
        (flag.TO_TIME, '2024-01-01T10:30:45.500'),
        (flag.ABSOLUTE, 'true'),
        (flag.ROUND_TO, 'hour'),
    ):
      main([])

    mock_print.assert_called_once_with('01:00:00.000')

  def test_format(self, mock_print):
    with flagsaver.as_parsed(
        (flag.FROM_TIME, '2024-01-01T10:00:00'),
        (flag.TO_TIME, '2024-01-01T12:05:00'),
        (flag.FORMAT, 'h:mm'),
    ):
      main([])

    mock_print.assert_called_once_with('2:05')

  def test_epochMilliseconds(self, mock_print):
    from_time = int(datetime(2024, 1, 1, 10).timestamp() * 1000)
    to_time = int(datetime(2024, 1, 1, 10, 0, 1).timestamp() * 1000)

    with flagsaver.as_parsed(
        (flag.FROM_TIME, str(from_time)),
        (flag.TO_TIME, str(to_time)),
    ):
      main([])

    mock_print.assert_called_once_with('00:00:01.000')

  def test_invalidTimestamp_raises(self, mock_print):
    with flagsaver.as_parsed(
        (flag.FROM_TIME, 'not-a-date'),
        (flag.TO_TIME, '2024-01-01T10:00:00'),
    ):
      with self.assertRaises(InvalidInputError):
        main([])

    mock_print.assert_not_called()


if __name__ == '__main__':
  absltest.main()
