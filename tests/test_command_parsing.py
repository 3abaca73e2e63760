import pytest

from mudgame.commands import CommandResult, Outcome, ParsedCommand, parse_command


@pytest.mark.parametrize(
    "line,verb,argument",
    [
        ("look", "look", ""),
        ("  LOOK  ", "look", ""),
        ("move forward", "move", "forward"),
        ("Move Forward", "move", "Forward"),
        ("pick up Sword", "pick", "up Sword"),
        ("move  forward", "move", " forward"),
        ("", "", ""),
        ("open door\n", "open", "door"),
    ],
)
def test_parse_command(line, verb, argument):
    assert parse_command(line) == ParsedCommand(verb=verb, argument=argument)


def test_result_text_joins_lines():
    result = CommandResult(lines=("a", "b"))
    assert result.text == "a\nb"
    assert result.outcome is Outcome.CONTINUE
    assert result.should_stop is False


def test_stop_outcome():
    assert CommandResult(lines=(), outcome=Outcome.STOP).should_stop is True
