import pytest

from lispy.grammar import load_parser
from lispy.interpreter import Interpreter


@pytest.fixture(scope="session")
def parser():
    return load_parser()


@pytest.fixture
def interpreter(parser):
    return Interpreter(parser)


@pytest.fixture
def feed_input(monkeypatch):
    """Replace ``input()`` with a fixed list of lines, then EOF."""

    def feed(lines):
        prompts = []
        pending = iter(lines)

        def fake_input(prompt=""):
            prompts.append(prompt)
            try:
                line = next(pending)
            except StopIteration:
                raise EOFError
            if isinstance(line, BaseException):
                raise line
            return line

        monkeypatch.setattr("builtins.input", fake_input)
        return prompts

    return feed
