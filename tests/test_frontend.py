import pytest

from tapevm.engine import run
from tapevm.frontend import parse, to_source
from tapevm.operations import (Decrement, Increment, Loop, MoveLeft, MoveRight,
                               NoOp, Output)
from tapevm.programs import HELLO_WORLD_SOURCE, hello_world


def test_runs_collapse_into_amounts():
    assert parse("+++>>-<.") == (
        Increment(3), MoveRight(2), Decrement(1), MoveLeft(1), Output(),
    )


def test_long_increment_runs_wrap():
    assert parse("+" * 300) == (Increment(44),)


def test_comments_and_input_are_ignored():
    assert parse("add one, then print: +.") == (Increment(), Output())


def test_nested_loops_build_a_tree():
    assert parse("+[>[-]<-]") == (
        Increment(),
        Loop(MoveRight(), Loop(Decrement()), MoveLeft(), Decrement()),
    )


def test_empty_loop():
    assert parse("[]") == (Loop(),)


@pytest.mark.parametrize("source, message", [
    ("+]", "Unmatched ']' at position 1"),
    ("[[]", "Unmatched '[' at position 0"),
])
def test_unbalanced_brackets(source, message):
    with pytest.raises(SyntaxError) as exc:
        parse(source)
    assert message in str(exc.value)


def test_parsed_hello_world_matches_built_tree():
    assert parse(HELLO_WORLD_SOURCE) == hello_world()
    assert run(parse(HELLO_WORLD_SOURCE)).output == "Hello World!\n"


def test_to_source_renders_hello_world():
    assert to_source(hello_world()) == HELLO_WORLD_SOURCE


def test_to_source_skips_noop():
    assert to_source([Increment(2), NoOp(), Loop(NoOp(), MoveLeft(3))]) == "++[<<<]"
