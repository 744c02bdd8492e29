"""Built-in demo programs, authored directly as operation trees."""

from .operations import (Decrement, Increment, Loop, MoveLeft, MoveRight,
                         Output, group)

HELLO_WORLD_SOURCE = (
    "++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]"
    ">>.>---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++."
)


def hello_world():
    """The classic "Hello World!\\n" program.

    Setup leaves 72, 104, 88, 32, 8 in cells 2-6; the groups after it print
    one word piece each.
    """
    setup = group(
        Increment(8),
        Loop(
            MoveRight(),
            Increment(4),
            Loop(
                MoveRight(), Increment(2),
                MoveRight(), Increment(3),
                MoveRight(), Increment(3),
                MoveRight(), Increment(1),
                MoveLeft(4),
                Decrement(),
            ),
            group(
                MoveRight(), Increment(),
                MoveRight(), Increment(),
                MoveRight(), Decrement(),
                MoveRight(2), Increment(),
            ),
            Loop(MoveLeft()),
            MoveLeft(),
            Decrement(),
        ),
    )
    printing = group(
        group(MoveRight(2), Output()),                       # H
        group(MoveRight(), Decrement(3), Output()),          # e
        group(Increment(7), Output(), Output(),
              Increment(3), Output()),                       # llo
        group(MoveRight(2), Output()),                       # space
        group(MoveLeft(), Decrement(), Output()),            # W
        group(MoveLeft(), Output()),                         # o
        group(Increment(3), Output(), Decrement(6), Output(),
              Decrement(8), Output()),                       # rld
        group(MoveRight(2), Increment(), Output(),           # !
              MoveRight(), Increment(2), Output()),          # newline
    )
    return group(setup, printing)
