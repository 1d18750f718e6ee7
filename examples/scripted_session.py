"""Drive the interactive menu from a script instead of the keyboard."""

import io
import random

from fruitsalad import SaladSession, create_sequence


def main() -> None:
    """Add, remove and pick fruits by feeding the menu canned answers."""
    answers = "\n".join(
        [
            "1", "Kiwi", "2",  # add Kiwi after position 2
            "2", "0",          # remove the front fruit
            "3",               # pick one at random
            "2", "oops",       # invalid position is reported, not fatal
            "4",               # exit
        ]
    )
    session = SaladSession(
        create_sequence(["Arbutus", "Loquat", "Strawberry Tree Berry"]),
        random.Random(7),
        stdin=io.StringIO(answers + "\n"),
    )
    session.prepare()
    session.run()


if __name__ == "__main__":
    main()
