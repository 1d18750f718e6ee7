"""Interactive menu session driving an OrderedStringSequence."""

import logging
import sys
from typing import Literal, TextIO

from fruitsalad.errors import EmptyCollectionError, InvalidInputError
from fruitsalad.sequence import OrderedStringSequence
from fruitsalad.types import RandomSource

logger = logging.getLogger(__name__)

End = Literal["front", "back"]


def parse_position(text: str) -> int:
    """
    Parse a position typed at the prompt.

    Raises:
        InvalidInputError: If text is not an integer
    """
    try:
        return int(text.strip())
    except ValueError:
        raise InvalidInputError(f"Not a position: {text!r}") from None


def parse_end(text: str) -> End:
    """
    Parse a front/back menu answer ("1" or "2").

    Raises:
        InvalidInputError: If text is neither choice
    """
    choice = text.strip()
    if choice == "1":
        return "front"
    if choice == "2":
        return "back"
    raise InvalidInputError(f"Not an end choice: {text!r}")


def format_salad(sequence: OrderedStringSequence) -> str:
    """Render the salad body: the items and a count, or an empty marker."""
    if not sequence:
        return "   (empty)"
    return f"   {', '.join(sequence)}\n   Total fruits: {len(sequence)}"


class SaladSession:
    """
    Text menu over one sequence: add, remove, pick a random fruit, exit.

    In ends-only mode the add and remove prompts offer just the front and the
    back, otherwise any position may be entered. Bad input is reported and
    the session returns to the menu; end of input behaves like choosing exit.
    """

    def __init__(
        self,
        sequence: OrderedStringSequence,
        rng: RandomSource,
        *,
        ends_only: bool = False,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.sequence = sequence
        self._rng = rng
        self._ends_only = ends_only
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout

    def _write(self, text: str = "") -> None:
        self._stdout.write(text + "\n")

    def _prompt(self, text: str) -> str:
        self._stdout.write(text)
        self._stdout.flush()
        line = self._stdin.readline()
        if not line:
            raise EOFError
        return line.strip()

    def render(self) -> None:
        """Print the current salad."""
        self._write("\n🥗 Current Fruit Salad:")
        self._write(format_salad(self.sequence))

    def prepare(self) -> None:
        """Show the starting fruits, shuffle them, then add a few at both ends."""
        self._write("Initial fruits added to the back:")
        self.render()

        self.sequence.shuffle(self._rng)
        self._write("\n✓ Fruits shuffled!")
        self.render()

        self.sequence.push_front("Pomegranate")
        self.sequence.push_back("Fig")
        self.sequence.push_back("Cherry")
        self._write("\n✓ Added Pomegranate to front, Fig and Cherry to back!")
        self.render()

    def _ask_insert_position(self) -> tuple[int, End | None]:
        """Prompt for where to add; returns the position and the end asked for, if any."""
        size = len(self.sequence)
        if self._ends_only:
            end = parse_end(self._prompt("Add to (1) Front or (2) Back? (Enter 1 or 2): \n> "))
            return (0 if end == "front" else size), end

        self._write("\nChoose position:")
        self._write("  0 - Front")
        for i in range(1, size):
            self._write(f"  {i} - After position {i}")
        self._write(f"  {size} - Back (end)")
        position = parse_position(self._prompt("> "))
        if position <= 0:
            return position, "front"
        if position >= size:
            return position, "back"
        return position, None

    def _ask_remove_position(self) -> tuple[int, End | None]:
        """Prompt for what to remove; returns the position and the end asked for, if any."""
        last = len(self.sequence) - 1
        if self._ends_only:
            end = parse_end(self._prompt("Remove from (1) Front or (2) Back? (Enter 1 or 2): \n> "))
            return (0 if end == "front" else last), end

        self._write("\nChoose position to remove from:")
        self._write("  0 - Front")
        for i in range(1, last):
            self._write(f"  {i} - Position {i}")
        if last > 0:
            self._write(f"  {last} - Back (end)")
        position = parse_position(self._prompt("> "))
        if position <= 0:
            return position, "front"
        if position >= last:
            return position, "back"
        return position, None

    def _invalid(self, exc: InvalidInputError) -> None:
        logger.info("Ignoring input: %s", exc)
        if self._ends_only:
            self._write("Invalid choice! Please enter 1 or 2.")
        else:
            self._write("Invalid position!")

    def add_fruit(self) -> None:
        """Prompt for a fruit name and a position, then insert it."""
        self._write("\n--- Add Fruit to Salad ---")
        name = self._prompt("Enter fruit name: ")
        if not name:
            self._write("Fruit name cannot be empty!")
            return

        try:
            position, end = self._ask_insert_position()
        except InvalidInputError as exc:
            self._invalid(exc)
        else:
            self.sequence.insert_at(position, name)
            if end is None:
                self._write(f"✓ Added '{name}' at position {position}!")
            else:
                self._write(f"✓ Added '{name}' to the {end}!")

        self.render()

    def remove_fruit(self) -> None:
        """Prompt for a position and remove the fruit there."""
        self._write("\n--- Remove Fruit from Salad ---")
        try:
            # Report an empty salad before prompting for a position
            self.sequence.clamp_remove_position(0)
        except EmptyCollectionError as exc:
            logger.info("Remove refused: %s", exc)
            self._write("Cannot remove: Salad is empty!")
            return

        try:
            position, end = self._ask_remove_position()
        except InvalidInputError as exc:
            self._invalid(exc)
        else:
            removed = self.sequence.remove_at(position)
            if end is None:
                self._write(f"✓ Removed '{removed}' from position {position}!")
            else:
                self._write(f"✓ Removed '{removed}' from the {end}!")

        self.render()

    def pick_random_fruit(self) -> None:
        """Report one fruit chosen at random, leaving the salad as is."""
        self._write("\n--- Pick a Random Fruit ---")
        try:
            fruit = self.sequence.pick_random(self._rng)
        except EmptyCollectionError as exc:
            logger.info("Pick refused: %s", exc)
            self._write("Cannot pick: Salad is empty!")
            return
        self._write(f"🎲 Randomly selected: '{fruit}'")

    def _finish(self) -> None:
        self._write("\n👋 Final Fruit Salad:")
        self._write(format_salad(self.sequence))
        self._write("\nGoodbye!")

    def run(self) -> None:
        """Loop over the menu until the user exits or input runs out."""
        if self._ends_only:
            add_label, remove_label = "to either end", "from either end"
        else:
            add_label, remove_label = "at any position", "from any position"
        actions = {
            "1": self.add_fruit,
            "2": self.remove_fruit,
            "3": self.pick_random_fruit,
        }

        while True:
            self._write("\n=== Menu ===")
            self._write(f"1. Add a fruit {add_label}")
            self._write(f"2. Remove a fruit {remove_label}")
            self._write("3. Pick a random fruit")
            self._write("4. Exit")
            try:
                choice = self._prompt("\nChoice (1-4): ")
                if choice == "4":
                    break
                action = actions.get(choice)
                if action is None:
                    self._write("Invalid choice! Please enter 1-4.")
                    continue
                action()
            except EOFError:
                logger.debug("Input exhausted, leaving menu")
                break

        self._finish()
