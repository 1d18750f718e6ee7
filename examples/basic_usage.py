"""Basic usage example for fruitsalad."""

import random

from fruitsalad import EmptyCollectionError, create_sequence


def main() -> None:
    """Demonstrate positional sequence operations on both backings."""
    rng = random.Random(2024)

    for backend in ("linked", "deque"):
        print(f"=== {backend} ===\n")
        salad = create_sequence(["Arbutus", "Loquat", "Strawberry Tree Berry"], backend=backend)
        print(f"Start:        {salad.to_list()}")

        salad.insert_at(1, "Fig")
        print(f"insert_at(1): {salad.to_list()}")

        salad.insert_at(99, "Cherry")  # clamps to the back
        print(f"insert_at(99): {salad.to_list()}")

        removed = salad.remove_at(-5)  # clamps to the front
        print(f"remove_at(-5) -> {removed!r}: {salad.to_list()}")

        salad.shuffle(rng)
        print(f"Shuffled:     {salad.to_list()}")
        print(f"Random pick:  {salad.pick_random(rng)!r}\n")

    empty = create_sequence()
    try:
        empty.pop_front()
    except EmptyCollectionError as exc:
        print(f"Empty salad: {exc}")


if __name__ == "__main__":
    main()
