"""Basic usage example for strqueue."""

import logging

from strqueue import Allocator, StringQueue


def main() -> None:
    """Demonstrate queue operations and transformations."""
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    allocator = Allocator()
    queue = StringQueue(allocator=allocator)

    print("=== Insert ===")
    for word in ("gerbil", "bear", "dolphin", "bear", "ant"):
        queue.insert_tail(word)
    queue.insert_head("meerkat")
    print(f"Queue: {queue.values()} (size {queue.size()})\n")

    print("=== Transform ===")
    queue.sort()
    print(f"sort:              {queue.values()}")
    queue.delete_duplicates()
    print(f"delete_duplicates: {queue.values()}")
    queue.swap_pairs()
    print(f"swap_pairs:        {queue.values()}")
    queue.reverse()
    print(f"reverse:           {queue.values()}")
    queue.delete_middle()
    print(f"delete_middle:     {queue.values()}\n")

    print("=== Remove ===")
    buf = bytearray(4)
    element = queue.remove_head(buf)
    if element is not None:
        print(f"Removed {element.value!r}, buffer holds {bytes(buf)!r}")
        element.release()

    queue.free()
    allocator.check_leaks()
    print(f"\nDone: {allocator}")


if __name__ == "__main__":
    main()
