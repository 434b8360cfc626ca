"""Small, classic algorithm exercises: linked lists, binary addition, stairs,
substring search, Roman numerals, integer square roots and the Tower of Hanoi."""

__version__ = "0.1.0"

__all__ = ["binary", "hanoi", "linkedlist", "roman", "search", "sqrt", "stairs"]