"""
Attempt shape validation.

An attempt is accepted for a dictionary lookup iff it has exactly the length
of the solution. Vocabulary membership is a separate check done by the
Dictionary (`find_word`), so an unknown word and a wrong-length word are
reported differently to the player.
"""


def validate_attempt(attempt: str, expected_len: int) -> bool:
    """Return True if `attempt` has `expected_len` characters."""
    return len(attempt) == expected_len
