from .store import Dictionary, Solution, get_dictionary
from .validator import validate_wordlist, pretty_summary

__all__ = ["Dictionary", "Solution", "get_dictionary", "validate_wordlist", "pretty_summary"]
