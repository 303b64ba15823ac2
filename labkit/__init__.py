"""Small console exercises: zero-bit counting, magic squares and palindromes."""

__version__ = "0.1.0"
__all__ = ["magic", "palindrome", "zerobits"]