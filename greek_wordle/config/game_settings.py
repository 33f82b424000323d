"""
Game Configuration Constants Module

This module defines the static game rules: board dimensions, the Greek
alphabet, the on-screen keyboard layout and the pool of secret words.
All game parameters are centralized here to enable easy modification.
"""

import json
import os
from typing import Dict, Final, List, Optional

# Board dimensions
WORD_LENGTH: Final[int] = 5
MAX_GUESSES: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

# Greek uppercase letters, no accents and no final sigma
GREEK_ALPHABET: Final[str] = "ΑΒΓΔΕΖΗΘΙΚΛΜΝΞΟΠΡΣΤΥΦΧΨΩ"
ALPHABET: Final[frozenset] = frozenset(GREEK_ALPHABET)

# Special keys
ENTER_KEY: Final[str] = "ENTER"
DELETE_KEY: Final[str] = "⌫"

KEYBOARD_LAYOUT: Final[List[List[str]]] = [
    ["Ε", "Ρ", "Τ", "Υ", "Θ", "Ι", "Ο", "Π"],
    ["Α", "Σ", "Δ", "Φ", "Γ", "Η", "Ξ", "Κ", "Λ"],
    [ENTER_KEY, "Ζ", "Χ", "Ψ", "Ω", "Β", "Ν", "Μ", DELETE_KEY],
]

# How long the "guess too short" signal stays up
SHAKE_DURATION_SECONDS: Final[float] = 0.5

GREEK_VOWELS: Final[frozenset] = frozenset("ΑΕΗΙΟΥΩ")

WORDS_FILE: Final[str] = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'words.json')


def _check_word(word: str, index: int) -> None:
    if len(word) != WORD_LENGTH:
        raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

    if not all(char in ALPHABET for char in word):
        raise ValueError(f"Word at index {index} '{word}' contains letters outside the Greek alphabet")


def load_word_list(json_file_path: str = WORDS_FILE) -> List[str]:
    """
    Load the word list from a JSON file.

    Args:
        json_file_path: Path to a JSON array of words

    Returns:
        List[str]: List of uppercase Greek words

    Raises:
        FileNotFoundError: If the file is not found
        ValueError: If the JSON is malformed, the list is empty or contains invalid words
    """
    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {os.path.basename(json_file_path)}: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not word_list:
        raise ValueError("Word list cannot be empty")

    uppercase_words = [str(word).upper() for word in word_list]
    for index, word in enumerate(uppercase_words):
        _check_word(word, index)

    return uppercase_words


# Secret word pool loaded from JSON file
WORD_LIST: Final[List[str]] = load_word_list()


def validate_word_list_integrity(word_list: Optional[List[str]] = None) -> bool:
    """
    Validates the integrity and consistency of the word database.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly WORD_LENGTH characters
    2. Character validation: Only letters of the Greek alphabet allowed
    3. Uniqueness validation: No duplicate entries
    4. Format validation: Consistent uppercase formatting

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    words = WORD_LIST if word_list is None else word_list

    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if word != word.upper():
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")
        _check_word(word, index)

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics(word_list: Optional[List[str]] = None) -> Dict:
    """
    Analyzes word list and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in database
            - avg_vowel_count: Average vowels per word
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: Five most frequent letters
    """
    words = WORD_LIST if word_list is None else word_list
    if not words:
        return {"error": "Word list is empty"}

    total_vowels = sum(len([char for char in word if char in GREEK_VOWELS]) for word in words)

    letter_frequency: Dict[str, int] = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":

    try:
        validate_word_list_integrity()
        print(" Word list validation passed")

        stats = get_word_statistics()
        print(f" Game statistics: {stats}")

        print(" All configuration validation checks passed")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
