"""
Game Configuration Constants Module

This module defines the fixed rules of the daily puzzle: number of tries,
key sentinels, emoji used for score sharing and the static word list.
None of these are runtime-configurable.
"""

import json
import os
from typing import Dict, Final, List

# Core Game Configuration Constants
NUMBER_OF_TRIES: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

# Key sentinels emitted by the input surface alongside single letters
ENTER: Final[str] = "ENTER"
CLEAR: Final[str] = "CLEAR"

# Marker for a grid cell that holds no letter
EMPTY_CELL: Final[str] = ""

# Title line of the shareable score
SHARE_TITLE: Final[str] = "Wordle"

# Emoji glyph per feedback color; unset cells render as nothing
COLORS_TO_EMOJI: Final[Dict[str, str]] = {
    "CORRECT": "🟩",
    "PRESENT": "🟨",
    "ABSENT": "⬛",
    "UNSET": "",
}


# Load word list from JSON file
def _load_word_list() -> List[str]:
    """
    Load word list from words.json file.

    Returns:
        List[str]: List of lowercase words, one per day of the year

    Raises:
        FileNotFoundError: If words.json file is not found
        json.JSONDecodeError: If JSON file is malformed
        ValueError: If word list is empty or contains invalid words
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'words.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not word_list:
        raise ValueError("Word list cannot be empty")

    lowercase_words = [str(word).lower() for word in word_list]

    word_length = len(lowercase_words[0])
    for word in lowercase_words:
        if len(word) != word_length:
            raise ValueError(f"Word '{word}' is not {word_length} characters long")
        if not (word.isascii() and word.isalpha()):
            raise ValueError(f"Word '{word}' contains non-ASCII-letter characters")

    return lowercase_words


# Daily word list, indexed by day of the year
WORD_LIST: Final[List[str]] = _load_word_list()


def validate_word_list_integrity() -> bool:
    """
    Validates the integrity and consistency of the word database.

    This function performs validation to ensure:
    1. Length validation: All words share the same length
    2. Character validation: Only alphabetic characters allowed
    3. Uniqueness validation: No duplicate entries
    4. Format validation: Consistent lowercase formatting

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not WORD_LIST:
        raise ValueError("Word list cannot be empty")

    word_length = len(WORD_LIST[0])
    for index, word in enumerate(WORD_LIST):
        if len(word) != word_length:
            raise ValueError(f"Word at index {index} '{word}' is not {word_length} characters long")

        if not (word.isascii() and word.isalpha()):
            raise ValueError(f"Word at index {index} '{word}' contains non-ASCII-letter characters")

        if not word.islower():
            raise ValueError(f"Word at index {index} '{word}' is not in lowercase format")

    if len(WORD_LIST) != len(set(WORD_LIST)):
        duplicates = sorted({word for word in WORD_LIST if WORD_LIST.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics() -> dict:
    """
    Analyzes word list and returns statistical information.

    Returns:
        dict: total_words, word_length, avg_vowel_count and the five
            most common letters
    """
    if not WORD_LIST:
        return {"error": "Word list is empty"}

    vowels = set('aeiou')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in WORD_LIST)

    letter_frequency = {}
    for word in WORD_LIST:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(WORD_LIST),
        "word_length": len(WORD_LIST[0]),
        "avg_vowel_count": round(total_vowels / len(WORD_LIST), 2),
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":

    try:
        validate_word_list_integrity()
        print(" Word list validation passed")

        stats = get_word_statistics()
        print(f" Word list statistics: {stats}")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        raise SystemExit(1)
