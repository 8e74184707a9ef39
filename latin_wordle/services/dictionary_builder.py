"""
Dictionary Builder

Produces the game dictionary (words.json) from the Medieval Latina source
dictionary: every entry whose normalized spelling has exactly GUESS_LENGTH
letters, keyed by that normalized spelling.

Usage:
    python -m latin_wordle.services.dictionary_builder [output_path]
"""

import json
import sys
from typing import Dict, Mapping

import requests

from ..config.app_config import Config
from ..config.game_settings import GUESS_LENGTH
from ..models.errors import EmptyDictionaryError
from ..models.game import WordData
from ..utils.game_logger import game_logger
from ..utils.normalize import normalize_diacritics

NO_TRANSLATION = "No translation available"
UNKNOWN_PART = "Unknown"


def build_game_dictionary(source: Mapping[str, Dict], word_length: int = GUESS_LENGTH) -> Dict[str, WordData]:
    """
    Filters a source dictionary down to playable words.

    Missing meaning and part of speech get placeholder values so the
    game never has to deal with absent metadata. When two source words
    normalize to the same key, the later one wins.

    Args:
        source: Original spelling -> raw metadata
        word_length: Required number of letters after normalization

    Returns:
        Dict[str, WordData]: Normalized word -> metadata

    Raises:
        EmptyDictionaryError: If no source word qualifies
    """
    entries: Dict[str, WordData] = {}

    for original, data in source.items():
        word = normalize_diacritics(original)
        if len(word) != word_length or not word.isalpha():
            continue

        data = data or {}
        entries[word] = WordData(
            original=original,
            meaning=data.get('meaning') or NO_TRANSLATION,
            part=data.get('part') or UNKNOWN_PART,
            pronunciation=data.get('pronunciation') or data.get('ipa') or '',
        )

    if not entries:
        raise EmptyDictionaryError(f"No {word_length}-letter words found in dictionary")

    return entries


def fetch_source_dictionary(url: str = Config.DICTIONARY_URL,
                            timeout: int = Config.DICTIONARY_FETCH_TIMEOUT) -> Dict[str, Dict]:
    """
    Downloads the source dictionary JSON.

    Raises:
        requests.exceptions.RequestException: On network or HTTP errors
        ValueError: If the payload is not a JSON object
    """
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    data = response.json()
    if not isinstance(data, dict):
        raise ValueError("Source dictionary must be a JSON object keyed by word")
    return data


def write_game_dictionary(entries: Mapping[str, WordData], path: str) -> None:
    payload = {word: data.to_dict() for word, data in entries.items()}
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    output_path = argv[0] if argv else Config.DICTIONARY_PATH

    try:
        print(f"Fetching dictionary from: {Config.DICTIONARY_URL}")
        source = fetch_source_dictionary()
        print(f"Fetched {len(source)} total words")

        entries = build_game_dictionary(source)
        print(f"Processed {len(entries)} {GUESS_LENGTH}-letter words")

        write_game_dictionary(entries, output_path)
        print(f"Dictionary built successfully: {output_path}")
        print(f"Available words: {', '.join(list(entries)[:10])}...")
        game_logger.logger.info(f"Dictionary rebuilt with {len(entries)} words at {output_path}")
        return 0

    except (requests.exceptions.RequestException, ValueError, OSError) as e:
        print(f"Error building dictionary: {e}")
        game_logger.logger.error(f"Error building dictionary: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
