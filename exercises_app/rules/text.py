from typing import List


def split_words(sentence: str) -> List[str]:
    return sentence.split(" ")


def hyphenate(sentence: str) -> str:
    return "-".join(split_words(sentence))


def reverse_words(phrase: str) -> str:
    """Reverse the word order, keeping each word intact."""
    return " ".join(reversed(split_words(phrase)))


def replace_word(sentence: str, old: str, new: str) -> str:
    return sentence.replace(old, new)
