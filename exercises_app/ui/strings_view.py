from exercises_app.data import samples
from exercises_app.rules.text import hyphenate, replace_word, reverse_words, split_words


def exercise_4():
    sentence = samples.SENTENCE
    words = split_words(sentence)
    print(f"[4] Words array length: {len(words)}")
    print(f"[4] Contains 'fox'? {'fox' in sentence}")
    print(f"[4] New sentence: {replace_word(sentence, 'dog', 'cat')}")
    print(f"[4] Hyphenated: {hyphenate(sentence)}")


def exercise_5():
    print("[5] Characters:")
    for character in samples.CHARACTERS:
        print(character)

    phrase = samples.PHRASE
    print(f"[5] Original phrase: {phrase}")
    print(f"[5] Reversed word order: {reverse_words(phrase)}")


def exercise_9():
    fruits = list(samples.FRUITS)
    print(f"[9] Count after add: {len(fruits)}")
    fruits.remove("Banana")
    fruits.sort()
    print("[9] Sorted fruits: " + ", ".join(fruits))
    print("[9] We have apples!" if "Apple" in fruits else "[9] No apples.")
