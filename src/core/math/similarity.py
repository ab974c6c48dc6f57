"""
String Similarity — Расстояние Левенштейна и нормированная похожесть

Модуль обеспечивает детерминированное сравнение строк для нечёткой
проверки ответов:
- levenshtein_distance: минимальное число вставок/удалений/замен
- similarity: 1 - distance / max(len(a), len(b)), диапазон [0, 1]

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. similarity("", "") == 1.0 (деления на ноль не происходит)
2. similarity(a, b) == similarity(b, a)
3. similarity(a, a) == 1.0
4. Результат всегда в [0, 1]
"""


def levenshtein_distance(a: str, b: str) -> int:
    """
    Расстояние Левенштейна между двумя строками.

    Классическое динамическое программирование с двумя строками таблицы,
    память O(min(len(a), len(b))).

    Args:
        a: Первая строка
        b: Вторая строка

    Returns:
        Минимальное количество односимвольных правок

    Examples:
        >>> levenshtein_distance("kitten", "sitting")
        3
        >>> levenshtein_distance("", "abc")
        3
    """
    if a == b:
        return 0
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            cost = 0 if char_a == char_b else 1
            current.append(
                min(
                    previous[j] + 1,  # удаление
                    current[j - 1] + 1,  # вставка
                    previous[j - 1] + cost,  # замена
                )
            )
        previous = current

    return previous[-1]


def similarity(a: str, b: str) -> float:
    """
    Нормированная похожесть строк на основе расстояния Левенштейна.

    similarity = 1 - distance / max(len(a), len(b))

    Args:
        a: Первая строка
        b: Вторая строка

    Returns:
        Похожесть в [0, 1]; 1.0 если обе строки пустые

    Examples:
        >>> similarity("", "")
        1.0
        >>> similarity("abcd", "abcf")
        0.75
    """
    max_length = max(len(a), len(b))
    if max_length == 0:
        return 1.0

    return 1.0 - levenshtein_distance(a, b) / max_length
