"""Fuzzy name matching for food items."""

import re
from collections.abc import Callable

DEFAULT_SIMILARITY_THRESHOLD = 0.85

_WHITESPACE = re.compile(r"\s+")
_QUOTES = re.compile("[’']")
_MIN_TAIL_WORDS = 3


def _same_last_word(first: str, second: str) -> bool:
    return first.split(" ")[-1] == second.split(" ")[-1]


# Common dish categories with an optional one-word modifier in front.
FOOD_PATTERNS: tuple[tuple[re.Pattern[str], Callable[[str, str], bool]], ...] = tuple(
    (re.compile(pattern, re.IGNORECASE), _same_last_word)
    for pattern in (
        r"(\w+\s+)?(protein\s+)?shake",
        r"(\w+\s+)?sandwich",
        r"(\w+\s+)?burger",
        r"(\w+\s+)?salad",
        r"(\w+\s+)?smoothie",
        r"(\w+\s+)?coffee",
        r"(\w+\s+)?tea",
        r"(\w+\s+)?wrap",
        r"(\w+\s+)?bowl",
    )
)


def normalize_item_name(name: str) -> str:
    """Canonicalize an item name for comparison."""
    normalized = _WHITESPACE.sub(" ", name.lower().strip())
    normalized = _QUOTES.sub("'", normalized)
    return normalized.replace("&", "and")


def levenshtein_distance(first: str, second: str) -> int:
    """Return the edit distance between two strings."""
    rows, cols = len(first), len(second)
    dp = [[0] * (cols + 1) for _ in range(rows + 1)]
    for i in range(rows + 1):
        dp[i][0] = i
    for j in range(cols + 1):
        dp[0][j] = j

    for i in range(1, rows + 1):
        for j in range(1, cols + 1):
            if first[i - 1] == second[j - 1]:
                dp[i][j] = dp[i - 1][j - 1]
            else:
                dp[i][j] = 1 + min(dp[i - 1][j], dp[i][j - 1], dp[i - 1][j - 1])
    return dp[rows][cols]


def similarity_ratio(first: str, second: str) -> float:
    """Return 1 - distance / longest length, or 1.0 for two empty strings."""
    longest = max(len(first), len(second))
    if longest == 0:
        return 1.0
    return 1 - levenshtein_distance(first, second) / longest


def are_similar_names(
    first: str, second: str, threshold: float = DEFAULT_SIMILARITY_THRESHOLD
) -> bool:
    """Decide whether two names denote the same logical food.

    Checks run in order and stop at the first hit: exact match after
    normalization, identical last two words when both names have at least
    three words, a shared dish category from ``FOOD_PATTERNS``, and finally
    the edit-distance ratio against ``threshold``.
    """
    norm_first = normalize_item_name(first)
    norm_second = normalize_item_name(second)
    if norm_first == norm_second:
        return True

    words_first = norm_first.split()
    words_second = norm_second.split()
    if (
        len(words_first) >= _MIN_TAIL_WORDS
        and len(words_second) >= _MIN_TAIL_WORDS
        and words_first[-2:] == words_second[-2:]
    ):
        return True

    for pattern, compare in FOOD_PATTERNS:
        match_first = pattern.search(norm_first)
        match_second = pattern.search(norm_second)
        if match_first and match_second and compare(
            match_first.group(0), match_second.group(0)
        ):
            return True

    return similarity_ratio(norm_first, norm_second) >= threshold


def food_name(food: dict[str, object]) -> str:
    """Return a food's name, or an empty string when it has none."""
    name = food.get("name")
    return name if isinstance(name, str) else ""


def find_matching_food(
    target: dict[str, object],
    foods: list[dict[str, object]],
    *,
    threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
) -> dict[str, object] | None:
    """Return the first food whose name is similar to the target's name."""
    target_name = food_name(target)
    for food in foods:
        if are_similar_names(target_name, food_name(food), threshold):
            return food
    return None
