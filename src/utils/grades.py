"""Grade-number helpers. 0 = Pre-K, 1 = Kindergarten, 2 = 1st Grade ... 13 = 12th Grade."""

_ORDINAL_SUFFIXES = {1: "st", 2: "nd", 3: "rd"}


def grade_label(grade: int) -> str:
    """Human label for a grade number; anything outside 0-13 becomes 'Grade N'."""
    if grade == 0:
        return "Pre-K"
    if grade == 1:
        return "Kindergarten"
    if 2 <= grade <= 13:
        n = grade - 1
        suffix = "th" if 11 <= n <= 13 else _ORDINAL_SUFFIXES.get(n % 10, "th")
        return f"{n}{suffix} Grade"
    return f"Grade {grade}"
