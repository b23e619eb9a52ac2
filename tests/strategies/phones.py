"""Hypothesis strategies for Taiwan phone numbers.

Events emitted:
- phone_kind={mobile|taipei|taichung|kaohsiung|other_7|other_8|toll_free}
- phone_spelling={plain|hyphens|spaces|plus886|bare886|parens}

Python 3.13+.
"""

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite


def _digits(count: int) -> st.SearchStrategy[str]:
    return st.text(alphabet="0123456789", min_size=count, max_size=count)


def mobile_numbers() -> st.SearchStrategy[str]:
    """National mobile numbers: 09 + 8 digits."""
    return _digits(8).map(lambda rest: "09" + rest)


def landline_numbers() -> st.SearchStrategy[str]:
    """Taipei and Taichung landlines: 02/04 + 8 digits."""
    return st.tuples(st.sampled_from(["02", "04"]), _digits(8)).map("".join)


@composite
def phone_numbers(draw: st.DrawFn) -> tuple[str, str]:
    """Generate valid national-format numbers with their rule name.

    Events emitted:
    - phone_kind={mobile|taipei|taichung|kaohsiung|other_7|other_8|toll_free}

    Returns:
        Tuple of (digits, kind)
    """
    kind = draw(st.sampled_from([
        "mobile", "taipei", "taichung", "kaohsiung", "other_7", "other_8", "toll_free",
    ]))
    match kind:
        case "mobile":
            number = draw(mobile_numbers())
        case "taipei":
            number = "02" + draw(_digits(8))
        case "taichung":
            number = "04" + draw(_digits(8))
        case "kaohsiung":
            number = "07" + draw(_digits(7))
        case "other_7":
            number = draw(st.sampled_from(["03", "05", "06", "08"])) + draw(_digits(7))
        case "other_8":
            number = draw(st.sampled_from(["03", "05", "06"])) + draw(_digits(8))
        case _:  # toll_free
            number = "0800" + draw(_digits(6))
    event(f"phone_kind={kind}")
    return number, kind


@composite
def phone_spellings(draw: st.DrawFn) -> tuple[str, str]:
    """Generate a valid number and one way a user might type it.

    Events emitted:
    - phone_spelling={plain|hyphens|spaces|plus886|bare886|parens}

    Returns:
        Tuple of (typed text, national digits)
    """
    number, _ = draw(phone_numbers())
    spelling = draw(st.sampled_from(["plain", "hyphens", "spaces", "plus886", "bare886", "parens"]))
    match spelling:
        case "plain":
            typed = number
        case "hyphens":
            typed = f"{number[:4]}-{number[4:7]}-{number[7:]}"
        case "spaces":
            typed = " ".join(number)
        case "plus886":
            typed = "+886 " + number[1:]
        case "bare886":
            typed = "886" + number[1:]
        case _:  # parens
            typed = f"({number[:2]}) {number[2:]}"
    event(f"phone_spelling={spelling}")
    return typed, number
