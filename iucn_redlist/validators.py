"""Argument checks run by endpoint functions before any request is made.

All checks pass when the value is None (argument not given).
"""

import math

from .errors import ValidationError


def assert_is(name, value, types):
    """Check that value is an instance of types."""
    if value is None:
        return
    if not isinstance(types, tuple):
        types = (types,)
    # bool is an int subclass; only accept it when asked for explicitly
    if not isinstance(value, types) or (isinstance(value, bool) and bool not in types):
        names = ", ".join(t.__name__ for t in types)
        raise ValidationError(f"{name} must be of class {names}")


def _length(value):
    if isinstance(value, (list, tuple, set, dict)):
        return len(value)
    return 1


def assert_n(name, value, n):
    """Check that value has length n (scalars count as length 1)."""
    if value is None:
        return
    if _length(value) != n:
        raise ValidationError(f"{name} must be length {n}")


def _is_na(value):
    return value is None or (isinstance(value, float) and math.isnan(value))


def assert_not_na(name, value):
    """Check that value is not NaN and holds no missing elements."""
    if value is None:
        return
    items = value if isinstance(value, (list, tuple, set)) else [value]
    if any(_is_na(v) for v in items):
        raise ValidationError(f"{name} must not be NA")


def check_scalar(name, value, types):
    """Type, length and NA check for a single-valued argument."""
    assert_is(name, value, types)
    assert_n(name, value, 1)
    assert_not_na(name, value)


def check_paging(parse, all_pages, page, quiet):
    check_scalar("parse", parse, bool)
    check_scalar("all_pages", all_pages, bool)
    check_scalar("page", page, int)
    check_scalar("quiet", quiet, bool)
    if page is not None and page < 1:
        raise ValidationError("page must be 1 or greater")


def require(name, value):
    if value is None:
        raise ValidationError(f"{name} is required")
