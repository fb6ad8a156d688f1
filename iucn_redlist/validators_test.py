"""Unit tests for argument validators."""

import pytest

from .errors import ValidationError
from .validators import assert_is, assert_n, assert_not_na, check_paging, check_scalar, require


def describe_assert_is():

    def it_accepts_matching_type():
        assert_is("genus", "Gorilla", str)

    def it_accepts_any_of_several_types():
        assert_is("code", 1, (str, int))

    def it_ignores_none():
        assert_is("genus", None, str)

    def it_rejects_wrong_type():
        with pytest.raises(ValidationError, match="genus must be of class str"):
            assert_is("genus", 5, str)

    def it_names_all_classes():
        with pytest.raises(ValidationError, match="code must be of class str, int"):
            assert_is("code", 1.5, (str, int))

    def it_rejects_bool_where_int_is_expected():
        with pytest.raises(ValidationError):
            assert_is("id", True, int)


def describe_assert_n():

    def it_accepts_scalars_for_length_one():
        assert_n("genus", "Gorilla", 1)

    def it_rejects_lists_of_wrong_length():
        with pytest.raises(ValidationError, match="genus must be length 1"):
            assert_n("genus", ["a", "b"], 1)

    def it_ignores_none():
        assert_n("genus", None, 1)


def describe_assert_not_na():

    def it_rejects_nan():
        with pytest.raises(ValidationError, match="page must not be NA"):
            assert_not_na("page", float("nan"))

    def it_rejects_missing_elements():
        with pytest.raises(ValidationError):
            assert_not_na("codes", ["1", None])

    def it_accepts_values():
        assert_not_na("page", 1)
        assert_not_na("codes", ["1", "2"])


def describe_check_scalar():

    def it_runs_all_checks():
        with pytest.raises(ValidationError):
            check_scalar("code", ["1"], (str, int))


def describe_check_paging():

    def it_accepts_defaults():
        check_paging(True, True, 1, False)

    def it_rejects_non_bool_flags():
        with pytest.raises(ValidationError, match="quiet"):
            check_paging(True, True, 1, "no")

    def it_rejects_pages_below_one():
        with pytest.raises(ValidationError, match="page must be 1 or greater"):
            check_paging(True, False, 0, False)


def describe_require():

    def it_rejects_none():
        with pytest.raises(ValidationError, match="id is required"):
            require("id", None)
