"""Unit tests for JSON parsing."""

import json

import pandas as pd
import pytest

from .errors import ParseError
from .parsing import load_json, parse


def describe_parse():

    def it_keeps_nested_structures_without_flatten():
        raw = json.dumps({"assessments": [{"id": 1, "taxon": {"name": "a"}}]})
        assert parse(raw, flatten=False) == {"assessments": [{"id": 1, "taxon": {"name": "a"}}]}

    def it_turns_arrays_of_objects_into_frames():
        raw = json.dumps({"assessments": [{"id": 1, "year": "2020"}, {"id": 2, "year": "2021"}]})
        result = parse(raw)
        frame = result["assessments"]
        assert isinstance(frame, pd.DataFrame)
        assert list(frame.columns) == ["id", "year"]
        assert len(frame) == 2

    def it_flattens_nested_objects_into_dotted_columns():
        raw = json.dumps({"assessments": [{"id": 1, "taxon": {"name": "a"}}]})
        frame = parse(raw)["assessments"]
        assert list(frame.columns) == ["id", "taxon.name"]

    def it_leaves_scalar_arrays_as_lists():
        assert parse('{"codes": ["1", "2"]}') == {"codes": ["1", "2"]}

    def it_leaves_empty_arrays_alone():
        assert parse('{"assessments": []}') == {"assessments": []}

    def it_recurses_into_nested_objects():
        raw = json.dumps({"taxon": {"common_names": [{"name": "gorilla"}]}})
        frame = parse(raw)["taxon"]["common_names"]
        assert isinstance(frame, pd.DataFrame)
        assert frame.loc[0, "name"] == "gorilla"

    def it_handles_top_level_arrays():
        frame = parse('[{"code": "1"}, {"code": "2"}]')
        assert list(frame["code"]) == ["1", "2"]

    def it_passes_scalars_through():
        assert parse('{"red_list_version": "2025-1"}') == {"red_list_version": "2025-1"}

    def it_raises_parse_error_on_bad_json():
        with pytest.raises(ParseError):
            parse("{not json", flatten=False)


def describe_load_json():

    def it_raises_parse_error_on_empty_body():
        with pytest.raises(ParseError):
            load_json("")

    def it_raises_parse_error_on_none():
        with pytest.raises(ParseError):
            load_json(None)
