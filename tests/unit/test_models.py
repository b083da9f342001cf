"""Tests for Answers and Feature."""

import pytest
from pydantic import ValidationError

from forgesetup.models import Answers, Feature, check_env_safe


class TestFeature:
    def test_values_match_extension_names(self) -> None:
        assert [f.value for f in Feature] == ["ForgeCanvas", "ForgeDB", "ForgeRegex"]

    def test_labels(self) -> None:
        assert Feature.CANVAS.label == "Canvas (ForgeCanvas)"
        assert Feature.DB.label == "ForgeDB (Database System)"
        assert Feature.REGEX.label == "ForgeRegex (Regex Tools)"


class TestAnswers:
    def test_empty_strings_allowed(self) -> None:
        answers = Answers(token="", mongo_uri="", prefix="")
        assert answers.token == ""
        assert answers.features == frozenset()

    def test_features_coerced_from_strings(self) -> None:
        answers = Answers(features=["ForgeRegex", "ForgeCanvas"])
        assert answers.features == frozenset({Feature.REGEX, Feature.CANVAS})

    def test_duplicate_features_collapse(self) -> None:
        answers = Answers(features=["ForgeDB", "ForgeDB"])
        assert answers.features == frozenset({Feature.DB})

    def test_unknown_feature_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Answers(features=["ForgeMusic"])

    def test_frozen(self) -> None:
        answers = Answers(token="abc")
        with pytest.raises(ValidationError):
            answers.token = "other"  # type: ignore[misc]

    @pytest.mark.parametrize("field", ["token", "mongo_uri", "prefix"])
    def test_double_quote_rejected(self, field: str) -> None:
        with pytest.raises(ValidationError):
            Answers(**{field: 'ab"c'})

    def test_newline_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Answers(token="abc\nMONGO_URI=evil")

    def test_special_characters_pass_through(self) -> None:
        answers = Answers(mongo_uri="mongodb+srv://user:p@ss=w0rd@host/db?retryWrites=true", prefix="$'!")
        assert answers.prefix == "$'!"


class TestCheckEnvSafe:
    def test_plain_value(self) -> None:
        check_env_safe("mongodb://x")

    def test_carriage_return(self) -> None:
        with pytest.raises(ValueError, match="line breaks"):
            check_env_safe("abc\r")
