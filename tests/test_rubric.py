"""
Tests for rubric loading and validation.
"""

import copy
import logging

import pytest
import yaml
from pydantic import ValidationError

from debate_scorer.exceptions import ConfigurationError
from debate_scorer.scoring import IndicatorKind, build_rubric, default_rubric, load_rubric
from debate_scorer.scoring.indicators import registered_kinds
from debate_scorer.scoring.rubric import DEFAULT_RUBRIC_PATH, SUPPORTED_KINDS


@pytest.fixture
def rubric_data():
    with open(DEFAULT_RUBRIC_PATH, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


class TestDefaultRubric:
    """The bundled rubric."""

    def test_loads(self):
        """The bundled rubric loads with four categories."""
        rubric = load_rubric()

        assert list(rubric.categories) == ["argumentation", "delivery", "rebuttal", "structure"]
        assert rubric.bonus_cap == 15
        assert rubric.penalty_floor == -20

    def test_category_weights(self):
        """Category weights match the documented split."""
        weights = {name: c.weight for name, c in default_rubric().categories.items()}
        assert weights == {"argumentation": 0.30, "delivery": 0.25, "rebuttal": 0.25, "structure": 0.20}

    def test_every_declared_kind_is_evaluated(self):
        """Every indicator kind has an evaluator."""
        rubric = default_rubric()

        assert rubric.unsupported_indicators() == []
        assert registered_kinds() == SUPPORTED_KINDS

    def test_bonus_cap_is_reachable(self):
        """Bonus rules can reach the cap."""
        rubric = default_rubric()
        assert rubric.max_bonus >= rubric.bonus_cap

    def test_cached_per_process(self):
        """The default rubric is loaded once."""
        assert default_rubric() is default_rubric()

    def test_immutable(self):
        """Rubric attributes cannot be reassigned."""
        rubric = default_rubric()
        with pytest.raises(ValidationError):
            rubric.version = "changed"

    def test_nested_mappings_are_read_only(self):
        """Categories and subcriteria of the shared rubric cannot be changed."""
        rubric = default_rubric()

        with pytest.raises(TypeError):
            del rubric.categories["argumentation"].subcriteria["evidence"]
        with pytest.raises(TypeError):
            rubric.categories["extra"] = rubric.categories["delivery"]
        with pytest.raises(AttributeError):
            rubric.categories.pop("delivery")

        assert list(rubric.categories) == ["argumentation", "delivery", "rebuttal", "structure"]
        assert "evidence" in rubric.categories["argumentation"].subcriteria

    def test_built_rubric_is_read_only(self, rubric_data):
        """Rubrics built from data are read-only too."""
        rubric = build_rubric(rubric_data)

        with pytest.raises(TypeError):
            rubric.categories["structure"].subcriteria["body"] = None


class TestRubricValidation:
    """Load-time validation failures."""

    def test_valid_data_builds(self, rubric_data):
        """Valid data builds a rubric."""
        rubric = build_rubric(rubric_data)
        assert rubric.version == "2.0"

    def test_category_weights_must_sum_to_one(self, rubric_data):
        """Category weights must sum to one."""
        data = copy.deepcopy(rubric_data)
        data["categories"]["structure"]["weight"] = 0.25

        with pytest.raises(ConfigurationError, match="category weights"):
            build_rubric(data)

    def test_subcriterion_weights_must_sum_to_one(self, rubric_data):
        """Subcriterion weights must sum to one."""
        data = copy.deepcopy(rubric_data)
        data["categories"]["rebuttal"]["subcriteria"]["balance"]["weight"] = 0.5

        with pytest.raises(ConfigurationError, match="subcriterion weights"):
            build_rubric(data)

    def test_category_needs_subcriteria(self, rubric_data):
        """A category needs subcriteria."""
        data = copy.deepcopy(rubric_data)
        data["categories"]["structure"]["subcriteria"] = {}

        with pytest.raises(ConfigurationError):
            build_rubric(data)

    def test_subcriterion_needs_indicators(self, rubric_data):
        """A subcriterion needs indicators."""
        data = copy.deepcopy(rubric_data)
        data["categories"]["structure"]["subcriteria"]["body"]["indicators"] = []

        with pytest.raises(ConfigurationError):
            build_rubric(data)

    def test_keyword_requires_word(self, rubric_data):
        """Keyword indicators need a word."""
        data = copy.deepcopy(rubric_data)
        data["categories"]["delivery"]["subcriteria"]["tone"]["indicators"].append(
            {"kind": "keyword", "points": 2}
        )

        with pytest.raises(ConfigurationError, match="requires 'word'"):
            build_rubric(data)

    def test_invalid_regex_rejected(self, rubric_data):
        """Bad regular expressions fail at load."""
        data = copy.deepcopy(rubric_data)
        data["categories"]["delivery"]["subcriteria"]["tone"]["indicators"].append(
            {"kind": "pattern", "regex": "(unclosed", "points": 2}
        )

        with pytest.raises(ConfigurationError, match="invalid regular expression"):
            build_rubric(data)

    def test_negative_points_rejected(self, rubric_data):
        """Indicator points cannot be negative."""
        data = copy.deepcopy(rubric_data)
        data["categories"]["delivery"]["subcriteria"]["tone"]["indicators"][0]["points"] = -1

        with pytest.raises(ConfigurationError):
            build_rubric(data)

    def test_positive_penalty_rejected(self, rubric_data):
        """Penalty points cannot be positive."""
        data = copy.deepcopy(rubric_data)
        data["penalties"]["too_short_points"] = 10

        with pytest.raises(ConfigurationError):
            build_rubric(data)

    def test_non_mapping_rejected(self):
        """Rubric data must be a mapping."""
        with pytest.raises(ConfigurationError, match="must be a mapping"):
            build_rubric(["not", "a", "rubric"])


class TestUnsupportedIndicators:
    """Declared kinds the engine does not evaluate."""

    @pytest.fixture
    def data_with_unknown_kind(self, rubric_data):
        data = copy.deepcopy(rubric_data)
        data["categories"]["delivery"]["subcriteria"]["tone"]["indicators"].append(
            {"kind": "vocal_projection", "points": 2}
        )
        return data

    def test_warns_and_reports(self, data_with_unknown_kind, caplog):
        """Unknown kinds are logged and reported."""
        with caplog.at_level(logging.WARNING, logger="debate_scorer.scoring.rubric"):
            rubric = build_rubric(data_with_unknown_kind)

        unsupported = rubric.unsupported_indicators()
        assert len(unsupported) == 1
        category, subcriterion, indicator = unsupported[0]
        assert (category, subcriterion, indicator.kind) == ("delivery", "tone", "vocal_projection")
        assert "vocal_projection" in caplog.text

    def test_strict_mode_raises(self, data_with_unknown_kind):
        """Strict mode rejects unknown kinds."""
        with pytest.raises(ConfigurationError, match="vocal_projection"):
            build_rubric(data_with_unknown_kind, strict=True)

    def test_known_kinds_enumerated(self):
        """Supported kinds come from the enum."""
        assert IndicatorKind.KEYWORD.value in SUPPORTED_KINDS
        assert "vocal_projection" not in SUPPORTED_KINDS


class TestLoadRubric:
    """Reading rubric files."""

    def test_missing_file(self, tmp_path):
        """A missing rubric file raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="Cannot read rubric"):
            load_rubric(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        """Broken YAML raises ConfigurationError."""
        path = tmp_path / "broken.yaml"
        path.write_text("categories: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="not valid YAML"):
            load_rubric(path)

    def test_custom_file(self, tmp_path, rubric_data):
        """A custom rubric file is loaded."""
        data = copy.deepcopy(rubric_data)
        data["version"] = "custom-1"
        path = tmp_path / "custom.yaml"
        path.write_text(yaml.safe_dump(data), encoding="utf-8")

        assert load_rubric(path).version == "custom-1"

    def test_unreachable_bonus_cap_warns(self, rubric_data, caplog):
        """An unreachable bonus cap is logged."""
        data = copy.deepcopy(rubric_data)
        data["bonuses"] = data["bonuses"][:3]

        with caplog.at_level(logging.WARNING, logger="debate_scorer.scoring.rubric"):
            rubric = build_rubric(data)

        assert rubric.max_bonus == 10
        assert "unreachable" in caplog.text
