#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for options.py dataclasses."""

import dataclasses

import pytest

from pdf_text_diff.exceptions import ValidationError
from pdf_text_diff.options import DiffOptions, ReconstructionOptions


@pytest.mark.unit
class TestReconstructionOptions:
    """Tests for ReconstructionOptions."""

    def test_defaults(self):
        """Documents open with the empty password in lenient mode."""
        options = ReconstructionOptions()
        assert options.password == ""
        assert options.strict is False

    def test_frozen(self):
        """Options cannot be mutated in place."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            ReconstructionOptions().password = "x"

    def test_create_updated(self):
        """create_updated returns a modified copy."""
        original = ReconstructionOptions()
        updated = original.create_updated(password="secret")
        assert updated.password == "secret"
        assert original.password == ""
        assert isinstance(updated, ReconstructionOptions)


@pytest.mark.unit
class TestDiffOptions:
    """Tests for DiffOptions defaults and validation."""

    def test_defaults(self):
        """Defaults match the report layout."""
        options = DiffOptions()
        assert options.context_lines == 3
        assert options.separator_width == 80
        assert options.line_number_width == 4
        assert options.inline_ratio_threshold == 0.5
        assert options.color == "auto"

    def test_fields_have_help(self):
        """Every field documents itself in its metadata."""
        for field in dataclasses.fields(DiffOptions):
            assert field.metadata.get("help")

    @pytest.mark.parametrize(
        "kwargs, parameter",
        [
            ({"context_lines": -1}, "context_lines"),
            ({"separator_width": 0}, "separator_width"),
            ({"line_number_width": 0}, "line_number_width"),
            ({"inline_ratio_threshold": 1.5}, "inline_ratio_threshold"),
            ({"inline_ratio_threshold": -0.1}, "inline_ratio_threshold"),
            ({"color": "sometimes"}, "color"),
        ],
    )
    def test_invalid_values_rejected(self, kwargs, parameter):
        """Out-of-range values raise ValidationError naming the field."""
        with pytest.raises(ValidationError) as exc_info:
            DiffOptions(**kwargs)
        assert exc_info.value.parameter_name == parameter

    def test_create_updated_validates(self):
        """Derived copies are validated too."""
        with pytest.raises(ValidationError):
            DiffOptions().create_updated(context_lines=-5)

    def test_zero_context_allowed(self):
        """A zero context window is valid."""
        assert DiffOptions(context_lines=0).context_lines == 0
