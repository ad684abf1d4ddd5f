"""Tests for models module."""

import pytest
from pathlib import Path

from linux_stable.models import (
    KernelVersion,
    UpdateMethod,
    UpdateMode,
    UpdateOptions,
    VersionPlan,
)


class TestKernelVersion:
    """Tests for KernelVersion class."""

    def test_parse_full_version(self):
        """Test parsing full version string."""
        kv = KernelVersion.parse("4.9.100")
        assert kv.major == 4
        assert kv.minor == 9
        assert kv.sublevel == 100
        assert kv.series == "4.9"

    def test_parse_short_version(self):
        """Test parsing version without sublevel."""
        kv = KernelVersion.parse("4.14")
        assert kv.series == "4.14"
        assert kv.sublevel == 0

    def test_parse_tag_name(self):
        """Test parsing a tag with its leading v."""
        kv = KernelVersion.parse("v3.18.78")
        assert kv == KernelVersion(major=3, minor=18, sublevel=78)

    def test_parse_extraversion(self):
        """Test trailing extraversion is ignored."""
        kv = KernelVersion.parse("4.9.100-rc1\n")
        assert kv.sublevel == 100

    @pytest.mark.parametrize("text", ["", "4", "abc", "v", "x.9.1"])
    def test_parse_invalid(self, text):
        """Test unparsable versions are rejected."""
        with pytest.raises(ValueError):
            KernelVersion.parse(text)

    def test_str_representation(self):
        """Test string representation."""
        assert str(KernelVersion.parse("4.9.100")) == "4.9.100"

    def test_str_keeps_zero_sublevel(self):
        """Test .0 releases are shown in full."""
        assert str(KernelVersion.parse("4.14.0")) == "4.14.0"
        assert str(KernelVersion.parse("v4.14")) == "4.14.0"

    @pytest.mark.parametrize("text", ["4.9.101-rc1", "4.9.101.2", "4.9.x", "4.9."])
    def test_parse_strict_rejects_suffixes(self, text):
        """Test strict parsing refuses anything but numbers."""
        with pytest.raises(ValueError):
            KernelVersion.parse(text, strict=True)

    @pytest.mark.parametrize("text,expected", [
        ("4.9.101", "4.9.101"),
        ("v4.9.101", "4.9.101"),
        ("4.14", "4.14.0"),
    ])
    def test_parse_strict(self, text, expected):
        """Test strict parsing of plain versions."""
        assert str(KernelVersion.parse(text, strict=True)) == expected

    def test_tag(self):
        """Test tag names."""
        assert KernelVersion.parse("4.9.100").tag == "v4.9.100"
        assert KernelVersion.parse("4.14.0").tag == "v4.14"

    def test_next_sublevel(self):
        """Test stepping one sublevel."""
        assert str(KernelVersion.parse("4.9.100").next_sublevel()) == "4.9.101"
        assert str(KernelVersion.parse("4.14").next_sublevel()) == "4.14.1"


class TestVersionPlan:
    """Tests for VersionPlan class."""

    def test_range_expression(self):
        """Test cherry-pick range."""
        plan = VersionPlan(
            current=KernelVersion.parse("4.9.100"),
            latest=KernelVersion.parse("4.9.105"),
            target=KernelVersion.parse("4.9.101"),
        )
        assert plan.range_expression == "v4.9.100..v4.9.101"

    def test_range_expression_from_zero_sublevel(self):
        """Test range lower bound for a .0 tree."""
        plan = VersionPlan(
            current=KernelVersion.parse("4.14.0"),
            latest=KernelVersion.parse("4.14.3"),
            target=KernelVersion.parse("4.14.1"),
        )
        assert plan.range_expression == "v4.14..v4.14.1"


class TestUpdateOptions:
    """Tests for UpdateOptions class."""

    def test_defaults(self):
        """Test default options."""
        options = UpdateOptions(kernel_folder=Path("/src/linux"))
        assert options.update_method is None
        assert options.update_mode is UpdateMode.ONE_STEP
        assert options.needs_update_method is True

    @pytest.mark.parametrize("flags", [{"fetch_only": True}, {"print_latest_only": True}])
    def test_short_runs_need_no_method(self, flags):
        """Test fetch-only and print-latest runs."""
        options = UpdateOptions(kernel_folder=Path("/src/linux"), **flags)
        assert options.needs_update_method is False

    def test_immutable(self):
        """Test options cannot be changed after creation."""
        options = UpdateOptions(kernel_folder=Path("/src/linux"), update_method=UpdateMethod.MERGE)
        with pytest.raises(AttributeError):
            options.update_method = UpdateMethod.CHERRY_PICK

    def test_enum_values(self):
        """Test enum values match the command line wording."""
        assert UpdateMethod("cherry-pick") is UpdateMethod.CHERRY_PICK
        assert UpdateMethod("merge") is UpdateMethod.MERGE
