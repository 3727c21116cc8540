"""
Spacing and radius rule tests

Tests padding, offset ("margin") and corner radius tokens, including the
integer unit scale, bracketed raw values, and prefix priority.
"""

import pytest

from classname.config import AppSettings
from classname.lib.rules import RuleRegistry, resolve
from classname.models.rules import RuleFamily
from classname.models.directives import (
    Axis,
    Side,
    Identity,
    PaddingAll,
    PaddingAxis,
    PaddingSide,
    OffsetAll,
    OffsetAxis,
    CornerRadius,
)


class TestPadding:
    """Test p-, px-, py-, pt-, pb-, pl-, pr- tokens"""

    @pytest.mark.parametrize("count", [0, 1, 2, 4, 10, 64])
    def test_unit_count(self, count):
        """p-N is N x 4 units"""
        assert resolve(f"p-{count}") == PaddingAll(value=count * 4.0)

    def test_bracketed_dp(self):
        """p-[10dp] is exactly 10 units"""
        assert resolve("p-[10dp]") == PaddingAll(value=10.0)

    def test_bracketed_fraction(self):
        """Bracketed values may be fractional"""
        assert resolve("p-[12.5dp]") == PaddingAll(value=12.5)

    def test_bracketed_bare_float(self):
        """A bare float in brackets is in base units"""
        assert resolve("p-[7]") == PaddingAll(value=7.0)

    def test_axes(self):
        """px- and py- are per-axis"""
        assert resolve("px-2") == PaddingAxis(axis=Axis.X, value=8.0)
        assert resolve("py-3") == PaddingAxis(axis=Axis.Y, value=12.0)

    def test_sides(self):
        """pt-/pb-/pl-/pr- map to top/bottom/start/end"""
        assert resolve("pt-1") == PaddingSide(side=Side.TOP, value=4.0)
        assert resolve("pb-1") == PaddingSide(side=Side.BOTTOM, value=4.0)
        assert resolve("pl-1") == PaddingSide(side=Side.START, value=4.0)
        assert resolve("pr-1") == PaddingSide(side=Side.END, value=4.0)

    def test_side_with_bracket(self):
        """Per-side padding accepts raw values"""
        assert resolve("pt-[3dp]") == PaddingSide(side=Side.TOP, value=3.0)

    def test_negative_padding_unresolved(self):
        """Negative padding cannot be applied"""
        assert resolve("p--1") == Identity()
        assert resolve("px-[-2dp]") == Identity()


class TestOffset:
    """Test m-, mx-, my-, mt-, mb-, ml-, mr- tokens"""

    def test_uniform(self):
        """m-N offsets both axes by the same value"""
        assert resolve("m-2") == OffsetAll(x=8.0, y=8.0)

    def test_axes_positive(self):
        """mx- and my- are positive single-axis offsets"""
        assert resolve("mx-1") == OffsetAxis(axis=Axis.X, value=4.0)
        assert resolve("my-1") == OffsetAxis(axis=Axis.Y, value=4.0)

    def test_top_positive(self):
        """mt- is a positive vertical offset"""
        assert resolve("mt-2") == OffsetAxis(axis=Axis.Y, value=8.0)

    def test_bottom_negated(self):
        """mb- is the same magnitude as mt-, negated"""
        assert resolve("mb-2") == OffsetAxis(axis=Axis.Y, value=-8.0)

    def test_left_and_right(self):
        """ml- is positive, mr- negated, both horizontal"""
        assert resolve("ml-3") == OffsetAxis(axis=Axis.X, value=12.0)
        assert resolve("mr-3") == OffsetAxis(axis=Axis.X, value=-12.0)

    def test_bracketed(self):
        """Offsets accept raw values"""
        assert resolve("ml-[2.5dp]") == OffsetAxis(axis=Axis.X, value=2.5)
        assert resolve("mr-[2.5dp]") == OffsetAxis(axis=Axis.X, value=-2.5)

    def test_signed_count(self):
        """Offsets may be negative"""
        assert resolve("m--2") == OffsetAll(x=-8.0, y=-8.0)


class TestRadius:
    """Test r- tokens"""

    def test_unit_count(self):
        """r-N is N x 4 units"""
        assert resolve("r-2") == CornerRadius(value=8.0)

    def test_bracketed(self):
        """r-[10dp] is exactly 10 units"""
        assert resolve("r-[10dp]") == CornerRadius(value=10.0)

    def test_bare_float(self):
        """Bare float in brackets"""
        assert resolve("r-[2.5]") == CornerRadius(value=2.5)

    def test_negative_unresolved(self):
        """Negative radius is unresolved"""
        assert resolve("r--1") == Identity()


class TestMalformedLengths:
    """Bad numeric literals degrade to Identity"""

    @pytest.mark.parametrize("token", [
        "p-abc",
        "p-",
        "p-4.5",
        "p-4px",
        "p- 4",
        "p-1_0",
        "p-0x10",
        "p-99999999999",
        "p-[]",
        "p-[",
        "p-[abc]",
        "p-[10px]",
        "p-[dp]",
        "p-[nan]",
        "p-[inf]",
        "p-[1e999]",
        "p-[10dp",
        "p-10dp]",
        "mt-x",
        "r-[10 dp]",
    ])
    def test_unresolved(self, token):
        """Malformed suffix resolves to Identity"""
        assert resolve(token) == Identity()

    @pytest.mark.parametrize("token", [
        "p-" + "1" * 5000,
        "m--" + "9" * 5000,
        "r-" + "1" * 20000,
        "p-[" + "1" * 20000 + "x]",
        "p-[" + "1" * 20000 + "dpx]",
        "mt-[" + "1." + "1" * 20000 + "e]",
    ])
    def test_long_literals_unresolved(self, token):
        """Very long numeric literals are unresolved, not an error"""
        assert resolve(token) == Identity()

    def test_leading_zeros_do_not_count(self):
        """Zero padding does not push a small count out of range"""
        assert resolve("p-" + "0" * 5000 + "4") == PaddingAll(value=16.0)

    def test_long_bracketed_float_resolves(self):
        """A long but valid raw literal still parses"""
        assert resolve("p-[" + "0" * 20000 + "1.5dp]") == PaddingAll(value=1.5)


class TestPriority:
    """Longer prefixes win over shorter ones"""

    def test_padding_prefix_order(self):
        """Per-axis and per-side padding prefixes come before p-"""
        names = RuleRegistry().rules_list()
        for name in ["px-", "py-", "pt-", "pb-", "pl-", "pr-"]:
            assert names.index(name) < names.index("p-")

    def test_offset_prefix_order(self):
        """Per-axis offset prefixes come before m-"""
        names = RuleRegistry().rules_list()
        for name in ["mx-", "my-", "mt-", "mb-", "ml-", "mr-"]:
            assert names.index(name) < names.index("m-")

    def test_gradient_before_background(self):
        """Exact gradient tokens come before bg-"""
        names = RuleRegistry().rules_list()
        assert names.index("bg-gradient-to-r") < names.index("bg-")
        assert names.index("bg-gradient-to-b") < names.index("bg-")

    def test_prefix_needs_dash(self):
        """Tokens that only share letters with a prefix are not matched"""
        assert resolve("px4") == Identity()
        assert resolve("padding-4") == Identity()


class TestSettings:
    """Unit scales and raw units come from settings"""

    def test_custom_space_unit(self):
        """space_unit scales spacing counts"""
        registry = RuleRegistry(AppSettings(space_unit=8.0))
        assert registry.resolve("p-2") == PaddingAll(value=16.0)
        assert registry.resolve("mb-1") == OffsetAxis(axis=Axis.Y, value=-8.0)

    def test_custom_radius_unit(self):
        """radius_unit scales radius counts independently"""
        registry = RuleRegistry(AppSettings(radius_unit=2.0))
        assert registry.resolve("r-3") == CornerRadius(value=6.0)
        assert registry.resolve("p-3") == PaddingAll(value=12.0)

    def test_extra_raw_unit(self):
        """Additional raw units can be configured"""
        registry = RuleRegistry(AppSettings(raw_units={"dp": 1.0, "px": 0.5}))
        assert registry.resolve("p-[10px]") == PaddingAll(value=5.0)
        assert registry.resolve("p-[10dp]") == PaddingAll(value=10.0)

    def test_raw_unit_split(self):
        """rawUnit_split strips known suffixes only"""
        settings = AppSettings()
        assert settings.rawUnit_split("12.5dp") == ("12.5", 1.0)
        assert settings.rawUnit_split("12.5") is None
        assert settings.rawUnit_split("12.5px") is None


class TestRuleTable:
    """The dispatch table is inspectable"""

    def test_families(self):
        """Rules are grouped by family in priority order"""
        registry = RuleRegistry()
        padding = [spec.name for spec in registry.rules_listByFamily(RuleFamily.PADDING)]
        assert padding == ["px-", "py-", "pt-", "pb-", "pl-", "pr-", "p-"]
        assert len(registry.rules_listByFamily(RuleFamily.GRADIENT)) == 2

    def test_spec_lookup(self):
        """spec_get finds the rule a token dispatches to"""
        registry = RuleRegistry()
        assert registry.spec_get("pt-2").name == "pt-"
        assert registry.spec_get("bg-gradient-to-b").exact is True
        assert registry.spec_get("nope") is None
