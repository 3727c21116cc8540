"""
Rule implementations for class-string tokens

Each rule turns one token family into a style directive. Rules live in an
explicit, ordered dispatch table; the first rule whose literal matches a
token wins. Exact-match rules and longer prefixes are registered ahead of
shorter prefixes that would otherwise shadow them:

    bg-gradient-to-r   before  bg-
    px- py- pt- ...    before  p-
    mx- my- mt- ...    before  m-
"""

from typing import Dict, List, Optional

from ..config import AppSettings, appsettings
from ..models.directives import (
    Axis,
    Side,
    GradientDirection,
    StyleDirective,
    Identity,
    PaddingAll,
    PaddingAxis,
    PaddingSide,
    OffsetAll,
    OffsetAxis,
    CornerRadius,
    Background,
    Gradient,
    GRADIENT_STOPS,
)
from ..models.rules import RuleSpec, RuleFamily
from .values import length_parse, background_parse


class RuleRegistry:
    """
    Ordered registry of token rules

    Registration order is dispatch priority. The table can be listed with
    rules_list() so the priority order is inspectable.
    """

    def __init__(self, settings: Optional[AppSettings] = None) -> None:
        """
        Initialize the registry and register all built-in rules

        Args:
            settings: Settings carrying unit scales and raw units
                      (defaults to the appsettings singleton)
        """
        self.settings = settings if settings is not None else appsettings
        self.specs: List[RuleSpec] = []
        self.gradientRules_register()
        self.paddingRules_register()
        self.offsetRules_register()
        self.radiusRules_register()
        self.backgroundRules_register()

    def register(self, spec: RuleSpec) -> None:
        """Append a rule at the lowest priority"""
        self.specs.append(spec)

    def spec_get(self, token: str) -> Optional[RuleSpec]:
        """
        Find the highest-priority rule matching a token

        Args:
            token: Token to dispatch

        Returns:
            Matching RuleSpec, or None if no rule applies
        """
        for spec in self.specs:
            if spec.matches(token):
                return spec
        return None

    def resolve(self, token: str) -> StyleDirective:
        """
        Resolve a token to a directive

        Never raises: an unmatched token or an unresolvable suffix gives
        Identity.

        Args:
            token: Single class-string token

        Returns:
            Resolved directive, or Identity

        Example:
            >>> RuleRegistry().resolve("p-4")
            PaddingAll(value=16.0)
            >>> RuleRegistry().resolve("p-abc")
            Identity()
        """
        spec = self.spec_get(token)
        if spec is None:
            return Identity()

        directive = spec.handler(spec.suffix_get(token))
        if directive is None:
            return Identity()
        return directive

    def rules_listByFamily(self, family: RuleFamily) -> List[RuleSpec]:
        """Get all rules in a family, in priority order"""
        return [spec for spec in self.specs if spec.family == family]

    def rules_list(self) -> List[str]:
        """Rule names in priority order"""
        return [spec.name for spec in self.specs]

    def space_parse(self, value: str) -> Optional[float]:
        """Resolve a spacing suffix (padding/offset) to a length"""
        return length_parse(value, self.settings.space_unit, self.settings)

    def gradientRules_register(self) -> None:
        """Register the exact-match gradient tokens"""

        directions: Dict[str, GradientDirection] = {
            "bg-gradient-to-r": GradientDirection.HORIZONTAL,
            "bg-gradient-to-b": GradientDirection.VERTICAL,
        }

        for literal, direction in directions.items():

            def gradient_handler(value: str, direction: GradientDirection = direction) -> StyleDirective:
                return Gradient(direction=direction, stops=GRADIENT_STOPS)

            self.register(RuleSpec(
                name=literal,
                family=RuleFamily.GRADIENT,
                literal=literal,
                handler=gradient_handler,
                exact=True,
                description=f"Fixed two-stop {direction.value} gradient",
                examples=[literal],
            ))

    def paddingRules_register(self) -> None:
        """Register padding rules (axis and side prefixes before p-)"""

        def padding_make(value: str) -> Optional[float]:
            # Negative padding is not representable
            length = self.space_parse(value)
            if length is None or length < 0:
                return None
            return length

        axes: Dict[str, Axis] = {"px-": Axis.X, "py-": Axis.Y}
        for literal, axis in axes.items():

            def axis_handler(value: str, axis: Axis = axis) -> Optional[StyleDirective]:
                length = padding_make(value)
                return None if length is None else PaddingAxis(axis=axis, value=length)

            self.register(RuleSpec(
                name=literal,
                family=RuleFamily.PADDING,
                literal=literal,
                handler=axis_handler,
                description=f"Padding along the {axis.value} axis",
                examples=[f"{literal}2", f"{literal}[6dp]"],
            ))

        sides: Dict[str, Side] = {
            "pt-": Side.TOP,
            "pb-": Side.BOTTOM,
            "pl-": Side.START,
            "pr-": Side.END,
        }
        for literal, side in sides.items():

            def side_handler(value: str, side: Side = side) -> Optional[StyleDirective]:
                length = padding_make(value)
                return None if length is None else PaddingSide(side=side, value=length)

            self.register(RuleSpec(
                name=literal,
                family=RuleFamily.PADDING,
                literal=literal,
                handler=side_handler,
                description=f"Padding on the {side.value} side",
                examples=[f"{literal}1"],
            ))

        def all_handler(value: str) -> Optional[StyleDirective]:
            length = padding_make(value)
            return None if length is None else PaddingAll(value=length)

        self.register(RuleSpec(
            name="p-",
            family=RuleFamily.PADDING,
            literal="p-",
            handler=all_handler,
            description="Uniform padding on every side",
            examples=["p-4", "p-[12.5dp]"],
        ))

    def offsetRules_register(self) -> None:
        """Register offset ("margin") rules (axis and side prefixes before m-)"""

        # literal -> (axis, sign); mb- and mr- push back toward the origin
        axes: Dict[str, tuple] = {
            "mx-": (Axis.X, 1),
            "my-": (Axis.Y, 1),
            "mt-": (Axis.Y, 1),
            "mb-": (Axis.Y, -1),
            "ml-": (Axis.X, 1),
            "mr-": (Axis.X, -1),
        }
        for literal, (axis, sign) in axes.items():

            def axis_handler(value: str, axis: Axis = axis, sign: int = sign) -> Optional[StyleDirective]:
                length = self.space_parse(value)
                if length is None:
                    return None
                return OffsetAxis(axis=axis, value=sign * length)

            self.register(RuleSpec(
                name=literal,
                family=RuleFamily.OFFSET,
                literal=literal,
                handler=axis_handler,
                description=f"{'Negative' if sign < 0 else 'Positive'} offset along the {axis.value} axis",
                examples=[f"{literal}2"],
            ))

        def all_handler(value: str) -> Optional[StyleDirective]:
            length = self.space_parse(value)
            return None if length is None else OffsetAll(x=length, y=length)

        self.register(RuleSpec(
            name="m-",
            family=RuleFamily.OFFSET,
            literal="m-",
            handler=all_handler,
            description="Same offset on both axes",
            examples=["m-2", "m-[3dp]"],
        ))

    def radiusRules_register(self) -> None:
        """Register the corner radius rule"""

        def radius_handler(value: str) -> Optional[StyleDirective]:
            length = length_parse(value, self.settings.radius_unit, self.settings)
            if length is None or length < 0:
                return None
            return CornerRadius(value=length)

        self.register(RuleSpec(
            name="r-",
            family=RuleFamily.RADIUS,
            literal="r-",
            handler=radius_handler,
            description="Rounded-corner clipping",
            examples=["r-2", "r-[10dp]"],
        ))

    def backgroundRules_register(self) -> None:
        """Register the solid background rule (after the gradient literals)"""

        def background_handler(value: str) -> Optional[StyleDirective]:
            color = background_parse(value)
            return None if color is None else Background(color=color)

        self.register(RuleSpec(
            name="bg-",
            family=RuleFamily.BACKGROUND,
            literal="bg-",
            handler=background_handler,
            description="Solid background color with optional /opacity",
            examples=["bg-red", "bg-red/50", "bg-[#112233]/50", "bg-[rgb(10,20,30)]"],
        ))


# Default registry bound to the appsettings singleton
default_registry = RuleRegistry()


def resolve(token: str) -> StyleDirective:
    """
    Resolve a single token with the default registry

    Args:
        token: Class-string token

    Returns:
        Resolved directive, or Identity for anything unresolvable
    """
    return default_registry.resolve(token)
