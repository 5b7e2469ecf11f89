"""Component-table assembly for the status line renderer.

Provider option mappings become ordered ``Component`` lists, and ``surround``
wraps a component in colored separator glyphs. Highlights and colors are
evaluated lazily: every ``hl`` here is a closure the renderer calls with its
render context.
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field

from .theme import StatusTheme, resolve_separator

DISABLED = False

Highlight = dict[str, object]


@dataclass(frozen=True)
class ProviderOptions:
    """Options attached to one provider; unknown keys are kept in ``extra``."""

    condition: object = None
    on_click: object = None
    update: object = None
    hl: object = None
    extra: Mapping[str, object] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, value: ProviderOptions | Mapping[str, object]) -> ProviderOptions:
        if isinstance(value, ProviderOptions):
            return value
        known = {"condition", "on_click", "update", "hl"}
        return cls(
            condition=value.get("condition"),
            on_click=value.get("on_click"),
            update=value.get("update"),
            hl=value.get("hl"),
            extra={key: item for key, item in value.items() if key not in known},
        )

    def get(self, key: str, default: object = None) -> object:
        if key in {"condition", "on_click", "update", "hl"}:
            value = getattr(self, key)
            return default if value is None else value
        return self.extra.get(key, default)


@dataclass
class Component:
    """One node of a component table.

    Leaf components render ``provider``; composite components render their
    ``children`` in order. ``condition``, ``update``, ``hl`` and ``init`` are
    passed through to the renderer untouched.
    """

    provider: object = None
    opts: ProviderOptions | None = None
    condition: object = None
    on_click: object = None
    update: object = None
    hl: object = None
    init: Callable[[object], None] | None = None
    children: list[Component] = field(default_factory=list)


@dataclass(frozen=True)
class ColorSet:
    main: str | None = None
    left: str | None = None
    right: str | None = None


@dataclass(frozen=True)
class LiteralColor:
    name: str


@dataclass(frozen=True)
class ComputedColor:
    fn: Callable[[object], object]


Color = LiteralColor | ColorSet | ComputedColor


def as_color(value: object) -> Color | None:
    """Convert a raw color value into a :data:`Color` variant.

    Strings become ``LiteralColor``, ``{main, left, right}`` mappings become
    ``ColorSet`` and callables become ``ComputedColor``.
    """
    if value is None or isinstance(value, (LiteralColor, ColorSet, ComputedColor)):
        return value
    if isinstance(value, str):
        return LiteralColor(value)
    if isinstance(value, Mapping):
        return ColorSet(main=value.get("main"), left=value.get("left"), right=value.get("right"))
    if callable(value):
        return ComputedColor(value)
    return None


def _color_set(value: object) -> ColorSet | None:
    if isinstance(value, ComputedColor):
        return None
    color = as_color(value)
    if isinstance(color, LiteralColor):
        return ColorSet(main=color.name)
    if isinstance(color, ColorSet):
        return color
    return None


def resolve_color(color: Color | None, ctx: object) -> ColorSet | None:
    """Resolve ``color`` against the current render context."""
    if isinstance(color, ComputedColor):
        return _color_set(color.fn(ctx))
    return _color_set(color)


@dataclass(frozen=True)
class UpdatePolicy:
    """Editor events after which a component should be re-evaluated."""

    events: tuple[str, ...] = ()
    pattern: str | None = None


def as_update_policy(value: object) -> UpdatePolicy | None:
    """Normalize an ``update`` option.

    ``True`` means "update freely" (no subscriptions), a string or sequence
    names events, and a mapping may carry ``events`` plus ``pattern``.
    """
    if value is None or value is False:
        return None
    if isinstance(value, UpdatePolicy):
        return value
    if value is True:
        return UpdatePolicy()
    if isinstance(value, str):
        return UpdatePolicy(events=(value,))
    if isinstance(value, Mapping):
        events = value.get("events") or ()
        if isinstance(events, str):
            events = (events,)
        pattern = value.get("pattern")
        return UpdatePolicy(
            events=tuple(event for event in events if isinstance(event, str)),
            pattern=pattern if isinstance(pattern, str) else None,
        )
    if isinstance(value, Sequence):
        return UpdatePolicy(events=tuple(event for event in value if isinstance(event, str)))
    return None


def update_events(update: object) -> Callable[[object], None] | None:
    """Return an ``init`` hook that attaches the update policy to the render context.

    The renderer subscribes to ``ctx.update_policy`` events on first init.
    """
    policy = as_update_policy(update)
    if policy is None:
        return None

    def init(ctx: object) -> None:
        if getattr(ctx, "update_policy", None) is None:
            setattr(ctx, "update_policy", policy)

    return init


def _never_update(*_args: object) -> bool:
    return False


def build_provider(
    opts: ProviderOptions | Mapping[str, object] | None,
    provider: object,
    index: int | None = None,
) -> Component | bool:
    """Convert provider options into a component.

    ``None``, ``False`` and any other non-mapping value mean the provider is
    switched off and give ``DISABLED``; an empty mapping still builds.
    """
    if not isinstance(opts, (ProviderOptions, Mapping)):
        return DISABLED
    options = ProviderOptions.from_mapping(opts)
    return Component(
        provider=provider,
        opts=options,
        condition=options.condition,
        on_click=options.on_click,
        update=options.update,
        hl=options.hl,
    )


def setup_providers(
    opts: Mapping[str, object],
    providers: Sequence[str],
    setup: Callable[[object, str, int], object] = build_provider,
) -> list[object]:
    """Build components for ``providers`` in order.

    ``setup`` receives the provider's options (or ``None``), its name, and its
    1-based position. Providers without options come back as ``DISABLED``
    when the default builder is used.
    """
    return [setup(opts.get(provider), provider, index) for index, provider in enumerate(providers, start=1)]


def surround(
    separator: str | Sequence[str],
    color: object,
    component: Component,
    condition: object = None,
    update: object = None,
    *,
    theme: StatusTheme | None = None,
) -> Component:
    """Wrap ``component`` between colored separators.

    ``separator`` names a pair in the theme's separator table or is a literal
    ``(left, right)`` pair; a side with an empty glyph is left out. The
    separators take their foreground from ``main`` and their background from
    ``left``/``right``; the wrapped component's background becomes ``main``.
    """
    left_glyph, right_glyph = resolve_separator(separator, theme)
    surround_color = as_color(color)
    surrounded = Component(condition=condition)

    if left_glyph:

        def left_hl(ctx: object) -> Highlight | None:
            colors = resolve_color(surround_color, ctx)
            if colors is None:
                return None
            return {"fg": colors.main, "bg": colors.left}

        surrounded.children.append(Component(provider=left_glyph, hl=left_hl))

    component_hl = component.hl

    def hl(ctx: object) -> Highlight:
        if callable(component_hl):
            highlight = dict(component_hl(ctx) or {})
        elif isinstance(component_hl, Mapping):
            highlight = copy.deepcopy(dict(component_hl))
        else:
            highlight = {}
        colors = resolve_color(surround_color, ctx)
        if colors is not None:
            highlight["bg"] = colors.main
        return highlight

    component.hl = hl
    surrounded.children.append(component)

    if right_glyph:

        def right_hl(ctx: object) -> Highlight | None:
            colors = resolve_color(surround_color, ctx)
            if colors is None:
                return None
            return {"fg": colors.main, "bg": colors.right}

        static = bool(update) or not isinstance(surround_color, ComputedColor)
        surrounded.children.append(
            Component(
                provider=right_glyph,
                hl=right_hl,
                update=_never_update if static else None,
                init=update_events(update) if update else None,
            )
        )

    return surrounded


__all__ = [
    "DISABLED",
    "Highlight",
    "ProviderOptions",
    "Component",
    "ColorSet",
    "LiteralColor",
    "ComputedColor",
    "Color",
    "as_color",
    "resolve_color",
    "UpdatePolicy",
    "as_update_policy",
    "update_events",
    "build_provider",
    "setup_providers",
    "surround",
]
