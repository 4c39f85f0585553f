"""Chat text style presets.

Manages style presets (default, vivid, muted, minimal) that map semantic
document roles (heading_1, body, code_block, link, ...) to concrete
:class:`StyleAttributes` and decoration used by the Markdown front-end.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from jsoncrafter.style import StyleAttributes


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------

@dataclass
class StyleDef:
    """Complete role definition: text style plus surrounding decoration."""

    name: str
    style: StyleAttributes = field(default_factory=StyleAttributes)
    prefix: str = ""
    suffix: str = ""

    def derive(self, **overrides) -> StyleDef:
        """Return a copy with style fields overridden.

        ``prefix`` and ``suffix`` may be overridden too.
        """
        prefix = overrides.pop("prefix", self.prefix)
        suffix = overrides.pop("suffix", self.suffix)
        return StyleDef(
            name=self.name,
            style=self.style.derive(**overrides),
            prefix=prefix,
            suffix=suffix,
        )


ROLE_NAMES = (
    "heading_1", "heading_2", "heading_3", "heading_4", "heading_5", "heading_6",
    "body", "code_block", "inline_code", "link", "image", "blockquote",
    "table_header", "table_body", "list_item", "ordered_item", "task_open",
    "task_done", "footnote", "footnote_ref", "horizontal_rule",
)


# ---------------------------------------------------------------------------
# Preset definitions
# ---------------------------------------------------------------------------

def _build_default_styles() -> dict[str, StyleDef]:
    """Build the **default** preset styles."""

    heading_colors = {1: "gold", 2: "gold", 3: "yellow", 4: "yellow", 5: "white", 6: "white"}

    styles: dict[str, StyleDef] = {}

    for level in range(1, 7):
        styles[f"heading_{level}"] = StyleDef(
            name=f"heading_{level}",
            style=StyleAttributes(
                color=heading_colors[level],
                bold=True,
                underlined=level == 1 or None,
            ),
        )

    styles["body"] = StyleDef(name="body")

    styles["code_block"] = StyleDef(
        name="code_block",
        style=StyleAttributes(color="gray", font="minecraft:uniform"),
    )
    styles["inline_code"] = StyleDef(
        name="inline_code",
        style=StyleAttributes(color="gray", font="minecraft:uniform"),
    )
    styles["link"] = StyleDef(
        name="link",
        style=StyleAttributes(color="aqua", underlined=True),
    )
    styles["image"] = StyleDef(
        name="image",
        style=StyleAttributes(color="aqua", italic=True),
        prefix="[",
        suffix="]",
    )
    styles["blockquote"] = StyleDef(
        name="blockquote",
        style=StyleAttributes(color="gray", italic=True),
        prefix="> ",
    )
    styles["table_header"] = StyleDef(
        name="table_header",
        style=StyleAttributes(bold=True),
    )
    styles["table_body"] = StyleDef(name="table_body")
    styles["list_item"] = StyleDef(name="list_item", prefix="\u2022 ")     # •
    styles["ordered_item"] = StyleDef(name="ordered_item", prefix="{n}. ")
    styles["task_open"] = StyleDef(name="task_open", prefix="\u2610 ")     # ☐
    styles["task_done"] = StyleDef(
        name="task_done",
        style=StyleAttributes(strikethrough=True, color="dark_gray"),
        prefix="\u2611 ",  # ☑
    )
    styles["footnote"] = StyleDef(
        name="footnote",
        style=StyleAttributes(color="dark_gray"),
    )
    styles["footnote_ref"] = StyleDef(
        name="footnote_ref",
        style=StyleAttributes(color="dark_aqua"),
        prefix="[",
        suffix="]",
    )
    styles["horizontal_rule"] = StyleDef(
        name="horizontal_rule",
        style=StyleAttributes(color="dark_gray", strikethrough=True),
        prefix=" " * 32,
    )

    return styles


def _build_vivid_styles() -> dict[str, StyleDef]:
    """Build the **vivid** preset -- saturated colours, hex where it helps."""

    base = _build_default_styles()

    heading_colors = {1: 0xFF5555, 2: 0xFFAA00, 3: 0xFFFF55, 4: 0x55FF55, 5: 0x55FFFF, 6: 0xFF55FF}
    for level in range(1, 7):
        base[f"heading_{level}"] = base[f"heading_{level}"].derive(color=heading_colors[level])

    base["body"] = StyleDef(name="body", style=StyleAttributes(color="white"))
    base["code_block"] = base["code_block"].derive(color="green")
    base["inline_code"] = base["inline_code"].derive(color="green")
    base["link"] = base["link"].derive(color="light_purple")
    base["blockquote"] = base["blockquote"].derive(color="dark_aqua", prefix="\u258c ")  # ▌
    base["table_header"] = base["table_header"].derive(color="gold")
    base["list_item"] = base["list_item"].derive(color="yellow", prefix="\u00bb ")  # »
    base["footnote_ref"] = base["footnote_ref"].derive(color="light_purple")

    return base


def _build_muted_styles() -> dict[str, StyleDef]:
    """Build the **muted** preset -- greys, no underlines."""

    base = _build_default_styles()

    for level in range(1, 7):
        base[f"heading_{level}"] = base[f"heading_{level}"].derive(
            color="white" if level <= 2 else "gray",
            underlined=None,
        )

    base["body"] = StyleDef(name="body", style=StyleAttributes(color="gray"))
    base["code_block"] = base["code_block"].derive(color="dark_gray")
    base["inline_code"] = base["inline_code"].derive(color="dark_gray")
    base["link"] = base["link"].derive(color="white", underlined=None, italic=True)
    base["image"] = base["image"].derive(color="white")
    base["footnote_ref"] = base["footnote_ref"].derive(color="white")

    return base


def _build_minimal_styles() -> dict[str, StyleDef]:
    """Build the **minimal** preset -- structure only, no colours."""

    styles: dict[str, StyleDef] = {name: StyleDef(name=name) for name in ROLE_NAMES}

    for level in range(1, 7):
        styles[f"heading_{level}"] = StyleDef(
            name=f"heading_{level}",
            style=StyleAttributes(bold=True),
        )

    styles["link"] = StyleDef(name="link", style=StyleAttributes(underlined=True))
    styles["image"] = StyleDef(name="image", prefix="[", suffix="]")
    styles["blockquote"] = StyleDef(name="blockquote", prefix="> ")
    styles["table_header"] = StyleDef(name="table_header", style=StyleAttributes(bold=True))
    styles["list_item"] = StyleDef(name="list_item", prefix="- ")
    styles["ordered_item"] = StyleDef(name="ordered_item", prefix="{n}. ")
    styles["task_open"] = StyleDef(name="task_open", prefix="[ ] ")
    styles["task_done"] = StyleDef(name="task_done", prefix="[x] ")
    styles["footnote_ref"] = StyleDef(name="footnote_ref", prefix="[", suffix="]")
    styles["horizontal_rule"] = StyleDef(name="horizontal_rule", prefix="-" * 16)

    return styles


# ---------------------------------------------------------------------------
# Preset registry
# ---------------------------------------------------------------------------

_PRESET_BUILDERS = {
    "default": _build_default_styles,
    "vivid": _build_vivid_styles,
    "muted": _build_muted_styles,
    "minimal": _build_minimal_styles,
}


# ---------------------------------------------------------------------------
# StyleManager
# ---------------------------------------------------------------------------

class StyleManager:
    """Manages style presets and provides role definitions.

    Usage::

        sm = StyleManager("vivid")
        heading = sm.get_style("heading_1")
        link_style = sm.get_link_style()
    """

    PRESETS = list(_PRESET_BUILDERS.keys())

    def __init__(self, preset: str = "default") -> None:
        if preset not in _PRESET_BUILDERS:
            raise ValueError(
                f"Unknown preset {preset!r}. Choose from: {', '.join(_PRESET_BUILDERS)}"
            )
        self.preset = preset
        self._styles: dict[str, StyleDef] = {}
        self._load_preset(preset)

    # -- public API ---------------------------------------------------------

    def get_style(self, name: str) -> StyleDef:
        """Get a role definition by semantic name.

        Supported names are listed in :data:`ROLE_NAMES`.
        Falls back to ``body`` for unknown names.
        """
        return self._styles.get(name, self._styles["body"])

    def get_heading_style(self, level: int) -> StyleDef:
        """Return the :class:`StyleDef` for heading level *1--6*."""
        level = max(1, min(6, level))
        return self.get_style(f"heading_{level}")

    def get_body_style(self) -> StyleDef:
        return self.get_style("body")

    def get_code_style(self) -> StyleDef:
        return self.get_style("code_block")

    def get_inline_code_style(self) -> StyleDef:
        return self.get_style("inline_code")

    def get_link_style(self) -> StyleDef:
        return self.get_style("link")

    def list_style_names(self) -> list[str]:
        """Return all available role names in this preset."""
        return sorted(self._styles.keys())

    # -- internals ----------------------------------------------------------

    def _load_preset(self, preset: str) -> None:
        builder = _PRESET_BUILDERS[preset]
        self._styles = builder()
