"""Static slot tables for the VS Code theme document.

Each entry names the configuration slot that supplies the color as a dotted
path (``section.slot``). Adding a surface or token rule is a table edit.
"""

PRIMARY = "background.primary"
SECONDARY = "background.secondary"

# Appended to a hex color to give it a fixed 20% alpha
SHADOW_ALPHA = "33"

# surface name -> (slot path, suffix)
SURFACE_COLORS = {
    "activityBar.background": (PRIMARY, ""),
    "editor.background": (PRIMARY, ""),
    "editorGroupHeader.tabsBackground": (SECONDARY, SHADOW_ALPHA),
    "editorWidget.background": (SECONDARY, ""),
    "input.background": (PRIMARY, ""),
    "panel.background": (SECONDARY, ""),
    "panel.border": (PRIMARY, ""),
    "sideBar.background": (SECONDARY, ""),
    "statusBar.background": (SECONDARY, ""),
    "terminal.background": (PRIMARY, ""),
    "tab.border": (PRIMARY, ""),
    "tab.inactiveBackground": (SECONDARY, ""),
    "titleBar.activeBackground": (PRIMARY, ""),
    "titleBar.inactiveBackground": (SECONDARY, ""),
    "widget.shadow": (PRIMARY, SHADOW_ALPHA),
}

# Order matters: editors resolve token scopes first match wins
TOKEN_RULES = [
    ("Comment", "comment", "language.comment"),
    ("Constant", "constant", "language.value"),
    ("Entity", "entity", "language.type"),
    ("Entity Name Function", "entity.name.function", "language.function"),
    ("Invalid", "invalid", "language.invalid"),
    ("Keyword Operator", "keyword.operator", "language.operator"),
    ("String", "string", "language.value"),
    ("Support", "support", "language.support"),
    ("Variable Parameter", "variable.parameter", "language.parameter"),
]


def build_colors(resolve):
    """Build the ``colors`` mapping.

    Args:
        resolve: Callable taking a slot path and returning its hex color
    """
    return {
        surface: resolve(path) + suffix
        for surface, (path, suffix) in SURFACE_COLORS.items()
    }


def build_token_colors(resolve):
    """Build the ordered ``tokenColors`` rule list."""
    return [
        {
            "name": name,
            "scope": scope,
            "settings": {"foreground": resolve(path)},
        }
        for name, scope, path in TOKEN_RULES
    ]
