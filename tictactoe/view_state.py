LIGHT = "light"
DARK = "dark"
THEMES = (LIGHT, DARK)


class ViewState:
    """
    display-only state owned by the window; no effect on the game
    """
    def __init__(self, theme=LIGHT):
        if theme not in THEMES:
            raise ValueError(f"unknown theme: {theme!r}")
        self.theme = theme

    @property
    def is_dark(self):
        return self.theme == DARK

    @property
    def theme_label(self):
        # caption for the button that switches to the other theme
        return "Light" if self.is_dark else "Dark"

    def toggle_theme(self):
        self.theme = LIGHT if self.is_dark else DARK
        return self.theme
