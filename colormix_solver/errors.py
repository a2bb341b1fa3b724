"""Exceptions raised by the color blend solver."""


class InvalidFormatError(ValueError):
    """Raised when a color string is not a well-formed #rrggbb hex code."""


class ArityMismatchError(ValueError):
    """Raised when colors and percentages are not paired one to one."""

    def __init__(self, num_colors: int, num_percentages: int):
        self.num_colors = num_colors
        self.num_percentages = num_percentages
        super().__init__(
            f"Expected one percentage per color, got {num_colors} colors "
            f"and {num_percentages} percentages"
        )
