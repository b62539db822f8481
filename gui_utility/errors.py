# Exceptions raised by the gui_utility helpers


class GuiUtilityError(Exception):
    """Base class for every argument error raised by this package."""


class InvalidArgument(GuiUtilityError, ValueError):
    pass


class IncompatibleTarget(GuiUtilityError, TypeError):
    pass


class TypeMismatch(GuiUtilityError, TypeError):
    pass


def bad_argument(position, name, func, constraint):
    return f"Bad argument #{position} `{name}` to {func}: {constraint}"
