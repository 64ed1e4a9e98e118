"""Error kinds raised while scaffolding a project.

Every failure path in the tool raises a subclass of ``ScaffoldError``; the
command layer prints it and turns it into a non-zero exit code.
"""

from create_luau_app.helpers.helpers_logging import print_error


class ScaffoldError(Exception):
    """Base class for every scaffolding failure."""

    def __init__(self, message: str = "Failed") -> None:
        super().__init__(message)
        self.message = message

    def print_error(self) -> None:
        """Print the error message using the logging helper."""
        print_error(self.message)


class ScaffoldCanceled(ScaffoldError):
    """Raised when the user picks the cancel entry of a menu."""

    def __init__(self, message: str = "Canceled command") -> None:
        super().__init__(message)


class ScaffoldInputError(ScaffoldError):
    """Raised when a text prompt returns an empty value."""

    pass


class DestinationNotEmptyError(ScaffoldError):
    """Raised when the project directory already has entries."""

    pass


class TemplateRegistryError(ScaffoldError):
    """Raised when the template table is incomplete or malformed."""

    pass


class CloneError(ScaffoldError):
    """Raised when git cannot clone the template."""

    pass


class ConfigPatchError(ScaffoldError):
    """Raised when a cloned JSON file is missing or cannot be parsed."""

    pass
