"""Styled terminal output helpers for the create-luau-app CLI."""


class Colors:
    """ANSI color codes for terminal output."""
    HEADER = '\033[95m'
    OKCYAN = '\033[96m'
    OKGREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    BG_MAGENTA = '\033[45m'
    WHITE = '\033[97m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'
    UNDERLINE = '\033[4m'
    DIM = '\033[2m'


def print_header(msg: str) -> None:
    """Print a header message."""
    print(f"{Colors.HEADER}{Colors.BOLD}{msg}{Colors.ENDC}")


def print_info(msg: str) -> None:
    """Print an info message."""
    print(f"{Colors.OKCYAN}{msg}{Colors.ENDC}")


def print_success(msg: str) -> None:
    """Print a success message."""
    print(f"{Colors.OKGREEN}✓ {msg}{Colors.ENDC}")


def print_warning(msg: str) -> None:
    """Print a warning message."""
    print(f"{Colors.YELLOW}⚠️  {msg}{Colors.ENDC}")


def print_error(msg: str) -> None:
    """Print an error message in bold red."""
    print(f"{Colors.RED}{Colors.BOLD}❌ {msg}{Colors.ENDC}")


def print_command(command: str) -> None:
    """Print a shell command the user should run next."""
    print(f"   {Colors.BOLD}{Colors.UNDERLINE}{command}{Colors.ENDC}")


def print_link(label: str, url: str) -> None:
    """Print a label followed by a highlighted URL."""
    print(
        f"{Colors.RED}{Colors.BOLD}{label}{Colors.ENDC}"
        + f"{Colors.BG_MAGENTA}{Colors.WHITE}{url}{Colors.ENDC}"
    )
