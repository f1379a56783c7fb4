from dataclasses import dataclass
import os

from dotenv import load_dotenv


load_dotenv()  # loads variables from a local .env file (if it exists)


def _get_str(name: str, default: str) -> str:
    """
    Read a string from environment variables.
    Example: GROCER_INPUT_PATH="data/purchases.txt"
    """
    value = os.getenv(name)
    return value if value else default


def _get_bool(name: str, default: bool) -> bool:
    """
    Read a yes/no flag from environment variables.
    Example: GROCER_COLOR="false"
    """
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Config:
    """
    One place for simple project settings.
    """
    input_path: str = _get_str("GROCER_INPUT_PATH", "CS210_Project_Three_Input_File.txt")
    backup_path: str = _get_str("GROCER_BACKUP_PATH", "frequency.dat")
    use_color: bool = _get_bool("GROCER_COLOR", True)
    bar_mark: str = _get_str("GROCER_BAR_MARK", "*")
