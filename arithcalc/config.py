from dataclasses import dataclass

DEFAULT_PROMPT = "> "
DEFAULT_EXIT_COMMAND = "\\q"
DEFAULT_LOG_LEVEL = "WARNING"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class ConsoleConfig:
    prompt: str = DEFAULT_PROMPT
    exit_command: str = DEFAULT_EXIT_COMMAND
    # reject input left over after a complete expression
    strict: bool = False
