"""Configuration classes for callpaths output."""

from dataclasses import dataclass


@dataclass
class OutputConfig:
    """Rendering settings for found paths."""

    # Text placed between two functions of a path
    arrow: str = " -> "

    # ANSI color for the start and target functions
    endpoint_color: str = "\033[31m"

    # ANSI color for intermediate functions
    intermediate_color: str = "\033[32m"

    reset: str = "\033[0m"

    # Indentation for --json output
    json_indent: int = 2

    def paint(self, text: str, color: str, enabled: bool) -> str:
        """Wrap ``text`` in ``color`` when coloring is enabled."""
        if not enabled:
            return text
        return f"{color}{text}{self.reset}"


# Global configuration instance
OUTPUT_CONFIG = OutputConfig()
