"""Calculator configuration."""

import logging

from rich.logging import RichHandler

from mahc.ui.i18n import set_language


class CalculatorConfig:
    """Runtime options for the command-line calculator."""

    def __init__(
        self,
        language: str = "en",
        verbose: bool = False,
        show_breakdown: bool = False,
    ):
        self.language = language
        self.verbose = verbose
        self.show_breakdown = show_breakdown

    @classmethod
    def from_args(cls, args) -> "CalculatorConfig":
        return cls(
            language=args.lang,
            verbose=args.verbose,
            show_breakdown=args.breakdown,
        )

    @property
    def log_level(self) -> int:
        return logging.DEBUG if self.verbose else logging.WARNING

    def apply(self):
        """Install logging and language settings."""
        logging.basicConfig(
            level=self.log_level,
            format="%(message)s",
            handlers=[RichHandler(show_path=False)],
        )
        set_language(self.language)
