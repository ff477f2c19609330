"""
Pipeline Configuration

Immutable configuration for a split run. Built once from the parsed command
line and passed by reference to every pipeline step.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

BYTES_PER_MB = 1024 * 1024
WILDCARD = "*"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class ConfigurationError(ValueError):
    """Raised when the split configuration is incomplete or invalid"""


@dataclass(frozen=True)
class SplitConfig:
    """Configuration for splitting one input pattern into an output folder"""

    input_pattern: str
    output_folder: str
    num_header_rows: int = 1
    max_lines_per_file: int = 0
    max_file_size_mb: int = 0
    repeat_header_rows: bool = True
    compress: bool = False
    output_filename_base: Optional[str] = None
    overwrite: bool = False
    recurse_subfolders: bool = False
    report_path: Optional[str] = None
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @classmethod
    def from_args(cls, args) -> "SplitConfig":
        """Create configuration from parsed command line arguments"""
        return cls(
            input_pattern=args.inputfilepattern or "",
            output_folder=args.outputfolder or "",
            num_header_rows=args.headerrows,
            max_lines_per_file=args.maxlinesperfile or 0,
            max_file_size_mb=args.maxfilesizemb or 0,
            repeat_header_rows=args.repeatheaderrows,
            compress=args.compress,
            output_filename_base=args.outputfilenamebase,
            overwrite=args.overwrite,
            recurse_subfolders=args.recursesubfolders,
            report_path=args.report,
            log_level=args.log_level,
            log_file=args.log_file,
        )

    @staticmethod
    def default_log_level() -> str:
        return os.getenv("FILE_SPLITTER_LOG_LEVEL", "INFO").upper()

    @staticmethod
    def default_log_file() -> Optional[str]:
        return os.getenv("FILE_SPLITTER_LOG_FILE") or None

    def validate(self) -> "SplitConfig":
        """Check required options and limits, before any file is touched"""
        if not self.input_pattern.strip():
            raise ConfigurationError("Missing required option -i=inputfilepattern")

        if not self.output_folder.strip():
            raise ConfigurationError("Missing required option -o=outputfolder")

        if self.num_header_rows < 0:
            raise ConfigurationError("-d=headerrows must not be negative")

        if self.max_lines_per_file < 0 or self.max_file_size_mb < 0:
            raise ConfigurationError("-m=maxlinesperfile and -x=maxfilesizeMB must be positive")

        if self.max_lines_per_file == 0 and self.max_file_size_mb == 0:
            raise ConfigurationError("Missing required option, one of -m=maxlinesperfile or -x=maxfilesizeMB")

        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log level '{self.log_level}', expected one of {', '.join(LOG_LEVELS)}"
            )

        return self

    @property
    def is_wildcard_pattern(self) -> bool:
        """True when the filename part of the input pattern holds a wildcard"""
        return WILDCARD in Path(self.input_pattern).name

    @property
    def max_bytes_per_file(self) -> int:
        return self.max_file_size_mb * BYTES_PER_MB

    @property
    def output_dir(self) -> Path:
        return Path(self.output_folder)
