"""
Pipeline Steps Package

Contains the pipeline steps for splitting files.
Each step is a self-contained module with an execute() function.
"""

from . import (
    step_00_discover_files,
    step_01_split_files,
    step_02_compress_outputs,
    step_03_report_generation
)

__all__ = [
    'step_00_discover_files',
    'step_01_split_files',
    'step_02_compress_outputs',
    'step_03_report_generation'
]
