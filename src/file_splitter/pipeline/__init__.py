"""
File Splitting Pipeline

Main Components:
- SplitConfig: Immutable run configuration
- PipelineRunner: Orchestrator for the pipeline steps
- Steps 00-03: discover, split, compress, report

Usage:
    from file_splitter.pipeline import PipelineRunner, SplitConfig

    config = SplitConfig('data/*.csv', 'out/', max_lines_per_file=1000).validate()
    success = PipelineRunner(config).run_pipeline()
"""

from .pipeline_config import SplitConfig, ConfigurationError
from .pipeline_runner import PipelineRunner

__all__ = ['SplitConfig', 'ConfigurationError', 'PipelineRunner']
