"""
File Splitter

Splits large delimited text files into numbered chunks bounded by a line
count or file size, optionally repeating the header rows in every chunk and
gzipping the results.

Usage:
    from file_splitter import PipelineRunner, SplitConfig

    config = SplitConfig('data/extract.csv', 'out/', max_lines_per_file=5000).validate()
    runner = PipelineRunner(config)
    success = runner.run_pipeline()
"""

from .pipeline import PipelineRunner, SplitConfig, ConfigurationError

__version__ = "1.0.0"
__all__ = ["PipelineRunner", "SplitConfig", "ConfigurationError"]
