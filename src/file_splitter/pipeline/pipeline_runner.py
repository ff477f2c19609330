"""
Pipeline Runner

Orchestrates a split run: discover input files, split each one, compress
the outputs and write the report. Steps run strictly in sequence; the first
failing step stops the run.
"""

import logging
import time
from typing import Dict, Any

from .pipeline_config import SplitConfig
from ..split_summary import SplitSummary
from .steps import (
    step_00_discover_files,
    step_01_split_files,
    step_02_compress_outputs,
    step_03_report_generation
)


class PipelineRunner:
    """Main pipeline orchestrator"""

    def __init__(self, config: SplitConfig, quiet_mode: bool = False):
        self.config = config
        self.quiet_mode = quiet_mode
        self.logger = logging.getLogger(__name__)
        self.data: Dict[str, Any] = {}
        self.summary = SplitSummary(quiet_mode)

    def run_pipeline(self) -> bool:
        """
        Execute the complete pipeline

        Returns:
            bool: True if pipeline completed successfully
        """
        start_time = time.time()

        self.logger.info("Starting file split pipeline")
        self.summary.print_header(self.config.input_pattern, self.config.output_folder)

        try:
            self.data = {
                'config': self.config,
                'quiet_mode': self.quiet_mode,
                'stats': {'start_time': start_time}
            }

            steps = [
                ("00", "Discover Files", step_00_discover_files),
                ("01", "Split Files", step_01_split_files),
                ("02", "Compress Outputs", step_02_compress_outputs),
                ("03", "Report Generation", step_03_report_generation)
            ]

            for step_num, step_name, step_func in steps:
                self._run_step(step_num, step_name, step_func)

            duration = time.time() - start_time
            self.logger.info(f"Pipeline completed successfully in {duration:.2f} seconds")
            self._log_final_stats()

            self.summary.print_split_results(self.data['split_results'])
            self.summary.print_footer(True, duration)
            return True

        except Exception as e:
            self.logger.error(f"Pipeline failed: {str(e)}", exc_info=True)
            self.summary.print_footer(False, time.time() - start_time)
            return False

    def _run_step(self, step_num: str, step_name: str, step_func):
        """Execute a single pipeline step with error handling"""
        step_start = time.time()
        self.logger.info(f"Step {step_num}: {step_name}")

        try:
            result = step_func.execute(self.data)

            if result:
                self.data.update(result)

            step_duration = time.time() - step_start
            self.logger.info(f"Step {step_num} completed in {step_duration:.2f} seconds")

        except Exception as e:
            self.logger.error(f"Step {step_num} failed: {str(e)}")
            raise

    def _log_final_stats(self):
        """Log final pipeline statistics"""
        for key, value in self.data['stats'].items():
            if key != 'start_time':
                self.logger.info(f"Stats - {key}: {value}")
