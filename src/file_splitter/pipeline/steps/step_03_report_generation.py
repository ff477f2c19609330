"""
Step 03: Report Generation

Writes a CSV manifest of every split file produced by the run, when a
report path was given.
"""

import logging
import pandas as pd
from pathlib import Path
from typing import Dict, Any, List

logger = logging.getLogger(__name__)

REPORT_COLUMNS = [
    'input_file', 'output_file', 'file_number', 'data_lines', 'bytes', 'compressed_file'
]


def execute(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Write the split manifest

    Args:
        data: Pipeline context containing split_results, compressed_files and config

    Returns:
        Dict containing the report path, or None when no report was requested
    """
    config = data['config']

    if not config.report_path:
        return {'report_file': None}

    report_df = build_report(data['split_results'], data.get('compressed_files', {}))

    report_file = Path(config.report_path)
    report_df.to_csv(report_file, index=False, encoding='utf-8')

    logger.info(f"Wrote report with {len(report_df)} rows to {report_file}")

    return {'report_file': report_file}


def build_report(split_results: List, compressed_files: Dict[Path, Path]) -> pd.DataFrame:
    """One row per output file, in the order the files were written"""
    rows = []
    for result in split_results:
        for file_number, (output_file, data_lines) in enumerate(
                zip(result.output_files, result.lines_per_file), start=1):
            compressed = compressed_files.get(output_file)
            rows.append({
                'input_file': str(result.input_file),
                'output_file': str(output_file),
                'file_number': file_number,
                'data_lines': data_lines,
                'bytes': output_file.stat().st_size,
                'compressed_file': str(compressed) if compressed else '',
            })

    return pd.DataFrame(rows, columns=REPORT_COLUMNS)
