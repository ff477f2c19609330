"""
Step 00: Discover Input Files

Resolves the input pattern into the ordered list of files to split.
A plain path is used as given; a pattern with a '*' in its filename part
is matched against the containing directory, optionally recursively.
"""

import logging
from pathlib import Path
from typing import Dict, Any, List

from ..pipeline_config import WILDCARD

logger = logging.getLogger(__name__)


def execute(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Discover the input files for this run

    Args:
        data: Pipeline context containing config

    Returns:
        Dict containing the list of input files
    """
    config = data['config']
    logger.info(f"Discovering input files for pattern: {config.input_pattern}")

    input_files = discover_files(config.input_pattern, config.recurse_subfolders)

    logger.info(f"Discovered {len(input_files)} input file(s)")
    for input_file in input_files:
        logger.debug(f"Input file: {input_file}")

    data['stats']['input_files'] = len(input_files)

    return {'input_files': input_files}


def discover_files(pattern: str, recurse: bool = False) -> List[Path]:
    """
    Resolve an input path or wildcard pattern to a sorted list of files

    Args:
        pattern: File path, optionally with a '*' in the filename part
        recurse: Also search subdirectories of the containing directory

    Returns:
        List of matching file paths. A path without a wildcard is returned
        as-is, without checking that it exists.
    """
    pattern_path = Path(pattern)
    file_pattern = pattern_path.name

    if WILDCARD not in file_pattern:
        return [pattern_path]

    folder = pattern_path.parent
    if not folder.is_dir():
        raise FileNotFoundError(f"Input directory not found: {folder}")

    matches = folder.rglob(file_pattern) if recurse else folder.glob(file_pattern)

    return sorted(path for path in matches if path.is_file())
