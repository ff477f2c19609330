"""
Step 02: Compress Outputs

Runs after every input file has been split. Scans the output folder for
files with an extension produced by this run and writes a gzip companion
'<name>.gz' next to each one. The uncompressed files are kept.
"""

import gzip
import logging
import os
import shutil
from pathlib import Path
from typing import Dict, Any, Iterable, List

from tqdm import tqdm

logger = logging.getLogger(__name__)

GZIP_SUFFIX = ".gz"


def execute(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Gzip the split files in the output folder

    Args:
        data: Pipeline context containing split_results and config

    Returns:
        Dict mapping each compressed file to its companion
    """
    config = data['config']

    if not config.compress:
        logger.info("Compression not requested, skipping")
        return {'compressed_files': {}}

    quiet_mode = data.get('quiet_mode', False)
    produced_files = {
        output_file
        for result in data['split_results']
        for output_file in result.output_files
    }
    extensions = {output_file.suffix for output_file in produced_files}

    files_to_compress = find_files_to_compress(config.output_dir, extensions)
    logger.info(f"Compressing {len(files_to_compress)} file(s) in {config.output_folder}")

    compressed_files = {}
    skipped_files = 0
    for file_path in tqdm(files_to_compress, desc="Compressing files", unit="file", disable=quiet_mode):
        # Leftovers from earlier runs keep their existing companion
        if (file_path not in produced_files and not config.overwrite
                and get_compressed_path(file_path).exists()):
            logger.debug(f"Skipping {file_path}, already compressed")
            skipped_files += 1
            continue
        compressed_files[file_path] = compress_file(file_path, overwrite=config.overwrite)

    data['stats']['compressed_files'] = len(compressed_files)
    data['stats']['compression_skipped'] = skipped_files

    return {'compressed_files': compressed_files}


def find_files_to_compress(folder: Path, extensions: Iterable[str]) -> List[Path]:
    """
    Files directly inside folder whose extension is one of extensions

    An empty extension matches files without one.
    """
    extensions = set(extensions)
    if not extensions:
        return []

    return sorted(
        path for path in Path(folder).iterdir()
        if path.is_file() and path.suffix in extensions
    )


def get_compressed_path(file_path: Path) -> Path:
    return file_path.with_name(file_path.name + GZIP_SUFFIX)


def compress_file(file_path: Path, overwrite: bool = False) -> Path:
    """
    Write a gzip copy of file_path to '<file_path>.gz'

    The companion is written under a temporary name and moved into place
    once complete, so it is never left half written.

    Raises:
        FileExistsError: companion already exists and overwrite is off
    """
    file_path = Path(file_path)
    compressed_path = get_compressed_path(file_path)
    temp_path = compressed_path.with_name(compressed_path.name + ".tmp")

    if compressed_path.exists() and not overwrite:
        raise FileExistsError(f"Compressed file already exists: {compressed_path}")

    try:
        with open(file_path, 'rb') as source, open(temp_path, 'wb') as target:
            # mtime=0 keeps the archive bytes identical between runs
            with gzip.GzipFile(filename=file_path.name, mode='wb', fileobj=target, mtime=0) as gz:
                shutil.copyfileobj(source, gz)
        os.replace(temp_path, compressed_path)
    except OSError:
        temp_path.unlink(missing_ok=True)
        raise

    logger.debug(f"Compressed {file_path} -> {compressed_path}")
    return compressed_path
