"""
Step 01: Split Files

Splits every discovered input file into numbered output files of at most
max_lines_per_file data lines (and, when set, at most max_file_size_mb).

Lines are read and written as raw bytes, so each output holds exactly the
bytes of the input lines it received, line terminators included. The header
block is read once per input file and written at the top of the first output
file, and of every following one when repeat_header_rows is set.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, List, Optional, BinaryIO, Sequence, Tuple

from tqdm import tqdm

from ..pipeline_config import SplitConfig

logger = logging.getLogger(__name__)


@dataclass
class SplitResult:
    """Outcome of splitting one input file"""
    input_file: Path
    header_rows: int = 0
    data_lines: int = 0
    output_files: List[Path] = field(default_factory=list)
    lines_per_file: List[int] = field(default_factory=list)


def execute(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Split all discovered input files

    Args:
        data: Pipeline context containing input_files and config

    Returns:
        Dict containing one SplitResult per input file
    """
    config = data['config']
    input_files = data['input_files']
    quiet_mode = data.get('quiet_mode', False)

    logger.info(f"Splitting {len(input_files)} file(s) into {config.output_folder}")

    split_results = []
    seen_bases = {}
    for input_file in tqdm(input_files, desc="Splitting files", unit="file", disable=quiet_mode):
        output_key = (get_output_filename_base(config, Path(input_file)), Path(input_file).suffix)
        if output_key in seen_bases:
            logger.warning(
                f"{input_file} and {seen_bases[output_key]} share the output name "
                f"{output_key[0]}_NNNNNN{output_key[1]}"
            )
        seen_bases.setdefault(output_key, input_file)

        split_results.append(split_file(config, input_file))

    split_stats = {
        'data_lines': sum(result.data_lines for result in split_results),
        'output_files': sum(len(result.output_files) for result in split_results),
        'empty_inputs': sum(1 for result in split_results if not result.output_files),
    }

    logger.info("Splitting completed")
    for key, value in split_stats.items():
        logger.info(f"Split stats - {key}: {value}")

    data['stats'].update(split_stats)

    return {'split_results': split_results}


class SplitSession:
    """
    Output state for one input file.

    No stream is open until the first data line arrives; every rotation
    closes the current output file before opening the next, so at most one
    output stream is open at any time. Use as a context manager so the last
    stream is closed on every exit path.
    """

    def __init__(self, config: SplitConfig, filename_base: str, extension: str,
                 header_block: Sequence[bytes]):
        self.config = config
        self.filename_base = filename_base
        self.extension = extension
        self.header_block = tuple(header_block)

        self.stream: Optional[BinaryIO] = None
        self.file_counter = 0
        self.line_count = 0
        self.bytes_written = 0
        self.output_files: List[Path] = []
        self.lines_per_file: List[int] = []

    def __enter__(self) -> "SplitSession":
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def write_line(self, line: bytes):
        if self.needs_rotation(line):
            self.rotate()

        self.stream.write(line)
        self.line_count += 1
        self.bytes_written += len(line)
        self.lines_per_file[-1] = self.line_count

    def needs_rotation(self, line: bytes) -> bool:
        """Whether line has to go into a new output file"""
        if self.stream is None:
            return True

        max_lines = self.config.max_lines_per_file
        if max_lines and self.line_count >= max_lines:
            return True

        # A file always takes at least one data line, even an oversized one
        max_bytes = self.config.max_bytes_per_file
        if max_bytes and self.bytes_written + len(line) > max_bytes:
            return True

        return False

    def rotate(self):
        """Close the current output file and open the next one"""
        self.close()

        self.file_counter += 1
        self.line_count = 0
        self.bytes_written = 0

        output_file = get_output_filename(
            self.config.output_dir, self.filename_base, self.file_counter, self.extension
        )
        # 'x' refuses to replace an existing file
        mode = 'wb' if self.config.overwrite else 'xb'
        self.stream = open(output_file, mode)
        self.output_files.append(output_file)
        self.lines_per_file.append(0)
        logger.debug(f"Opened output file {output_file}")

        if self.config.repeat_header_rows or self.file_counter == 1:
            self.stream.writelines(self.header_block)
            self.bytes_written = sum(len(row) for row in self.header_block)

    def close(self):
        if self.stream is not None:
            self.stream.flush()
            self.stream.close()
            self.stream = None


def split_file(config: SplitConfig, input_file) -> SplitResult:
    """
    Split a single input file into numbered output files

    Args:
        config: Split configuration
        input_file: Path of the file to split

    Returns:
        SplitResult listing the output files in the order they were written.
        An input without data lines produces no output files.
    """
    input_file = Path(input_file)
    filename_base = get_output_filename_base(config, input_file)
    result = SplitResult(input_file=input_file)

    with open(input_file, 'rb') as reader:
        header_block = read_header_rows(reader, config.num_header_rows)
        result.header_rows = len(header_block)

        with SplitSession(config, filename_base, input_file.suffix, header_block) as session:
            for line in reader:
                session.write_line(line)
                result.data_lines += 1

        result.output_files = session.output_files
        result.lines_per_file = session.lines_per_file

    logger.info(
        f"Split {input_file} into {len(result.output_files)} file(s) "
        f"({result.data_lines} data lines, {result.header_rows} header rows)"
    )

    return result


def read_header_rows(reader: BinaryIO, num_header_rows: int) -> Tuple[bytes, ...]:
    """
    Read the header block from the start of a file

    Exactly num_header_rows lines are consumed; blank lines among them are
    dropped. Reaching the end of the file early is not an error.
    """
    header_rows = []

    for _ in range(num_header_rows):
        line = reader.readline()
        if not line:
            break
        if line.strip():
            header_rows.append(line)

    return tuple(header_rows)


def get_output_filename_base(config: SplitConfig, input_file: Path) -> str:
    """
    Base name for the output files of input_file

    The configured base is used unless it is blank or the input pattern
    matches several files, in which case each input keeps its own name.
    """
    base = config.output_filename_base
    if not base or not base.strip() or config.is_wildcard_pattern:
        return input_file.stem
    return base


def get_output_filename(folder: Path, filename_base: str, file_number: int, extension: str) -> Path:
    return Path(folder) / f"{filename_base}_{file_number:06d}{extension}"
