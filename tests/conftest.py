import logging
from pathlib import Path

import pytest

from file_splitter.pipeline.pipeline_config import SplitConfig


@pytest.fixture(autouse=True)
def reset_root_logging():
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()


@pytest.fixture
def output_dir(tmp_path) -> Path:
    folder = tmp_path / "out"
    folder.mkdir()
    return folder


@pytest.fixture
def write_file(tmp_path):
    """Write lines (each terminated by '\\n') to a file under tmp_path"""
    def _write(name, lines, terminator="\n"):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes("".join(line + terminator for line in lines).encode("utf-8"))
        return path
    return _write


@pytest.fixture
def make_config(output_dir):
    def _make(input_pattern, **overrides):
        options = {'max_lines_per_file': 2}
        options.update(overrides)
        return SplitConfig(str(input_pattern), str(output_dir), **options)
    return _make
