import pytest

from file_splitter.pipeline.steps import step_00_discover_files
from file_splitter.pipeline.steps.step_00_discover_files import discover_files


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "sub" / "deeper").mkdir(parents=True)
    for name in ["b.csv", "a.csv", "notes.txt", "sub/c.csv", "sub/deeper/d.csv"]:
        (tmp_path / name).write_text("h\n1\n")
    (tmp_path / "dir.csv").mkdir()
    return tmp_path


def test_plain_path_is_returned_unchecked(tmp_path):
    missing = tmp_path / "missing.csv"

    assert discover_files(str(missing)) == [missing]


def test_wildcard_matches_top_directory_sorted(tree):
    found = discover_files(str(tree / "*.csv"))

    assert found == [tree / "a.csv", tree / "b.csv"]


def test_wildcard_recurses_into_subfolders(tree):
    found = discover_files(str(tree / "*.csv"), recurse=True)

    assert set(found) == {
        tree / "a.csv", tree / "b.csv", tree / "sub" / "c.csv", tree / "sub" / "deeper" / "d.csv"
    }
    assert found == sorted(found)


def test_wildcard_inside_name(tree):
    assert discover_files(str(tree / "note*")) == [tree / "notes.txt"]


def test_wildcard_without_matches(tree):
    assert discover_files(str(tree / "*.json")) == []


def test_wildcard_in_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        discover_files(str(tmp_path / "nowhere" / "*.csv"))


def test_execute_records_stats(tree, make_config):
    data = {'config': make_config(tree / "*.csv"), 'stats': {}}

    result = step_00_discover_files.execute(data)

    assert result['input_files'] == [tree / "a.csv", tree / "b.csv"]
    assert data['stats']['input_files'] == 2
