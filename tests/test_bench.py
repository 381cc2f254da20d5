import pytest

from uaparse.bench import main

REGEXES = (
    "user_agent_parsers:\n"
    "  - regex: '(Firefox)/(\\d+)'\n"
    "device_parsers:\n"
    "  - regex: '(iPhone)'\n"
)


@pytest.fixture
def files(tmp_path):
    regexes = tmp_path / "regexes.yaml"
    regexes.write_text(REGEXES, encoding="utf-8")
    inputs = tmp_path / "agents.txt"
    inputs.write_text("Firefox/12\niPhone\nsomething else\n", encoding="utf-8")
    return regexes, inputs


def test_runs_successfully(files):
    regexes, inputs = files
    assert main([str(regexes), str(inputs), "3"]) == 0


def test_wrong_argument_count_prints_usage(capsys):
    assert main([]) == -1
    out = capsys.readouterr().out
    assert out.startswith("Usage:")
    assert "<regexes.yaml> <input file> <times to repeat>" in out


def test_missing_input_file_is_empty(files, tmp_path):
    regexes, _ = files
    assert main([str(regexes), str(tmp_path / "absent.txt"), "2"]) == 0


def test_non_numeric_count(files):
    regexes, inputs = files
    assert main([str(regexes), str(inputs), "abc"]) == 0


def test_missing_regexes_file(files, tmp_path):
    _, inputs = files
    with pytest.raises(FileNotFoundError):
        main([str(tmp_path / "absent.yaml"), str(inputs), "1"])