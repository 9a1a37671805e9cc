import json

import pytest
from click.testing import CliRunner

from conftest import FakeImageClient, FakeTextClient
from memora_hanzi import cli as cli_module


@pytest.fixture
def use_dependencies(monkeypatch, make_dependencies):
    def install(**kwargs):
        deps = make_dependencies(**kwargs)
        monkeypatch.setattr(cli_module, "create_dependencies", lambda settings=None: deps)
        return deps
    return install


def test_process_prints_pinyin_and_keywords(use_dependencies, tmp_path):
    use_dependencies(text_client=FakeTextClient([{"keywords": ["jam", "way"]}]))
    output = tmp_path / "record.json"

    result = CliRunner().invoke(cli_module.cli, ["process", "Zhang Wei", "-k", "bridge", "-o", str(output)])

    assert result.exit_code == 0, result.output
    assert "Pinyin: Zhang Wei" in result.output
    assert "• bridge" in result.output
    saved = json.loads(output.read_text(encoding="utf-8"))
    assert saved["originalName"] == "Zhang Wei"
    assert saved["keywords"] == ["jam", "way"]
    assert saved["editableKeywords"] == ["jam", "way", "bridge"]


def test_process_with_image(use_dependencies):
    image = FakeImageClient()
    use_dependencies(text_client=FakeTextClient([{"keywords": ["jam"]}]), image_client=image)

    result = CliRunner().invoke(cli_module.cli, ["process", "Zhang Wei", "--image"])

    assert result.exit_code == 0, result.output
    assert "Image: generated" in result.output
    assert len(image.prompts) == 1


def test_process_error_exits_non_zero(use_dependencies):
    use_dependencies()

    result = CliRunner().invoke(cli_module.cli, ["process", "A"])

    assert result.exit_code == 1
    assert "Name is too short to process." in result.output


def test_authors_reads_stdin(use_dependencies):
    use_dependencies(text_client=FakeTextClient([{"identifiedNames": ["Xiaohua Li"]}]))

    result = CliRunner().invoke(cli_module.cli, ["authors"], input="Yiming Chen, John Smith\nXiaohua Li\n")

    assert result.exit_code == 0, result.output
    assert "• Xiaohua Li (Potential)" in result.output
    assert "• John Smith\n" in result.output
    assert "Disclaimer" in result.output


def test_authors_validation_error(use_dependencies):
    use_dependencies()

    result = CliRunner().invoke(cli_module.cli, ["authors"], input="A\n")

    assert result.exit_code == 1
    assert "No valid author names found" in result.output


def test_config_command():
    result = CliRunner().invoke(cli_module.cli, ["config"])

    assert result.exit_code == 0
    assert "MemoraHanzi Configuration" in result.output
