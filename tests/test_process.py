# tests/test_process.py

import pytest
import yaml
from unittest.mock import patch

from partialize.process import main


@pytest.mark.asyncio
async def test_main_converts_each_document(tmp_path, landing_page_html, plain_container_html):
    input_dir = tmp_path / "in"
    output_dir = tmp_path / "out"
    input_dir.mkdir()
    (input_dir / "landing.html").write_text(landing_page_html, encoding="utf-8")
    (input_dir / "plain.html").write_text(plain_container_html, encoding="utf-8")

    summary = await main(input_dir, output_dir)

    assert summary == {"landing.html": 6, "plain.html": 0}
    assert (output_dir / "landing" / "views" / "index.ejs").exists()
    assert (output_dir / "landing" / "views" / "partials" / "a-btn.ejs").exists()
    manifest = yaml.safe_load((output_dir / "landing" / "manifest.yaml").read_text(encoding="utf-8"))
    assert {p["name"] for p in manifest["partials"]} >= {"div-card", "section-grid"}
    assert manifest["suggestions"]


@pytest.mark.asyncio
async def test_main_skips_unreadable_documents(tmp_path, lone_button_html):
    input_dir = tmp_path / "in"
    input_dir.mkdir()
    (input_dir / "good.html").write_text(lone_button_html, encoding="utf-8")
    (input_dir / "bad.html").write_bytes(b"\xff\xfe\xfa not utf-8")

    summary = await main(input_dir, tmp_path / "out")

    assert summary == {"good.html": 1}
    assert not (tmp_path / "out" / "bad").exists()


@pytest.mark.asyncio
async def test_main_requires_input_dir(tmp_path):
    with pytest.raises(FileNotFoundError):
        await main(tmp_path / "missing", tmp_path / "out")


@pytest.mark.asyncio
async def test_main_with_empty_input(tmp_path):
    (tmp_path / "in").mkdir()
    assert await main(tmp_path / "in", tmp_path / "out") == {}


@pytest.mark.asyncio
async def test_main_skips_documents_whose_manifest_fails(tmp_path, lone_button_html, identical_cards_html):
    input_dir = tmp_path / "in"
    input_dir.mkdir()
    (input_dir / "a.html").write_text(lone_button_html, encoding="utf-8")
    (input_dir / "b.html").write_text(identical_cards_html, encoding="utf-8")

    save_yaml = "partialize.utils.file_operations.FileOperations.save_yaml"
    with patch(save_yaml, side_effect=[yaml.YAMLError("cannot represent"), None]):
        summary = await main(input_dir, tmp_path / "out")

    assert summary == {"b.html": 1}
