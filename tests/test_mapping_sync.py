import pytest

from core.config import Settings
from core.exceptions import InvalidComponentNamesError
from core.services.component_scanner import (
    find_invalid_names,
    list_component_directories,
    validate_component_names,
)
from core.services.mapping_sync import sync_mappings


MAPPINGS_JS = """let customComponents = ['old-one'];
const OOTBComponentDecorators = ['file-input', 'wizard'];
"""


def _project(tmp_path, custom=(), ootb=(), mappings=MAPPINGS_JS) -> Settings:
    block = tmp_path / "blocks" / "form"
    block.mkdir(parents=True)
    for name in custom:
        (block / "custom-components" / name).mkdir(parents=True)
    for name in ootb:
        (block / "components" / name).mkdir(parents=True)
    (block / "mappings.js").write_text(mappings, encoding="utf-8")
    return Settings(PROJECT_ROOT=tmp_path)


def test_list_component_directories_sorted_dirs_only(tmp_path):
    (tmp_path / "zeta").mkdir()
    (tmp_path / "alpha").mkdir()
    (tmp_path / "readme.md").write_text("x", encoding="utf-8")
    assert list_component_directories(tmp_path) == ["alpha", "zeta"]


def test_list_component_directories_missing_path_is_empty(tmp_path):
    assert list_component_directories(tmp_path / "missing") == []


def test_find_invalid_names():
    names = ["ok-name", "ok_name", "Ok9", "bad name", "bad.name", "bäd"]
    assert find_invalid_names(names) == ["bad name", "bad.name", "bäd"]


def test_validate_component_names_lists_every_offender():
    with pytest.raises(InvalidComponentNamesError) as exc:
        validate_component_names(["fine", "two words", "semi;colon"], "Custom")
    assert exc.value.kind == "Custom"
    assert exc.value.names == ["two words", "semi;colon"]


def test_sync_writes_sorted_directory_names(tmp_path, capsys):
    settings = _project(
        tmp_path,
        custom=["range-slider", "icon-radio-group"],
        ootb=["wizard", "file", "accordion"],
    )

    assert sync_mappings(settings) is True

    text = settings.mappings_path.read_text(encoding="utf-8")
    assert "let customComponents = ['icon-radio-group', 'range-slider'];" in text
    assert "const OOTBComponentDecorators = ['accordion', 'file', 'wizard'];" in text
    assert "Custom components (2)" in capsys.readouterr().out


def test_sync_with_invalid_name_leaves_file_untouched(tmp_path, capsys):
    settings = _project(tmp_path, custom=["good", "has space"], ootb=["file"])
    before = settings.mappings_path.read_bytes()

    assert sync_mappings(settings) is False

    assert settings.mappings_path.read_bytes() == before
    out = capsys.readouterr().out
    assert "INVALID COMPONENT NAMES DETECTED" in out
    assert '"has space"' in out


def test_sync_with_invalid_ootb_name_leaves_file_untouched(tmp_path):
    settings = _project(tmp_path, custom=["good"], ootb=["bad$name"])
    before = settings.mappings_path.read_bytes()

    assert sync_mappings(settings) is False
    assert settings.mappings_path.read_bytes() == before


def test_sync_without_declarations_reports_and_keeps_file(tmp_path, capsys):
    settings = _project(tmp_path, custom=["good"], mappings="export default [];\n")

    assert sync_mappings(settings) is False
    assert settings.mappings_path.read_text(encoding="utf-8") == "export default [];\n"
    assert "Error updating mappings.js" in capsys.readouterr().out


def test_sync_missing_mappings_file_returns_false(tmp_path):
    settings = Settings(PROJECT_ROOT=tmp_path)
    assert sync_mappings(settings) is False


def test_sync_with_no_component_folders_empties_arrays(tmp_path):
    settings = _project(tmp_path)

    assert sync_mappings(settings) is True

    text = settings.mappings_path.read_text(encoding="utf-8")
    assert "let customComponents = [];" in text
    assert "const OOTBComponentDecorators = [];" in text


def test_trailing_newline_is_not_a_valid_name():
    assert find_invalid_names(["evil\n", "ok\n\n", "fine"]) == ["evil\n", "ok\n\n"]


def test_sync_rejects_directory_name_with_trailing_newline(tmp_path, capsys):
    settings = _project(tmp_path, custom=["good"])
    (settings.custom_components_path / "evil\n").mkdir()
    before = settings.mappings_path.read_bytes()

    assert sync_mappings(settings) is False

    assert settings.mappings_path.read_bytes() == before
    assert "INVALID COMPONENT NAMES DETECTED" in capsys.readouterr().out


def test_sync_with_undecodable_mappings_file_returns_false(tmp_path, capsys):
    settings = _project(tmp_path, custom=["good"])
    settings.mappings_path.write_bytes(MAPPINGS_JS.encode("utf-8") + b"// \xff\n")
    before = settings.mappings_path.read_bytes()

    assert sync_mappings(settings) is False

    assert settings.mappings_path.read_bytes() == before
    assert "Error updating mappings.js" in capsys.readouterr().out
