import pytest

from core.exceptions import MappingsFileError, MappingsPatternError
from core.services.mappings_file import MappingsFile, format_array, parse_array


MAPPINGS_JS = """import { loadCSS } from '../../scripts/aem.js';

let customComponents = ['icon-radio-group'];
const OOTBComponentDecorators = ['file-input', 'wizard', "modal"];

export function getCustomComponents() {
  return customComponents;
}
"""


def _mappings(tmp_path, content=MAPPINGS_JS) -> MappingsFile:
    path = tmp_path / "mappings.js"
    path.write_text(content, encoding="utf-8")
    return MappingsFile(path)


def test_format_and_parse_array():
    assert format_array(["a", "b-c"]) == "'a', 'b-c'"
    assert format_array([]) == ""
    assert parse_array(" 'a', \"b\" , ,") == ["a", "b"]
    assert parse_array("") == []


def test_read_mappings_strips_quotes(tmp_path):
    mappings = _mappings(tmp_path).read_mappings()
    assert mappings.custom == ("icon-radio-group",)
    assert mappings.ootb == ("file-input", "wizard", "modal")


def test_read_custom_components_missing_file_is_empty(tmp_path):
    assert MappingsFile(tmp_path / "nope.js").read_custom_components() == []


def test_read_mappings_missing_file_raises(tmp_path):
    with pytest.raises(MappingsFileError):
        MappingsFile(tmp_path / "nope.js").read_mappings()


def test_render_requires_both_declarations():
    with pytest.raises(MappingsPatternError):
        MappingsFile.render("let customComponents = [];\n", ["a"], ["b"])


def test_replace_components_rewrites_only_the_arrays(tmp_path):
    mappings = _mappings(tmp_path)
    mappings.replace_components(["alpha", "beta"], ["file", "wizard"])

    text = mappings.path.read_text(encoding="utf-8")
    assert "let customComponents = ['alpha', 'beta'];" in text
    assert "const OOTBComponentDecorators = ['file', 'wizard'];" in text
    assert text.startswith("import { loadCSS } from '../../scripts/aem.js';")
    assert "export function getCustomComponents()" in text


def test_add_custom_component_changes_a_single_line(tmp_path):
    mappings = _mappings(tmp_path)
    components = mappings.add_custom_component("icon-toggle")

    assert components == ["icon-radio-group", "icon-toggle"]
    before = MAPPINGS_JS.splitlines()
    after = mappings.path.read_text(encoding="utf-8").splitlines()
    changed = [i for i, (old, new) in enumerate(zip(before, after)) if old != new]
    assert len(before) == len(after)
    assert len(changed) == 1
    assert after[changed[0]] == "let customComponents = ['icon-radio-group', 'icon-toggle'];"


def test_undecodable_file_is_a_mappings_error(tmp_path):
    path = tmp_path / "mappings.js"
    path.write_bytes(MAPPINGS_JS.encode("utf-8") + b"// \xff\n")
    mappings = MappingsFile(path)

    assert mappings.read_custom_components() == []
    with pytest.raises(MappingsFileError):
        mappings.read_mappings()
