import importlib.util
import sys
from pathlib import Path


PROJECT_ROOT = Path(__file__).resolve().parents[3]
MODULE_PATH = PROJECT_ROOT / "scripts" / "print_schema.py"
SPEC = importlib.util.spec_from_file_location("print_schema_module", MODULE_PATH)
print_schema_module = importlib.util.module_from_spec(SPEC)
assert SPEC and SPEC.loader
sys.modules["print_schema_module"] = print_schema_module
SPEC.loader.exec_module(print_schema_module)


def test_main_prints_sdl(capsys):
    exit_code = print_schema_module.main([])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "interface MediaItemPerformanceLab" in out
    assert "type MediaItem implements MediaItemPerformanceLab" in out


def test_main_writes_output_file(tmp_path):
    target = tmp_path / "schema.graphql"

    exit_code = print_schema_module.main(["--output", str(target)])

    assert exit_code == 0
    assert "enum MediaItemPerformanceLabVariant" in target.read_text(encoding="utf-8")
