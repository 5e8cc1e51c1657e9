from pathlib import Path

from cssbuild.io import OUTPUT_FIELDS, base_output_row, ensure_output_parent, open_output_writer


def test_io_helpers(tmp_path: Path):
    out_path = tmp_path / "nested" / "selectors.csv"
    assert ensure_output_parent(out_path) == out_path
    assert out_path.parent.exists()

    out_file, writer = open_output_writer(out_path)
    with out_file:
        writer.writerow({**base_output_row("link"), "selector": "a:hover"})

    lines = out_path.read_text(encoding="utf-8").splitlines()
    assert lines[0].split(",") == OUTPUT_FIELDS
    assert lines[1] == "link,a:hover,"
