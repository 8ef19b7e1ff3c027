"""End-to-end tests over the *_Input.csv / *_Output.csv pairs in tests/data."""

from pathlib import Path

from postfixsheet.grid import GridRenderer

DATA_DIR = Path(__file__).parent / "data"

INPUT_SUFFIX = "_Input"
OUTPUT_SUFFIX = "_Output"


def _fixture_pairs():
    for input_file in sorted(DATA_DIR.glob(f"*{INPUT_SUFFIX}.csv")):
        prefix = input_file.stem[: -len(INPUT_SUFFIX)]
        yield prefix, input_file, DATA_DIR / f"{prefix}{OUTPUT_SUFFIX}.csv"


class TestFixtureFiles:
    """Render every input fixture and compare with its expected output."""

    def test_every_input_has_an_output(self):
        """Test each input file is paired with an output file."""
        pairs = list(_fixture_pairs())

        assert pairs
        for prefix, _, output_file in pairs:
            assert output_file.exists(), f"Missing output file for {prefix}"

    def test_rendered_output_matches(self, renderer: GridRenderer):
        """Test rendering each input reproduces the expected output."""
        for prefix, input_file, output_file in _fixture_pairs():
            rendered = renderer.render_text(input_file.read_text(encoding="utf-8"))

            assert rendered == output_file.read_text(encoding="utf-8"), prefix
