"""Unit tests for SurfaceOutput."""

import pytest

from launchgrid.devices import SurfaceOutput
from launchgrid.exceptions import ColorValueError, ControllerIndexError, GridRangeError
from launchgrid.models import GridCoordinate, SurfaceColor


@pytest.mark.unit
class TestSurfaceOutput:
    """Test LED command encoding."""

    @pytest.fixture
    def output(self, output_port):
        """Create SurfaceOutput instance."""
        return SurfaceOutput(output_port)

    def test_set_note_color(self, output, output_port):
        """Pad (0, 0) in RedHigh is note on key 0 velocity 0x0F."""
        output.set_note_color(GridCoordinate(row=0, column=0), SurfaceColor.RED_HIGH)

        assert output_port.sent_bytes == [[0x90, 0, 0x0F]]
        assert output_port.sent[0].type == 'note_on'

    def test_set_note_color_tuple(self, output, output_port):
        """(row, column) tuples are accepted."""
        output.set_note_color((2, 3), SurfaceColor.GREEN_LOW)
        assert output_port.sent_bytes == [[0x90, 0x23, 0x1C]]

    def test_set_controller_color(self, output, output_port):
        """Controller 4 in AmberHigh is control 0x6C value 0x3F."""
        output.set_controller_color(4, SurfaceColor.AMBER_HIGH)

        assert output_port.sent_bytes == [[0xB0, 0x6C, 0x3F]]
        assert output_port.sent[0].type == 'control_change'

    def test_reset(self, output, output_port):
        """Reset is control 0 value 0."""
        output.reset()
        assert output_port.sent_bytes == [[0xB0, 0x00, 0x00]]

    def test_raw_color_value(self, output, output_port):
        """Non-palette 7-bit values are passed through."""
        output.set_note_color((1, 1), 0x30)
        assert output_port.sent_bytes == [[0x90, 0x11, 0x30]]

    def test_invalid_coordinate(self, output, output_port):
        """Coordinates outside the grid raise and send nothing."""
        with pytest.raises(GridRangeError):
            output.set_note_color((8, 0), SurfaceColor.RED_HIGH)
        with pytest.raises(GridRangeError):
            output.set_note_color((0, 9), SurfaceColor.RED_HIGH)

        assert output_port.sent == []

    def test_invalid_controller_index(self, output, output_port):
        """Controller indices outside 0-8 raise and send nothing."""
        with pytest.raises(ControllerIndexError):
            output.set_controller_color(9, SurfaceColor.RED_HIGH)
        with pytest.raises(ControllerIndexError):
            output.set_controller_color(-1, SurfaceColor.RED_HIGH)

        assert output_port.sent == []

    def test_invalid_color(self, output, output_port):
        """Colors that do not fit a data byte raise and send nothing."""
        with pytest.raises(ColorValueError):
            output.set_note_color((0, 0), 200)
        with pytest.raises(ColorValueError):
            output.set_controller_color(0, -1)

        assert output_port.sent == []
