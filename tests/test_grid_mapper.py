"""Unit tests for GridMapper."""

import pytest
from pydantic import ValidationError

from launchgrid.devices import GridMapper
from launchgrid.exceptions import ControllerIndexError, GridRangeError
from launchgrid.models import GridCoordinate, SurfaceLayout, all_coordinates


@pytest.mark.unit
class TestGridMapper:
    """Test mapping between MIDI numbers and surface addresses."""

    @pytest.fixture
    def mapper(self):
        """Create a GridMapper with the standard layout."""
        return GridMapper()

    def test_key_to_grid_origin(self, mapper):
        """Key 0 is the top-left pad."""
        assert mapper.key_to_grid(0) == GridCoordinate(row=0, column=0)

    def test_key_to_grid_row_packed(self, mapper):
        """Key 0x23 is row 2, column 3."""
        assert mapper.key_to_grid(0x23) == GridCoordinate(row=2, column=3)

    def test_key_to_grid_side_column(self, mapper):
        """Column 8 is part of every row."""
        assert mapper.key_to_grid(8) == GridCoordinate(row=0, column=8)
        assert mapper.key_to_grid(120) == GridCoordinate(row=7, column=8)

    def test_key_to_grid_between_rows(self, mapper):
        """Keys 9-15 of each row block address nothing."""
        for key in range(9, 16):
            assert mapper.key_to_grid(key) is None
        assert mapper.key_to_grid(25) is None
        assert mapper.key_to_grid(121) is None

    def test_key_to_grid_out_of_range(self, mapper):
        """Keys past the last row address nothing."""
        assert mapper.key_to_grid(127) is None
        assert mapper.key_to_grid(128) is None
        assert mapper.key_to_grid(200) is None
        assert mapper.key_to_grid(-1) is None

    def test_grid_to_key(self, mapper):
        """Key is 16 * row + column."""
        assert mapper.grid_to_key(GridCoordinate(row=2, column=3)) == 0x23
        assert mapper.grid_to_key((7, 8)) == 120
        assert mapper.grid_to_key((0, 0)) == 0

    def test_grid_round_trip(self, mapper):
        """Every coordinate survives encode then decode."""
        coordinates = all_coordinates()
        assert len(coordinates) == 72
        for coordinate in coordinates:
            assert mapper.key_to_grid(mapper.grid_to_key(coordinate)) == coordinate

    def test_grid_to_key_invalid(self, mapper):
        """Coordinates outside the grid raise."""
        with pytest.raises(GridRangeError):
            mapper.grid_to_key((8, 0))
        with pytest.raises(GridRangeError):
            mapper.grid_to_key((0, 9))
        with pytest.raises(GridRangeError):
            mapper.grid_to_key((-1, 0))
        with pytest.raises(GridRangeError):
            mapper.grid_to_key(("a", 0))
        with pytest.raises(GridRangeError):
            mapper.grid_to_key((1, 2, 3))

    def test_grid_to_key_rejects_bools(self, mapper):
        """True and False are not rows or columns."""
        with pytest.raises(GridRangeError):
            mapper.grid_to_key((True, 0))
        with pytest.raises(GridRangeError):
            mapper.grid_to_key((0, False))
        with pytest.raises(ControllerIndexError):
            mapper.index_to_control(True)

    def test_control_to_index(self, mapper):
        """Controllers start at control 0x68."""
        assert mapper.control_to_index(0x68) == 0
        assert mapper.control_to_index(0x6C) == 4
        assert mapper.control_to_index(0x70) == 8

    def test_control_to_index_invalid(self, mapper):
        """Controls outside the controller row address nothing."""
        assert mapper.control_to_index(0x00) is None
        assert mapper.control_to_index(0x67) is None
        assert mapper.control_to_index(0x71) is None

    def test_index_to_control(self, mapper):
        """Index 4 is control 0x6C."""
        assert mapper.index_to_control(0) == 0x68
        assert mapper.index_to_control(4) == 0x6C
        assert mapper.index_to_control(8) == 0x70

    def test_controller_round_trip(self, mapper):
        """Every controller index survives encode then decode."""
        for index in range(9):
            assert mapper.control_to_index(mapper.index_to_control(index)) == index

    def test_index_to_control_invalid(self, mapper):
        """Indices outside 0-8 raise."""
        for index in (-1, 9, 100):
            with pytest.raises(ControllerIndexError):
                mapper.index_to_control(index)

    def test_custom_layout(self):
        """Row stride and controller base come from the layout."""
        mapper = GridMapper(SurfaceLayout(row_stride=10, controller_base=0x10))
        assert mapper.grid_to_key((1, 2)) == 12
        assert mapper.key_to_grid(12) == GridCoordinate(row=1, column=2)
        assert mapper.key_to_grid(9) is None
        assert mapper.index_to_control(0) == 0x10

    def test_widest_layout_stays_in_data_byte(self):
        """The largest allowed stride and base still produce 7-bit numbers."""
        mapper = GridMapper(SurfaceLayout(row_stride=17, controller_base=119))
        assert mapper.grid_to_key((7, 8)) == 127
        assert mapper.index_to_control(8) == 127
        assert mapper.key_to_grid(127) == GridCoordinate(row=7, column=8)


@pytest.mark.unit
class TestGridCoordinate:
    """Test the coordinate model."""

    def test_unpacks_as_row_column(self):
        """Coordinates unpack like a (row, column) tuple."""
        row, column = GridCoordinate(row=2, column=3)
        assert (row, column) == (2, 3)
        assert tuple(GridCoordinate(row=7, column=8)) == (7, 8)

    def test_as_tuple(self):
        assert GridCoordinate(row=1, column=5).as_tuple() == (1, 5)

    def test_str(self):
        assert str(GridCoordinate(row=4, column=0)) == "(4, 0)"

    def test_model_dump_unaffected(self):
        """Serialization still uses field names."""
        assert GridCoordinate(row=2, column=3).model_dump() == {"row": 2, "column": 3}

    def test_out_of_range(self):
        """Out-of-range coordinates fail validation."""
        with pytest.raises(ValidationError):
            GridCoordinate(row=8, column=0)
        with pytest.raises(ValidationError):
            GridCoordinate(row=0, column=9)

    def test_mapper_accepts_unpacked_coordinate(self):
        """A coordinate unpacked into a tuple addresses the same pad."""
        mapper = GridMapper()
        coordinate = GridCoordinate(row=3, column=4)
        assert mapper.grid_to_key(tuple(coordinate)) == mapper.grid_to_key(coordinate)
