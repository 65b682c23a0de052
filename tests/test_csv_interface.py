import numpy as np
import pytest

from fileio.csv_interface import column_count, read_column, read_points
from fileio.emi import emi_file, read_emi_samples, read_emi_values
from mesh.core.errors import EmptyInput, FileNotFound, ReadFailure
from conftest import write_table


def test_read_points_by_index(tmp_path):
    path = write_table(tmp_path / "pts.txt", ["id", "x", "y", "v"],
                       [(0, 1.5, 2.5, 10), (1, 3.0, 4.0, 20)])
    pts = read_points(path, columns=(1, 2, 3))
    assert pts.shape == (2, 3)
    assert pts[1].tolist() == [3.0, 4.0, 20.0]


def test_read_points_two_columns_gives_zero_z(tmp_path):
    path = write_table(tmp_path / "pts.txt", ["id", "x", "y"], [(0, 1, 2)])
    assert read_points(path, columns=(1, 2)).tolist() == [[1.0, 2.0, 0.0]]


def test_read_by_header_name_and_blank_lines(tmp_path):
    path = tmp_path / "ert.txt"
    path.write_text("E1\tz1/m\n1\t0.5\n\n2\tNaN\n", encoding="utf-8")
    z = read_column(str(path), column="z1/m")
    assert z[0] == 0.5 and np.isnan(z[1])
    assert column_count(str(path)) == 2


def test_comma_delimiter(tmp_path):
    path = write_table(tmp_path / "c.csv", ["x", "y", "z"], [(1, 2, 3)], delimiter=",")
    assert read_points(path, delimiter=",").tolist() == [[1.0, 2.0, 3.0]]


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFound):
        read_points(str(tmp_path / "nope.txt"))


def test_unknown_header_and_bad_field(tmp_path):
    path = write_table(tmp_path / "t.txt", ["a", "b"], [(1, "x")])
    with pytest.raises(ReadFailure, match="not found"):
        read_column(path, column="c")
    with pytest.raises(ReadFailure) as err:
        read_column(path, column=1)
    assert err.value.context["line"] == 2


def test_short_row_fails_whole_read(tmp_path):
    path = tmp_path / "short.txt"
    path.write_text("a\tb\tc\n1\t2\t3\n4\t5\n", encoding="utf-8")
    with pytest.raises(ReadFailure, match="too few"):
        read_points(str(path))


def test_emi_files_concatenate_regions(tmp_path):
    base = str(tmp_path / "survey")
    for k, region in enumerate("ABC"):
        write_table(emi_file(base, region, "H"), ["n", "x", "y", "v"],
                    [(0, k, 0.5, 10 * (k + 1))])
    samples = read_emi_samples(base, "H")
    assert samples[:, 0].tolist() == [0.0, 1.0, 2.0]
    assert read_emi_values(base, "H").tolist() == [10.0, 20.0, 30.0]


def test_emi_without_rows_is_empty_input(tmp_path):
    base = str(tmp_path / "survey")
    for region in "ABC":
        write_table(emi_file(base, region, "V"), ["n", "x", "y", "v"], [])
    with pytest.raises(EmptyInput):
        read_emi_samples(base, "V")
