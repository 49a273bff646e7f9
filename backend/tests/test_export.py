"""
Tests for the CSV export of the filtered camera list.
"""
import csv
import io
from datetime import date

from camera_monitor.dashboard import export_filename, export_rows, to_csv, write_export
from camera_monitor.dashboard.export import EXPORT_HEADER

from factories import make_camera


class TestExport:
	def test_header_and_rows(self):
		rows = export_rows([make_camera(1), make_camera(2, name="Cam2", status="erro")])
		assert rows[0] == EXPORT_HEADER
		assert len(rows[0]) == 9
		assert rows[2] == ["Cam2", "10.0.0.1", "S1", "Door", "StoreA", "erro", "4", "4", "0"]

	def test_every_value_is_quoted(self):
		text = to_csv([make_camera(1)])
		lines = text.split("\n")
		assert lines[1] == '"Cam1","10.0.0.1","S1","Door","StoreA","online","4","4","0"'

	def test_quotes_are_doubled(self):
		text = to_csv([make_camera(1, name='Cam "A", front')])
		assert '"Cam ""A"", front"' in text

	def test_reparsing_recovers_values(self):
		cameras = [
			make_camera(1, name='He said "hi"', location="Aisle, 3"),
			make_camera(2, store="Loja; Norte", serial='"quoted"'),
		]
		parsed = list(csv.reader(io.StringIO(to_csv(cameras))))
		assert parsed == export_rows(cameras)

	def test_empty_list_is_header_only(self):
		assert to_csv([]).count("\n") == 0

	def test_filename_is_date_stamped(self):
		assert export_filename(date(2024, 3, 9)) == "relatorio_cameras_2024-03-09.csv"

	def test_write_export(self, tmp_path):
		path = write_export([make_camera(1)], tmp_path, day=date(2024, 3, 9))
		assert path == tmp_path / "relatorio_cameras_2024-03-09.csv"
		assert path.read_text(encoding="utf-8") == to_csv([make_camera(1)])
