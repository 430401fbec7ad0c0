"""
Tests for the sample manifest reader.
"""

import pytest

from jointcall.errors import ManifestError
from jointcall.manifest import ReadSet, read_manifest


class TestReadManifest:

    def test_rows_in_file_order(self, write_manifest):
        path = write_manifest([
            ("S2", "S2_R1.fq.gz", "S2_R2.fq.gz"),
            ("S1", "S1_R1.fq.gz", "S1_R2.fq.gz"),
            ("S3", "/data/S3_R1.fq.gz", "/data/S3_R2.fq.gz"),
        ])
        read_sets = read_manifest(path)

        assert [r.name for r in read_sets] == ["S2", "S1", "S3"]
        assert read_sets[2] == ReadSet(
            "S3", "/data/S3_R1.fq.gz", "/data/S3_R2.fq.gz")

    def test_extra_columns_ignored(self, write_manifest):
        path = write_manifest([
            ("S1", "a_1.fq", "a_2.fq"),
            ("S2", "b_1.fq", "b_2.fq", "lane2", "comment"),
        ])
        read_sets = read_manifest(path)

        assert read_sets == [
            ReadSet("S1", "a_1.fq", "a_2.fq"),
            ReadSet("S2", "b_1.fq", "b_2.fq"),
        ]

    def test_names_kept_as_text(self, write_manifest):
        path = write_manifest([("007", "1.fq", "2.fq"), ("NA", "3.fq", "4.fq")])
        assert [r.name for r in read_manifest(path)] == ["007", "NA"]

    def test_blank_lines_skipped(self, tmp_path):
        path = tmp_path / "samples.tsv"
        path.write_text("S1\ta_1.fq\ta_2.fq\n\nS2\tb_1.fq\tb_2.fq\n")
        assert [r.name for r in read_manifest(str(path))] == ["S1", "S2"]

    def test_empty_manifest(self, tmp_path):
        path = tmp_path / "samples.tsv"
        path.write_text("")
        assert read_manifest(str(path)) == []


class TestMalformedManifest:

    def test_short_row_is_fatal(self, write_manifest):
        path = write_manifest([
            ("S1", "a_1.fq", "a_2.fq"),
            ("S2", "b_1.fq"),
            ("S3", "c_1.fq", "c_2.fq"),
        ])
        with pytest.raises(ManifestError) as excinfo:
            read_manifest(path)

        error = excinfo.value
        assert error.row == 2
        assert error.fields == ["S2", "b_1.fq"]
        assert "found 2" in str(error)
        assert "b_1.fq" in str(error)

    def test_single_column_row(self, write_manifest):
        path = write_manifest([("S1",)])
        with pytest.raises(ManifestError) as excinfo:
            read_manifest(path)
        assert excinfo.value.fields == ["S1"]
        assert "found 1" in str(excinfo.value)

    def test_undecodable_row(self, tmp_path):
        path = tmp_path / "samples.tsv"
        path.write_bytes(b"S1\ta_1.fq\ta_2.fq\nS2\t\xff\xfe_1.fq\tb_2.fq\n")
        with pytest.raises(ManifestError) as excinfo:
            read_manifest(str(path))
        assert excinfo.value.path == str(path)

    def test_missing_file(self, tmp_path):
        path = str(tmp_path / "missing.tsv")
        with pytest.raises(ManifestError) as excinfo:
            read_manifest(path)
        assert excinfo.value.path == path
        assert isinstance(excinfo.value.__cause__, OSError)

    def test_path_separator_in_name(self, write_manifest):
        path = write_manifest([("../S1", "a_1.fq", "a_2.fq")])
        with pytest.raises(ManifestError, match="output file names"):
            read_manifest(path)

    def test_duplicate_name(self, write_manifest):
        path = write_manifest([
            ("S1", "a_1.fq", "a_2.fq"),
            ("S1", "b_1.fq", "b_2.fq"),
        ])
        with pytest.raises(ManifestError, match="clashes") as excinfo:
            read_manifest(path)
        assert excinfo.value.row == 2

    def test_name_sharing_another_samples_files(self, write_manifest):
        # S1_rg's sorted bam would be S1's read group bam
        path = write_manifest([
            ("S1", "a_1.fq", "a_2.fq"),
            ("S1_rg", "b_1.fq", "b_2.fq"),
        ])
        with pytest.raises(ManifestError, match="clashes"):
            read_manifest(path)
