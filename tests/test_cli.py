#!/usr/bin/env python3
"""
Tests for the command line front end and FASTA reading.
"""

import pytest
from DotAlign.app import cli
from DotAlign.app.cli import main
from DotAlign.app.sequence_io import read_fasta, read_first_sequence


class TestSequenceIO:
    """FASTA reading."""

    def test_read_fasta(self, tmp_path):
        """Multi-line records keyed by the first header word."""
        path = tmp_path / "seqs.fasta"
        path.write_text(">s1 first record\nACGT\nTT\n\n>s2\nGG\n")
        assert read_fasta(str(path)) == {"s1": "ACGTTT", "s2": "GG"}

    def test_read_first_sequence(self, tmp_path):
        """First record only."""
        path = tmp_path / "seqs.fasta"
        path.write_text(">a\nGATTACA\n>b\nCCC\n")
        assert read_first_sequence(str(path)) == "GATTACA"

    def test_duplicate_headers(self, tmp_path):
        """A repeated name does not replace the first record."""
        path = tmp_path / "dup.fasta"
        path.write_text(">s\nAAAA\n>s\nCCCC\n")
        assert read_first_sequence(str(path)) == "AAAA"
        assert read_fasta(str(path)) == {"s": "AAAA"}

    def test_no_records(self, tmp_path):
        """File without records is an error."""
        path = tmp_path / "empty.fasta"
        path.write_text("")
        with pytest.raises(ValueError):
            read_first_sequence(str(path))


class TestCommandLine:
    """dotalign entry point."""

    def test_default_pair(self, capsys):
        """Without arguments the reference pair is used."""
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "===== DOT PLOT =====" in out
        assert "Score: 12" in out
        assert "-ATTGGGCGGTAGCTTAAGGTC" in out

    def test_align_only_normalises_input(self, capsys):
        """Input is stripped and upper-cased."""
        assert main(["gattaca", " gcatgcu ", "--mode", "align"]) == 0
        out = capsys.readouterr().out
        assert "DOT PLOT" not in out
        assert "G-ATTACA\nGCA-TGCU\n" in out

    def test_dotplot_only(self, capsys):
        """Only the dot-plot section."""
        assert main(["AC", "CA", "-m", "dotplot"]) == 0
        out = capsys.readouterr().out
        assert " A |    *" in out
        assert "ALIGNMENT" not in out

    def test_custom_scoring(self, capsys):
        """Scoring flags reach the aligner."""
        assert main(["AC", "CA", "-m", "align", "--gap", "-5"]) == 0
        assert "Score: -2" in capsys.readouterr().out

    def test_show_path(self, capsys):
        """Matrix with path markers and wrapped alignment."""
        assert main(["AC", "CA", "-m", "align", "--show-path"]) == 0
        out = capsys.readouterr().out
        assert "  C |   -2    0   -1*" in out
        assert "seq1: -AC" in out

    def test_verbose(self, capsys):
        """Progress output on request."""
        assert main(["AC", "CA", "-m", "align", "-v"]) == 0
        assert "GLOBAL ALIGNMENT" in capsys.readouterr().out

    def test_fasta_input(self, tmp_path, capsys):
        """Sequences read from FASTA files."""
        f1 = tmp_path / "a.fasta"
        f2 = tmp_path / "b.fasta"
        f1.write_text(">a\nGATTACA\n")
        f2.write_text(">b\nGCATGCU\n")
        assert main(["-f1", str(f1), "-f2", str(f2), "-m", "align"]) == 0
        assert "Score: 0" in capsys.readouterr().out

    def test_missing_sequence(self, capsys):
        """One sequence alone is rejected."""
        with pytest.raises(SystemExit) as exc:
            main(["ACGT"])
        assert exc.value.code == 2
        assert "Both sequences must be provided." in capsys.readouterr().err

    def test_missing_fasta_file(self, tmp_path):
        """Unreadable FASTA is reported as a usage error."""
        with pytest.raises(SystemExit):
            main(["-f1", str(tmp_path / "nope.fasta"), "ACGT"])

    def test_module_documented(self):
        """The entry point module describes itself."""
        assert cli.__doc__ is not None
        assert "alignment" in cli.__doc__

    def test_bad_width(self):
        """Width must be positive."""
        with pytest.raises(SystemExit):
            main(["AC", "CA", "--width", "0"])

    def test_plot_files(self, tmp_path, capsys):
        """--plot writes both figures."""
        prefix = tmp_path / "run"
        assert main(["GATTACA", "GCATGCU", "--plot", str(prefix)]) == 0
        assert (tmp_path / "run_dotplot.png").exists()
        assert (tmp_path / "run_matrix.png").exists()
        assert "Wrote" in capsys.readouterr().out
