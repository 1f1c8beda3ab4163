"""Tests for cli.py."""

from click.testing import CliRunner

from procedural_completion.cli import cli


class TestCLI:
    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "pcomp" in result.output

    def test_init(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(cli, ["init", str(tmp_path)])
        assert result.exit_code == 0
        assert (tmp_path / "pcomp.toml").exists()

    def test_init_already_exists(self, tmp_path):
        runner = CliRunner()
        runner.invoke(cli, ["init", str(tmp_path)])
        result = runner.invoke(cli, ["init", str(tmp_path)])
        assert result.exit_code != 0
        assert "already exists" in result.output

    def test_complete(self, sample_xml):
        runner = CliRunner()
        result = runner.invoke(cli, ["complete", str(sample_xml), "g"])
        assert result.exit_code == 0
        assert result.output == "getc\tfunction\tint\n"

    def test_complete_all(self, sample_xml):
        runner = CliRunner()
        result = runner.invoke(cli, ["complete", str(sample_xml)])
        assert result.exit_code == 0
        assert [line.split("\t")[0] for line in result.output.splitlines()] == [
            "abs", "EOF", "getc", "strlen",
        ]

    def test_complete_bundled(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        runner = CliRunner()
        result = runner.invoke(cli, ["complete", "c.xml", "mal"])
        assert result.exit_code == 0
        assert result.output.startswith("malloc\tfunction\tvoid *")

    def test_complete_with_config(self, sample_xml, tmp_path):
        config = tmp_path / "pcomp.toml"
        config.write_text("[provider]\ncase_sensitive = true\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["complete", str(sample_xml), "--config", str(config)])
        assert result.exit_code == 0
        assert result.output.splitlines()[0].startswith("EOF")

    def test_missing_source(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(cli, ["complete", str(tmp_path / "nope.xml")])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_bad_source(self, write_xml):
        path = write_xml("<keywords><keyword")
        runner = CliRunner()
        result = runner.invoke(cli, ["complete", str(path)])
        assert result.exit_code == 1
        assert "malformed XML" in result.output

    def test_describe(self, sample_xml):
        runner = CliRunner()
        result = runner.invoke(cli, ["describe", str(sample_xml), "strlen"])
        assert result.exit_code == 0
        assert "size_t <b>strlen</b>(const char * cs)" in result.output

    def test_describe_unknown(self, sample_xml):
        runner = CliRunner()
        result = runner.invoke(cli, ["describe", str(sample_xml), "nope"])
        assert result.exit_code == 1
        assert "No completion named 'nope'" in result.output

    def test_prefix(self, tmp_path):
        source = tmp_path / "main.c"
        source.write_text("int main() {\n    pri\n}\n", encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(cli, ["prefix", str(source), "20"])
        assert result.exit_code == 0
        assert result.output == "pri\n"

    def test_prefix_crlf_offsets_are_raw(self, tmp_path):
        source = tmp_path / "main.c"
        source.write_bytes(b"ab\r\ncd")
        runner = CliRunner()
        result = runner.invoke(cli, ["prefix", str(source), "6"])
        assert result.exit_code == 0
        assert result.output == "cd\n"

    def test_prefix_invalid_utf8(self, tmp_path):
        source = tmp_path / "main.c"
        source.write_bytes(b"int gr\xf6")
        runner = CliRunner()
        result = runner.invoke(cli, ["prefix", str(source), "3"])
        assert result.exit_code == 1
        assert "is not valid UTF-8" in result.output
        assert not isinstance(result.exception, UnicodeDecodeError)

    def test_prefix_bad_offset(self, tmp_path):
        source = tmp_path / "main.c"
        source.write_text("abc", encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(cli, ["prefix", str(source), "99"])
        assert result.exit_code == 1
        assert "outside buffer" in result.output
