"""Command line interface tests."""

import pytest
from click.testing import CliRunner

from minievm.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


class TestRun:

    def test_run_prints_stack(self, runner):
        result = runner.invoke(cli, ["run", "6002600301"])
        assert result.exit_code == 0, result.output
        assert "0x5" in result.output
        assert "Halted at pc=5 after 3 steps" in result.output

    def test_run_prints_memory(self, runner):
        result = runner.invoke(cli, ["run", "6002602052"])
        assert result.exit_code == 0, result.output
        assert "0020: " + "00" * 31 + "02" in result.output
        assert "Memory (64 bytes)" in result.output

    def test_empty_memory(self, runner):
        result = runner.invoke(cli, ["run", "5f"])
        assert result.exit_code == 0
        assert "(empty)" in result.output

    def test_underflow_exits_1(self, runner):
        result = runner.invoke(cli, ["run", "01"])
        assert result.exit_code == 1
        assert "Stack underflow" in result.output

    def test_strict(self, runner):
        assert runner.invoke(cli, ["run", "fe"]).exit_code == 0
        result = runner.invoke(cli, ["run", "--strict", "fe"])
        assert result.exit_code == 1
        assert "Invalid opcode 0xfe" in result.output

    def test_step_limit(self, runner):
        result = runner.invoke(cli, ["run", "--step-limit", "1", "5f5f"])
        assert result.exit_code == 1
        assert "Step limit exceeded" in result.output

    def test_memory_limit(self, runner):
        result = runner.invoke(cli, ["run", "--memory-limit", "32", "60016001 52"])
        assert result.exit_code == 1
        assert "Memory limit exceeded" in result.output

    def test_default_memory_cap(self, runner):
        result = runner.invoke(cli, ["run", "6001 6301000000 52"])
        assert result.exit_code == 1
        assert "Memory limit exceeded" in result.output

    def test_empty_program(self, runner):
        result = runner.invoke(cli, ["run", ""])
        assert result.exit_code == 0, result.output
        assert "Halted at pc=0 after 0 steps" in result.output
        assert "(empty)" in result.output

    def test_bad_hex(self, runner):
        result = runner.invoke(cli, ["run", "6"])
        assert result.exit_code == 1
        assert "odd length" in result.output

    def test_missing_program(self, runner):
        result = runner.invoke(cli, ["run"])
        assert result.exit_code == 2

    def test_hex_file(self, runner, tmp_path):
        path = tmp_path / "prog.hex"
        path.write_text("0x6002\n6003\n02\n")
        result = runner.invoke(cli, ["run", "--file", str(path)])
        assert result.exit_code == 0, result.output
        assert "0x6" in result.output

    def test_binary_file(self, runner, tmp_path):
        path = tmp_path / "prog.bin"
        path.write_bytes(bytes.fromhex("6002600301"))
        result = runner.invoke(cli, ["run", "--binary", "--file", str(path)])
        assert result.exit_code == 0, result.output
        assert "0x5" in result.output

    def test_code_and_file_conflict(self, runner, tmp_path):
        path = tmp_path / "prog.hex"
        path.write_text("5f")
        result = runner.invoke(cli, ["run", "5f", "--file", str(path)])
        assert result.exit_code == 2


class TestDisasm:

    def test_listing(self, runner):
        result = runner.invoke(cli, ["disasm", "6002600301"])
        assert result.exit_code == 0, result.output
        assert "PUSH1 0x2" in result.output
        assert "0004  01  ADD" in result.output

    def test_empty(self, runner):
        result = runner.invoke(cli, ["disasm", "0x"])
        assert result.exit_code == 0
        assert "(empty program)" in result.output

    def test_bad_hex(self, runner):
        result = runner.invoke(cli, ["disasm", "xyz1"])
        assert result.exit_code == 1


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output
