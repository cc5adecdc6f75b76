import os

import pytest

from y2k.cli import main


def write_program(tmp_path, text, name="prog.txt"):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_runs_raw_file(tmp_path, capsys):
    prog = write_program(tmp_path, "91289 # print hi\n")
    assert main([str(prog)]) == 0
    assert capsys.readouterr().out == "hi\n"


def test_extra_arguments_become_variables(tmp_path, capsys):
    prog = write_program(tmp_path, "9219\n")
    assert main([str(prog), "hello"]) == 0
    assert capsys.readouterr().out == "hello\n"


def test_digits_option(tmp_path, capsys):
    prog = write_program(tmp_path, "09 01 02 08 09\n")
    assert main(["-d", "2", str(prog)]) == 0
    assert capsys.readouterr().out == "hi\n"


def test_debug_option(tmp_path, capsys):
    prog = write_program(tmp_path, "91289\n")
    main(["-debug", str(prog)])
    out = capsys.readouterr().out
    assert "Parse: [9]1289" in out.splitlines()


def test_missing_input(capsys):
    assert main([]) == 0
    assert "Missing input dir!" in capsys.readouterr().out


def test_missing_file_reports_error(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert capsys.readouterr().err.startswith("y2k:")


def test_zero_digits_is_usage_error(tmp_path):
    prog = write_program(tmp_path, "91289\n")
    with pytest.raises(SystemExit) as info:
        main(["-d", "0", str(prog)])
    assert info.value.code == 2


def test_export_then_run_directory(tmp_path, capsys):
    prog = write_program(tmp_path, "91289\n")
    outdir = tmp_path / "out"
    assert main(["-export", "-outdir", str(outdir), str(prog)]) == 0
    exported = outdir / "0.y2k"
    assert os.stat(exported).st_mtime_ns == int("91289".ljust(18, "0"))
    capsys.readouterr()

    assert main([str(outdir)]) == 0
    assert capsys.readouterr().out == "hi\n"