from fsaccess.cli import main


def test_run_leaves_directory_as_it_was(tmp_path):
    (tmp_path / "keep.txt").write_text("kept")
    assert main([str(tmp_path)]) == 0
    assert sorted(p.name for p in tmp_path.iterdir()) == ["keep.txt"]
    assert (tmp_path / "keep.txt").read_text() == "kept"


def test_run_output(tmp_path, capsys):
    (tmp_path / "keep.txt").write_text("")
    main([str(tmp_path)])
    out = capsys.readouterr().out
    assert out == "keep.txt\n\n\nNo files\ntest2.txt\n"


def test_run_in_empty_directory_reports_no_files(tmp_path, capsys):
    main([str(tmp_path)])
    out = capsys.readouterr().out
    assert out.startswith("\nNo files\n")
    assert out.count("No files") == 2
    assert list(tmp_path.iterdir()) == []


def test_run_with_trailing_slash(tmp_path, capsys):
    assert main([str(tmp_path) + "/"]) == 0
    assert "test2.txt" in capsys.readouterr().out
    assert list(tmp_path.iterdir()) == []


def test_run_in_missing_directory_reports_errors(tmp_path, capsys):
    target = tmp_path / "absent"
    assert main([str(target)]) == 0
    out = capsys.readouterr().out
    assert "make_directory" in out
    assert "change_directory" in out
    assert not target.exists()