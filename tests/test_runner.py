import pytest

from matpair.matrix_io import format_matrix, iter_tokens, read_matrix
from matpair.multiply import multiply_matrices
from matpair.runner import FileTiming, main, parallel_main, process_file, run

A1 = [[1, 2, 3], [4, 5, 6]]
B1 = [[7, 8], [9, 10], [0, 1]]
A2 = [[2]]
B2 = [[3, 4]]


@pytest.fixture
def pair_file(tmp_path):
    path = tmp_path / "pairs.txt"
    path.write_text("2\n" + format_matrix(A1) + format_matrix(B1)
                    + format_matrix(A2) + format_matrix(B2))
    return path


def _read_products(path):
    with open(path, encoding="utf-8") as handle:
        tokens = iter_tokens(handle)
        return [read_matrix(tokens), read_matrix(tokens)]


def test_process_file_writes_products(pair_file, tmp_path):
    out = tmp_path / "result.txt"
    timing = process_file(pair_file, out)
    assert isinstance(timing, FileTiming)
    assert timing.pairs == 2
    assert timing.elapsed_ms >= 0
    assert _read_products(out) == [multiply_matrices(A1, B1), multiply_matrices(A2, B2)]


def test_process_file_uses_given_multiply(pair_file, tmp_path):
    out = tmp_path / "result.txt"
    calls = []

    def recording(a, b):
        calls.append((a, b))
        return [[0] * len(b[0]) for _ in a]

    timing = process_file(pair_file, out, recording)
    assert timing.pairs == 2
    assert calls == [(A1, B1), (A2, B2)]
    assert _read_products(out) == [[[0, 0], [0, 0]], [[0, 0]]]


def test_run_writes_log(pair_file, tmp_path, capsys):
    out = tmp_path / "result.txt"
    log = tmp_path / "log.txt"
    timings = run([(pair_file, out)], log)
    assert [t.pairs for t in timings] == [2]
    lines = log.read_text().splitlines()
    assert lines[0].startswith(f"{pair_file} -> {out}: ")
    assert lines[0].endswith(" ms")
    assert lines[-1] == f"Total: {timings[0].elapsed_ms} ms"
    captured = capsys.readouterr().out
    assert f"Processing: {pair_file} (2 pairs)" in captured
    assert "All files processed." in captured


def test_run_skips_missing_input(pair_file, tmp_path, capsys):
    log = tmp_path / "log.txt"
    missing = tmp_path / "missing.txt"
    timings = run([(missing, tmp_path / "x.txt"), (pair_file, tmp_path / "y.txt")], log)
    assert [t.input_path for t in timings] == [str(pair_file)]
    assert "Cannot open file" in capsys.readouterr().err
    assert len(log.read_text().splitlines()) == 2


def test_main_usage_errors():
    assert main([]) == 1
    assert main(["only_one.txt"]) == 1
    assert main(["a.txt", "b.txt", "c.txt"]) == 1


def test_main_processes_files(pair_file, tmp_path):
    out = tmp_path / "result.txt"
    log = tmp_path / "log.txt"
    assert main([str(pair_file), str(out), "--log", str(log)]) == 0
    assert _read_products(out) == [multiply_matrices(A1, B1), multiply_matrices(A2, B2)]
    assert log.read_text().splitlines()[-1].startswith("Total: ")


def test_parallel_main_matches_serial(pair_file, tmp_path):
    serial_out = tmp_path / "serial.txt"
    parallel_out = tmp_path / "parallel.txt"
    assert main([str(pair_file), str(serial_out), "--log", str(tmp_path / "l1.txt")]) == 0
    assert parallel_main([str(pair_file), str(parallel_out), "--log",
                          str(tmp_path / "l2.txt"), "-w", "2"]) == 0
    assert parallel_out.read_text() == serial_out.read_text()


def test_parallel_main_rejects_zero_workers(pair_file, tmp_path):
    assert parallel_main([str(pair_file), str(tmp_path / "r.txt"), "-w", "0"]) == 1


def test_main_reports_dimension_mismatch(tmp_path, capsys):
    bad = tmp_path / "bad.txt"
    bad.write_text("1\n" + format_matrix([[1, 2, 3]]) + format_matrix([[1, 2], [3, 4]]))
    result = main([str(bad), str(tmp_path / "r.txt"), "--log", str(tmp_path / "log.txt")])
    assert result == 1
    assert "mismatch" in capsys.readouterr().err


def test_main_reports_unwritable_log(pair_file, tmp_path):
    log = tmp_path / "no_such_dir" / "log.txt"
    assert main([str(pair_file), str(tmp_path / "r.txt"), "--log", str(log)]) == 1