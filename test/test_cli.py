import io
import logging

import pytest

from b58codec.cli import main


def run_main(argv, data=b""):
    stdout = io.BytesIO()
    status = main(argv, stdin=io.BytesIO(data), stdout=stdout)
    return status, stdout.getvalue()


def test_encode_stdin():
    assert run_main([], bytes([0, 87, 10])) == (0, b"17dB")


def test_decode_stdin():
    assert run_main(["--decode"], b"17dB") == (0, bytes([0, 87, 10]))
    assert run_main(["-d"], b"") == (0, b"")


def test_encode_decode_file(tmp_path):
    data = bytes([0, 0, 0, 0, 1, 2, 3, 4, 5, 6, 7, 8, 16, 32, 64, 128, 240, 250, 255])
    raw = tmp_path / "raw.bin"
    raw.write_bytes(data)

    status, text = run_main([str(raw)])
    assert status == 0
    assert text == b"11112drXXUifSrS46koaV2Qv"

    encoded = tmp_path / "encoded.txt"
    encoded.write_bytes(text)
    assert run_main(["--decode", str(encoded)]) == (0, data)


def test_decode_invalid(log: logging.Logger, caplog):
    with caplog.at_level(logging.ERROR, logger="b58codec"):
        status, out = run_main(["--decode"], b"11112drXXUifSrS46k0aV2Qv")

    assert status == 1
    assert out == b""
    assert "failed to decode" in caplog.text


def test_decode_non_ascii():
    assert run_main(["--decode"], "4Lé".encode("utf-8")) == (1, b"")


def test_too_many_files(tmp_path, caplog):
    status, out = run_main([str(tmp_path / "a"), str(tmp_path / "b")])

    assert status == 1
    assert out == b""
    assert "unexpected number of args 2" in caplog.text


def test_missing_file(tmp_path, caplog):
    missing = tmp_path / "missing.bin"
    status, _ = run_main([str(missing)])

    assert status == 1
    assert "failed to read" in caplog.text


def test_unknown_flag():
    with pytest.raises(SystemExit):
        run_main(["--verbose"])
