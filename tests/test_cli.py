from diropql.cli import main
from diropql.container import write_diropqlz
from diropql.interpreter import write_diropql

KUROMI = "Kuromi is such a cute character."


def _lines(capsys):
    return capsys.readouterr().out.splitlines()


def test_round_trip_output(capsys):
    assert main([KUROMI]) == 0
    lines = _lines(capsys)
    assert lines[1] == f"Decoded Diropql program: {KUROMI}"
    assert lines[3] == f"Decoded Diropqlz program: {KUROMI}"


def test_prints_encoded_forms(capsys):
    main([KUROMI])
    lines = _lines(capsys)
    assert lines[0] == f"Encoded Diropql program: {write_diropql(KUROMI)}"
    assert lines[2] == f"Encoded Diropqlz program: {write_diropqlz(KUROMI)}"


def test_undecodable_container_reports_error(capsys):
    assert main(["Hi"]) == 1
    captured = capsys.readouterr()
    assert "Decoded Diropql program: Hi" in captured.out
    assert "Decoded Diropqlz program" not in captured.out
    assert "cannot decode container" in captured.err