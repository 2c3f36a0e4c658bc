import pytest

from buildit import cli


def test_named_request(fixtures_dir, capsys):
    status = cli.main([str(fixtures_dir / "requests_top_level.json"), "-n", "ReposGET"])

    assert status == 0
    assert capsys.readouterr().out == (
        "GET https://api.github.com/user/repos?page=2&per_page=100\n"
    )


def test_arguments_are_applied_after_document(fixtures_dir, capsys):
    status = cli.main(
        [
            str(fixtures_dir / "requests_top_level.json"),
            "--name",
            "ReposPOST",
            "-X",
            "PUT",
            "-H",
            "Time-Zone: Europe/Dublin",
            "-q",
            "page=3",
            "-d",
            "payload",
            "-v",
        ]
    )
    out = capsys.readouterr().out

    assert status == 0
    assert "PUT https://api.github.com/user/repos?page=3\n" in out
    assert "Time-Zone: Europe/Berlin,Europe/Dublin\n" in out
    assert "payload\n" in out


def test_invalid_request(fixtures_dir, capsys):
    status = cli.main([str(fixtures_dir / "requests.json"), "-n", "Missing"])

    assert status == 1
    assert "valid request" in capsys.readouterr().err


def test_unreadable_document(tmp_path, capsys):
    broken = tmp_path / "broken.json"
    broken.write_text("{not json")

    assert cli.main([str(broken)]) == 1
    assert cli.main([str(tmp_path / "missing.json")]) == 1
    assert "Can't read configuration" in capsys.readouterr().err


def test_unknown_method(fixtures_dir):
    with pytest.raises(SystemExit):
        cli.main([str(fixtures_dir / "requests.json"), "-X", "PATCH"])


def test_repeated_options_before_config(fixtures_dir, capsys):
    status = cli.main(
        [
            "-H",
            "Accept: text/html",
            "-H",
            "Accept: text/xml",
            "-q",
            "page=1",
            "-q",
            "page=2",
            "-v",
            str(fixtures_dir / "requests_top_level.json"),
        ]
    )
    out = capsys.readouterr().out

    assert status == 0
    assert "GET https://api.github.com/user/repos?page=1&page=2\n" in out
    assert "Accept: application/vnd.github.v3+json,text/html,text/xml\n" in out
