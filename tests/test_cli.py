import pytest

from video_teacher import cli


def test_prints_parse_result(capsys):
    cli.main(["https://youtu.be/dQw4w9WgXcQ?t=1m30s&list=PLabc"])
    out = capsys.readouterr().out
    assert "video_id: dQw4w9WgXcQ" in out
    assert "canonical_url: https://www.youtube.com/watch?v=dQw4w9WgXcQ" in out
    assert "start_time: 90" in out
    assert "timestamped_url: https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=90s" in out
    assert "playlist_id: PLabc" in out


def test_prompts_when_no_argument(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt: "https://www.youtube.com/shorts/dQw4w9WgXcQ")
    cli.main([])
    out = capsys.readouterr().out
    assert "video_id: dQw4w9WgXcQ" in out
    assert "start_time" not in out


def test_invalid_url_exits_with_status_1(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["https://vimeo.com/123456789"])
    assert excinfo.value.code == 1
    assert "Invalid YouTube URL" in capsys.readouterr().out
