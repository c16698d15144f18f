"""Tests for the blog-writer CLI."""

from unittest.mock import patch

import pytest

from blog_writer.common.errors import GenerationFailed
from blog_writer.client import main as cli


class FakeClient:
    def __init__(self, chunks=(), error=None, **kwargs):
        self.chunks = list(chunks)
        self.error = error
        self.kwargs = kwargs

    def stream(self, request):
        if self.error is not None:
            raise self.error
        return iter(self.chunks)


def test_streams_and_prints_summary(capsys, sample_body_html):
    fake = FakeClient([sample_body_html.encode("utf-8")])
    with patch.object(cli, "GenerateClient", return_value=fake) as client_cls:
        code = cli.main(["--type", "info", "--keyword", "미리캔버스 부업", "--server", "http://api.test"])

    assert code == 0
    client_cls.assert_called_once_with(server_url="http://api.test")
    out = capsys.readouterr().out
    assert "<h2>미리캔버스 부업 한 달 후기</h2>" in out
    assert "[추출된 제목] 미리캔버스 부업 한 달 후기" in out
    assert "[추천 키워드] 미리캔버스 부업, 미리캔버스 부업 후기" in out
    assert "단계별 진행 스크린샷" in out


def test_plain_output_and_preview(capsys, tmp_path, sample_body_html):
    output = tmp_path / "preview.html"
    fake = FakeClient([sample_body_html.encode("utf-8")])
    with patch.object(cli, "LocalGenerateClient", return_value=fake):
        code = cli.main(["--keyword", "부업", "--local", "--plain", "--output", str(output)])

    assert code == 0
    out = capsys.readouterr().out
    assert "<h2>" not in out
    assert "- 해상도 600x600 이상" in out
    assert output.exists()


def test_error_exit_code(capsys):
    fake = FakeClient(error=GenerationFailed("서버에 연결할 수 없습니다", status_code=0))
    with patch.object(cli, "GenerateClient", return_value=fake):
        code = cli.main(["--keyword", "부업"])

    assert code == 1
    assert "오류: 서버에 연결할 수 없습니다" in capsys.readouterr().err


def test_unknown_type_rejected():
    with pytest.raises(SystemExit):
        cli.main(["--type", "review", "--keyword", "부업"])
