"""Shared test fixtures for the blog writer."""

import sys
from pathlib import Path

import pytest

# Ensure src/ is importable without installing the package
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from blog_writer.common.config import Settings
from blog_writer.common.models import GenerationRequest, PostType
from blog_writer.content_writer.prompts import SUGGESTIONS_MARKER


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def test_settings() -> Settings:
    """Defaults only; never reads config/settings.yaml or the environment."""
    return Settings()


@pytest.fixture
def challenge_request() -> GenerationRequest:
    return GenerationRequest(
        post_type=PostType.CHALLENGE,
        keyword="미리캔버스 부업",
        context="40개 올렸는데 아직 수익 0원. 심사 반려 3번 당했는데 해상도 문제였음.",
    )


@pytest.fixture
def sample_body_html() -> str:
    """Typical model output for a challenge post."""
    return """<h2>미리캔버스 부업 한 달 후기</h2>

<p>퇴근 후 매일 10개씩 올렸어요. 아직 수익은 0원입니다.</p>

<h3>잘된 점</h3>

<p>등록 속도가 <strong>두 배</strong>로 빨라졌어요.</p>

<ul>
<li>해상도 600x600 이상</li>
<li>SNS템플릿 카테고리</li>
</ul>

<p>Q&amp;A는 다음 글에서 정리할게요.</p>"""


@pytest.fixture
def sample_ebook_output() -> str:
    """E-book chapter followed by a complete suggestion block."""
    return f"""<h2>업무 인수분해 기술</h2>

<p>사수도 인수인계서도 없었습니다.</p>

<h3>💡 Cheat Key</h3>

<p>Why, Output, Task 순서로 쪼개세요.</p>

{SUGGESTIONS_MARKER}
FRAMEWORK: Why-Output-Task 3단계
IMPROVE: 실패했던 경험을 추가하면 Real Story 섹션이 더 풍성해질 거예요
IMAGES: 3단계 프로세스 도식, 실제 작업 화면 캡처, 결과물 스크린샷"""
