"""System and user prompts for blog post generation.

Each post type maps to a fixed system prompt and a user-prompt builder.
The builders only format strings; accuracy rules ("do not invent numbers")
are instructions to the model, nothing here checks the output.
"""

from __future__ import annotations

from typing import Callable, Optional

from blog_writer.common.models import PostType

# Sentinel line that separates the e-book body from the AI suggestion block
SUGGESTIONS_MARKER = "<!-- AI_SUGGESTIONS -->"
# FRAMEWORK value the model writes when no framework fits
NO_FRAMEWORK_TOKEN = "없음"

CONTEXT_SECTION_TITLE = "## 내 상황/경험 (이 내용을 반드시 글에 녹여주세요)"

_BASE_SYSTEM_PROMPT = """\
당신은 부업을 하는 직장인의 경험을 블로그 글로 옮겨주는 한국어 블로그 작가입니다.

## 핵심 규칙
1. **경험 기반**: 사용자가 제공한 상황/경험만 근거로 씁니다. 수치, 결과, 후기를 지어내지 마세요.
2. **HTML 출력**: 마크다운(#, -, **)을 쓰지 말고 <h2>, <h3>, <p>, <ul>, <li>, <strong> 태그만 사용하세요.
3. **짧은 문단**: 한 <p>에는 2-3문장만 담으세요.
4. **정책 준수**: 저작권, 플랫폼 정책을 위반하는 조언은 하지 마세요.
5. **본문만 출력**: 인사말이나 "다음은 ~입니다" 같은 설명 없이 본문 HTML만 출력하세요.
"""

SYSTEM_PROMPTS: dict[PostType, str] = {
    PostType.CHALLENGE: _BASE_SYSTEM_PROMPT + """
## 톤 가이드
- 직접 해본 사람이 솔직하게 털어놓는 후기체 ("~했어요", "~더라고요")
- 잘된 점과 아쉬운 점을 모두 보여주세요
- 수익이 없으면 없다고 쓰세요. 과장하지 마세요
""",
    PostType.INFO: _BASE_SYSTEM_PROMPT + """
## 톤 가이드
- 검색으로 들어온 독자가 바로 따라 할 수 있는 가이드체
- 단계와 조건을 구체적으로, 뻔한 일반론은 빼고
- 제목과 소제목에 검색 키워드를 자연스럽게 포함하세요
""",
    PostType.DAILY: _BASE_SYSTEM_PROMPT + """
## 톤 가이드
- 하루를 돌아보는 담담한 에세이체
- 사건보다 감정과 생각의 흐름을 중심으로
- 교훈을 강요하지 말고 여운을 남기세요
""",
    PostType.EBOOK: """\
당신은 직장인의 실무 경험을 유료 전자책 챕터로 구성하는 한국어 편집자입니다.

## 핵심 규칙
1. **경험 기반**: 사용자가 제공한 상황/경험만 근거로 씁니다. 수치와 결과를 지어내지 마세요.
2. **HTML 출력**: 마크다운 대신 <h2>, <h3>, <p>, <ul>, <ol>, <li>, <strong>, <blockquote>를 사용하세요.
3. **구조 준수**: 요청된 챕터 구조(도입부, 본론, Real Story, Cheat Key, 워크북)를 순서대로 지키세요.
4. **추천 블록**: 본문이 끝나면 지정된 형식의 AI 추천 블록을 반드시 덧붙이세요.
""",
}

GENERIC_SYSTEM_PROMPT = _BASE_SYSTEM_PROMPT

_HTML_FORMAT_RULES = """\
## HTML 형식 (필수!)
- 이모지 사용 금지
- 마크다운 금지, HTML만 사용
- 각 <p> 태그는 2-3문장만 (짧게!)
- <h2>, <h3>, <p> 사이에 줄바꿈으로 여백 확보"""


def build_context_section(context: Optional[str]) -> str:
    """Labelled context block appended to the prompt ('' when there is no context)."""
    if not context or not context.strip():
        return ""
    return f"\n\n{CONTEXT_SECTION_TITLE}\n{context}"


def _challenge_prompt(keyword: str, context_section: str) -> str:
    return f"""\
다음 주제로 부업 도전기/후기 블로그 글을 작성해주세요.

## 메인 키워드
{keyword}
{context_section}

## 작성 가이드
- <h2> 제목에 키워드 "{keyword}" 포함
- <h3> 소제목 3-4개로 섹션 구분
- 총 분량: 1200~1800자 (충분히 길게)
- 키워드를 본문에 5-7회 자연스럽게 포함
- 잘된 점, 아쉬운 점, 앞으로의 계획 구성

## 정보 정확성 (매우 중요!)
- 내가 제공한 "내 상황/경험" 내용만 기반으로 작성
- 내가 언급하지 않은 수치나 결과를 임의로 만들지 말 것
- 저작권/정책 위반 조언 금지
- 검증 안 된 정보는 쓰지 말 것

{_HTML_FORMAT_RULES}
- 예시:
<h2>제목</h2>

<p>첫 문단. 짧게 2-3문장.</p>

<p>두 번째 문단.</p>

<h3>소제목</h3>

<p>내용...</p>"""


def _info_prompt(keyword: str, context_section: str) -> str:
    return f"""\
다음 주제로 정보/가이드 블로그 글을 작성해주세요.

## 메인 키워드
{keyword}
{context_section}

## 작성 가이드
- <h2> 제목에 키워드 "{keyword}" 포함 (검색 최적화)
- <h3> 소제목 4-5개로 섹션 구분
- 총 분량: 1500~2000자 (충분히 길게)
- 키워드를 본문에 5-7회 자연스럽게 포함
- 내 경험을 근거로 신뢰감 있게 작성

## 정보 정확성 (매우 중요!)
- 내가 제공한 "내 상황/경험" 내용만 기반으로 작성
- 저작권 위반 조언 절대 금지 (유료 콘텐츠 재판매, 타인 저작물 무단 사용 등)
- 플랫폼 정책 위반 조언 금지
- 검증 안 된 정보는 쓰지 말 것
- 뻔한 일반론 대신 내 경험 기반의 구체적인 내용만

{_HTML_FORMAT_RULES}
- 예시:
<h2>제목</h2>

<p>첫 문단. 짧게 2-3문장.</p>

<p>두 번째 문단. 이렇게 나눠서.</p>

<h3>소제목</h3>

<p>내용...</p>"""


def _daily_prompt(keyword: str, context_section: str) -> str:
    return f"""\
다음 주제로 일상/에세이 블로그 글을 작성해주세요.

## 주제
{keyword}
{context_section}

## 작성 가이드
- <h2> 제목 (감성적인 제목 OK)
- <h3> 소제목 2-3개로 흐름 구분
- 총 분량: 1000~1500자
- 감정과 생각 표현에 집중
- 내가 제공한 상황만 기반으로 작성

{_HTML_FORMAT_RULES}
- 예시:
<h2>제목</h2>

<p>첫 문단. 짧게.</p>

<p>두 번째 문단.</p>

<h3>소제목</h3>

<p>내용...</p>"""


def _ebook_prompt(keyword: str, context_section: str) -> str:
    return f"""\
다음 주제로 전자책 챕터를 작성해주세요.

## 챕터 주제
{keyword}
{context_section}

## 작성 가이드 (필수 구조)

### 1. 챕터 제목
- <h2>로 작성, 흥미를 끄는 제목
- 키워드 "{keyword}" 포함

### 2. 도입부 (300자 이상)
- 독자 공감 유도, 문제 제기
- "왜 이 내용이 중요한가?"

### 3. 본론 (800자 이상)
- 단계별 설명 (1단계, 2단계, 3단계 등)
- <h3>로 섹션 구분
- 대비 구조 활용 (잘못된 접근 vs 올바른 접근)
- 구체적인 예시 포함

### 4. [Real Story] 섹션 (400자 이상)
- 내가 제공한 경험을 스토리텔링으로 풀어내기
- <h3>[Real Story] 제목</h3> 형식
- 구체적인 상황, 감정, 결과 포함

### 5. 💡 Cheat Key (200자 이상)
- <h3>💡 Cheat Key</h3> 형식 (이모지 허용)
- 핵심 내용 3줄 요약
- 독자가 기억해야 할 포인트

### 6. 워크북 섹션 (필수!)
- <h3>📝 워크북: 실천하기</h3> 형식
- 자기 점검 질문 3~5개
- 오늘 당장 할 수 있는 실천 과제 1~2개

## 정보 정확성 (매우 중요!)
- 내가 제공한 "내 상황/경험" 내용만 기반으로 작성
- 내가 언급하지 않은 수치나 결과를 임의로 만들지 말 것
- 검증 안 된 정보는 쓰지 말 것

## HTML 형식 (필수!)
- 마크다운 금지, HTML만 사용
- 이모지는 Cheat Key, 워크북 제목에만 사용
- 각 <p> 태그는 2-4문장
- <h2>, <h3>, <p> 사이에 줄바꿈으로 여백 확보
- <ul>, <ol>, <li>, <strong>, <blockquote> 활용
- 총 분량: 1500~2500자 (밀도 있게)

## AI 추천 (본문 끝에 반드시 추가!)

본문 작성이 끝나면, 아래 형식으로 추천사항을 추가해주세요:

{SUGGESTIONS_MARKER}
FRAMEWORK: (내용이 단계별/구조화되어 있다면 적합한 프레임워크 추천. 예: "Why-Output-Task 3단계", "Before-After 구조" 등. 적합한 프레임워크가 없으면 "{NO_FRAMEWORK_TOKEN}")
IMPROVE: (1) 사용자가 입력한 "내 상황/경험"에서 빠진 요소 분석 - 숫자/기간이 없다면? 실패 경험이 없다면? 감정 표현이 부족하다면? (2) 작성된 본문에서 더 강화하면 좋을 구체적인 부분 - 어떤 섹션을 보강하면 좋을지, 어떤 내용을 추가하면 좋을지. 이 두 가지를 합쳐서 1-2문장으로 구체적으로 제안. 예: "실패했던 경험을 추가하면 Real Story 섹션이 더 풍성해질 거예요", "구체적인 기간(며칠, 몇 주)을 넣으면 도입부 설득력이 올라가요"
IMAGES: (이 챕터에 어울리는 이미지 3개를 쉼표로 구분. 예: "3단계 프로세스 도식, 실제 작업 화면 캡처, 결과물 스크린샷")"""


def _generic_prompt(keyword: str, context_section: str) -> str:
    return f"""\
다음 주제로 블로그 글을 작성해주세요.

## 주제
{keyword}
{context_section}

HTML 형식으로 출력해주세요. 이모지는 사용하지 마세요."""


PromptBuilder = Callable[[str, str], str]

PROMPT_BUILDERS: dict[PostType, PromptBuilder] = {
    PostType.CHALLENGE: _challenge_prompt,
    PostType.INFO: _info_prompt,
    PostType.DAILY: _daily_prompt,
    PostType.EBOOK: _ebook_prompt,
}


def _as_post_type(post_type: PostType | str) -> PostType | None:
    try:
        return PostType(post_type)
    except ValueError:
        return None


def get_system_prompt(post_type: PostType | str) -> str:
    """Return the system prompt for a post type (generic one for unknown types)."""
    resolved = _as_post_type(post_type)
    if resolved is None:
        return GENERIC_SYSTEM_PROMPT
    return SYSTEM_PROMPTS[resolved]


def build_user_prompt(
    post_type: PostType | str,
    keyword: str,
    context: Optional[str] = None,
) -> str:
    """Build the user prompt for a post type.

    Args:
        post_type: One of the PostType values; anything else gets the generic template
        keyword: Main keyword / topic, inserted verbatim
        context: Optional "my situation/experience" text, appended under a labelled section

    Returns:
        Formatted user prompt string
    """
    context_section = build_context_section(context)
    resolved = _as_post_type(post_type)
    builder = PROMPT_BUILDERS.get(resolved, _generic_prompt) if resolved else _generic_prompt
    return builder(keyword, context_section)
