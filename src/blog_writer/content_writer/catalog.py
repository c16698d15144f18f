"""Fixed catalog of post types: names, input placeholders, image ideas."""

from __future__ import annotations

from blog_writer.common.models import PostType

from .models import PostTypeInfo

POST_TYPES: dict[PostType, PostTypeInfo] = {
    PostType.CHALLENGE: PostTypeInfo(
        post_type=PostType.CHALLENGE,
        name="부업 도전기",
        emoji="🔥",
        description="내가 시도하고 있는 부업 경험담, 후기, 수익 공개",
        placeholder_keyword="미리캔버스 부업",
        placeholder_context=(
            "40개 올렸는데 아직 수익 0원, 그래도 하루 10개씩 꾸준히 하는 중. "
            "AI로 만들어서 등록하고 있음. 심사 반려 3번 당했는데 해상도 문제였음."
        ),
        image_recommendations=(
            "수익/정산 화면 스크린샷",
            "작업 중인 화면 캡처",
            "실제 작업물 사진",
        ),
    ),
    PostType.INFO: PostTypeInfo(
        post_type=PostType.INFO,
        name="정보/가이드",
        emoji="📚",
        description="내 경험 기반의 방법론, 팁, 노하우 정리",
        placeholder_keyword="미리캔버스 콘텐츠 등록 방법",
        placeholder_context=(
            "40개 올려봤는데 3개 반려당함. 반려 사유는 해상도 부족. "
            "600x600 이상으로 하니까 통과됨. SNS템플릿 카테고리가 경쟁 적은 편."
        ),
        image_recommendations=(
            "단계별 진행 스크린샷",
            "설정 화면 캡처",
            "예시 이미지",
        ),
    ),
    PostType.DAILY: PostTypeInfo(
        post_type=PostType.DAILY,
        name="일상/에세이",
        emoji="☕",
        description="일상 기록, 생각 정리, 감정 표현",
        placeholder_keyword="퇴근 후 부업 루틴",
        placeholder_context=(
            "요즘 퇴근하고 2시간씩 부업하는데 피곤하지만 뿌듯함. "
            "작은 성과라도 있으면 힘이 남."
        ),
        image_recommendations=(
            "직접 찍은 일상 사진",
            "오늘의 풍경/음식",
            "감성 소품 사진",
        ),
    ),
    PostType.EBOOK: PostTypeInfo(
        post_type=PostType.EBOOK,
        name="전자책",
        emoji="📖",
        description="유료 전자책용 챕터 작성 (워크북 포함)",
        placeholder_keyword="업무 인수분해 기술",
        placeholder_context=(
            "도매 플랫폼 총괄 맡았을 때 사수도 인수인계서도 없었음. "
            "Why-Output-Task 3단계로 쪼개서 한 달 만에 첫 주문 성공. "
            "개발팀은 명확한 Task 덕에 속도 냈고, 영업팀은 눈에 보이는 결과물에 신뢰하기 시작."
        ),
        image_recommendations=(
            "개념 설명 다이어그램",
            "단계별 프로세스 도식",
            "워크시트 이미지",
        ),
    ),
}

# Tips shown under the context field when writing an e-book chapter
EBOOK_CONTENT_RECOMMENDATIONS: tuple[str, ...] = (
    "실패 경험과 극복 과정이 있으면 신뢰도가 높아져요",
    "구체적인 숫자/기간을 넣으면 설득력이 올라가요",
    "독자가 바로 적용할 수 있는 액션 아이템을 포함하세요",
    "\"좋은 예 vs 나쁜 예\" 대비 구조가 이해를 도와요",
    "비유나 스토리텔링으로 개념을 풀어주세요",
)


def get_post_type_info(post_type: PostType | str) -> PostTypeInfo | None:
    """Look up catalog metadata; unknown values return None."""
    try:
        return POST_TYPES[PostType(post_type)]
    except ValueError:
        return None


def image_recommendations(post_type: PostType | str) -> list[str]:
    """Default image ideas for a post type ([] for unknown types)."""
    info = get_post_type_info(post_type)
    return list(info.image_recommendations) if info else []
