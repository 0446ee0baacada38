"""프로그램 매칭 점수 계산.

자가진단 결과(심각도, 분야)와 센터 프로그램을 비교합니다.
match_programs_by_assessment는 추천 이유 설명용 순위 목록을,
calculate_program_score는 종합 점수에 들어가는 등급 점수를 만듭니다.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from mindconnect_recommender.domain.center.models import GENERAL_CATEGORY, Program
from mindconnect_recommender.domain.recommendation.models import (
    AssessmentResult,
    UserProfile,
)

CATEGORY_MATCH_POINTS = 10
GENERAL_CATEGORY_POINTS = 3
SEVERITY_MATCH_POINTS = 5
UNRESTRICTED_SEVERITY_POINTS = 1


@dataclass(frozen=True)
class ProgramMatch:
    """자가진단 결과와 매칭된 프로그램."""

    program: Program
    match_score: int


def _validate_programs(programs: Sequence[Program]) -> None:
    if not isinstance(programs, (list, tuple)):
        raise TypeError("programs는 리스트여야 합니다")


def match_programs_by_assessment(
    programs: Sequence[Program],
    assessment_result: AssessmentResult,
) -> list[ProgramMatch]:
    """자가진단 결과에 맞는 프로그램을 매칭 점수 순으로 정렬합니다.

    분야 일치 +10 (일반 프로그램은 +3), 대상 심각도 포함 +5
    (심각도 제한 없음은 +1). 0점인 프로그램은 제외합니다.

    Args:
        programs: 센터 프로그램 목록
        assessment_result: 자가진단 결과

    Returns:
        매칭 점수 내림차순 프로그램 목록 (동점은 원래 순서 유지)

    Raises:
        TypeError: 입력 형식이 잘못된 경우
    """
    _validate_programs(programs)
    if not isinstance(assessment_result, AssessmentResult):
        raise TypeError("assessment_result에는 severity와 category가 필요합니다")

    matches: list[ProgramMatch] = []
    for program in programs:
        score = 0
        if program.category == assessment_result.category:
            score += CATEGORY_MATCH_POINTS
        elif program.category == GENERAL_CATEGORY:
            score += GENERAL_CATEGORY_POINTS

        if program.target_severity is None:
            score += UNRESTRICTED_SEVERITY_POINTS
        elif assessment_result.severity in program.target_severity:
            score += SEVERITY_MATCH_POINTS

        if score > 0:
            matches.append(ProgramMatch(program=program, match_score=score))

    matches.sort(key=lambda match: match.match_score, reverse=True)
    return matches


def _is_exact_match(program: Program, profile: UserProfile) -> bool:
    assessment = profile.assessment_result
    if program.category != assessment.category:
        return False
    if not program.target_severity or assessment.severity not in program.target_severity:
        return False
    if profile.age is not None and program.target_age is not None:
        return program.target_age.contains(profile.age)
    return True


def calculate_program_score(
    programs: Sequence[Program],
    user_profile: UserProfile | Mapping,
) -> int:
    """프로그램 매칭 점수를 계산합니다.

    완전 일치(분야, 심각도, 연령) 100, 분야 일치 70, 일반 프로그램 50,
    불일치 30점입니다. 자가진단 결과가 없으면 프로그램 유무에 따라
    50 또는 30점입니다.

    Args:
        programs: 센터 프로그램 목록
        user_profile: 사용자 프로필

    Returns:
        프로그램 점수

    Raises:
        TypeError: 입력 형식이 잘못된 경우
        ValidationError: 매핑 프로필에 알 수 없는 키나 잘못된 값이 있는 경우
    """
    _validate_programs(programs)
    if isinstance(user_profile, Mapping):
        user_profile = UserProfile.model_validate(user_profile)
    if not isinstance(user_profile, UserProfile):
        raise TypeError("user_profile은 UserProfile 객체여야 합니다")

    if user_profile.assessment_result is None:
        return 50 if programs else 30
    if not programs:
        return 30

    category = user_profile.assessment_result.category
    if any(_is_exact_match(program, user_profile) for program in programs):
        return 100
    if any(program.category == category for program in programs):
        return 70
    if any(program.category == GENERAL_CATEGORY for program in programs):
        return 50
    return 30
